"""High-level pipeline: load sources, classify their declarations, render GroupData."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .classifier import ApiDescription, DeclarationClassifier
from .errors import IdlParseError, OutputWriteError
from .idl import parse_idl
from .render import GroupDataRenderer, RenderOptions
from .schema import DEFAULT_API_NAME, CallbackPolicy
from .sources import FetchOptions, SourceText, fetch_all

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class CatalogOptions:
    """Per-run settings; a fresh instance is used for every run."""

    api_name: str = DEFAULT_API_NAME
    callback_policy: CallbackPolicy = CallbackPolicy.SEPARATE
    output_file: Optional[Path] = None


@dataclasses.dataclass
class CatalogResult:
    api_name: str
    callback_policy: CallbackPolicy
    description: ApiDescription
    text: str
    sources: List[SourceText] = dataclasses.field(default_factory=list)

    @property
    def failed_sources(self) -> List[SourceText]:
        return [source for source in self.sources if not source.ok]

    def to_dict(self) -> dict:
        payload = {
            "api_name": self.api_name,
            "callback_mode": self.callback_policy.value,
            "sources": [source.source for source in self.sources],
            "failed_sources": {source.source: source.error for source in self.failed_sources},
        }
        payload.update(self.description.sorted().to_dict())
        if self.callback_policy is not CallbackPolicy.SEPARATE:
            payload.pop("callbacks")
        return payload


class GroupDataGenerator:
    def __init__(
        self,
        *,
        options: Optional[CatalogOptions] = None,
        fetch_options: Optional[FetchOptions] = None,
        render_options: Optional[RenderOptions] = None,
    ):
        self.options = options or CatalogOptions()
        self.fetch_options = fetch_options or FetchOptions()
        self.render_options = render_options or RenderOptions()

    def generate(self, sources: Sequence[str]) -> CatalogResult:
        """Fetch all sources concurrently, then classify and render them in input order."""

        loaded = fetch_all(sources, options=self.fetch_options)
        return self.generate_from_texts(loaded)

    def generate_from_texts(self, texts: Iterable[SourceText]) -> CatalogResult:
        texts = list(texts)
        policy = CallbackPolicy(self.options.callback_policy)
        classifier = DeclarationClassifier(policy)
        for index, item in enumerate(texts, start=1):
            if not item.ok:
                continue
            logger.info("[%s/%s] Classifying %s", index, len(texts), item.source)
            try:
                nodes = parse_idl(item.text, source=item.source)
            except IdlParseError as exc:
                logger.error("%s", exc)
                item.error = str(exc)
                continue
            except Exception as exc:  # pragma: no cover - runtime guard
                logger.exception("Failed to process %s: %s", item.source, exc)
                item.error = str(exc)
                continue
            classifier.add(nodes, source=item.source)

        description = classifier.description
        text = GroupDataRenderer(self.render_options).render(self.options.api_name, description, policy)
        return CatalogResult(
            api_name=self.options.api_name,
            callback_policy=policy,
            description=description,
            text=text,
            sources=texts,
        )


def write_output(text: str, path: Path) -> Path:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
    logger.info("Wrote GroupData to %s", path)
    return path
