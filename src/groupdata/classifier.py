"""Route parsed WebIDL declarations into the catalog buckets."""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, List, Optional

from .bucket import Bucket
from .schema import (
    BUCKET_KINDS,
    EOF_KIND,
    UNSUPPORTED_KINDS,
    CallbackPolicy,
    DeclarationNode,
    Diagnostic,
    DiagnosticCategory,
)

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ApiDescription:
    """The buckets collected for one API, plus what was skipped on the way."""

    types: Bucket = dataclasses.field(default_factory=Bucket)
    interfaces: Bucket = dataclasses.field(default_factory=Bucket)
    dictionaries: Bucket = dataclasses.field(default_factory=Bucket)
    callbacks: Bucket = dataclasses.field(default_factory=Bucket)
    diagnostics: List[Diagnostic] = dataclasses.field(default_factory=list)

    def bucket(self, name: str) -> Bucket:
        return getattr(self, name)

    def sorted(self) -> "ApiDescription":
        return dataclasses.replace(
            self,
            types=self.types.sorted(),
            interfaces=self.interfaces.sorted(),
            dictionaries=self.dictionaries.sorted(),
            callbacks=self.callbacks.sorted(),
            diagnostics=list(self.diagnostics),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "interfaces": self.interfaces.names(),
            "dictionaries": self.dictionaries.names(),
            "types": self.types.names(),
            "callbacks": self.callbacks.names(),
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
        }


class DeclarationClassifier:
    """Accumulates declarations from any number of sources into one `ApiDescription`.

    Each call to `add` is a single linear pass over top-level nodes. Members of
    interfaces or dictionaries are never looked at. Nothing here raises on odd
    input: unsupported and unknown kinds become diagnostics.
    """

    def __init__(self, policy: CallbackPolicy = CallbackPolicy.SEPARATE):
        self.policy = CallbackPolicy(policy)
        self.description = ApiDescription()

    def add(self, nodes: Iterable[DeclarationNode], *, source: Optional[str] = None) -> ApiDescription:
        for node in nodes:
            self._route(node, source)
        return self.description

    def _route(self, node: DeclarationNode, source: Optional[str]) -> None:
        kind = getattr(node, "kind", None)
        if not isinstance(kind, str):
            self._report(DiagnosticCategory.UNRECOGNIZED, repr(kind), getattr(node, "name", None), source)
            return

        if kind == EOF_KIND:
            return
        if kind in UNSUPPORTED_KINDS:
            self._report(DiagnosticCategory.UNSUPPORTED, kind, node.name, source)
            return
        if kind == "callback":
            target = self._callback_bucket()
            if target is None:
                return
        else:
            target = BUCKET_KINDS.get(kind)
            if target is None:
                self._report(DiagnosticCategory.UNRECOGNIZED, kind, node.name, source)
                return

        if not node.name:
            logger.warning("Skipping nameless %s declaration%s", kind, f" in {source}" if source else "")
            return
        self.description.bucket(target).insert_unique(node)

    def _callback_bucket(self) -> Optional[str]:
        if self.policy is CallbackPolicy.MERGE_INTO_TYPES:
            return "types"
        if self.policy is CallbackPolicy.SEPARATE:
            return "callbacks"
        return None

    def _report(self, category: DiagnosticCategory, kind: str, name: Optional[str], source: Optional[str]) -> None:
        diagnostic = Diagnostic(category=category, kind=kind, name=name, source=source)
        self.description.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic.message)


def classify(
    nodes: Iterable[DeclarationNode],
    policy: CallbackPolicy = CallbackPolicy.SEPARATE,
) -> ApiDescription:
    classifier = DeclarationClassifier(policy)
    return classifier.add(nodes)
