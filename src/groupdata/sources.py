"""Load WebIDL text from local files or from specification documents."""

from __future__ import annotations

import dataclasses
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

import requests
from bs4 import BeautifulSoup

from .errors import ExtractionError, SourceFetchError

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://.+", re.IGNORECASE)
HTML_SUFFIXES = {".html", ".htm", ".xhtml"}

IDL_SELECTORS = ("pre.idl", "xmp.idl", "code.idl")
SKIP_CLASSES = {"extract", "example", "exclude"}
HEADER_SELECTORS = ("span.idlHeader", "div.idlHeader")


@dataclasses.dataclass
class FetchOptions:
    """Settings for loading sources."""

    timeout: float = 30.0
    user_agent: str = "groupdata"
    max_workers: int = 8


@dataclasses.dataclass
class SourceText:
    source: str
    text: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_url(source: str) -> bool:
    return bool(URL_PATTERN.match(source))


def extract_idl(html: str, *, source: str = "<html>") -> str:
    """Return the WebIDL blocks embedded in a specification, joined in document order."""

    soup = BeautifulSoup(html, "lxml")
    blocks: List[str] = []
    for element in soup.select(", ".join(IDL_SELECTORS)):
        classes = set(element.get("class") or [])
        if classes & SKIP_CLASSES:
            continue
        if any(set(parent.get("class") or []) & SKIP_CLASSES for parent in element.parents if parent.name):
            continue
        for header in element.select(", ".join(HEADER_SELECTORS)):
            header.decompose()
        text = element.get_text()
        if text.strip():
            blocks.append(text.strip("\n"))
    if not blocks:
        raise ExtractionError(source)
    logger.debug("Extracted %s IDL blocks from %s", len(blocks), source)
    return "\n\n".join(blocks) + "\n"


def load_local(path: str) -> str:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceFetchError(path, str(exc)) from exc
    if file_path.suffix.lower() in HTML_SUFFIXES:
        return extract_idl(text, source=path)
    return text


def load_remote(url: str, *, options: Optional[FetchOptions] = None) -> str:
    options = options or FetchOptions()
    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, timeout=options.timeout, headers={"User-Agent": options.user_agent})
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceFetchError(url, str(exc)) from exc
    return extract_idl(response.text, source=url)


def load_source(source: str, *, options: Optional[FetchOptions] = None) -> str:
    if is_url(source):
        return load_remote(source, options=options)
    return load_local(source)


def _load_safely(source: str, options: FetchOptions) -> SourceText:
    try:
        return SourceText(source=source, text=load_source(source, options=options))
    except (SourceFetchError, ExtractionError) as exc:
        logger.error("%s", exc)
        return SourceText(source=source, error=str(exc))


def fetch_all(sources: Sequence[str], *, options: Optional[FetchOptions] = None) -> List[SourceText]:
    """Load every source concurrently; failed sources come back empty with `error` set.

    Results keep the order of `sources`.
    """

    options = options or FetchOptions()
    if not sources:
        return []
    workers = max(1, min(options.max_workers, len(sources)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda source: _load_safely(source, options), sources))
