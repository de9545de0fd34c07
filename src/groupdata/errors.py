"""Exceptions raised while turning sources into a GroupData catalog."""

from __future__ import annotations


class GroupDataError(Exception):
    """Base class for every error raised by this package."""


class SourceFetchError(GroupDataError):
    def __init__(self, source: str, reason: str):
        super().__init__(f"Unable to load {source}: {reason}")
        self.source = source
        self.reason = reason


class ExtractionError(GroupDataError):
    def __init__(self, source: str):
        super().__init__(f"No WebIDL found in {source}")
        self.source = source


class IdlParseError(GroupDataError):
    def __init__(self, source: str, reason: str):
        super().__init__(f"Unable to parse WebIDL from {source}: {reason}")
        self.source = source
        self.reason = reason


class OutputWriteError(GroupDataError):
    def __init__(self, path, reason: str):
        super().__init__(f"Unable to write {path}: {reason}")
        self.path = path
        self.reason = reason
