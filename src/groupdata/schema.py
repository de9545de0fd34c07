"""Core data types shared by the classifier and the renderer."""

from __future__ import annotations

import dataclasses
import enum
from typing import Dict, Optional

DEFAULT_API_NAME = "API NAME HERE"

EOF_KIND = "eof"
BUCKET_KINDS = {
    "interface": "interfaces",
    "dictionary": "dictionaries",
    "typedef": "types",
    "enum": "types",
}
UNSUPPORTED_KINDS = {
    "exception": "exception",
    "serializer": "serializer",
    "iterator": "iterator",
    "interface-mixin": "mixin",
}


class CallbackPolicy(str, enum.Enum):
    """How `callback` declarations are routed.

    The values are the strings accepted on the command line.
    """

    IGNORE = "ignore"
    MERGE_INTO_TYPES = "type"
    SEPARATE = "callback"


@dataclasses.dataclass(frozen=True)
class DeclarationNode:
    """A top-level WebIDL declaration: only its kind and name are kept."""

    kind: str
    name: Optional[str] = None


class DiagnosticCategory(str, enum.Enum):
    UNSUPPORTED = "unsupported"
    UNRECOGNIZED = "unrecognized"


@dataclasses.dataclass
class Diagnostic:
    """A declaration that was seen but not catalogued."""

    category: DiagnosticCategory
    kind: str
    name: Optional[str] = None
    source: Optional[str] = None

    @property
    def message(self) -> str:
        if self.category is DiagnosticCategory.UNSUPPORTED:
            label = UNSUPPORTED_KINDS.get(self.kind, self.kind)
            text = f"Ignoring {label}: {self.name}"
        else:
            text = f"Unknown item type: {self.kind}"
        if self.source:
            text += f" ({self.source})"
        return text

    def to_dict(self) -> Dict[str, Optional[str]]:
        data: Dict[str, Optional[str]] = {
            "category": self.category.value,
            "kind": self.kind,
            "name": self.name,
            "source": self.source,
            "message": self.message,
        }
        return {k: v for k, v in data.items() if v is not None}
