"""Adapter between widlparser constructs and `DeclarationNode`."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from widlparser.parser import Parser

from .errors import IdlParseError
from .schema import DeclarationNode

logger = logging.getLogger(__name__)

SYNTAX_ERROR_KIND = "syntax-error"

# widlparser reports interface mixins with the same idl_type as interfaces.
_KIND_BY_CONSTRUCT = {
    "Mixin": "interface-mixin",
}
# Legacy declarations widlparser has no grammar for; they come back as syntax errors.
_LEGACY_DECLARATION = re.compile(
    r"^(?:\s|//[^\n]*|/\*.*?\*/)*(exception|serializer|iterator)\s+([A-Za-z_][\w-]*)", re.DOTALL
)


class _LoggingUI:
    """widlparser user interface that forwards parser messages to logging."""

    def __init__(self, source: Optional[str] = None):
        self.source = source or "<idl>"

    def warn(self, message: str) -> None:
        logger.warning("%s: %s", self.source, message.rstrip())

    def note(self, message: str) -> None:
        logger.debug("%s: %s", self.source, message.rstrip())


def construct_kind(construct) -> str:
    kind = _KIND_BY_CONSTRUCT.get(type(construct).__name__)
    if kind:
        return kind
    idl_type = str(getattr(construct, "idl_type", "unknown"))
    return SYNTAX_ERROR_KIND if idl_type == "unknown" else idl_type


def to_declaration(construct) -> DeclarationNode:
    kind = construct_kind(construct)
    if kind == SYNTAX_ERROR_KIND:
        match = _LEGACY_DECLARATION.match(str(construct))
        if match:
            return DeclarationNode(kind=match.group(1), name=match.group(2))
        return DeclarationNode(kind=kind)
    name = getattr(construct, "name", None)
    return DeclarationNode(kind=kind, name=str(name) if name else None)


def parse_idl(text: str, *, source: Optional[str] = None) -> List[DeclarationNode]:
    """Parse WebIDL text and return its top-level declarations in source order."""

    if not text or not text.strip():
        return []
    try:
        parser = Parser(text, ui=_LoggingUI(source))
        constructs = list(parser.constructs)
    except Exception as exc:
        raise IdlParseError(source or "<idl>", str(exc)) from exc

    nodes = [to_declaration(construct) for construct in constructs]
    logger.debug("Parsed %s declarations from %s", len(nodes), source or "<idl>")
    return nodes
