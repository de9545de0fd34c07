"""Ordered, name-unique collections of declarations."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from .schema import DeclarationNode


def sort_key(name: str) -> tuple:
    """Locale-style ordering: case-insensitive first, then lowercase before uppercase."""

    return (name.casefold(), name.swapcase())


class Bucket:
    """Declarations of related kinds, unique by name. The first occurrence wins."""

    def __init__(self, nodes: Optional[Iterable[DeclarationNode]] = None):
        self._nodes: List[DeclarationNode] = []
        self._index: Dict[str, DeclarationNode] = {}
        for node in nodes or ():
            self.insert_unique(node)

    def insert_unique(self, node: DeclarationNode) -> bool:
        if node.name in self._index:
            return False
        self._index[node.name] = node
        self._nodes.append(node)
        return True

    def names(self) -> List[str]:
        return [node.name for node in self._nodes]

    def sorted(self) -> "Bucket":
        return Bucket(sorted(self._nodes, key=lambda node: sort_key(node.name)))

    def get(self, name: str) -> Optional[DeclarationNode]:
        return self._index.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[DeclarationNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Bucket({self.names()!r})"
