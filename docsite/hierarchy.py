"""Namespace tree over module names, used to render nested navigation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator

from .models import Name


@dataclass
class Hierarchy:
    """One segment-level grouping of module names.

    ``name`` is the path from the root (the root itself is ``()``). A node is
    a file when a module carries exactly its name; it may still have children
    when deeper modules share the prefix.
    """

    name: Name = ()
    children: Dict[str, "Hierarchy"] = field(default_factory=dict)
    file: bool = False

    @classmethod
    def from_names(cls, names: Iterable[Name]) -> "Hierarchy":
        root = cls()
        for name in names:
            root.insert(name)
        return root

    def insert(self, name: Name) -> None:
        node = self
        for depth, segment in enumerate(name, start=1):
            child = node.children.get(segment)
            if child is None:
                child = Hierarchy(name=name[:depth])
                node.children[segment] = child
            node = child
        node.file = True

    def get_name(self) -> Name:
        return self.name

    def is_file(self) -> bool:
        return self.file

    def get_children(self) -> Dict[str, "Hierarchy"]:
        """Immediate children keyed by segment, sorted for reproducible output."""
        return {segment: self.children[segment] for segment in sorted(self.children)}

    def file_names(self) -> Iterator[Name]:
        """Yield every module name under this node, depth-first in sorted order."""
        if self.file:
            yield self.name
        for child in self.get_children().values():
            yield from child.file_names()


__all__ = ["Hierarchy"]
