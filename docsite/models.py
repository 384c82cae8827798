"""Core data models for the analysis result consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .hierarchy import Hierarchy

Name = Tuple[str, ...]


class AnalysisError(RuntimeError):
    """Raised when the analysis result references something it does not contain."""


def parse_name(dotted: str) -> Name:
    """Split ``"A.B.C"`` into ``("A", "B", "C")``."""
    segments = tuple(dotted.split("."))
    if not dotted or any(not segment for segment in segments):
        raise AnalysisError(f"Invalid qualified name: {dotted!r}")
    return segments


def format_name(name: Name) -> str:
    return ".".join(name)


def is_prefix(prefix: Name, name: Name) -> bool:
    """Return True when ``prefix`` is a leading run of ``name`` (inclusive)."""
    return len(prefix) <= len(name) and name[: len(prefix)] == prefix


@dataclass(frozen=True)
class TypeFragment:
    """One piece of a pre-rendered type; ``ref`` names the declaration it mentions."""

    text: str
    ref: Optional[Name] = None


@dataclass(frozen=True)
class FieldInfo:
    """A structure field and its type."""

    name: Name
    type: Tuple[TypeFragment, ...] = ()


@dataclass(frozen=True)
class DeclarationInfo:
    """A documented declaration. ``fields`` and ``constructors`` keep source order."""

    kind: str
    name: Name
    type: Tuple[TypeFragment, ...] = ()
    doc: Optional[str] = None
    fields: Tuple[FieldInfo, ...] = ()
    constructors: Tuple[FieldInfo, ...] = ()


@dataclass(frozen=True)
class ModuleInfo:
    """A module and its declarations in declaration order."""

    name: Name
    members: Tuple[DeclarationInfo, ...] = ()
    doc: Optional[str] = None


@dataclass
class AnalysisResult:
    """Trusted symbol table: modules keyed by name plus the hierarchy over them."""

    modules: Mapping[Name, ModuleInfo]
    hierarchy: "Hierarchy"
    name_to_module: Dict[Name, Name] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name_to_module:
            self.name_to_module = _index_declarations(self.modules.values())

    @classmethod
    def from_modules(cls, modules: Iterable[ModuleInfo]) -> "AnalysisResult":
        """Build a result and its hierarchy from a collection of modules."""
        from .hierarchy import Hierarchy

        by_name: Dict[Name, ModuleInfo] = {}
        for module in modules:
            if module.name in by_name:
                raise AnalysisError(f"Duplicate module name: {format_name(module.name)}")
            by_name[module.name] = module
        return cls(modules=by_name, hierarchy=Hierarchy.from_names(by_name))

    def module(self, name: Name) -> ModuleInfo:
        try:
            return self.modules[name]
        except KeyError:
            raise AnalysisError(
                f"Module {format_name(name)} is referenced but missing from the analysis result"
            ) from None


def _index_declarations(modules: Iterable[ModuleInfo]) -> Dict[Name, Name]:
    index: Dict[Name, Name] = {}
    for module in modules:
        for decl in module.members:
            index[decl.name] = module.name
            for sub in (*decl.fields, *decl.constructors):
                index[sub.name] = module.name
    return index


__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "DeclarationInfo",
    "FieldInfo",
    "ModuleInfo",
    "Name",
    "TypeFragment",
    "format_name",
    "is_prefix",
    "parse_name",
]
