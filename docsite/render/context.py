"""Per-page render context and helpers for scoping it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, TypeVar

from ..config import DEFAULT_ROOT, DEFAULT_TITLE
from ..models import AnalysisResult, Name
from ..paths import declaration_url, module_url

T = TypeVar("T")

RenderFn = Callable[["RenderContext"], T]


@dataclass(frozen=True)
class RenderContext:
    """Read-only inputs for one page render.

    ``current_name`` identifies the module page being rendered and only
    affects which navigation entries are active or open.
    """

    result: AnalysisResult
    root: str = DEFAULT_ROOT
    current_name: Optional[Name] = None
    title: str = DEFAULT_TITLE

    def with_current_name(self, name: Name) -> "RenderContext":
        return replace(self, current_name=name)

    def module_link(self, module: Name) -> str:
        return module_url(self.root, module)

    def declaration_link(self, decl: Name) -> Optional[str]:
        """Anchor URL for ``decl``, or None when no module in the result owns it."""
        module = self.result.name_to_module.get(decl)
        if module is None:
            return None
        return declaration_url(self.root, module, decl)


def with_current_name(name: Name, render: RenderFn[T]) -> RenderFn[T]:
    """Wrap ``render`` so it runs under a context narrowed to ``name``."""

    def narrowed(ctx: RenderContext) -> T:
        return render(ctx.with_current_name(name))

    return narrowed


__all__ = ["RenderContext", "RenderFn", "with_current_name"]
