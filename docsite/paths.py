"""Mapping from qualified names to site URLs and output paths."""

from __future__ import annotations

from pathlib import Path

from .models import Name, format_name


def name_to_url(name: Name) -> str:
    """``("A", "B", "C")`` -> ``"A/B/C.html"``. Segments are used as-is."""
    return "/".join(name) + ".html"


def name_to_directory(base: Path, name: Name) -> Path:
    """Directory that holds the page for ``name``: the parent of ``base / name_to_url(name)``."""
    return base.joinpath(*name[:-1])


def module_url(root: str, module: Name) -> str:
    return f"{root}{name_to_url(module)}"


def declaration_url(root: str, module: Name, decl: Name) -> str:
    return f"{module_url(root, module)}#{format_name(decl)}"


__all__ = ["declaration_url", "module_url", "name_to_directory", "name_to_url"]
