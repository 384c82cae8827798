"""Configuration loading for docsite (.docsite.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".docsite.yml"
DEFAULT_ROOT = "/"
DEFAULT_TITLE = "Documentation"
DEFAULT_OUTPUT_DIR = Path("build") / "doc"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SiteConfig:
    """Settings from .docsite.yml, resolved against the directory holding it."""

    base_dir: Path
    root: str = DEFAULT_ROOT
    title: str = DEFAULT_TITLE
    output_dir: Optional[Path] = None
    workers: int = 1

    def __post_init__(self) -> None:
        if self.output_dir is None:
            self.output_dir = self.base_dir / DEFAULT_OUTPUT_DIR


def load_config(config_path: Path) -> SiteConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    base_dir = config_file.parent

    if not config_file.exists():
        return SiteConfig(base_dir=base_dir)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    site_data = _as_dict(data.get("site"))
    output_data = _as_dict(data.get("output"))

    root = normalize_root(_as_str(site_data.get("root")) or DEFAULT_ROOT)

    output_dir_str = _as_str(output_data.get("dir"))
    output_dir = base_dir / output_dir_str if output_dir_str else None

    workers = output_data.get("workers", 1)
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ConfigError("output.workers must be a positive integer")

    return SiteConfig(
        base_dir=base_dir,
        root=root,
        title=_as_str(site_data.get("title")) or DEFAULT_TITLE,
        output_dir=output_dir,
        workers=workers,
    )


def normalize_root(root: str) -> str:
    """Give a non-empty URL prefix its trailing ``/``; an empty prefix keeps links relative."""
    if root and not root.endswith("/"):
        return root + "/"
    return root


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = ["CONFIG_FILENAME", "ConfigError", "SiteConfig", "load_config", "normalize_root"]
