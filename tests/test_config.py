"""Tests for docsite.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsite.config import ConfigError, SiteConfig, load_config, normalize_root


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SiteConfig)
    assert config.base_dir == tmp_path.resolve()
    assert config.root == "/"
    assert config.title == "Documentation"
    assert config.output_dir == tmp_path.resolve() / "build" / "doc"
    assert config.workers == 1


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".docsite.yml"
    config_file.write_text(
        """
site:
  root: "/mathlib"
  title: "Mathlib docs"
output:
  dir: "public"
  workers: 4
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.root == "/mathlib/"
    assert config.title == "Mathlib docs"
    assert config.output_dir == tmp_path.resolve() / "public"
    assert config.workers == 4


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".docsite.yml").write_text("\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.root == "/"
    assert config.workers == 1


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".docsite.yml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_invalid_yaml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".docsite.yml").write_text("site: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


@pytest.mark.parametrize("workers", ["0", "-2", "many", "true"])
def test_invalid_worker_count_is_rejected(tmp_path: Path, workers: str) -> None:
    (tmp_path / ".docsite.yml").write_text(f"output:\n  workers: {workers}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="workers"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("/docs", "/docs/"), ("/docs/", "/docs/"), ("", ""), ("https://x.org/api", "https://x.org/api/")],
)
def test_normalize_root(raw: str, expected: str) -> None:
    assert normalize_root(raw) == expected
