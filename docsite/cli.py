"""CLI entrypoint for docsite."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config, normalize_root
from .loader import load_analysis
from .logging import configure_logging
from .models import AnalysisError
from .writer import SiteWriter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsite",
        description="Render a static HTML documentation site from an analysis index.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Generate the site for an analysis index.")
    build_parser.add_argument("index", help="Path to the JSON analysis index.")
    build_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory (defaults to output.dir from .docsite.yml, else build/doc).",
    )
    build_parser.add_argument(
        "--root",
        default=None,
        help="URL prefix prepended to every generated link (defaults to site.root or '/').",
    )
    build_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of threads used to write module pages.",
    )
    build_parser.add_argument(
        "--config",
        default=".",
        help="Path to .docsite.yml or the directory containing it.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docsite commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    if args.command != "build":  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        config = load_config(Path(args.config))
        writer = SiteWriter(
            root=normalize_root(args.root) if args.root is not None else config.root,
            title=config.title,
            workers=args.workers if args.workers is not None else config.workers,
        )
        output_dir = Path(args.output) if args.output else config.output_dir
        result = load_analysis(Path(args.index))
        report = writer.generate(result, output_dir)
    except (AnalysisError, ConfigError) as exc:
        parser.exit(1, f"docsite build failed: {exc}\n")
    except ValueError as exc:
        parser.exit(2, f"docsite build: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"docsite build failed: {exc}\nRun with --verbose for more details.\n")

    print(f"Wrote {len(report.pages)} pages to {_relativize(report.output_dir)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
