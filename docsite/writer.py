"""Site generation: render every page and write it under the output directory."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import List, Sequence

from .config import DEFAULT_ROOT, DEFAULT_TITLE
from .logging import get_logger
from .models import AnalysisResult, ModuleInfo
from .paths import name_to_directory, name_to_url
from .render.context import RenderContext, RenderFn
from .render.document import Element, serialize_document
from .render.pages import index_page, module_page, not_found_page

STATIC_ASSETS: Sequence[str] = ("style.css", "nav.js")


@dataclass
class GenerationReport:
    """Files written by one generation run, relative to ``output_dir``."""

    output_dir: Path
    pages: List[Path] = field(default_factory=list)
    assets: List[Path] = field(default_factory=list)


class SiteWriter:
    """Renders the index, 404 and module pages and persists them with the static assets."""

    def __init__(
        self,
        *,
        root: str = DEFAULT_ROOT,
        title: str = DEFAULT_TITLE,
        workers: int = 1,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.root = root
        self.title = title
        self.workers = workers
        self.logger = get_logger("writer")

    def generate(self, result: AnalysisResult, output_dir: Path) -> GenerationReport:
        """Write the whole site; any filesystem or input error aborts the run."""
        output_dir = Path(output_dir)
        ctx = RenderContext(result=result, root=self.root, title=self.title)
        self.logger.info("Generating site for %d modules into %s", len(result.modules), output_dir)

        # Resolve every module first so a dangling hierarchy entry fails before any writes.
        modules = [result.module(name) for name in result.hierarchy.file_names()]

        output_dir.mkdir(parents=True, exist_ok=True)
        report = GenerationReport(output_dir=output_dir)

        report.pages.append(self._write_page(ctx, index_page, output_dir, "index.html"))
        report.pages.append(self._write_page(ctx, not_found_page, output_dir, "404.html"))
        for asset in STATIC_ASSETS:
            report.assets.append(self._copy_asset(asset, output_dir))

        if self.workers == 1:
            written = [self._write_module(ctx, module, output_dir) for module in modules]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                futures = [
                    pool.submit(self._write_module, ctx, module, output_dir) for module in modules
                ]
                written = [future.result() for future in futures]
        report.pages.extend(written)

        self.logger.info("Wrote %d pages and %d assets", len(report.pages), len(report.assets))
        return report

    def _write_module(self, ctx: RenderContext, module: ModuleInfo, output_dir: Path) -> Path:
        name_to_directory(output_dir, module.name).mkdir(parents=True, exist_ok=True)
        return self._write_page(ctx, module_page(module), output_dir, name_to_url(module.name))

    def _write_page(
        self, ctx: RenderContext, render: RenderFn[Element], output_dir: Path, relative: str
    ) -> Path:
        target = output_dir / relative
        target.write_text(serialize_document(render(ctx)), encoding="utf-8")
        self.logger.debug("Wrote %s", target)
        return Path(relative)

    def _copy_asset(self, asset: str, output_dir: Path) -> Path:
        source = resources.files("docsite") / "static" / asset
        (output_dir / asset).write_bytes(source.read_bytes())
        self.logger.debug("Copied %s", asset)
        return Path(asset)


__all__ = ["GenerationReport", "STATIC_ASSETS", "SiteWriter"]
