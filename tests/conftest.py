from __future__ import annotations

import pytest

from docsite.models import AnalysisResult
from docsite.render.context import RenderContext
from tests._fixtures.analysis_builder import build_sample_result


@pytest.fixture
def sample_result() -> AnalysisResult:
    """Analysis result with modules A, A.B, A.B.C and Other.Util."""
    return build_sample_result()


@pytest.fixture
def ctx(sample_result: AnalysisResult) -> RenderContext:
    return RenderContext(result=sample_result, root="/docs/")
