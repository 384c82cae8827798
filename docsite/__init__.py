"""Static HTML documentation sites from a pre-computed module index."""

from .hierarchy import Hierarchy
from .loader import load_analysis
from .models import (
    AnalysisError,
    AnalysisResult,
    DeclarationInfo,
    FieldInfo,
    ModuleInfo,
    TypeFragment,
    format_name,
    parse_name,
)
from .paths import name_to_directory, name_to_url
from .writer import GenerationReport, SiteWriter

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "DeclarationInfo",
    "FieldInfo",
    "GenerationReport",
    "Hierarchy",
    "ModuleInfo",
    "SiteWriter",
    "TypeFragment",
    "format_name",
    "load_analysis",
    "name_to_directory",
    "name_to_url",
    "parse_name",
]
