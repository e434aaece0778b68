"""Language analyzers and detection."""

from polylint.analysis.analyzer import Analyzer
from polylint.analysis.registry import (
    SUPPORTED_LANGUAGES,
    AnalyzerRegistry,
    build_analyzers,
    default_registry,
)
from polylint.languages.profile import ContentSignals

__all__ = [
    "SUPPORTED_LANGUAGES",
    "Analyzer",
    "AnalyzerRegistry",
    "ContentSignals",
    "build_analyzers",
    "default_registry",
]
