"""Coverage analysis: how much of a dataset corpus resolves to known countries."""

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from countryidentity.countries.countryapi import load_catalog
from countryidentity.coverage.coverageextract import (
    RESERVED_KEYS,
    DocumentShape,
    DocumentShapeError,
    classify_document,
    extract_country_tokens,
)
from countryidentity.coverage.coverageanalyzer import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_TOP_N,
    CoverageAnalyzer,
    CoverageReport,
    DocumentCoverage,
    FrequencyEntry,
)


def _default_analyzer(top_n: int) -> CoverageAnalyzer:
    return CoverageAnalyzer.from_catalog(load_catalog(), top_n=top_n)


def analyze_coverage(
    documents: Mapping[str, Any],
    *,
    source_id: Optional[str] = None,
    top_n: int = DEFAULT_TOP_N,
) -> CoverageReport:
    """Analyze parsed documents (name -> document) against the default catalog."""
    return _default_analyzer(top_n).analyze(documents, source_id=source_id)


def analyze_coverage_files(
    paths: Iterable[Union[str, Path]],
    *,
    source_id: Optional[str] = None,
    top_n: int = DEFAULT_TOP_N,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> CoverageReport:
    """Fetch and analyze files or URLs; each document is named by its location."""
    sources = {str(p): p for p in paths}
    return _default_analyzer(top_n).analyze_sources(
        sources, max_workers=max_workers, source_id=source_id
    )


__all__ = [
    "RESERVED_KEYS",
    "DocumentShape",
    "DocumentShapeError",
    "classify_document",
    "extract_country_tokens",
    "CoverageAnalyzer",
    "CoverageReport",
    "DocumentCoverage",
    "FrequencyEntry",
    "analyze_coverage",
    "analyze_coverage_files",
]
