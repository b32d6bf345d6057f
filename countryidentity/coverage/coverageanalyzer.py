"""
Coverage Analysis
-----------------

Scans a batch of dataset documents, resolves every country token against
the reference catalog and reports what does not resolve.

Pipeline (map-then-reduce):
  1) per document: classify shape, extract distinct tokens, resolve each
     token -> DocumentCoverage
  2) merge the per-document tallies in input order -> CoverageReport
  3) suggestions for every unresolved token

Frequencies count documents per raw spelling; "South Korea" and
"Korea, Rep." are separate entries even though both resolve to one country.
Because the merge runs in input order, the report does not depend on the
order in which fetches complete.

Examples:
  >>> analyzer = CoverageAnalyzer.from_catalog(load_catalog())
  >>> report = analyzer.analyze({
  ...     "a.json": {"data": [{"country": "France", "value": 1}]},
  ...     "b.json": {"France": 10, "title": "x"},
  ... })
  >>> report.frequency["France"]
  2
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import pandas as pd

from countryidentity.countries.countrycatalog import CanonicalCountry, ReferenceCatalog
from countryidentity.countries.countryresolver import CountryResolver
from countryidentity.countries.countrysuggest import DEFAULT_SUGGESTIONS, CountrySuggester
from countryidentity.coverage.coverageextract import (
    DocumentShape,
    classify_document,
    extract_tokens_for_shape,
)
from countryidentity.utils.dataloader import LoadError, fetch_document

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 20
DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True)
class DocumentCoverage:
    """Tally for a single document."""

    name: str
    shape: DocumentShape
    tokens: List[str]
    unresolved: List[str]

    @property
    def resolved_count(self) -> int:
        return len(self.tokens) - len(self.unresolved)


@dataclass(frozen=True)
class FrequencyEntry:
    token: str
    count: int
    resolved: bool


@dataclass
class CoverageReport:
    """Aggregate result of a coverage scan."""

    frequency: Dict[str, int]
    unresolved: List[str]
    top: List[FrequencyEntry]
    suggestions: Dict[str, List[CanonicalCountry]]
    documents: Dict[str, DocumentCoverage] = field(default_factory=dict)
    failed_documents: Dict[str, str] = field(default_factory=dict)

    @property
    def total_tokens(self) -> int:
        """Distinct raw tokens seen across all analyzed documents."""
        return len(self.frequency)

    @property
    def unresolved_count(self) -> int:
        return len(self.unresolved)

    @property
    def resolved_count(self) -> int:
        return self.total_tokens - self.unresolved_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_tokens": self.total_tokens,
            "resolved_count": self.resolved_count,
            "unresolved_count": self.unresolved_count,
            "unresolved": list(self.unresolved),
            "top": [
                {"token": e.token, "count": e.count, "resolved": e.resolved}
                for e in self.top
            ],
            "suggestions": {
                token: [{"name": c.name, "iso2": c.iso2} for c in candidates]
                for token, candidates in self.suggestions.items()
            },
            "documents": {
                name: {
                    "shape": doc.shape.value,
                    "tokens": len(doc.tokens),
                    "unresolved": list(doc.unresolved),
                }
                for name, doc in self.documents.items()
            },
            "failed_documents": dict(self.failed_documents),
        }

    def to_frame(self) -> pd.DataFrame:
        """Full frequency table, most frequent first.

        Columns: token, count, resolved
        """
        unresolved = set(self.unresolved)
        rows = [
            {"token": token, "count": count, "resolved": token not in unresolved}
            for token, count in _rank(self.frequency)
        ]
        return pd.DataFrame(rows, columns=["token", "count", "resolved"])

    def render(self) -> str:
        """Human-readable text report."""
        lines = ["=== COUNTRY MAPPING ANALYSIS REPORT ===", ""]
        lines.append(f"Total unique countries found: {self.total_tokens}")
        lines.append(f"Unmapped countries: {self.unresolved_count}")
        lines.append(f"Mapped countries: {self.resolved_count}")
        if self.failed_documents:
            lines.append(f"Documents skipped: {len(self.failed_documents)}")

        if self.unresolved:
            lines.append("")
            lines.append("UNMAPPED COUNTRIES:")
            for token in self.unresolved:
                lines.append(f'  - "{token}" (appears in {self.frequency.get(token, 0)} files)')

        lines.append("")
        lines.append("MOST FREQUENT COUNTRIES:")
        for entry in self.top:
            status = "✅" if entry.resolved else "❌"
            lines.append(f'  {status} "{entry.token}": {entry.count} files')

        lines.append("")
        if not self.unresolved:
            lines.append("All countries are properly mapped!")
        else:
            lines.append("MAPPING SUGGESTIONS:")
            for token in self.unresolved:
                candidates = self.suggestions.get(token) or []
                if not candidates:
                    continue
                lines.append(f'"{token}" might map to:')
                for c in candidates:
                    lines.append(f"  - {c.name} ({c.iso2})")

        if self.failed_documents:
            lines.append("")
            lines.append("SKIPPED DOCUMENTS:")
            for name, error in self.failed_documents.items():
                lines.append(f"  - {name}: {error}")

        return "\n".join(lines)


def _rank(frequency: Mapping[str, int]) -> List[tuple]:
    # sorted() is stable, so equal counts keep first-seen order
    return sorted(frequency.items(), key=lambda kv: -kv[1])


class CoverageAnalyzer:
    """Batch coverage analysis over heterogeneous dataset documents.

    Args:
        resolver: Resolver used to decide whether a token is mapped
        suggester: Suggestion engine for unresolved tokens
        top_n: Size of the most-frequent table
        max_suggestions: Suggestions per unresolved token
    """

    def __init__(
        self,
        resolver: CountryResolver,
        suggester: CountrySuggester,
        top_n: int = DEFAULT_TOP_N,
        max_suggestions: int = DEFAULT_SUGGESTIONS,
    ):
        self.resolver = resolver
        self.suggester = suggester
        self.top_n = top_n
        self.max_suggestions = max_suggestions

    @classmethod
    def from_catalog(cls, catalog: ReferenceCatalog, **kwargs) -> "CoverageAnalyzer":
        return cls(CountryResolver(catalog), CountrySuggester(catalog), **kwargs)

    # ---- Map ----

    def analyze_document(self, name: str, doc: Any, source_id: Optional[str] = None) -> DocumentCoverage:
        """Tally one parsed document.

        Raises:
            DocumentShapeError: If the document is not a JSON object
        """
        shape = classify_document(doc)
        tokens = sorted(extract_tokens_for_shape(doc, shape))
        unresolved = [t for t in tokens if self.resolver.resolve(t, source_id) is None]
        for token in unresolved:
            logger.debug(f'Unmapped: "{token}" in {name}')
        return DocumentCoverage(name=name, shape=shape, tokens=tokens, unresolved=unresolved)

    # ---- Reduce ----

    def _merge(
        self,
        tallies: List[DocumentCoverage],
        failed: Dict[str, str],
    ) -> CoverageReport:
        frequency: Counter = Counter()
        unresolved_set = set()
        for tally in tallies:
            frequency.update(tally.tokens)
            unresolved_set.update(tally.unresolved)

        unresolved = sorted(unresolved_set)
        top = [
            FrequencyEntry(token=token, count=count, resolved=token not in unresolved_set)
            for token, count in _rank(frequency)[: self.top_n]
        ]
        suggestions = {
            token: self.suggester.suggest(token, limit=self.max_suggestions)
            for token in unresolved
        }

        report = CoverageReport(
            frequency=dict(frequency),
            unresolved=unresolved,
            top=top,
            suggestions=suggestions,
            documents={t.name: t for t in tallies},
            failed_documents=failed,
        )
        logger.info(
            f"Analyzed {len(tallies)} documents ({len(failed)} skipped): "
            f"{report.total_tokens} distinct tokens, {report.unresolved_count} unmapped"
        )
        return report

    # ---- Entry points ----

    def analyze(self, documents: Mapping[str, Any], source_id: Optional[str] = None) -> CoverageReport:
        """Analyze already parsed documents keyed by name.

        A document that cannot be scanned is logged, listed in
        report.failed_documents and left out of every count.
        """
        tallies = []
        failed = {}
        for name, doc in documents.items():
            try:
                tallies.append(self.analyze_document(name, doc, source_id))
            except LoadError as e:
                logger.warning(f"Failed to analyze {name}: {e}")
                failed[name] = str(e)
        return self._merge(tallies, failed)

    def analyze_sources(
        self,
        sources: Mapping[str, Union[str, Path]],
        fetch: Callable[[Union[str, Path]], Any] = fetch_document,
        max_workers: int = DEFAULT_MAX_WORKERS,
        source_id: Optional[str] = None,
    ) -> CoverageReport:
        """Fetch and analyze documents concurrently.

        Args:
            sources: Document name -> path or URL
            fetch: Callable turning a location into a parsed document; any
                   exception it raises is reported as a LoadError for that
                   document
            max_workers: Thread pool size for fetching
            source_id: Optional data source id passed to the resolver

        Returns:
            CoverageReport; failed fetches appear in failed_documents
        """
        def work(name: str, location: Union[str, Path]) -> DocumentCoverage:
            try:
                doc = fetch(location)
            except LoadError:
                raise
            except Exception as e:
                raise LoadError(f"Failed to fetch {name}: {e}") from e
            return self.analyze_document(name, doc, source_id)

        names = list(sources)
        logger.info(f"Analyzing {len(names)} data files...")

        tallies: List[DocumentCoverage] = []
        failed: Dict[str, str] = {}
        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
            futures = [executor.submit(work, name, sources[name]) for name in names]
            # Input order, not completion order
            for name, future in zip(names, futures):
                try:
                    tallies.append(future.result())
                except LoadError as e:
                    logger.warning(f"Failed to analyze {name}: {e}")
                    failed[name] = str(e)

        return self._merge(tallies, failed)


__all__ = [
    "DEFAULT_TOP_N",
    "DEFAULT_MAX_WORKERS",
    "DocumentCoverage",
    "FrequencyEntry",
    "CoverageReport",
    "CoverageAnalyzer",
]
