"""Country Identity - Country Resolution and Coverage Analysis

Public API for resolving country identifiers (names, ISO codes, aliases,
dataset-specific spellings) to one canonical name, and for measuring how
much of a dataset corpus resolves.

Usage:
    from countryidentity import country_name, suggest_countries, analyze_coverage

    # Get canonical country name
    name = country_name("USA")  # Returns: 'United States'

    # Use a data source's own spelling
    name = country_name("Korea, South", source_id="cia")  # Returns: 'South Korea'

    # Near matches for an unresolved token
    candidates = suggest_countries("Korea")  # [{'name': 'North Korea', ...}, ...]

    # Coverage of a batch of documents
    report = analyze_coverage({"gdp.json": {"data": [{"country": "France"}]}})
    print(report.render())

    # Explicit components (no cached state)
    catalog = ReferenceCatalog.load("path/to/country_mapping.json")
    resolver = CountryResolver(catalog)
"""

__version__ = "0.0.1"

# ============================================================================
# Reference Catalog
# ============================================================================

from .countries.countrycatalog import (
    CanonicalCountry,     # One catalog entry (iso2, iso3, name, aliases, data sources)
    ReferenceCatalog,     # Immutable tiered catalog
)
from .utils.dataloader import (
    LoadError,            # Catalog/document fetch or parse failure
    fetch_document,       # Path or URL -> parsed JSON document
)

# ============================================================================
# Country Resolution API
# ============================================================================

from .countries.countryresolver import CountryResolver
from .countries.countrysuggest import CountrySuggester

from .countries.countryapi import (
    load_catalog,         # Cached default catalog
    clear_cache,          # Reset cached default catalog
    country_name,         # Primary API - resolve any token to canonical name
    country_names,        # Batch resolution
    country_record,       # Full entry as dict
    country_iso2,         # Canonical name -> ISO2
    country_iso3,         # Canonical name -> ISO3
    country_aliases,      # Canonical name -> aliases
    country_source_name,  # Canonical name -> data source spelling
    suggest_countries,    # Near matches for unresolved tokens
    search_countries,     # Partial search across all tiers
    list_countries,       # DataFrame of catalog entries
)

# ============================================================================
# Coverage Analysis API
# ============================================================================

from .coverage import (
    CoverageAnalyzer,
    CoverageReport,
    DocumentShape,
    DocumentShapeError,
    extract_country_tokens,
    analyze_coverage,        # Analyze parsed documents
    analyze_coverage_files,  # Fetch and analyze files/URLs
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "country_name",       # Resolve any token -> canonical name
    "analyze_coverage",   # Coverage report for parsed documents

    # ========================================================================
    # Country Resolution
    # ========================================================================
    "load_catalog",
    "clear_cache",
    "country_names",
    "country_record",
    "country_iso2",
    "country_iso3",
    "country_aliases",
    "country_source_name",
    "suggest_countries",
    "search_countries",
    "list_countries",

    # ========================================================================
    # Components
    # ========================================================================
    "CanonicalCountry",
    "ReferenceCatalog",
    "CountryResolver",
    "CountrySuggester",
    "CoverageAnalyzer",
    "CoverageReport",
    "DocumentShape",

    # ========================================================================
    # Coverage / Loading
    # ========================================================================
    "analyze_coverage_files",
    "extract_country_tokens",
    "fetch_document",
    "LoadError",
    "DocumentShapeError",
]
