"""Country entity resolution API.

Simple functions over a cached default catalog, for callers who do not
want to build a ReferenceCatalog / CountryResolver themselves.
Components that need a specific catalog should be constructed directly:

    catalog = load_catalog("path/to/country_mapping.json")
    resolver = CountryResolver(catalog)
"""

from functools import lru_cache
from typing import Iterable, List, Optional

import pandas as pd

from countryidentity.countries.countrycatalog import (
    CanonicalCountry,
    ReferenceCatalog,
    load_catalog as _load_catalog,
)
from countryidentity.countries.countryresolver import CountryResolver
from countryidentity.countries.countrysuggest import DEFAULT_SUGGESTIONS, CountrySuggester


@lru_cache(maxsize=1)
def load_catalog(source: Optional[str] = None) -> ReferenceCatalog:
    """Load the reference catalog once and reuse it.

    Args:
        source: Optional path or URL. If None, uses $COUNTRYIDENTITY_MAPPING_PATH
                or the packaged countries/data/country_mapping.json

    Raises:
        LoadError: If the catalog cannot be fetched or parsed
    """
    return _load_catalog(source)


@lru_cache(maxsize=1)
def _default_resolver() -> CountryResolver:
    return CountryResolver(load_catalog())


@lru_cache(maxsize=1)
def _default_suggester() -> CountrySuggester:
    return CountrySuggester(load_catalog())


def clear_cache():
    """Forget the cached default catalog (e.g. after changing the env var)."""
    load_catalog.cache_clear()
    _default_resolver.cache_clear()
    _default_suggester.cache_clear()


def country_name(name: str, source_id: Optional[str] = None) -> Optional[str]:
    """Get the canonical name for any country token.

    Args:
        name: Country name, ISO code, alias or dataset spelling
              (e.g., "USA", "US", "Hong Kong (CN)")
        source_id: Optional data source whose spellings are also accepted
                   ('owid', 'world_bank', 'un', 'cia')

    Returns:
        Canonical name (e.g., "United States") or None if not recognized

    Examples:
        >>> country_name("USA")
        'United States'

        >>> country_name("Czechia")
        'Czech Republic'

        >>> country_name("Ruritania") is None
        True
    """
    return _default_resolver().resolve(name, source_id)


def country_names(names: Iterable[str], source_id: Optional[str] = None) -> List[Optional[str]]:
    """Batch resolve tokens to canonical names.

    Examples:
        >>> country_names(["UK", "DRC", "Macao"])
        ['United Kingdom', 'Democratic Republic of the Congo', 'Macau']
    """
    return _default_resolver().resolve_many(names, source_id)


def country_record(name: str, source_id: Optional[str] = None) -> Optional[dict]:
    """Resolve a token and return the full entry as a dict."""
    country = _default_resolver().resolve_country(name, source_id)
    return country.to_dict() if country is not None else None


def country_iso2(name: str) -> Optional[str]:
    """ISO2 code for a canonical name (canonical names only, not aliases)."""
    return _default_resolver().resolve_iso2(name)


def country_iso3(name: str) -> Optional[str]:
    """ISO3 code for a canonical name (canonical names only, not aliases)."""
    return _default_resolver().resolve_iso3(name)


def country_aliases(name: str) -> List[str]:
    return _default_resolver().resolve_aliases(name)


def country_source_name(name: str, source_id: str) -> Optional[str]:
    """Spelling used by a data source for a canonical name.

    Examples:
        >>> country_source_name("South Korea", "world_bank")
        'Korea, Rep.'
    """
    return _default_resolver().resolve_source_name(name, source_id)


def suggest_countries(name: str, k: int = DEFAULT_SUGGESTIONS) -> List[dict]:
    """Up to k sovereign countries overlapping an unresolved token."""
    return [c.to_dict() for c in _default_suggester().suggest(name, limit=k)]


def search_countries(query: str) -> List[dict]:
    """Every entry (all tiers) whose name, alias or code contains the query."""
    return [c.to_dict() for c in _default_resolver().search(query)]


def list_countries(tier: Optional[str] = None) -> pd.DataFrame:
    """List catalog entries, optionally restricted to one tier.

    Args:
        tier: Optional tier filter: "sovereign", "microstates" or "territories"

    Returns:
        DataFrame with columns tier, key, iso2, iso3, name, aliases, data_sources

    Examples:
        >>> list_countries(tier="territories")[["iso2", "name"]].head()
    """
    df = load_catalog().to_frame()
    if tier is not None:
        df = df[df["tier"] == tier].reset_index(drop=True)
    return df


__all__ = [
    "CanonicalCountry",
    "load_catalog",
    "clear_cache",
    "country_name",
    "country_names",
    "country_record",
    "country_iso2",
    "country_iso3",
    "country_aliases",
    "country_source_name",
    "suggest_countries",
    "search_countries",
    "list_countries",
]
