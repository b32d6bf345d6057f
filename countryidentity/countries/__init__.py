"""Country entity resolution and identification."""

from countryidentity.countries.countrycatalog import (
    SOVEREIGN,
    MICROSTATES,
    TERRITORIES,
    TIERS,
    CanonicalCountry,
    ReferenceCatalog,
)
from countryidentity.countries.countryresolver import CountryResolver
from countryidentity.countries.countrysuggest import CountrySuggester

# Clean API over the cached default catalog
from countryidentity.countries.countryapi import (
    load_catalog,
    clear_cache,
    country_name,
    country_names,
    country_record,
    country_iso2,
    country_iso3,
    country_aliases,
    country_source_name,
    suggest_countries,
    search_countries,
    list_countries,
)

__all__ = [
    "SOVEREIGN",
    "MICROSTATES",
    "TERRITORIES",
    "TIERS",
    "CanonicalCountry",
    "ReferenceCatalog",
    "CountryResolver",
    "CountrySuggester",
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
