"""Shared test fixtures and utilities for countryidentity tests."""

import copy

import pytest

from countryidentity.countries.countrycatalog import ReferenceCatalog, load_catalog
from countryidentity.countries.countryresolver import CountryResolver
from countryidentity.countries.countrysuggest import CountrySuggester


# Small reference document with deliberate collisions:
#   - "SG" exists in the sovereign tier and in microstates
#   - "Principality of Monaco" is an alias in microstates and in territories
#   - China carries the alias "hkg", which collides with Hong Kong's iso3
#   - common alias "French Republic" points at an iso2 that does not exist
MINI_MAPPING = {
    "countries": {
        "FR": {
            "iso2": "FR", "iso3": "FRA", "name": "France",
            "aliases": ["French Republic"],
            "data_sources": {"world_bank": "France", "un": "France"},
        },
        "KR": {
            "iso2": "KR", "iso3": "KOR", "name": "South Korea",
            "aliases": ["Republic of Korea", "Korea, Rep."],
            "data_sources": {"cia": "Korea, South", "world_bank": "Korea, Rep."},
        },
        "KP": {
            "iso2": "KP", "iso3": "PRK", "name": "North Korea",
            "aliases": ["Democratic People's Republic of Korea"],
            "data_sources": {"cia": "Korea, North"},
        },
        "US": {
            "iso2": "US", "iso3": "USA", "name": "United States",
            "aliases": ["United States of America", "America"],
            "data_sources": {"un": "United States of America"},
        },
        "CN": {
            "iso2": "CN", "iso3": "CHN", "name": "China",
            "aliases": ["People's Republic of China", "hkg"],
            "data_sources": {},
        },
        "SG": {
            "iso2": "SG", "iso3": "SGP", "name": "Singapore",
            "aliases": [],
            "data_sources": {},
        },
    },
    "common_aliases": {
        "USA": "US",
        "ROK": "KR",
        "Monte Carlo": "MC",
        "Kowloon": "HK",
        "French Republic": "ZZ",
    },
    "special_cases": {
        "microstates": {
            "MC": {
                "iso2": "MC", "iso3": "MCO", "name": "Monaco",
                "aliases": ["Principality of Monaco"],
                "data_sources": {"cia": "Monaco"},
            },
            "SG": {
                "iso2": "SG", "iso3": "SGP", "name": "Singapore City-State",
                "aliases": ["Lion City"],
                "data_sources": {},
            },
        },
        "territories": {
            "HK": {
                "iso2": "HK", "iso3": "HKG", "name": "Hong Kong",
                "aliases": ["Hong Kong (CN)", "Hong Kong (China)"],
                "data_sources": {"world_bank": "Hong Kong SAR, China"},
            },
            "MO": {
                "iso2": "MO", "iso3": "MAC", "name": "Macau",
                "aliases": ["Macao", "Principality of Monaco"],
                "data_sources": {},
            },
        },
    },
}


@pytest.fixture
def mini_mapping():
    """A fresh deep copy of the small reference document."""
    return copy.deepcopy(MINI_MAPPING)


@pytest.fixture
def mini_catalog(mini_mapping):
    return ReferenceCatalog.from_dict(mini_mapping)


@pytest.fixture
def mini_resolver(mini_catalog):
    return CountryResolver(mini_catalog)


@pytest.fixture
def mini_suggester(mini_catalog):
    return CountrySuggester(mini_catalog)


@pytest.fixture(scope="session")
def catalog():
    """The packaged reference catalog."""
    return load_catalog()


@pytest.fixture(scope="session")
def resolver(catalog):
    return CountryResolver(catalog)


@pytest.fixture(scope="session")
def suggester(catalog):
    return CountrySuggester(catalog)


@pytest.fixture
def sample_countries():
    """Fixture providing sample country tokens for testing.

    Returns a dict of raw tokens and their canonical names.
    """
    return {
        "United States": "United States",
        "US": "United States",
        "USA": "United States",
        "UK": "United Kingdom",
        "UAE": "United Arab Emirates",
        "Hong Kong (China)": "Hong Kong",
        "Macao": "Macau",
        "Korea, Rep.": "South Korea",
        "Republic of Korea": "South Korea",
        "Congo": "Republic of the Congo",
        "DR Congo": "Democratic Republic of the Congo",
        "DRC": "Democratic Republic of the Congo",
        "Czechia": "Czech Republic",
        "Russian Federation": "Russia",
    }
