"""
Country Reference Catalog
-------------------------

Immutable, tiered reference data for country resolution:
  1) sovereign countries      ("countries" in the reference document)
  2) microstates              ("special_cases.microstates")
  3) territories              ("special_cases.territories")
plus a "common_aliases" shortcut table (raw alias -> iso2).

Tier order is match precedence everywhere: iterate() always yields the
sovereign tier first, then microstates, then territories, each in the
insertion order of the source document.

API:
  load_catalog(source=None) -> ReferenceCatalog
  ReferenceCatalog.from_dict(data) -> ReferenceCatalog
  ReferenceCatalog.iterate() -> Iterator[(key, CanonicalCountry)]

Examples:
  >>> catalog = load_catalog()
  >>> next(iter(catalog.iterate()))
  ('AF', CanonicalCountry(iso2='AF', iso3='AFG', name='Afghanistan', ...))
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import pandas as pd

from countryidentity.utils.dataloader import (
    LoadError,
    fetch_document,
    find_data_file,
    format_not_found_error,
)
from countryidentity.utils.normalize import unique_strings

logger = logging.getLogger(__name__)

SOVEREIGN = "sovereign"
MICROSTATES = "microstates"
TERRITORIES = "territories"

SPECIAL_CASE_CATEGORIES = (MICROSTATES, TERRITORIES)
TIERS = (SOVEREIGN,) + SPECIAL_CASE_CATEGORIES

MAPPING_ENV_VAR = "COUNTRYIDENTITY_MAPPING_PATH"
MAPPING_FILENAME = "country_mapping.json"


@dataclass(frozen=True)
class CanonicalCountry:
    """One catalog entry."""

    iso2: str
    iso3: str
    name: str
    aliases: Tuple[str, ...] = ()
    data_source_names: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iso2": self.iso2,
            "iso3": self.iso3,
            "name": self.name,
            "aliases": list(self.aliases),
            "data_sources": dict(self.data_source_names),
        }


def _parse_entry(key: str, raw: Any, where: str) -> CanonicalCountry:
    """Build a CanonicalCountry from one reference-document entry."""
    if not isinstance(raw, dict):
        raise LoadError(f"Malformed catalog entry {where}.{key}: expected an object")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise LoadError(f"Malformed catalog entry {where}.{key}: missing name")

    sources = raw.get("data_sources") or {}
    if not isinstance(sources, dict):
        raise LoadError(f"Malformed catalog entry {where}.{key}: data_sources must be an object")

    aliases = raw.get("aliases") or []
    if not isinstance(aliases, list):
        raise LoadError(f"Malformed catalog entry {where}.{key}: aliases must be a list")

    return CanonicalCountry(
        iso2=str(raw.get("iso2") or key),
        iso3=str(raw.get("iso3") or ""),
        name=name,
        aliases=unique_strings(aliases),
        data_source_names=MappingProxyType(
            {str(k): str(v) for k, v in sources.items() if v is not None}
        ),
    )


def _parse_tier(raw: Any, where: str) -> Mapping[str, CanonicalCountry]:
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, dict):
        raise LoadError(f"Malformed catalog section {where}: expected an object")
    return MappingProxyType({key: _parse_entry(key, entry, where) for key, entry in raw.items()})


class ReferenceCatalog:
    """Read-only, tiered country reference data.

    Build with load_catalog() or ReferenceCatalog.from_dict(); components
    receive the catalog at construction and never modify it.
    """

    def __init__(
        self,
        countries: Mapping[str, CanonicalCountry],
        special_cases: Optional[Mapping[str, Mapping[str, CanonicalCountry]]] = None,
        common_aliases: Optional[Mapping[str, str]] = None,
    ):
        special_cases = special_cases or {}
        self._tiers = MappingProxyType({
            SOVEREIGN: MappingProxyType(dict(countries)),
            **{
                category: MappingProxyType(dict(special_cases.get(category) or {}))
                for category in SPECIAL_CASE_CATEGORIES
            },
        })
        self._common_aliases = MappingProxyType(dict(common_aliases or {}))

    # ---- Construction ----

    @classmethod
    def from_dict(cls, data: Any) -> "ReferenceCatalog":
        """Build a catalog from a parsed reference document.

        Raises:
            LoadError: If the document does not follow the reference schema
        """
        if not isinstance(data, dict):
            raise LoadError("Malformed reference document: expected a JSON object")
        if not isinstance(data.get("countries"), dict):
            raise LoadError("Malformed reference document: missing 'countries' object")

        countries = _parse_tier(data["countries"], "countries")

        raw_special = data.get("special_cases")
        if raw_special is None:
            raw_special = {}
        if not isinstance(raw_special, dict):
            raise LoadError("Malformed reference document: 'special_cases' must be an object")
        for category in raw_special:
            if category not in SPECIAL_CASE_CATEGORIES:
                logger.warning(f"Ignoring unknown special_cases category '{category}'")
        special_cases = {
            category: _parse_tier(raw_special.get(category), f"special_cases.{category}")
            for category in SPECIAL_CASE_CATEGORIES
        }

        raw_aliases = data.get("common_aliases")
        if raw_aliases is None:
            raw_aliases = {}
        if not isinstance(raw_aliases, dict):
            raise LoadError("Malformed reference document: 'common_aliases' must be an object")
        common_aliases = {str(alias): str(iso2) for alias, iso2 in raw_aliases.items()}

        return cls(countries, special_cases, common_aliases)

    @classmethod
    def load(cls, source: Optional[Union[str, Path]] = None) -> "ReferenceCatalog":
        """Fetch and parse the reference document. See load_catalog()."""
        location = _locate_mapping(source)
        catalog = cls.from_dict(fetch_document(location))
        logger.info(f"Loaded {len(catalog)} countries from {location}")
        return catalog

    # ---- Access ----

    @property
    def countries(self) -> Mapping[str, CanonicalCountry]:
        """The sovereign tier."""
        return self._tiers[SOVEREIGN]

    @property
    def special_cases(self) -> Mapping[str, Mapping[str, CanonicalCountry]]:
        return MappingProxyType({c: self._tiers[c] for c in SPECIAL_CASE_CATEGORIES})

    @property
    def common_aliases(self) -> Mapping[str, str]:
        return self._common_aliases

    def tier(self, name: str) -> Mapping[str, CanonicalCountry]:
        """Return one tier by name ('sovereign', 'microstates' or 'territories')."""
        if name not in self._tiers:
            raise KeyError(f"Unknown tier '{name}'. Expected one of {', '.join(TIERS)}")
        return self._tiers[name]

    def entries(self) -> Iterator[Tuple[str, str, CanonicalCountry]]:
        """Yield (tier, key, country) in precedence order."""
        for tier_name in TIERS:
            for key, country in self._tiers[tier_name].items():
                yield tier_name, key, country

    def iterate(self) -> Iterator[Tuple[str, CanonicalCountry]]:
        """Yield (key, country) in precedence order.

        Each call returns a fresh generator, so iteration can be restarted.
        """
        return ((key, country) for _, key, country in self.entries())

    def lookup_iso2(self, iso2: str) -> Optional[CanonicalCountry]:
        """First entry stored under this iso2 key, searching tiers in precedence order."""
        for tier_name in TIERS:
            country = self._tiers[tier_name].get(iso2)
            if country is not None:
                return country
        return None

    def all_countries(self) -> List[CanonicalCountry]:
        return [country for _, country in self.iterate()]

    def __len__(self) -> int:
        return sum(len(t) for t in self._tiers.values())

    def __repr__(self) -> str:
        sizes = ", ".join(f"{t}={len(self._tiers[t])}" for t in TIERS)
        return f"ReferenceCatalog({sizes}, common_aliases={len(self._common_aliases)})"

    def to_frame(self) -> pd.DataFrame:
        """One row per entry in precedence order, with a 'tier' column.

        Columns: tier, key, iso2, iso3, name, aliases (list), data_sources (dict)
        """
        rows = [
            {"tier": tier_name, "key": key, **country.to_dict()}
            for tier_name, key, country in self.entries()
        ]
        columns = ["tier", "key", "iso2", "iso3", "name", "aliases", "data_sources"]
        return pd.DataFrame(rows, columns=columns)


def _locate_mapping(source: Optional[Union[str, Path]]) -> Union[str, Path]:
    """Pick the reference document location.

    Priority:
    1. Explicit source (path or URL)
    2. COUNTRYIDENTITY_MAPPING_PATH environment variable
    3. Packaged data (countries/data/country_mapping.json)
    4. Development tables (../tables/countries/)
    """
    if source is not None:
        return source

    env_path = os.environ.get(MAPPING_ENV_VAR)
    if env_path:
        logger.debug(f"Using {MAPPING_ENV_VAR}={env_path}")
        return env_path

    found_path = find_data_file(
        module_file=__file__,
        subdirectory="countries",
        filenames=[MAPPING_FILENAME],
        search_dev_tables=True,
        module_local_data=True,
    )
    if found_path is None:
        error_msg = format_not_found_error(
            subdirectory="countries",
            searched_locations=[
                ("Environment variable", os.environ.get(MAPPING_ENV_VAR, "Not set")),
                ("Module-local data", Path(__file__).parent / "data"),
                ("Development tables", Path(__file__).parent.parent.parent / "tables" / "countries"),
            ],
            fix_instructions=[
                f"Set {MAPPING_ENV_VAR} to point to a reference document",
                f"Or place {MAPPING_FILENAME} in countryidentity/countries/data/",
            ],
        )
        raise LoadError(error_msg)
    return found_path


def load_catalog(source: Optional[Union[str, Path]] = None) -> ReferenceCatalog:
    """Load the reference catalog.

    Args:
        source: Optional path or http(s) URL of the reference document.
                Defaults to $COUNTRYIDENTITY_MAPPING_PATH, then the packaged
                country_mapping.json.

    Returns:
        An immutable ReferenceCatalog

    Raises:
        LoadError: On fetch failure, malformed JSON or a malformed schema
    """
    return ReferenceCatalog.load(source)


__all__ = [
    "SOVEREIGN",
    "MICROSTATES",
    "TERRITORIES",
    "SPECIAL_CASE_CATEGORIES",
    "TIERS",
    "MAPPING_ENV_VAR",
    "CanonicalCountry",
    "ReferenceCatalog",
    "load_catalog",
]
