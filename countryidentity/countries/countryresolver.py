"""
Country Resolution
------------------

Resolves raw country tokens against a ReferenceCatalog:
  1) common_aliases fast path (trimmed input, case-sensitive); an alias
     whose iso2 is in no tier resolves to None
  2) catalog scan in precedence order, per entry:
       a) iso2 / iso3        (case-sensitive)
       b) canonical name     (case-insensitive)
       c) any alias          (case-insensitive)
       d) source spelling    (case-insensitive, only when source_id is given)
     The first entry satisfying any test wins.

The scan is not performed per call. Lookup tables are built once from the
catalog, each storing the earliest catalog position for a key, and resolve()
takes the smallest position among the tables that hit. This gives exactly
the scan's answer, tier tie-breaks included.

API:
  CountryResolver(catalog).resolve(raw, source_id=None) -> str | None
  resolve_iso2 / resolve_iso3 / resolve_aliases / resolve_source_name (name-only)

Examples:
  >>> resolver = CountryResolver(load_catalog())
  >>> resolver.resolve("USA")
  'United States'
  >>> resolver.resolve("Korea, South", source_id="cia")
  'South Korea'
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from countryidentity.countries.countrycatalog import CanonicalCountry, ReferenceCatalog
from countryidentity.utils.normalize import fold_case, normalize_input

logger = logging.getLogger(__name__)


def _keep_first(index: Dict[str, int], key: str, position: int) -> None:
    if key and key not in index:
        index[key] = position


class CountryResolver:
    """Resolve raw tokens to canonical country names.

    Args:
        catalog: The reference catalog; read, never modified
    """

    def __init__(self, catalog: ReferenceCatalog):
        self.catalog = catalog
        self._entries: List[CanonicalCountry] = catalog.all_countries()

        self._codes: Dict[str, int] = {}
        self._names: Dict[str, int] = {}
        self._texts: Dict[str, int] = {}
        self._sources: Dict[str, Dict[str, int]] = {}

        for position, country in enumerate(self._entries):
            _keep_first(self._codes, country.iso2, position)
            _keep_first(self._codes, country.iso3, position)

            name_key = fold_case(country.name)
            _keep_first(self._names, name_key, position)
            _keep_first(self._texts, name_key, position)
            for alias in country.aliases:
                _keep_first(self._texts, fold_case(alias), position)

            for source_id, spelling in country.data_source_names.items():
                _keep_first(self._sources.setdefault(source_id, {}), fold_case(spelling), position)

    # ---- Full resolution ----

    def _common_alias(self, token: str) -> Optional[CanonicalCountry]:
        iso2 = self.catalog.common_aliases[token]
        country = self.catalog.lookup_iso2(iso2)
        if country is None:
            logger.debug(f"Common alias '{token}' points at unknown iso2 '{iso2}'")
        return country

    def resolve_country(self, raw_input, source_id: Optional[str] = None) -> Optional[CanonicalCountry]:
        """Resolve a raw token to its catalog entry, or None."""
        token = normalize_input(raw_input)
        if not token:
            return None

        if token in self.catalog.common_aliases:
            return self._common_alias(token)

        folded = fold_case(token)
        positions = [
            self._codes.get(token),
            self._texts.get(folded),
        ]
        if source_id:
            positions.append(self._sources.get(source_id, {}).get(folded))

        positions = [p for p in positions if p is not None]
        if not positions:
            return None
        return self._entries[min(positions)]

    def resolve(self, raw_input, source_id: Optional[str] = None) -> Optional[str]:
        """Resolve a raw token to its canonical name.

        Args:
            raw_input: Country name, ISO code, alias or source-specific spelling
            source_id: Optional data source id (e.g. 'world_bank', 'cia') whose
                       stored spellings should also be accepted

        Returns:
            Canonical country name, or None if nothing matches

        Examples:
            >>> resolver.resolve("US")
            'United States'

            >>> resolver.resolve("hong kong (cn)")
            'Hong Kong'

            >>> resolver.resolve("Ruritania") is None
            True
        """
        country = self.resolve_country(raw_input, source_id)
        return country.name if country is not None else None

    def resolve_many(self, raw_inputs: Iterable, source_id: Optional[str] = None) -> List[Optional[str]]:
        """Vectorized convenience wrapper."""
        return [self.resolve(raw, source_id) for raw in raw_inputs]

    # ---- Name-only companion lookups ----
    # These match the canonical name only; codes and aliases of the query
    # are not recognised (resolve_iso2("USA") is None).

    def _by_name(self, name) -> Optional[CanonicalCountry]:
        token = normalize_input(name)
        if not token:
            return None
        position = self._names.get(fold_case(token))
        return self._entries[position] if position is not None else None

    def resolve_iso2(self, name) -> Optional[str]:
        """ISO2 code for a canonical country name."""
        country = self._by_name(name)
        return country.iso2 if country is not None else None

    def resolve_iso3(self, name) -> Optional[str]:
        """ISO3 code for a canonical country name."""
        country = self._by_name(name)
        return (country.iso3 or None) if country is not None else None

    def resolve_aliases(self, name) -> List[str]:
        """All aliases of a canonical country name ([] when unknown)."""
        country = self._by_name(name)
        return list(country.aliases) if country is not None else []

    def resolve_source_name(self, name, source_id: Optional[str]) -> Optional[str]:
        """The spelling a given data source uses for a canonical country name."""
        if not source_id:
            return None
        country = self._by_name(name)
        if country is None:
            return None
        return country.data_source_names.get(source_id) or None

    # ---- Partial search ----

    def search(self, query) -> List[CanonicalCountry]:
        """Substring search over names, aliases and codes in every tier.

        Unlike suggestions, this covers microstates and territories and
        returns every hit in catalog order.
        """
        needle = fold_case(normalize_input(query))
        if not needle:
            return []

        results = []
        for country in self._entries:
            haystack = [country.name, country.iso2, country.iso3, *country.aliases]
            if any(needle in fold_case(s) for s in haystack):
                results.append(country)
        return results


__all__ = [
    "CountryResolver",
]
