"""Near-match suggestions for tokens the resolver could not place.

Candidates come from the sovereign tier only, in catalog order. An entry
qualifies when the lowercased query and its lowercased name (or one of its
aliases) contain one another. There is no similarity scoring: the first
matches in catalog order are returned.
"""

from typing import List

from countryidentity.countries.countrycatalog import CanonicalCountry, ReferenceCatalog
from countryidentity.utils.normalize import contains_either_way, fold_case

DEFAULT_SUGGESTIONS = 3


class CountrySuggester:
    """Propose candidate countries for an unresolved token."""

    def __init__(self, catalog: ReferenceCatalog):
        self.catalog = catalog

    def suggest(self, raw_input, limit: int = DEFAULT_SUGGESTIONS) -> List[CanonicalCountry]:
        """Up to `limit` sovereign countries whose name or alias overlaps the query.

        Examples:
            >>> [c.name for c in suggester.suggest("Korea")]
            ['North Korea', 'South Korea']

            >>> suggester.suggest("Atlantis")
            []
        """
        if raw_input is None or not str(raw_input).strip():
            return []
        query = fold_case(str(raw_input))

        suggestions = []
        for country in self.catalog.countries.values():
            if len(suggestions) >= limit:
                break
            if contains_either_way(query, country.name) or any(
                contains_either_way(query, alias) for alias in country.aliases
            ):
                suggestions.append(country)
        return suggestions


__all__ = [
    "DEFAULT_SUGGESTIONS",
    "CountrySuggester",
]
