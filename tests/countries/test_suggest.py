"""Tests for near-match suggestions."""

import pytest

from countryidentity.countries.countrysuggest import DEFAULT_SUGGESTIONS


def names(countries):
    return [c.name for c in countries]


class TestSuggest:
    def test_query_inside_name(self, mini_suggester):
        assert names(mini_suggester.suggest("Korea")) == ["South Korea", "North Korea"]

    def test_case_insensitive(self, mini_suggester):
        assert names(mini_suggester.suggest("KOREA")) == ["South Korea", "North Korea"]

    def test_name_inside_query(self, mini_suggester):
        assert names(mini_suggester.suggest("Greater China Region")) == ["China"]

    def test_alias_match(self, mini_suggester):
        assert names(mini_suggester.suggest("French Rep")) == ["France"]

    def test_each_country_once(self, mini_suggester):
        # Matches name and both aliases of the same entry
        assert names(mini_suggester.suggest("United States of America (the)")) == ["United States"]

    def test_limit(self, mini_suggester):
        assert names(mini_suggester.suggest("Korea", limit=1)) == ["South Korea"]
        assert mini_suggester.suggest("Korea", limit=0) == []

    def test_default_limit(self, mini_suggester):
        assert DEFAULT_SUGGESTIONS == 3
        # "e" occurs in every sovereign name or alias
        assert len(mini_suggester.suggest("e")) == DEFAULT_SUGGESTIONS

    def test_catalog_order_not_similarity(self, mini_suggester):
        assert names(mini_suggester.suggest("e")) == ["France", "South Korea", "North Korea"]

    def test_no_match(self, mini_suggester):
        assert mini_suggester.suggest("Atlantis") == []

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_query(self, mini_suggester, raw):
        assert mini_suggester.suggest(raw) == []


class TestSovereignOnly:
    def test_microstate_not_suggested(self, mini_suggester, mini_resolver):
        assert mini_resolver.resolve("Monaco") == "Monaco"
        assert mini_suggester.suggest("Monaco") == []

    def test_territory_not_suggested(self, mini_suggester):
        assert mini_suggester.suggest("Hong Kong") == []
        assert mini_suggester.suggest("Macao") == []

    def test_sovereign_twin_suggested(self, mini_suggester):
        # "Singapore City-State" contains the sovereign name "singapore"
        assert names(mini_suggester.suggest("Singapore City-State")) == ["Singapore"]


class TestPackagedSuggestions:
    def test_korea(self, suggester):
        assert names(suggester.suggest("Korea")) == ["North Korea", "South Korea"]

    def test_congo(self, suggester):
        suggested = names(suggester.suggest("Congo Republic"))
        assert suggested == ["Republic of the Congo"]

    def test_unknown(self, suggester):
        assert suggester.suggest("Ruritania") == []
