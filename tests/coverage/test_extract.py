"""Tests for document shape detection and country token extraction."""

import pytest

from countryidentity.coverage.coverageextract import (
    RESERVED_KEYS,
    DocumentShape,
    DocumentShapeError,
    classify_document,
    extract_country_tokens,
    extract_tokens_for_shape,
)
from countryidentity.utils.dataloader import LoadError


QUIZ_DOC = {
    "quizzes": {
        "gdp": {"title": "GDP", "countries": {"France": 1, "Korea, Rep.": 2}},
        "area": {"title": "Area", "countries": {"France": 3, "Atlantis": 4}},
    }
}

RECORD_DOC = {
    "title": "GDP by country",
    "data": [
        {"country": "France", "value": 1},
        {"country": "France", "value": 2},
        {"country": "United States", "value": 3},
    ],
}

FLAT_DOC = {
    "France": 10,
    "Germany": 20,
    "title": "x",
    "description": "y",
    "category": "z",
    "tags": ["a"],
}


class TestClassify:
    def test_quiz_collection(self):
        assert classify_document(QUIZ_DOC) is DocumentShape.QUIZ_COLLECTION

    def test_record_array(self):
        assert classify_document(RECORD_DOC) is DocumentShape.RECORD_ARRAY

    def test_flat_map(self):
        assert classify_document(FLAT_DOC) is DocumentShape.FLAT_MAP

    def test_quizzes_take_priority_over_data(self):
        doc = {"quizzes": {}, "data": [{"country": "France"}]}
        assert classify_document(doc) is DocumentShape.QUIZ_COLLECTION

    def test_data_must_be_a_list(self):
        assert classify_document({"data": {"France": 1}}) is DocumentShape.FLAT_MAP

    def test_quizzes_must_be_an_object(self):
        assert classify_document({"quizzes": ["France"]}) is DocumentShape.FLAT_MAP

    @pytest.mark.parametrize("doc", [[], ["France"], "France", 42, None])
    def test_non_object_rejected(self, doc):
        with pytest.raises(DocumentShapeError):
            classify_document(doc)

    def test_shape_error_is_load_error(self):
        with pytest.raises(LoadError):
            extract_country_tokens([{"country": "France"}])


class TestExtract:
    def test_quiz_tokens_are_union_of_quizzes(self):
        assert extract_country_tokens(QUIZ_DOC) == {"France", "Korea, Rep.", "Atlantis"}

    def test_quiz_entries_without_countries_skipped(self):
        doc = {"quizzes": {"a": {"title": "no countries"}, "b": "junk", "c": {"countries": {"Peru": 1}}}}
        assert extract_country_tokens(doc) == {"Peru"}

    def test_record_tokens_distinct(self):
        assert extract_country_tokens(RECORD_DOC) == {"France", "United States"}

    def test_record_without_usable_country_skipped(self):
        doc = {"data": [
            {"country": "Peru"},
            {"value": 1},
            {"country": ""},
            {"country": None},
            {"country": 7},
            "France",
        ]}
        assert extract_country_tokens(doc) == {"Peru"}

    def test_flat_map_ignores_reserved_keys(self):
        assert extract_country_tokens(FLAT_DOC) == {"France", "Germany"}
        assert RESERVED_KEYS == {"title", "description", "category", "tags"}

    def test_empty_documents(self):
        assert extract_country_tokens({}) == set()
        assert extract_country_tokens({"data": []}) == set()
        assert extract_country_tokens({"quizzes": {}}) == set()

    def test_tokens_are_not_normalized(self):
        doc = {"data": [{"country": " France "}, {"country": "france"}]}
        assert extract_country_tokens(doc) == {" France ", "france"}

    def test_extract_for_given_shape(self):
        tokens = extract_tokens_for_shape(RECORD_DOC, DocumentShape.FLAT_MAP)
        assert tokens == {"data"}
