"""Country token extraction from dataset documents.

Dataset files come in three shapes. The shape is decided once per document
(classify_document) and the extractor for that shape is then applied:

  QUIZ_COLLECTION   {"quizzes": {"<id>": {"countries": {"<token>": ...}}}}
  RECORD_ARRAY      {"data": [{"country": "<token>", ...}, ...]}
  FLAT_MAP          {"<token>": ..., "title": ..., ...}   (fallback)

Examples:
    >>> extract_country_tokens({"data": [{"country": "France", "value": 1}]})
    {'France'}
    >>> extract_country_tokens({"France": 10, "title": "x"})
    {'France'}
"""

from enum import Enum
from typing import Any, Mapping, Set

from countryidentity.utils.dataloader import LoadError

RESERVED_KEYS = frozenset({"title", "description", "category", "tags"})


class DocumentShapeError(LoadError):
    """A dataset document is not a JSON object and cannot be scanned."""


class DocumentShape(Enum):
    QUIZ_COLLECTION = "quiz_collection"
    RECORD_ARRAY = "record_array"
    FLAT_MAP = "flat_map"


def classify_document(doc: Any) -> DocumentShape:
    """Decide which of the three shapes a parsed document has.

    Raises:
        DocumentShapeError: If the document is not a JSON object
    """
    if not isinstance(doc, Mapping):
        raise DocumentShapeError(
            f"Expected a JSON object, got {type(doc).__name__}"
        )
    if isinstance(doc.get("quizzes"), Mapping):
        return DocumentShape.QUIZ_COLLECTION
    if isinstance(doc.get("data"), list):
        return DocumentShape.RECORD_ARRAY
    return DocumentShape.FLAT_MAP


def _quiz_tokens(doc: Mapping) -> Set[str]:
    tokens = set()
    for quiz in doc["quizzes"].values():
        if not isinstance(quiz, Mapping):
            continue
        countries = quiz.get("countries")
        if isinstance(countries, Mapping):
            tokens.update(str(key) for key in countries)
    return tokens


def _record_tokens(doc: Mapping) -> Set[str]:
    tokens = set()
    for record in doc["data"]:
        if not isinstance(record, Mapping):
            continue
        country = record.get("country")
        if isinstance(country, str) and country:
            tokens.add(country)
    return tokens


def _flat_tokens(doc: Mapping) -> Set[str]:
    return {str(key) for key in doc if key not in RESERVED_KEYS}


_EXTRACTORS = {
    DocumentShape.QUIZ_COLLECTION: _quiz_tokens,
    DocumentShape.RECORD_ARRAY: _record_tokens,
    DocumentShape.FLAT_MAP: _flat_tokens,
}


def extract_tokens_for_shape(doc: Mapping, shape: DocumentShape) -> Set[str]:
    """Extract tokens using an already determined shape."""
    return _EXTRACTORS[shape](doc)


def extract_country_tokens(doc: Any) -> Set[str]:
    """Distinct raw country strings found in a document.

    Raises:
        DocumentShapeError: If the document is not a JSON object
    """
    return extract_tokens_for_shape(doc, classify_document(doc))


__all__ = [
    "RESERVED_KEYS",
    "DocumentShape",
    "DocumentShapeError",
    "classify_document",
    "extract_tokens_for_shape",
    "extract_country_tokens",
]
