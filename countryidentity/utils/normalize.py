"""Shared text normalization utilities.

Inputs are only trimmed; comparisons fold case with str.lower(). There is no
transliteration or punctuation stripping.
"""

from typing import Any, Iterable, Optional, Tuple


def normalize_input(s: Any) -> str:
    """Trim surrounding whitespace, nothing else.

    Examples:
        >>> normalize_input("  Hong Kong (CN) ")
        'Hong Kong (CN)'

        >>> normalize_input(None)
        ''
    """
    if s is None:
        return ""
    return str(s).strip()


def fold_case(s: Optional[str]) -> str:
    """Case-insensitive comparison key (no locale rules, no accent folding)."""
    if not s:
        return ""
    return s.lower()


def contains_either_way(query_folded: str, candidate: Optional[str]) -> bool:
    """True if the query is inside the candidate or the candidate is inside the query.

    Both sides are compared lowercased; query_folded must already be folded.

    Examples:
        >>> contains_either_way("korea", "South Korea")
        True

        >>> contains_either_way("republic of korea", "Korea")
        True
    """
    if not candidate:
        return False
    candidate_folded = candidate.lower()
    return query_folded in candidate_folded or candidate_folded in query_folded


def unique_strings(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Drop blanks and duplicates from a list of strings, keeping first-seen order."""
    seen = []
    for v in values or ():
        if v is None:
            continue
        s = str(v)
        if s.strip() and s not in seen:
            seen.append(s)
    return tuple(seen)


__all__ = [
    "normalize_input",
    "fold_case",
    "contains_either_way",
    "unique_strings",
]
