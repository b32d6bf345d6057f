"""Shared utilities for CountryIdentity package."""

from countryidentity.utils.dataloader import (
    DEFAULT_TIMEOUT,
    LoadError,
    is_url,
    find_data_file,
    fetch_document,
    format_not_found_error,
)
from countryidentity.utils.normalize import (
    normalize_input,
    fold_case,
    contains_either_way,
    unique_strings,
)

__all__ = [
    # Data loading
    "DEFAULT_TIMEOUT",
    "LoadError",
    "is_url",
    "find_data_file",
    "fetch_document",
    "format_not_found_error",
    # Normalization
    "normalize_input",
    "fold_case",
    "contains_either_way",
    "unique_strings",
]
