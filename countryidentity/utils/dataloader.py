"""Shared data loading utilities for the catalog and coverage modules.

This module provides the file discovery and document fetching used by
the reference catalog loader and by the coverage analyzer. Every failure
to fetch or parse a JSON document surfaces as a LoadError.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds, HTTP fetches only


class LoadError(Exception):
    """A reference catalog or dataset document could not be fetched or parsed."""


def is_url(location: Union[str, Path]) -> bool:
    """True when the location should be fetched over HTTP(S)."""
    return isinstance(location, str) and location.lower().startswith(("http://", "https://"))


def find_data_file(
    module_file: str,
    subdirectory: str,
    filenames: List[str],
    search_dev_tables: bool = True,
    module_local_data: bool = True,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Module-local data: {module_dir}/data/ (if module_local_data=True)
    2. Development copies: tables/{subdirectory}/ next to the package
       (if search_dev_tables=True)

    Args:
        module_file: __file__ from the calling module
        subdirectory: Subdirectory name (e.g., 'countries')
        filenames: Candidate filenames in order of preference
        search_dev_tables: Whether to search tables/ directory for dev data
        module_local_data: Whether to search module_dir/data/ first

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> path = find_data_file(__file__, 'countries', ['country_mapping.json'])
    """
    if module_local_data:
        data_dir = Path(module_file).parent / "data"
        for filename in filenames:
            p = data_dir / filename
            if p.exists():
                return p

    if search_dev_tables:
        tables_dir = Path(module_file).parent.parent.parent / "tables" / subdirectory
        for filename in filenames:
            p = tables_dir / filename
            if p.exists():
                return p

    return None


def fetch_document(location: Union[str, Path], timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Fetch and parse a JSON document from a local path or an HTTP(S) URL.

    Args:
        location: Filesystem path or http(s) URL
        timeout: Seconds to wait for an HTTP response (ignored for files)

    Returns:
        The parsed JSON value

    Raises:
        LoadError: If the document cannot be fetched or is not valid JSON
    """
    if is_url(location):
        try:
            response = requests.get(location, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise LoadError(f"Failed to fetch {location}: {e}") from e
        except ValueError as e:
            raise LoadError(f"Malformed JSON from {location}: {e}") from e

    path = Path(location)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise LoadError(f"Failed to read {path}: {e}") from e
    except ValueError as e:
        raise LoadError(f"Malformed JSON in {path}: {e}") from e


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Union[str, Path]]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful error message for a missing data file.

    Args:
        subdirectory: Data subdirectory name (e.g., 'countries')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "DEFAULT_TIMEOUT",
    "LoadError",
    "is_url",
    "find_data_file",
    "fetch_document",
    "format_not_found_error",
]
