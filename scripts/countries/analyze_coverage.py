#!/usr/bin/env python3
"""
Analyze dataset files for country names that do not resolve.

Usage:
    python analyze_coverage.py PATH [PATH ...] [--source SOURCE] [--top N] [--json]

PATH may be a JSON file, a directory (all *.json files in it) or an
http(s) URL.

Examples:
    python analyze_coverage.py data/
    python analyze_coverage.py data/gdp_by_country_2025.json data/quiz_data.json
    python analyze_coverage.py data/ --source world_bank --top 10
    python analyze_coverage.py data/ --json > coverage.json

Exit code is 1 when any token is unresolved, 0 otherwise.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from countryidentity import CoverageAnalyzer, LoadError, ReferenceCatalog
from countryidentity.coverage.coverageanalyzer import DEFAULT_MAX_WORKERS, DEFAULT_TOP_N
from countryidentity.utils.dataloader import is_url


def expand_paths(paths):
    """Directories become their *.json files; URLs and files pass through."""
    sources = {}
    for p in paths:
        if is_url(p):
            sources[p] = p
            continue
        path = Path(p)
        if path.is_dir():
            for f in sorted(path.glob("*.json")):
                sources[str(f)] = f
        else:
            sources[str(path)] = path
    return sources


def main():
    parser = argparse.ArgumentParser(
        description='Country mapping coverage analysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('paths', nargs='+', help='Files, directories or URLs to analyze')
    parser.add_argument('--source', help='Data source id whose spellings count as mapped')
    parser.add_argument('--top', type=int, default=DEFAULT_TOP_N,
                        help=f'Most frequent table size (default: {DEFAULT_TOP_N})')
    parser.add_argument('--workers', type=int, default=DEFAULT_MAX_WORKERS,
                        help=f'Parallel fetches (default: {DEFAULT_MAX_WORKERS})')
    parser.add_argument('--mapping', help='Path or URL of the reference document')
    parser.add_argument('--json', action='store_true', help='Print the report as JSON')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = ReferenceCatalog.load(args.mapping)
    except LoadError as e:
        print(f"Error loading country mapping: {e}")
        sys.exit(2)

    sources = expand_paths(args.paths)
    if not sources:
        print("No data files found")
        sys.exit(2)

    analyzer = CoverageAnalyzer.from_catalog(catalog, top_n=args.top)
    report = analyzer.analyze_sources(sources, max_workers=args.workers, source_id=args.source)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(report.render())

    sys.exit(1 if report.unresolved else 0)


if __name__ == '__main__':
    main()
