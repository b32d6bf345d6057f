#!/usr/bin/env python3
"""
CLI tool for testing country resolution.

Usage:
    python country_resolution.py <country> [--source SOURCE] [--mapping PATH]
    python country_resolution.py --suggest <country> [--k K]
    python country_resolution.py --search <query>
    python country_resolution.py --list [--tier TIER]
    python country_resolution.py --info

Examples:
    python country_resolution.py "USA"
    python country_resolution.py "Korea, South" --source cia
    python country_resolution.py --suggest "Korea"
    python country_resolution.py --search "virgin"
    python country_resolution.py --list --tier microstates
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from countryidentity import (
    CountryResolver,
    CountrySuggester,
    LoadError,
    ReferenceCatalog,
)


def resolve_country_cmd(resolver, args):
    """Resolve a single country token."""
    country = resolver.resolve_country(args.country, source_id=args.source)

    if country:
        print(f"✅ Resolved: '{args.country}'")
        print("-" * 50)
        print(f"Name: {country.name}")
        print(f"ISO2: {country.iso2}")
        print(f"ISO3: {country.iso3 or 'N/A'}")
        if country.aliases:
            print(f"Aliases: {', '.join(country.aliases)}")
        for source, spelling in country.data_source_names.items():
            print(f"  {source:12} : {spelling}")
    else:
        print(f"❌ No match found for '{args.country}'")
        print("\nTry --suggest to see candidates")


def suggest_cmd(suggester, args):
    """Near matches for an unresolved token."""
    candidates = suggester.suggest(args.suggest, limit=args.k)

    if not candidates:
        print(f"No suggestions for '{args.suggest}'")
        return

    print(f"'{args.suggest}' might map to:")
    for c in candidates:
        print(f"  - {c.name} ({c.iso2})")


def search_cmd(resolver, args):
    results = resolver.search(args.search)

    if not results:
        print(f"No countries matching '{args.search}'")
        return

    for c in results:
        print(f"• {c.name} [{c.iso2}/{c.iso3}]")
    print(f"\nTotal: {len(results)} countries")


def list_cmd(catalog, args):
    df = catalog.to_frame()
    if args.tier:
        df = df[df["tier"] == args.tier]

    if df.empty:
        print("No countries found with the specified filters")
        return

    for _, row in df.iterrows():
        print(f"• {row['name']} [{row['iso2']}/{row['iso3']}] ({row['tier']})")
    print(f"\nTotal: {len(df)} countries")


def main():
    parser = argparse.ArgumentParser(
        description='Test country resolution from countryidentity',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument('country', nargs='?', help='Country token to resolve')
    parser.add_argument('--source', help='Data source id (e.g., owid, world_bank, un, cia)')
    parser.add_argument('--mapping', help='Path or URL of the reference document')

    parser.add_argument('--suggest', metavar='TOKEN', help='Suggest countries for a token')
    parser.add_argument('--k', type=int, default=3, help='Number of suggestions (default: 3)')
    parser.add_argument('--search', metavar='QUERY', help='Partial search across all tiers')
    parser.add_argument('--list', action='store_true', help='List countries')
    parser.add_argument('--tier', choices=['sovereign', 'microstates', 'territories'],
                        help='Tier filter for --list')
    parser.add_argument('--info', action='store_true', help='Show catalog info')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        catalog = ReferenceCatalog.load(args.mapping)
    except LoadError as e:
        print(f"Error loading country mapping: {e}")
        sys.exit(1)

    resolver = CountryResolver(catalog)

    if args.info:
        print("Country Catalog Information:")
        print("-" * 50)
        print(f"Total entries: {len(catalog)}")
        for tier, count in catalog.to_frame()['tier'].value_counts(sort=False).items():
            print(f"  {tier:12} : {count:3} countries")
        print(f"  {'aliases':12} : {len(catalog.common_aliases):3} common aliases")
    elif args.list:
        list_cmd(catalog, args)
    elif args.suggest:
        suggest_cmd(CountrySuggester(catalog), args)
    elif args.search:
        search_cmd(resolver, args)
    elif args.country:
        resolve_country_cmd(resolver, args)
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
