"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available. They run quickly (<1 second) and are suitable for CI/CD.

Run with: pytest tests/test_smoke.py
"""

import pytest


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from countryidentity import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import countryidentity
        assert countryidentity is not None

    def test_all_exports_resolve(self):
        import countryidentity
        for name in countryidentity.__all__:
            assert hasattr(countryidentity, name), name


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_country_api_imports(self):
        """Test country API imports"""
        from countryidentity import (
            country_name,
            country_names,
            country_iso2,
            country_iso3,
            suggest_countries,
            list_countries,
        )

        assert callable(country_name)
        assert callable(country_names)
        assert callable(country_iso2)
        assert callable(country_iso3)
        assert callable(suggest_countries)
        assert callable(list_countries)

    def test_coverage_api_imports(self):
        """Test coverage API imports"""
        from countryidentity import (
            analyze_coverage,
            analyze_coverage_files,
            extract_country_tokens,
        )

        assert callable(analyze_coverage)
        assert callable(analyze_coverage_files)
        assert callable(extract_country_tokens)

    def test_error_hierarchy(self):
        from countryidentity import DocumentShapeError, LoadError
        assert issubclass(DocumentShapeError, LoadError)


@pytest.mark.parametrize("raw,expected", [
    ("US", "United States"),
    ("USA", "United States"),
    ("Hong Kong (CN)", "Hong Kong"),
    ("Ruritania", None),
])
def test_resolution_smoke(resolver, raw, expected):
    assert resolver.resolve(raw) == expected
