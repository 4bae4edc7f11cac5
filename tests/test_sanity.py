"""
Test Suite - Basic Sanity Tests

These tests verify that the package structure is correct
and that basic imports work.

Run with: pytest tests/test_sanity.py -v
"""

import pytest


class TestPackageStructure:
    """Test that all packages can be imported."""

    def test_import_songformat(self):
        """Test that main package can be imported."""
        import songformat
        assert hasattr(songformat, "__version__")
        assert songformat.__version__ == "0.1.0"

    def test_import_data_package(self):
        """Test that data subpackage exposes the model and codec."""
        import songformat.data
        assert hasattr(songformat.data, "SongData")
        assert hasattr(songformat.data, "encode")
        assert hasattr(songformat.data, "decode")

    def test_import_rules_package(self):
        """Test that rules subpackage exposes the naming helpers."""
        import songformat.rules
        assert hasattr(songformat.rules, "get_tuning_name")
        assert hasattr(songformat.rules, "get_safe_filename")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
