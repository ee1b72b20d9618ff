"""Pytest configuration for summaryviz."""

# Prevent collection from source tree
collect_ignore = ["src"]


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Fast tests of a single module")
    config.addinivalue_line("markers", "functional: Tests that render templates or write files")
