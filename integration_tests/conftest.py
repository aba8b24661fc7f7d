"""Pytest configuration for the API integration tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests so it can be deselected with -m."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
