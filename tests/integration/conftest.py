"""Shared fixtures for integration tests."""

import os

import pytest

NETWORK_ENV = "RUN_LAAKHAY_NETWORK_TESTS"


def pytest_collection_modifyitems(config, items):
    # Skip all integration tests unless RUN_LAAKHAY_NETWORK_TESTS=1
    if os.environ.get(NETWORK_ENV) == "1":
        return
    skip = pytest.mark.skip(reason=f"Requires network access. Set {NETWORK_ENV}=1 to run")
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(skip)
