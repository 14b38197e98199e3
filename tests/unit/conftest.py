# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit test configuration for the connection string parser.

Everything under tests/unit/ runs without a MongoDB server, a network or
any environment setup beyond what the fixtures in tests/conftest.py provide.
Those tests are tagged with the ``unit`` marker here so they can be run on
their own (``pytest -m unit``).
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Tag every test collected from tests/unit/ with the ``unit`` marker."""
    for item in items:
        if "tests/unit" not in item.path.as_posix():
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
