"""
Pytest configuration for the solbuild test suite.

Integration tests drive a real solc. They are deselected by default
(`-m "not integration"` in pyproject.toml), run with --full, and are skipped
when solc cannot be found on PATH.
"""

import shutil

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--full",
        action="store_true",
        default=False,
        help="Also run integration tests against the installed solc",
    )


def pytest_configure(config):
    if config.getoption("--full") and config.getoption("-m", "") == "not integration":
        config.option.markexpr = ""


def pytest_collection_modifyitems(config, items):
    if shutil.which("solc") is not None:
        return

    skip_solc = pytest.mark.skip(reason="solc not found on PATH")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_solc)
