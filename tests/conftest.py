"""
Pytest configuration for the storefront suite

Browser scenarios under tests/e2e/ hit a live external site, so they run
only with ``--live`` (or E2E_LIVE=true) and an installed Playwright.
"""
import importlib.util
import os

import pytest

from storefront_e2e.config import E2EConfig

E2E_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "e2e")


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run browser scenarios against the live storefront",
    )


def pytest_configure(config):
    """Register suite-wide markers."""
    config.addinivalue_line("markers", "e2e: browser tests against the live site")


def _live_enabled(config) -> bool:
    if config.getoption("--live"):
        return True
    return E2EConfig.from_env().live


def pytest_collection_modifyitems(config, items):
    """Mark tests under tests/e2e/ and skip them unless a live run was requested."""
    playwright_spec = importlib.util.find_spec("playwright.sync_api")
    live = _live_enabled(config)

    if playwright_spec is None:
        skip_e2e = pytest.mark.skip(reason="Playwright not installed")
    elif not live:
        skip_e2e = pytest.mark.skip(reason="live scenarios need --live or E2E_LIVE=true")
    else:
        skip_e2e = None

    for item in items:
        if str(item.path).startswith(E2E_DIR):
            item.add_marker(pytest.mark.e2e)
            if skip_e2e is not None:
                item.add_marker(skip_e2e)
