"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing of the storefront with Playwright.
"""
import logging
from typing import Any, Dict, Generator, List

import pytest
import requests

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

import allure
from playwright.sync_api import Browser, BrowserContext, Page

from storefront_e2e.ad_blocking import block_ads
from storefront_e2e.api import AccountApiClient, AccountApiError
from storefront_e2e.artifacts import save_failure_screenshot
from storefront_e2e.config import E2EConfig, configure_logging
from storefront_e2e.factories import create_valid_user_data, make_faker
from storefront_e2e.models import UserRegistrationRecord
from storefront_e2e.page_errors import PageErrorCollector
from storefront_e2e.pages import LoginPage

logger = logging.getLogger("storefront_e2e.fixtures")


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def e2e_config() -> E2EConfig:
    """Suite configuration from E2E_* environment variables."""
    config = E2EConfig.from_env()
    configure_logging(config.log_level)
    logger.info("E2E config: %s", config.to_dict())
    return config


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: Dict, e2e_config: E2EConfig) -> Dict[str, Any]:
    """Browser launch arguments; CLI flags from pytest-playwright are kept."""
    args = dict(browser_type_launch_args)
    if not e2e_config.headless:
        args["headless"] = False
    if e2e_config.slow_mo:
        args["slow_mo"] = e2e_config.slow_mo
    return args


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: Dict, e2e_config: E2EConfig) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "base_url": e2e_config.base_url,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }

    if e2e_config.record_video:
        e2e_config.artifacts_dir.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(e2e_config.artifacts_dir / "videos")

    return args


@pytest.fixture
def context(
    browser: Browser, browser_context_args: Dict, e2e_config: E2EConfig
) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test; cookies and storage start empty."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(e2e_config.default_timeout)
    context.set_default_navigation_timeout(e2e_config.navigation_timeout)
    if e2e_config.block_ads:
        block_ads(context)

    yield context

    context.close()


@pytest.fixture
def page_errors() -> PageErrorCollector:
    """Collector for uncaught in-page exceptions."""
    return PageErrorCollector()


@pytest.fixture
def page(
    request, context: BrowserContext, page_errors: PageErrorCollector, e2e_config: E2EConfig
) -> Generator[Page, None, None]:
    """Create a new page for each test; uncaught page errors are collected and attached to the report."""
    page = context.new_page()
    page_errors.attach(page)

    yield page

    rep_call = getattr(request.node, "rep_call", None)
    if rep_call is not None and rep_call.failed:
        _save_failure_screenshot(request, page, e2e_config)

    page_errors.detach()
    page.close()

    if len(page_errors):
        allure.attach(page_errors.summary(), name="page errors", attachment_type=allure.attachment_type.TEXT)
    page_errors.raise_if(e2e_config.fail_on_page_error)


def _save_failure_screenshot(request, page: Page, e2e_config: E2EConfig) -> None:
    path = save_failure_screenshot(page, e2e_config.artifacts_dir, request.node.name)
    allure.attach.file(str(path), name="failure screenshot", attachment_type=allure.attachment_type.PNG)


@pytest.fixture
def login_page(page: Page, e2e_config: E2EConfig) -> LoginPage:
    """Login/signup landing page, already opened."""
    return LoginPage(page, e2e_config.base_url).navigate()


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def fake(e2e_config: E2EConfig):
    """One Faker instance per run so generated emails never repeat within it."""
    return make_faker(e2e_config.faker_locale, e2e_config.faker_seed)


@pytest.fixture
def user_data(fake, e2e_config: E2EConfig) -> UserRegistrationRecord:
    """A fresh, valid registration record."""
    return create_valid_user_data(fake, e2e_config)


# =============================================================================
# Account Seeding Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def account_api(e2e_config: E2EConfig) -> Generator[AccountApiClient, None, None]:
    client = AccountApiClient(e2e_config.api_url, timeout=e2e_config.api_timeout)
    yield client
    client.close()


def _delete_quietly(api: AccountApiClient, record: UserRegistrationRecord) -> None:
    try:
        api.delete_account(record.email, record.password)
    except (AccountApiError, requests.RequestException) as exc:
        logger.warning("Could not delete account %s: %s", record.email, exc)


@pytest.fixture
def created_accounts(account_api: AccountApiClient) -> Generator[List[UserRegistrationRecord], None, None]:
    """Records registered through the UI during a test; deleted afterwards."""
    records: List[UserRegistrationRecord] = []

    yield records

    for record in records:
        _delete_quietly(account_api, record)


@pytest.fixture
def registered_user(
    fake, e2e_config: E2EConfig, account_api: AccountApiClient
) -> Generator[UserRegistrationRecord, None, None]:
    """An account that already exists on the site, seeded through the API."""
    if not e2e_config.seed_accounts:
        pytest.skip("account seeding disabled (E2E_SEED_ACCOUNTS=false)")

    record = create_valid_user_data(fake, e2e_config)
    account_api.create_account(record)

    yield record

    _delete_quietly(account_api, record)


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "smoke: marks the happy-path scenarios")
    config.addinivalue_line("markers", "negative: marks validation-failure scenarios")
    config.addinivalue_line("markers", "seeded: marks tests needing a pre-registered account")


def pytest_collection_modifyitems(config, items):
    """Add markers based on fixtures used."""
    for item in items:
        if "registered_user" in item.fixturenames:
            item.add_marker(pytest.mark.seeded)
