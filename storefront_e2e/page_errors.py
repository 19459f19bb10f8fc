"""
Uncaught Page Error Policy

The site under test throws script errors of its own (mostly from ad
scripts). They are collected and logged rather than failing the run,
unless the run asks for them to fail the test.
"""
import logging
from typing import List

from playwright.sync_api import Error, Page

logger = logging.getLogger(__name__)


def _bullets(errors: List[str]) -> str:
    return "\n".join(f"  - {msg}" for msg in errors)


class UncaughtPageErrors(AssertionError):
    """Raised at teardown when collected page errors should fail the test."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Uncaught page exceptions:\n{_bullets(self.errors)}")


class PageErrorCollector:
    """Record uncaught exceptions raised by scripts on a page."""

    def __init__(self) -> None:
        self.errors: List[str] = []
        self._page = None

    def attach(self, page: Page) -> "PageErrorCollector":
        self._page = page
        page.on("pageerror", self._on_page_error)
        return self

    def detach(self) -> None:
        if self._page is not None:
            self._page.remove_listener("pageerror", self._on_page_error)
            self._page = None

    def _on_page_error(self, error: Error) -> None:
        message = getattr(error, "message", None) or str(error)
        self.errors.append(message)
        logger.warning("Uncaught page exception suppressed: %s", message)

    def __len__(self) -> int:
        return len(self.errors)

    def summary(self) -> str:
        return _bullets(self.errors)

    def raise_if(self, fail_on_error: bool) -> None:
        """Raise ``UncaughtPageErrors`` when failing is enabled and errors were seen."""
        if fail_on_error and self.errors:
            raise UncaughtPageErrors(self.errors)
