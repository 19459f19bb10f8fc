"""
Failure Artifacts

Screenshots captured when a browser test fails.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


def failure_screenshot_path(artifacts_dir: Path, test_name: str, now: Optional[datetime] = None) -> Path:
    """Timestamped PNG path for a test; path separators in the name are replaced."""
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    safe_name = test_name.replace("/", "_").replace(":", "_")
    return Path(artifacts_dir) / f"failure_{safe_name}_{timestamp}.png"


def save_failure_screenshot(page: Page, artifacts_dir: Path, test_name: str) -> Path:
    artifacts_dir = Path(artifacts_dir)
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    screenshot_path = failure_screenshot_path(artifacts_dir, test_name)
    page.screenshot(path=str(screenshot_path), full_page=True)
    logger.info("Screenshot saved: %s", screenshot_path)
    return screenshot_path
