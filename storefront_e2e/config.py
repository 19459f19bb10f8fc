"""
E2E Configuration

Settings for the storefront browser suite, read from ``E2E_*``
environment variables.
"""
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

DEFAULT_BASE_URL = "https://automationexercise.com"
# Resolved against the working directory the suite is run from
DEFAULT_ARTIFACTS_DIR = Path("tests") / "e2e" / "artifacts"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class E2EConfig:
    """E2E test configuration."""

    # Site under test
    base_url: str = DEFAULT_BASE_URL

    # Browser settings
    headless: bool = True
    slow_mo: int = 0
    record_video: bool = False
    artifacts_dir: Path = field(default_factory=lambda: Path.cwd() / DEFAULT_ARTIFACTS_DIR)

    # Timeouts (milliseconds)
    default_timeout: int = 30000
    navigation_timeout: int = 60000

    # Test data
    faker_locale: str = "en_US"
    faker_seed: Optional[int] = None
    email_domain: str = "fakermail.com"
    country: str = "United States"

    # Policies
    fail_on_page_error: bool = False
    block_ads: bool = True
    seed_accounts: bool = True
    live: bool = False

    # Account API (seconds)
    api_timeout: float = 15.0

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "E2EConfig":
        """Build a config from environment variables (``os.environ`` by default)."""
        if env is None:
            env = os.environ

        base_url = env.get("E2E_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        artifacts = env.get("E2E_ARTIFACTS_DIR")

        return cls(
            base_url=base_url,
            headless=_env_bool(env, "E2E_HEADLESS", True),
            slow_mo=_env_int(env, "E2E_SLOW_MO", 0),
            record_video=_env_bool(env, "E2E_RECORD_VIDEO", False),
            artifacts_dir=Path(artifacts) if artifacts else Path.cwd() / DEFAULT_ARTIFACTS_DIR,
            faker_locale=env.get("E2E_FAKER_LOCALE", "en_US"),
            faker_seed=_env_int(env, "E2E_FAKER_SEED", None),
            email_domain=env.get("E2E_EMAIL_DOMAIN", "fakermail.com"),
            country=env.get("E2E_COUNTRY", "United States"),
            fail_on_page_error=_env_bool(env, "E2E_FAIL_ON_PAGE_ERROR", False),
            block_ads=_env_bool(env, "E2E_BLOCK_ADS", True),
            seed_accounts=_env_bool(env, "E2E_SEED_ACCOUNTS", True),
            live=_env_bool(env, "E2E_LIVE", False),
            api_timeout=_env_float(env, "E2E_API_TIMEOUT", 15.0),
            log_level=env.get("E2E_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["artifacts_dir"] = str(self.artifacts_dir)
        return data


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set the package logger level; handlers are left to pytest's log capture."""
    logger = logging.getLogger("storefront_e2e")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
