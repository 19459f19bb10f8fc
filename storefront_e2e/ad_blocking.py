"""
Ad Request Blocking

Abort third-party ad and consent requests so overlays and vignettes do not
intercept clicks on the forms under test.
"""
import logging
import re

from playwright.sync_api import BrowserContext, Route

logger = logging.getLogger(__name__)

AD_HOSTS = (
    "googlesyndication.com",
    "doubleclick.net",
    "googleadservices.com",
    "adservice.google.com",
    "fundingchoicesmessages.google.com",
    "googletagservices.com",
)

AD_URL_PATTERN = re.compile(
    r"^https?://([^/]+\.)?(" + "|".join(re.escape(host) for host in AD_HOSTS) + r")(/|$)"
)


def is_ad_url(url: str) -> bool:
    return AD_URL_PATTERN.match(url) is not None


def _abort(route: Route) -> None:
    logger.debug("Blocked %s", route.request.url)
    route.abort()


def block_ads(context: BrowserContext) -> None:
    """Install a route on ``context`` that aborts requests to known ad hosts."""
    context.route(AD_URL_PATTERN, _abort)
