"""
Account API Client

Thin wrapper over the storefront's public account endpoints, used to seed
and clean up accounts around browser tests. Endpoints take form-encoded
fields and answer with a JSON body holding ``responseCode`` and ``message``.
"""
import logging
from typing import Any, Dict, Optional

import requests

from .models import UserRegistrationRecord

logger = logging.getLogger(__name__)


class AccountApiError(Exception):
    """The site answered with an unexpected ``responseCode``."""

    def __init__(self, endpoint: str, response_code: Optional[int], message: str):
        self.endpoint = endpoint
        self.response_code = response_code
        self.message = message
        super().__init__(f"{endpoint}: responseCode={response_code} message={message!r}")


class AccountApiClient:
    """Create, verify and delete accounts through the site's API."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _call(self, method: str, endpoint: str, data: Dict[str, str]) -> Dict[str, Any]:
        url = f"{self.api_url}/{endpoint}"
        logger.debug("%s %s", method, url)
        resp = self.session.request(method, url, data=data, timeout=self.timeout)
        resp.raise_for_status()
        try:
            body = resp.json()
        except ValueError:
            raise AccountApiError(endpoint, None, resp.text[:200]) from None
        return body

    def _expect(self, endpoint: str, body: Dict[str, Any], expected: int) -> Dict[str, Any]:
        code = body.get("responseCode")
        message = body.get("message", "")
        if code != expected:
            raise AccountApiError(endpoint, code, message)
        logger.info("%s: %s", endpoint, message)
        return body

    def create_account(self, record: UserRegistrationRecord) -> Dict[str, Any]:
        """Register ``record`` so it exists before the browser test starts."""
        if not record.password:
            raise ValueError("Cannot seed an account without a password")
        body = self._call("POST", "createAccount", record.to_api_payload())
        return self._expect("createAccount", body, 201)

    def delete_account(self, email: str, password: str) -> Dict[str, Any]:
        body = self._call("DELETE", "deleteAccount", {"email": email, "password": password})
        return self._expect("deleteAccount", body, 200)

    def account_exists(self, email: str, password: str) -> bool:
        """Return True if the credentials log in, False if the user is unknown."""
        body = self._call("POST", "verifyLogin", {"email": email, "password": password})
        code = body.get("responseCode")
        if code == 200:
            return True
        if code == 404:
            return False
        raise AccountApiError("verifyLogin", code, body.get("message", ""))

    def close(self) -> None:
        self.session.close()
