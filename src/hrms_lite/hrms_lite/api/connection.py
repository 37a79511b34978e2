from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS, REQUEST_FAILED
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS


def extract_error_message(response: requests.Response) -> str:
    """Best-effort human-readable message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        detail = body.get("detail")
        if isinstance(detail, str) and detail:
            return detail
        if isinstance(detail, list) and detail:
            first = detail[0]
            if isinstance(first, dict) and first.get("msg"):
                return str(first["msg"])
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])

    return f"{REQUEST_FAILED} with status {response.status_code}"


class HttpConnection:
    """Thin wrapper over a requests session bound to the HR API base URL.

    Note: One session per connection, open until close(); create_app closes it
    at interpreter exit.
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, *, json: Any = None) -> Any:
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, json=json, timeout=self._config.timeout)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(str(e) or REQUEST_FAILED) from e

        if not response.ok:
            message = extract_error_message(response)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {url}", status_code=response.status_code) from e

    def close(self) -> None:
        self._session.close()
