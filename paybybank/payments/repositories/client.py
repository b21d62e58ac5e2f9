"""HTTP client for the Ecospend APIs."""

from typing import Any

import aiohttp

from paybybank.core.config import settings
from paybybank.core.logging import get_logger
from paybybank.core.state import PayByBankState

logger = get_logger(__name__)


class ApiClient:
    """Thin aiohttp wrapper that never raises.

    Every failure is logged and reported as None so the flows can turn
    it into a named error.
    """

    def __init__(self, endpoint: str, timeout: float | None = None):
        # Name of the settings field holding the base URL, resolved per request
        # so a later PayByBank.configure(environment=...) takes effect.
        self.endpoint = endpoint
        self.timeout = timeout

    @property
    def base_url(self) -> str:
        return settings.url_for(self.endpoint, PayByBankState.environment)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if PayByBankState.access_token:
            headers["Authorization"] = f"Bearer {PayByBankState.access_token}"
        return headers

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.timeout or settings.http_timeout)

    def _url(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str) -> dict[str, Any] | None:
        return await self._request_json("GET", path)

    async def post_json(self, path: str, body: dict[str, Any]) -> dict[str, Any] | None:
        return await self._request_json("POST", path, json=body)

    async def post_form(self, path: str, form: dict[str, str]) -> dict[str, Any] | None:
        return await self._request_json("POST", path, data=form)

    async def delete(self, path: str) -> bool | None:
        """Send DELETE. True on 2xx, False on other statuses, None on transport errors."""
        url = self._url(path)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.delete(
                    url,
                    headers=self._headers(),
                    timeout=self._timeout(),
                ) as response:
                    if 200 <= response.status < 300:
                        return True
                    logger.error("DELETE %s failed: HTTP %d", url, response.status)
                    return False
        except aiohttp.ClientError as e:
            logger.error("DELETE %s failed: %s: %s", url, type(e).__name__, e)
            return None
        except TimeoutError:
            logger.error("DELETE %s timed out", url)
            return None

    async def _request_json(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> dict[str, Any] | None:
        url = self._url(path)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(
                    method,
                    url,
                    headers=self._headers(),
                    timeout=self._timeout(),
                    **kwargs,
                ) as response:
                    if not 200 <= response.status < 300:
                        # Prefer the API's own message when it sends one
                        try:
                            error_data = await response.json()
                            error_msg = error_data.get("message") or error_data.get("detail") or f"HTTP {response.status}"
                        except (aiohttp.ClientError, ValueError, AttributeError):
                            error_msg = f"HTTP {response.status}"
                        logger.error("%s %s failed: %s", method, url, error_msg)
                        return None

                    data = await response.json()
                    if not isinstance(data, dict):
                        logger.error("%s %s returned a non-object body", method, url)
                        return None
                    return data
        except aiohttp.ClientError as e:
            logger.error("%s %s failed: %s: %s", method, url, type(e).__name__, e)
            return None
        except TimeoutError:
            logger.error("%s %s timed out", method, url)
            return None
        except ValueError as e:
            logger.error("%s %s returned invalid JSON: %s", method, url, e)
            return None
