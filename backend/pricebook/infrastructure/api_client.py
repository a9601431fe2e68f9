"""API Client — httpx-based fetch_api collaborator used by the page controller.

Invariants:
    - Calls are JSON in, JSON out; 204 / empty bodies return None
    - Non-2xx responses raise ApiRequestError carrying the server's error message
    - Transport failures (connect, timeout) raise ApiRequestError with no status

Design Decisions:
    - Callable object (await client(path, method=..., json=...)): the page only
      needs a function, tests swap in a plain async function or an ASGI transport
    - One AsyncClient per ApiClient; close via aclose() or `async with`
"""

import logging
from typing import Any

import httpx

from pricebook.core.errors import ApiRequestError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Request failed with status {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"Request failed with status {response.status_code}"


class ApiClient:
    """Async JSON HTTP client bound to the API base URL."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __call__(
        self, path: str, method: str = "GET", json: Any = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error(
                f"API request {method} {path} failed: {e}",
                extra={"method": method, "path": path},
            )
            raise ApiRequestError(f"Network error: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                f"API request {method} {path} returned {response.status_code}",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise ApiRequestError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
