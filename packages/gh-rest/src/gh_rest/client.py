from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Protocol

import httpx
from aiolimiter import AsyncLimiter

from .config import ClientConfig
from .routes import clean_data, make_replacements

logger = logging.getLogger(__name__)

RequestFunc = Callable[
    [str, str, dict | None, dict | None],
    Awaitable[httpx.Response],
]


class Requester(Protocol):
    async def get(
        self,
        route: str,
        params: Mapping[str, Any] | None = None,
        replace: Mapping[str, Any] | None = None,
    ) -> httpx.Response: ...


class GitHubRestClient:
    def __init__(
        self,
        token: str,
        config: ClientConfig | None = None,
        *,
        request_func: RequestFunc | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        limiter: AsyncLimiter | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url
        self._limiter = limiter
        self._request_func = request_func
        self._client: httpx.AsyncClient | None = None
        if request_func is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.default_headers(token, self.config),
                timeout=self.config.timeout,
                transport=transport,
            )

    @staticmethod
    def default_headers(token: str, config: ClientConfig) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": config.accept,
            "X-GitHub-Api-Version": config.api_version,
            "User-Agent": config.user_agent,
        }

    async def __aenter__(self) -> "GitHubRestClient":
        if self._client is None and self._request_func is None:
            raise RuntimeError("GitHub client unavailable.")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def get(
        self,
        route: str,
        params: Mapping[str, Any] | None = None,
        replace: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue one GET for `route` and hand back the response untouched.

        Non-2xx statuses are returned, not raised; transport failures propagate
        as `httpx` raises them.
        """
        if not route.startswith("/"):
            raise ValueError(f"Route must start with '/': {route!r}")
        path = make_replacements(route, replace)
        query = clean_data(params) or None
        logger.debug("GET %s params=%s", path, query)
        if self._limiter is not None:
            async with self._limiter:
                response = await self._request("GET", path, query)
        else:
            response = await self._request("GET", path, query)
        logger.debug("GET %s -> %s", path, response.status_code)
        return response

    async def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> httpx.Response:
        if self._request_func is not None:
            return await self._request_func(method, path, params, headers)

        if self._client is None:
            raise RuntimeError("HTTP client not initialized")
        return await self._client.request(method, path, params=params, headers=headers)
