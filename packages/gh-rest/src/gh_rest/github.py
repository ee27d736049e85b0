from __future__ import annotations

import httpx
from aiolimiter import AsyncLimiter

from .client import GitHubRestClient, RequestFunc
from .config import ClientConfig
from .rest import (
    CodesOfConductClient,
    EmojisClient,
    GitignoreClient,
    LicensesClient,
    MetaClient,
    RateLimitClient,
)


class GitHub:
    """Entry point grouping the REST endpoint clients over one connection.

    Every group shares the same `GitHubRestClient`, so token, base URL and
    headers are configured once:

        async with GitHub(token) as gh:
            response = await gh.gitignore.get_gitignore_template("Python")
    """

    def __init__(
        self,
        token: str,
        config: ClientConfig | None = None,
        *,
        request_func: RequestFunc | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        limiter: AsyncLimiter | None = None,
    ) -> None:
        self.rest = GitHubRestClient(
            token,
            config,
            request_func=request_func,
            transport=transport,
            limiter=limiter,
        )

    async def __aenter__(self) -> "GitHub":
        await self.rest.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.rest.__aexit__(exc_type, exc, tb)

    async def aclose(self) -> None:
        await self.rest.aclose()

    @property
    def emojis(self) -> EmojisClient:
        return EmojisClient(self.rest)

    @property
    def gitignore(self) -> GitignoreClient:
        return GitignoreClient(self.rest)

    @property
    def rate_limit(self) -> RateLimitClient:
        return RateLimitClient(self.rest)

    @property
    def meta(self) -> MetaClient:
        return MetaClient(self.rest)

    @property
    def codes_of_conduct(self) -> CodesOfConductClient:
        return CodesOfConductClient(self.rest)

    @property
    def licenses(self) -> LicensesClient:
        return LicensesClient(self.rest)
