from __future__ import annotations

import httpx

from .base import EndpointGroup


class MetaClient(EndpointGroup):
    async def get_api_root(self) -> httpx.Response:
        return await self._requester.get("/")

    async def get_meta(self) -> httpx.Response:
        """Get GitHub meta information (hook and actions IP ranges, SSH keys)."""
        return await self._requester.get("/meta")

    async def get_octocat(self, s: str | None = None) -> httpx.Response:
        """Get the octocat as ASCII art, saying `s` when given."""
        return await self._requester.get("/octocat", params={"s": s})

    async def get_api_versions(self) -> httpx.Response:
        return await self._requester.get("/versions")

    async def get_zen(self) -> httpx.Response:
        return await self._requester.get("/zen")
