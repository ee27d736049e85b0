from __future__ import annotations

import httpx

from .base import EndpointGroup


class CodesOfConductClient(EndpointGroup):
    async def get_all_codes_of_conduct(self) -> httpx.Response:
        """https://docs.github.com/rest/codes-of-conduct/codes-of-conduct#get-all-codes-of-conduct"""
        return await self._requester.get("/codes_of_conduct")

    async def get_code_of_conduct(self, key: str) -> httpx.Response:
        """https://docs.github.com/rest/codes-of-conduct/codes-of-conduct#get-a-code-of-conduct"""
        return await self._requester.get(
            "/codes_of_conduct/{key}",
            replace={"key": key},
        )
