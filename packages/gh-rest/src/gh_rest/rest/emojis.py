from __future__ import annotations

import httpx

from .base import EndpointGroup


class EmojisClient(EndpointGroup):
    async def get_emojis(self) -> httpx.Response:
        """Get emojis.

        https://docs.github.com/rest/emojis/emojis#get-emojis
        """
        return await self._requester.get("/emojis")
