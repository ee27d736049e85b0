from __future__ import annotations

import httpx

from .base import EndpointGroup


class RateLimitClient(EndpointGroup):
    async def get_rate_limit_status(self) -> httpx.Response:
        """Get rate limit status for the authenticated user.

        https://docs.github.com/rest/rate-limit/rate-limit#get-rate-limit-status-for-the-authenticated-user
        """
        return await self._requester.get("/rate_limit")
