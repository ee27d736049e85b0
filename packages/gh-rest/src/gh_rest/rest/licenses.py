from __future__ import annotations

import httpx

from .base import EndpointGroup


class LicensesClient(EndpointGroup):
    async def get_all_commonly_used_licenses(
        self,
        featured: bool | None = None,
        per_page: int = 100,
        page: int | None = None,
    ) -> httpx.Response:
        """Get all commonly used licenses.

        Fetches a single page; callers walk further pages themselves.

        https://docs.github.com/rest/licenses/licenses#get-all-commonly-used-licenses
        """
        return await self._requester.get(
            "/licenses",
            params={
                "featured": None if featured is None else str(featured).lower(),
                "per_page": per_page,
                "page": page,
            },
        )

    async def get_license(self, license: str) -> httpx.Response:
        """https://docs.github.com/rest/licenses/licenses#get-a-license"""
        return await self._requester.get(
            "/licenses/{license}",
            replace={"license": license},
        )

    async def get_repository_license(self, owner: str, repo: str) -> httpx.Response:
        """https://docs.github.com/rest/licenses/licenses#get-the-license-for-a-repository"""
        return await self._requester.get(
            "/repos/{owner}/{repo}/license",
            replace={"owner": owner, "repo": repo},
        )
