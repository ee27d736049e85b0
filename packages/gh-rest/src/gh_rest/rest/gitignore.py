from __future__ import annotations

import httpx

from .base import EndpointGroup


class GitignoreClient(EndpointGroup):
    async def get_all_gitignore_templates(self) -> httpx.Response:
        """Get all gitignore templates.

        https://docs.github.com/rest/gitignore/gitignore#get-all-gitignore-templates
        """
        return await self._requester.get("/gitignore/templates")

    async def get_gitignore_template(self, name: str) -> httpx.Response:
        """Get a gitignore template.

        `name` is inserted literally; "C++" stays "C++".

        https://docs.github.com/rest/gitignore/gitignore#get-a-gitignore-template
        """
        return await self._requester.get(
            "/gitignore/templates/{name}",
            replace={"name": name},
        )
