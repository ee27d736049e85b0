import asyncio

import httpx
import pytest

from gh_rest.github import GitHub


def _echo_transport(seen):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"path": request.url.path})

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_fixed_routes_hit_documented_paths():
    seen = []
    async with GitHub("x", transport=_echo_transport(seen)) as gh:
        await gh.emojis.get_emojis()
        await gh.gitignore.get_all_gitignore_templates()
        await gh.rate_limit.get_rate_limit_status()

    assert [request.url.path for request in seen] == [
        "/emojis",
        "/gitignore/templates",
        "/rate_limit",
    ]
    assert all(request.method == "GET" for request in seen)


@pytest.mark.asyncio
async def test_named_template_path():
    seen = []
    async with GitHub("x", transport=_echo_transport(seen)) as gh:
        await gh.gitignore.get_gitignore_template("Python")
        await gh.gitignore.get_gitignore_template("C++")

    assert seen[0].url.path == "/gitignore/templates/Python"
    assert seen[1].url.path == "/gitignore/templates/C++"


@pytest.mark.asyncio
async def test_endpoint_groups_share_one_base_client():
    gh = GitHub("x", transport=_echo_transport([]))
    try:
        assert gh.emojis._requester is gh.rest
        assert gh.licenses._requester is gh.rest
    finally:
        await gh.aclose()


@pytest.mark.asyncio
async def test_concurrent_operations_are_independent():
    seen = []
    async with GitHub("x", transport=_echo_transport(seen)) as gh:
        emojis, template = await asyncio.gather(
            gh.emojis.get_emojis(),
            gh.gitignore.get_gitignore_template("Python"),
        )

    assert emojis.json() == {"path": "/emojis"}
    assert template.json() == {"path": "/gitignore/templates/Python"}
    assert sorted(request.url.path for request in seen) == [
        "/emojis",
        "/gitignore/templates/Python",
    ]
    assert {request.headers["Authorization"] for request in seen} == {"Bearer x"}
