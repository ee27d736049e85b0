import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

import httpx
import typer
from rich.console import Console

from ..auth import gh_hostname, select_auth_token
from ..config import ClientConfig
from ..github import GitHub
from ..logging_setup import setup_logging

app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)
console = Console()
err_console = Console(stderr=True)


@dataclass(frozen=True)
class CliState:
    token: str | None
    config: ClientConfig


def build_client(token: str, config: ClientConfig) -> GitHub:
    return GitHub(token, config)


@app.callback()
def main(
    ctx: typer.Context,
    token: str | None = typer.Option(
        None,
        envvar="GH_REST_TOKEN",
        help="API token (defaults to `gh auth token`, GH_TOKEN or GITHUB_TOKEN)",
    ),
    base_url: str | None = typer.Option(None, help="API base URL"),
    log_level: str | None = typer.Option(
        None, help="Log level (defaults to LOG_LEVEL or INFO)"
    ),
):
    """Query GitHub REST endpoints and print the raw response."""
    setup_logging(log_level)
    config = ClientConfig.from_env()
    if base_url:
        config = ClientConfig(**{**config.model_dump(), "base_url": base_url})
    ctx.obj = CliState(token=token, config=config)


def _run(
    ctx: typer.Context, call: Callable[[GitHub], Awaitable[httpx.Response]]
) -> None:
    state: CliState = ctx.obj
    try:
        token = state.token or select_auth_token(gh_hostname(state.config.base_url))
    except RuntimeError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    async def _go() -> httpx.Response:
        async with build_client(token, state.config) as gh:
            return await call(gh)

    response = asyncio.run(_go())
    _emit(response)


def _emit(response: httpx.Response) -> None:
    if response.status_code >= 400:
        err_console.print(f"[red]HTTP {response.status_code}[/red]")
        err_console.print(response.text, markup=False)
        raise typer.Exit(code=1)
    try:
        data = response.json()
    except ValueError:
        console.print(response.text, markup=False, highlight=False)
        return
    console.print_json(data=data)


@app.command()
def emojis(ctx: typer.Context):
    """List emoji names and their image URLs."""
    _run(ctx, lambda gh: gh.emojis.get_emojis())


@app.command()
def gitignore_templates(ctx: typer.Context):
    """List available gitignore template names."""
    _run(ctx, lambda gh: gh.gitignore.get_all_gitignore_templates())


@app.command()
def gitignore_template(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Template name, e.g. Python"),
):
    """Show one gitignore template."""
    _run(ctx, lambda gh: gh.gitignore.get_gitignore_template(name))


@app.command()
def rate_limit(ctx: typer.Context):
    """Show rate limit status for the authenticated identity."""
    _run(ctx, lambda gh: gh.rate_limit.get_rate_limit_status())


@app.command()
def zen(ctx: typer.Context):
    """Print the Zen of GitHub."""
    _run(ctx, lambda gh: gh.meta.get_zen())
