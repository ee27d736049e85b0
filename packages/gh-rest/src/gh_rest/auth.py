from __future__ import annotations

import logging
import os
import subprocess
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")


def gh_hostname(base_url: str) -> str | None:
    """Host to pass to `gh auth token --hostname`; None for public GitHub."""
    host = urlparse(base_url).hostname
    if host is None or host in {"api.github.com", "github.com"}:
        return None
    return host


def select_auth_token(hostname: str | None = None) -> str:
    command = ["gh", "auth", "token"]
    if hostname:
        command += ["--hostname", hostname]
    try:
        result = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
        )
        token = (result.stdout or "").strip()
        if result.returncode == 0 and token:
            logger.debug("Using token from gh CLI")
            return token
    except FileNotFoundError:
        logger.debug("gh CLI not installed")

    for env_name in TOKEN_ENV_VARS:
        token = os.getenv(env_name)
        if token:
            logger.debug("Using token from %s", env_name)
            return token

    raise RuntimeError(
        "No GitHub token found. Run `gh auth login` or set GH_TOKEN / GITHUB_TOKEN."
    )
