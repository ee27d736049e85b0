"""Thin async client for a handful of GitHub REST endpoints."""

from .auth import select_auth_token
from .client import GitHubRestClient, Requester
from .config import ClientConfig
from .github import GitHub
from .routes import make_replacements

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "GitHub",
    "GitHubRestClient",
    "Requester",
    "make_replacements",
    "select_auth_token",
]
