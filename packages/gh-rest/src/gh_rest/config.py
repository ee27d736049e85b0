from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"


class ClientConfig(BaseModel):
    """Connection settings shared by every request a client issues."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    user_agent: str = "gh-rest"
    accept: str = "application/vnd.github+json"
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value

    @classmethod
    def from_env(cls) -> "ClientConfig":
        overrides: dict[str, str] = {}
        for field, env_name in (
            ("base_url", "GH_REST_BASE_URL"),
            ("api_version", "GH_REST_API_VERSION"),
            ("timeout", "GH_REST_TIMEOUT"),
        ):
            value = os.getenv(env_name)
            if value:
                overrides[field] = value
        return cls(**overrides)
