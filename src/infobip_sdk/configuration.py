"""Client configuration: where to send requests and how to authenticate.

Exactly one credential mode must be set:

  - api_key      → ``Authorization: App <key>`` (prefix configurable)
  - bearer_token → ``Authorization: Bearer <token>``
  - basic_auth   → HTTP Basic with username and password

The SDK never reads the environment itself; applications build a
Configuration from whatever source they use for secrets.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, model_validator


class ApiKey(BaseModel):
    key: str
    prefix: str = "App"

    def header_value(self) -> str:
        return f"{self.prefix} {self.key}" if self.prefix else self.key


class BasicAuth(BaseModel):
    username: str
    password: str = ""


class Configuration(BaseModel):
    """Base URL, credentials and transport timeout shared by all clients."""

    base_url: str
    api_key: ApiKey | None = None
    bearer_token: str | None = None
    basic_auth: BasicAuth | None = None
    timeout_seconds: float = 30.0

    @model_validator(mode="after")
    def _exactly_one_credential(self) -> Configuration:
        modes = [
            name
            for name, value in (
                ("api_key", self.api_key),
                ("bearer_token", self.bearer_token),
                ("basic_auth", self.basic_auth),
            )
            if value is not None
        ]
        if len(modes) != 1:
            found = ", ".join(modes) or "none"
            raise ValueError(
                f"Exactly one of api_key, bearer_token or basic_auth must be set (got: {found})"
            )
        return self

    @classmethod
    def with_api_key(cls, base_url: str, key: str, prefix: str = "App") -> Configuration:
        return cls(base_url=base_url, api_key=ApiKey(key=key, prefix=prefix))

    @classmethod
    def with_bearer_token(cls, base_url: str, token: str) -> Configuration:
        return cls(base_url=base_url, bearer_token=token)

    @classmethod
    def with_basic_auth(cls, base_url: str, username: str, password: str) -> Configuration:
        return cls(base_url=base_url, basic_auth=BasicAuth(username=username, password=password))

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the credential, empty for basic auth."""
        if self.api_key is not None:
            return {"Authorization": self.api_key.header_value()}
        if self.bearer_token is not None:
            return {"Authorization": f"Bearer {self.bearer_token}"}
        return {}

    def httpx_auth(self) -> httpx.Auth | None:
        """Auth flow for httpx, set only for basic credentials."""
        if self.basic_auth is not None:
            return httpx.BasicAuth(self.basic_auth.username, self.basic_auth.password)
        return None
