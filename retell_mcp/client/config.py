"""Configuration for the Retell HTTP client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Settings:
    """Immutable settings loaded from environment variables."""

    api_key: str = field(repr=False)
    api_endpoint: str = "https://api.retellai.com"
    timeout: int = 60
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        api_key = os.getenv("RETELL_API_KEY", "")
        api_endpoint = os.getenv("RETELL_API_ENDPOINT", "https://api.retellai.com").rstrip("/")
        timeout = int(os.getenv("RETELL_TIMEOUT", "60"))
        log_level = os.getenv("RETELL_MCP_LOG_LEVEL", "WARNING").upper()
        return cls(
            api_key=api_key,
            api_endpoint=api_endpoint,
            timeout=timeout,
            log_level=log_level,
        )

    @property
    def base_url(self) -> str:
        return self.api_endpoint

    @property
    def headers(self) -> dict[str, str]:
        # No Content-Type here: httpx picks JSON or multipart per request.
        h: dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            h["Authorization"] = f"Bearer {self.api_key}"
        return h
