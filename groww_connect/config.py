"""Transport options accepted by the public clients."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from groww_connect.exceptions import InvalidArgumentError

BASE_URL = "https://api.groww.in/v1/api/apex/v1"


class ClientOptions(BaseModel):
    """Overrides for the HTTP transport defaults.

    Config keys:
      base_url:        API origin and base path
      timeout:         total request timeout in seconds (default 30)
      connect_timeout: connect timeout in seconds (default 10)
      verify:          TLS certificate verification (default True)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)
    verify: bool = True

    @classmethod
    def from_config(cls, config: dict[str, Any] | ClientOptions | None) -> ClientOptions:
        """Validate a plain config dict, raising InvalidArgumentError on bad input."""
        if isinstance(config, ClientOptions):
            return config
        try:
            return cls.model_validate(config or {})
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid client options: {exc}") from exc

    @property
    def httpx_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout, connect=self.connect_timeout)
