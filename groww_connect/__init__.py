from groww_connect.client import AsyncGrowwClient, GrowwClient
from groww_connect.config import ClientOptions
from groww_connect.exceptions import (
    GrowwApiError,
    GrowwConnectError,
    GrowwRateLimitError,
    InvalidArgumentError,
)

__all__ = [
    "AsyncGrowwClient",
    "GrowwClient",
    "ClientOptions",
    "GrowwConnectError",
    "GrowwApiError",
    "GrowwRateLimitError",
    "InvalidArgumentError",
]
