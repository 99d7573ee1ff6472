"""Project-wide exception hierarchy for normalized error handling."""

DEFAULT_ERROR_CODE = "GA000"
DEFAULT_WAIT_TIME = 60


class GrowwConnectError(Exception):
    """Base exception for all groww-connect errors."""

    retryable: bool = False


class GrowwApiError(GrowwConnectError):
    """Failure reported by the Groww API or by the HTTP transport."""

    retryable = False

    def __init__(
        self,
        message: str = "",
        code: str = DEFAULT_ERROR_CODE,
        status_code: int | None = None,
    ):
        """Create an error with the broker error code and optional HTTP status."""
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class GrowwRateLimitError(GrowwApiError):
    """Broker rate-limit rejection; caller should wait ``wait_time`` seconds."""

    retryable = True

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        code: str = "GA003",
        wait_time: int = DEFAULT_WAIT_TIME,
        status_code: int | None = None,
    ):
        super().__init__(message, code, status_code)
        self.wait_time = wait_time


class InvalidArgumentError(GrowwConnectError, ValueError):
    """Caller input failed local validation; nothing was sent to the broker."""

    retryable = False
