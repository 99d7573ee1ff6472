import pytest
from groww_connect.exceptions import (
    GrowwApiError, GrowwConnectError, GrowwRateLimitError, InvalidArgumentError,
)


def test_api_error_fields():
    e = GrowwApiError("Test error message", "GA001")
    assert e.message == "Test error message"
    assert e.code == "GA001"
    assert e.status_code is None


def test_api_error_defaults():
    e = GrowwApiError()
    assert e.message == ""
    assert e.code == "GA000"


def test_api_error_str_includes_code():
    assert str(GrowwApiError("Test error message", "GA001")) == "[GA001] Test error message"


def test_api_error_chaining():
    cause = RuntimeError("previous")
    try:
        raise GrowwApiError("Test error", "GA001") from cause
    except GrowwApiError as e:
        assert e.__cause__ is cause


def test_rate_limit_defaults():
    e = GrowwRateLimitError()
    assert e.message == "Rate limit exceeded"
    assert e.code == "GA003"
    assert e.wait_time == 60


def test_rate_limit_custom_wait_time():
    e = GrowwRateLimitError("Custom message", "GA003", 120, status_code=429)
    assert e.wait_time == 120
    assert e.status_code == 429


def test_rate_limit_is_api_error():
    assert isinstance(GrowwRateLimitError(), GrowwApiError)
    assert GrowwRateLimitError.retryable is True
    assert GrowwApiError.retryable is False


def test_invalid_argument_is_not_api_error():
    e = InvalidArgumentError("bad input")
    assert isinstance(e, GrowwConnectError)
    assert isinstance(e, ValueError)
    assert not isinstance(e, GrowwApiError)
    with pytest.raises(ValueError):
        raise e
