import httpx
import pytest
from groww_connect.config import BASE_URL, ClientOptions
from groww_connect.exceptions import InvalidArgumentError


def test_defaults():
    opts = ClientOptions.from_config(None)
    assert opts.base_url == BASE_URL
    assert opts.timeout == 30.0
    assert opts.connect_timeout == 10.0
    assert opts.verify is True


def test_overrides():
    opts = ClientOptions.from_config({
        "base_url": "https://sandbox.example.com/v1",
        "timeout": 5,
        "connect_timeout": 2,
        "verify": False,
    })
    assert opts.base_url == "https://sandbox.example.com/v1"
    assert opts.verify is False


def test_httpx_timeout():
    timeout = ClientOptions(timeout=30, connect_timeout=10).httpx_timeout
    assert isinstance(timeout, httpx.Timeout)
    assert timeout.connect == 10
    assert timeout.read == 30


def test_unknown_key_rejected():
    with pytest.raises(InvalidArgumentError, match="Invalid client options"):
        ClientOptions.from_config({"retries": 10})


def test_non_positive_timeout_rejected():
    with pytest.raises(InvalidArgumentError):
        ClientOptions.from_config({"timeout": 0})


def test_options_instance_passes_through():
    opts = ClientOptions(verify=False)
    assert ClientOptions.from_config(opts) is opts


def test_frozen():
    opts = ClientOptions()
    with pytest.raises(Exception):
        opts.timeout = 1
