import logging

from groww_connect.logging_hook import MASK, RequestLogger, default_sink, redact


def test_redact_masks_sensitive_keys():
    out = redact({"api_key": "k", "Authorization": "Bearer k", "symbol": "SBIN"})
    assert out == {"api_key": MASK, "Authorization": MASK, "symbol": "SBIN"}


def test_redact_is_case_insensitive():
    assert redact({"authorization": "Bearer k", "ACCESS_TOKEN": "t"}) == {
        "authorization": MASK,
        "ACCESS_TOKEN": MASK,
    }


def test_redact_recurses_into_mappings_and_lists():
    raw = {"json": {"orders": [{"token": "t", "qty": 1}]}, "headers": {"secret": "s"}}
    assert redact(raw) == {"json": {"orders": [{"token": MASK, "qty": 1}]}, "headers": {"secret": MASK}}


def test_redact_does_not_mutate():
    raw = {"password": "p"}
    redact(raw)
    assert raw == {"password": "p"}


def test_redact_scalars_pass_through():
    assert redact("text") == "text"
    assert redact(None) is None


def test_disabled_logger_does_not_call_sink():
    calls = []
    log = RequestLogger()
    log.configure(False, lambda *a: calls.append(a))
    log.emit("debug", "hello", {})
    assert calls == []


def test_sink_receives_redacted_context():
    calls = []
    log = RequestLogger()
    log.configure(True, lambda level, message, context: calls.append((level, message, context)))
    log.emit("debug", "hello", {"api_key": "k"})
    assert calls == [("debug", "hello", {"api_key": MASK})]


def test_failing_sink_is_contained(caplog):
    def broken(level, message, context):
        raise RuntimeError("sink down")

    log = RequestLogger()
    log.configure(True, broken)
    with caplog.at_level(logging.WARNING, logger="groww_connect.transport"):
        log.emit("info", "hello")
    assert "sink down" in caplog.text


def test_default_sink_uses_stdlib_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="groww_connect.transport"):
        default_sink("warning", "Rate limit exceeded", {"code": "RL001"})
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "Rate limit exceeded" in record.getMessage()
    assert "RL001" in record.getMessage()
