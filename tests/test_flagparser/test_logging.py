import json
import logging

import pytest
from rich.logging import RichHandler

from flagparser.parser import new_parser
from flagparser.utils import setup_logging, trace_level_from_env


@pytest.fixture(autouse=True)
def restore_loggers(monkeypatch):
    monkeypatch.delenv("FLAGPARSER_TRACE", raising=False)
    root = logging.getLogger()
    package = logging.getLogger("flagparser")
    handlers = list(root.handlers)
    root_level, package_level = root.level, package.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package.setLevel(package_level)


def parse_verbose():
    new_parser().add_option_with_argument_none("v", "verbose").parse(["-v"])


def read_json_log(path):
    for handler in logging.getLogger().handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_cli_mode_installs_rich_handler():
    setup_logging(mode="cli", console_log_level=logging.INFO)
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO


def test_json_mode_from_environment(monkeypatch):
    monkeypatch.setenv("FLAGPARSER_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert not isinstance(handler, RichHandler)
    assert type(handler.formatter).__name__ == "JsonFormatter"


def test_invalid_mode_keeps_existing_handlers():
    before = list(logging.getLogger().handlers)
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging(mode="xml")
    assert logging.getLogger().handlers == before


def test_parse_trace_is_off_by_default(tmp_path):
    log_file = tmp_path / "flagparser.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    assert logging.getLogger("flagparser").level == logging.INFO
    parse_verbose()
    assert read_json_log(log_file) == []


def test_parse_trace_to_json_file(tmp_path):
    log_file = tmp_path / "flagparser.log"
    setup_logging(
        mode="cli",
        log_filename=str(log_file),
        json_log_to_file=True,
        trace_level=logging.DEBUG,
    )
    parse_verbose()

    records = read_json_log(log_file)
    assert records
    assert {record["name"] for record in records} == {"flagparser"}
    assert any("Processing token" in record["message"] for record in records)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", logging.DEBUG),
        ("true", logging.DEBUG),
        (" Debug ", logging.DEBUG),
        ("0", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_trace_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("FLAGPARSER_TRACE", value)
    assert trace_level_from_env() == expected


def test_trace_enabled_from_environment(monkeypatch):
    monkeypatch.setenv("FLAGPARSER_TRACE", "1")
    setup_logging(mode="json")
    assert logging.getLogger("flagparser").level == logging.DEBUG


def test_parse_traces_tokens(caplog):
    with caplog.at_level(logging.DEBUG, logger="flagparser"):
        new_parser().add_option_with_argument_required("o", "output").parse(
            ["--output=index.html"]
        )
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Processing token") for message in messages)
    assert any("optname='output'" in message for message in messages)
