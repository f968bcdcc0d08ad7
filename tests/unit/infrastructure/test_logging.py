import io
import json
import logging

import pytest

from infrastructure.adapters.logging_adapter import LoggingAdapter
from infrastructure.logging.logger import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_output_renders_positional_arguments(restore_root_logger) -> None:
    stream = io.StringIO()
    setup_logging("DEBUG", "json", stream=stream)

    LoggingAdapter("awsbind.test").info("Calling %s with %d parameters", "list_documents", 2)

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "Calling list_documents with 2 parameters"
    assert record["level"] == "info"
    assert record["logger"] == "awsbind.test"


def test_level_filters_records(restore_root_logger) -> None:
    stream = io.StringIO()
    setup_logging("WARNING", "console", stream=stream)

    get_logger("awsbind.test").info("hidden")
    get_logger("awsbind.test").warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_setup_is_idempotent(restore_root_logger) -> None:
    setup_logging("INFO", "console", stream=io.StringIO())
    setup_logging("INFO", "console", stream=io.StringIO())

    ours = [h for h in logging.getLogger().handlers if getattr(h, "_awsbind", False)]
    assert len(ours) == 1
