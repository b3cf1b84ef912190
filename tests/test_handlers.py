"""Tests for handlers and formatters"""

import io
import json
from datetime import datetime

import pytest

from logtree import LogLevel, LogRecord
from logtree.formatters import TextFormatter, JSONFormatter, CompactFormatter
from logtree.handlers import ConsoleHandler, FileHandler, MemoryHandler


def make_record(**kwargs):
    values = dict(
        logger_name="svc.db",
        message="query done",
        level=LogLevel.WARN,
        timestamp=datetime(2024, 1, 2, 3, 4, 5, 678000),
    )
    values.update(kwargs)
    return LogRecord(**values)


class TestConsoleHandler:
    """Test console output."""

    def test_plain_output(self):
        stream = io.StringIO()
        handler = ConsoleHandler(colored=False, stream=stream)
        record = make_record()
        handler.publish(record)
        assert stream.getvalue() == str(record) + "\n"

    def test_colored_output(self):
        stream = io.StringIO()
        handler = ConsoleHandler(colored=True, stream=stream)
        handler.publish(make_record(level=LogLevel.ERROR))
        output = stream.getvalue()
        assert output.startswith(LogLevel.ERROR.color_code)
        assert LogLevel.ERROR.reset_code in output

    def test_formatter_disables_color(self):
        stream = io.StringIO()
        handler = ConsoleHandler(stream=stream, formatter=TextFormatter("{level}|{message}"))
        handler.publish(make_record())
        assert stream.getvalue() == "WARN|query done\n"

    def test_default_name(self):
        assert ConsoleHandler().get_name() == "ConsoleHandler"
        assert ConsoleHandler(name="stderr").get_name() == "stderr"


class TestFileHandler:
    """Test file output."""

    def test_writes_lines(self, tmp_path):
        path = tmp_path / "nested" / "app.log"
        handler = FileHandler(str(path), formatter=TextFormatter("{message}"))
        handler.publish(make_record(message="one"))
        handler.publish(make_record(message="two"))
        handler.close()
        assert path.read_text(encoding="utf-8") == "one\ntwo\n"

    def test_publish_after_close_dropped(self, tmp_path):
        path = tmp_path / "app.log"
        handler = FileHandler(str(path), formatter=TextFormatter("{message}"))
        handler.close()
        handler.publish(make_record())
        handler.flush()
        assert path.read_text(encoding="utf-8") == ""


class TestMemoryHandler:
    """Test in-memory record capture."""

    def test_capacity(self):
        handler = MemoryHandler(capacity=2)
        for text in ("a", "b", "c"):
            handler.publish(make_record(message=text))
        assert handler.messages() == ["b", "c"]

    def test_capacity_keeps_newest_over_many_publishes(self):
        handler = MemoryHandler(capacity=3)
        for i in range(1000):
            handler.publish(make_record(message=str(i)))
        assert handler.messages() == ["997", "998", "999"]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            MemoryHandler(capacity=0)

    def test_messages_by_level(self):
        handler = MemoryHandler()
        handler.publish(make_record(message="low", level=LogLevel.DEBUG))
        handler.publish(make_record(message="high", level=LogLevel.FATAL))
        assert handler.messages(LogLevel.ERROR) == ["high"]

    def test_clear(self):
        handler = MemoryHandler()
        handler.publish(make_record())
        handler.clear()
        assert handler.records == []


class TestTextFormatter:
    """Test template formatting."""

    def test_default_template(self):
        text = TextFormatter().format(make_record())
        assert text == "[2024-01-02 03:04:05.678] [WARN ] [svc.db] query done"

    def test_missing_timestamp(self):
        text = TextFormatter("{timestamp} {message}").format(make_record(timestamp=None))
        assert text == "- query done"

    def test_index_placeholder(self):
        formatter = TextFormatter("{index}:{message}")
        assert formatter.format(make_record(index=9)) == "9:query done"
        assert formatter.format(make_record()) == ":query done"

    def test_root_logger_name(self):
        assert TextFormatter("{logger}").format(make_record(logger_name="")) == "root"

    def test_unknown_placeholder(self):
        text = TextFormatter("{nope}").format(make_record())
        assert text.startswith("[FORMAT ERROR")
        assert "query done" in text


class TestJSONFormatter:
    """Test JSON formatting."""

    def test_fields(self):
        data = json.loads(JSONFormatter().format(make_record(index=3)))
        assert data["level"] == "WARN"
        assert data["logger"] == "svc.db"
        assert data["message"] == "query done"
        assert data["index"] == 3
        assert data["timestamp"].startswith("2024-01-02T03:04:05")
        assert "thread_id" in data

    def test_null_timestamp_and_no_index(self):
        formatter = JSONFormatter(include_thread_info=False)
        data = json.loads(formatter.format(make_record(timestamp=None)))
        assert data["timestamp"] is None
        assert "index" not in data
        assert "thread_name" not in data


class TestCompactFormatter:
    """Test compact formatting."""

    def test_compact(self):
        formatter = CompactFormatter(include_logger=True)
        assert formatter.format(make_record(index=2)) == "03:04:05 [svc.db] #2 WRN: query done"

    def test_without_timestamp(self):
        formatter = CompactFormatter()
        assert formatter.format(make_record(timestamp=None, level=LogLevel.ALERT)) == "ALR: query done"
