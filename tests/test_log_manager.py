"""Tests for the logger registry"""

import pytest

from logtree import LogManager, LogLevel, InvalidArgumentError
from logtree.handlers import LogHandler


class CountingHandler(LogHandler):
    """Handler that counts flush and close calls."""

    def __init__(self):
        super().__init__(name="counting")
        self.flushed = 0
        self.closed = 0

    def publish(self, record):
        pass

    def flush(self):
        self.flushed += 1

    def close(self):
        self.closed += 1


class FailingCloseHandler(LogHandler):
    def publish(self, record):
        pass

    def close(self):
        raise OSError("already gone")


class TestLogManager:
    """Test name lookup and tree construction."""

    def test_root(self):
        manager = LogManager(root_level=LogLevel.ERROR)
        root = manager.get_root()
        assert root.name == ""
        assert root.is_root
        assert root.parent is None
        assert root.level == LogLevel.ERROR
        assert manager.get_instance("") is root
        assert manager.get_instance(None) is root

    def test_default_root_level(self):
        assert LogManager().get_root().level == LogLevel.INFO

    def test_same_name_same_instance(self):
        manager = LogManager()
        assert manager.get_instance("svc") is manager.get_instance("svc")

    def test_ancestors_created(self):
        manager = LogManager()
        leaf = manager.get_instance("a.b.c")
        assert manager.exists("a")
        assert manager.exists("a.b")
        assert leaf.parent is manager.get_instance("a.b")
        assert leaf.parent.parent is manager.get_instance("a")
        assert leaf.parent.parent.parent is manager.get_root()

    def test_later_lookup_of_ancestor(self):
        manager = LogManager()
        child = manager.get_instance("net.http")
        parent = manager.get_instance("net")
        assert child.parent is parent

    def test_new_loggers_inherit(self):
        manager = LogManager()
        logger = manager.get_instance("svc")
        assert logger.level == LogLevel.UNSET
        assert logger.additive is True

    @pytest.mark.parametrize("name", ["a..b", ".a", "a.", "."])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidArgumentError):
            LogManager().get_instance(name)

    def test_logger_names(self):
        manager = LogManager()
        manager.get_instance("b.c")
        manager.get_instance("a")
        assert manager.get_logger_names() == ["", "a", "b", "b.c"]


class TestShutdown:
    """Test registry teardown."""

    def test_shared_handler_closed_once(self):
        manager = LogManager()
        handler = CountingHandler()
        manager.get_root().add_handler(handler)
        manager.get_instance("svc").add_handler(handler)

        manager.shutdown()

        assert handler.flushed == 1
        assert handler.closed == 1
        assert manager.closed

    def test_handlers_detached(self):
        manager = LogManager()
        root = manager.get_root()
        root.add_handler(CountingHandler())
        manager.shutdown()
        assert root.get_handlers() == []

    def test_lookup_after_shutdown_raises(self):
        manager = LogManager()
        manager.shutdown()
        with pytest.raises(InvalidArgumentError):
            manager.get_instance("svc")

    def test_root_lookup_after_shutdown_raises(self):
        manager = LogManager()
        manager.shutdown()
        with pytest.raises(InvalidArgumentError):
            manager.get_instance("")
        with pytest.raises(InvalidArgumentError):
            manager.get_instance(None)
        with pytest.raises(InvalidArgumentError):
            manager.get_root()

    def test_shutdown_twice(self):
        manager = LogManager()
        handler = CountingHandler()
        manager.get_root().add_handler(handler)
        manager.shutdown()
        manager.shutdown()
        assert handler.closed == 1

    def test_close_error_reported(self, capsys):
        manager = LogManager()
        manager.get_root().add_handler(FailingCloseHandler())
        manager.shutdown()
        assert "already gone" in capsys.readouterr().err


class TestDefaultManager:
    """Test the process-wide registry."""

    def test_default_is_shared(self):
        LogManager.shutdown_default()
        try:
            assert LogManager.get_default_manager() is LogManager.get_default_manager()
        finally:
            LogManager.shutdown_default()

    def test_shutdown_default_replaces_manager(self):
        first = LogManager.get_default_manager()
        LogManager.shutdown_default()
        assert first.closed
        second = LogManager.get_default_manager()
        assert second is not first
        LogManager.shutdown_default()
