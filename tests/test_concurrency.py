"""Tests for concurrent logging and handler mutation"""

import threading
import time

from logtree import LogManager, LogLevel
from logtree.handlers import LogHandler, MemoryHandler


class SlowHandler(LogHandler):
    """Handler that sleeps briefly to widen race windows."""

    def __init__(self, delay=0.001):
        super().__init__(name="slow")
        self.delay = delay
        self.count = 0
        self._lock = threading.Lock()

    def publish(self, record):
        time.sleep(self.delay)
        with self._lock:
            self.count += 1


def run_threads(targets, timeout=10.0):
    threads = [threading.Thread(target=t) for t in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout)
    return [thread for thread in threads if thread.is_alive()]


class TestConcurrentLogging:
    """Test thread safety of dispatch and handler lists."""

    def test_parallel_logging_reaches_root(self):
        manager = LogManager(root_level=LogLevel.DEBUG)
        handler = MemoryHandler()
        manager.get_root().add_handler(handler)
        logger = manager.get_instance("svc.worker")

        def work():
            for i in range(200):
                logger.info("item %d", i)

        stuck = run_threads([work] * 8)
        assert stuck == []
        assert len(handler.records) == 1600

    def test_mutation_during_dispatch(self):
        manager = LogManager(root_level=LogLevel.DEBUG)
        root = manager.get_root()
        kept = MemoryHandler(name="kept")
        root.add_handler(kept)
        logger = manager.get_instance("svc")
        stop = threading.Event()

        def log():
            for i in range(300):
                logger.info("msg %d", i)

        def mutate():
            while not stop.is_set():
                extra = MemoryHandler(name="extra")
                root.add_handler(extra)
                root.get_handlers()
                root.remove_handler_by_name("extra")

        mutator = threading.Thread(target=mutate)
        mutator.start()
        try:
            stuck = run_threads([log] * 4)
        finally:
            stop.set()
            mutator.join(10.0)

        assert stuck == []
        assert not mutator.is_alive()
        assert len(kept.records) == 1200
        assert all(r.level == LogLevel.INFO for r in kept.records)
        assert [h.get_name() for h in root.get_handlers()] == ["kept"]

    def test_no_deadlock_across_branches(self):
        manager = LogManager(root_level=LogLevel.DEBUG)
        slow = SlowHandler()
        for name in ("", "a", "a.b", "c", "c.d"):
            manager.get_instance(name).add_handler(slow)
        leaves = [manager.get_instance(name) for name in ("a.b", "c.d", "a", "c")]

        def work(logger):
            return lambda: [logger.warn("tick") for _ in range(20)]

        stuck = run_threads([work(leaf) for leaf in leaves])
        assert stuck == []
        # a.b and c.d reach 3 loggers each, a and c reach 2 each
        assert slow.count == 20 * (3 + 3 + 2 + 2)

    def test_level_change_while_logging(self):
        manager = LogManager(root_level=LogLevel.WARN)
        handler = MemoryHandler()
        manager.get_root().add_handler(handler)
        logger = manager.get_instance("svc")

        def log():
            for _ in range(500):
                logger.info("maybe")

        def toggle():
            for i in range(500):
                manager.get_root().set_level(LogLevel.DEBUG if i % 2 else LogLevel.WARN)

        stuck = run_threads([log, log, toggle])
        assert stuck == []
        assert all(r.message == "maybe" for r in handler.records)
