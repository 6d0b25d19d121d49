"""
Tests for the process-wide shared Logger (linewalker/instance.py).
"""

import pytest
from conftest import make_console, screen_of

from linewalker import LogLevel, OverwriteMode, instance


@pytest.fixture(autouse=True)
def fresh_shared_logger(monkeypatch):
    """Every test starts and ends without a shared instance.

    The default Logger renders to the shared stdout console, so point it at an
    in-memory one.
    """
    instance.shutdown()
    monkeypatch.setattr("linewalker.logger.default_console", make_console())
    yield
    instance.shutdown()


class TestGetInstance:
    def test_lazily_created_once(self):
        first = instance.get_instance()
        second = instance.get_instance()
        assert first is second

    def test_shutdown_twice_is_safe(self):
        instance.get_instance().log("x")
        instance.shutdown()
        instance.shutdown()

    def test_shutdown_without_instance_is_a_no_op(self):
        instance.shutdown()

    def test_fresh_instance_after_shutdown(self):
        old = instance.get_instance()
        for i in range(10):
            old.log(f"line {i}")
        instance.shutdown()
        assert old.closed

        new = instance.get_instance()
        assert new is not old
        assert new.queue_count == 0
        assert new.rendered_count == 0

    def test_shutdown_drains_queue(self):
        logger = instance.get_instance()
        for i in range(50):
            instance.log(f"record {i}")
        instance.shutdown()
        assert logger.rendered_count == 50


class TestModuleLevelLogging:
    def test_log_goes_through_shared_instance(self):
        logger = instance.get_instance()
        instance.log("hello")
        instance.warning("careful")
        instance.shutdown()
        assert screen_of(logger._renderer.console).lines == ["hello", "careful"]

    def test_log_after_shutdown_creates_new_instance(self):
        first = instance.get_instance()
        instance.shutdown()
        instance.info("resurrected")
        second = instance.get_instance()
        assert second is not first
        instance.shutdown()
        assert screen_of(second._renderer.console).lines == ["resurrected"]

    def test_level_helpers(self):
        console = make_console()
        logger = instance.configure(console=console, min_level=LogLevel.TRACE, overwrite="ansi", color=False)
        instance.trace("t")
        instance.debug("d")
        instance.info("i")
        instance.warning("w")
        instance.error("e")
        instance.critical("c")
        instance.shutdown()
        assert screen_of(console).lines == ["t", "d", "i", "w", "e", "c"]
        assert logger.rendered_count == 6


class TestConfigure:
    def test_configure_replaces_and_drains_previous(self):
        old = instance.get_instance()
        old.log("pending")
        new = instance.configure(console=make_console(), min_level="warning", overwrite=OverwriteMode.ANSI, color=False)
        assert old.closed
        assert old.rendered_count == 1
        assert instance.get_instance() is new
        assert new.min_level is LogLevel.WARNING

    def test_in_place_update_through_shared_logger(self):
        console = make_console()
        instance.configure(console=console, min_level="trace", overwrite="ansi", color=False)
        instance.log("Update me!", LogLevel.WARNING)
        instance.log("Update me again!", LogLevel.WARNING, update_previous=True)
        instance.log("Finished!", update_previous=True)
        instance.log("DONE!")
        instance.shutdown()
        assert screen_of(console).lines == ["Finished!", "DONE!"]
