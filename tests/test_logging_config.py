"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest

from nametree.schemas import Node
from nametree.search import find_node_by_name
from nametree.utils.logging_config import ExtraFormatter, configure_logging, get_logger


class TestExtraFormatter:
    """Tests for ExtraFormatter."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("nametree.test", logging.INFO, __file__, 1, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_appends_extra_fields(self) -> None:
        """Extra fields are rendered sorted as key=value pairs."""
        formatter = ExtraFormatter("%(message)s")

        output = formatter.format(self._record(target="B", nodes=3))

        assert output == "hello [nodes=3 target='B']"

    def test_plain_message_without_extra(self) -> None:
        """Records without extra fields are left unchanged."""
        formatter = ExtraFormatter("%(levelname)s %(message)s")

        assert formatter.format(self._record()) == "INFO hello"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_installs_single_handler(self) -> None:
        """Repeated configuration does not stack handlers."""
        logger = logging.getLogger("nametree")
        before = list(logger.handlers)
        try:
            configure_logging("DEBUG")
            configure_logging("DEBUG")

            added = [handler for handler in logger.handlers if handler not in before]
            assert len(added) <= 1
            assert logger.level == logging.DEBUG
        finally:
            for handler in list(logger.handlers):
                if handler not in before:
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_get_logger_is_namespaced(self) -> None:
        """Module loggers live under the package logger."""
        assert get_logger("nametree.search").parent is logging.getLogger("nametree")


def test_search_logs_outcome(caplog: pytest.LogCaptureFixture) -> None:
    """Search reports its outcome at DEBUG with the target name."""
    root = Node(name="A", children=[Node(name="B")])

    with caplog.at_level(logging.DEBUG, logger="nametree.search"):
        find_node_by_name(root, "B")
        find_node_by_name(root, "Z")

    messages = [(record.getMessage(), record.target) for record in caplog.records]
    assert ("Node found", "B") in messages
    assert ("No node matched", "Z") in messages
