"""Tests for status logger."""

import logging

from colourado.core.logging_utils import StatusLogger, get_logger


class TestStatusLogger:
    """Tests for StatusLogger prefixes and verbosity."""

    def _logger(self, caplog, verbose=True):
        status = StatusLogger(name="status.test", verbose=verbose)
        # Route records through caplog instead of the private handler
        status._logger.propagate = True
        caplog.set_level(logging.INFO, logger="status.test")
        return status

    def test_prefixes(self, caplog):
        status = self._logger(caplog)
        status.success("done")
        status.warning("careful")
        status.info("plain")
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["[OK] done", "[WARNING] careful", "plain"]

    def test_quiet_suppresses_info(self, caplog):
        status = self._logger(caplog, verbose=False)
        status.info("hidden")
        status.success("hidden too")
        status.header("hidden header")
        status.warning("shown")
        assert [r.getMessage() for r in caplog.records] == ["[WARNING] shown"]

    def test_header(self, caplog):
        status = self._logger(caplog)
        status.header("Title", width=5)
        assert [r.getMessage() for r in caplog.records] == ["=====", "Title", "====="]

    def test_get_logger_shared(self):
        first = get_logger()
        second = get_logger(verbose=False)
        assert first is second
        assert second.verbose is False
        get_logger(verbose=True)
