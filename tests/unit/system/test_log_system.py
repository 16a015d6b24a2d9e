"""Tests for perfpath log routing and output configuration."""

import json
import logging
import math

from perfpath.performance.drawdown import max_drawdown
from perfpath.performance.extremum import find_max_drawdown
from perfpath.system import LoggingConfig, configure_logging, reset_logging
from perfpath.system.log_system import PACKAGE_LOGGER


def output_events(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestUnconfigured:
    """Library calls before any host configuration."""

    def test_no_output_from_computation(self, capsys):
        """A plain drawdown call writes nothing to stdout or stderr."""
        max_drawdown([1.0, -5.0, 2.0])

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_no_output_from_warning(self, capsys):
        """Even warnings stay silent until output is configured."""
        result = max_drawdown([1.0, math.nan])

        assert math.isnan(result.max_drawdown)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_reach_stdlib_logging(self, caplog):
        """Events become stdlib records carrying their context as attributes."""
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            find_max_drawdown([0.0, -0.5, -1.0, -0.3, 0.8])

        records = [r for r in caplog.records if r.getMessage() == "extremum.found"]
        assert len(records) == 1
        assert records[0].name == "perfpath.performance.extremum"
        assert records[0].levelno == logging.DEBUG
        assert records[0].kind == "drawdown"
        assert records[0].start == 0
        assert records[0].end == 2

    def test_warning_level_for_not_computable(self, caplog):
        """Non-finite input is reported at WARNING."""
        with caplog.at_level(logging.WARNING, logger=PACKAGE_LOGGER):
            max_drawdown([1.0, math.inf, 2.0])

        records = [r for r in caplog.records if r.getMessage() == "drawdown.not_computable"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].periods == 3


class TestConfigureLogging:
    """Test configure_logging() and reset_logging()."""

    def test_defaults(self):
        """Default output is WARNING-level console lines with no file."""
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.format == "console"
        assert config.file_path is None

    def test_default_level_hides_debug(self, capsys):
        """Configured at WARNING, per-call diagnostics are not printed."""
        configure_logging()

        max_drawdown([1.0, -5.0, 2.0])

        assert capsys.readouterr().out == ""

    def test_console_output(self, capsys):
        """Console format prints the event name and its context."""
        configure_logging(LoggingConfig(level="WARNING", format="console"))

        max_drawdown([1.0, math.nan])

        out = capsys.readouterr().out
        assert "drawdown.not_computable" in out
        assert "periods=2" in out

    def test_json_output(self, capsys):
        """JSON format prints one object per event with level and logger name."""
        configure_logging(LoggingConfig(level="DEBUG", format="json"))

        max_drawdown([1.0, -5.0, 2.0])

        events = output_events(capsys.readouterr().out)
        found = [e for e in events if e["event"] == "extremum.found"]
        assert len(found) == 1
        assert found[0]["kind"] == "drawdown"
        assert found[0]["level"] == "debug"
        assert found[0]["logger"] == "perfpath.performance.extremum"
        assert "timestamp" in found[0]

    def test_file_output(self, tmp_path, capsys):
        """The file gets JSON lines at its own level; stdout keeps its own."""
        # Arrange
        log_file = tmp_path / "logs" / "perfpath.log"
        configure_logging(LoggingConfig(level="ERROR", file_path=log_file, file_level="DEBUG"))

        # Act
        max_drawdown([1.0, -5.0, 2.0])
        max_drawdown([1.0, math.nan])

        # Assert
        events = [e["event"] for e in output_events(log_file.read_text())]
        assert "extremum.found" in events
        assert "drawdown.not_computable" in events
        assert capsys.readouterr().out == ""

    def test_reconfigure_replaces_output(self):
        """A second call swaps handlers instead of stacking them."""
        configure_logging(LoggingConfig(level="DEBUG"))
        configure_logging(LoggingConfig(level="INFO"))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        attached = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(attached) == 1
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False

    def test_reset_restores_silence(self, capsys):
        """After reset_logging() the library is silent again."""
        configure_logging(LoggingConfig(level="DEBUG"))
        reset_logging()

        max_drawdown([1.0, -5.0, 2.0])

        assert capsys.readouterr().out == ""
        assert logging.getLogger(PACKAGE_LOGGER).propagate is True
