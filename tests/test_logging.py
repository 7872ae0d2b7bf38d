"""Tests for the logging module."""

import pytest

from breakout.logging import (
    LogLevel,
    configure_logging,
    disable_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _restore(restore_logging):
    yield


class TestGetLogger:

    def test_cached(self):
        assert get_logger('game_mode') is get_logger('game_mode')

    def test_format(self, capsys):
        configure_logging(level='INFO')
        get_logger('unit').info("score %d", 7)
        assert capsys.readouterr().err.strip() == "[unit] INFO: score 7"

    def test_bad_format_args_still_logged(self, capsys):
        configure_logging(level='INFO')
        get_logger('unit').info("no placeholders", 1)
        assert "no placeholders (1,)" in capsys.readouterr().err


class TestLevels:

    def test_below_level_suppressed(self, capsys):
        configure_logging(level='WARNING')
        get_logger('unit').info("hidden")
        assert capsys.readouterr().err == ""

    def test_module_override(self, capsys):
        configure_logging(level='WARNING', modules={'player': 'TRACE'})
        get_logger('player').trace("wall")
        get_logger('other').debug("hidden")
        err = capsys.readouterr().err
        assert "[player] TRACE: wall" in err
        assert "hidden" not in err

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level='LOUD')
        assert get_logger('unit').level == LogLevel.INFO

    def test_disable(self, capsys):
        disable_logging()
        get_logger('unit').critical("hidden")
        assert capsys.readouterr().err == ""

    def test_exception_includes_traceback(self, capsys):
        configure_logging(level='INFO')
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger('unit').exception("failed")
        err = capsys.readouterr().err
        assert "[unit] ERROR: failed" in err
        assert "RuntimeError: boom" in err
