"""
Tests for the command-line entry point
"""

import io
import logging

import pytest

from car_ledger.__main__ import build_parser, main
from car_ledger.config import CarLedgerConfig


def reset_logger(name: str) -> None:
    """Detach handlers installed by setup_logging"""
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestArgumentParsing:
    """Test program selection"""

    def test_default_program_is_cars(self):
        args = build_parser().parse_args([])
        assert args.program == "cars"
        assert args.log_level is None

    def test_bank_program_and_log_level(self):
        args = build_parser().parse_args(["bank", "--log-level", "DEBUG"])
        assert args.program == "bank"
        assert args.log_level == "DEBUG"

    def test_log_level_is_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "loud"])

        assert "invalid choice" in capsys.readouterr().err

    def test_unknown_program_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["trucks"])


class TestMain:
    """Test running the consoles end to end"""

    def teardown_method(self):
        reset_logger("car_ledger")

    def test_cars_console(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2\n6\n"))

        assert main(["cars"]) == 0

        out = capsys.readouterr().out
        assert "---- Cars (3) ----" in out
        assert "| Toyota Corolla | Year: 2020 | Color: White | Price: 15000.00" in out
        assert "Exiting. Bye!" in out

    def test_bank_console(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("Dana\n20\n1\n5\n3\n4\n"))

        assert main(["bank"]) == 0

        out = capsys.readouterr().out
        assert "Deposited: 5.00" in out
        assert "Dana's Balance: 25.00" in out

    def test_bad_configured_log_level_is_usage_error(self, monkeypatch, capsys):
        """A bad CAR_LEDGER_LOG_LEVEL exits with a message instead of a traceback"""
        monkeypatch.setattr("car_ledger.__main__.get_config",
                            lambda: CarLedgerConfig(log_level="loud"))

        with pytest.raises(SystemExit) as exc_info:
            main(["cars"])

        assert exc_info.value.code == 2
        assert "Unknown log level 'loud'" in capsys.readouterr().err
