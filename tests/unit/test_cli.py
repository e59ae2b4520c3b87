"""
Тесты для CLI (src.app.main)

Coverage:
- Дата аргументом: текстовый и JSON вывод
- Неверный ввод: код выхода 2, движок не вызывается
- Интерактивный ввод с повторным запросом
- JSON-запрос weekday_request на stdin (--json без даты)
- --self-check
- int_from_env: запасное значение при мусоре в окружении
- setup_logging: консоль и файл
"""

import io
import json
import logging

import pytest

from src.app import main as cli
from src.app.logging_config import setup_logging
from src.app.settings import (
    EXIT_INVALID_INPUT,
    EXIT_OK,
    EXIT_SELF_CHECK_FAILED,
    INPUT_PROMPT,
    int_from_env,
)
from src.core.calendar import SelfCheck
from src.core.calendar import self_checks
from src.core.domain import CalendarDate


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging заменяет handlers корневого логгера."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


# =============================================================================
# ДАТА АРГУМЕНТОМ
# =============================================================================


class TestDateArgument:
    """Дата передаётся позиционным аргументом."""

    def test_text_output(self, capsys):
        assert cli.main(["2000-01-01"]) == EXIT_OK

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Valid date",
            "DeltaDays=-7736",
            "DeltaDays Mod 7=6",
            "Result=Saturday",
        ]

    def test_json_output(self, capsys):
        assert cli.main(["2024-02-29", "--json"]) == EXIT_OK

        payload = json.loads(capsys.readouterr().out)
        assert payload["weekday"] == "Thursday"
        assert payload["delta_days"] == 1089
        assert payload["residue"] == 4

    def test_malformed_input(self, capsys):
        assert cli.main(["2021-13-01"]) == EXIT_INVALID_INPUT
        assert "does not match YYYY-MM-DD" in capsys.readouterr().out

    def test_nonexistent_date(self, capsys):
        assert cli.main(["2021-02-30"]) == EXIT_INVALID_INPUT
        assert "not a valid calendar date" in capsys.readouterr().out


# =============================================================================
# ИНТЕРАКТИВНЫЙ ВВОД
# =============================================================================


class TestPromptForDate:
    """Запрос даты с повторами."""

    def test_reprompts_until_valid(self, capsys):
        answers = iter(["bad", "2021-02-30", "2021-03-08"])
        date = cli.prompt_for_date(read=lambda prompt: next(answers), attempts=3)

        assert date == CalendarDate(day=8, month=3, year=2021)
        out = capsys.readouterr().out
        assert out.count(INPUT_PROMPT) == 3
        assert out.count("Invalid date") == 2

    def test_gives_up_after_attempts(self):
        date = cli.prompt_for_date(read=lambda prompt: "nope", attempts=2)
        assert date is None

    def test_eof(self):
        def _closed(prompt):
            raise EOFError

        assert cli.prompt_for_date(read=_closed) is None

    def test_main_without_argument_prompts(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "2021-03-07")
        assert cli.main([]) == EXIT_OK
        assert "Result=Sunday" in capsys.readouterr().out

    def test_main_without_argument_invalid(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "2021-13-01")
        assert cli.main([]) == EXIT_INVALID_INPUT


# =============================================================================
# JSON-ЗАПРОС НА STDIN
# =============================================================================


class TestJsonRequest:
    """--json без позиционной даты читает weekday_request со stdin."""

    def test_request_resolved(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"date": "2000-01-01"}'))
        assert cli.main(["--json"]) == EXIT_OK

        payload = json.loads(capsys.readouterr().out)
        assert payload["weekday"] == "Saturday"
        assert payload["delta_days"] == -7736

    def test_read_request(self):
        date = cli.read_request(io.StringIO('{"date": "2024-02-29"}'))
        assert date == CalendarDate(day=29, month=2, year=2024)

    @pytest.mark.parametrize(
        "body, fragment",
        [
            ("not json", "not valid JSON"),
            ("{}", "'date' is a required property"),
            ('{"date": "2021-13-01"}', "Invalid weekday_request: date:"),
            ('{"date": "2021-03-07", "time": "noon"}', "Additional properties"),
            ('["2021-03-07"]', "is not of type 'object'"),
        ],
    )
    def test_invalid_request(self, monkeypatch, capsys, body, fragment):
        monkeypatch.setattr("sys.stdin", io.StringIO(body))
        assert cli.main(["--json"]) == EXIT_INVALID_INPUT
        assert fragment in capsys.readouterr().out

    def test_request_with_nonexistent_date(self, monkeypatch, capsys):
        """Схема пропускает 2021-02-30, конструктор даты отвергает."""
        monkeypatch.setattr("sys.stdin", io.StringIO('{"date": "2021-02-30"}'))
        assert cli.main(["--json"]) == EXIT_INVALID_INPUT
        assert "not a valid calendar date" in capsys.readouterr().out

    def test_positional_date_wins_over_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("garbage"))
        assert cli.main(["2021-03-08", "--json"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out)["weekday"] == "Monday"


# =============================================================================
# SELF-CHECK
# =============================================================================


class TestSelfCheckFlag:
    """Флаг --self-check."""

    def test_self_check_only(self, capsys):
        assert cli.main(["--self-check"]) == EXIT_OK
        assert "self-checks passed" in capsys.readouterr().out

    def test_self_check_then_date(self, capsys):
        assert cli.main(["--self-check", "2021-03-01"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "self-checks passed" in out
        assert "Result=Monday" in out

    def test_self_check_failure(self, monkeypatch, capsys):
        monkeypatch.setattr(
            self_checks, "default_checks", lambda: [SelfCheck("broken", lambda: False)]
        )
        assert cli.main(["--self-check"]) == EXIT_SELF_CHECK_FAILED
        assert "Self-check failed" in capsys.readouterr().out


# =============================================================================
# LOGGING
# =============================================================================


class TestLoggingSetup:
    """Тесты setup_logging."""

    def test_console_only(self):
        assert setup_logging(level="INFO", logs_dir=None) is None
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_file_handler(self, tmp_path):
        log_file = setup_logging(level="WARNING", logs_dir=str(tmp_path / "logs"))
        assert log_file is not None
        assert log_file.parent == tmp_path / "logs"

        logging.getLogger("src.core.calendar").debug("engine detail")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "engine detail" in log_file.read_text(encoding="utf-8")

    def test_cli_log_level_argument(self):
        args = cli.parse_arguments(["--log-level", "debug", "2021-03-07"])
        assert args.log_level == "DEBUG"
        assert args.date == "2021-03-07"


# =============================================================================
# SETTINGS
# =============================================================================


class TestIntFromEnv:
    """Целочисленные настройки из окружения не падают на мусоре."""

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("DOW_MAX_PROMPT_ATTEMPTS", raising=False)
        assert int_from_env("DOW_MAX_PROMPT_ATTEMPTS", 3) == 3

    def test_numeric_value(self, monkeypatch):
        monkeypatch.setenv("DOW_MAX_PROMPT_ATTEMPTS", "5")
        assert int_from_env("DOW_MAX_PROMPT_ATTEMPTS", 3) == 5

    @pytest.mark.parametrize("raw", ["many", "", "2.5", "0", "-1"])
    def test_invalid_value_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("DOW_MAX_PROMPT_ATTEMPTS", raw)
        assert int_from_env("DOW_MAX_PROMPT_ATTEMPTS", 3) == 3

    def test_settings_import_survives_bad_value(self, monkeypatch):
        import importlib

        from src.app import settings

        monkeypatch.setenv("DOW_MAX_PROMPT_ATTEMPTS", "lots")
        try:
            assert importlib.reload(settings).MAX_PROMPT_ATTEMPTS == 3
        finally:
            monkeypatch.delenv("DOW_MAX_PROMPT_ATTEMPTS")
            importlib.reload(settings)
