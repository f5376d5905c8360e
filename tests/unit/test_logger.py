"""
Тесты для Logger

Проверяет:
1. Импорт библиотеки не настраивает вывод и не ломается от LOG_LEVEL
2. Записи библиотеки доходят до handlers приложения (propagate)
3. configure_logging: уровень из аргумента и LOG_LEVEL, fallback на INFO
4. Повторный вызов configure_logging не дублирует handlers
"""

import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from src.core.logger import DEFAULT_LEVEL, LOGGER_NAME, configure_logging, logger
from src.core.misc.files import delete_last_line_of_file

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def clean_logger():
    """Снимает handlers и уровень, добавленные configure_logging."""
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


# =============================================================================
# ТЕСТЫ: поведение при импорте
# =============================================================================


class TestLibraryLogger:
    """Тесты логгера по умолчанию"""

    def test_name(self) -> None:
        assert logger.name == LOGGER_NAME == "seqmath"

    def test_only_null_handler_attached(self) -> None:
        """Импорт не добавляет вывод в stdout"""
        assert all(isinstance(handler, logging.NullHandler) for handler in logger.handlers)

    def test_propagates_to_application(self) -> None:
        assert logger.propagate is True

    def test_records_reach_application_handlers(self, tmp_path, caplog) -> None:
        path = tmp_path / "lines.txt"
        path.write_bytes(b"a\nb\n")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            delete_last_line_of_file(path)

        assert any("Deleted last line" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize("level_name", ["verbose", "trace", ""])
    def test_import_with_unknown_log_level(self, level_name: str) -> None:
        """Некорректный LOG_LEVEL не ломает импорт пакета"""
        env = dict(os.environ, LOG_LEVEL=level_name, PYTHONPATH=str(PROJECT_ROOT))
        result = subprocess.run(
            [sys.executable, "-c", "import src.core.math, src.core.misc"],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr


# =============================================================================
# ТЕСТЫ: configure_logging
# =============================================================================


class TestConfigureLogging:
    """Тесты явной настройки вывода"""

    def test_explicit_level(self, clean_logger) -> None:
        configured = configure_logging(level="debug", stream=io.StringIO())
        assert configured is clean_logger
        assert configured.level == logging.DEBUG

    def test_numeric_level(self, clean_logger) -> None:
        assert configure_logging(level=logging.ERROR, stream=io.StringIO()).level == logging.ERROR

    def test_level_from_environment(self, clean_logger, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        assert configure_logging(stream=io.StringIO()).level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, clean_logger, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        assert configure_logging(stream=io.StringIO()).level == DEFAULT_LEVEL == logging.INFO
        assert configure_logging(level="trace").level == logging.INFO

    def test_writes_to_stream(self, clean_logger) -> None:
        stream = io.StringIO()
        configure_logging(level="INFO", format_string="%(levelname)s %(message)s", stream=stream)

        logger.info("hello")

        assert stream.getvalue() == "INFO hello\n"

    def test_handlers_not_duplicated(self, clean_logger) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(level="DEBUG", stream=io.StringIO())

        stream_handlers = [
            handler for handler in logger.handlers if isinstance(handler, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
        assert logger.level == logging.DEBUG
