"""
Logger — Логгер библиотеки seqmath

Библиотека только пишет записи в логгер "seqmath" и не настраивает
logging при импорте:
- На логгере висит единственный NullHandler, propagate не меняется,
  поэтому маршрутизацию записей определяет приложение
- configure_logging — явная (opt-in) настройка вывода для скриптов и
  отладки: StreamHandler в stdout, уровень из аргумента или LOG_LEVEL
- Неизвестное имя уровня не ломает импорт и настройку: используется INFO
"""

import logging
import os
import sys
from typing import Final, TextIO

__all__ = ["DEFAULT_FORMAT", "DEFAULT_LEVEL", "LOGGER_NAME", "configure_logging", "logger"]

LOGGER_NAME: Final[str] = "seqmath"

DEFAULT_LEVEL: Final[int] = logging.INFO

DEFAULT_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | int | None) -> int:
    """
    Числовой уровень logging по имени или числу.

    None → LOG_LEVEL из окружения. Неизвестное имя (например, "verbose")
    → DEFAULT_LEVEL.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL") or DEFAULT_LEVEL

    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if isinstance(resolved, int):
        return resolved
    return DEFAULT_LEVEL


def configure_logging(
    level: str | int | None = None,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Явная настройка вывода логгера seqmath.

    Повторный вызов обновляет уровень, но не добавляет второй
    StreamHandler.

    Args:
        level: Имя (DEBUG, INFO, ...) или число. Если не задан,
            берётся из LOG_LEVEL; неизвестное имя → INFO
        format_string: Формат сообщений (default: DEFAULT_FORMAT)
        stream: Поток вывода (default: sys.stdout)

    Returns:
        Настроенный логгер seqmath
    """
    logger.setLevel(_resolve_level(level))

    has_stream_handler = any(
        isinstance(handler, logging.StreamHandler) for handler in logger.handlers
    )
    if not has_stream_handler:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)

    return logger


logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
