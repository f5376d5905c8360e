"""
Files — Чтение и удаление последней строки текстового файла

Файл читается с конца побайтово до ближайшего перевода строки, поэтому
стоимость не зависит от размера файла. Завершающий перевод строки
пропускается: для "a\\nb\\n" последняя строка — "b".
"""

import os
from pathlib import Path
from typing import BinaryIO

from src.core.logger import logger

NEWLINE = b"\n"


def _find_last_line_start(file: BinaryIO) -> int | None:
    """
    Позиция начала последней строки открытого бинарного файла.

    Returns:
        Смещение в байтах или None для пустого файла
    """
    file.seek(0, os.SEEK_END)
    position = file.tell() - 1
    if position < 0:
        return None

    while position > 0:
        position -= 1
        file.seek(position)
        if file.read(1) == NEWLINE:
            position += 1
            break

    return position


def get_last_line_of_file(filename: str | Path, encoding: str = "utf-8") -> str | None:
    """
    Последняя строка файла без символов перевода строки.

    Args:
        filename: Путь к файлу
        encoding: Кодировка содержимого

    Returns:
        Последняя строка или None для пустого файла

    Raises:
        FileNotFoundError: если файл не существует
    """
    with open(filename, "rb") as file:
        position = _find_last_line_start(file)
        if position is None:
            return None

        file.seek(position)
        line = file.readline()

    return line.decode(encoding).rstrip("\r\n")


def delete_last_line_of_file(filename: str | Path) -> None:
    """
    Удаление последней строки файла (усечение до её начала).

    Для пустого файла ничего не делает.

    Raises:
        FileNotFoundError: если файл не существует
    """
    with open(filename, "r+b") as file:
        position = _find_last_line_start(file)
        if position is None:
            return

        file.truncate(position)

    logger.info("Deleted last line of %s (truncated to %d bytes)", filename, position)
