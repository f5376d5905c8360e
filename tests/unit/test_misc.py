"""
Тесты для Misc (файлы и форматирование)

Проверяет:
1. get_last_line_of_file: завершающий перевод строки, одна строка, пустой файл
2. delete_last_line_of_file: усечение до предыдущей строки
3. strip_trailing_zeros: целые, дробные, экспоненциальная запись
"""

import pytest

from src.core.misc.files import delete_last_line_of_file, get_last_line_of_file
from src.core.misc.formatting import strip_trailing_zeros


@pytest.fixture
def three_line_file(tmp_path):
    """Файл из трёх строк с завершающим переводом строки."""
    path = tmp_path / "lines.txt"
    path.write_bytes(b"The first line\nThe second line\nA third line\n")
    return path


# =============================================================================
# ТЕСТЫ: последняя строка файла
# =============================================================================


class TestGetLastLineOfFile:
    """Тесты get_last_line_of_file"""

    def test_trailing_newline_skipped(self, three_line_file) -> None:
        assert get_last_line_of_file(three_line_file) == "A third line"

    def test_without_trailing_newline(self, tmp_path) -> None:
        path = tmp_path / "no_newline.txt"
        path.write_bytes(b"a\nb")
        assert get_last_line_of_file(path) == "b"

    def test_single_line(self, tmp_path) -> None:
        path = tmp_path / "single.txt"
        path.write_bytes(b"only\n")
        assert get_last_line_of_file(path) == "only"

    def test_windows_line_endings(self, tmp_path) -> None:
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"a\r\nb\r\n")
        assert get_last_line_of_file(path) == "b"

    def test_non_ascii(self, tmp_path) -> None:
        path = tmp_path / "utf8.txt"
        path.write_bytes("первая\nвторая\n".encode("utf-8"))
        assert get_last_line_of_file(str(path)) == "вторая"

    def test_empty_file_is_absent(self, tmp_path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert get_last_line_of_file(path) is None

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            get_last_line_of_file(tmp_path / "missing.txt")


class TestDeleteLastLineOfFile:
    """Тесты delete_last_line_of_file"""

    def test_deletes_last_line(self, three_line_file) -> None:
        delete_last_line_of_file(three_line_file)

        assert three_line_file.read_bytes() == b"The first line\nThe second line\n"
        assert get_last_line_of_file(three_line_file) == "The second line"

    def test_repeated_deletion(self, three_line_file) -> None:
        delete_last_line_of_file(three_line_file)
        delete_last_line_of_file(three_line_file)
        assert get_last_line_of_file(three_line_file) == "The first line"

        delete_last_line_of_file(three_line_file)
        assert get_last_line_of_file(three_line_file) is None

    def test_empty_file_unchanged(self, tmp_path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        delete_last_line_of_file(path)
        assert path.read_bytes() == b""


# =============================================================================
# ТЕСТЫ: strip_trailing_zeros
# =============================================================================


class TestStripTrailingZeros:
    """Тесты strip_trailing_zeros"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5.0, "5"),
            (2.5, "2.5"),
            (100.0, "100"),
            (0.0, "0"),
            (-3.10, "-3.1"),
            (10, "10"),
        ],
    )
    def test_values(self, value: float, expected: str) -> None:
        assert strip_trailing_zeros(value) == expected

    def test_exponent_unchanged(self) -> None:
        assert strip_trailing_zeros(1.5e20) == "1.5e+20"
        assert strip_trailing_zeros(1e-7) == "1e-07"
