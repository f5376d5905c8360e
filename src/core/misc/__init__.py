"""
Misc helpers.

Text-file last-line helpers and number formatting. Independent of
core.iterables and core.math.
"""

from src.core.misc.files import delete_last_line_of_file, get_last_line_of_file
from src.core.misc.formatting import strip_trailing_zeros

__all__ = [
    "delete_last_line_of_file",
    "get_last_line_of_file",
    "strip_trailing_zeros",
]
