"""
Rounding — Округление и сравнение с допуском

Модуль реализует округление "half up" (floor(x + 0.5)), а не банковское
округление встроенной функции round():
- Округление до заданного числа знаков после запятой
- Округление до заданного числа значащих цифр
- Строгая проверка попадания в окрестность
- Ближайшее кратное
"""

import math


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_to_decimal_places(value: float, decimal_places: int) -> float:
    """
    Округление до заданного числа знаков после запятой.

    Алгоритм: масштабирование на 10^decimal_places, округление half up,
    обратное масштабирование.

    Args:
        value: Округляемое значение
        decimal_places: Количество знаков после запятой

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_decimal_places(1.235, 1)
        1.2
        >>> round_to_decimal_places(2.5, 0)
        3.0
    """
    tens = 10.0**decimal_places
    return _round_half_up(value * tens) / tens


def round_to_significant_figures(value: float, significant_figures: int) -> float:
    """
    Округление до заданного числа значащих цифр.

    Порядок величины: 10^floor(log10(|value|)). Значение 0 не защищено:
    log10(0) вызывает ValueError.

    Args:
        value: Округляемое значение (ненулевое)
        significant_figures: Количество значащих цифр

    Returns:
        Округлённое значение

    Raises:
        ValueError: если value == 0 (math domain error)

    Examples:
        >>> round_to_significant_figures(123, 2)
        120.0
        >>> round_to_significant_figures(0.0234567, 1)
        0.02
    """
    magnitude = 10.0 ** math.floor(math.log10(abs(value)))
    correction = 10.0 ** (significant_figures - 1)
    return _round_half_up(value * correction / magnitude) * magnitude / correction


def is_within(target: float, margin: float, x: float) -> bool:
    """
    Строгая проверка: |target - x| < margin.

    Examples:
        >>> is_within(10, 1, 10.5)
        True
        >>> is_within(10, 1, 11)
        False
    """
    return abs(target - x) < margin


def find_closest_multiple(base: float, target: float) -> float:
    """
    Кратное base, ближайшее к target.

    Examples:
        >>> find_closest_multiple(5.0, 12.0)
        10.0
        >>> find_closest_multiple(5.0, 12.5)
        15.0
    """
    return base * _round_half_up(target / base)
