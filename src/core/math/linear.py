"""
Linear — Линейные отображения, интерполяция и градиенты

Модуль содержит операции над прямыми через две точки:
- Аффинное отображение по двум парам (x, y)
- Линейная интерполяция / экстраполяция
- Градиент между двумя точками и последовательные градиенты ломаной

Неопределённый градиент (вертикальная прямая) и вырожденное отображение
(x1 == x2) — нормальные случаи, возвращается None. Вырожденная
интерполяция — ошибка использования (ValueError).
"""

from collections.abc import Callable, Iterable

from src.core.domain.geometry import Point
from src.core.iterables.transformers import in_pairs


def get_linear_mapping_function(
    original_value1: float,
    original_value2: float,
    new_value1: float,
    new_value2: float,
) -> Callable[[float], float] | None:
    """
    Аффинное отображение, переводящее original_value1 → new_value1
    и original_value2 → new_value2.

    Формула: x ↦ (x - x1) * (y2 - y1) / (x2 - x1) + y1

    Если new_value1 == new_value2, отображение постоянно.

    Returns:
        Функция отображения или None, если original_value1 == original_value2

    Examples:
        >>> mapping = get_linear_mapping_function(0.0, 10.0, 0.0, 1.0)
        >>> mapping(5.0)
        0.5
        >>> get_linear_mapping_function(1.0, 1.0, 0.0, 1.0) is None
        True
    """
    original_range = original_value2 - original_value1
    if original_range == 0:
        return None

    normalisation_factor = (new_value2 - new_value1) / original_range

    def mapping(x: float) -> float:
        return (x - original_value1) * normalisation_factor + new_value1

    return mapping


def interpolate_linearly(
    location1: float,
    location2: float,
    value1: float,
    value2: float,
    query_location: float,
) -> float:
    """
    Линейная интерполяция (или экстраполяция) по двум известным точкам.

    Args:
        location1: Координата первой известной точки
        location2: Координата второй, отличной от первой, точки
        value1: Значение в первой точке
        value2: Значение во второй точке
        query_location: Координата запроса

    Returns:
        Интерполированное значение в query_location

    Raises:
        ValueError: если location1 == location2

    Examples:
        >>> interpolate_linearly(0.0, 2.0, 10.0, 20.0, 1.0)
        15.0
        >>> interpolate_linearly(0.0, 2.0, 10.0, 20.0, 4.0)
        30.0
    """
    if location1 == location2:
        raise ValueError("Input locations for interpolation cannot be equal")

    return (query_location - location1) * (value2 - value1) / (location2 - location1) + value1


def get_gradient(point1: Point, point2: Point) -> float | None:
    """
    Градиент прямой через две точки.

    Порядок точек не важен.

    Returns:
        (y2 - y1) / (x2 - x1) или None, если x1 == x2 (вертикальная прямая)
    """
    denominator = point2.x - point1.x
    if denominator == 0:
        return None
    return (point2.y - point1.y) / denominator


def get_sequential_gradients(points: Iterable[Point]) -> list[float | None]:
    """
    Градиенты между каждой точкой и следующей за ней.

    Args:
        points: Упорядоченная последовательность точек

    Returns:
        Список длины n - 1; None для вертикальных участков
    """
    return [get_gradient(previous, current) for previous, current in in_pairs(points)]
