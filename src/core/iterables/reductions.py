"""
Reductions — Свёртки числовых последовательностей

Однопроходные свёртки над числовыми последовательностями. Элементы
сравниваются и суммируются по числовому значению (float(x)), независимо
от конкретного числового типа.

Пустой вход — нормальный случай, а не ошибка: get_minimum, get_maximum,
get_minimum_and_maximum, get_arithmetic_mean, get_geometric_mean и обе
функции стандартного отклонения возвращают None.

ИЗВЕСТНЫЕ ОСОБЕННОСТИ (сохранены намеренно, см. DESIGN.md):
1. get_geometric_mean возвращает произведение элементов, а не корень n-й степени
2. get_population_standard_deviation делит на (n - 1),
   get_sample_standard_deviation делит на n
"""

import math
from collections.abc import Iterable
from numbers import Real
from typing import Final, TypeVar

from src.core.domain.tuples import Pair
from src.core.iterables.transformers import two_at_a_time

N = TypeVar("N", bound=Real)

# Маркер отсутствующего второго элемента пары в two_at_a_time
_MISSING: Final = object()


# =============================================================================
# СУММА / ПРОИЗВЕДЕНИЕ
# =============================================================================


def get_sum(numbers: Iterable[Real]) -> float:
    """
    Сумма элементов.

    Examples:
        >>> get_sum([1, 2, 3.5])
        6.5
        >>> get_sum([])
        0.0
    """
    total = 0.0
    for number in numbers:
        total += float(number)
    return total


def get_product(numbers: Iterable[Real]) -> float:
    """Произведение элементов (1.0 для пустого входа)."""
    product = 1.0
    for number in numbers:
        product *= float(number)
    return product


# =============================================================================
# МИНИМУМ / МАКСИМУМ
# =============================================================================


def get_minimum(numbers: Iterable[N]) -> N | None:
    """
    Минимальный элемент перебором.

    При равенстве значений возвращается первый встреченный элемент.

    Returns:
        Элемент исходного типа или None для пустого входа
    """
    minimum = None
    for number in numbers:
        if minimum is None or number < minimum:
            minimum = number
    return minimum


def get_maximum(numbers: Iterable[N]) -> N | None:
    """
    Максимальный элемент перебором.

    При равенстве значений возвращается первый встреченный элемент.
    """
    maximum = None
    for number in numbers:
        if maximum is None or number > maximum:
            maximum = number
    return maximum


def get_minimum_and_maximum(numbers: Iterable[N]) -> Pair[N, N] | None:
    """
    Одновременный поиск минимума и максимума турнирным методом.

    Элементы обрабатываются по два (two_at_a_time): сначала сравниваются
    между собой, затем меньший — с текущим минимумом, больший — с текущим
    максимумом. Это ~1.5 сравнения на элемент вместо 2 при двух проходах.
    Последний одиночный элемент (нечётная длина) сравнивается с минимумом
    и максимумом отдельно.

    При равенстве значений сохраняется первый встреченный элемент.

    Returns:
        Pair(minimum, maximum) или None для пустого входа

    Examples:
        >>> tuple(get_minimum_and_maximum([3, 1, 4, 1, 5]))
        (1, 5)
        >>> get_minimum_and_maximum([]) is None
        True
    """
    minimum = None
    maximum = None

    for first, second in two_at_a_time(numbers, fillvalue=_MISSING):
        if minimum is None:
            minimum = first
            maximum = first

        if second is _MISSING:
            # Нечётный хвост
            if first < minimum:
                minimum = first
            elif first > maximum:
                maximum = first
            continue

        if second < first:
            smaller, larger = second, first
        elif first < second:
            smaller, larger = first, second
        else:
            smaller, larger = first, first

        if smaller < minimum:
            minimum = smaller
        if larger > maximum:
            maximum = larger

    if minimum is None:
        return None

    return Pair(minimum, maximum)


# =============================================================================
# СРЕДНИЕ
# =============================================================================


def get_arithmetic_mean(numbers: Iterable[Real]) -> float | None:
    """
    Среднее арифметическое.

    Examples:
        >>> get_arithmetic_mean([1, 2, 3, 4])
        2.5
        >>> get_arithmetic_mean([]) is None
        True
    """
    total = 0.0
    count = 0
    for number in numbers:
        total += float(number)
        count += 1

    if count == 0:
        return None

    return total / count


def get_geometric_mean(numbers: Iterable[Real]) -> float | None:
    """
    ВНИМАНИЕ: возвращает ПРОИЗВЕДЕНИЕ элементов, а не геометрическое среднее.

    Поведение сохранено для совместимости с существующими результатами.
    Не используйте в новом коде: для геометрического среднего возведите
    результат в степень 1/n.

    Returns:
        Произведение элементов или None для пустого входа
    """
    product = 1.0
    count = 0
    for number in numbers:
        product *= float(number)
        count += 1

    if count == 0:
        return None

    return product


# =============================================================================
# СТАНДАРТНОЕ ОТКЛОНЕНИЕ
# =============================================================================


def _sum_of_squared_deviations(values: list[float]) -> float:
    mean = sum(values) / len(values)
    return sum((value - mean) ** 2 for value in values)


def get_sample_standard_deviation(numbers: Iterable[Real]) -> float | None:
    """
    Стандартное отклонение с делителем n.

    Вход материализуется один раз, поэтому допустимы одноразовые итераторы.

    Returns:
        sqrt(sum((x - mean)^2) / n) или None для пустого входа
    """
    values = [float(number) for number in numbers]
    if not values:
        return None

    return math.sqrt(_sum_of_squared_deviations(values) / len(values))


def get_population_standard_deviation(numbers: Iterable[Real]) -> float | None:
    """
    Стандартное отклонение с делителем (n - 1).

    ВНИМАНИЕ: несмотря на название, используется делитель n - 1
    (поведение сохранено). Для одного элемента результат nan.

    Returns:
        sqrt(sum((x - mean)^2) / (n - 1)) или None для пустого входа
    """
    values = [float(number) for number in numbers]
    if not values:
        return None

    if len(values) == 1:
        return math.nan

    return math.sqrt(_sum_of_squared_deviations(values) / (len(values) - 1))


# =============================================================================
# ЛИНЕЙНОЕ ПЕРЕОТОБРАЖЕНИЕ
# =============================================================================


def map_linearly(
    original_values: Iterable[Real],
    new_minimum: float,
    new_maximum: float,
) -> list[float]:
    """
    Линейное переотображение значений в новый диапазон.

    Аффинное отображение переводит [min, max] входа в [new_minimum, new_maximum].
    Для постоянного входа (min == max) отображение не определено,
    и используется тождественная функция.

    Returns:
        Новый список float той же длины и порядка

    Examples:
        >>> map_linearly([0, 5, 10], 0.0, 1.0)
        [0.0, 0.5, 1.0]
        >>> map_linearly([3, 3], 0.0, 1.0)
        [3.0, 3.0]
    """
    values = [float(value) for value in original_values]
    if not values:
        return []

    minimum, maximum = get_minimum_and_maximum(values)
    original_range = maximum - minimum

    if original_range == 0:
        return values

    scale = (new_maximum - new_minimum) / original_range
    return [(value - minimum) * scale + new_minimum for value in values]
