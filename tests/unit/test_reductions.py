"""
Тесты для Reductions

Проверяет:
1. Суммы, произведения, средние на пустом и непустом входе
2. Турнирный min/max: совпадение со стандартными min/max, ничьи
3. Сохранённые особенности: geometric mean = произведение,
   population std с делителем n - 1
4. map_linearly: переотображение и тождественный fallback
"""

import math
import random

import pytest

from src.core.domain.tuples import Pair
from src.core.iterables.reductions import (
    get_arithmetic_mean,
    get_geometric_mean,
    get_maximum,
    get_minimum,
    get_minimum_and_maximum,
    get_population_standard_deviation,
    get_product,
    get_sample_standard_deviation,
    get_sum,
    map_linearly,
)


# =============================================================================
# ТЕСТЫ: сумма и произведение
# =============================================================================


class TestSumAndProduct:
    """Тесты get_sum, get_product"""

    def test_sum(self) -> None:
        assert get_sum([1, 2, 3.5]) == 6.5
        assert get_sum([]) == 0.0

    def test_sum_mixed_numeric_types(self) -> None:
        """Элементы суммируются по числовому значению"""
        assert get_sum([1, 2.5, True]) == 4.5

    def test_product(self) -> None:
        assert get_product([2, 3, 4]) == 24.0
        assert get_product([]) == 1.0


# =============================================================================
# ТЕСТЫ: минимум и максимум
# =============================================================================


class TestMinimumMaximum:
    """Тесты get_minimum, get_maximum"""

    def test_minimum(self) -> None:
        assert get_minimum([3, -1, 2]) == -1

    def test_maximum(self) -> None:
        assert get_maximum([3, -1, 2]) == 3

    def test_empty_is_absent(self) -> None:
        assert get_minimum([]) is None
        assert get_maximum([]) is None

    def test_ties_keep_first(self) -> None:
        """При равенстве возвращается первый встреченный элемент"""
        assert type(get_minimum([1, 1.0])) is int
        assert type(get_maximum([2.0, 2])) is float


class TestMinimumAndMaximum:
    """Тесты турнирного get_minimum_and_maximum"""

    def test_basic(self) -> None:
        assert get_minimum_and_maximum([3, 1, 4, 1, 5, 9, 2, 6]) == Pair(1, 9)

    def test_odd_length(self) -> None:
        """Нечётный хвост сравнивается отдельно"""
        assert get_minimum_and_maximum([5, 4, 1]) == Pair(1, 5)
        assert get_minimum_and_maximum([5, 4, 9]) == Pair(4, 9)

    def test_single_element(self) -> None:
        assert get_minimum_and_maximum([7]) == Pair(7, 7)

    def test_odd_tail_with_falsy_value(self) -> None:
        """Нулевой хвост — обычный элемент, а не отсутствующий"""
        assert get_minimum_and_maximum([5, 3, 0]) == Pair(0, 5)
        assert get_minimum_and_maximum([0]) == Pair(0, 0)

    def test_empty_is_absent(self) -> None:
        assert get_minimum_and_maximum([]) is None

    def test_generator_input(self) -> None:
        assert get_minimum_and_maximum(x for x in [2, 8, -3]) == Pair(-3, 8)

    def test_matches_builtin_min_max(self) -> None:
        """Совпадение со встроенными min/max на случайных выборках"""
        rng = random.Random(42)
        for length in range(1, 40):
            values = [rng.randint(-20, 20) for _ in range(length)]
            assert get_minimum_and_maximum(values) == Pair(min(values), max(values))

    def test_ties_keep_earliest(self) -> None:
        """Ничьи разрешаются в пользу первого вхождения"""
        result = get_minimum_and_maximum([1, 1.0])
        assert type(result.first) is int
        assert type(result.second) is int

        result = get_minimum_and_maximum([0, 2, 2.0, 0.0])
        assert type(result.first) is int
        assert type(result.second) is int


# =============================================================================
# ТЕСТЫ: средние
# =============================================================================


class TestMeans:
    """Тесты get_arithmetic_mean, get_geometric_mean"""

    def test_arithmetic_mean(self) -> None:
        assert get_arithmetic_mean([0.0, 0.0, 0.0, 0.0]) == 0.0
        assert get_arithmetic_mean([-2.0, -1.0, 1.0, 2.0, 5.0]) == 1.0
        assert get_arithmetic_mean([-1.0, -2.0, -3.0, -4.0]) == -2.5
        assert get_arithmetic_mean([1, 2, 3, 4]) == 2.5

    def test_arithmetic_mean_empty_is_absent(self) -> None:
        assert get_arithmetic_mean([]) is None

    def test_geometric_mean_returns_product(self) -> None:
        """Сохранённое поведение: возвращается произведение"""
        assert get_geometric_mean([2, 8]) == 16.0

    def test_geometric_mean_empty_is_absent(self) -> None:
        assert get_geometric_mean([]) is None


# =============================================================================
# ТЕСТЫ: стандартное отклонение
# =============================================================================


class TestStandardDeviation:
    """Тесты стандартного отклонения"""

    VALUES = [2, 4, 4, 4, 5, 5, 7, 9]  # mean = 5, sum of squares = 32

    def test_sample_divides_by_n(self) -> None:
        assert get_sample_standard_deviation(self.VALUES) == pytest.approx(2.0)

    def test_population_divides_by_n_minus_one(self) -> None:
        """Сохранённое поведение: делитель n - 1"""
        expected = math.sqrt(32 / 7)
        assert get_population_standard_deviation(self.VALUES) == pytest.approx(expected)

    def test_generator_input(self) -> None:
        """Вход материализуется, одноразовые итераторы допустимы"""
        assert get_sample_standard_deviation(iter(self.VALUES)) == pytest.approx(2.0)

    def test_empty_is_absent(self) -> None:
        assert get_sample_standard_deviation([]) is None
        assert get_population_standard_deviation([]) is None

    def test_population_single_element_is_nan(self) -> None:
        assert math.isnan(get_population_standard_deviation([3.0]))

    def test_sample_single_element_is_zero(self) -> None:
        assert get_sample_standard_deviation([3.0]) == 0.0


# =============================================================================
# ТЕСТЫ: map_linearly
# =============================================================================


class TestMapLinearly:
    """Тесты map_linearly"""

    def test_maps_to_new_range(self) -> None:
        assert map_linearly([0, 5, 10], 0.0, 1.0) == pytest.approx([0.0, 0.5, 1.0])

    def test_reversed_range(self) -> None:
        assert map_linearly([1, 2, 3], 10.0, -10.0) == pytest.approx([10.0, 0.0, -10.0])

    def test_order_preserved(self) -> None:
        assert map_linearly([10, 0, 5], -1.0, 1.0) == pytest.approx([1.0, -1.0, 0.0])

    def test_constant_input_uses_identity(self) -> None:
        """min == max → тождественное отображение"""
        assert map_linearly([3, 3, 3], 0.0, 1.0) == [3.0, 3.0, 3.0]

    def test_empty(self) -> None:
        assert map_linearly([], 0.0, 1.0) == []
