"""
Calculus — Численное интегрирование, дифференцирование и поиск экстремумов

Модуль работает с вещественными функциями одной переменной на отрезке:
- Интегрирование методом левых прямоугольников
- Минимум и максимум функции по равномерной сетке
- Центральная разность для градиента и производной
- Поиск локальных экстремумов перебором с обработкой плато

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрезок с lower_bound > upper_bound — ошибка использования (ValueError)
2. Сетка строится накоплением x += step_size; последний неполный шаг
   отбрасывается (цикл идёт, пока x <= upper_bound - step_size)
3. Экстремумы возвращаются как координаты x, а не значения функции
"""

from collections.abc import Callable, Iterator
from typing import Final

from src.core.domain.tuples import Pair
from src.core.iterables.reductions import get_minimum_and_maximum
from src.core.logger import logger

RealFunction = Callable[[float], float]

# Delta по умолчанию для центральной разности
DEFAULT_DERIVATIVE_DELTA: Final[float] = 1e-6


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _validate_interval(lower_bound: float, upper_bound: float) -> float:
    """Проверка отрезка, возвращает его длину."""
    interval_range = upper_bound - lower_bound
    if interval_range < 0:
        raise ValueError(
            f"lower_bound must be <= upper_bound ({upper_bound}), got {lower_bound}"
        )
    return interval_range


def _left_grid(lower_bound: float, upper_bound: float, step_size: float) -> Iterator[float]:
    """Узлы x = lower_bound, lower_bound + step, ... пока x <= upper_bound - step."""
    x = lower_bound
    while x <= upper_bound - step_size:
        yield x
        x += step_size


# =============================================================================
# ИНТЕГРИРОВАНИЕ
# =============================================================================


def integrate_approximately(
    function: RealFunction,
    lower_bound: float,
    upper_bound: float,
    steps: int,
) -> float:
    """
    Определённый интеграл методом левых прямоугольников.

    step_size = (upper_bound - lower_bound) / steps. Суммирование
    останавливается, когда следующий узел превысил бы upper_bound - step_size:
    неполный последний шаг отбрасывается, а не обрезается.

    Args:
        function: Интегрируемая функция
        lower_bound: Нижний предел
        upper_bound: Верхний предел
        steps: Количество шагов (>= 1)

    Returns:
        Приближённое значение интеграла (0.0 для вырожденного отрезка)

    Raises:
        ValueError: если lower_bound > upper_bound или steps < 1

    Examples:
        >>> integrate_approximately(lambda x: 1.0, 0.0, 10.0, 10)
        10.0
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    interval_range = _validate_interval(lower_bound, upper_bound)
    if interval_range == 0:
        return 0.0

    step_size = interval_range / steps
    total = 0.0
    for x in _left_grid(lower_bound, upper_bound, step_size):
        total += function(x) * step_size

    return total


# =============================================================================
# МИНИМУМ И МАКСИМУМ НА ОТРЕЗКЕ
# =============================================================================


def find_interval_minimum_and_maximum(
    function: RealFunction,
    lower_bound: float,
    upper_bound: float,
    steps: int,
) -> Pair[float, float]:
    """
    Минимум и максимум значений функции на отрезке по равномерной сетке.

    step_size = range / (steps - 1). Функция вычисляется в узлах от
    lower_bound до upper_bound - step_size, затем в upper_bound — всегда,
    даже если накопленный шаг не попал в него точно.

    Args:
        function: Исследуемая функция
        lower_bound: Нижняя граница (включительно)
        upper_bound: Верхняя граница (включительно)
        steps: Количество узлов сетки (>= 2 для невырожденного отрезка)

    Returns:
        Pair(минимум, максимум) значений функции

    Raises:
        ValueError: если lower_bound > upper_bound или steps < 2

    Examples:
        >>> tuple(find_interval_minimum_and_maximum(lambda x: 2 * x, 0.0, 1.0, 11))
        (0.0, 2.0)
    """
    interval_range = _validate_interval(lower_bound, upper_bound)

    values: list[float] = []
    if interval_range > 0:
        if steps < 2:
            raise ValueError(f"steps must be >= 2 for a non-empty interval, got {steps}")
        step_size = interval_range / (steps - 1)
        values.extend(function(x) for x in _left_grid(lower_bound, upper_bound, step_size))

    values.append(function(upper_bound))
    return get_minimum_and_maximum(values)


# =============================================================================
# ДИФФЕРЕНЦИРОВАНИЕ
# =============================================================================


def find_approximate_gradient_at_point(
    function: RealFunction,
    x: float,
    delta: float = DEFAULT_DERIVATIVE_DELTA,
) -> float:
    """
    Градиент функции в точке центральной разностью.

    Формула: (f(x + delta) - f(x - delta)) / (2 * delta)

    Examples:
        >>> find_approximate_gradient_at_point(lambda x: 3 * x + 1, 2.0, 0.5)
        3.0
    """
    return (function(x + delta) - function(x - delta)) / (2 * delta)


def find_approximate_derivative(
    function: RealFunction,
    delta: float = DEFAULT_DERIVATIVE_DELTA,
) -> RealFunction:
    """
    Функция, приближающая производную через центральную разность.

    See Also:
        find_approximate_gradient_at_point
    """

    def derivative(x: float) -> float:
        return find_approximate_gradient_at_point(function, x, delta)

    return derivative


# =============================================================================
# ЛОКАЛЬНЫЕ ЭКСТРЕМУМЫ
# =============================================================================


def find_local_extrema(
    function: RealFunction,
    lower_bound: float,
    upper_bound: float,
    steps: int,
) -> Pair[list[float], list[float]]:
    """
    Поиск локальных минимумов и максимумов функции перебором.

    Алгоритм:
        1. Функция вычисляется в узлах x = lower_bound + k * step_size,
           step_size = range / steps (пока x <= upper_bound - step_size)
        2. Между соседними узлами считается прямой градиент
        3. Смена знака градиента + → - фиксирует максимум, - → + минимум;
           записывается координата текущего узла
        4. Плато (нулевой градиент): координаты узлов буферизуются; при выходе
           с плато знак входа сравнивается со знаком выхода. Если знаки
           разные, фиксируется один экстремум в plateau[len(plateau) // 2]
           (максимум при входе с +, минимум при входе с -), иначе плато
           отбрасывается как шум

    Args:
        function: Исследуемая функция
        lower_bound: Нижняя граница
        upper_bound: Верхняя граница
        steps: Количество шагов

    Returns:
        Pair(координаты минимумов, координаты максимумов), каждый список
        упорядочен по x. Значения функции вычисляет вызывающий код.

    Raises:
        ValueError: если lower_bound > upper_bound или steps < 1
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    interval_range = _validate_interval(lower_bound, upper_bound)

    local_minima: list[float] = []
    local_maxima: list[float] = []

    if interval_range == 0:
        return Pair(local_minima, local_maxima)

    step_size = interval_range / steps

    previous_value: float | None = None
    previous_gradient: float | None = None

    plateau: list[float] = []
    plateau_entry_gradient: float | None = None

    for x in _left_grid(lower_bound, upper_bound, step_size):
        value = function(x)

        if previous_value is not None:
            gradient = (value - previous_value) / step_size

            if previous_gradient is not None:
                if gradient * previous_gradient < 0:
                    # Строгая смена знака без плато
                    if previous_gradient > 0:
                        local_maxima.append(x)
                    else:
                        local_minima.append(x)

                elif gradient == 0:
                    # Плато открывается или продолжается
                    if plateau_entry_gradient is None:
                        plateau_entry_gradient = previous_gradient
                    plateau.append(x)

                elif previous_gradient == 0:
                    # Выход с плато
                    if plateau and plateau_entry_gradient * gradient < 0:
                        location = plateau[len(plateau) // 2]
                        if plateau_entry_gradient > 0:
                            local_maxima.append(location)
                        else:
                            local_minima.append(location)
                    plateau.clear()
                    plateau_entry_gradient = None

            previous_gradient = gradient

        previous_value = value

    logger.debug(
        "find_local_extrema: %d minima, %d maxima on [%s, %s] with %d steps",
        len(local_minima),
        len(local_maxima),
        lower_bound,
        upper_bound,
        steps,
    )

    return Pair(local_minima, local_maxima)
