"""
Financial — Доходности, средняя геометрическая доходность и Sortino

Базовые финансовые расчёты на float (не Decimal): стандартные оговорки
об округлении чисел с плавающей точкой применимы.

ФОРМУЛЫ:
    return = (final - initial) / initial
    return_new_period = (1 + return_period) ^ (1 / ratio_old_to_new) - 1
    downside_deviation = sqrt(sum(min(r - MAR, 0)^2) / n)
    sortino = (geometric_average_return - MAR) / downside_deviation
"""

import math
from collections.abc import Iterable, Sequence

from src.core.iterables.transformers import in_pairs


# =============================================================================
# ДОХОДНОСТИ
# =============================================================================


def get_return(initial_equity: float, final_equity: float) -> float:
    """
    Доходность между начальным и конечным equity.

    Examples:
        >>> get_return(100.0, 110.0)
        0.1
    """
    return (final_equity - initial_equity) / initial_equity


def get_returns_from_equities(equities: Iterable[float]) -> list[float]:
    """
    Доходности между каждой парой последовательных значений equity.

    Args:
        equities: Значения equity в порядке записи

    Returns:
        Список длины n - 1
    """
    return [get_return(previous, current) for previous, current in in_pairs(equities)]


def get_overall_return(equities: Sequence[float]) -> float:
    """
    Доходность от первого до последнего значения equity.

    Raises:
        ValueError: если equities пуст
    """
    if not equities:
        raise ValueError("equities cannot be empty")
    return get_return(equities[0], equities[-1])


def express_return_over_different_period(
    return_for_period: float,
    ratio_of_old_period_to_new: float,
) -> float:
    """
    Эквивалентная доходность за период другой длины с учётом compounding.

    Args:
        return_for_period: Доходность за исходный период
        ratio_of_old_period_to_new: Длина исходного периода / длина нового

    Examples:
        >>> round(express_return_over_different_period(0.21, 2.0), 12)
        0.1
    """
    return (1.0 + return_for_period) ** (1.0 / ratio_of_old_period_to_new) - 1.0


def get_geometric_average_return(returns: Iterable[float]) -> float | None:
    """
    Постоянная доходность за шаг, дающая тот же итог, что и фактические.

    Returns:
        Средняя геометрическая доходность или None для пустого входа

    Examples:
        >>> round(get_geometric_average_return([0.1, 0.1]), 12)
        0.1
    """
    final_equity = 1.0
    size = 0
    for datum in returns:
        final_equity *= 1.0 + datum
        size += 1

    if size == 0:
        return None

    return express_return_over_different_period(get_return(1.0, final_equity), size)


# =============================================================================
# РИСК
# =============================================================================


def get_downside_deviation(
    returns: Iterable[float],
    minimum_acceptable_return: float,
) -> float | None:
    """
    Downside deviation относительно минимально приемлемой доходности (MAR).

    В сумму входят только доходности ниже MAR, делитель — полное
    количество доходностей.

    Returns:
        Downside deviation или None для пустого входа
    """
    sum_square = 0.0
    size = 0
    for datum in returns:
        if datum < minimum_acceptable_return:
            sum_square += (datum - minimum_acceptable_return) ** 2
        size += 1

    if size == 0:
        return None

    return math.sqrt(sum_square / size)


def get_sortino_ratio(
    returns: Sequence[float],
    minimum_acceptable_return: float,
) -> float | None:
    """
    Коэффициент Sortino.

    Returns:
        (geometric_average_return - MAR) / downside_deviation или None,
        если returns пуст или downside deviation равна нулю
    """
    downside_deviation = get_downside_deviation(returns, minimum_acceptable_return)
    if not downside_deviation:
        return None

    average_return = get_geometric_average_return(returns)
    return (average_return - minimum_acceptable_return) / downside_deviation


def get_absolute_earning_potential(prices: Iterable[float]) -> float:
    """
    Максимальный множитель equity для "идеального трейдера".

    Идеальный трейдер торгует на весь equity, только в моменты из prices,
    и всегда верно выбирает long или short: каждый шаг даёт 1 + |return|.

    Examples:
        >>> round(get_absolute_earning_potential([100.0, 110.0, 99.0]), 12)
        1.21
    """
    absolute_earnings = 1.0
    for previous_price, price in in_pairs(prices):
        absolute_earnings *= 1.0 + abs(get_return(previous_price, price))
    return absolute_earnings
