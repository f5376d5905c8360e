"""
Sampling — Генерация точек по произвольной плотности вероятности

Rejection sampling: x равномерно на [min_x, max_x], порог равномерно
на [0, max_y]; x принимается, если pdf(x) больше порога.

КОНТРАКТ ВЫЗЫВАЮЩЕГО:
1. max_y >= sup(pdf) на отрезке, иначе выборка смещена (не проверяется)
2. Если pdf(x) <= 0 почти везде, цикл может не завершиться. Для защиты
   передайте max_attempts: при исчерпании попыток — SamplingExhaustedError
"""

import random
from collections.abc import Callable

from src.core.logger import logger


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SamplingExhaustedError(RuntimeError):
    """
    Исчерпан лимит попыток rejection sampling.

    Обычно означает, что pdf почти везде <= 0 на заданном отрезке
    или max_y сильно завышен.
    """

    pass


# =============================================================================
# REJECTION SAMPLING
# =============================================================================


def generate_points(
    probability_distribution: Callable[[float], float],
    minimum_x: float,
    maximum_x: float,
    maximum_y: float,
    number: int,
    *,
    rng: random.Random | None = None,
    max_attempts: int | None = None,
) -> list[float]:
    """
    Псевдослучайная выборка точек в соответствии с плотностью вероятности.

    Args:
        probability_distribution: Плотность (не обязательно нормированная)
        minimum_x: Нижняя граница области
        maximum_x: Верхняя граница области
        maximum_y: Верхняя граница плотности на области
        number: Требуемое количество точек
        rng: Генератор случайных чисел (default: новый random.Random())
        max_attempts: Лимит кандидатов (default: без лимита)

    Returns:
        Список принятых x в порядке генерации, длины number

    Raises:
        ValueError: если number < 0
        SamplingExhaustedError: если исчерпан max_attempts

    Examples:
        >>> points = generate_points(lambda x: 1.0, 0.0, 1.0, 1.0, 5, rng=random.Random(7))
        >>> len(points)
        5
    """
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")

    rng = rng or random.Random()
    domain_range = maximum_x - minimum_x

    points: list[float] = []
    attempts = 0

    while len(points) < number:
        if max_attempts is not None and attempts >= max_attempts:
            raise SamplingExhaustedError(
                f"Accepted {len(points)} of {number} points after {attempts} attempts"
            )
        attempts += 1

        point = rng.random() * domain_range + minimum_x
        probability = probability_distribution(point)
        if rng.random() * maximum_y < probability:
            points.append(point)

    logger.debug(
        "generate_points: accepted %d points in %d attempts", len(points), attempts
    )

    return points
