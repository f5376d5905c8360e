"""
Number Theory — Разложение на простые множители и дроби

Модуль реализует:
- Разложение целого на простые множители (trial division)
- Общие простые множители и наибольший общий делитель
- Упрощение дроби с произвольными (в том числе дробными) числителем
  и знаменателем

ОГРАНИЧЕНИЯ:
1. find_prime_factors(0) не определено → ValueError
2. simplify_fraction удваивает числитель и знаменатель, пока оба не станут
   целыми. Для очень малых дробных входов это много итераций; переполнение
   до inf → OverflowError
"""

import math

from src.core.domain.tuples import Pair
from src.core.logger import logger


# =============================================================================
# ПРОСТЫЕ МНОЖИТЕЛИ
# =============================================================================


def find_prime_factors(integer: int) -> dict[int, int]:
    """
    Разложение целого числа на простые множители.

    Ключи — уникальные множители, значения — их степени. Произведение
    factor ** power по всем ключам равно исходному числу.

    Для отрицательного входа добавляется множитель -1 со степенью 1,
    остальное разложение совпадает с разложением |integer|.

    Алгоритм:
        1. Делим на 2, пока делится
        2. Делим на нечётные d = 3, 5, 7, ... пока d * d <= частное.
           Составные d не требуют проверки: их простые делители меньше d
           и к этому моменту уже вынесены из частного
        3. Остаток > 1 — сам простой множитель
        4. Для |integer| == 1 возвращается {1: 1}

    Raises:
        ValueError: если integer == 0

    Examples:
        >>> find_prime_factors(123)
        {3: 1, 41: 1}
        >>> find_prime_factors(-8)
        {-1: 1, 2: 3}
        >>> find_prime_factors(13)
        {13: 1}
    """
    if integer == 0:
        raise ValueError("Cannot find prime factors of 0")

    prime_factors: dict[int, int] = {}

    if integer < 0:
        prime_factors[-1] = 1
        integer = -integer

    while integer % 2 == 0:
        prime_factors[2] = prime_factors.get(2, 0) + 1
        integer //= 2

    divisor = 3
    while divisor * divisor <= integer:
        while integer % divisor == 0:
            prime_factors[divisor] = prime_factors.get(divisor, 0) + 1
            integer //= divisor
        divisor += 2

    if integer > 1:
        prime_factors[integer] = prime_factors.get(integer, 0) + 1

    if not prime_factors:
        # |integer| == 1
        prime_factors[integer] = 1

    return prime_factors


def find_common_prime_factors(int1: int, int2: int) -> dict[int, int]:
    """
    Общие простые множители двух чисел с минимальной из двух степеней.

    Examples:
        >>> find_common_prime_factors(12, 18)
        {2: 1, 3: 1}
    """
    factors1 = find_prime_factors(int1)
    factors2 = find_prime_factors(int2)

    return {
        factor: min(power, factors2[factor])
        for factor, power in factors1.items()
        if factor in factors2
    }


def find_greatest_common_factor(int1: int, int2: int) -> int:
    """
    Наибольший общий делитель через общие простые множители.

    Для двух отрицательных чисел множитель -1 общий, результат отрицателен.

    Examples:
        >>> find_greatest_common_factor(12, 18)
        6
        >>> find_greatest_common_factor(7, 9)
        1
    """
    product = 1
    for factor, power in find_common_prime_factors(int1, int2).items():
        product *= factor**power
    return product


# =============================================================================
# ДРОБИ
# =============================================================================


def simplify_fraction(numerator: float, denominator: float) -> Pair[int, int] | None:
    """
    Несократимая целая дробь, равная numerator / denominator.

    Числитель и знаменатель удваиваются, пока оба не станут целыми, затем
    делятся на их наибольший общий делитель (после усечения до int).

    Returns:
        Pair(числитель, знаменатель):
        - None, если denominator == 0
        - Pair(0, 1), если numerator == 0

    Raises:
        OverflowError: если удвоение переполнилось до inf

    Examples:
        >>> tuple(simplify_fraction(6, 8))
        (3, 4)
        >>> tuple(simplify_fraction(0.5, 1.5))
        (1, 3)
        >>> simplify_fraction(1, 0) is None
        True
    """
    if denominator == 0:
        return None
    if numerator == 0:
        return Pair(0, 1)

    doublings = 0
    while numerator % 1 != 0 or denominator % 1 != 0:
        numerator *= 2
        denominator *= 2
        doublings += 1
        if not (math.isfinite(numerator) and math.isfinite(denominator)):
            raise OverflowError(
                f"Fraction scaling overflowed after {doublings} doublings"
            )

    if doublings:
        logger.debug("simplify_fraction: scaled to whole numbers in %d doublings", doublings)

    whole_numerator = int(numerator)
    whole_denominator = int(denominator)
    common_factor = find_greatest_common_factor(whole_numerator, whole_denominator)

    return Pair(whole_numerator // common_factor, whole_denominator // common_factor)
