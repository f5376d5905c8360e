"""
Tuples — Неизменяемые кортежи фиксированной арности

Pair / Triple / Quad: гетерогенные immutable кортежи с типизированным
доступом к полям (first, second, ...) как основным интерфейсом.

ИНВАРИАНТЫ:
1. Равенство и строковое представление структурные: str(Pair(1, 2)) == "(1, 2)"
2. Итерация возвращает элементы в позиционном порядке (тип элемента Any)
3. Value semantics: нет разделяемого изменяемого состояния
"""

from typing import Generic, NamedTuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class Pair(NamedTuple, Generic[A, B]):
    """Пара значений (first, second)."""

    first: A
    second: B

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"


class Triple(NamedTuple, Generic[A, B, C]):
    """Тройка значений (first, second, third)."""

    first: A
    second: B
    third: C

    def __str__(self) -> str:
        return f"({self.first}, {self.second}, {self.third})"


class Quad(NamedTuple, Generic[A, B, C, D]):
    """Четвёрка значений (first, second, third, fourth)."""

    first: A
    second: B
    third: C
    fourth: D

    def __str__(self) -> str:
        return f"({self.first}, {self.second}, {self.third}, {self.fourth})"
