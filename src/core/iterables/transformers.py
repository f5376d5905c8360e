"""
Sequence Transformers — Ленивые производные последовательности

Модуль строит производные последовательности из одной или нескольких
исходных, не материализуя результат (кроме функций *_to_list и unzipped):
- reversed_view: перезапускаемый обход в обратном порядке по snapshot
- stitched / Stitched: циклическое чередование нескольких последовательностей
- zipped / zip_to_list / unzipped: попарное сцепление и обратное разделение
- two_at_a_time: непересекающиеся пары (e0, e1), (e2, e3), ...
- in_pairs: перекрывающиеся пары (e0, e1), (e1, e2), ...
- but_first: передача первого элемента в consumer при старте обхода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции корректны для последовательностей любой длины ≥ 0
2. Входы никогда не читаются за их логическим концом
3. Итераторы, переданные в stitched, потребляются безвозвратно
4. Один обход за раз: производные последовательности не потокобезопасны
"""

import itertools
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

from src.core.domain.tuples import Pair

T = TypeVar("T")
E = TypeVar("E")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptySequenceError(ValueError):
    """
    Последовательность пуста там, где требуется хотя бы один элемент.

    Возникает при старте обхода but_first над пустым источником.
    """

    pass


# =============================================================================
# REVERSED
# =============================================================================


class ReversedView(Iterable[T]):
    """
    Перезапускаемое представление последовательности в обратном порядке.

    Каждый новый обход делает неизменяемый snapshot текущего содержимого
    источника. Изменение источника между обходами безопасно и видно
    в следующем обходе; изменение во время обхода не влияет на него.
    """

    def __init__(self, original: Sequence[T]):
        self._original = original

    def __iter__(self) -> Iterator[T]:
        snapshot = tuple(self._original)
        return reversed(snapshot)


def reversed_view(original: Sequence[T]) -> ReversedView[T]:
    """
    Обход последовательности с конца без копирования при создании.

    Args:
        original: Конечная индексируемая последовательность

    Returns:
        Перезапускаемый ReversedView

    Examples:
        >>> list(reversed_view([1, 2, 3]))
        [3, 2, 1]
        >>> list(reversed_view([]))
        []
    """
    return ReversedView(original)


# =============================================================================
# STITCHED
# =============================================================================


def stitched(first: Iterator[T], *others: Iterator[T]) -> Iterator[T]:
    """
    Циклическое чередование элементов нескольких итераторов.

    Итераторы опрашиваются по одному разу по очереди, затем цикл
    повторяется с первого. Обход заканчивается, как только очередной
    итератор в цикле исчерпан: при разной длине входов результат
    обрывается на первой "дыре" цикла. Элементы, уже взятые из других
    итераторов в этом неполном цикле, остаются в результате.

    ВНИМАНИЕ: переданные итераторы потребляются. Не используйте их
    повторно вне результата этой функции.

    Args:
        first: Первый (обязательный) итератор
        *others: Остальные итераторы

    Returns:
        Одноразовый итератор по чередующимся элементам

    Examples:
        >>> list(stitched(iter([1, 2, 3]), iter([10, 20])))
        [1, 10, 2, 20, 3]
    """
    iterators = [iter(first), *(iter(other) for other in others)]

    for iterator in itertools.cycle(iterators):
        try:
            value = next(iterator)
        except StopIteration:
            return
        yield value


class Stitched(Iterable[T]):
    """
    Перезапускаемая версия stitched над перезапускаемыми источниками.

    Каждый обход создаёт новые итераторы из источников и потребляет их
    заново, поэтому повторный обход даёт тот же результат.
    """

    def __init__(self, first: Iterable[T], *others: Iterable[T]):
        self._sources: tuple[Iterable[T], ...] = (first, *others)

    def __iter__(self) -> Iterator[T]:
        return stitched(*(iter(source) for source in self._sources))


# =============================================================================
# ZIP / UNZIP
# =============================================================================


def zipped(first_iterable: Iterable[T], second_iterable: Iterable[E]) -> Iterator[Pair[T, E]]:
    """
    Попарное сцепление элементов с одинаковыми индексами.

    Длина результата равна длине более короткого входа.

    Examples:
        >>> [tuple(pair) for pair in zipped([1, 2, 3], ["a", "b"])]
        [(1, 'a'), (2, 'b')]
    """
    for first_value, second_value in zip(first_iterable, second_iterable):
        yield Pair(first_value, second_value)


def zip_to_list(first_iterable: Iterable[T], second_iterable: Iterable[E]) -> list[Pair[T, E]]:
    """Материализованный вариант zipped."""
    return list(zipped(first_iterable, second_iterable))


def unzipped(zipped_set: Iterable[Pair[T, E]]) -> Pair[list[T], list[E]]:
    """
    Разделение последовательности пар на два списка.

    Порядок элементов сохраняется. Обратная операция к zipped.

    Returns:
        Pair(список первых элементов, список вторых элементов)
    """
    first_values: list[T] = []
    second_values: list[E] = []

    for pair in zipped_set:
        first_values.append(pair.first)
        second_values.append(pair.second)

    return Pair(first_values, second_values)


# =============================================================================
# ПАРНЫЕ ОКНА
# =============================================================================


def two_at_a_time(original: Iterable[T], fillvalue: Any = None) -> Iterator[Pair[T, Any]]:
    """
    Непересекающиеся пары соседних элементов: (e0, e1), (e2, e3), ...

    При нечётной длине последняя пара имеет second = fillvalue (default: None).
    Если None — допустимый элемент входа, передайте собственный маркер
    в fillvalue: иначе [1, None] и [1] дают одну и ту же пару (1, None).

    Examples:
        >>> [tuple(pair) for pair in two_at_a_time([1, 2, 3])]
        [(1, 2), (3, None)]
        >>> [tuple(pair) for pair in two_at_a_time([1, 2, 3], fillvalue="-")]
        [(1, 2), (3, '-')]
    """
    iterator = iter(original)

    for first_value in iterator:
        second_value = next(iterator, fillvalue)
        yield Pair(first_value, second_value)


def in_pairs(original: Iterable[T]) -> Iterator[Pair[T, T]]:
    """
    Перекрывающиеся пары соседних элементов: (e0, e1), (e1, e2), ...

    Для входа длины n >= 2 возвращает ровно n - 1 пар, иначе ничего.

    Examples:
        >>> [tuple(pair) for pair in in_pairs("abc")]
        [('a', 'b'), ('b', 'c')]
        >>> list(in_pairs([1]))
        []
    """
    iterator = iter(original)

    try:
        previous = next(iterator)
    except StopIteration:
        return

    for current in iterator:
        yield Pair(previous, current)
        previous = current


# =============================================================================
# BUT FIRST
# =============================================================================


class ButFirst(Iterable[T]):
    """
    Обход без первого элемента с передачей первого элемента в consumer.

    Первый элемент извлекается и передаётся в on_first немедленно при
    старте каждого обхода (в __iter__), а не лениво при первом next().
    """

    def __init__(self, original: Iterable[T], on_first: Callable[[T], Any]):
        self._original = original
        self._on_first = on_first

    def __iter__(self) -> Iterator[T]:
        iterator = iter(self._original)

        try:
            first_value = next(iterator)
        except StopIteration:
            raise EmptySequenceError("Cannot extract first element of an empty sequence") from None

        self._on_first(first_value)
        return iterator


def but_first(original: Iterable[T], on_first: Callable[[T], Any]) -> ButFirst[T]:
    """
    Обход последовательности со второго элемента.

    Предназначено для for-циклов, где первый элемент обрабатывается
    отдельно (например, инициализирует состояние).

    Raises:
        EmptySequenceError: при старте обхода пустой последовательности

    Examples:
        >>> seen = []
        >>> list(but_first([1, 2, 3], seen.append))
        [2, 3]
        >>> seen
        [1]
    """
    return ButFirst(original, on_first)


# =============================================================================
# СОВМЕСТНАЯ СОРТИРОВКА
# =============================================================================


def sort_lists_simultaneously(
    value_list: Sequence[T],
    companion_list: Sequence[E],
) -> Pair[list[T], list[E]]:
    """
    Сортировка двух списков равной длины по естественному порядку первого.

    Элемент companion_list с индексом i занимает ту же позицию, что
    и value_list[i]. Сортировка стабильная.

    Raises:
        ValueError: если длины списков различаются

    Examples:
        >>> result = sort_lists_simultaneously([3, 1, 2], ["c", "a", "b"])
        >>> result.first, result.second
        ([1, 2, 3], ['a', 'b', 'c'])
    """
    if len(value_list) != len(companion_list):
        raise ValueError(
            f"Mismatched list lengths: {len(value_list)} != {len(companion_list)}"
        )

    order = sorted(range(len(value_list)), key=value_list.__getitem__)

    return Pair(
        [value_list[index] for index in order],
        [companion_list[index] for index in order],
    )
