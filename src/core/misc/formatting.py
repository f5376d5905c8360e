"""Formatting — строковое представление чисел."""


def strip_trailing_zeros(value: float) -> str:
    """
    Строковое представление числа без избыточных нулей.

    Экспоненциальная запись не изменяется.

    Examples:
        >>> strip_trailing_zeros(5.0)
        '5'
        >>> strip_trailing_zeros(2.50)
        '2.5'
        >>> strip_trailing_zeros(1.5e20)
        '1.5e+20'
    """
    text = str(value)
    if "." not in text or "e" in text or "E" in text:
        return text
    return text.rstrip("0").rstrip(".")
