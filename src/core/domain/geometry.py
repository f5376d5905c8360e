"""
Geometry — Точки и прямые на плоскости

Immutable Pydantic модели:
- Point: точка (x, y) с переносом и градиентом к другой точке
- DiagonalLine: прямая y = gradient * x + intercept
- VerticalLine: вертикальная прямая x = const

Line — закрытое объединение DiagonalLine | VerticalLine. Пересечение прямых
вычисляется find_intersection по комбинации вариантов:

    Diagonal × Diagonal → Point | None (параллельные прямые)
    Diagonal × Vertical → Point (всегда существует)
    Vertical × Diagonal → Point (всегда существует)
    Vertical × Vertical → None
"""

import math

from pydantic import BaseModel, Field


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """
    Точка на декартовой плоскости.

    Immutable модель (frozen=True): перенос создаёт новый экземпляр.
    """

    x: float = Field(..., description="Координата x")
    y: float = Field(..., description="Координата y")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def add(self, other: "Point") -> "Point":
        """Покоординатная сумма двух точек."""
        return Point(x=self.x + other.x, y=self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        """Покоординатная разность двух точек."""
        return Point(x=self.x - other.x, y=self.y - other.y)

    def gradient_to(self, other: "Point") -> float | None:
        """
        Градиент прямой через эту и другую точку.

        Returns:
            Градиент или None, если точки на одной вертикали
        """
        from src.core.math.linear import get_gradient

        return get_gradient(self, other)


# =============================================================================
# LINES
# =============================================================================


class DiagonalLine(BaseModel):
    """Невертикальная прямая y = gradient * x + intercept."""

    gradient: float = Field(..., description="Наклон прямой")
    intercept: float = Field(..., description="Значение y при x = 0")

    model_config = {"frozen": True}

    def y_value_at(self, x: float) -> float | None:
        return x * self.gradient + self.intercept

    def x_value_at(self, y: float) -> float | None:
        """x при заданном y. None для горизонтальной прямой."""
        if self.gradient == 0:
            return None
        return (y - self.intercept) / self.gradient

    def contains(self, point: Point) -> bool:
        """Точная (без толерантности) проверка принадлежности точки прямой."""
        return point.x * self.gradient + self.intercept == point.y

    def distance_to(self, point: Point) -> float:
        """
        Кратчайшее расстояние от точки до прямой.

        Формула: |g*x - y + c| / sqrt(g^2 + 1)
        """
        numerator = abs(self.gradient * point.x - point.y + self.intercept)
        return numerator / math.sqrt(self.gradient**2 + 1.0)

    def runs_below(self, point: Point) -> bool:
        """True если точка строго выше прямой."""
        return point.y > self.y_value_at(point.x)

    def runs_above(self, point: Point) -> bool:
        """True если точка строго ниже прямой."""
        return point.y < self.y_value_at(point.x)

    def intersection_with(self, other: "Line") -> Point | None:
        return find_intersection(self, other)


class VerticalLine(BaseModel):
    """Вертикальная прямая x = const."""

    x: float = Field(..., description="Координата x всех точек прямой")

    model_config = {"frozen": True}

    def y_value_at(self, x: float) -> float | None:
        # Вертикальная прямая не является функцией от x
        return None

    def x_value_at(self, y: float) -> float | None:
        return self.x

    def contains(self, point: Point) -> bool:
        return point.x == self.x

    def distance_to(self, point: Point) -> float:
        return abs(self.x - point.x)

    def intersection_with(self, other: "Line") -> Point | None:
        return find_intersection(self, other)


Line = DiagonalLine | VerticalLine


# =============================================================================
# ОПЕРАЦИИ НАД ПРЯМЫМИ
# =============================================================================


def _diagonal_vertical_intersection(diagonal: DiagonalLine, vertical: VerticalLine) -> Point:
    return Point(x=vertical.x, y=diagonal.y_value_at(vertical.x))


def find_intersection(line1: Line, line2: Line) -> Point | None:
    """
    Точка пересечения двух прямых.

    Args:
        line1: Первая прямая
        line2: Вторая прямая

    Returns:
        Point пересечения или None, если прямые параллельны
        (включая две вертикальные прямые)

    Examples:
        >>> a = DiagonalLine(gradient=1.0, intercept=0.0)
        >>> b = DiagonalLine(gradient=-1.0, intercept=2.0)
        >>> find_intersection(a, b)
        Point(x=1.0, y=1.0)
        >>> find_intersection(VerticalLine(x=1.0), VerticalLine(x=2.0)) is None
        True
    """
    if isinstance(line1, DiagonalLine) and isinstance(line2, DiagonalLine):
        relative_gradient = line1.gradient - line2.gradient
        if relative_gradient == 0:
            return None
        x = (line2.intercept - line1.intercept) / relative_gradient
        return Point(x=x, y=line1.y_value_at(x))

    if isinstance(line1, DiagonalLine) and isinstance(line2, VerticalLine):
        return _diagonal_vertical_intersection(line1, line2)

    if isinstance(line1, VerticalLine) and isinstance(line2, DiagonalLine):
        return _diagonal_vertical_intersection(line2, line1)

    return None


def line_from_points(point1: Point, point2: Point) -> Line:
    """
    Прямая, проходящая через две точки.

    Если точки лежат на одной вертикали, возвращается VerticalLine.

    Examples:
        >>> line_from_points(Point(x=0, y=1), Point(x=1, y=3))
        DiagonalLine(gradient=2.0, intercept=1.0)
        >>> line_from_points(Point(x=2, y=0), Point(x=2, y=5))
        VerticalLine(x=2.0)
    """
    from src.core.math.linear import get_gradient

    gradient = get_gradient(point1, point2)
    if gradient is None:
        return VerticalLine(x=point1.x)

    intercept = point1.y - gradient * point1.x
    return DiagonalLine(gradient=gradient, intercept=intercept)
