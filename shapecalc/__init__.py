from abc import ABC, abstractmethod
import logging
import math

from .errors import (
    InvalidDimension,
    InvalidMenuChoice,
    InvalidTriangle,
    MalformedInput,
    ShapeError,
)

__all__ = [
    "Shape",
    "Square",
    "Rectangle",
    "Circle",
    "Triangle",
    "EquilateralTriangle",
    "IsoscelesTriangle",
    "ScaleneTriangle",
    "ShapeError",
    "InvalidDimension",
    "InvalidTriangle",
    "InvalidMenuChoice",
    "MalformedInput",
]

logger = logging.getLogger(__name__)


def _length(name: str, value) -> float:
    """Check that a length is a real number greater than zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value)}")
    if not value > 0:
        raise InvalidDimension(name, value)
    return float(value)


class Shape(ABC):
    name = "shape"
    perimeter_label = "perimeter"

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def perimeter(self) -> float:
        pass


class Square(Shape):
    name = "square"

    def __init__(self, side: float):
        self._side = _length("side", side)
        logger.debug("Built %r", self)

    @property
    def side(self) -> float:
        return self._side

    def area(self) -> float:
        return self._side * self._side

    def perimeter(self) -> float:
        return 4 * self._side

    def __repr__(self):
        return f"Square(side={self._side})"


class Rectangle(Shape):
    name = "rectangle"

    def __init__(self, width: float, height: float):
        self._width = _length("width", width)
        self._height = _length("height", height)
        logger.debug("Built %r", self)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def area(self) -> float:
        return self._width * self._height

    def perimeter(self) -> float:
        return 2 * (self._width + self._height)

    def __repr__(self):
        return f"Rectangle(width={self._width}, height={self._height})"


class Circle(Shape):
    name = "circle"
    perimeter_label = "circumference"

    def __init__(self, radius: float):
        self._radius = _length("radius", radius)
        logger.debug("Built %r", self)

    @property
    def radius(self) -> float:
        return self._radius

    def area(self) -> float:
        return math.pi * self._radius * self._radius

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def circumference(self) -> float:
        return self.perimeter()

    def __repr__(self):
        return f"Circle(radius={self._radius})"


class Triangle(Shape):
    """A triangle given by its three side lengths.

    Every side must be greater than zero and strictly shorter than the sum of
    the other two. Subclasses supply the area formula.
    """

    name = "triangle"

    def __init__(self, side_a: float, side_b: float, side_c: float):
        a = _length("side", side_a)
        b = _length("side", side_b)
        c = _length("side", side_c)
        if a >= b + c or b >= a + c or c >= a + b:
            raise InvalidTriangle(a, b, c)
        self._sides = (a, b, c)
        logger.debug("Built %r", self)

    @property
    def side_a(self) -> float:
        return self._sides[0]

    @property
    def side_b(self) -> float:
        return self._sides[1]

    @property
    def side_c(self) -> float:
        return self._sides[2]

    @property
    def sides(self) -> tuple:
        return self._sides

    def perimeter(self) -> float:
        return self.side_a + self.side_b + self.side_c

    def __repr__(self):
        return f"{type(self).__name__}({self.side_a}, {self.side_b}, {self.side_c})"


class EquilateralTriangle(Triangle):
    name = "equilateral triangle"

    def __init__(self, side: float):
        super().__init__(side, side, side)

    @property
    def side(self) -> float:
        return self.side_a

    def area(self) -> float:
        return (math.sqrt(3) / 4) * self.side * self.side


class IsoscelesTriangle(Triangle):
    name = "isosceles triangle"

    def __init__(self, equal_side: float, base: float):
        super().__init__(equal_side, equal_side, base)
        if not 2 * self.equal_side > self.base:
            raise InvalidTriangle(*self.sides)

    @property
    def equal_side(self) -> float:
        return self.side_a

    @property
    def base(self) -> float:
        return self.side_c

    def area(self) -> float:
        height = math.sqrt(self.equal_side * self.equal_side - (self.base * self.base) / 4)
        return (self.base * height) / 2


class ScaleneTriangle(Triangle):
    name = "scalene triangle"

    def area(self) -> float:
        s = (self.side_a + self.side_b + self.side_c) / 2
        return math.sqrt(s * (s - self.side_a) * (s - self.side_b) * (s - self.side_c))
