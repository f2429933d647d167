class ShapeError(ValueError):
    """Raised when a shape cannot be built from the given lengths."""


class InvalidDimension(ShapeError):
    def __init__(self, name: str, value: float):
        self.name = name
        self.value = value
        super().__init__(f"{name.capitalize()} must be greater than zero, got {value}")


class InvalidTriangle(ShapeError):
    def __init__(self, side_a: float, side_b: float, side_c: float):
        self.sides = (side_a, side_b, side_c)
        super().__init__(
            f"These sides do not form a valid triangle: {side_a}, {side_b}, {side_c}"
        )


class InvalidMenuChoice(ValueError):
    def __init__(self, choice: int):
        self.choice = choice
        super().__init__(f"{choice} is not one of the menu options")


class MalformedInput(ValueError):
    def __init__(self, text: str, expected: str = "number"):
        self.text = text
        self.expected = expected
        super().__init__(f"expected a {expected}, got {text!r}")
