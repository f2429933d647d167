"""
Interactive menu for the shape calculator.

The session reads one choice or number per line and keeps running until the
user picks ``0`` or input runs out. Bad lengths, bad menu choices and
non-numeric input each print one line and bring the main menu back.
"""

import logging
import sys

from . import (
    Circle,
    EquilateralTriangle,
    IsoscelesTriangle,
    Rectangle,
    ScaleneTriangle,
    Shape,
    Square,
)
from . import config
from .errors import InvalidMenuChoice, MalformedInput, ShapeError

logger = logging.getLogger(__name__)

EXIT = 0
SQUARE = 1
RECTANGLE = 2
CIRCLE = 3
TRIANGLE = 4

MAIN_MENU = (
    "Which shape would you like to calculate?",
    "1. Square",
    "2. Rectangle",
    "3. Circle",
    "4. Triangle",
    "0. Exit",
)

TRIANGLE_MENU = (
    "Select the type of triangle:",
    "1. Equilateral",
    "2. Isosceles",
    "3. Scalene",
)

CHOICE_PROMPT = "Enter your choice: "
INVALID_CHOICE = "Invalid choice, please try again."
EXIT_MESSAGE = "Exiting the program."
USAGE = "usage: shapecalc (takes no arguments; pick shapes from the menu)"


class ShapeCalculatorCLI:
    """Menu-driven session over a pair of text streams."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.running = True

    def _print(self, *lines: str):
        for line in lines:
            print(line, file=self.stdout)

    def _read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def read_int(self, prompt: str = CHOICE_PROMPT) -> int:
        text = self._read(prompt)
        try:
            return int(text)
        except ValueError:
            raise MalformedInput(text, "whole number") from None

    def read_float(self, prompt: str) -> float:
        text = self._read(prompt)
        try:
            return float(text)
        except ValueError:
            raise MalformedInput(text) from None

    def read_choice(self, options) -> int:
        choice = self.read_int()
        if choice not in options:
            raise InvalidMenuChoice(choice)
        return choice

    def display_menu(self):
        self._print(*MAIN_MENU)

    def build_triangle(self) -> Shape:
        self._print(*TRIANGLE_MENU)
        kind = self.read_choice((1, 2, 3))
        if kind == 1:
            side = self.read_float("Enter the side of the equilateral triangle: ")
            return EquilateralTriangle(side)
        if kind == 2:
            equal_side = self.read_float("Enter the equal side of the isosceles triangle: ")
            base = self.read_float("Enter the base of the isosceles triangle: ")
            return IsoscelesTriangle(equal_side, base)
        side_a = self.read_float("Enter the first side of the scalene triangle: ")
        side_b = self.read_float("Enter the second side of the scalene triangle: ")
        side_c = self.read_float("Enter the third side of the scalene triangle: ")
        return ScaleneTriangle(side_a, side_b, side_c)

    def build_shape(self, choice: int) -> Shape:
        """Prompt for the lengths of the chosen shape and construct it."""
        if choice == SQUARE:
            return Square(self.read_float("Enter the side of the square: "))
        if choice == RECTANGLE:
            width = self.read_float("Enter the width of the rectangle: ")
            height = self.read_float("Enter the height of the rectangle: ")
            return Rectangle(width, height)
        if choice == CIRCLE:
            return Circle(self.read_float("Enter the radius of the circle: "))
        if choice == TRIANGLE:
            return self.build_triangle()
        raise InvalidMenuChoice(choice)

    def calculate(self, shape: Shape):
        """Ask for area or perimeter and print the result."""
        label = shape.perimeter_label
        self._print("What would you like to calculate?", "1. Area", f"2. {label.capitalize()}")
        what = self.read_choice((1, 2))
        if what == 1:
            self._print(f"The area of the shape is: {shape.area()}")
        elif isinstance(shape, Circle):
            self._print(f"The circumference of the circle is: {shape.circumference()}")
        else:
            self._print(f"The {label} of the shape is: {shape.perimeter()}")

    def process_choice(self, choice: int):
        if choice == EXIT:
            self._print(EXIT_MESSAGE)
            self.running = False
            return
        shape = self.build_shape(choice)
        self.calculate(shape)

    def step(self):
        """Run one pass of the main menu, reporting any error on one line."""
        self.display_menu()
        try:
            self.process_choice(self.read_int())
        except InvalidMenuChoice as e:
            logger.debug("Rejected menu choice: %s", e)
            self._print(INVALID_CHOICE)
        except ShapeError as e:
            logger.debug("Rejected dimensions: %s", e)
            self._print(str(e))
        except MalformedInput as e:
            logger.debug("Rejected input: %s", e)
            self._print(f"An error occurred: {e}")

    def run(self) -> int:
        logger.info("Session started")
        try:
            while self.running:
                self.step()
        except EOFError:
            logger.info("Input closed")
            self._print("", EXIT_MESSAGE)
            self.running = False
        logger.info("Session ended")
        return 0


def main(argv=None) -> int:
    """Console entry point; returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        print(USAGE, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level(),
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )
    try:
        return ShapeCalculatorCLI().run()
    except KeyboardInterrupt:
        print(file=sys.stdout)
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
