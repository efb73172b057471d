"""Points and axis-aligned rectangles on an integer grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def translate(self, other: "Point") -> None:
        """Move this point by the coordinates of ``other``."""
        self.x += other.x
        self.y += other.y

    def __str__(self) -> str:
        return f"point({self.x}, {self.y})"


@dataclass
class Rectangle:
    """A rectangle given by its upper-left and lower-right corners."""

    upper_left: Point
    lower_right: Point

    @classmethod
    def from_coordinates(
        cls,
        upper_left_x: int,
        upper_left_y: int,
        lower_right_x: int,
        lower_right_y: int,
    ) -> "Rectangle":
        """Build a rectangle from the four corner coordinates."""
        return cls(
            Point(upper_left_x, upper_left_y), Point(lower_right_x, lower_right_y)
        )

    def area(self) -> int:
        """Return width times height."""
        width = self.lower_right.x - self.upper_left.x
        height = self.lower_right.y - self.upper_left.y
        return width * height

    def intersects(self, other: "Rectangle") -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        if (
            self.lower_right.x <= other.upper_left.x
            or other.lower_right.x <= self.upper_left.x
        ):
            return False
        if (
            self.upper_left.y >= other.lower_right.y
            or other.upper_left.y >= self.lower_right.y
        ):
            return False
        return True

    def __str__(self) -> str:
        return f"rectangle(upper_left={self.upper_left}, lower_right={self.lower_right})"