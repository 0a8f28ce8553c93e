"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width-by-height rectangle.

    >>> Rectangle(10, 20).area()
    200
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
