"""
geometry.py: Axis-aligned bounding boxes shared by the ball and the paddles.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its top-left corner and size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def overlaps(self, other: "Box") -> bool:
        """Touching edges count as an overlap."""
        if self.right < other.left:
            return False
        if self.left > other.right:
            return False
        if self.bottom < other.top:
            return False
        if self.top > other.bottom:
            return False
        return True
