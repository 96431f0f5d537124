"""Rectangle overlap math shared by the contact and proximity resolvers."""

import math
from dataclasses import dataclass

from cassino.gui.config import CardDimensions

BBox = tuple[float, float, float, float]
Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect dimensions must be non-negative, got {self.width}x{self.height}")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def bbox(self) -> BBox:
        return self.x, self.y, self.x + self.width, self.y + self.height

    @property
    def center(self) -> Point:
        return self.x + self.width / 2, self.y + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        x0, y0, x1, y1 = self.bbox
        return x0 <= x <= x1 and y0 <= y <= y1


def overlap_area(a: Rect, b: Rect) -> float:
    left = max(a.x, b.x)
    right = min(a.x + a.width, b.x + b.width)
    top = max(a.y, b.y)
    bottom = min(a.y + a.height, b.y + b.height)
    if left < right and top < bottom:
        return (right - left) * (bottom - top)
    return 0.0


def overlap_percentage(a: Rect, b: Rect) -> float:
    """Overlap as a fraction of the smaller rect, so a contained rect scores 1.0."""
    area = overlap_area(a, b)
    if area == 0:
        return 0.0
    return area / min(a.area, b.area)


def has_overlap(a: Rect, b: Rect) -> bool:
    return overlap_area(a, b) > 0


def dropped_bounds(point: Point, dims: CardDimensions | None = None) -> Rect:
    """Bounds of a card of size ``dims`` centred on the drop point."""
    dims = dims or CardDimensions()
    x, y = point
    return Rect(x - dims.width / 2, y - dims.height / 2, dims.width, dims.height)


def distance(p: Point, q: Point) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def within_bounds(point: Point, rect: Rect, tolerance: float = 0) -> bool:
    """True if the point lies inside ``rect`` grown by ``tolerance`` on every side."""
    x, y = point
    x0, y0, x1, y1 = rect.bbox
    return x0 - tolerance <= x <= x1 + tolerance and y0 - tolerance <= y <= y1 + tolerance
