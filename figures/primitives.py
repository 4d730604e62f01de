from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, ClassVar, Optional, Tuple
import math

from .geometry import Affine2D, Point, Shape, distinct_center


class BasicShape(Shape):
    """
    Leaf shape made of a stored position, some length parameters and a set of
    derived anchor points.

    Subclasses list the names of their point fields in `_anchors` and of
    their length fields in `_lengths`. Anchors left as None are derived from
    the defining parameters once, in __post_init__, and from then on every
    transform is applied to every anchor independently.
    """
    _anchors: ClassVar[Tuple[str, ...]] = ("position",)
    _lengths: ClassVar[Tuple[str, ...]] = ()

    def _set_default(self, name: str, value: Point) -> None:
        if getattr(self, name) is None:
            object.__setattr__(self, name, value)

    def _replace_points(self, fn: Callable[[Point], Point], **changes) -> "BasicShape":
        """Apply fn to every anchor not already given in changes."""
        for name in self._anchors:
            if name not in changes:
                changes[name] = fn(getattr(self, name))
        return replace(self, **changes)

    def _translated(self, old: Point, new: Point, **changes) -> "BasicShape":
        return self._replace_points(lambda p: p.move(old, new), **changes)

    def rotate(self, pivot: Point, angle: float) -> "BasicShape":
        T = Affine2D.about(pivot, Affine2D.from_rotation(math.radians(angle)))
        return self._replace_points(lambda p: p.transformed(T))

    def scale(self, pivot: Point, factor: float) -> "BasicShape":
        T = Affine2D.about(pivot, Affine2D.from_scale(factor))
        lengths = {name: getattr(self, name) * factor for name in self._lengths}
        return self._replace_points(lambda p: p.transformed(T), **lengths)

    def move(self, new_center: Point) -> "BasicShape":
        # The stored center lands exactly on the target, anchors follow by delta.
        return self._translated(self.center(), new_center, position=new_center)

    def center(self) -> Point:
        return self.position


def _box_corners(c: Point, r: float) -> Tuple[Point, ...]:
    return (
        Point(c.x - r, c.y - r),  # left top
        Point(c.x + r, c.y - r),  # right top
        Point(c.x + r, c.y + r),  # right bottom
        Point(c.x - r, c.y + r),  # left bottom
    )


@dataclass(frozen=True)
class Circle(BasicShape):
    position: Point
    radius: float

    _lengths: ClassVar[Tuple[str, ...]] = ("radius",)

    def boundary(self) -> Tuple[Point, ...]:
        return _box_corners(self.position, self.radius)


@dataclass(frozen=True)
class HalfCircle(BasicShape):
    """
    Upper half disk: the arc runs from left_bottom over the top to right_bottom
    and the flat side is the chord between them.
    """
    position: Point
    radius: float
    left_bottom: Optional[Point] = None
    right_bottom: Optional[Point] = None

    _anchors: ClassVar[Tuple[str, ...]] = ("position", "left_bottom", "right_bottom")
    _lengths: ClassVar[Tuple[str, ...]] = ("radius",)

    def __post_init__(self):
        c, r = self.position, self.radius
        self._set_default("left_bottom", Point(c.x - r, c.y))
        self._set_default("right_bottom", Point(c.x + r, c.y))

    def apex(self) -> Point:
        return self.left_bottom.rotate(self.position, 90.0)

    def boundary(self) -> Tuple[Point, ...]:
        return (self.left_bottom, self.apex(), self.right_bottom)


@dataclass(frozen=True)
class Ring(BasicShape):
    position: Point
    inner_radius: float
    width: float

    _lengths: ClassVar[Tuple[str, ...]] = ("inner_radius", "width")

    @property
    def outer_radius(self) -> float:
        return self.inner_radius + self.width

    def boundary(self) -> Tuple[Point, ...]:
        return _box_corners(self.position, self.outer_radius)


@dataclass(frozen=True)
class Polygon(BasicShape):
    """
    Polyline through `points`; closed when the last point repeats the first.
    The center is derived from the points, there is no stored position.
    """
    points: Tuple[Point, ...] = ()
    fill: bool = True

    _anchors: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))

    def _replace_points(self, fn: Callable[[Point], Point], **changes) -> "Polygon":
        return replace(self, points=tuple(fn(p) for p in self.points), **changes)

    def center(self) -> Point:
        return distinct_center(self.points)

    def move(self, new_center: Point) -> "Polygon":
        return self._translated(self.center(), new_center)

    def boundary(self) -> Tuple[Point, ...]:
        return self.points

    def is_closed(self) -> bool:
        return len(self.points) > 1 and self.points[0] == self.points[-1]


@dataclass(frozen=True)
class Trapeze(BasicShape):
    position: Point
    height: float
    lower_width: float
    upper_width: float
    left_top: Optional[Point] = None
    right_top: Optional[Point] = None
    right_bottom: Optional[Point] = None
    left_bottom: Optional[Point] = None

    _anchors: ClassVar[Tuple[str, ...]] = ("position", "left_top", "right_top", "right_bottom", "left_bottom")
    _lengths: ClassVar[Tuple[str, ...]] = ("height", "lower_width", "upper_width")

    def __post_init__(self):
        c, h = self.position, self.height
        self._set_default("left_top", Point(c.x - self.upper_width / 2, c.y - h / 2))
        self._set_default("right_top", Point(c.x + self.upper_width / 2, c.y - h / 2))
        self._set_default("right_bottom", Point(c.x + self.lower_width / 2, c.y + h / 2))
        self._set_default("left_bottom", Point(c.x - self.lower_width / 2, c.y + h / 2))

    def boundary(self) -> Tuple[Point, ...]:
        return (self.left_top, self.right_top, self.right_bottom, self.left_bottom)


@dataclass(frozen=True)
class Diamond(BasicShape):
    """
    Four-point diamond. The side points sit height * vertical_offset_factor
    above the center, which turns the diamond into a kite for factor > 0.
    """
    position: Point
    width: float
    height: float
    vertical_offset_factor: float = 0.0
    center_top: Optional[Point] = None
    left_center: Optional[Point] = None
    right_center: Optional[Point] = None
    center_bottom: Optional[Point] = None

    _anchors: ClassVar[Tuple[str, ...]] = ("position", "center_top", "left_center", "right_center", "center_bottom")
    _lengths: ClassVar[Tuple[str, ...]] = ("width", "height")

    def __post_init__(self):
        c, w, h = self.position, self.width, self.height
        side_y = c.y - h * self.vertical_offset_factor
        self._set_default("center_top", Point(c.x, c.y - h / 2))
        self._set_default("left_center", Point(c.x - w / 2, side_y))
        self._set_default("right_center", Point(c.x + w / 2, side_y))
        self._set_default("center_bottom", Point(c.x, c.y + h / 2))

    def boundary(self) -> Tuple[Point, ...]:
        return (self.center_top, self.left_center, self.center_bottom, self.right_center)


@dataclass(frozen=True)
class Drop(BasicShape):
    """
    Tear drop: one cubic curve leaving the top point and coming back to it,
    with the two bottom points as control points.
    """
    position: Point
    width: float
    height: float
    center_top: Optional[Point] = None
    left_bottom: Optional[Point] = None
    right_bottom: Optional[Point] = None

    _anchors: ClassVar[Tuple[str, ...]] = ("position", "center_top", "left_bottom", "right_bottom")
    _lengths: ClassVar[Tuple[str, ...]] = ("width", "height")

    def __post_init__(self):
        c, w, h = self.position, self.width, self.height
        self._set_default("center_top", Point(c.x, c.y - h / 2))
        self._set_default("left_bottom", Point(c.x - w / 2, c.y + h / 2))
        self._set_default("right_bottom", Point(c.x + w / 2, c.y + h / 2))

    def boundary(self) -> Tuple[Point, ...]:
        return (self.center_top, self.left_bottom, self.right_bottom)


@dataclass(frozen=True)
class Petal(BasicShape):
    """
    Two quadratic curves between start and end, bent through middle_left and
    middle_right. The center is derived from those four points.
    """
    position: Point
    height: float
    width: float
    start: Optional[Point] = None
    end: Optional[Point] = None
    middle_left: Optional[Point] = None
    middle_right: Optional[Point] = None

    _anchors: ClassVar[Tuple[str, ...]] = ("position", "start", "end", "middle_left", "middle_right")
    _lengths: ClassVar[Tuple[str, ...]] = ("height", "width")

    def __post_init__(self):
        c, w, h = self.position, self.width, self.height
        self._set_default("start", Point(c.x, c.y - h / 2))
        self._set_default("end", Point(c.x, c.y + h / 2))
        self._set_default("middle_left", Point(c.x - w / 2, c.y))
        self._set_default("middle_right", Point(c.x + w / 2, c.y))

    def center(self) -> Point:
        return distinct_center([self.start, self.middle_left, self.middle_right, self.end])

    def move(self, new_center: Point) -> "Petal":
        # position is only the construction center here, it follows by delta
        return self._translated(self.center(), new_center)

    def boundary(self) -> Tuple[Point, ...]:
        return (self.start, self.middle_left, self.end, self.middle_right)
