from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple
import math
import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @staticmethod
    def from_array(point_xy: np.ndarray) -> "Point":
        return Point(float(point_xy[0]), float(point_xy[1]))

    def isclose(self, other: "Point", abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(self.y, other.y, abs_tol=abs_tol)

    def transformed(self, T: "Affine2D") -> "Point":
        return Point.from_array(T.apply(self.to_array()))

    # ---- Transform helpers ----
    def move(self, old_center: "Point", new_center: "Point") -> "Point":
        """
        Translate by the displacement old_center -> new_center, i.e. the point
        follows its owner's center rather than being placed at new_center.
        """
        return Point(self.x + (new_center.x - old_center.x), self.y + (new_center.y - old_center.y))

    def scale(self, pivot: "Point", factor: float) -> "Point":
        return self.transformed(Affine2D.about(pivot, Affine2D.from_scale(factor)))

    def rotate(self, pivot: "Point", angle: float) -> "Point":
        """
        Rotate about pivot by angle degrees using [[c, -s], [s, c]].
        On a y-down canvas a positive angle turns clockwise.
        """
        return self.transformed(Affine2D.about(pivot, Affine2D.from_rotation(math.radians(angle))))


@dataclass(frozen=True)
class Affine2D:
    """
    2D affine transform x -> A x + t
    """
    A: np.ndarray  # shape (2, 2)
    t: np.ndarray  # shape (2,)

    def __post_init__(self):
        if self.A.shape != (2, 2):
            raise ValueError("A must be 2x2")
        if self.t.shape != (2,):
            raise ValueError("t must be length-2")

    def apply(self, point_xy: np.ndarray) -> np.ndarray:
        return self.A @ point_xy + self.t

    # ---- Constructors and composition ----
    @staticmethod
    def from_translate(dx: float, dy: float) -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.array([dx, dy], dtype=float))

    @staticmethod
    def from_scale(sx: float, sy: float | None = None) -> "Affine2D":
        if sy is None:
            sy = sx
        return Affine2D(A=np.array([[sx, 0.0], [0.0, sy]], dtype=float), t=np.zeros(2))

    @staticmethod
    def from_rotation(theta_radians: float) -> "Affine2D":
        c = math.cos(theta_radians)
        s = math.sin(theta_radians)
        return Affine2D(A=np.array([[c, -s], [s, c]], dtype=float), t=np.zeros(2))

    @staticmethod
    def about(pivot: Point, transform: "Affine2D") -> "Affine2D":
        """
        Conjugate transform so that it acts around pivot instead of the origin.
        """
        to_origin = Affine2D.from_translate(-pivot.x, -pivot.y)
        back = Affine2D.from_translate(pivot.x, pivot.y)
        return to_origin.then(transform).then(back)

    def then(self, after: "Affine2D") -> "Affine2D":
        """
        First apply self, then apply 'after'.
        y = after.apply(self.apply(x))
        """
        A_new = after.A @ self.A
        t_new = after.A @ self.t + after.t
        return Affine2D(A=A_new, t=t_new)


# Coordinates closer than this are the same coordinate for distinct_center.
COINCIDENT_TOL = 1e-9


def _distinct(values: Sequence[float], tol: float = COINCIDENT_TOL) -> np.ndarray:
    v = np.sort(np.asarray(values, dtype=float))
    keep = np.concatenate([[True], np.diff(v) > tol])
    return v[keep]


def distinct_center(points: Sequence[Point]) -> Point:
    """
    Mean of the distinct x values and, separately, of the distinct y values.

    Coincident coordinates count once, so a cluster of points sharing an axis
    value does not pull the center towards itself. Values within
    COINCIDENT_TOL of each other are coincident, which keeps rotated copies
    that should share a coordinate from being split by rounding noise.
    Empty input gives the origin.
    """
    if len(points) == 0:
        return Point(0.0, 0.0)
    xs = _distinct([p.x for p in points])
    ys = _distinct([p.y for p in points])
    return Point(float(xs.mean()), float(ys.mean()))


class Shape:
    def rotate(self, pivot: Point, angle: float) -> "Shape":
        raise NotImplementedError

    def scale(self, pivot: Point, factor: float) -> "Shape":
        raise NotImplementedError

    def move(self, new_center: Point) -> "Shape":
        raise NotImplementedError

    def center(self) -> Point:
        raise NotImplementedError

    def boundary(self) -> Tuple[Point, ...]:
        raise NotImplementedError

    def flatten(self) -> Iterator["Shape"]:
        yield self


@dataclass(frozen=True)
class CompositeShape(Shape):
    """
    Ordered group of shapes moved, rotated and scaled as one rigid body.
    Order is z-order: later shapes are drawn on top.
    """
    shapes: Tuple[Shape, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "shapes", tuple(self.shapes))

    def rotate(self, pivot: Point, angle: float) -> "CompositeShape":
        return CompositeShape(tuple(s.rotate(pivot, angle) for s in self.shapes))

    def scale(self, pivot: Point, factor: float) -> "CompositeShape":
        return CompositeShape(tuple(s.scale(pivot, factor) for s in self.shapes))

    def center(self) -> Point:
        return distinct_center([s.center() for s in self.shapes])

    def move(self, new_center: Point) -> "CompositeShape":
        # Every child travels by the same delta so the layout is preserved.
        delta = new_center - self.center()
        return CompositeShape(tuple(s.move(s.center() + delta) for s in self.shapes))

    def boundary(self) -> Tuple[Point, ...]:
        out: List[Point] = []
        for s in self.shapes:
            out.extend(s.boundary())
        return tuple(out)

    def flatten(self) -> Iterator[Shape]:
        for s in self.shapes:
            yield from s.flatten()

    def __len__(self) -> int:
        return len(self.shapes)


@dataclass
class Layer:
    shapes: List[Shape] = field(default_factory=list)
    name: str = ""

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def extend(self, shapes: Iterable[Shape]) -> None:
        self.shapes.extend(shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)
