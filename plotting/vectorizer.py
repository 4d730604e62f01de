from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple
import math
import numpy as np
from matplotlib.path import Path as mplPath
from matplotlib.transforms import Affine2D as mplAffine2D
from shapely.geometry import MultiPoint, Point as ShapelyPoint, Polygon as ShapelyPolygon
from shapely.geometry.polygon import orient
import shapely.ops

from figures import (
    Point,
    Shape,
    Layer,
    CompositeShape,
    Circle,
    HalfCircle,
    Ring,
    Polygon,
    Trapeze,
    Diamond,
    Drop,
    Petal,
)

# Segments per quarter circle when circles are approximated by polygons.
QUAD_SEGS = 64


def _xy(points: Sequence[Point]) -> np.ndarray:
    return np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)


def _empty_path() -> mplPath:
    return mplPath(np.empty((0, 2), dtype=float))


def _closed_path(points: Sequence[Point]) -> mplPath:
    if not points:
        return _empty_path()
    verts = _xy(points)
    return mplPath(np.vstack([verts, verts[:1]]), closed=True)


def _curve_path(points: Sequence[Point], code: int) -> mplPath:
    """
    Closed path that starts with a MOVETO on points[0] and uses `code`
    (CURVE3 or CURVE4) for every following vertex.
    """
    verts = _xy(points)
    codes = [mplPath.MOVETO] + [code] * (len(points) - 1) + [mplPath.CLOSEPOLY]
    return mplPath(np.vstack([verts, verts[:1]]), codes)


def _half_circle_path(shape: HalfCircle) -> mplPath:
    c = shape.position
    lb = shape.left_bottom
    # Radius and start angle come from the stored anchor so that rotated and
    # scaled half circles stay consistent with it.
    r = math.hypot(lb.x - c.x, lb.y - c.y)
    theta = math.degrees(math.atan2(lb.y - c.y, lb.x - c.x))
    arc = mplPath.arc(theta, theta + 180.0)
    arc = arc.transformed(mplAffine2D().scale(r).translate(c.x, c.y))
    verts = np.vstack([arc.vertices, arc.vertices[:1]])
    codes = np.concatenate([arc.codes, [mplPath.CLOSEPOLY]])
    return mplPath(verts, codes)


def _ring_geometry(shape: Ring) -> Any:
    c = ShapelyPoint(shape.position.x, shape.position.y)
    outer = c.buffer(abs(shape.outer_radius), quad_segs=QUAD_SEGS)
    inner = c.buffer(abs(shape.inner_radius), quad_segs=QUAD_SEGS)
    return outer.difference(inner)


def shapely_to_path(geom: Any) -> mplPath:
    """
    Compound path of every polygon in geom. Exteriors are oriented
    counter-clockwise and holes clockwise so that nonzero filling leaves
    the holes empty.
    """
    if hasattr(geom, 'geoms'):
        parts = list(geom.geoms)
    else:
        parts = [geom]

    paths: List[mplPath] = []
    for part in parts:
        if part.is_empty or not isinstance(part, ShapelyPolygon):
            continue
        part = orient(part, sign=1.0)
        for ring in [part.exterior, *part.interiors]:
            paths.append(mplPath(np.asarray(ring.coords, dtype=float), closed=True))
    if not paths:
        return _empty_path()
    return mplPath.make_compound_path(*paths)


def shape_to_path(shape: Shape) -> mplPath:
    """
    Outline of a basic shape as a matplotlib Path in canvas coordinates.
    Composite shapes must be flattened first.
    """
    if isinstance(shape, Circle):
        c = shape.position
        return mplPath.circle(center=(c.x, c.y), radius=shape.radius)
    if isinstance(shape, HalfCircle):
        return _half_circle_path(shape)
    if isinstance(shape, Ring):
        return shapely_to_path(_ring_geometry(shape))
    if isinstance(shape, Polygon):
        if not shape.points:
            return _empty_path()
        return mplPath(_xy(shape.points), closed=shape.is_closed())
    if isinstance(shape, Trapeze):
        return _closed_path(shape.boundary())
    if isinstance(shape, Diamond):
        return _closed_path([shape.center_top, shape.right_center, shape.center_bottom, shape.left_center])
    if isinstance(shape, Drop):
        return _curve_path([shape.center_top, shape.left_bottom, shape.right_bottom, shape.center_top], mplPath.CURVE4)
    if isinstance(shape, Petal):
        return _curve_path([shape.start, shape.middle_left, shape.end, shape.middle_right, shape.start], mplPath.CURVE3)
    raise TypeError(f"cannot build a path for {type(shape).__name__}")


def shape_to_shapely(shape: Shape) -> Any:
    if isinstance(shape, CompositeShape):
        return shapely.ops.unary_union([shape_to_shapely(s) for s in shape.shapes])
    if isinstance(shape, Circle):
        c = shape.position
        return ShapelyPoint(c.x, c.y).buffer(abs(shape.radius), quad_segs=QUAD_SEGS)
    if isinstance(shape, Ring):
        return _ring_geometry(shape)

    # Curves are flattened to line segments by matplotlib.
    path = shape_to_path(shape)
    parts = [ShapelyPolygon(p) for p in path.to_polygons() if len(p) >= 4]
    if not parts:
        return MultiPoint([(p.x, p.y) for p in shape.boundary()])
    parts = [p if p.is_valid else p.buffer(0) for p in parts]
    return shapely.ops.unary_union(parts)


def layers_bounds(layers: Iterable[Layer]) -> Optional[Tuple[float, float, float, float]]:
    """
    (minx, miny, maxx, maxy) covering every shape of every layer, or None
    when there is nothing to draw.
    """
    geoms = [shape_to_shapely(s) for layer in layers for s in layer]
    geoms = [g for g in geoms if not g.is_empty]
    if not geoms:
        return None
    minx, miny, maxx, maxy = shapely.ops.unary_union(geoms).bounds
    return float(minx), float(miny), float(maxx), float(maxy)
