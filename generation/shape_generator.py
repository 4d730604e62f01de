from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Literal, Optional
import logging
import numpy as np

from figures import (
    Point,
    Shape,
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

logger = logging.getLogger(__name__)


PetalKind = Literal["drop_flipped", "drop", "petal"]


def _even_petal_kinds() -> Dict[PetalKind, float]:
    return {"drop_flipped": 1.0, "drop": 1.0, "petal": 1.0}


@dataclass(frozen=True)
class GeneratorConfig:
    random_seed: Optional[int] = None
    star_inner_ratio: float = 0.45
    flower_center_ratio: float = 0.2
    petal_kind_probs: Dict[PetalKind, float] = field(default_factory=_even_petal_kinds)

    def __post_init__(self):
        weights = list(self.petal_kind_probs.values())
        if not weights:
            raise ValueError("petal_kind_probs must name at least one petal kind")
        if any(w < 0 for w in weights) or sum(weights) <= 0:
            raise ValueError("petal_kind_probs weights must be non-negative with a positive sum")


class ShapeGenerator:
    """
    Factory for basic and composite shapes.

    Nothing is validated: zero or negative sizes are passed through and simply
    produce degenerate or mirrored geometry. The only randomness is the petal
    kind picked by `flower`, drawn from the injected numpy Generator.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, config: Optional[GeneratorConfig] = None):
        self.config = config if config is not None else GeneratorConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)

    # ---- Composite / derived shapes ----
    def star(self, center: Point, count: int, outer_radius: float, inner_radius: Optional[float] = None) -> Polygon:
        if inner_radius is None:
            inner_radius = outer_radius * self.config.star_inner_ratio
        angle = 360.0 / count if count > 0 else 0.0

        outer_circle = Point(center.x, center.y - outer_radius)
        inner_circle = Point(center.x, center.y - inner_radius)

        points: List[Point] = []
        for i in range(max(0, count)):
            points.append(outer_circle.rotate(center, i * angle))
            points.append(inner_circle.rotate(center, i * angle + angle / 2))
        points.append(outer_circle)
        return Polygon(points)

    def pick_petal_kind(self) -> PetalKind:
        kind_probs = self.config.petal_kind_probs
        kinds = list(kind_probs.keys())
        probs = np.array([kind_probs[k] for k in kinds], dtype=float)
        probs = probs / probs.sum()
        return self.rng.choice(kinds, p=probs).item()

    def flower(self,
               center: Point,
               radius: float,
               petal_count: int,
               petal_width_factor: float = 0.5,
               kind: Optional[PetalKind] = None) -> CompositeShape:
        if kind is None:
            kind = self.pick_petal_kind()
        angle = 360.0 / petal_count if petal_count > 0 else 0.0
        petal_center = Point(center.x, center.y - radius / 2)
        petal_width = radius * petal_width_factor

        if kind == "drop_flipped":
            p: Shape = self.drop(petal_center, petal_width, radius).rotate(petal_center, 180.0)
        elif kind == "drop":
            p = self.drop(petal_center, petal_width, radius)
        elif kind == "petal":
            p = self.petal(petal_center, petal_width, radius)
        else:
            raise ValueError(f"unknown petal kind: {kind}")
        logger.debug("flower: %d x %s, radius=%s", petal_count, kind, radius)

        shapes: List[Shape] = [p.rotate(center, angle * i) for i in range(max(0, petal_count))]
        shapes.append(self.circle(center, radius * self.config.flower_center_ratio))
        return CompositeShape(tuple(shapes))

    def triangle(self, center: Point, width: float, height: float) -> Polygon:
        return Polygon(
            points=(
                Point(center.x - width / 2, center.y + height / 2),  # left bottom
                Point(center.x, center.y - height / 2),  # middle top
                Point(center.x + width / 2, center.y + height / 2),  # right bottom
                Point(center.x - width / 2, center.y + height / 2),  # left bottom
            )
        )

    # ---- Direct constructors ----
    def polygon(self, points: Iterable[Point], fill: bool = True) -> Polygon:
        return Polygon(tuple(points), fill=fill)

    def diamond(self, center: Point, width: float, height: float, factor: float = 0.0) -> Diamond:
        return Diamond(center, width, height, factor)

    def drop(self, center: Point, width: float, height: float) -> Drop:
        return Drop(center, width, height)

    def petal(self, center: Point, width: float, height: float) -> Petal:
        return Petal(center, height, width)

    def trapeze(self, center: Point, height: float, upper_width: float, lower_width: float) -> Trapeze:
        return Trapeze(center, height, lower_width, upper_width)

    def rectangle(self, center: Point, height: float, width: float) -> Trapeze:
        return Trapeze(center, height, width, width)

    def ring(self, center: Point, inner_radius: float, width: float) -> Ring:
        return Ring(center, inner_radius, width)

    def circle(self, center: Point, radius: float) -> Circle:
        return Circle(center, radius)

    def half_circle(self, center: Point, radius: float) -> HalfCircle:
        return HalfCircle(center, radius)
