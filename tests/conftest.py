import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from figures import (
    Point,
    Circle,
    HalfCircle,
    Ring,
    Polygon,
    Trapeze,
    Diamond,
    Drop,
    Petal,
)
from generation import ShapeGenerator


@pytest.fixture
def generator():
    return ShapeGenerator(rng=np.random.default_rng(7))


@pytest.fixture
def origin():
    return Point(100.0, 100.0)


@pytest.fixture
def basic_shapes(origin):
    return [
        Circle(origin, 60.0),
        HalfCircle(origin, 60.0),
        Ring(origin, 40.0, 10.0),
        Polygon((Point(40.0, 160.0), Point(100.0, 40.0), Point(160.0, 160.0), Point(40.0, 160.0))),
        Trapeze(origin, 120.0, 120.0, 60.0),
        Diamond(origin, 60.0, 120.0, 0.25),
        Drop(origin, 100.0, 120.0),
        Petal(origin, 120.0, 80.0),
    ]
