# Re-export core geometry API for convenience
from .geometry import (
    Point,
    Affine2D,
    Shape,
    CompositeShape,
    Layer,
    distinct_center,
)
from .primitives import (
    BasicShape,
    Circle,
    HalfCircle,
    Ring,
    Polygon,
    Trapeze,
    Diamond,
    Drop,
    Petal,
)
