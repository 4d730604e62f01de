from .shape_generator import (
    PetalKind,
    GeneratorConfig,
    ShapeGenerator,
)
from .pattern_generator import (
    PatternGenerator,
)
