from __future__ import annotations

import argparse
from typing import List, Tuple

from common import setup_default_logging
from figures import Layer, Point, Shape
from generation import GeneratorConfig, ShapeGenerator
from plotting import render_to_file

# Horizontal distance between two samples on the sheet.
SLOT = 150.0


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a sheet with every sample shape, plain and transformed.")
    p.add_argument("--out", type=str, default="plots/shapes.svg", help="output file (.svg or .png)")
    p.add_argument("--radius", type=float, default=60.0, help="base radius of the samples (default: 60)")
    p.add_argument("--seed", type=int, default=None, help="random seed for the flower petals")
    p.add_argument("--log-level", type=str, default="INFO", help="logging level (default: INFO)")
    return p.parse_args()


def build_sample_shapes(generator: ShapeGenerator, radius: float = 60.0) -> List[Shape]:
    height = radius * 2
    zero = Point(100.0, 100.0)
    return [
        generator.circle(zero, radius),
        generator.half_circle(zero, radius),
        generator.ring(zero, radius - 20.0, 10.0),
        generator.triangle(zero, 120.0, height),
        generator.diamond(zero, 60.0, 120.0),
        generator.diamond(zero, 60.0, 120.0, 0.25),
        generator.rectangle(zero, height, 80.0),
        generator.trapeze(zero, height, 60.0, 120.0),
        generator.star(zero, 5, radius),
        generator.petal(zero, 80.0, height),
        generator.drop(zero, 100.0, height),
        generator.flower(zero, radius, 9, float(generator.rng.uniform(0.5, 1.0))),
    ]


def build_sample_sheet(generator: ShapeGenerator, shapes: List[Shape]) -> Tuple[Layer, float, float]:
    """
    First row: every shape moved into its slot. Second row: the same shapes
    moved, rotated by 45 degrees and halved about their slot, each followed
    by a small marker circle on the slot center.

    Returns the layer and the canvas width and height.
    """
    layer = Layer(name="samples")
    for i, shape in enumerate(shapes):
        layer.add(shape.move(Point(100 + i * SLOT, 100.0)))
    for i, shape in enumerate(shapes):
        new_center = Point(100 + i * SLOT, 250.0)
        layer.add(shape.move(new_center).rotate(new_center, 45.0).scale(new_center, 0.5))
        layer.add(generator.circle(new_center, 5.0))
    return layer, (1 + len(shapes)) * SLOT, 350.0


def main() -> None:
    args = parse_args()
    setup_default_logging(args.log_level)
    generator = ShapeGenerator(config=GeneratorConfig(random_seed=args.seed))
    shapes = build_sample_shapes(generator, args.radius)
    layer, width, height = build_sample_sheet(generator, shapes)
    render_to_file([layer], args.out, width, height)
    print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
