from __future__ import annotations

import argparse
from dataclasses import replace
from typing import List

from common import setup_default_logging
from figures import Layer, Point
from generation import GeneratorConfig, PatternGenerator, ShapeGenerator
from plotting import render_to_file


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a radial pattern of stars, half circles and circle stacks.")
    p.add_argument("--out", type=str, default="plots/patterns.svg", help="output file (.svg or .png)")
    p.add_argument("--size", type=float, default=800.0, help="canvas width and height (default: 800)")
    p.add_argument("--steps", type=int, default=8, help="copies around the center (default: 8)")
    p.add_argument("--seed", type=int, default=None, help="random seed for the central flower")
    p.add_argument("--log-level", type=str, default="INFO", help="logging level (default: INFO)")
    return p.parse_args()


def build_pattern(generator: ShapeGenerator, size: float = 800.0, steps: int = 8) -> List[Layer]:
    """
    Background layer: a ring and an outline star framing the canvas.
    Foreground layer: stars, half circles and stacked circles repeated
    around the canvas center, with a flower in the middle.
    """
    patterns = PatternGenerator()
    u = size / 800.0
    center = Point(size / 2, size / 2)
    angle = 360.0 / steps if steps > 0 else 0.0

    background = Layer(name="background")
    background.add(generator.ring(center, 300.0 * u, 25.0 * u))
    background.add(replace(generator.star(center, 24, 350.0 * u, 300.0 * u), fill=False))

    small_circle = generator.circle(Point(center.x, 250.0 * u), 30.0 * u)
    circle_stack = patterns.repeat_shape(Point(center.x, 250.0 * u), small_circle, 2, 100.0 * u)

    foreground = Layer(name="foreground")
    foreground.add(patterns.rotate_shape(center, generator.star(Point(center.x, 200.0 * u), 5, 60.0 * u), steps))
    foreground.add(patterns.rotate_shape(center, generator.star(Point(center.x, 300.0 * u), 5, 40.0 * u), steps))
    foreground.add(patterns.rotate_shape(center, generator.half_circle(Point(center.x, 120.0 * u), 40.0 * u), steps))
    foreground.add(patterns.rotate_shape(center, circle_stack, steps, start_angle=angle / 2))
    foreground.add(generator.flower(center, 80.0 * u, 9))
    return [background, foreground]


def main() -> None:
    args = parse_args()
    setup_default_logging(args.log_level)
    generator = ShapeGenerator(config=GeneratorConfig(random_seed=args.seed))
    layers = build_pattern(generator, args.size, args.steps)
    render_to_file(layers, args.out, args.size, args.size)
    print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
