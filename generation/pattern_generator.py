from __future__ import annotations

from figures import CompositeShape, Point, Shape


class PatternGenerator:
    def repeat_shape(self, center: Point, shape: Shape, repetitions: int, distance: float) -> CompositeShape:
        """
        Stack copies of shape upwards: copy k is centered at
        (center.x, center.y - k * distance).
        """
        start_y = center.y
        shapes = tuple(shape.move(Point(center.x, start_y - k * distance)) for k in range(max(0, repetitions)))
        return CompositeShape(shapes)

    def rotate_shape(self, pivot: Point, shape: Shape, repetitions: int, start_angle: float = 0.0) -> CompositeShape:
        """
        Copies of shape spread evenly around pivot, the first at start_angle.
        """
        if repetitions <= 0:
            return CompositeShape(())
        step = 360.0 / repetitions
        return CompositeShape(tuple(shape.rotate(pivot, start_angle + k * step) for k in range(repetitions)))
