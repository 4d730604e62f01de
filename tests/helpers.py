from __future__ import annotations

import dataclasses
import math

from figures import CompositeShape, Point


def assert_shapes_close(a, b, abs_tol: float = 1e-6) -> None:
    """Field-by-field comparison of two shapes with a tolerance on floats."""
    assert type(a) is type(b)
    if isinstance(a, CompositeShape):
        assert len(a.shapes) == len(b.shapes)
        for sa, sb in zip(a.shapes, b.shapes):
            assert_shapes_close(sa, sb, abs_tol)
        return
    for f in dataclasses.fields(a):
        va, vb = getattr(a, f.name), getattr(b, f.name)
        if isinstance(va, Point):
            assert va.isclose(vb, abs_tol=abs_tol), f"{f.name}: {va} != {vb}"
        elif isinstance(va, tuple):
            assert len(va) == len(vb)
            for pa, pb in zip(va, vb):
                assert pa.isclose(pb, abs_tol=abs_tol), f"{f.name}: {pa} != {pb}"
        elif isinstance(va, float):
            assert math.isclose(va, vb, abs_tol=abs_tol), f"{f.name}: {va} != {vb}"
        else:
            assert va == vb, f"{f.name}: {va} != {vb}"
