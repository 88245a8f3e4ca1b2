from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class Affine:
    """2x2 linear part ``(a, b, c, d)`` plus translation ``(tx, ty)``.

    The linear part maps ``(x, y)`` to ``(x*a + y*c, x*b + y*d)``, matching the
    six-value layout a 2D drawing surface accepts as its transform.
    """

    a: float
    b: float
    c: float
    d: float
    tx: float
    ty: float

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.tx, self.ty)

    @property
    def scale(self) -> float:
        return math.sqrt(abs(self.a * self.d - self.b * self.c))


def affine(tx: float, ty: float, scale: float, rotate: float = 0.0) -> Affine:
    """Build the rotate-scale-translate transform mapping grid space to screen space."""

    cos = math.cos(rotate) * scale
    sin = math.sin(rotate) * scale
    return Affine(a=+cos, b=+sin, c=-sin, d=+cos, tx=float(tx), ty=float(ty))


def invert(m: Affine) -> Affine:
    """Return the inverse to be used with ``apply``.

    The translation is stored negated and untransformed: ``apply`` adds it
    before the linear part, so ``apply(invert(m), *project(m, x, y))`` is
    ``(x, y)``.
    """

    cross = m.a * m.d - m.b * m.c
    if cross == 0:
        raise ValueError("Transform is singular and cannot be inverted")
    return Affine(
        a=+m.d / cross,
        b=-m.b / cross,
        c=-m.c / cross,
        d=+m.a / cross,
        tx=-m.tx,
        ty=-m.ty,
    )


def apply(m: Affine, x: float, y: float) -> Point:
    """Translate by ``(tx, ty)`` first, then apply the linear part."""

    xx = x + m.tx
    yy = y + m.ty
    return (xx * m.a + yy * m.c, xx * m.b + yy * m.d)


def project(m: Affine, x: float, y: float) -> Point:
    """Linear part first, then translation; the drawing surface's composition."""

    return (x * m.a + y * m.c + m.tx, x * m.b + y * m.d + m.ty)


def fit_transform(viewport_width: float, viewport_height: float, cols: int, rows: int) -> Affine:
    """Scale a ``cols`` x ``rows`` grid to fit the viewport and centre the leftover space."""

    if cols <= 0 or rows <= 0:
        raise ValueError(f"Grid size must be positive, got {cols}x{rows}")
    if viewport_width <= 0 or viewport_height <= 0:
        raise ValueError(f"Viewport size must be positive, got {viewport_width}x{viewport_height}")
    if viewport_width / viewport_height < cols / rows:
        scale = viewport_width / cols
    else:
        scale = viewport_height / rows
    tx = (viewport_width - cols * scale) / 2
    ty = (viewport_height - rows * scale) / 2
    return affine(tx, ty, scale, 0.0)
