"""
Monotone cubic interpolation used to build smooth palettes.

create_interpolant() turns a handful of (x, y) control points into a
piecewise cubic function that passes through every point and never
overshoots between them (Fritsch-Carlson tangents). Outside the control
range the behavior is selected with an Extrapolation mode.
"""

from bisect import bisect_left
from enum import Enum

import numpy as np


TOLERANCE = 1e-15  # Distance at which x counts as the rightmost knot


class Extrapolation(Enum):
    """How the interpolant behaves left of the first / right of the last knot."""
    NONE = "none"          # Extend the boundary cubic
    LINEAR = "linear"      # y_min + fraction * y_max
    CONSTANT = "constant"  # Hold y_min below, y_max above


def create_interpolant(xs, ys, extrapolation=Extrapolation.NONE):
    """
    Build a monotone cubic interpolant through the given control points.

    Args:
        xs: Control point positions (any order)
        ys: Control point values, same length as xs
        extrapolation: Extrapolation mode outside [min(xs), max(xs)]

    Returns:
        A function float -> float

    Raises:
        ValueError if xs and ys have different lengths
    """
    length = len(xs)
    if length != len(ys):
        raise ValueError(
            f"length of xs ({length}) must be equal to length of ys ({len(ys)})")
    if length == 0:
        return lambda x: 0.0
    if length == 1:
        y0 = float(ys[0])
        return lambda x: y0

    order = np.argsort(np.asarray(xs, dtype=np.float64), kind="stable")
    knots_x = np.asarray(xs, dtype=np.float64)[order]
    knots_y = np.asarray(ys, dtype=np.float64)[order]

    # Consecutive differences and secant slopes
    dxs = np.diff(knots_x)
    ms = np.diff(knots_y) / dxs

    # Degree-1 coefficients (tangents at each knot)
    c1s = np.empty(length, dtype=np.float64)
    c1s[0] = ms[0]
    for i in range(len(dxs) - 1):
        m, m_next = ms[i], ms[i + 1]
        if m * m_next <= 0:
            c1s[i + 1] = 0.0
        else:
            dx, dx_next = dxs[i], dxs[i + 1]
            common = dx + dx_next
            c1s[i + 1] = 3 * common / ((common + dx_next) / m + (common + dx) / m_next)
    c1s[-1] = ms[-1]

    # Degree-2 and degree-3 coefficients per segment
    inv_dxs = 1.0 / dxs
    common = c1s[:-1] + c1s[1:] - ms - ms
    c2s = (ms - c1s[:-1] - common) * inv_dxs
    c3s = common * inv_dxs * inv_dxs

    # Plain lists keep per-call evaluation in Python floats
    knots_x = knots_x.tolist()
    knots_y = knots_y.tolist()
    c1s, c2s, c3s = c1s.tolist(), c2s.tolist(), c3s.tolist()
    last = length - 1
    segments = len(c3s)

    def interpolant(x):
        if abs(x - knots_x[last]) < TOLERANCE:
            return knots_y[last]
        # Only left knots are searched; the last segment covers everything right of it
        pos = bisect_left(knots_x, x, 0, segments)
        if pos < segments and knots_x[pos] == x:
            return knots_y[pos]
        i = max(0, pos - 1)
        diff = x - knots_x[i]
        diff_sq = diff * diff
        return knots_y[i] + c1s[i] * diff + c2s[i] * diff_sq + c3s[i] * diff * diff_sq

    x_min, x_max = knots_x[0], knots_x[last]
    y_min, y_max = min(knots_y), max(knots_y)

    def evaluate(x):
        x = float(x)
        if x_min <= x <= x_max:
            return interpolant(x)
        if extrapolation is Extrapolation.LINEAR:
            return y_min + (x - x_min) / (x_max - x_min) * y_max
        if extrapolation is Extrapolation.CONSTANT:
            return y_min if x < x_min else y_max
        return interpolant(x)

    return evaluate
