"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains all the performance-critical functions that are
JIT-compiled for speed:
- Escape-time iteration with period-1/period-2 cycle short-circuit
- Smooth (continuous) iteration value and palette index mapping
- Row-parallel rendering straight into an RGB raster

Every pixel depends only on its own coordinate and on read-only inputs,
so rows are distributed over threads with prange and each row is
written by exactly one thread.
"""

import math

import numpy as np
from numba import jit, prange

from .colormaps import lerp_color


CYCLE_TOLERANCE = 1e-15  # Iterates closer than this are considered equal


@jit(nopython=True, cache=True)
def escape_time(cr, ci, max_iteration, bailout_squared):
    """
    Iterate z <- z^2 + c from z = 0.

    Stops when |z|^2 reaches bailout_squared or after max_iteration steps.
    If a new iterate matches the previous one or the one before it
    (a fixed point or 2-cycle), the point is treated as inside the set:
    iteration jumps to max_iteration and the loop exits.

    Returns:
        (iteration, modulus_squared, steps) where steps is the number of
        loop passes actually executed
    """
    x = 0.0
    y = 0.0
    xp = 0.0
    yp = 0.0
    mod = 0.0
    iteration = 0
    steps = 0
    while mod < bailout_squared and iteration < max_iteration:
        steps += 1
        xtemp = x * x - y * y + cr
        ytemp = 2.0 * x * y + ci
        if ((abs(xtemp - x) < CYCLE_TOLERANCE and abs(ytemp - y) < CYCLE_TOLERANCE) or
                (abs(xtemp - xp) < CYCLE_TOLERANCE and abs(ytemp - yp) < CYCLE_TOLERANCE)):
            iteration = max_iteration
            break
        xp = x
        yp = y
        x = xtemp
        y = ytemp
        mod = x * x + y * y
        iteration += 1
    return iteration, mod, steps


@jit(nopython=True, cache=True)
def fractional_part(value):
    """value minus its integer part (truncated toward zero); NaN and infinities pass through."""
    if math.isnan(value) or math.isinf(value):
        return value
    return value - np.trunc(value)


@jit(nopython=True, cache=True, error_model="numpy")
def normalize_index(idx, max_value):
    """
    Bring a raw palette index back into range.

    Negative values wrap to |max + idx| mod max, NaN becomes 0 and
    infinity becomes max.
    """
    if idx < 0:
        return np.fmod(abs(max_value + idx), max_value)
    if math.isnan(idx):
        return 0.0
    if math.isinf(idx):
        return max_value
    return idx


@jit(nopython=True, cache=True, error_model="numpy")
def palette_index(iteration, smoothed, palette_length, scale, shift, log_index):
    """
    Map a smoothed iteration value to a fractional palette index.

    Division follows IEEE rules: with a one-color palette log(length) is 0
    and the log remap yields NaN or -inf, which normalize_index absorbs.
    """
    length = float(palette_length)
    idx = np.fmod(np.sqrt(iteration + 1 - smoothed) * scale + shift, length)
    idx = normalize_index(idx, length)
    if log_index:
        idx = np.fmod((np.log(idx) / np.log(length)) * scale, length)
        idx = normalize_index(idx, length)
    return idx


@jit(nopython=True, parallel=True, cache=True, error_model="numpy")
def compute_mandelbrot(out, r_min, i_min, r_scale, i_scale, max_iteration,
                       palette, scale, shift, log_index, bailout, one_over_log2):
    """
    Render the Mandelbrot set with smooth coloring into an RGB raster.

    Args:
        out: Output image (height, width, 3) uint8, modified in place
        r_min, i_min: Complex coordinate of pixel (0, 0)
        r_scale, i_scale: Complex-plane distance between adjacent pixels
        max_iteration: Maximum iteration count
        palette: Nx3 array of RGB colors (uint8)
        scale, shift, log_index: Gradient parameters
        bailout: Escape radius
        one_over_log2: 1 / log(2), computed once by the caller
    """
    height, width = out.shape[0], out.shape[1]
    palette_length = palette.shape[0]
    log_bailout = np.log(bailout)
    bailout_squared = bailout * bailout

    for py in prange(height):
        y0 = py * i_scale + i_min
        for px in range(width):
            x0 = px * r_scale + r_min
            iteration, mod, _ = escape_time(x0, y0, max_iteration, bailout_squared)

            size = np.sqrt(mod)
            smoothed = np.log(np.log(size) * log_bailout) * one_over_log2
            bias = fractional_part(smoothed)
            idx = palette_index(iteration, smoothed, palette_length, scale, shift, log_index)

            # idx may equal palette_length (infinite case); the palette wraps
            lo = int(idx) % palette_length
            hi = (lo + 1) % palette_length
            r, g, b = lerp_color(palette[lo], palette[hi], bias)
            out[py, px, 0] = r
            out[py, px, 1] = g
            out[py, px, 2] = b


def warmup_jit(palette):
    """
    Warm up JIT compilation with a tiny render.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on first actual use.
    """
    dummy = np.zeros((10, 10, 3), dtype=np.uint8)
    compute_mandelbrot(dummy, -2.5, -1.0, 0.35, 0.2, 10,
                       palette, 256.0, 0.0, False, 1e10, 1.0 / math.log(2))
