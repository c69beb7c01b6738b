"""
Palette generation for Mandelbrot rendering.

A palette is a numpy array of shape (count, 3) with RGB values (uint8),
sampled from monotone cubic interpolants run independently on the red,
green and blue channels of a few (position, color) control points.
Adjacent entries are blended by lerp_color() at render time, so 768
entries are plenty for banding-free gradients.

To add a new colormap:
1. Define its control points as a list of (position, (r, g, b)) pairs
2. Add it to the COLORMAPS dictionary at the bottom of this file
"""

import math

import numpy as np
from numba import jit

from .interpolate import Extrapolation, create_interpolant


NUM_COLORS = 768  # Default palette length


def generate_palette(controls, count=NUM_COLORS):
    """
    Generate a palette from color control points.

    Args:
        controls: Sequence of (position, (r, g, b)) pairs, positions
                  typically in [0, 1], any order
        count: Number of palette entries

    Returns:
        Array (count, 3) of uint8 RGB values; entry i samples position i/count

    Raises:
        ValueError if count < 1
    """
    if count < 1:
        raise ValueError(f"palette needs at least one color, got count={count}")

    xs = [position for position, _ in controls]
    channel_splines = [
        create_interpolant(xs, [color[ch] / 255.0 for _, color in controls], Extrapolation.NONE)
        for ch in range(3)
    ]

    colors = np.zeros((count, 3), dtype=np.uint8)
    for i in range(count):
        t = i / count
        for ch, spline in enumerate(channel_splines):
            colors[i, ch] = int(min(255.0, max(0.0, abs(spline(t) * 255.0))))
    return colors


@jit(nopython=True, cache=True)
def lerp_color(from_color, to_color, bias):
    """
    Blend two RGB colors component-wise: from + (to - from) * bias.

    NaN bias counts as 0 and infinite bias as 1. Channels are truncated
    to integers and clamped to [0, 255].
    """
    if math.isnan(bias):
        bias = 0.0
    elif math.isinf(bias):
        bias = 1.0
    # For bias in [0, 1] each channel stays within [from, to] after rounding
    r = float(from_color[0]) + (float(to_color[0]) - float(from_color[0])) * bias
    g = float(from_color[1]) + (float(to_color[1]) - float(from_color[1])) * bias
    b = float(from_color[2]) + (float(to_color[2]) - float(from_color[2])) * bias
    return (int(min(255.0, max(0.0, r))),
            int(min(255.0, max(0.0, g))),
            int(min(255.0, max(0.0, b))))


def palette_strip(height, width, palette):
    """
    Render a preview strip of a palette.

    The width is clamped to the palette length and every row walks the
    palette in steps of len(palette) // width, stopping at the end.
    Pixels that are never reached stay black.
    """
    palette_length = len(palette)
    width = min(width, palette_length)
    img = np.zeros((height, width, 3), dtype=np.uint8)
    palette_step = palette_length // width
    for y in range(height):
        palette_index = 0
        for x in range(width):
            palette_index += palette_step
            if palette_index >= palette_length:
                break
            img[y, x] = palette[palette_index]
    return img


# Dark blue -> light blue -> white -> orange -> black -> dark blue.
# Starts and ends on the same color so the palette wraps seamlessly.
ULTRA = [
    (0.0, (0, 7, 100)),
    (0.16, (32, 107, 203)),
    (0.42, (237, 255, 255)),
    (0.6425, (255, 170, 0)),
    (0.8575, (0, 2, 0)),
    (1.0, (0, 7, 100)),
]

# Black -> red -> orange -> yellow -> white ("fire" look)
HOT = [
    (0.0, (0, 0, 0)),
    (0.3, (190, 0, 0)),
    (0.55, (255, 140, 0)),
    (0.8, (255, 240, 60)),
    (1.0, (255, 255, 255)),
]

# Deep blue -> cyan -> white
OCEAN = [
    (0.0, (0, 0, 50)),
    (0.5, (0, 128, 178)),
    (0.8, (120, 220, 240)),
    (1.0, (255, 255, 255)),
]

# Dark green -> lime -> yellow
FOREST = [
    (0.0, (0, 80, 0)),
    (0.4, (40, 150, 20)),
    (0.75, (160, 220, 40)),
    (1.0, (255, 255, 120)),
]

# Deep purple -> magenta -> pink -> white
PURPLE = [
    (0.0, (100, 0, 80)),
    (0.4, (170, 60, 150)),
    (0.75, (230, 150, 210)),
    (1.0, (255, 255, 255)),
]

GRAYSCALE = [
    (0.0, (0, 0, 0)),
    (1.0, (255, 255, 255)),
]


# Registry of all available colormaps.
# Keys are display names, values are control point lists.
COLORMAPS = {
    'Ultra': ULTRA,
    'Hot': HOT,
    'Ocean': OCEAN,
    'Forest': FOREST,
    'Purple': PURPLE,
    'Grayscale': GRAYSCALE,
}


def get_colormap(name, count=NUM_COLORS):
    """
    Get a palette by colormap name.

    Raises:
        ValueError if name not found
    """
    try:
        controls = COLORMAPS[name]
    except KeyError:
        raise ValueError(
            f"unknown colormap {name!r}, expected one of {list_colormap_names()}") from None
    return generate_palette(controls, count)


def get_default_colormap(count=NUM_COLORS):
    """Get the default palette (Ultra)."""
    return generate_palette(ULTRA, count)


def list_colormap_names():
    """Get list of available colormap names."""
    return list(COLORMAPS.keys())
