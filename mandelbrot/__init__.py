"""
Mandelbrot Set Renderer Package

Renders the Mandelbrot set with smooth (continuous) coloring through a
palette built by monotone cubic interpolation of a few color control
points. Numba JIT-compiles the per-pixel work; pygame shows the result.

Quick Start:
    from mandelbrot import Corners, Gradient, get_default_colormap, render
    img = render(1050, 600, Corners(-2.5 - 1j, 1 + 1j), 1000,
                 get_default_colormap(), Gradient(256, 0), 1e10)

Or from command line:
    python -m mandelbrot [width height] [--output Image.png]

Package Structure:
    - interpolate.py: Monotone cubic (Fritsch-Carlson) interpolant
    - colormaps.py: Palette generation, color blending, named palettes
    - params.py: Region and Gradient value types and their text forms
    - compute.py: JIT-compiled escape-time and coloring kernels
    - renderer.py: render() entry point and async MandelbrotRenderer
    - settings.py: settings.json loading
    - app.py: Display window (save with S, re-render on resize)
"""

from .colormaps import (
    COLORMAPS,
    NUM_COLORS,
    generate_palette,
    get_colormap,
    get_default_colormap,
    lerp_color,
    list_colormap_names,
    palette_strip,
)
from .interpolate import Extrapolation, create_interpolant
from .params import (
    Corners,
    Gradient,
    OriginAndWidth,
    normalize_region,
    parse_gradient,
    parse_region,
)
from .renderer import MandelbrotRenderer, render

__version__ = "1.0.0"
__all__ = [
    "COLORMAPS",
    "NUM_COLORS",
    "Corners",
    "Extrapolation",
    "Gradient",
    "MandelbrotRenderer",
    "OriginAndWidth",
    "create_interpolant",
    "generate_palette",
    "get_colormap",
    "get_default_colormap",
    "lerp_color",
    "list_colormap_names",
    "normalize_region",
    "palette_strip",
    "parse_gradient",
    "parse_region",
    "render",
]
