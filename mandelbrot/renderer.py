"""
Mandelbrot renderer: region bookkeeping around the JIT kernels.

render() is the pure entry point: it normalizes the region, derives the
pixel-to-complex scale factors once and fills a fresh RGB raster.

The MandelbrotRenderer class keeps the render settings together for a
display layer and adds background (async) computation so a window can
request a re-render at a new size and stay responsive meanwhile.
"""

import math
import threading

import numpy as np

from .compute import compute_mandelbrot
from .params import normalize_region


ONE_OVER_LOG2 = 1.0 / math.log(2)


def render(width, height, region, max_iteration, palette, gradient, bailout,
           one_over_log2=ONE_OVER_LOG2):
    """
    Render the Mandelbrot set with smooth coloring.

    Args:
        width, height: Image dimensions in pixels
        region: Corners or OriginAndWidth window in the complex plane
        max_iteration: Maximum iteration count
        palette: Nx3 array of RGB colors (uint8), N >= 1
        gradient: Gradient mapping smoothed counts onto the palette
        bailout: Escape radius

    Returns:
        Array (height, width, 3) of uint8; row py, column px holds the
        color of c = (px * r_scale + r_min) + i(py * i_scale + i_min)
    """
    corners = normalize_region(region)
    r_min, r_max = corners.min.real, corners.max.real
    i_min, i_max = corners.min.imag, corners.max.imag

    r_scale = (r_max - r_min) / width
    i_scale = (i_max - i_min) / height

    img = np.zeros((height, width, 3), dtype=np.uint8)
    compute_mandelbrot(
        img, float(r_min), float(i_min), float(r_scale), float(i_scale),
        int(max_iteration), np.ascontiguousarray(palette, dtype=np.uint8),
        float(gradient.scale), float(gradient.shift), bool(gradient.log_index),
        float(bailout), one_over_log2,
    )
    return img


class MandelbrotRenderer:
    """
    Handles Mandelbrot rendering for a display layer, sync or async.

    Usage:
        renderer = MandelbrotRenderer(region, 1000, palette, gradient, 1e10)
        renderer.compute_async(800, 600)

        # In your game loop:
        result = renderer.get_result()
        if result is not None:
            display(result)

    Attributes:
        region, max_iteration, palette, gradient, bailout: Render settings
    """

    def __init__(self, region, max_iteration, palette, gradient, bailout):
        self.region = normalize_region(region)
        self.max_iteration = max_iteration
        self.palette = palette
        self.gradient = gradient
        self.bailout = bailout
        self.one_over_log2 = ONE_OVER_LOG2

        # Async computation state
        self.computing = False
        self.result = None
        self.pending_size = None
        self.lock = threading.Lock()
        self.idle = threading.Event()
        self.idle.set()
        # Numba parallel kernels must not be launched from two threads at once
        self.render_lock = threading.Lock()

    def render(self, width, height):
        """
        Render synchronously at the given size.

        Safe to call while an async render is running: kernel launches are
        serialized, so this blocks until the background render finishes.
        """
        with self.render_lock:
            return render(width, height, self.region, self.max_iteration, self.palette,
                          self.gradient, self.bailout, self.one_over_log2)

    def compute_async(self, width, height):
        """
        Start async computation at the given size.

        If a render is already running, the request is queued; only the
        most recent pending size is rendered next.
        """
        with self.lock:
            self.pending_size = (width, height)
            if not self.computing:
                self.computing = True
                self.idle.clear()
                thread = threading.Thread(target=self._compute_thread)
                thread.daemon = True
                thread.start()

    def _compute_thread(self):
        """Background thread for Mandelbrot computation."""
        while True:
            with self.lock:
                size = self.pending_size
                self.pending_size = None
                if size is None:
                    self.computing = False
                    self.idle.set()
                    break

            img = self.render(*size)

            with self.lock:
                self.result = img

    def get_result(self):
        """
        Get the latest render result if ready.

        Returns:
            Image array if a new result is ready, None otherwise
        """
        with self.lock:
            img, self.result = self.result, None
        return img

    def wait(self, timeout=None):
        """Block until no render is running or pending. Returns True when idle."""
        return self.idle.wait(timeout)
