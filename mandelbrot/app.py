"""
Display window for the Mandelbrot renderer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- S key: save the current image as PNG
- Window resize: re-render at the new size in the background
- ESC / close: quit

The window holds no render logic of its own; it only issues render
requests to MandelbrotRenderer and shows what comes back.
"""

import pygame

from .compute import warmup_jit
from .renderer import MandelbrotRenderer


def save_image(rgb, path):
    """Save an (height, width, 3) uint8 image as PNG."""
    surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
    pygame.image.save(surface, path)
    print(f"Image saved to: {path}")


class MandelbrotApp:
    """
    Main application class for the Mandelbrot display.

    Handles the pygame window and event loop, forwarding resize and
    save requests to the renderer and to save_image().
    """

    CAPTION = "Mandelbrot Display - S to save, ESC to quit"

    def __init__(self, settings):
        """
        Initialize the application.

        Args:
            settings: RenderSettings from settings.resolve_settings()
        """
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.renderer = MandelbrotRenderer(
            settings.region, settings.max_iteration, settings.palette,
            settings.gradient, settings.bailout,
        )

        self.screen = None
        self.clock = None
        self.current_rgb = None
        self.current_surface = None
        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._initial_render()

        self.running = True
        while self.running:
            self._handle_events()
            self._check_render_result()
            self._draw()
            self.clock.tick(60)

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption("Compiling (first run only)...")
        self.clock = pygame.time.Clock()

    def _initial_render(self):
        """Warm up JIT and render the first image synchronously."""
        warmup_jit(self.settings.palette)
        print(f"Rendering {self.width}x{self.height}...")
        self._show(self.renderer.render(self.width, self.height))
        pygame.display.set_caption(self.CAPTION)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self._handle_resize(event)
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_resize(self, event):
        """Re-render at the new window size."""
        self.width, self.height = event.w, event.h
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        print(f"Rendering {self.width}x{self.height}...")
        self.renderer.compute_async(self.width, self.height)
        pygame.display.set_caption("Computing...")

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_s:
            if self.current_rgb is not None:
                save_image(self.current_rgb, self.settings.save_path)
                pygame.display.set_caption(f"Saved: {self.settings.save_path} - Mandelbrot Display")

    def _check_render_result(self):
        """Check if async render has completed."""
        result = self.renderer.get_result()
        if result is not None:
            self._show(result)
            pygame.display.set_caption(self.CAPTION)

    def _show(self, rgb):
        self.current_rgb = rgb
        self.current_surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))

    def _draw(self):
        """Draw the current frame."""
        self.screen.fill((0, 0, 0))
        if self.current_surface is not None:
            self.screen.blit(self.current_surface, (0, 0))
        pygame.display.flip()


def run(settings):
    """
    Run the Mandelbrot display.

    Args:
        settings: RenderSettings from settings.resolve_settings()
    """
    app = MandelbrotApp(settings)
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
