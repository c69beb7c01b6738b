"""
Allow running the package directly: python -m mandelbrot [width height]

Options:
    --settings PATH   settings.json to load instead of the bundled one
    --output PATH     render once and save a PNG instead of opening a window
"""
from argparse import ArgumentParser

from .settings import load_settings, resolve_settings


def build_parser():
    parser = ArgumentParser(prog='mandelbrot')
    parser.add_argument('size', type=int, nargs='*', metavar='SIZE',
                        help='window width and height in pixels')
    parser.add_argument('--settings', dest='settings_path', type=str,
                        help='settings file to load (default: bundled settings.json)')
    parser.add_argument('--output', dest='output', type=str,
                        help='render once and save a PNG to this path instead of opening a window')
    return parser


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)
    if opt.size and len(opt.size) != 2:
        parser.error('SIZE takes exactly two values: width height')

    settings = load_settings(opt.settings_path)
    if opt.size:
        settings['width'], settings['height'] = opt.size
    render_settings = resolve_settings(settings)

    if opt.output:
        from .app import save_image
        from .renderer import MandelbrotRenderer

        renderer = MandelbrotRenderer(
            render_settings.region, render_settings.max_iteration, render_settings.palette,
            render_settings.gradient, render_settings.bailout,
        )
        print(f"Rendering {render_settings.width}x{render_settings.height}...")
        save_image(renderer.render(render_settings.width, render_settings.height), opt.output)
    else:
        from .app import run
        run(render_settings)


if __name__ == "__main__":
    main()
