"""
Render settings loaded from settings.json.

The JSON file holds plain values and the text forms of the region and
gradient; resolve_settings() parses them into the objects the renderer
takes.
"""

import json
import os
from dataclasses import dataclass

from .colormaps import get_colormap
from .params import parse_gradient, parse_region


SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULT_SETTINGS = {
    'width': 1050,
    'height': 600,
    'max_iteration': 1000,
    'bailout': 1e10,
    'region': '-2.5,-1 1,1 False',
    'gradient': '256 0 False',
    'palette': 'Ultra',
    'palette_size': 768,
    'save_path': 'Image.png',
}


def load_settings(path=None):
    """
    Load settings from a JSON file, overlaid on DEFAULT_SETTINGS.

    A missing or undecodable file prints a warning and yields the defaults.
    Keys not present in DEFAULT_SETTINGS are ignored.
    """
    settings = dict(DEFAULT_SETTINGS)
    settings_path = path or SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            loaded = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load {settings_path}: {e}")
        return settings
    for key in DEFAULT_SETTINGS:
        if key in loaded:
            settings[key] = loaded[key]
    return settings


@dataclass(frozen=True)
class RenderSettings:
    width: int
    height: int
    max_iteration: int
    bailout: float
    region: object
    gradient: object
    palette: object
    save_path: str


def resolve_settings(settings):
    """
    Parse raw settings into a RenderSettings record and generate the palette.

    Raises:
        ValueError on a malformed region/gradient or an unknown palette name
    """
    return RenderSettings(
        width=int(settings['width']),
        height=int(settings['height']),
        max_iteration=int(settings['max_iteration']),
        bailout=float(settings['bailout']),
        region=parse_region(settings['region']),
        gradient=parse_gradient(settings['gradient']),
        palette=get_colormap(settings['palette'], int(settings['palette_size'])),
        save_path=settings['save_path'],
    )
