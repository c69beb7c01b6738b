"""
Value types describing what to render.

A region of the complex plane comes in two encodings:
    - Corners: lower-left and upper-right corners
    - OriginAndWidth: a center point plus the full width/height
Both resolve to Corners through to_corners() before rendering.

Gradient holds the scale/shift/log-index controls that turn a smoothed
iteration count into a palette position.

Text forms (used by settings.json):
    region:   "<minReal>,<minImag> <maxReal>,<maxImag> <originAndWidth>"
    gradient: "<scale> <shift> <logIndex>"
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Corners:
    """Rectangle given by its min and max corners."""
    min: complex
    max: complex

    def to_corners(self):
        return self


@dataclass(frozen=True)
class OriginAndWidth:
    """Rectangle given by its center and its full (width, height) packed in a complex."""
    origin: complex
    size: complex

    def to_corners(self):
        half_x = self.size.real / 2
        half_y = self.size.imag / 2
        return Corners(
            complex(self.origin.real - half_x, self.origin.imag - half_y),
            complex(self.origin.real + half_x, self.origin.imag + half_y),
        )


def normalize_region(region):
    """Return the region in corner form. Inverted rectangles are kept as given."""
    return region.to_corners()


@dataclass(frozen=True)
class Gradient:
    """Maps a smoothed iteration count onto the palette."""
    scale: float
    shift: float
    log_index: bool = False

    def equals(self, other):
        if not isinstance(other, Gradient):
            return False
        return (self.scale == other.scale and self.shift == other.shift
                and self.log_index == other.log_index)


def parse_bool(text):
    """Parse 'true'/'false' in any case. Raises ValueError otherwise."""
    value = text.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def _parse_point(text):
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected '<real>,<imag>', got {text!r}")
    return complex(float(parts[0]), float(parts[1]))


def parse_region(text):
    """
    Parse a region from its text form.

    Returns Corners, or OriginAndWidth when the trailing flag is true.

    Raises:
        ValueError on a wrong token count, non-numeric coordinates or a bad flag
    """
    tokens = text.split()
    if len(tokens) != 3:
        raise ValueError(f"region needs 3 space-separated fields, got {len(tokens)}: {text!r}")
    first = _parse_point(tokens[0])
    second = _parse_point(tokens[1])
    if parse_bool(tokens[2]):
        return OriginAndWidth(first, second)
    return Corners(first, second)


def region_to_string(region):
    if isinstance(region, OriginAndWidth):
        first, second, flag = region.origin, region.size, True
    else:
        first, second, flag = region.min, region.max, False
    return (f"{first.real!r},{first.imag!r} "
            f"{second.real!r},{second.imag!r} {flag}")


def parse_gradient(text):
    """
    Parse a gradient from "<scale> <shift> <logIndex>".

    Raises:
        ValueError on a wrong token count, non-numeric fields or a bad flag
    """
    tokens = text.split()
    if len(tokens) != 3:
        raise ValueError(f"gradient needs 3 space-separated fields, got {len(tokens)}: {text!r}")
    return Gradient(float(tokens[0]), float(tokens[1]), parse_bool(tokens[2]))


def gradient_to_string(gradient):
    return f"{gradient.scale!r} {gradient.shift!r} {gradient.log_index}"
