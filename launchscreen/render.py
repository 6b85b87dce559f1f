"""
Visual parameter resolution for the launch screen: background color and
background image content mode.
"""

import re
from typing import Any, NamedTuple, Optional

from .errors import ConfigParseError
from .manifest import Manifest, get_splash_value


# Native UIKit content modes written into the xib.
ASPECT_FILL = "scaleAspectFill"
ASPECT_FIT = "scaleAspectFit"

_HEX_COLOR = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class RGBColor(NamedTuple):
    r: float
    g: float
    b: float


WHITE = RGBColor(1.0, 1.0, 1.0)


def parse_hex_color(value: Any) -> RGBColor:
    """
    Parse hex color strings like '#112233' or '112233' into fractional RGB.

    Raises ConfigParseError for anything that is not exactly three two-digit
    hex components.
    """
    match = _HEX_COLOR.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise ConfigParseError(f"Unable to parse color: {value!r}")
    r, g, b = (int(component, 16) / 255 for component in match.groups())
    return RGBColor(r, g, b)


def resolve_background_color(
    manifest: Optional[Manifest],
    default: str,
    platform: str = "ios",
) -> RGBColor:
    color_str = get_splash_value(manifest, "backgroundColor", platform) or default
    try:
        return parse_hex_color(color_str)
    except ConfigParseError as e:
        # A bad color must never fail the build.
        print(f"⚠️  {e}. Falling back to white.")
        return WHITE


def resolve_resize_mode(manifest: Optional[Manifest], platform: str = "ios") -> str:
    if not manifest:
        return ASPECT_FIT
    mode = get_splash_value(manifest, "resizeMode", platform)
    return ASPECT_FILL if mode == "cover" else ASPECT_FIT
