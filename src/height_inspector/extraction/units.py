# ABOUTME: Height parser turning free-text table cells into meters
# ABOUTME: Metric pattern first, imperial feet/inches second, None when nothing matches

import math
import re

METERS_PER_FOOT = 0.3048
METERS_PER_INCH = 0.0254

# \s stays Unicode-aware so "1.85\xa0m" from wiki markup still parses; digits are ASCII only
METRES_PATTERN = re.compile(r"([0-9]+[.,]?[0-9]*)\s*m")
FEET_PATTERN = re.compile(r"([0-9]+)\s*ft(?:\s*([0-9]+)\s*in)?")


def _parse_metres(text: str) -> float | None:
    match = METRES_PATTERN.search(text)
    if not match:
        return None

    value = float(match.group(1).replace(",", ".", 1))
    return value if math.isfinite(value) else None


def _parse_feet_inches(text: str) -> float | None:
    match = FEET_PATTERN.search(text)
    if not match:
        return None

    feet = float(match.group(1))
    inches = float(match.group(2)) if match.group(2) else 0.0
    value = feet * METERS_PER_FOOT + inches * METERS_PER_INCH
    return value if math.isfinite(value) else None


def parse_height(text: str) -> float | None:
    """Convert a height written in a table cell to meters.

    The metric form (``"1.85 m"``, ``"1,85m"``) is tried before the imperial one
    (``"6 ft 1 in"``, ``"6ft"``). A metric match whose number is not finite falls
    through to the imperial form.

    Args:
        text: Raw cell content

    Returns:
        The height in meters, or None when the text holds no recognizable height
    """
    metres = _parse_metres(text)
    if metres is not None:
        return metres
    return _parse_feet_inches(text)
