import re
from typing import Tuple

SI = "si"
METRIC = "metric"
IMPERIAL = "imperial"

UNIT_SYSTEMS = (SI, METRIC, IMPERIAL)

NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")


def validate_unit_system(unit: str) -> Tuple[bool, str]:
    """Validate a unit system name."""
    if not unit:
        return False, "Unit system is required"

    if not isinstance(unit, str) or unit not in UNIT_SYSTEMS:
        return False, f"Unit system must be one of: {', '.join(UNIT_SYSTEMS)} (got {unit!r})"

    return True, "Unit system is valid"


def is_numeric_string(value) -> bool:
    """Check whether a raw XML string holds a plain decimal number."""
    if not isinstance(value, str):
        return False

    return bool(NUMERIC_PATTERN.match(value))


def parse_bool(value, default=False) -> bool:
    """Read a true/false flag the way the config module does."""
    if value is None:
        return default

    return str(value).strip().lower() in ("1", "true", "yes", "on")
