import math
import numpy as np


class ColorFormatError(ValueError):
    """
    Raised when a hex color string cannot be parsed.

    The `reason` attribute tells the three malformed-input cases apart:
    'prefix' (no leading '#'), 'length' (not 3, 6 or 8 digits) and
    'digits' (characters outside 0-9a-fA-F).
    """
    def __init__(self, color, reason: str, message: str):
        super().__init__(message)
        self.color = color
        self.reason = reason


def _glsl_format(val):
    """Formats a Python value for injection into a GLSL string."""
    if hasattr(val, 'to_glsl'):
        return val.to_glsl()
    if isinstance(val, str):
        return val
    if isinstance(val, (list, tuple, np.ndarray)):
        components = [_glsl_format(v) for v in np.asarray(val, dtype=float).flatten()]
        if len(components) == 2: return f"vec2({components[0]}, {components[1]})"
        if len(components) == 3: return f"vec3({components[0]}, {components[1]}, {components[2]})"
        if len(components) == 4: return f"vec4({components[0]}, {components[1]}, {components[2]}, {components[3]})"
        raise ValueError(f"Cannot format a {len(components)}-component vector as a GLSL literal.")
    number = float(val)
    if not math.isfinite(number):
        raise ValueError(f"Cannot emit non-finite value {number!r} as a GLSL literal.")
    text = repr(number)
    # Exponent forms like '1e+16' still need a '.' in the mantissa.
    mantissa, e, exponent = text.partition('e')
    if '.' not in mantissa:
        mantissa += '.0'
    return mantissa + e + exponent


def _vec2(value, name: str = 'value') -> np.ndarray:
    """Converts an (x, y) pair into a read-only float64 array."""
    arr = np.array(value, dtype=float).reshape(-1)
    if arr.shape != (2,):
        raise ValueError(f"{name} must be an (x, y) pair, got {value!r}.")
    arr.flags.writeable = False
    return arr


def parse_color(color: str) -> np.ndarray:
    """
    Parses a hex color string into normalized RGBA floats.

    Accepts '#RGB', '#RRGGBB' and '#RRGGBBAA'. The 3- and 6-digit forms are
    fully opaque.

    Args:
        color (str): The hex color string, e.g. '#ff0000' or '#f00'.

    Returns:
        np.ndarray: A float array [r, g, b, a] with every channel in [0, 1].

    Raises:
        ColorFormatError: If the string is missing its '#', has the wrong
                          number of digits, or contains non-hex characters.
    """
    if not isinstance(color, str) or not color.startswith('#'):
        raise ColorFormatError(
            color, 'prefix',
            f"Invalid color {color!r}: must be a hex string starting with '#'."
        )

    digits = color[1:]
    if len(digits) not in (3, 6, 8):
        raise ColorFormatError(
            color, 'length',
            f"Invalid color {color!r}: expected 3, 6 or 8 hex digits after '#', got {len(digits)}."
        )
    if any(c not in '0123456789abcdefABCDEF' for c in digits):
        raise ColorFormatError(
            color, 'digits',
            f"Invalid color {color!r}: contains non-hex characters."
        )

    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += 'ff'

    channels = [int(digits[i:i + 2], 16) for i in range(0, 8, 2)]
    return np.array(channels, dtype=float) / 255.0
