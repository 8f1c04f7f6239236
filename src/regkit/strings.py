"""
Conversion between parameter values and their string representation.

Parameter lists only carry strings. Objects format their attribute values
with :func:`to_string` when listing parameters and parse them back with the
``parse_*`` helpers inside their ``set()`` implementation. The parsers never
raise; they return a ``(value, ok)`` tuple so that a malformed value simply
makes ``set()`` report failure.
"""

from enum import Enum
from typing import Any, Optional, Tuple

import numpy as np

from regkit.constants import (
    BOOL_FALSE_NAME,
    BOOL_TRUE_NAME,
    FALSE_STRINGS,
    TRUE_STRINGS,
)


def pad(text: str, width: int = 0, fill: str = " ", left: bool = False) -> str:
    """
    Pad a string to a minimum width.

    Args:
        text: String to pad.
        width: Minimum width. Strings that are already as long are unchanged.
        fill: Single fill character.
        left: If True, align text to the left (pad on the right).

    Returns:
        Padded string.
    """
    if width <= len(text):
        return text
    if left:
        return text.ljust(width, fill)
    return text.rjust(width, fill)


def _format_scalar(value: Any) -> str:
    # IntEnum and bool are both int subclasses, check them first
    if isinstance(value, Enum):
        return str(value)
    if isinstance(value, (bool, np.bool_)):
        return BOOL_TRUE_NAME if value else BOOL_FALSE_NAME
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return "%g" % float(value)
    return str(value)


def to_string(value: Any, width: int = 0, fill: str = " ", left: bool = False) -> str:
    """
    Format a parameter value as string.

    Args:
        value: Value to format. Strings are returned unchanged, booleans as
               Yes/No, numbers (including numpy scalars) in general format,
               enumeration values by their ``str()``, and numpy arrays, lists
               and tuples as space-separated elements.
        width: Optional minimum width of the result.
        fill: Fill character used for padding.
        left: Pad on the right instead of the left.

    Returns:
        String representation of the value.

    Example:
        >>> to_string(np.array([1.0, 2.5, 3.0]))
        '1 2.5 3'
        >>> to_string(True)
        'Yes'
    """
    if isinstance(value, str):
        text = value
    elif isinstance(value, (list, tuple, np.ndarray)):
        text = " ".join(_format_scalar(v) for v in np.asarray(value, dtype=object).ravel())
    else:
        text = _format_scalar(value)
    return pad(text, width, fill, left)


def parse_bool(text: str) -> Tuple[bool, bool]:
    """
    Parse a boolean value.

    Accepts yes/no, y/n, true/false, on/off and 1/0, case-insensitive.

    Args:
        text: String to parse.

    Returns:
        Tuple of (value, ok). On failure value is False.
    """
    token = text.strip().lower()
    if token in TRUE_STRINGS:
        return True, True
    if token in FALSE_STRINGS:
        return False, True
    return False, False


def parse_int(text: str) -> Tuple[int, bool]:
    """
    Parse an integer value.

    Args:
        text: String to parse. Surrounding whitespace is ignored.

    Returns:
        Tuple of (value, ok). On failure value is 0.
    """
    try:
        return int(text.strip()), True
    except ValueError:
        return 0, False


def parse_float(text: str) -> Tuple[float, bool]:
    """
    Parse a floating point value.

    Args:
        text: String to parse. Surrounding whitespace is ignored.

    Returns:
        Tuple of (value, ok). On failure value is 0.0.
    """
    try:
        return float(text.strip()), True
    except ValueError:
        return 0.0, False


def parse_vector(
    text: str,
    size: Optional[int] = None,
    dtype: Any = np.float64,
) -> Tuple[Optional[np.ndarray], bool]:
    """
    Parse a whitespace- or comma-separated list of numbers.

    Args:
        text: String to parse, e.g. ``"1 2 3"`` or ``"1, 2, 3"``.
        size: Expected number of elements. A single number is broadcast
              to this size; any other mismatch fails.
        dtype: numpy dtype of the result.

    Returns:
        Tuple of (array, ok). On failure array is None.
    """
    tokens = text.replace(",", " ").split()
    if not tokens:
        return None, False
    try:
        values = np.array([float(token) for token in tokens], dtype=np.float64)
    except ValueError:
        return None, False
    if size is not None and values.size != size:
        if values.size != 1:
            return None, False
        values = np.full(size, values[0])
    if np.issubdtype(np.dtype(dtype), np.integer):
        if not np.all(np.equal(np.mod(values, 1), 0)):
            return None, False
    return values.astype(dtype), True
