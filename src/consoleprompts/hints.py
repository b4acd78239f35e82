"""Prompt hints: small descriptors of the constraints active on a prompt.

A Hint is a pure value: a key naming its kind plus an optional payload.
How a hint looks on screen is decided later, at render time, by the
handler registered for its key (see consoleprompts.formatting). Keys are
plain strings so callers can define their own kinds; HintKeys lists the
ones the built-in limiters produce.

Handler presets group the built-in handlers into tiers:

    essential   text, type, bool
    common      essential + length, range, not_equal
    all         every built-in key
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from fractions import Fraction
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from consoleprompts.errors import InvalidConfigurationError


@dataclass(frozen=True)
class Hint:
    """A hint attached to a prompt.

    Attributes:
        key: Kind of the hint (e.g. 'range', 'length', or a custom key).
        payload: Optional data for the handler, e.g. a (min, max) tuple.
    """
    key: str
    payload: Any = None


HintHandler = Callable[[Hint], Optional[str]]


class HintKeys:
    """Keys of the hints produced by the built-in prompts and limiters."""

    TEXT = 'text'
    TYPE = 'type'
    BOOL = 'bool'

    LENGTH = 'length'
    NOT_EMPTY = 'not_empty'
    NOT_BLANK = 'not_blank'

    PATH = 'path'
    FILE_PATH = 'file_path'
    DIR_PATH = 'dir_path'

    RANGE = 'range'
    FINITE = 'finite'
    NOT_INFINITE = 'not_infinite'
    NOT_NAN = 'not_nan'

    NOT_EQUAL = 'not_equal'


# Display names for type hints. Subclasses are not matched.
TYPE_NAMES: Dict[type, str] = {
    int: 'Int',
    float: 'Float',
    complex: 'Complex',
    str: 'String',
    bool: 'Bool',
    Decimal: 'Decimal',
    Fraction: 'Fraction',
    date: 'Date',
    time: 'Time',
    datetime: 'DateTime',
    Path: 'Path',
}


def type_display_name(value_type: type) -> str:
    """Return the display label for a type, falling back to its __name__."""
    return TYPE_NAMES.get(value_type, value_type.__name__)


def format_range(low, high) -> Optional[str]:
    """Render a range with optional bounds as 'low..high', 'low..' or '..high'."""
    if low is not None and high is not None:
        return f"{low}..{high}"
    if low is not None:
        return f"{low}.."
    if high is not None:
        return f"..{high}"
    return None


# ---------------------------------------------------------------------------
# Generic handlers (not bound to a key)
# ---------------------------------------------------------------------------
def debug_handler(hint: Hint) -> Optional[str]:
    """Show the raw contents of a hint."""
    return repr(hint)


def skip_handler(hint: Hint) -> Optional[str]:
    """Hide every hint."""
    return None


# ---------------------------------------------------------------------------
# Built-in handlers
# ---------------------------------------------------------------------------
def text_handler(hint):
    if isinstance(hint.payload, str):
        return hint.payload
    return None


def type_handler(hint):
    if not isinstance(hint.payload, type):
        return None
    return type_display_name(hint.payload)


def bool_handler(hint):
    if hint.payload is True:
        return "Y/n"
    if hint.payload is False:
        return "y/N"
    return "y/n"


def length_handler(hint):
    payload = hint.payload
    if isinstance(payload, int):
        return f"{payload} chars"
    if isinstance(payload, tuple) and len(payload) == 2:
        rendered = format_range(*payload)
        return f"{rendered} chars" if rendered else None
    return None


def not_empty_handler(hint):
    return "not empty"


def path_handler(hint):
    return "path"


def file_path_handler(hint):
    return "existing file path" if hint.payload else "file path"


def dir_path_handler(hint):
    return "existing directory path" if hint.payload else "directory path"


def range_handler(hint):
    payload = hint.payload
    if isinstance(payload, tuple) and len(payload) == 2:
        return format_range(*payload)
    return None


def finite_handler(hint):
    return "finite"


def not_infinite_handler(hint):
    return "not infinite"


def not_nan_handler(hint):
    return "not NaN"


def not_equal_handler(hint):
    return f"not {hint.payload}"


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------
_ESSENTIAL = {
    HintKeys.TEXT: text_handler,
    HintKeys.TYPE: type_handler,
    HintKeys.BOOL: bool_handler,
}

_COMMON = {
    **_ESSENTIAL,
    HintKeys.LENGTH: length_handler,
    HintKeys.RANGE: range_handler,
    HintKeys.NOT_EQUAL: not_equal_handler,
}

_ALL = {
    **_COMMON,
    HintKeys.NOT_EMPTY: not_empty_handler,
    HintKeys.NOT_BLANK: not_empty_handler,
    HintKeys.PATH: path_handler,
    HintKeys.FILE_PATH: file_path_handler,
    HintKeys.DIR_PATH: dir_path_handler,
    HintKeys.FINITE: finite_handler,
    HintKeys.NOT_INFINITE: not_infinite_handler,
    HintKeys.NOT_NAN: not_nan_handler,
}

HANDLER_PRESETS = {
    'none': {},
    'essential': _ESSENTIAL,
    'common': _COMMON,
    'all': _ALL,
}


def get_handlers(preset: str = 'common') -> Dict[str, HintHandler]:
    """Return a new key -> handler dict for a preset name.

    Raises:
        InvalidConfigurationError: preset is not one of HANDLER_PRESETS.
    """
    try:
        return dict(HANDLER_PRESETS[preset])
    except KeyError:
        names = ", ".join(HANDLER_PRESETS)
        raise InvalidConfigurationError(
            f"Unknown hint preset '{preset}' (expected one of: {names})"
        ) from None
