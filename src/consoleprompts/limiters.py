"""Input limiters: constraints that pair a validator with a hint.

Every limiter takes a prompt, registers one validator that closes over
its arguments, adds one hint describing the constraint, and returns the
same prompt so calls can be chained. Prompt exposes each limiter as a
method of the same name::

    prompt = prompter.prompt_for(int, "Age").of_range(1, 120)
    # same as: limiters.of_range(prompter.prompt_for(int, "Age"), 1, 120)

Range limiters share one rule: when both bounds are given in the wrong
order they are swapped, never treated as an empty range.
"""

import cmath
import math
import numbers
import os
from decimal import Decimal

from consoleprompts.errors import (
    InputLengthError, InputOutOfRangeError, InvalidConfigurationError,
    PathTooLongError, PromptInputError,
)
from consoleprompts.hints import Hint, HintKeys


_EXACT = object()


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------
def of_length(prompt, length, max_length=_EXACT):
    """Limit input to an exact length, or to a range when max_length is given.

    of_length(p, 3)        exactly 3 characters
    of_length(p, 3, 8)     3 to 8 characters (see of_length_range)
    of_length(p, 3, None)  at least 3 characters

    Raises:
        InvalidConfigurationError: a length is negative.
    """
    if max_length is not _EXACT:
        return of_length_range(prompt, length, max_length)

    if length < 0:
        raise InvalidConfigurationError(f"Length cannot be negative: {length}")

    def validator(value):
        if len(value) != length:
            raise InputLengthError(
                f"Input must be exactly {length} characters long")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.LENGTH, length))


def of_length_range(prompt, min_length=0, max_length=None):
    """Limit input length to [min_length, max_length].

    min_length of 0 means no lower bound, max_length of None no upper
    bound. (0, None) adds nothing; equal bounds are an exact length.
    """
    if min_length < 0:
        raise InvalidConfigurationError(
            f"Minimum length cannot be negative: {min_length}")
    if max_length is not None and max_length < 0:
        raise InvalidConfigurationError(
            f"Maximum length cannot be negative: {max_length}")

    if max_length is not None and min_length > max_length:
        min_length, max_length = max_length, min_length

    if min_length == 0 and max_length is None:
        return prompt
    if min_length == max_length:
        return of_length(prompt, min_length)

    def validator(value):
        if len(value) < min_length or (max_length is not None
                                       and len(value) > max_length):
            raise InputLengthError("Input length is out of the allowed range")

    hint = Hint(HintKeys.LENGTH, (min_length, max_length))
    return prompt.add_validator(validator).add_hint(hint)


def disallow_empty(prompt):
    """Reject the empty string."""
    def validator(value):
        if value == "":
            raise PromptInputError("Input cannot be empty")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.NOT_EMPTY))


def disallow_blank(prompt):
    """Reject empty and whitespace-only input."""
    def validator(value):
        if not value.strip():
            raise PromptInputError("Input cannot be empty or whitespace")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.NOT_BLANK))


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
if os.name == 'nt':
    INVALID_PATH_CHARS = frozenset(
        [chr(i) for i in range(32)] + list('<>"|?*'))
    MAX_PATH_LENGTH = 32767
else:
    INVALID_PATH_CHARS = frozenset('\0')
    MAX_PATH_LENGTH = 4096


def _validate_path(value):
    if not value.strip():
        raise PromptInputError("Path is empty")
    if any(ch in INVALID_PATH_CHARS for ch in value):
        raise PromptInputError("Path contains invalid characters")
    if len(os.path.abspath(value)) > MAX_PATH_LENGTH:
        raise PathTooLongError(
            f"Path is longer than {MAX_PATH_LENGTH} characters")


def of_path(prompt):
    """Limit input to a syntactically valid filesystem path."""
    return prompt.add_validator(_validate_path).add_hint(Hint(HintKeys.PATH))


def of_file_path(prompt, must_exist=False):
    """Limit input to a path that is not a directory.

    Args:
        must_exist: Also require the file to exist already.
    """
    def validator(value):
        if os.path.isdir(value):
            raise PromptInputError("Given path is for a directory, not a file")
        if must_exist and not os.path.isfile(value):
            raise PromptInputError("File does not exist")

    of_path(prompt).add_validator(validator)
    return prompt.replace_hint(HintKeys.PATH, Hint(HintKeys.FILE_PATH, must_exist))


def of_directory_path(prompt, must_exist=False):
    """Limit input to a path that is not a file.

    Args:
        must_exist: Also require the directory to exist already.
    """
    def validator(value):
        if os.path.isfile(value):
            raise PromptInputError("Given path is for a file, not a directory")
        if must_exist and not os.path.isdir(value):
            raise PromptInputError("Directory does not exist")

    of_path(prompt).add_validator(validator)
    return prompt.replace_hint(HintKeys.PATH, Hint(HintKeys.DIR_PATH, must_exist))


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------
def _is_infinite(value):
    # Rationals never overflow to inf; Decimal knows its own state
    if isinstance(value, numbers.Rational):
        return False
    if isinstance(value, Decimal):
        return value.is_infinite()
    if isinstance(value, complex):
        return cmath.isinf(value)
    return math.isinf(value)


def _is_nan(value):
    if isinstance(value, numbers.Rational):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, complex):
        return cmath.isnan(value)
    return math.isnan(value)


def of_range(prompt, minimum=None, maximum=None):
    """Limit input to the inclusive range [minimum, maximum].

    Either bound may be None for no limit on that side.
    """
    if minimum is None and maximum is None:
        return prompt

    if minimum is not None and maximum is not None and minimum > maximum:
        minimum, maximum = maximum, minimum

    def validator(value):
        if minimum is not None and value < minimum:
            raise InputOutOfRangeError(f"Value must be no less than {minimum}")
        if maximum is not None and value > maximum:
            raise InputOutOfRangeError(f"Value must be no greater than {maximum}")

    hint = Hint(HintKeys.RANGE, (minimum, maximum))
    return prompt.add_validator(validator).add_hint(hint)


def no_less_than(prompt, minimum):
    """Limit input to values >= minimum."""
    return of_range(prompt, minimum, None)


def no_greater_than(prompt, maximum):
    """Limit input to values <= maximum."""
    return of_range(prompt, None, maximum)


def disallow_infinity(prompt):
    """Reject positive and negative infinity."""
    def validator(value):
        if _is_infinite(value):
            raise PromptInputError(
                "Value is too large or too small to be considered finite")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.NOT_INFINITE))


def disallow_nan(prompt):
    """Reject NaN."""
    def validator(value):
        if _is_nan(value):
            raise PromptInputError("Value cannot be NaN")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.NOT_NAN))


def force_finite(prompt):
    """Reject infinities and NaN in one step."""
    def validator(value):
        if _is_infinite(value) or _is_nan(value):
            raise PromptInputError("Value must be finite")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.FINITE))


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------
def not_equal_to(prompt, excluded):
    """Reject one specific value."""
    def validator(value):
        if value == excluded:
            raise PromptInputError(f"Value cannot be {excluded}")

    return prompt.add_validator(validator).add_hint(Hint(HintKeys.NOT_EQUAL, excluded))
