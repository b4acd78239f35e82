"""Error taxonomy for consoleprompts.

Two disjoint classes of failure:

  1. Input errors. The text (or the value parsed from it) is not
     acceptable, so the user is asked again. ``Prompt.display()`` catches
     exactly the kinds listed in INPUT_ERRORS.
  2. Everything else. Configuration mistakes and internal faults
     propagate out of ``display()`` immediately, without a retry.
"""

import decimal
import io


class PromptError(Exception):
    """Base class for all errors raised by consoleprompts."""


class InvalidConfigurationError(PromptError):
    """A prompt or prompter was set up incorrectly (e.g. no parser).

    Never retried: this is a programming error, not a user error.
    """


class PromptInputError(PromptError):
    """Raised by parsers and validators to reject user input.

    Custom validators should raise this (or a subclass) to have the
    user prompted again.
    """

    DEFAULT_MESSAGE = "Input was not in the correct format or value was invalid"

    def __init__(self, message=None):
        super().__init__(message or self.DEFAULT_MESSAGE)


class InputFormatError(PromptInputError):
    """Text could not be interpreted as a value of the requested type."""


class InputOutOfRangeError(PromptInputError):
    """Parsed value falls outside the accepted range."""


class InputLengthError(PromptInputError):
    """Input text is not of an accepted length."""


class PathTooLongError(PromptInputError):
    """Filesystem path exceeds the supported length."""


class EndOfInputError(PromptError):
    """Input ran out while a prompt was still waiting for a valid answer.

    Not an input error: there is nothing left to ask again with.
    """


# Exceptions display() treats as "ask again". ValueError covers malformed
# literals from int()/float()/date.fromisoformat() and io.UnsupportedOperation.
INPUT_ERRORS = (
    PromptInputError,
    ValueError,
    OverflowError,
    decimal.InvalidOperation,
    io.UnsupportedOperation,
    NotImplementedError,
)
