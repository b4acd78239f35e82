"""consoleprompts — typed, validated console prompts.

Read a line, parse it into a typed value, check it against composable
constraints, and ask again on bad input, with hints describing the
active constraints next to the prompt::

    from consoleprompts import Prompter

    prompter = Prompter()
    age = prompter.prompt_for(int, "Your age").of_range(1, 120).display()
"""

from consoleprompts._version import __version__, __app_name__
from consoleprompts.errors import (
    INPUT_ERRORS, EndOfInputError, InputFormatError, InputLengthError,
    InputOutOfRangeError, InvalidConfigurationError, PathTooLongError,
    PromptError, PromptInputError,
)
from consoleprompts.formatting import HintFormatter
from consoleprompts.hints import Hint, HintKeys, TYPE_NAMES, get_handlers
from consoleprompts.prompt import Prompt
from consoleprompts.prompter import (
    Prompter, parse_bool, prompt_for, prompt_for_bool, prompt_for_number,
    prompt_for_string,
)

__all__ = [
    "__version__", "__app_name__",
    "Prompt", "Prompter", "Hint", "HintKeys", "HintFormatter",
    "TYPE_NAMES", "get_handlers", "parse_bool",
    "prompt_for", "prompt_for_bool", "prompt_for_number", "prompt_for_string",
    "INPUT_ERRORS", "PromptError", "InvalidConfigurationError",
    "PromptInputError", "InputFormatError", "InputLengthError",
    "InputOutOfRangeError", "PathTooLongError", "EndOfInputError",
]
