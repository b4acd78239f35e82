"""Prompter — the session object behind every prompt.

A Prompter owns the input/output stream pair, the display templates and
the hint handlers, and builds Prompt instances pre-wired for common
value types. All presentation state lives on the instance; there is no
process-wide style configuration.

Templates (str.format slots):

    prompt_format           {0} text, {1} joined hints   "{0} ({1}): "
    prompt_format_no_hints  {0} text                     "{0}: "
    null_prompt_format      {0} joined hints             "[{0}] > "
    null_prompt_no_hints    used verbatim                "> "
    invalid_input_format    {0} error message            "Invalid input: {0}"
    hint_separator          joins rendered hints         ", "

The streams are borrowed: the Prompter never closes them.
"""

import functools
import numbers
import sys
from datetime import date, datetime, time
from decimal import Decimal
from typing import Callable, Iterable, Mapping, Optional

from consoleprompts.errors import (
    InputFormatError, InvalidConfigurationError, PromptInputError,
)
from consoleprompts.formatting import HintFormatter
from consoleprompts.hints import Hint, HintHandler, HintKeys, get_handlers, skip_handler
from consoleprompts.prompt import Prompt


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------
def parse_bool(text: str, default: Optional[bool] = None) -> bool:
    """Parse a yes/no answer.

    Case-insensitive, surrounding whitespace ignored. Accepts 'true' and
    'false', or one of the single characters y/t/1 (True) and n/f/0
    (False). Empty input returns default, or is rejected when default is
    None.

    Raises:
        InputFormatError: text is not a recognized answer.
    """
    text = text.strip()
    if not text:
        if default is None:
            raise InputFormatError("Expected a yes/no answer")
        return default

    lowered = text.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    if len(lowered) == 1:
        if lowered in 'yt1':
            return True
        if lowered in 'nf0':
            return False

    raise InputFormatError(f"'{text}' is not a yes/no answer")


def _passthrough(text):
    return text


# Types whose constructor does not parse text the way a prompt needs
PARSERS = {
    bool: parse_bool,
    date: date.fromisoformat,
    time: time.fromisoformat,
    datetime: datetime.fromisoformat,
}


def default_parser_for(value_type: type) -> Callable[[str], object]:
    """Return the parser prompt_for() uses when none is supplied."""
    return PARSERS.get(value_type, value_type)


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------
class Prompter:
    """Factory for prompts and owner of their presentation.

    Prompter() works on the console (sys.stdout / sys.stdin) and comes
    with the 'common' hint handlers, hiding hints of any other kind.
    Prompter(output_stream, input_stream) works on the given streams and
    starts with no handlers, so every hint shows in its raw debug form
    until handlers are registered.
    """

    def __init__(self, output_stream=None, input_stream=None):
        console = output_stream is None and input_stream is None
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.input_stream = input_stream if input_stream is not None else sys.stdin

        self.prompt_format = "{0} ({1}): "
        self.prompt_format_no_hints = "{0}: "
        self.null_prompt_format = "[{0}] > "
        self.null_prompt_no_hints = "> "
        self.hint_separator = ", "
        self.invalid_input_format = "Invalid input: {0}"

        # Type hints are technical; off unless asked for
        self.auto_type_hints = False

        if console:
            self.hint_formatter = HintFormatter(get_handlers('common'), skip_handler)
        else:
            self.hint_formatter = HintFormatter()

    # ------------------------------------------------------------------
    # Prompt creation
    # ------------------------------------------------------------------
    def prompt_for(self, value_type: type, text: Optional[str] = None,
                   parser: Optional[Callable[[str], object]] = None) -> Prompt:
        """Create a prompt for a value of value_type.

        Args:
            value_type: Requested type; also names the type hint.
            text: Display text (None for the null prompt).
            parser: Text -> value function. Defaults to the type's own
                parser (see PARSERS), else the type itself.
        """
        if parser is None:
            parser = default_parser_for(value_type)

        prompt = Prompt(self, value_type).set_prompt(text).set_parser(parser)
        if self.auto_type_hints:
            prompt.add_type_hint()
        return prompt

    def prompt_for_number(self, value_type: type = float,
                          text: Optional[str] = None,
                          force_finite: bool = False) -> Prompt:
        """Create a prompt for a real number, optionally rejecting inf and NaN.

        Raises:
            InvalidConfigurationError: value_type is not an ordered real
                type (int, float, Decimal, Fraction and the like).
        """
        if not (isinstance(value_type, type)
                and issubclass(value_type, (numbers.Real, Decimal))):
            raise InvalidConfigurationError(
                f"{value_type!r} is not a real number type")

        prompt = self.prompt_for(value_type, text)
        if force_finite:
            prompt.force_finite()
        return prompt

    def prompt_for_string(self, text: Optional[str] = None,
                          trim: bool = True) -> Prompt:
        """Create a prompt for a string, stripped of surrounding whitespace
        unless trim is False."""
        return self.prompt_for(str, text, str.strip if trim else _passthrough)

    def prompt_for_bool(self, text: Optional[str] = None,
                        default: bool = False) -> Prompt:
        """Create a yes/no prompt; empty input answers default."""
        parser = functools.partial(parse_bool, default=default)
        prompt = self.prompt_for(bool, text, parser)

        # The y/n hint already says what is expected
        if self.auto_type_hints:
            prompt.remove_hints_matching(lambda h: h.key == HintKeys.TYPE)

        return prompt.add_hint(Hint(HintKeys.BOOL, default))

    # ------------------------------------------------------------------
    # Display formatting
    # ------------------------------------------------------------------
    def format_hints(self, hints: Iterable[Hint]):
        """Render hints through the registered handlers."""
        return self.hint_formatter.render(hints)

    def format_prompt_display(self, text: Optional[str],
                              hints: Iterable[Hint]) -> str:
        """Build the string shown before reading input.

        Picks one of four templates depending on whether there is text
        and whether any hint renders to something visible.
        """
        has_text = bool(text and text.strip())
        rendered = self.format_hints(hints)

        if not rendered:
            if has_text:
                return self.prompt_format_no_hints.format(text)
            return self.null_prompt_no_hints

        joined = self.hint_separator.join(rendered)
        if has_text:
            return self.prompt_format.format(text, joined)
        return self.null_prompt_format.format(joined)

    def format_input_error(self, exc: BaseException) -> str:
        """Build the message printed after rejected input."""
        message = str(exc) or PromptInputError.DEFAULT_MESSAGE
        return self.invalid_input_format.format(message)

    # ------------------------------------------------------------------
    # Hint handlers
    # ------------------------------------------------------------------
    def set_hint_handler(self, key: str, handler: HintHandler) -> 'Prompter':
        """Register the handler for a hint key. The handler returns the
        hint's display text, or None to hide the hint."""
        self.hint_formatter.set_handler(key, handler)
        return self

    def set_hint_handlers(self, handlers: Mapping[str, HintHandler]) -> 'Prompter':
        self.hint_formatter.set_handlers(handlers)
        return self

    def remove_all_hint_handlers(self) -> 'Prompter':
        """Remove all handlers, so every hint goes to unknown_hint_handler."""
        self.hint_formatter.remove_all_handlers()
        return self

    def use_hint_preset(self, preset: str) -> 'Prompter':
        """Replace all handlers with a preset: none, essential, common, all."""
        handlers = get_handlers(preset)
        self.hint_formatter.remove_all_handlers().set_handlers(handlers)
        return self

    @property
    def unknown_hint_handler(self) -> HintHandler:
        """Handler for hints whose key has no registered handler."""
        return self.hint_formatter.fallback

    @unknown_hint_handler.setter
    def unknown_hint_handler(self, handler: HintHandler) -> None:
        self.hint_formatter.set_fallback(handler)


# ---------------------------------------------------------------------------
# One-off shortcuts on a fresh console Prompter
# ---------------------------------------------------------------------------
def prompt_for(value_type, text=None, parser=None):
    return Prompter().prompt_for(value_type, text, parser)


def prompt_for_number(value_type=float, text=None, force_finite=False):
    return Prompter().prompt_for_number(value_type, text, force_finite)


def prompt_for_string(text=None, trim=True):
    return Prompter().prompt_for_string(text, trim)


def prompt_for_bool(text=None, default=False):
    return Prompter().prompt_for_bool(text, default)
