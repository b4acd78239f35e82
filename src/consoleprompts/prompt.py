"""Prompt — a single configured request for one typed value.

A Prompt bundles display text, hints, a parser and a chain of
validators. It is built fluently (every configuration call returns the
prompt) and shown with display(), which keeps asking until the input
parses and passes every validator::

    age = (prompter.prompt_for(int, "Your age")
           .of_range(1, 120)
           .display())

parse_and_validate() is the stream-free half of display(): it either
returns a value or raises, and never catches. display() owns the retry
policy: recognized input errors (errors.INPUT_ERRORS) print a message
and ask again, anything else propagates.

Prompts are usually created by a Prompter, which owns the streams and
presentation settings. Hints and validators accumulate across calls and
are not reset by display().
"""

from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from consoleprompts import limiters
from consoleprompts.errors import INPUT_ERRORS, InvalidConfigurationError
from consoleprompts.hints import Hint, HintKeys
from consoleprompts.lib.log_lib import get_output, trace
from consoleprompts.lib.log_lib.levels import CONFIG, DEBUG, TIMING

T = TypeVar('T')

Parser = Callable[[str], T]
Validator = Callable[[T], None]


class Prompt(Generic[T]):
    """A prompt for a value of type T.

    Args:
        prompter: Owning Prompter (streams, templates, hint handlers).
        value_type: Type of the requested value, used for type hints.
    """

    def __init__(self, prompter, value_type: Optional[type] = None):
        self._prompter = prompter
        self._value_type = value_type
        self._text: Optional[str] = None
        self._hints: List[Hint] = []
        self._parser: Optional[Parser] = None
        self._validators: List[Validator] = []

    def __repr__(self):
        type_name = self._value_type.__name__ if self._value_type else '?'
        return (f"Prompt[{type_name}](text={self._text!r}, "
                f"hints={len(self._hints)}, validators={len(self._validators)})")

    @property
    def prompter(self):
        return self._prompter

    @property
    def value_type(self) -> Optional[type]:
        return self._value_type

    # ------------------------------------------------------------------
    # Text prompt
    # ------------------------------------------------------------------
    @property
    def text(self) -> Optional[str]:
        """Display text, or None when the null prompt is shown."""
        return self._text

    def set_prompt(self, text: Optional[str]) -> 'Prompt[T]':
        """Set the display text. Empty or whitespace-only text means no text."""
        self._text = text if text and text.strip() else None
        return self

    def remove_prompt(self) -> 'Prompt[T]':
        return self.set_prompt(None)

    # ------------------------------------------------------------------
    # Hints
    # ------------------------------------------------------------------
    @property
    def hints(self) -> Tuple[Hint, ...]:
        """Hints in display order."""
        return tuple(self._hints)

    def add_hint(self, hint, payload=None) -> 'Prompt[T]':
        """Append a hint, given as a Hint or as a key and optional payload."""
        if not isinstance(hint, Hint):
            hint = Hint(hint, payload)
        self._hints.append(hint)
        return self

    def add_type_hint(self) -> 'Prompt[T]':
        """Append a hint naming the requested value type.

        Raises:
            InvalidConfigurationError: the prompt has no value type.
        """
        if self._value_type is None:
            raise InvalidConfigurationError(
                "Cannot add a type hint to a prompt with no value type")
        return self.add_hint(Hint(HintKeys.TYPE, self._value_type))

    def remove_last_hint(self) -> 'Prompt[T]':
        """Remove the most recently added hint, if any."""
        if self._hints:
            self._hints.pop()
        return self

    def remove_all_hints(self) -> 'Prompt[T]':
        self._hints.clear()
        return self

    def remove_hints_matching(self, predicate: Callable[[Hint], bool]) -> 'Prompt[T]':
        """Remove every hint for which predicate returns True."""
        self._hints = [h for h in self._hints if not predicate(h)]
        return self

    def replace_hint(self, key: str, hint: Hint) -> 'Prompt[T]':
        """Replace the hints with the given key by a single hint.

        The new hint takes the position of the first matching one. When
        nothing matches, it is appended.
        """
        replaced = False
        hints = []
        for h in self._hints:
            if h.key != key:
                hints.append(h)
            elif not replaced:
                hints.append(hint)
                replaced = True
        if not replaced:
            hints.append(hint)
        self._hints = hints
        return self

    # ------------------------------------------------------------------
    # Parser and validators
    # ------------------------------------------------------------------
    @property
    def parser(self) -> Optional[Parser]:
        return self._parser

    def set_parser(self, parser: Parser) -> 'Prompt[T]':
        """Set the function turning raw text into a value.

        The parser should raise one of errors.INPUT_ERRORS (ValueError
        is the usual one) when the text cannot be interpreted.

        Raises:
            InvalidConfigurationError: parser is None.
        """
        if parser is None:
            raise InvalidConfigurationError("Parser cannot be None")
        self._parser = parser
        return self

    def add_validator(self, validator: Validator) -> 'Prompt[T]':
        """Append a validator to the chain.

        Validators run in the order they were added; the first one to
        raise rejects the value. Raise PromptInputError (or another
        errors.INPUT_ERRORS kind) to have the user asked again.
        """
        self._validators.append(validator)
        return self

    @trace
    def parse_and_validate(self, raw: str) -> T:
        """Parse raw text and run every validator on the result.

        Does not touch the streams and does not catch anything.

        Raises:
            InvalidConfigurationError: no parser is set.
        """
        if self._parser is None:
            raise InvalidConfigurationError("Cannot parse a value without a parser")

        value = self._parser(raw)
        for validator in self._validators:
            validator(value)
        return value

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def _read_line(self) -> str:
        line = self._prompter.input_stream.readline()
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        return line

    def _write(self, text: str) -> None:
        stream = self._prompter.output_stream
        stream.write(text)
        flush = getattr(stream, 'flush', None)
        if flush is not None:
            flush()

    def display(self) -> T:
        """Show the prompt and read lines until a valid value is entered.

        Reads exactly one line per attempt; end of input counts as an
        empty line. Input errors print the prompter's error message and
        ask again; any other exception propagates.

        Raises:
            InvalidConfigurationError: no parser is set.
        """
        if self._parser is None:
            raise InvalidConfigurationError("Cannot query a value without a parser")

        out = get_output()
        attempt = 0
        while True:
            attempt += 1
            display_text = self._prompter.format_prompt_display(self._text, self._hints)
            out.emit(CONFIG, "Prompt attempt {n}: {text!r}",
                     channel='prompt', n=attempt, text=display_text)
            self._write(display_text)

            line = self._read_line()
            out.emit(DEBUG, "Read line: {line!r}", channel='parse', line=line)

            try:
                return self.parse_and_validate(line)
            except INPUT_ERRORS as e:
                out.emit(TIMING, "Rejected {line!r}: {kind}: {msg}",
                         channel='validate', line=line,
                         kind=type(e).__name__, msg=str(e))
                self._write(self._prompter.format_input_error(e) + "\n")

    # ------------------------------------------------------------------
    # Limiters (see consoleprompts.limiters)
    # ------------------------------------------------------------------
    def of_length(self, length, max_length=limiters._EXACT) -> 'Prompt[T]':
        return limiters.of_length(self, length, max_length)

    def of_length_range(self, min_length=0, max_length=None) -> 'Prompt[T]':
        return limiters.of_length_range(self, min_length, max_length)

    def disallow_empty(self) -> 'Prompt[T]':
        return limiters.disallow_empty(self)

    def disallow_blank(self) -> 'Prompt[T]':
        return limiters.disallow_blank(self)

    def of_path(self) -> 'Prompt[T]':
        return limiters.of_path(self)

    def of_file_path(self, must_exist=False) -> 'Prompt[T]':
        return limiters.of_file_path(self, must_exist)

    def of_directory_path(self, must_exist=False) -> 'Prompt[T]':
        return limiters.of_directory_path(self, must_exist)

    def of_range(self, minimum=None, maximum=None) -> 'Prompt[T]':
        return limiters.of_range(self, minimum, maximum)

    def no_less_than(self, minimum) -> 'Prompt[T]':
        return limiters.no_less_than(self, minimum)

    def no_greater_than(self, maximum) -> 'Prompt[T]':
        return limiters.no_greater_than(self, maximum)

    def disallow_infinity(self) -> 'Prompt[T]':
        return limiters.disallow_infinity(self)

    def disallow_nan(self) -> 'Prompt[T]':
        return limiters.disallow_nan(self)

    def force_finite(self) -> 'Prompt[T]':
        return limiters.force_finite(self)

    def not_equal_to(self, excluded) -> 'Prompt[T]':
        return limiters.not_equal_to(self, excluded)
