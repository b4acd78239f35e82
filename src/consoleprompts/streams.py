"""Input stream wrappers used by the CLI commands.

The prompt loop treats end of input as an empty line, which lets a
yes/no question fall back to its default when stdin is closed. A prompt
that rejects empty input would then ask forever, so commands reading
from a pipe wrap stdin in EndOfInputGuard.
"""

from consoleprompts.errors import EndOfInputError


class EndOfInputGuard:
    """Input stream that raises on a second read at end of input.

    The first read at end of input returns '' like the wrapped stream.
    Reading again without any data in between raises EndOfInputError.

    Usage::

        prompter = build_prompter(args, sys.stderr, EndOfInputGuard(sys.stdin))
    """

    def __init__(self, stream):
        self.stream = stream
        self._at_eof = False

    def readline(self):
        line = self.stream.readline()
        if line:
            self._at_eof = False
            return line
        if self._at_eof:
            raise EndOfInputError(
                "End of input reached before a valid answer was given")
        self._at_eof = True
        return line
