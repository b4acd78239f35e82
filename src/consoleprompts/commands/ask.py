"""consoleprompts ask — prompt for one value and print it.

Useful from shell scripts: the prompt, hints and error messages go to
stderr, and only the accepted value is printed on stdout::

    age=$(consoleprompts ask int "Your age" --min 1 --max 120)
    consoleprompts ask bool "Continue?" --default y --status && do_it

For 'bool' the exit status is 0 for yes and 1 for no when --status is
given. Running out of input before a valid answer is an error (exit 1);
a yes/no question with --default takes the default on empty stdin.
"""

import argparse
import sys
from datetime import date, datetime, time
from decimal import Decimal
from fractions import Fraction

from consoleprompts.config import build_prompter
from consoleprompts.errors import INPUT_ERRORS, InvalidConfigurationError
from consoleprompts.lib.log_lib import get_output
from consoleprompts.prompter import default_parser_for, parse_bool
from consoleprompts.streams import EndOfInputGuard


NUMBER_TYPES = {
    "int": int,
    "float": float,
    "decimal": Decimal,
    "fraction": Fraction,
}

OTHER_TYPES = {
    "date": date,
    "time": time,
    "datetime": datetime,
}

STRING_KINDS = ("str", "path", "file", "dir")

KINDS = sorted(list(NUMBER_TYPES) + list(OTHER_TYPES) + list(STRING_KINDS)
               + ["bool"])


def register(subparsers, parents):
    """Register the 'ask' subcommand."""
    p = subparsers.add_parser(
        "ask",
        parents=parents,
        help="Prompt for one value and print it",
        description=(
            "Prompt for a single typed value, re-asking until the input is\n"
            "valid, then print the value on stdout. The prompt itself is\n"
            "written to stderr so the command can be used in $(...)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("kind", choices=KINDS, metavar="TYPE",
                   help=f"Value type: {', '.join(KINDS)}")
    p.add_argument("text", nargs="?", default=None,
                   help="Prompt text (omit for a bare '> ' prompt)")

    numeric = p.add_argument_group("numbers, dates and times")
    numeric.add_argument("--min", dest="minimum", metavar="VALUE",
                         help="Smallest accepted value (inclusive)")
    numeric.add_argument("--max", dest="maximum", metavar="VALUE",
                         help="Largest accepted value (inclusive)")
    numeric.add_argument("--finite", action="store_true", default=False,
                         help="Reject inf and nan")

    text = p.add_argument_group("strings and paths")
    text.add_argument("--min-length", type=int, default=None, metavar="N")
    text.add_argument("--max-length", type=int, default=None, metavar="N")
    text.add_argument("--not-empty", action="store_true", default=False,
                      help="Reject empty or whitespace-only input")
    text.add_argument("--no-trim", action="store_true", default=False,
                      help="Keep surrounding whitespace")
    text.add_argument("--must-exist", action="store_true", default=False,
                      help="For file/dir: the path must already exist")

    p.add_argument("--not", dest="excluded", metavar="VALUE", default=None,
                   help="Reject this one value")
    p.add_argument("--default", metavar="ANSWER", default=None,
                   help="For bool: answer used on empty input (y/n)")
    p.add_argument("--status", action="store_true", default=False,
                   help="For bool: report the answer as exit status too")

    p.set_defaults(func=run)


def _option_value(parse, raw, flag):
    """Parse an option with the prompt's own parser."""
    if raw is None:
        return None
    try:
        return parse(raw)
    except INPUT_ERRORS as e:
        raise InvalidConfigurationError(
            f"Bad value for {flag}: {raw!r} ({e})") from e


def build_prompt(prompter, args):
    """Create the prompt described by the parsed 'ask' arguments."""
    kind = args.kind

    if kind == "bool":
        default = _option_value(parse_bool, args.default, "--default")
        return prompter.prompt_for_bool(args.text, bool(default))

    if kind in STRING_KINDS:
        prompt = prompter.prompt_for_string(args.text, trim=not args.no_trim)
        if kind == "path":
            prompt.of_path()
        elif kind == "file":
            prompt.of_file_path(must_exist=args.must_exist)
        elif kind == "dir":
            prompt.of_directory_path(must_exist=args.must_exist)
        if args.not_empty:
            prompt.disallow_blank()
        if args.min_length is not None or args.max_length is not None:
            prompt.of_length_range(args.min_length or 0, args.max_length)
        if args.excluded is not None:
            prompt.not_equal_to(args.excluded)
        return prompt

    if kind in NUMBER_TYPES:
        value_type = NUMBER_TYPES[kind]
        prompt = prompter.prompt_for_number(value_type, args.text,
                                            force_finite=args.finite)
    else:
        value_type = OTHER_TYPES[kind]
        prompt = prompter.prompt_for(value_type, args.text)

    parse = default_parser_for(value_type)
    prompt.of_range(_option_value(parse, args.minimum, "--min"),
                    _option_value(parse, args.maximum, "--max"))
    if args.excluded is not None:
        prompt.not_equal_to(_option_value(parse, args.excluded, "--not"))
    return prompt


def run(args):
    """Execute the ask command."""
    prompter = build_prompter(args, output_stream=sys.stderr,
                              input_stream=EndOfInputGuard(sys.stdin))
    value = build_prompt(prompter, args).display()

    if isinstance(value, (date, time)):
        print(value.isoformat())
    else:
        print(value)

    out = get_output()
    out.tip('ask.scripting', 'verbose')
    out.tip('ask.debug', 'verbose')

    if args.kind == "bool" and args.status:
        return 0 if value else 1
    return 0
