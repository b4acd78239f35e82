"""Main CLI entry point for consoleprompts.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to subcommand with shared style args

Global flags can appear before OR after the subcommand:
  consoleprompts -v ask int "Age"      # works
  consoleprompts ask int "Age" -v      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from consoleprompts._version import BASE_VERSION
from consoleprompts.errors import PromptError
from consoleprompts.hints import HANDLER_PRESETS


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Style config file (default: ~/.consoleprompts/config.json)"},
}


def _add_global_flags(parser):
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    _add_global_flags(global_parser)
    return global_parser.parse_known_args(argv)


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared parser for prompt style flags.

    Every flag defaults to None so config files fill in what the command
    line leaves out.
    """
    common = argparse.ArgumentParser(add_help=False)
    style = common.add_argument_group("prompt style")
    style.add_argument("--hints", choices=sorted(HANDLER_PRESETS),
                       default=None,
                       help="Which hint kinds to show (default: common)")
    style.add_argument("--type-hints", dest="type_hints",
                       action="store_const", const=True, default=None,
                       help="Show the requested type as a hint")
    style.add_argument("--no-type-hints", dest="type_hints",
                       action="store_const", const=False,
                       help="Do not show type hints")
    style.add_argument("--prompt-format", metavar="FMT", default=None,
                       help="Prompt template; {0} = text, {1} = hints")
    style.add_argument("--error-format", dest="invalid_input_format",
                       metavar="FMT", default=None,
                       help="Invalid input template; {0} = message")
    style.add_argument("--hint-separator", metavar="SEP", default=None,
                       help="Text placed between hints")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in consoleprompts.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command (set as args.func)
    """
    from consoleprompts.commands import ask, demo
    return [ask, demo]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="consoleprompts",
        description="consoleprompts — typed, validated console prompts",
        epilog=(
            "Run 'consoleprompts <command> --help' for details on a command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"consoleprompts {BASE_VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    _add_global_flags(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the consoleprompts CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Handle bare --show (list channels and exit)
    if global_args.show and None in global_args.show:
        from consoleprompts.lib.log_lib import format_channel_list
        print(format_channel_list())
        return 0

    # Initialize THAC0 output system
    from consoleprompts.lib.log_lib import init_output
    from consoleprompts.output import print_error
    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print_error(f"Bad --show value: {e}")
        return 1
    import consoleprompts.tips  # noqa: F401  register CLI tips

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    # Dispatch
    try:
        return args.func(args) or 0
    except PromptError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
