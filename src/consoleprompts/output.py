"""Status output for the consoleprompts CLI.

Consistent message formatting for the commands. The print_*() functions
respect the THAC0 quiet axis at extreme levels (-QQQ, -QQQQ). Prompts
themselves are never filtered: they write to the Prompter's stream.

Also re-exports the log_lib public API for convenience imports.
"""

import sys

# Re-export log_lib public API: one-stop import for commands
from consoleprompts.lib.log_lib import (             # noqa: F401
    OutputManager, init_output, get_output,
    Tip, register_tip, register_tips, get_tip,
    trace,
)


def _should_print():
    """Check if user-facing print_*() calls should display.

    These are level -2 (WARNING) messages: shown at verbosity -2 and
    above, suppressed at -3 (errors only) and -4 (hard wall).
    """
    return get_output().verbosity >= -2


def print_step(n, total, msg):
    """Print a formatted step header."""
    if _should_print():
        print(f"\n== Step {n}/{total}: {msg} ==")


def print_ok(msg):
    """Print a success message."""
    if _should_print():
        print(f"  [OK] {msg}")


def print_info(msg):
    """Print an indented informational line."""
    if _should_print():
        print(f"  {msg}")


def print_warn(msg):
    """Print a warning message."""
    if _should_print():
        print(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr.

    Routes through OutputManager.error() which emits at level -3.
    Shown at all verbosity levels except hard wall (-QQQQ / -4).
    """
    try:
        get_output().error(f"  ERROR: {msg}")
    except Exception:
        print(f"  ERROR: {msg}", file=sys.stderr)
