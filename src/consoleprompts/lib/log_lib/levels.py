"""
THAC0 verbosity level constants.

The emit rule is: message.level <= threshold  →  message is shown.
The threshold is either the global verbosity or a per-channel override.

Level assignments used by consoleprompts:
    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2       -1      0        1         2        3
    wall  errors warnings minimal default  rejected  display  raw input
"""

# Positive levels (verbose output, shown with -v/-vv/-vvv)
DEBUG = 3          # Raw lines read, function tracing
CONFIG = 2         # Rendered prompt strings, resolved style config
TIMING = 1         # Rejected input and the reason
DEFAULT = 0        # Default output, result-context tips

# Negative levels (quiet suppression, activated with -Q/-QQ/-QQQ/-QQQQ)
MINIMAL = -1       # Suppress tips
WARNING = -2       # Suppress status lines
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall: exit code only
