"""
OutputManager — the THAC0 verbosity system core.

Central coordinator for verbosity-gated diagnostics with per-channel
overrides. The emit rule is: message shows when message.level <= threshold.
The threshold is either a per-channel override or the global verbosity.

THAC0 axis:
    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2     -1     0     1      2      3
    wall  errors warnings minimal default rejected display raw

    -v increments, -Q decrements. They compose: -vv -Q = 1

Diagnostics go to stderr by default so they never interleave with the
prompt's own output stream.
"""

import sys
from typing import Any, Dict, Optional, Set, TextIO

from .tips import get_tip
from .channels import parse_channel_spec, OPT_IN_CHANNELS


class OutputManager:
    """Central coordinator for THAC0 verbosity-gated output.

    Usage::

        out = OutputManager(verbosity=2)
        out.emit(2, "Display: {text!r}", channel='prompt', text="Age: ")
        out.tip('ask.scripting', 'result')
        out.error("Something went wrong")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_tips: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Return the effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        At threshold -4 (hard wall), nothing is emitted regardless of level.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= -4:
            return
        if level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def tip(self, tip_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a tip if appropriate for context, level, and not yet shown.

        Args:
            tip_id: Registry key for the tip
            context: Current context ('error', 'result', 'verbose')
            **kwargs: Values for template placeholders in the tip message
        """
        if tip_id in self._shown_tips:
            return
        t = get_tip(tip_id)
        if t is None:
            return
        if context not in t.context:
            return

        threshold = self.threshold('tip')
        if threshold <= -4:
            return
        if t.min_level > threshold:
            return

        text = t.message.format(**kwargs) if kwargs else t.message
        print(text, file=self.file)
        self._shown_tips.add(tip_id)

    def error(self, message: str) -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(-3, message, channel='error')

    def channel_active(self, channel: str, level: int = 0) -> bool:
        """Check if a message at level on this channel would be shown.

        Used by callers to skip building expensive diagnostic text.
        """
        threshold = self.threshold(channel)
        return threshold > -4 and level <= threshold

    @property
    def quiet(self) -> bool:
        """True when verbosity is negative."""
        return self.verbosity < 0

    @property
    def shown_tips(self) -> Set[str]:
        """Set of tip IDs that have been displayed this session."""
        return self._shown_tips.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: list = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity level (0=default, positive=verbose, negative=quiet)
        channels: List of channel spec strings (e.g., ['validate', 'parse:3'])
        file: Destination stream (default: stderr)

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    # Opt-in channels stay off unless explicitly enabled
    channel_overrides = {ch: -1 for ch in OPT_IN_CHANNELS}

    for spec in channels or []:
        cfg = parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
