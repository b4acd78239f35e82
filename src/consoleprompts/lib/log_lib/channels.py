"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named output categories. Each channel can have its own
verbosity threshold overriding the global level.

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        validate        # Level 0 (shown at default verbosity)
        parse:3         # Level 3
        prompt:-4       # Silence the channel entirely
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'prompt',       # Rendered prompt strings
    'parse',        # Raw input lines handed to parsers
    'validate',     # Rejected input and the reason
    'config',       # Style configuration loading and resolution
    'tip',          # Contextual tips
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
    'general',      # Default channel
}

CHANNEL_DESCRIPTIONS = {
    'prompt':   'Rendered prompt strings for each attempt',
    'parse':    'Raw input lines handed to parsers',
    'validate': 'Rejected input and the reason',
    'config':   'Style configuration loading and resolution',
    'tip':      'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
    'general':  'General output',
}

# Channels that are OFF by default (require explicit --show to activate).
# init_output() gives them an override of -1 unless the user enables them.
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Configuration for a single output channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a 'CHANNEL[:LEVEL]' string into a ChannelConfig.

    Raises:
        ValueError: LEVEL is not an integer.
    """
    name, _, level = spec.partition(':')
    return ChannelConfig(name=name.strip(),
                         level=int(level) if level.strip() else 0)


def format_channel_list() -> str:
    """Format the list of known channels for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
