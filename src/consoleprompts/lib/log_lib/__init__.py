"""
log_lib — THAC0 verbosity system with named channels.

Output management used by consoleprompts for diagnostics that must not
mix with the prompt streams:
- Single-axis THAC0 verbosity (level <= threshold)
- Named output channels with per-channel overrides
- Tip registry with context filtering and dedup
- Function tracing decorator

Public API:
    OutputManager      — central coordinator
    init_output        — singleton initialization
    get_output         — access singleton
    Tip                — tip dataclass
    register_tip       — register a tip
    register_tips      — register multiple tips
    get_tip            — look up tip by ID
    ChannelConfig      — channel configuration
    parse_channel_spec — parse CLI channel spec
    KNOWN_CHANNELS     — set of recognized channel names
    trace              — function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .tips import (
    Tip, register_tip, register_tips, get_tip, get_tips_by_category,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Tip', 'register_tip', 'register_tips', 'get_tip', 'get_tips_by_category',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
    'trace',
]
