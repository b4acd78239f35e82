"""consoleprompts CLI tips for the THAC0 verbosity system.

Tips are shown after a command completes, at most once per session.
Import this module to register them with the global registry.
"""

from consoleprompts.lib.log_lib import Tip, register_tips


register_tips(
    Tip(
        id='ask.scripting',
        message=("  Tip: 'consoleprompts ask' prints only the value on stdout, "
                 "so capture it with $(...)."),
        context={'verbose'},
        min_level=1,
        category='ask',
    ),
    Tip(
        id='ask.debug',
        message='  Tip: Use --show validate to see why input was rejected.',
        context={'verbose'},
        min_level=1,
        category='ask',
    ),
    Tip(
        id='style.config',
        message=('  Tip: Put prompt templates in .consoleprompts.json '
                 'and every command picks them up.'),
        context={'result'},
        min_level=0,
        category='style',
    ),
    Tip(
        id='style.hints',
        message='  Tip: Try --hints all to see every constraint next to the prompt.',
        context={'result'},
        min_level=0,
        category='style',
    ),
)
