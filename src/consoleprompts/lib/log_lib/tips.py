"""
Tip dataclass and global registry.

Tips are short contextual messages shown by the CLI after a command
finishes. Modules register them at import time via register_tip() /
register_tips(); OutputManager.tip() decides whether one is shown.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class Tip:
    """A templatized tip that can be shown in specific contexts.

    Attributes:
        id: Unique dot-namespaced identifier (e.g., 'ask.scripting')
        message: Template string with {var} placeholders for str.format()
        context: Set of contexts where this tip applies:
            'error'   - shown alongside error messages
            'result'  - shown after successful results
            'verbose' - shown only when verbosity >= min_level
        min_level: Minimum verbosity level for display
        category: Grouping key (e.g., 'ask', 'style')
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


# Global tip registry, populated by modules at import time
_TIPS: Dict[str, Tip] = {}


def register_tip(tip: Tip) -> None:
    """Register a tip in the global registry.

    Duplicate IDs overwrite silently.
    """
    _TIPS[tip.id] = tip


def register_tips(*tips: Tip) -> None:
    """Register multiple tips at once."""
    for t in tips:
        register_tip(t)


def get_tip(tip_id: str) -> Optional[Tip]:
    """Look up a tip by ID. Returns None if not found."""
    return _TIPS.get(tip_id)


def get_tips_by_category(category: str) -> List[Tip]:
    """Get all registered tips in a category."""
    return [t for t in _TIPS.values() if t.category == category]
