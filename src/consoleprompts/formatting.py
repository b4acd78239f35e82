"""Hint rendering: maps hint keys to handlers.

Lookup happens lazily at render time, so the same prompt can be shown
under different presentation policies without rebuilding its hints.
"""

from typing import Dict, Iterable, List, Mapping

from consoleprompts.hints import Hint, HintHandler, debug_handler


class HintFormatter:
    """Registry of hint handlers with a fallback for unknown keys.

    A handler takes a Hint and returns its display text, or None to hide
    that hint. At most one handler is registered per key.

    Usage::

        fmt = HintFormatter()
        fmt.set_handler('range', lambda h: f"{h.payload[0]} to {h.payload[1]}")
        fmt.render([Hint('range', (1, 5))])    # ['1 to 5']
    """

    def __init__(self, handlers: Mapping[str, HintHandler] = None,
                 fallback: HintHandler = debug_handler):
        self._handlers: Dict[str, HintHandler] = dict(handlers or {})
        self.fallback = fallback

    def set_handler(self, key: str, handler: HintHandler) -> 'HintFormatter':
        """Register or replace the handler for key."""
        self._handlers[key] = handler
        return self

    def set_handlers(self, handlers: Mapping[str, HintHandler]) -> 'HintFormatter':
        """Call set_handler() for every pair in handlers."""
        for key, handler in handlers.items():
            self.set_handler(key, handler)
        return self

    def remove_handler(self, key: str) -> 'HintFormatter':
        """Drop the handler for key; hints with that key use the fallback."""
        self._handlers.pop(key, None)
        return self

    def remove_all_handlers(self) -> 'HintFormatter':
        """Drop every handler, so all hints go through the fallback."""
        self._handlers.clear()
        return self

    def set_fallback(self, handler: HintHandler) -> 'HintFormatter':
        """Replace the handler used for keys with no registered handler."""
        self.fallback = handler
        return self

    def handler_for(self, key: str) -> HintHandler:
        """Return the handler that would render a hint with this key."""
        return self._handlers.get(key, self.fallback)

    def has_handler(self, key: str) -> bool:
        return key in self._handlers

    @property
    def keys(self):
        """Keys with a registered handler."""
        return set(self._handlers)

    def render(self, hints: Iterable[Hint]) -> List[str]:
        """Render hints to display strings, keeping their order.

        Hints whose handler returns None or a blank string are left out.
        """
        rendered = []
        for hint in hints:
            text = self.handler_for(hint.key)(hint)
            if text is None or not text.strip():
                continue
            rendered.append(text)
        return rendered
