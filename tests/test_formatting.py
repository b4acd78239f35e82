"""Tests for consoleprompts.formatting — HintFormatter."""

from consoleprompts.formatting import HintFormatter
from consoleprompts.hints import Hint, debug_handler, skip_handler


def _upper(hint):
    return str(hint.payload).upper()


class TestRegistry:
    """Registering and removing handlers."""

    def test_empty_by_default(self):
        fmt = HintFormatter()
        assert fmt.keys == set()
        assert fmt.fallback is debug_handler

    def test_initial_handlers_copied(self):
        handlers = {'a': _upper}
        fmt = HintFormatter(handlers)
        handlers['b'] = _upper
        assert fmt.keys == {'a'}

    def test_set_handler_replaces(self):
        fmt = HintFormatter().set_handler('a', _upper).set_handler('a', skip_handler)
        assert fmt.handler_for('a') is skip_handler

    def test_set_handlers(self):
        fmt = HintFormatter().set_handlers({'a': _upper, 'b': _upper})
        assert fmt.has_handler('a')
        assert fmt.has_handler('b')

    def test_remove_handler(self):
        fmt = HintFormatter({'a': _upper}).remove_handler('a')
        assert not fmt.has_handler('a')
        assert fmt.handler_for('a') is debug_handler

    def test_remove_missing_handler_is_noop(self):
        fmt = HintFormatter().remove_handler('nope')
        assert fmt.keys == set()

    def test_remove_all(self):
        fmt = HintFormatter({'a': _upper, 'b': _upper}).remove_all_handlers()
        assert fmt.keys == set()

    def test_set_fallback(self):
        fmt = HintFormatter().set_fallback(skip_handler)
        assert fmt.handler_for('anything') is skip_handler


class TestRender:
    """render() maps hints through handlers in order."""

    def test_order_preserved(self):
        fmt = HintFormatter({'a': _upper})
        assert fmt.render([Hint('a', 'x'), Hint('a', 'y')]) == ['X', 'Y']

    def test_unknown_key_uses_fallback(self):
        fmt = HintFormatter()
        assert fmt.render([Hint('range', (1, 5))]) == [repr(Hint('range', (1, 5)))]

    def test_none_result_dropped(self):
        fmt = HintFormatter({'a': _upper}, fallback=skip_handler)
        assert fmt.render([Hint('b', 1), Hint('a', 'z')]) == ['Z']

    def test_blank_result_dropped(self):
        fmt = HintFormatter({'a': lambda h: "   "})
        assert fmt.render([Hint('a')]) == []

    def test_lookup_is_lazy(self):
        fmt = HintFormatter()
        hints = [Hint('a', 'x')]
        fmt.set_handler('a', _upper)
        assert fmt.render(hints) == ['X']
        fmt.set_handler('a', skip_handler)
        assert fmt.render(hints) == []
