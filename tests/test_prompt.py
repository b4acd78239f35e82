"""Tests for consoleprompts.prompt — building a Prompt without displaying it."""

import pytest

from consoleprompts.errors import InvalidConfigurationError, PromptInputError
from consoleprompts.hints import Hint, HintKeys
from consoleprompts.prompt import Prompt


class TestText:
    """Prompt text handling."""

    def test_set_prompt(self, prompter):
        assert Prompt(prompter, int).set_prompt("Age").text == "Age"

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_text_means_none(self, prompter, text):
        assert Prompt(prompter, int).set_prompt(text).text is None

    def test_remove_prompt(self, prompter):
        p = Prompt(prompter, int).set_prompt("Age").remove_prompt()
        assert p.text is None


class TestHints:
    """Hint list management."""

    def test_add_hint_object(self, prompter):
        p = Prompt(prompter).add_hint(Hint('range', (1, 2)))
        assert p.hints == (Hint('range', (1, 2)),)

    def test_add_hint_key_and_payload(self, prompter):
        p = Prompt(prompter).add_hint(HintKeys.TEXT, "real")
        assert p.hints == (Hint(HintKeys.TEXT, "real"),)

    def test_hints_keep_insertion_order(self, prompter):
        p = Prompt(prompter).add_hint('a').add_hint('b').add_hint('c')
        assert [h.key for h in p.hints] == ['a', 'b', 'c']

    def test_hints_is_a_snapshot(self, prompter):
        p = Prompt(prompter).add_hint('a')
        snapshot = p.hints
        p.add_hint('b')
        assert len(snapshot) == 1

    def test_add_type_hint(self, prompter):
        p = Prompt(prompter, float).add_type_hint()
        assert p.hints == (Hint(HintKeys.TYPE, float),)

    def test_add_type_hint_without_type(self, prompter):
        with pytest.raises(InvalidConfigurationError):
            Prompt(prompter).add_type_hint()

    def test_remove_last_hint(self, prompter):
        p = Prompt(prompter).add_hint('a').add_hint('b').remove_last_hint()
        assert [h.key for h in p.hints] == ['a']

    def test_remove_last_hint_when_empty(self, prompter):
        assert Prompt(prompter).remove_last_hint().hints == ()

    def test_remove_all_hints(self, prompter):
        p = Prompt(prompter).add_hint('a').add_hint('b').remove_all_hints()
        assert p.hints == ()

    def test_remove_hints_matching(self, prompter):
        p = (Prompt(prompter).add_hint('a', 1).add_hint('b', 2)
             .add_hint('a', 3)
             .remove_hints_matching(lambda h: h.key == 'a'))
        assert p.hints == (Hint('b', 2),)


class TestReplaceHint:
    """replace_hint() swaps hints of one key for a single new hint."""

    def test_replaces_in_place(self, prompter):
        p = (Prompt(prompter).add_hint('a').add_hint('path').add_hint('b')
             .replace_hint('path', Hint('file_path', True)))
        assert [h.key for h in p.hints] == ['a', 'file_path', 'b']

    def test_collapses_duplicates(self, prompter):
        p = (Prompt(prompter).add_hint('path').add_hint('x').add_hint('path')
             .replace_hint('path', Hint('dir_path')))
        assert [h.key for h in p.hints] == ['dir_path', 'x']

    def test_appends_when_missing(self, prompter):
        p = Prompt(prompter).add_hint('a').replace_hint('path', Hint('dir_path'))
        assert [h.key for h in p.hints] == ['a', 'dir_path']


class TestParseAndValidate:
    """parse_and_validate() runs the parser then validators, catching nothing."""

    def test_parses(self, prompter):
        assert Prompt(prompter, int).set_parser(int).parse_and_validate("42") == 42

    def test_no_parser(self, prompter):
        with pytest.raises(InvalidConfigurationError):
            Prompt(prompter, int).parse_and_validate("42")

    def test_set_parser_none(self, prompter):
        with pytest.raises(InvalidConfigurationError):
            Prompt(prompter, int).set_parser(None)

    def test_parser_error_propagates(self, prompter):
        with pytest.raises(ValueError):
            Prompt(prompter, int).set_parser(int).parse_and_validate("abc")

    def test_validators_run_in_order(self, prompter):
        calls = []
        p = (Prompt(prompter, int).set_parser(int)
             .add_validator(lambda v: calls.append('first'))
             .add_validator(lambda v: calls.append('second')))
        p.parse_and_validate("1")
        assert calls == ['first', 'second']

    def test_first_failing_validator_stops_chain(self, prompter):
        calls = []

        def reject(value):
            calls.append('reject')
            raise PromptInputError("no")

        p = (Prompt(prompter, int).set_parser(int)
             .add_validator(reject)
             .add_validator(lambda v: calls.append('after')))
        with pytest.raises(PromptInputError, match="no"):
            p.parse_and_validate("1")
        assert calls == ['reject']

    def test_validator_gets_parsed_value(self, prompter):
        seen = []
        p = Prompt(prompter, int).set_parser(int).add_validator(seen.append)
        p.parse_and_validate(" 7 ")
        assert seen == [7]


class TestRepr:
    def test_repr(self, prompter):
        p = Prompt(prompter, int).set_prompt("Age").add_hint('a')
        assert repr(p) == "Prompt[int](text='Age', hints=1, validators=0)"
