"""Shared test fixtures for the consoleprompts test suite."""

import io
import os
from unittest.mock import patch

import pytest

from consoleprompts import Prompter
from consoleprompts.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Output manager isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_manager():
    """Reset the OutputManager singleton between tests."""
    old = _manager_mod._manager
    _manager_mod._manager = None
    yield
    _manager_mod._manager = old


# ---------------------------------------------------------------------------
# Stream-backed prompters
# ---------------------------------------------------------------------------
@pytest.fixture
def make_prompter():
    """Factory: Prompter over StringIO streams preloaded with input text.

    Returns (prompter, output_buffer, input_buffer). The prompter has no
    hint handlers, like any Prompter built on explicit streams.
    """
    def _make(input_text=""):
        out = io.StringIO()
        inp = io.StringIO(input_text)
        return Prompter(out, inp), out, inp
    return _make


@pytest.fixture
def prompter(make_prompter):
    """A stream-backed Prompter with no input and no hint handlers."""
    return make_prompter()[0]


@pytest.fixture
def styled_prompter(make_prompter):
    """A stream-backed Prompter with every built-in hint handler."""
    p = make_prompter()[0]
    p.use_hint_preset("all")
    return p


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.consoleprompts/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory outside the temporary home."""
    d = tmp_path / "project"
    d.mkdir()
    return d
