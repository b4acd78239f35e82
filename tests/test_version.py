"""Tests for consoleprompts._version — PEP 440 compliance."""

import re

import consoleprompts
from consoleprompts._version import (
    BASE_VERSION,
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION,
    __version__,
    get_base_version,
    get_pip_version,
)


def test_base_version_format():
    """Base version should be MAJOR.MINOR.PATCH-PHASE."""
    base = get_base_version()
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", base), \
        f"Unexpected base version format: {base}"


def test_base_version_matches_components():
    base = get_base_version()
    expected_prefix = f"{MAJOR}.{MINOR}.{PATCH}"
    assert base.startswith(expected_prefix), \
        f"Base {base} doesn't start with {expected_prefix}"


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens, proper pre-release)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver, \
        f"PEP 440 forbids hyphens in version: {pip_ver}"
    assert re.match(r"^\d+\.\d+\.\d+((a|b|rc)\d+)?$", pip_ver), \
        f"Not a PEP 440 version: {pip_ver}"


def test_pip_version_beta_mapping():
    """Beta phase should map to 'b0' in PEP 440."""
    if PHASE == "beta":
        assert get_pip_version().endswith("b0")


def test_module_level_constants():
    assert BASE_VERSION == __version__
    assert PIP_VERSION == get_pip_version()


def test_package_exports_version():
    assert consoleprompts.__version__ == BASE_VERSION
    assert consoleprompts.__app_name__ == "consoleprompts"
