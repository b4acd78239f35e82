"""Style configuration for consoleprompts.

Three-layer resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .consoleprompts.json in the working directory or above
  3. Global config — ~/.consoleprompts/config.json

Style keys map onto Prompter attributes:

    prompt_format, prompt_format_no_hints, null_prompt_format,
    null_prompt_no_hints, hint_separator, invalid_input_format
    hints       preset name (none / essential / common / all)
    type_hints  bool, add a type hint to every new prompt
"""

import json
import os
import sys
from pathlib import Path

from consoleprompts.errors import InvalidConfigurationError
from consoleprompts.hints import skip_handler
from consoleprompts.lib.log_lib import get_output
from consoleprompts.lib.log_lib.levels import CONFIG
from consoleprompts.prompter import Prompter


PROJECT_CONFIG_NAME = ".consoleprompts.json"

TEMPLATE_KEYS = [
    "prompt_format",
    "prompt_format_no_hints",
    "null_prompt_format",
    "null_prompt_no_hints",
    "hint_separator",
    "invalid_input_format",
]

STYLE_KEYS = TEMPLATE_KEYS + ["hints", "type_hints"]


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.consoleprompts/)."""
    return Path.home() / ".consoleprompts"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .consoleprompts.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config path)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .consoleprompts.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_style(args=None, start_dir=None, config_path=None):
    """Resolve style values using three-layer precedence.

    For each style key, checks (in order):
      1. CLI args (attribute of the argparse namespace, if not None)
      2. Project .consoleprompts.json
      3. Global config (or the file named by config_path)

    Returns:
        Dict with only the keys that were set somewhere.
    """
    project_cfg, project_path = load_project_config(start_dir)
    global_cfg = load_global_config(config_path)

    out = get_output()
    if project_path:
        out.emit(CONFIG, "Project style config: {path}", channel='config',
                 path=project_path)

    resolved = {}
    for key in STYLE_KEYS:
        cli_val = getattr(args, key, None) if args is not None else None
        if cli_val is not None:
            resolved[key] = cli_val
            source = "cli"
        elif project_cfg.get(key) is not None:
            resolved[key] = project_cfg[key]
            source = "project"
        elif global_cfg.get(key) is not None:
            resolved[key] = global_cfg[key]
            source = "global"
        else:
            continue
        out.emit(CONFIG, "  {key} = {value!r} ({source})", channel='config',
                 key=key, value=resolved[key], source=source)

    return resolved


def apply_style(prompter, style):
    """Apply a resolved style dict to a Prompter.

    Returns:
        The prompter, for chaining.

    Raises:
        InvalidConfigurationError: a template is not a string or the
            hint preset is unknown.
    """
    for key in TEMPLATE_KEYS:
        if key not in style:
            continue
        value = style[key]
        if not isinstance(value, str):
            raise InvalidConfigurationError(
                f"Style value '{key}' must be a string, got {value!r}")
        setattr(prompter, key, value)

    if "hints" in style:
        prompter.use_hint_preset(style["hints"])
    if "type_hints" in style:
        prompter.auto_type_hints = bool(style["type_hints"])

    return prompter


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Write .consoleprompts.json to project_dir (default: cwd)."""
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path


# ---------------------------------------------------------------------------
# Prompter construction
# ---------------------------------------------------------------------------
def build_prompter(args=None, output_stream=None, input_stream=None,
                   start_dir=None):
    """Create a Prompter styled from CLI args and config files.

    Starts from the console defaults ('common' hint handlers, unknown
    hints hidden) whatever streams are given, then applies the resolved
    style.
    """
    prompter = Prompter(
        output_stream if output_stream is not None else sys.stdout,
        input_stream if input_stream is not None else sys.stdin,
    )
    prompter.use_hint_preset("common")
    prompter.unknown_hint_handler = skip_handler

    style = resolve_style(args, start_dir=start_dir,
                          config_path=getattr(args, "config", None))
    return apply_style(prompter, style)
