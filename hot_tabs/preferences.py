"""User preferences for Hot Tabs.

Loads key bindings and display settings from ~/.hot-tabs/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .core.command_ids import TABS_PER_CATEGORY
from .core.log import logger

PREFS_PATH = Path.home() / ".hot-tabs" / "preferences.yaml"

_DIGITS = ["1", "2", "3", "4", "5", "6", "7", "8", "9", "0"]

_DEFAULT_YAML = """\
# Hot Tabs Preferences
# Key N in each list jumps to the Nth pinned / unpinned tab (up to 10).
# Delete this file to reset to defaults.

keys:
  pinned: [alt+1, alt+2, alt+3, alt+4, alt+5, alt+6, alt+7, alt+8, alt+9, alt+0]
  unpinned: [ctrl+alt+1, ctrl+alt+2, ctrl+alt+3, ctrl+alt+4, ctrl+alt+5, ctrl+alt+6, ctrl+alt+7, ctrl+alt+8, ctrl+alt+9, ctrl+alt+0]

display:
  show_tab_numbers: true         # prefix tabs with their pinned/unpinned rank
  pin_marker: "*"                # glyph shown on pinned tabs
"""


def _default_pinned_keys() -> list[str]:
    return [f"alt+{d}" for d in _DIGITS]


def _default_unpinned_keys() -> list[str]:
    return [f"ctrl+alt+{d}" for d in _DIGITS]


@dataclass
class KeyPreferences:
    """Key bindings for the go-to-tab commands (index 0 = tab 1)."""

    pinned: list[str] = field(default_factory=_default_pinned_keys)
    unpinned: list[str] = field(default_factory=_default_unpinned_keys)


@dataclass
class DisplayPreferences:
    """Tab bar display settings."""

    show_tab_numbers: bool = True
    pin_marker: str = "*"


@dataclass
class Preferences:
    """Top-level Hot Tabs preferences."""

    keys: KeyPreferences = field(default_factory=KeyPreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)


def _key_list(value: object) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [str(k).strip() for k in value[:TABS_PER_CATEGORY] if str(k).strip()]


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            if isinstance(data.get("keys"), dict):
                kdata = data["keys"]
                pinned = _key_list(kdata.get("pinned"))
                if pinned is not None:
                    prefs.keys.pinned = pinned
                unpinned = _key_list(kdata.get("unpinned"))
                if unpinned is not None:
                    prefs.keys.unpinned = unpinned
            if isinstance(data.get("display"), dict):
                ddata = data["display"]
                if "show_tab_numbers" in ddata:
                    prefs.display.show_tab_numbers = bool(ddata["show_tab_numbers"])
                if ddata.get("pin_marker"):
                    prefs.display.pin_marker = str(ddata["pin_marker"])
        except (OSError, yaml.YAMLError, AttributeError):
            logger.debug("Invalid preferences file %s, using defaults", path, exc_info=True)
            return Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML)
        except OSError:
            logger.debug("Could not write default preferences to %s", path, exc_info=True)

    return prefs


def _set_section_value(text: str, section: str, key: str, value: str) -> str:
    """Set ``section.key`` to *value* in YAML *text*, one line at a time.

    An existing ``key:`` line keeps its indentation and trailing comment; a
    missing key is added under its section, and a missing section is
    appended at the end.
    """
    key_line = re.compile(
        rf"^([ \t]+{re.escape(key)}:)[ \t]*(?:\"[^\"\n]*\"|'[^'\n]*'|[^\s#]*)([^\n]*)$",
        re.MULTILINE,
    )
    if key_line.search(text):
        return key_line.sub(lambda m: f"{m.group(1)} {value}{m.group(2)}", text, count=1)
    section_line = re.compile(rf"^({re.escape(section)}:[^\n]*)$", re.MULTILINE)
    if section_line.search(text):
        return section_line.sub(
            lambda m: f"{m.group(1)}\n  {key}: {value}", text, count=1
        )
    return text.rstrip() + f"\n\n{section}:\n  {key}: {value}\n"


def save_show_tab_numbers(enabled: bool, path: Path | None = None) -> None:
    """Persist the show_tab_numbers display preference.

    Only the ``display.show_tab_numbers`` line changes; the rest of the
    file, including user comments, is left as-is.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML
        value = "true" if enabled else "false"
        path.write_text(_set_section_value(text, "display", "show_tab_numbers", value))
    except OSError:
        logger.debug("Could not save show_tab_numbers to %s", path, exc_info=True)
