"""Command identifiers and the table that maps each one to its meaning.

Pinned and unpinned commands occupy contiguous id ranges, so the rank of a
command is its offset from the first id of its range.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PACKAGE_GUID = "998371b5-6a8e-4eed-9d15-f7c0addcdd6e"
COMMAND_SET = "3b6bccd3-4c5a-4bcb-8ae4-8bf54dc3d642"

# Menu placement (document-well tab context menu)
DOC_WELL_CONTEXT_MENU = 0x100
DOC_WELL_CONTEXT_GROUP = 0x101
DOC_WELL_GENERAL_COMMANDS_GROUP = 0x102

CMDID_TOOLS_OPTIONS = 0x104
CMDID_GO_TO_PINNED_TAB_1 = 0x108
CMDID_GO_TO_UNPINNED_TAB_1 = 0x112

TABS_PER_CATEGORY = 10


class CommandCategory(Enum):
    OPTIONS = "options"
    PINNED = "pinned"
    UNPINNED = "unpinned"


@dataclass(frozen=True)
class CommandSpec:
    """What a command id means: which tab subset, and which rank in it."""

    category: CommandCategory
    rank: int = 0


def _build_table() -> dict[int, CommandSpec]:
    table = {CMDID_TOOLS_OPTIONS: CommandSpec(CommandCategory.OPTIONS)}
    for base, category in (
        (CMDID_GO_TO_PINNED_TAB_1, CommandCategory.PINNED),
        (CMDID_GO_TO_UNPINNED_TAB_1, CommandCategory.UNPINNED),
    ):
        for command_id in range(base, base + TABS_PER_CATEGORY):
            table[command_id] = CommandSpec(category, command_id - base)
    return table


COMMAND_TABLE: dict[int, CommandSpec] = _build_table()

# Registration order: options first, then pinned 1-10, then unpinned 1-10
COMMAND_IDS: tuple[int, ...] = tuple(COMMAND_TABLE)


def pinned_command_id(n: int) -> int:
    """Id of "go to pinned tab *n*" (1-based, as shown to the user)."""
    if not 1 <= n <= TABS_PER_CATEGORY:
        raise ValueError(f"tab number must be 1-{TABS_PER_CATEGORY}, got {n}")
    return CMDID_GO_TO_PINNED_TAB_1 + n - 1


def unpinned_command_id(n: int) -> int:
    """Id of "go to unpinned tab *n*" (1-based, as shown to the user)."""
    if not 1 <= n <= TABS_PER_CATEGORY:
        raise ValueError(f"tab number must be 1-{TABS_PER_CATEGORY}, got {n}")
    return CMDID_GO_TO_UNPINNED_TAB_1 + n - 1


def command_label(command_id: int) -> str:
    """Menu text for *command_id*, e.g. ``"Go to Pinned Tab 3"``."""
    spec = COMMAND_TABLE.get(command_id)
    if spec is None:
        return f"Unknown command 0x{command_id:x}"
    if spec.category is CommandCategory.OPTIONS:
        return "Hot Tabs Options..."
    if spec.category is CommandCategory.PINNED:
        return f"Go to Pinned Tab {spec.rank + 1}"
    return f"Go to Unpinned Tab {spec.rank + 1}"
