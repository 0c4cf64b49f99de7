"""Framework-agnostic core: view model, tab selection, command routing.

Nothing in this subpackage imports Textual, so the decision logic can be
driven by any host that supplies a view tree and a menu service.
"""

from .command_ids import (
    COMMAND_IDS,
    COMMAND_SET,
    COMMAND_TABLE,
    CommandCategory,
    CommandSpec,
    command_label,
)
from .menu import MenuCommand, MenuCommandService
from .package import HotTabsPackage
from .router import CommandRouter, CommandStatus
from .selector import select, select_pinned, select_unpinned
from .views import GroupKind, View, ViewGroup, ViewManager, is_tabbed_document

__all__ = [
    "COMMAND_IDS",
    "COMMAND_SET",
    "COMMAND_TABLE",
    "CommandCategory",
    "CommandRouter",
    "CommandSpec",
    "CommandStatus",
    "GroupKind",
    "HotTabsPackage",
    "MenuCommand",
    "MenuCommandService",
    "View",
    "ViewGroup",
    "ViewManager",
    "command_label",
    "is_tabbed_document",
    "select",
    "select_pinned",
    "select_unpinned",
]
