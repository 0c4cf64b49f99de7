"""Command router: decides command visibility and performs tab switches.

Every status query is computed fresh from the view tree.  Execution
re-validates everything because the tab set may change between the
status query and the user's activation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .command_ids import COMMAND_IDS, COMMAND_SET, COMMAND_TABLE, CommandCategory
from .log import logger
from .menu import MenuCommand, MenuCommandService
from .selector import select_pinned, select_unpinned
from .views import View, is_tabbed_document

if TYPE_CHECKING:
    from .package import HotTabsPackage


@dataclass(frozen=True)
class CommandStatus:
    visible: bool
    enabled: bool


HIDDEN = CommandStatus(visible=False, enabled=False)
SHOWN = CommandStatus(visible=True, enabled=True)

_SELECTORS = {
    CommandCategory.PINNED: select_pinned,
    CommandCategory.UNPINNED: select_unpinned,
}


class CommandRouter:
    """Bridges the hot-tab command ids to the tab selector."""

    def __init__(self, package: HotTabsPackage) -> None:
        if package is None:
            raise ValueError("package is required")
        self.package = package

    # -- pure operations ------------------------------------------------------

    def resolve(self, command_id: int, active_view: View | None) -> View | None:
        """The view *command_id* would switch to, or ``None``."""
        spec = COMMAND_TABLE.get(command_id)
        if spec is None or spec.category is CommandCategory.OPTIONS:
            return None
        assert spec.rank >= 0, f"negative rank for command 0x{command_id:x}"
        if not is_tabbed_document(active_view):
            return None
        return _SELECTORS[spec.category](active_view.parent, spec.rank)

    def query_status(
        self, command_id: int, active_view: View | None
    ) -> CommandStatus | None:
        """Visibility for *command_id*; ``None`` if the id is not ours."""
        spec = COMMAND_TABLE.get(command_id)
        if spec is None:
            return None
        if spec.category is CommandCategory.OPTIONS:
            return SHOWN
        if self.resolve(command_id, active_view) is None:
            return HIDDEN
        return SHOWN

    def execute(self, command_id: int, active_view: View | None) -> View | None:
        """Select the target tab of *command_id*; returns it, or ``None``."""
        spec = COMMAND_TABLE.get(command_id)
        if spec is None or spec.category is CommandCategory.OPTIONS:
            # Options has no bound action yet
            return None
        target = self.resolve(command_id, active_view)
        if target is None:
            logger.debug("command 0x%x: no target tab", command_id)
            return None
        target.is_selected = True
        logger.debug("command 0x%x: selected %r", command_id, target)
        return target

    # -- host wiring ----------------------------------------------------------

    def register(self, command_service: MenuCommandService) -> None:
        for command_id in COMMAND_IDS:
            command = MenuCommand(COMMAND_SET, command_id, self._on_invoke)
            command.before_query_status.append(self._on_before_query_status)
            command_service.add_command(command)

    def _on_before_query_status(self, command: MenuCommand) -> None:
        status = self.query_status(
            command.command_id, self.package.view_manager.active_view
        )
        if status is None:
            return
        command.visible = status.visible
        command.enabled = status.enabled

    def _on_invoke(self, command: MenuCommand) -> None:
        self.execute(command.command_id, self.package.view_manager.active_view)
