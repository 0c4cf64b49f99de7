"""In-process command-menu service.

Hosts register one :class:`MenuCommand` per ``(command_set, command_id)``.
Before a command is displayed the host calls :meth:`MenuCommandService.query_status`,
which runs the command's ``before_query_status`` hooks so the owner can
update ``visible``/``enabled``.  :meth:`MenuCommandService.invoke` runs the
command callback after the user activates it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .log import logger


@dataclass
class MenuCommand:
    """A registered menu/keyboard command."""

    command_set: str
    command_id: int
    callback: Callable[["MenuCommand"], None]
    visible: bool = True
    enabled: bool = True
    before_query_status: list[Callable[["MenuCommand"], None]] = field(
        default_factory=list
    )

    @property
    def key(self) -> tuple[str, int]:
        return (self.command_set, self.command_id)


class MenuCommandService:
    """Registry of menu commands keyed by ``(command_set, command_id)``."""

    def __init__(self) -> None:
        self._commands: dict[tuple[str, int], MenuCommand] = {}

    def __len__(self) -> int:
        return len(self._commands)

    def add_command(self, command: MenuCommand) -> None:
        if command.key in self._commands:
            raise ValueError(
                f"command 0x{command.command_id:x} already registered "
                f"in set {command.command_set}"
            )
        self._commands[command.key] = command

    def find_command(self, command_set: str, command_id: int) -> MenuCommand | None:
        return self._commands.get((command_set, command_id))

    def commands(self) -> list[MenuCommand]:
        """Registered commands in registration order."""
        return list(self._commands.values())

    def query_status(self, command_set: str, command_id: int) -> MenuCommand | None:
        """Refresh and return the command's flags (``None`` if unregistered)."""
        command = self.find_command(command_set, command_id)
        if command is None:
            return None
        for hook in command.before_query_status:
            hook(command)
        return command

    def invoke(self, command_set: str, command_id: int) -> bool:
        """Run the command if it is currently enabled.  Returns True if it ran."""
        command = self.query_status(command_set, command_id)
        if command is None:
            logger.debug("invoke: no command 0x%x in %s", command_id, command_set)
            return False
        if not (command.visible and command.enabled):
            logger.debug("invoke: command 0x%x is disabled", command_id)
            return False
        command.callback(command)
        return True
