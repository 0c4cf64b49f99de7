"""Package lifecycle: wires the command router into a host."""

from __future__ import annotations

from .command_ids import PACKAGE_GUID
from .log import logger
from .menu import MenuCommandService
from .router import CommandRouter
from .views import ViewManager


class HotTabsPackage:
    """Owner of the command router for one host session.

    The host supplies its menu service and active-view provider;
    :meth:`initialize` registers the hot-tab commands exactly once.
    """

    guid = PACKAGE_GUID

    def __init__(
        self, command_service: MenuCommandService, view_manager: ViewManager
    ) -> None:
        self.command_service = command_service
        self.view_manager = view_manager
        self.router: CommandRouter | None = None

    @property
    def is_initialized(self) -> bool:
        return self.router is not None

    def initialize(self) -> CommandRouter:
        if self.router is None:
            self.router = CommandRouter(self)
            self.router.register(self.command_service)
            logger.debug("registered %d hot-tab commands", len(self.command_service))
        return self.router
