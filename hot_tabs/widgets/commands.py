"""Command palette provider for Hot Tabs."""

from __future__ import annotations

from functools import partial

from textual.command import DiscoveryHit, Hit, Hits, Provider

from ..core.command_ids import COMMAND_TABLE, CommandCategory, command_label

# (display_name, description, action) for host actions
_PALETTE_ACTIONS: tuple[tuple[str, str, str], ...] = (
    ("Toggle Pin  Ctrl+T", "Pin or unpin the current tab", "toggle_pin"),
    ("Close Tab  Ctrl+W", "Close the current tab", "close_tab"),
    (
        "Float / Dock Tab  Ctrl+F",
        "Move the current tab to a floating window or back",
        "toggle_float",
    ),
    (
        "Toggle Tab Numbers",
        "Show or hide pinned/unpinned ranks in the tab bar",
        "toggle_tab_numbers",
    ),
)


class HotTabsCommandProvider(Provider):
    """Offer the currently enabled hot-tab commands in the palette."""

    def _entries(self) -> list[tuple[str, str, partial]]:
        app = self.app
        entries = []
        for command in app.command_service.commands():  # type: ignore[attr-defined]
            spec = COMMAND_TABLE.get(command.command_id)
            # Options has no action yet; keep it out of the palette
            if spec is None or spec.category is CommandCategory.OPTIONS:
                continue
            status = app.command_service.query_status(  # type: ignore[attr-defined]
                command.command_set, command.command_id
            )
            if status is None or not (status.visible and status.enabled):
                continue
            label = command_label(command.command_id)
            entries.append(
                (label, "Hot Tabs", partial(self._invoke, command.command_id))
            )
        for name, description, action in _PALETTE_ACTIONS:
            method = getattr(app, f"action_{action}", None)
            if method is not None:
                entries.append((name, description, method))
        return entries

    async def search(self, query: str) -> Hits:
        """Yield commands that fuzzy-match *query*."""
        matcher = self.matcher(query)
        for name, description, callback in self._entries():
            score = matcher.match(f"{name} {description}")
            if score > 0:
                yield Hit(score, matcher.highlight(name), callback, help=description)

    async def discover(self) -> Hits:
        """Show every enabled command when the palette first opens."""
        for name, description, callback in self._entries():
            yield DiscoveryHit(name, callback, help=description)

    def _invoke(self, command_id: int) -> None:
        self.app.action_hot_tabs_command(command_id)  # type: ignore[attr-defined]
