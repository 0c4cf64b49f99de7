"""Textual host for Hot Tabs.

A small terminal document viewer that plays the part of the editor shell:
it owns the view tree, the active-view provider and the menu service, and
routes the hot-tab key bindings through :class:`~hot_tabs.core.HotTabsPackage`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.widgets import Static

from .core.command_ids import COMMAND_SET, pinned_command_id, unpinned_command_id
from .core.log import logger
from .core.menu import MenuCommandService
from .core.package import HotTabsPackage
from .core.views import GroupKind, View, ViewGroup, ViewManager
from .preferences import Preferences, load_preferences, save_show_tab_numbers
from .widgets.commands import HotTabsCommandProvider
from .widgets.tabs import TabBar

_HOT_TABS_CSS = """\
Screen {
    background: $background;
}

#tab-bar {
    dock: top;
    height: 1;
    background: $panel;
}

.tab-btn {
    width: auto;
    height: 1;
    padding: 0 0;
}

.tab-active {
    background: $primary;
    color: $text;
    text-style: bold;
}

.tab-inactive {
    color: $text-muted;
}

.tab-pinned {
    text-style: italic;
}

#document-view {
    width: 1fr;
    height: 1fr;
    padding: 0 1;
}

#status-bar {
    dock: bottom;
    height: 1;
    background: $panel;
    color: $text-muted;
    padding: 0 1;
}
"""

_EMPTY_TEXT = "No documents open.\n\nRun: hot-tabs FILE [FILE ...]"


class HotTabsApp(App):
    """Terminal document viewer with pinned/unpinned hot-tab commands."""

    CSS = _HOT_TABS_CSS
    TITLE = "Hot Tabs"
    COMMANDS = App.COMMANDS | {HotTabsCommandProvider}

    BINDINGS = [
        Binding("ctrl+t", "toggle_pin", "Pin", show=True),
        Binding("ctrl+w", "close_tab", "Close", show=True),
        Binding("ctrl+f", "toggle_float", "Float", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        paths: Iterable[Path] = (),
        prefs: Preferences | None = None,
        prefs_path: Path | None = None,
    ) -> None:
        super().__init__()
        self._prefs_path = prefs_path
        self._prefs = prefs or load_preferences(prefs_path)
        self._paths = [Path(p) for p in paths]
        self._documents: dict[View, str] = {}
        self._docked_index: dict[View, int] = {}
        self._ui_ready = False

        self.view_manager = ViewManager()
        self.document_group = ViewGroup(
            GroupKind.TABBED, on_select=self._on_view_selected
        )
        self.floating_group = ViewGroup(
            GroupKind.FLOATING, on_select=self._on_view_selected
        )
        self.command_service = MenuCommandService()
        self.package = HotTabsPackage(self.command_service, self.view_manager)
        self.package.initialize()
        self._bind_hot_keys()

    def _bind_hot_keys(self) -> None:
        keymap = [
            (self._prefs.keys.pinned, pinned_command_id, "Pinned"),
            (self._prefs.keys.unpinned, unpinned_command_id, "Unpinned"),
        ]
        for keys, id_for, kind in keymap:
            for n, key in enumerate(keys, start=1):
                self.bind(
                    key,
                    f"hot_tabs_command({id_for(n)})",
                    description=f"{kind} {n}",
                    show=False,
                )

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield TabBar(id="tab-bar")
        with ScrollableContainer(id="document-view"):
            yield Static(_EMPTY_TEXT, id="document-body", markup=False)
        yield Static("", id="status-bar")

    def on_mount(self) -> None:
        self._ui_ready = True
        for path in self._paths:
            self.open_document(path)
        self._refresh_ui()

    # ── Documents ───────────────────────────────────────────────

    def open_document(self, path: Path, *, pinned: bool = False) -> View:
        """Open *path* as a new tab at the end of the document well."""
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Failed to read %s", path, exc_info=True)
            text = f"Could not read {path}: {exc.strerror or exc}"
        view = View(path.name, str(path), is_pinned=pinned)
        self._documents[view] = text
        self.document_group.add(view)
        view.is_selected = True
        return view

    def select_view(self, view: View) -> None:
        if view.parent is not None and view.parent.selected_view is view:
            # Already its group's selection, so on_select will not fire
            self.view_manager.active_view = view
            self._refresh_ui()
            return
        view.is_selected = True

    def _on_view_selected(self, view: View | None) -> None:
        if view is None:
            # Fall back to whatever the other container still has selected
            view = self.floating_group.selected_view or self.document_group.selected_view
        self.view_manager.active_view = view
        self._refresh_ui()

    # ── Actions ─────────────────────────────────────────────────

    def action_hot_tabs_command(self, command_id: int) -> None:
        self.command_service.invoke(COMMAND_SET, command_id)

    def action_toggle_pin(self) -> None:
        view = self.view_manager.active_view
        if view is None:
            return
        view.is_pinned = not view.is_pinned
        self._refresh_ui()

    def action_close_tab(self) -> None:
        view = self.view_manager.active_view
        if view is None or view.parent is None:
            return
        view.parent.remove(view)
        self._documents.pop(view, None)
        self._docked_index.pop(view, None)
        if self.view_manager.active_view is view:
            self._on_view_selected(None)
        self._refresh_ui()

    def action_toggle_float(self) -> None:
        """Move the active tab into a floating window, or dock it back."""
        view = self.view_manager.active_view
        if view is None or view.parent is None:
            return
        if view.parent.is_tabbed:
            self._docked_index[view] = view.parent.children.index(view)
            self.floating_group.add(view)
        else:
            index = self._docked_index.pop(view, len(self.document_group))
            self.document_group.add(view, min(index, len(self.document_group)))
        view.is_selected = True

    def action_toggle_tab_numbers(self) -> None:
        display = self._prefs.display
        display.show_tab_numbers = not display.show_tab_numbers
        save_show_tab_numbers(display.show_tab_numbers, self._prefs_path)
        self._refresh_ui()

    # ── Rendering ───────────────────────────────────────────────

    def _refresh_ui(self) -> None:
        if not self._ui_ready:
            return
        display = self._prefs.display
        self.query_one("#tab-bar", TabBar).update_tabs(
            self.document_group.visible_children,
            self.document_group.selected_view,
            show_numbers=display.show_tab_numbers,
            pin_marker=display.pin_marker,
        )
        view = self.view_manager.active_view
        body = self.query_one("#document-body", Static)
        body.update(_EMPTY_TEXT if view is None else self._documents.get(view, ""))
        self.query_one("#status-bar", Static).update(self._status_text())

    def _status_text(self) -> str:
        view = self.view_manager.active_view
        if view is None:
            return "No document"
        parts = [view.moniker, "pinned" if view.is_pinned else "unpinned"]
        if view.parent is not None and view.parent.kind is GroupKind.FLOATING:
            parts.append("floating (hot tabs off)")
        tabs = self.document_group.visible_children
        pinned = sum(1 for v in tabs if v.is_pinned)
        parts.append(f"{pinned} pinned / {len(tabs) - pinned} unpinned")
        return "  |  ".join(parts)


def run_app(paths: Iterable[Path] = (), prefs_path: Path | None = None) -> None:
    """Run the Hot Tabs document viewer."""
    app = HotTabsApp(paths=paths, prefs_path=prefs_path)
    app.run()
