"""Tab bar widgets for Hot Tabs."""

from __future__ import annotations

from textual.containers import Horizontal
from textual.widgets import Static

from ..core.views import View


def tab_labels(
    views: list[View], show_numbers: bool = True, pin_marker: str = "*"
) -> list[str]:
    """Labels for *views* in tab order, numbered within their pin subset."""
    labels = []
    pinned = unpinned = 0
    for view in views:
        if view.is_pinned:
            pinned += 1
            number = pinned
            prefix = pin_marker
        else:
            unpinned += 1
            number = unpinned
            prefix = ""
        # Only the first ten of each subset have a hot key
        if show_numbers and number <= 10:
            prefix += f"{number % 10}:"
        labels.append(f"{prefix}{view.title}")
    return labels


class TabButton(Static):
    """A clickable tab label in the tab bar."""

    def __init__(self, label: str, view: View, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.view = view

    def on_click(self) -> None:
        self.app.select_view(self.view)


class TabBar(Horizontal):
    """Horizontal tab bar showing the document well's tabs."""

    def update_tabs(
        self,
        views: list[View],
        selected: View | None,
        show_numbers: bool = True,
        pin_marker: str = "*",
    ) -> None:
        """Rebuild the tab bar buttons."""
        self.remove_children()
        labels = tab_labels(views, show_numbers, pin_marker)
        for view, label in zip(views, labels):
            cls = "tab-btn tab-active" if view is selected else "tab-btn tab-inactive"
            if view.is_pinned:
                cls += " tab-pinned"
            self.mount(TabButton(f" {label} ", view=view, classes=cls))
        if not views:
            self.add_class("empty")
        else:
            self.remove_class("empty")
