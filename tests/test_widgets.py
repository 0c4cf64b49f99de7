"""Widget behavioural tests.

Covers tab label numbering and the palette action table.  Textual DOM
calls are not needed, so these run without a live app.
"""

from __future__ import annotations

from hot_tabs.app import HotTabsApp
from hot_tabs.core import View
from hot_tabs.widgets import tab_labels
from hot_tabs.widgets.commands import _PALETTE_ACTIONS


class TestTabLabels:
    def test_numbered_within_pin_subset(self):
        views = [
            View("a", is_pinned=True),
            View("b"),
            View("c", is_pinned=True),
            View("d"),
        ]
        assert tab_labels(views) == ["*1:a", "1:b", "*2:c", "2:d"]

    def test_numbers_hidden(self):
        views = [View("a", is_pinned=True), View("b")]
        assert tab_labels(views, show_numbers=False) == ["*a", "b"]

    def test_custom_pin_marker(self):
        assert tab_labels([View("a", is_pinned=True)], pin_marker="^") == ["^1:a"]

    def test_tenth_tab_is_zero_and_eleventh_unnumbered(self):
        views = [View(f"t{i}") for i in range(1, 12)]
        labels = tab_labels(views)
        assert labels[9] == "0:t10"
        assert labels[10] == "t11"

    def test_empty(self):
        assert tab_labels([]) == []


class TestPaletteActions:
    def test_every_action_exists_on_app(self):
        for _name, _description, action in _PALETTE_ACTIONS:
            assert callable(getattr(HotTabsApp, f"action_{action}", None)), action

    def test_names_unique(self):
        names = [name for name, _d, _a in _PALETTE_ACTIONS]
        assert len(names) == len(set(names))
