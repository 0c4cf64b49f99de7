"""Widget classes for the Hot Tabs host."""

from .commands import HotTabsCommandProvider
from .tabs import TabBar, TabButton, tab_labels

__all__ = [
    "HotTabsCommandProvider",
    "TabBar",
    "TabButton",
    "tab_labels",
]
