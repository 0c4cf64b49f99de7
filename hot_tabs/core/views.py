"""View-tree model: document tabs and the containers that own them.

A :class:`ViewGroup` is a tagged union over :class:`GroupKind`.  Only the
``TABBED`` variant (the document well) is a target for hot-tab commands;
split panes and floating windows hold views too but have no tab strip.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable


class GroupKind(Enum):
    """Discriminant for the container variants of the view tree."""

    TABBED = "tabbed"
    SPLIT = "split"
    FLOATING = "floating"


class View:
    """A single open document tab."""

    def __init__(
        self,
        title: str,
        moniker: str = "",
        *,
        is_pinned: bool = False,
        is_hidden: bool = False,
    ) -> None:
        self.title = title
        self.moniker = moniker or title
        self.is_pinned = is_pinned
        self.is_hidden = is_hidden
        self.parent: ViewGroup | None = None

    def __repr__(self) -> str:
        pin = " pinned" if self.is_pinned else ""
        return f"<View {self.title!r}{pin}>"

    @property
    def is_visible(self) -> bool:
        return self.parent is not None and not self.is_hidden

    @property
    def is_selected(self) -> bool:
        return self.parent is not None and self.parent.selected_view is self

    @is_selected.setter
    def is_selected(self, value: bool) -> None:
        # Selection is owned by the group; a detached view cannot be selected.
        if self.parent is None:
            return
        if value:
            self.parent.select_view(self)
        elif self.parent.selected_view is self:
            self.parent.select_view(None)


class ViewGroup:
    """Ordered container of views, left-to-right in tab order.

    *on_select* is called with the newly selected view (or ``None``) every
    time the selection changes.  Hosts use it to move keyboard focus.
    """

    def __init__(
        self,
        kind: GroupKind = GroupKind.TABBED,
        views: Iterable[View] = (),
        on_select: Callable[[View | None], None] | None = None,
    ) -> None:
        self.kind = kind
        self.on_select = on_select
        self._children: list[View] = []
        self._selected: View | None = None
        for view in views:
            self.add(view)

    def __repr__(self) -> str:
        return f"<ViewGroup {self.kind.value} {self._children!r}>"

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self):
        return iter(self._children)

    def __contains__(self, view: object) -> bool:
        return view in self._children

    @property
    def is_tabbed(self) -> bool:
        return self.kind is GroupKind.TABBED

    @property
    def children(self) -> list[View]:
        return list(self._children)

    @property
    def visible_children(self) -> list[View]:
        """Visible views in tab order."""
        return [v for v in self._children if v.is_visible]

    @property
    def selected_view(self) -> View | None:
        return self._selected

    # -- mutation -------------------------------------------------------------

    def add(self, view: View, index: int | None = None) -> View:
        """Insert *view* at *index* (default: after the last tab)."""
        if view.parent is not None:
            view.parent.remove(view)
        if index is None:
            self._children.append(view)
        else:
            self._children.insert(index, view)
        view.parent = self
        return view

    def remove(self, view: View) -> None:
        """Detach *view*; a removed selection falls to the nearest neighbour."""
        index = self._children.index(view)
        self._children.remove(view)
        view.parent = None
        if self._selected is view:
            remaining = self.visible_children
            if remaining:
                neighbour = self._children[min(index, len(self._children) - 1)]
                self.select_view(neighbour if neighbour.is_visible else remaining[-1])
            else:
                self.select_view(None)

    def select_view(self, view: View | None) -> None:
        if view is not None and view.parent is not self:
            raise ValueError(f"{view!r} does not belong to this group")
        if view is self._selected:
            return
        self._selected = view
        if self.on_select is not None:
            self.on_select(view)


def is_tabbed_document(view: View | None) -> bool:
    """True when *view* lives in a tabbed document well."""
    return view is not None and view.parent is not None and view.parent.is_tabbed


class ViewManager:
    """Holder for the host's current active view (may be ``None``)."""

    def __init__(self) -> None:
        self.active_view: View | None = None
