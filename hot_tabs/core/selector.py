"""Positional tab lookup within a single view group."""

from __future__ import annotations

from itertools import islice
from typing import Callable

from .views import View, ViewGroup


def select(
    group: ViewGroup, rank: int, predicate: Callable[[View], bool]
) -> View | None:
    """Return the *rank*-th (0-based) visible view matching *predicate*.

    Views are taken in tab order.  Returns ``None`` when fewer than
    ``rank + 1`` views match.
    """
    matching = (view for view in group.visible_children if predicate(view))
    return next(islice(matching, rank, None), None)


def select_pinned(group: ViewGroup, rank: int) -> View | None:
    return select(group, rank, lambda view: view.is_pinned)


def select_unpinned(group: ViewGroup, rank: int) -> View | None:
    return select(group, rank, lambda view: not view.is_pinned)
