"""Shared test fixtures for the hot-tabs test suite."""

from __future__ import annotations

import pytest

from hot_tabs.core import (
    CommandRouter,
    GroupKind,
    HotTabsPackage,
    MenuCommandService,
    View,
    ViewGroup,
    ViewManager,
)


def _make_group(spec: str, kind: GroupKind = GroupKind.TABBED) -> ViewGroup:
    """Build a group from a compact spec such as ``"A* B C* D"``.

    A trailing ``*`` marks a pinned tab; a trailing ``~`` marks a hidden one.
    """
    group = ViewGroup(kind)
    for token in spec.split():
        title = token.rstrip("*~")
        group.add(
            View(title, is_pinned="*" in token, is_hidden="~" in token)
        )
    return group


def _view_named(group: ViewGroup, title: str) -> View:
    return next(v for v in group.children if v.title == title)


@pytest.fixture
def make_group():
    """Factory fixture wrapping the compact group builder."""
    return _make_group


@pytest.fixture
def view_named():
    """Look up a view in a group by title."""
    return _view_named


# -- View-tree fixtures -------------------------------------------------------


@pytest.fixture
def abcd_group() -> ViewGroup:
    """Tabs in order A(pinned), B(unpinned), C(pinned), D(unpinned)."""
    return _make_group("A* B C* D")


@pytest.fixture
def split_group() -> ViewGroup:
    """A non-tabbed container with the same contents as ``abcd_group``."""
    return _make_group("A* B C* D", kind=GroupKind.SPLIT)


# -- Host fixtures ------------------------------------------------------------


@pytest.fixture
def command_service() -> MenuCommandService:
    return MenuCommandService()


@pytest.fixture
def view_manager() -> ViewManager:
    return ViewManager()


@pytest.fixture
def package(command_service, view_manager) -> HotTabsPackage:
    pkg = HotTabsPackage(command_service, view_manager)
    pkg.initialize()
    return pkg


@pytest.fixture
def router(package) -> CommandRouter:
    return package.router
