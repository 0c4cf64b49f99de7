"""Tests for hot_tabs.core.menu -- the in-process command-menu service."""

from __future__ import annotations

import pytest

from hot_tabs.core.menu import MenuCommand, MenuCommandService

SET = "test-set"


@pytest.fixture
def calls() -> list[int]:
    return []


@pytest.fixture
def service(calls) -> MenuCommandService:
    svc = MenuCommandService()
    svc.add_command(MenuCommand(SET, 1, lambda cmd: calls.append(cmd.command_id)))
    return svc


class TestRegistration:
    def test_duplicate_rejected(self, service):
        with pytest.raises(ValueError, match="already registered"):
            service.add_command(MenuCommand(SET, 1, lambda cmd: None))

    def test_same_id_other_set_allowed(self, service):
        service.add_command(MenuCommand("other", 1, lambda cmd: None))
        assert len(service) == 2

    def test_commands_in_registration_order(self, service):
        service.add_command(MenuCommand(SET, 3, lambda cmd: None))
        service.add_command(MenuCommand(SET, 2, lambda cmd: None))
        assert [c.command_id for c in service.commands()] == [1, 3, 2]

    def test_find_missing(self, service):
        assert service.find_command(SET, 99) is None


class TestQueryStatus:
    def test_hooks_update_flags(self, service):
        cmd = service.find_command(SET, 1)

        def hide(command):
            command.visible = False
            command.enabled = False

        cmd.before_query_status.append(hide)
        result = service.query_status(SET, 1)
        assert result is cmd
        assert (cmd.visible, cmd.enabled) == (False, False)

    def test_unregistered_returns_none(self, service):
        assert service.query_status(SET, 99) is None


class TestInvoke:
    def test_runs_callback(self, service, calls):
        assert service.invoke(SET, 1) is True
        assert calls == [1]

    def test_unregistered_does_nothing(self, service, calls):
        assert service.invoke(SET, 99) is False
        assert calls == []

    def test_disabled_command_not_run(self, service, calls):
        cmd = service.find_command(SET, 1)
        cmd.before_query_status.append(lambda c: setattr(c, "enabled", False))
        assert service.invoke(SET, 1) is False
        assert calls == []

    def test_status_refreshed_before_invoke(self, service, calls):
        cmd = service.find_command(SET, 1)
        cmd.enabled = False
        cmd.before_query_status.append(lambda c: setattr(c, "enabled", True))
        assert service.invoke(SET, 1) is True
        assert calls == [1]
