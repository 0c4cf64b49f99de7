"""Tests for hot_tabs.core.command_ids -- the id-to-meaning table."""

from __future__ import annotations

import pytest

from hot_tabs.core.command_ids import (
    CMDID_GO_TO_PINNED_TAB_1,
    CMDID_GO_TO_UNPINNED_TAB_1,
    CMDID_TOOLS_OPTIONS,
    COMMAND_IDS,
    COMMAND_TABLE,
    CommandCategory,
    command_label,
    pinned_command_id,
    unpinned_command_id,
)


class TestCommandTable:
    def test_twenty_one_commands(self):
        assert len(COMMAND_IDS) == 21
        assert len(set(COMMAND_IDS)) == 21

    def test_options_registered_first(self):
        assert COMMAND_IDS[0] == CMDID_TOOLS_OPTIONS == 0x104
        assert COMMAND_TABLE[0x104].category is CommandCategory.OPTIONS

    def test_pinned_range(self):
        ids = [i for i, s in COMMAND_TABLE.items() if s.category is CommandCategory.PINNED]
        assert ids == list(range(0x108, 0x112))

    def test_unpinned_range(self):
        ids = [
            i for i, s in COMMAND_TABLE.items() if s.category is CommandCategory.UNPINNED
        ]
        assert ids == list(range(0x112, 0x11C))

    def test_ranks_are_offsets_within_range(self):
        for command_id, spec in COMMAND_TABLE.items():
            if spec.category is CommandCategory.PINNED:
                assert spec.rank == command_id - CMDID_GO_TO_PINNED_TAB_1
            elif spec.category is CommandCategory.UNPINNED:
                assert spec.rank == command_id - CMDID_GO_TO_UNPINNED_TAB_1
            assert 0 <= spec.rank <= 9


class TestCommandIdHelpers:
    def test_pinned_ids(self):
        assert pinned_command_id(1) == 0x108
        assert pinned_command_id(10) == 0x111

    def test_unpinned_ids(self):
        assert unpinned_command_id(1) == 0x112
        assert unpinned_command_id(10) == 0x11B

    @pytest.mark.parametrize("n", [0, 11, -1])
    def test_out_of_range_rejected(self, n):
        with pytest.raises(ValueError):
            pinned_command_id(n)
        with pytest.raises(ValueError):
            unpinned_command_id(n)


class TestCommandLabel:
    def test_pinned_label(self):
        assert command_label(0x10A) == "Go to Pinned Tab 3"

    def test_unpinned_label(self):
        assert command_label(0x11B) == "Go to Unpinned Tab 10"

    def test_options_label(self):
        assert command_label(CMDID_TOOLS_OPTIONS) == "Hot Tabs Options..."

    def test_unknown_label(self):
        assert command_label(0x999) == "Unknown command 0x999"
