"""Unit tests for the selection and preview controller."""

from __future__ import annotations

import asyncio

import pytest

from stashboard.adapters.git import StashOutcome
from stashboard.constants import (
    APPLY_LABEL_CLEAN,
    APPLY_LABEL_DIRTY,
    EMPTY_STASH_PLACEHOLDER,
    POP_FAILED_MESSAGE,
    POP_LABEL_CLEAN,
    POP_LABEL_DIRTY,
)
from stashboard.core.selection import (
    Cleanliness,
    Command,
    SelectionController,
    command_labels,
    next_selection,
)
from tests.helpers.patches import PATCH_A, PATCH_B
from tests.helpers.fakes import FakeStashAdapter, FakeValidator, RecordingView, make_entries

pytestmark = pytest.mark.unit


class TestSelect:
    """Tests for selecting a stash and computing its clean state."""

    async def test_empty_diff_is_clean_placeholder(self, controller, view, validator):
        await controller.select(2)

        assert controller.is_clean is True
        assert controller.preview_text == EMPTY_STASH_PLACEHOLDER
        assert view.last.cleanliness is Cleanliness.CLEAN
        assert validator.checked == []

    async def test_empty_diff_is_clean_even_when_validator_rejects_everything(
        self, adapter, view
    ):
        controller = SelectionController(adapter, FakeValidator(clean=False), view, adapter.entries)
        await controller.select(2)
        assert controller.is_clean is True
        assert controller.preview_text == EMPTY_STASH_PLACEHOLDER

    async def test_validator_success_is_clean(self, controller, view):
        await controller.select(0)

        assert controller.is_clean is True
        assert controller.preview_text == PATCH_A
        assert (view.last.apply_label, view.last.pop_label) == (APPLY_LABEL_CLEAN, POP_LABEL_CLEAN)

    async def test_validator_failure_is_dirty(self, controller, view, validator):
        validator.results[PATCH_B] = False
        await controller.select(1)

        assert controller.is_clean is False
        assert controller.cleanliness is Cleanliness.DIRTY
        assert controller.preview_text == PATCH_B
        assert (view.last.apply_label, view.last.pop_label) == (APPLY_LABEL_DIRTY, POP_LABEL_DIRTY)

    async def test_pending_state_shows_raw_patch_before_validation(self, controller, view):
        await controller.select(0)

        pending, final = view.states[-2], view.states[-1]
        assert pending.cleanliness is Cleanliness.PENDING
        assert pending.preview_text == PATCH_A
        assert pending.pop_label == POP_LABEL_DIRTY
        assert final.cleanliness is Cleanliness.CLEAN

    async def test_out_of_range_index_is_ignored(self, controller, view):
        await controller.select(7)
        assert controller.selected_index == 0
        assert view.states == []

    async def test_diff_failure_shows_error_and_marks_dirty(self, controller, adapter, view):
        adapter.diff_errors.add("id1")
        await controller.select(1)

        assert controller.cleanliness is Cleanliness.DIRTY
        assert len(view.errors) == 1
        assert "id1" in view.errors[0]

    async def test_stale_validation_result_is_discarded(self, controller, validator, view):
        gate = asyncio.Event()
        validator.gates[PATCH_A] = gate
        validator.results[PATCH_A] = False

        first = asyncio.create_task(controller.select(0))
        await asyncio.sleep(0)
        await controller.select(2)
        gate.set()
        await first

        assert controller.selected_index == 2
        assert controller.preview_text == EMPTY_STASH_PLACEHOLDER
        assert controller.is_clean is True
        assert view.last.preview_text == EMPTY_STASH_PLACEHOLDER

    async def test_handle_select_dispatches(self, controller):
        await controller.handle(Command.SELECT, 1)
        assert controller.selected_index == 1


class TestDrop:
    """Tests for dropping the selected stash."""

    async def test_scenario_drop_first_of_two(self, view, validator):
        entries = make_entries("wip: a", "wip: b")
        adapter = FakeStashAdapter(entries, diffs={"id0": "", "id1": ""})
        controller = SelectionController(adapter, validator, view, entries)

        await controller.select(0)
        assert controller.is_clean is True
        assert controller.preview_text == EMPTY_STASH_PLACEHOLDER

        await controller.drop()

        assert [e.message for e in controller.entries] == ["wip: b"]
        assert controller.entries[0].identifier == "id1"
        assert controller.selected_index == 0

    async def test_drop_last_selects_new_last(self, controller, adapter):
        await controller.select(2)
        await controller.drop()

        assert adapter.mutation_calls("drop") == [2]
        assert len(controller.entries) == 2
        assert controller.selected_index == 1
        assert controller.preview_text == PATCH_B

    async def test_drop_not_found_keeps_list_and_shows_error(self, controller, adapter, view):
        adapter.outcomes["drop"] = StashOutcome.not_found("error: stash@{1} is not a valid reference")
        await controller.select(1)
        await controller.drop()

        assert len(controller.entries) == 3
        assert controller.selected_index == 1
        assert view.errors == ["Problem dropping stash (not found)"]

    async def test_drop_unknown_code_surfaces_code(self, controller, adapter, view):
        adapter.outcomes["drop"] = StashOutcome.unknown(128, "fatal: something")
        await controller.select(0)
        await controller.drop()

        assert len(controller.entries) == 3
        assert view.errors == ["Unknown problem dropping stash (error: 128)"]

    async def test_drop_exception_message_is_shown_verbatim(self, controller, adapter, view):
        adapter.outcomes["drop"] = StashOutcome.unknown(None, "git executable not found")
        await controller.select(0)
        await controller.drop()

        assert view.errors == ["git executable not found"]

    async def test_dropping_only_stash_leaves_empty_list(self, view, validator):
        entries = make_entries("only")
        adapter = FakeStashAdapter(entries)
        controller = SelectionController(adapter, validator, view, entries)

        await controller.select(0)
        await controller.drop()

        assert controller.entries == ()
        assert view.last.entries == ()
        assert view.last.selected_index is None
        assert view.exits == []

    async def test_commands_on_empty_list_are_noops(self, view, validator):
        adapter = FakeStashAdapter([])
        controller = SelectionController(adapter, validator, view, [])

        await controller.drop()
        await controller.apply()
        await controller.pop()
        await controller.select(0)

        assert adapter.calls == []
        assert view.states == []


class TestApply:
    """Tests for applying the selected stash."""

    async def test_apply_when_clean_refreshes_preview(self, controller, adapter, validator, view):
        await controller.select(0)
        checks_before = len(validator.checked)

        await controller.apply()

        assert adapter.mutation_calls("apply") == [0]
        assert len(controller.entries) == 3
        assert len(validator.checked) == checks_before + 1
        assert view.exits == []

    @pytest.mark.parametrize(
        "outcome",
        [StashOutcome.success(), StashOutcome.conflicts(1, "CONFLICT"), StashOutcome.unknown(2)],
        ids=["success", "conflicts", "unknown"],
    )
    async def test_apply_when_dirty_exits_zero(self, controller, adapter, validator, view, outcome):
        validator.results[PATCH_A] = False
        adapter.outcomes["apply"] = outcome
        await controller.select(0)

        await controller.apply()

        assert adapter.mutation_calls("apply") == [0]
        assert view.exits == [(0, None)]

    async def test_apply_failure_when_clean_shows_error(self, controller, adapter, view):
        adapter.outcomes["apply"] = StashOutcome.unknown(1, "error: boom")
        await controller.select(0)
        await controller.apply()

        assert view.exits == []
        assert view.errors == ["Unknown problem applying stash (error: 1)"]


class TestPop:
    """Tests for popping the selected stash."""

    async def test_pop_when_dirty_is_noop(self, controller, adapter, validator, view):
        validator.results[PATCH_A] = False
        await controller.select(0)
        states_before = len(view.states)

        await controller.pop()

        assert adapter.calls == []
        assert len(controller.entries) == 3
        assert controller.selected_index == 0
        assert len(view.states) == states_before

    async def test_pop_when_clean_splices_and_reselects(self, controller, adapter):
        await controller.select(1)
        await controller.pop()

        assert adapter.mutation_calls("pop") == [1]
        assert [e.identifier for e in controller.entries] == ["id0", "id2"]
        assert controller.selected_index == 1
        assert controller.preview_text == EMPTY_STASH_PLACEHOLDER

    async def test_pop_backend_failure_exits_one(self, controller, adapter, view):
        adapter.outcomes["pop"] = StashOutcome.conflicts(1, "CONFLICT (content)")
        await controller.select(0)
        await controller.pop()

        assert view.exits == [(1, POP_FAILED_MESSAGE)]
        assert len(controller.entries) == 3

    async def test_pop_queued_behind_drop_rechecks_cleanliness(self, view):
        entries = make_entries("clean", "dirty")
        adapter = FakeStashAdapter(entries, diffs={"id0": PATCH_A, "id1": PATCH_B})
        validator = FakeValidator()
        validator.results[PATCH_B] = False
        controller = SelectionController(adapter, validator, view, entries)
        await controller.select(0)
        assert controller.is_clean is True

        gate = asyncio.Event()
        adapter.mutation_gates["drop"] = gate
        drop = asyncio.create_task(controller.drop())
        await asyncio.sleep(0)
        pop = asyncio.create_task(controller.pop())
        await asyncio.sleep(0)
        gate.set()
        await asyncio.gather(drop, pop)

        assert adapter.mutation_calls("drop") == [0]
        assert adapter.mutation_calls("pop") == []
        assert [e.identifier for e in controller.entries] == ["id1"]
        assert controller.cleanliness is Cleanliness.DIRTY
        assert view.exits == []

    async def test_drop_queued_behind_last_drop_is_noop(self, view, validator):
        entries = make_entries("only")
        adapter = FakeStashAdapter(entries)
        controller = SelectionController(adapter, validator, view, entries)
        await controller.select(0)

        gate = asyncio.Event()
        adapter.mutation_gates["drop"] = gate
        first = asyncio.create_task(controller.drop())
        await asyncio.sleep(0)
        second = asyncio.create_task(controller.drop())
        await asyncio.sleep(0)
        gate.set()
        await asyncio.gather(first, second)

        assert adapter.mutation_calls("drop") == [0]
        assert controller.entries == ()
        assert view.errors == []

    async def test_scenario_single_dirty_stash(self, view):
        entries = make_entries("wip")
        adapter = FakeStashAdapter(entries, diffs={"id0": PATCH_A})
        controller = SelectionController(adapter, FakeValidator(clean=False), view, entries)

        await controller.select(0)
        assert controller.is_clean is False

        await controller.handle(Command.POP)
        assert adapter.calls == []
        assert view.exits == []

        adapter.outcomes["apply"] = StashOutcome.unknown(1)
        await controller.handle(Command.APPLY)
        assert adapter.calls == [("apply", 0)]
        assert view.exits == [(0, None)]


class TestHelpers:
    @pytest.mark.parametrize(
        ("index", "length", "expected"),
        [(0, 1, 0), (2, 2, 1), (1, 3, 1), (0, 0, None)],
    )
    def test_next_selection(self, index, length, expected):
        assert next_selection(index, length) == expected

    def test_command_labels(self):
        assert command_labels(Cleanliness.CLEAN) == ("a - apply", "p - pop")
        assert command_labels(Cleanliness.DIRTY) == ("a - apply & exit", "(conflicts found)")
        assert command_labels(Cleanliness.PENDING) == command_labels(Cleanliness.DIRTY)

    def test_initial_state(self):
        controller = SelectionController(
            FakeStashAdapter([]), FakeValidator(), RecordingView(), make_entries("a")
        )
        assert controller.selected_index == 0
        assert controller.is_clean is False
        assert controller.state.selected_index == 0
