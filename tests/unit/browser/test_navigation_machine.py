"""Behavior tests for the navigation state machine.

Most cases drive a real temporary directory tree through ``LocalFilesystem``.
Error paths use a small in-memory provider so failures are deterministic.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from crrr.browser import (
    EFFECT_EXIT_WITH_CD,
    EFFECT_NONE,
    EFFECT_OPEN_EDITOR,
    EFFECT_QUIT,
    MODE_BROWSING,
    MODE_SUSPENDED,
    MODE_TERMINATED,
    Confirm,
    DeleteChar,
    DeleteWord,
    InsertText,
    Interrupt,
    JumpToBottom,
    JumpToTop,
    MoveDown,
    MoveUp,
    NavigationStateMachine,
    ResetSearch,
    Resize,
    SelectAndExitCurrent,
    SelectAndExitEntry,
    SelectionMemory,
    ToggleHidden,
    ViewportSize,
)
from crrr.file_model import Entry, FilesystemError, LocalFilesystem
from crrr.search import FuzzyRanker, SubstringRanker


def _names(machine: NavigationStateMachine) -> list[str]:
    return [entry.name for entry in machine.snapshot.entries]


def _select(machine: NavigationStateMachine, name: str) -> None:
    machine.selected = _names(machine).index(name)
    machine.recompute()


class _BrokenFilesystem:
    """Provider whose listings always fail."""

    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd

    def list_directory(self, path: Path) -> list[Entry]:
        raise FilesystemError(f"cannot list {path}: Permission denied")

    def is_directory(self, path: Path) -> bool:
        return True

    def exists(self, path: Path) -> bool:
        return True

    def change_directory(self, path: Path) -> None:
        self.cwd = Path(os.path.normpath(self.cwd / path))

    def current_directory(self) -> Path:
        return self.cwd


class _LockedFilesystem(_BrokenFilesystem):
    """Provider that lists one subdirectory but refuses to enter it."""

    def list_directory(self, path: Path) -> list[Entry]:
        return [Entry("locked", is_dir=True)]

    def change_directory(self, path: Path) -> None:
        raise FilesystemError(f"cannot enter {path}: Permission denied")


class NavigationMachineTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._previous_cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        os.chdir(self.root)

    def tearDown(self) -> None:
        os.chdir(self._previous_cwd)
        self._tmp.cleanup()

    def make_machine(self, **kwargs) -> NavigationStateMachine:
        kwargs.setdefault("viewport", ViewportSize(80, 24))
        ranker = kwargs.pop("ranker", FuzzyRanker())
        return NavigationStateMachine(LocalFilesystem(), ranker, **kwargs)


class InitialStateTests(NavigationMachineTestCase):
    def test_initial_listing_and_default_selection(self) -> None:
        (self.root / ".git").mkdir()
        (self.root / "src").mkdir()
        (self.root / "README.md").write_text("# hi\n", encoding="utf-8")

        machine = self.make_machine()

        self.assertEqual(_names(machine), [".", "..", "src", "README.md"])
        self.assertEqual(machine.snapshot.selected, 1)
        self.assertEqual(machine.snapshot.cwd, self.root)
        self.assertEqual(machine.mode, MODE_BROWSING)

    def test_toggle_hidden_twice_restores_display_list(self) -> None:
        (self.root / ".git").mkdir()
        (self.root / "src").mkdir()
        (self.root / "README.md").write_text("# hi\n", encoding="utf-8")
        machine = self.make_machine()
        original = machine.snapshot.entries

        machine.handle(ToggleHidden())
        self.assertEqual(_names(machine), [".", "..", ".git", "src", "README.md"])
        self.assertTrue(machine.snapshot.show_hidden)

        machine.handle(ToggleHidden())
        self.assertEqual(machine.snapshot.entries, original)

    def test_unreadable_directory_yields_only_pseudo_entries(self) -> None:
        machine = NavigationStateMachine(_BrokenFilesystem(self.root), FuzzyRanker())

        self.assertEqual(_names(machine), [".", ".."])
        self.assertIn("Permission denied", machine.snapshot.status_message)
        self.assertEqual(machine.snapshot.selected, 1)


class MovementCommandTests(NavigationMachineTestCase):
    def setUp(self) -> None:
        super().setUp()
        for idx in range(30):
            (self.root / f"file{idx:02d}.txt").write_text("", encoding="utf-8")
        self.machine = self.make_machine(viewport=ViewportSize(80, 14))
        self.last = len(self.machine.snapshot.entries) - 1

    def test_arrow_moves_stay_in_bounds(self) -> None:
        self.machine.handle(MoveUp())
        self.machine.handle(MoveUp())
        self.assertEqual(self.machine.snapshot.selected, 0)

        self.machine.handle(JumpToBottom())
        self.machine.handle(MoveDown())
        self.assertEqual(self.machine.snapshot.selected, self.last)

    def test_large_jump_and_extremes(self) -> None:
        self.machine.handle(MoveDown(large=True))
        self.assertEqual(self.machine.snapshot.selected, 16)

        self.machine.handle(MoveUp(large=True))
        self.assertEqual(self.machine.snapshot.selected, 1)

        self.machine.handle(MoveUp(large=True))
        self.assertEqual(self.machine.snapshot.selected, 0)

        self.machine.handle(JumpToBottom())
        self.machine.handle(JumpToTop())
        self.assertEqual(self.machine.snapshot.selected, 1)

    def test_configured_jump_step(self) -> None:
        machine = self.make_machine(large_jump_step=4)

        machine.handle(MoveDown(large=True))

        self.assertEqual(machine.snapshot.selected, 5)

    def test_scroll_window_follows_selection(self) -> None:
        # 14 rows minus 4 chrome rows leaves 10 list rows.
        self.machine.handle(JumpToBottom())
        window = self.machine.snapshot.window

        self.assertEqual(window.count, 10)
        self.assertEqual(window.stop, self.last + 1)

    def test_resize_only_touches_viewport(self) -> None:
        self.machine.handle(MoveDown())
        before = self.machine.snapshot

        self.machine.handle(Resize(100, 40))
        after = self.machine.snapshot

        self.assertEqual(after.viewport, ViewportSize(100, 40))
        self.assertEqual(after.selected, before.selected)
        self.assertEqual(after.entries, before.entries)
        self.assertEqual(after.window.count, len(after.entries))


class SearchCommandTests(NavigationMachineTestCase):
    def setUp(self) -> None:
        super().setUp()
        for name in ("alpha", "beta", "gamma"):
            (self.root / name).write_text("", encoding="utf-8")

    def test_typing_keeps_selected_entry_selected(self) -> None:
        machine = self.make_machine()
        _select(machine, "beta")

        machine.handle(InsertText("b"))

        self.assertEqual(machine.snapshot.query, "b")
        self.assertEqual(_names(machine), [".", "..", "beta"])
        self.assertEqual(machine.snapshot.selected_entry.name, "beta")
        self.assertEqual(machine.snapshot.selected, 2)

    def test_deleting_query_restores_full_list_and_keeps_selection(self) -> None:
        machine = self.make_machine()
        _select(machine, "beta")
        machine.handle(InsertText("b"))

        machine.handle(DeleteChar())

        self.assertEqual(machine.snapshot.query, "")
        self.assertEqual(_names(machine), [".", "..", "alpha", "beta", "gamma"])
        self.assertEqual(machine.snapshot.selected_entry.name, "beta")

    def test_delete_word_uses_separators(self) -> None:
        machine = self.make_machine(ranker=SubstringRanker())
        for ch in "foo-bar":
            machine.handle(InsertText(ch))

        machine.handle(DeleteWord())
        self.assertEqual(machine.snapshot.query, "foo")

        machine.handle(DeleteWord())
        self.assertEqual(machine.snapshot.query, "")

    def test_navigation_keywords_select_pseudo_entries(self) -> None:
        machine = self.make_machine()
        _select(machine, "gamma")

        machine.handle(InsertText("."))
        self.assertEqual(machine.snapshot.selected, 0)

        machine.handle(InsertText("."))
        self.assertEqual(machine.snapshot.selected, 1)

    def test_reset_clears_query_and_memory_but_not_hidden_flag(self) -> None:
        memory = SelectionMemory()
        memory.remember(Path("/elsewhere"), "x")
        machine = self.make_machine(memory=memory)
        machine.handle(ToggleHidden())
        machine.handle(InsertText("g"))

        machine.handle(ResetSearch())

        self.assertEqual(machine.snapshot.query, "")
        self.assertEqual(machine.snapshot.selected, 1)
        self.assertTrue(machine.snapshot.show_hidden)
        self.assertEqual(len(memory), 0)
        self.assertEqual(_names(machine), [".", "..", "alpha", "beta", "gamma"])


class DirectoryCommandTests(NavigationMachineTestCase):
    def setUp(self) -> None:
        super().setUp()
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.txt").write_text("", encoding="utf-8")
        (self.root / "zzz.txt").write_text("", encoding="utf-8")

    def test_enter_then_leave_restores_selection(self) -> None:
        machine = self.make_machine()
        _select(machine, "sub")

        machine.handle(Confirm())
        self.assertEqual(machine.snapshot.cwd, self.root / "sub")
        self.assertEqual(_names(machine), [".", "..", "inner.txt"])
        self.assertEqual(machine.snapshot.selected, 1)

        machine.handle(Confirm())
        self.assertEqual(machine.snapshot.cwd, self.root)
        self.assertEqual(machine.snapshot.selected_entry.name, "sub")

    def test_entering_directory_clears_query(self) -> None:
        machine = self.make_machine()
        machine.handle(InsertText("s"))
        _select(machine, "sub")

        machine.handle(Confirm())

        self.assertEqual(machine.snapshot.query, "")

    def test_pseudo_entries_are_not_remembered(self) -> None:
        memory = SelectionMemory()
        machine = self.make_machine(memory=memory)

        machine.handle(Confirm())

        self.assertEqual(machine.snapshot.cwd, self.root.parent)
        self.assertIsNone(memory.recall(self.root))

    def test_confirm_on_current_directory_relists_in_place(self) -> None:
        machine = self.make_machine()
        machine.handle(MoveUp())
        (self.root / "new_dir").mkdir()

        effect = machine.handle(Confirm())

        self.assertEqual(effect.kind, EFFECT_NONE)
        self.assertEqual(machine.snapshot.cwd, self.root)
        self.assertIn("new_dir", _names(machine))

    def test_confirm_on_file_requests_editor_and_suspends(self) -> None:
        machine = self.make_machine()
        _select(machine, "zzz.txt")

        effect = machine.handle(Confirm())

        self.assertEqual(effect.kind, EFFECT_OPEN_EDITOR)
        self.assertEqual(effect.path, self.root / "zzz.txt")
        self.assertEqual(machine.mode, MODE_SUSPENDED)
        self.assertEqual(machine.handle(MoveUp()).kind, EFFECT_NONE)
        self.assertEqual(machine.snapshot.selected_entry.name, "zzz.txt")

    def test_resume_from_editor_reports_failure(self) -> None:
        machine = self.make_machine()
        _select(machine, "zzz.txt")
        machine.handle(Confirm())

        snapshot = machine.resume_from_editor("Editor exited with status 2")

        self.assertEqual(snapshot.mode, MODE_BROWSING)
        self.assertEqual(snapshot.status_message, "Editor exited with status 2")
        machine.handle(MoveUp())
        self.assertEqual(machine.snapshot.status_message, "")

    def test_vanished_entry_is_a_no_op(self) -> None:
        machine = self.make_machine()
        _select(machine, "zzz.txt")
        (self.root / "zzz.txt").unlink()

        effect = machine.handle(Confirm())

        self.assertEqual(effect.kind, EFFECT_NONE)
        self.assertEqual(machine.mode, MODE_BROWSING)

    def test_vanished_directory_is_a_no_op(self) -> None:
        machine = self.make_machine()
        _select(machine, "sub")
        (self.root / "sub" / "inner.txt").unlink()
        (self.root / "sub").rmdir()

        effect = machine.handle(Confirm())

        self.assertEqual(effect.kind, EFFECT_NONE)
        self.assertEqual(machine.snapshot.cwd, self.root)

    def test_refused_directory_change_keeps_state(self) -> None:
        memory = SelectionMemory()
        machine = NavigationStateMachine(_LockedFilesystem(self.root), FuzzyRanker(), memory)
        _select(machine, "locked")

        effect = machine.handle(Confirm())

        self.assertEqual(effect.kind, EFFECT_NONE)
        self.assertEqual(machine.snapshot.cwd, self.root)
        self.assertIn("Permission denied", machine.snapshot.status_message)
        self.assertIsNone(memory.recall(self.root))


class TerminationCommandTests(NavigationMachineTestCase):
    def setUp(self) -> None:
        super().setUp()
        (self.root / "sub").mkdir()
        (self.root / "notes.txt").write_text("", encoding="utf-8")

    def test_select_and_exit_entry_enters_directory_first(self) -> None:
        machine = self.make_machine()
        _select(machine, "sub")

        effect = machine.handle(SelectAndExitEntry())

        self.assertEqual(effect.kind, EFFECT_EXIT_WITH_CD)
        self.assertEqual(effect.path, self.root / "sub")
        self.assertEqual(machine.mode, MODE_TERMINATED)

    def test_select_and_exit_entry_on_file_opens_editor(self) -> None:
        machine = self.make_machine()
        _select(machine, "notes.txt")

        effect = machine.handle(SelectAndExitEntry())

        self.assertEqual(effect.kind, EFFECT_OPEN_EDITOR)

    def test_select_and_exit_current_ignores_selection(self) -> None:
        machine = self.make_machine()
        _select(machine, "sub")

        effect = machine.handle(SelectAndExitCurrent())

        self.assertEqual(effect.kind, EFFECT_EXIT_WITH_CD)
        self.assertEqual(effect.path, self.root)

    def test_interrupt_quits_without_directory(self) -> None:
        machine = self.make_machine()

        effect = machine.handle(Interrupt())

        self.assertEqual(effect.kind, EFFECT_QUIT)
        self.assertIsNone(effect.path)
        self.assertEqual(machine.handle(MoveDown()).kind, EFFECT_NONE)
        self.assertEqual(machine.snapshot.mode, MODE_TERMINATED)


class SelectionInvariantTests(NavigationMachineTestCase):
    def test_selection_stays_in_range_across_mixed_commands(self) -> None:
        for name in ("apple", "apricot", "banana", ".hidden"):
            (self.root / name).write_text("", encoding="utf-8")
        (self.root / "dir").mkdir()
        machine = self.make_machine(viewport=ViewportSize(40, 6))
        commands = [
            JumpToBottom(),
            InsertText("a"),
            InsertText("p"),
            MoveDown(large=True),
            ToggleHidden(),
            DeleteWord(),
            MoveUp(large=True),
            InsertText("x"),
            InsertText("y"),
            DeleteChar(),
            ResetSearch(),
            JumpToBottom(),
            ToggleHidden(),
        ]

        for command in commands:
            machine.handle(command)
            snapshot = machine.snapshot
            self.assertGreaterEqual(len(snapshot.entries), 2)
            self.assertEqual([entry.name for entry in snapshot.entries[:2]], [".", ".."])
            self.assertTrue(0 <= snapshot.selected < len(snapshot.entries))
            self.assertIn(snapshot.selected, snapshot.window)


if __name__ == "__main__":
    unittest.main()
