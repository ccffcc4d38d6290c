#!/usr/bin/env python3
"""
Тесты команд истории: round-trip, изоляция снимков, порядок отмены пакета.
"""

import unittest
from datetime import datetime

from calendar_editor.models.domain import CalendarEvent
from calendar_editor.services.history import (
    BatchCommand,
    CommandType,
    CreateEventCommand,
    DeleteEventCommand,
    MoveEventCommand,
    ResizeEdge,
    ResizeEventCommand,
    UpdateEventCommand
)


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 3, 11, hour, minute)


def make_event(event_id: str, title: str, start_hour: int, end_hour: int, **kwargs) -> CalendarEvent:
    return CalendarEvent(event_id, title, at(start_hour), at(end_hour), **kwargs)


def by_id(events):
    return {event.id: event for event in events}


class TestCommandRoundTrip(unittest.TestCase):
    """undo(execute(S)) == S для каждой команды."""

    def setUp(self):
        self.sync = make_event("e1", "Team Sync", 9, 10, note="weekly")
        self.lunch = make_event("e2", "Lunch", 12, 13)
        self.state = [self.sync, self.lunch]

    def assertRoundTrip(self, command):
        before = [event.copy() for event in self.state]
        after = command.execute(self.state)
        restored = command.undo(after)
        self.assertEqual(by_id(restored), by_id(before))
        # Входной список не должен меняться
        self.assertEqual(self.state, before)
        return after

    def test_create(self):
        review = make_event("e3", "Review", 15, 16)
        command = CreateEventCommand(review)
        after = self.assertRoundTrip(command)

        self.assertEqual(len(after), 3)
        self.assertEqual(after[-1], review)
        self.assertEqual(command.type, CommandType.CREATE)
        self.assertEqual(command.description, 'Create "Review"')

    def test_update(self):
        new_state = make_event("e1", "Team Sync (moved room)", 9, 10, location="Room 4")
        command = UpdateEventCommand(self.sync, new_state)
        after = self.assertRoundTrip(command)

        self.assertEqual(by_id(after)["e1"].location, "Room 4")
        self.assertEqual(by_id(after)["e2"], self.lunch)
        self.assertEqual(command.type, CommandType.UPDATE)

    def test_delete_restores_original_id(self):
        command = DeleteEventCommand(self.sync)
        after = command.execute(self.state)
        self.assertNotIn("e1", by_id(after))

        restored = command.undo(after)
        self.assertEqual(by_id(restored)["e1"], self.sync)
        self.assertEqual(command.type, CommandType.DELETE)
        self.assertRoundTrip(command)

    def test_move(self):
        command = MoveEventCommand("e1", "Team Sync", at(9), at(10), at(11), at(12))
        after = self.assertRoundTrip(command)

        moved = by_id(after)["e1"]
        self.assertEqual((moved.start_time, moved.end_time), (at(11), at(12)))
        self.assertEqual(moved.note, "weekly")
        self.assertEqual(command.description, 'Move "Team Sync"')

    def test_resize_end(self):
        command = ResizeEventCommand("e2", "Lunch", at(13), at(13, 30))
        after = self.assertRoundTrip(command)

        resized = by_id(after)["e2"]
        self.assertEqual(resized.start_time, at(12))
        self.assertEqual(resized.end_time, at(13, 30))
        self.assertEqual(command.type, CommandType.RESIZE)

    def test_resize_start(self):
        command = ResizeEventCommand("e2", "Lunch", at(12), at(11, 45), edge=ResizeEdge.START)
        after = self.assertRoundTrip(command)

        resized = by_id(after)["e2"]
        self.assertEqual(resized.start_time, at(11, 45))
        self.assertEqual(resized.end_time, at(13))

    def test_identical_move_is_still_a_command(self):
        command = MoveEventCommand("e1", "Team Sync", at(9), at(10), at(9), at(10))
        after = self.assertRoundTrip(command)
        self.assertEqual(by_id(after), by_id(self.state))

    def test_missing_id_leaves_collection_unchanged(self):
        command = MoveEventCommand("missing", "Ghost", at(9), at(10), at(11), at(12))
        self.assertEqual(command.execute(self.state), self.state)
        self.assertEqual(command.undo(self.state), self.state)


class TestCommandSnapshots(unittest.TestCase):
    """Команда хранит снимок, а не живую ссылку."""

    def test_create_snapshot_survives_caller_mutation(self):
        event = make_event("e1", "Team Sync", 9, 10)
        command = CreateEventCommand(event)
        event.title = "Changed"
        event.start_time = at(17)

        created = command.execute([])[0]
        self.assertEqual(created.title, "Team Sync")
        self.assertEqual(created.start_time, at(9))

    def test_update_snapshot_survives_in_place_mutation(self):
        event = make_event("e1", "Team Sync", 9, 10)
        new_state = make_event("e1", "Standup", 9, 10)
        command = UpdateEventCommand(event, new_state)

        after = command.execute([event])
        # Мутация события внутри возвращённого списка
        after[0].title = "Hacked"

        restored = command.undo(after)
        self.assertEqual(restored[0].title, "Team Sync")
        self.assertEqual(command.execute(restored)[0].title, "Standup")

    def test_delete_snapshot_survives_mutation(self):
        event = make_event("e1", "Team Sync", 9, 10)
        command = DeleteEventCommand(event)
        after = command.execute([event])
        event.title = "Changed"

        restored = command.undo(after)
        self.assertEqual(restored[0].title, "Team Sync")

    def test_commands_have_unique_ids(self):
        event = make_event("e1", "Team Sync", 9, 10)
        ids = {CreateEventCommand(event).id for _ in range(100)}
        self.assertEqual(len(ids), 100)


class TestCommandPreconditions(unittest.TestCase):

    def test_empty_batch_rejected(self):
        with self.assertRaises(ValueError):
            BatchCommand([], "Nothing")

    def test_update_with_different_ids_rejected(self):
        with self.assertRaises(ValueError):
            UpdateEventCommand(make_event("e1", "A", 9, 10), make_event("e2", "A", 9, 10))

    def test_move_without_id_rejected(self):
        with self.assertRaises(ValueError):
            MoveEventCommand("", "A", at(9), at(10), at(11), at(12))


class TestBatchCommand(unittest.TestCase):

    def setUp(self):
        self.sync = make_event("e1", "Team Sync", 9, 10)
        self.state = [self.sync]
        self.c1 = MoveEventCommand("e1", "Team Sync", at(9), at(10), at(11), at(12))
        self.c2 = ResizeEventCommand("e1", "Team Sync", at(12), at(13))
        self.c3 = CreateEventCommand(make_event("e2", "Follow-up", 13, 14))
        self.batch = BatchCommand([self.c1, self.c2, self.c3], "Reschedule sync")

    def test_execute_applies_in_order(self):
        expected = self.c3.execute(self.c2.execute(self.c1.execute(self.state)))
        self.assertEqual(self.batch.execute(self.state), expected)
        self.assertEqual(self.batch.type, CommandType.BATCH)
        self.assertEqual(self.batch.description, "Reschedule sync")
        self.assertEqual(len(self.batch), 3)

    def test_undo_applies_in_reverse_order(self):
        after = self.batch.execute(self.state)

        step3 = self.c3.undo(after)
        step2 = self.c2.undo(step3)
        step1 = self.c1.undo(step2)

        self.assertEqual(self.batch.undo(after), step1)
        self.assertEqual(step1, self.state)
        # Промежуточные состояния
        self.assertEqual(len(step3), 1)
        self.assertEqual(step3[0].end_time, at(13))
        self.assertEqual(step2[0].end_time, at(12))
        self.assertEqual(step2[0].start_time, at(11))

    def test_order_matters_for_dependent_commands(self):
        # Resize 12->13 применим только после Move, и отменяется только до него
        after = self.batch.execute(self.state)
        restored = self.batch.undo(after)
        self.assertEqual((restored[0].start_time, restored[0].end_time), (at(9), at(10)))

    def test_nested_batch(self):
        outer = BatchCommand(
            [self.batch, DeleteEventCommand(make_event("e2", "Follow-up", 13, 14))],
            "Nested"
        )
        after = outer.execute(self.state)
        self.assertEqual([event.id for event in after], ["e1"])
        self.assertEqual(outer.undo(after), self.state)

    def test_batch_keeps_its_own_sequence(self):
        commands = [self.c1]
        batch = BatchCommand(commands, "Move")
        commands.append(self.c3)
        self.assertEqual(len(batch), 1)


if __name__ == "__main__":
    unittest.main()
