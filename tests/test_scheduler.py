"""Tests for scheduler.py - simulated-time event queue."""

from snakeduel.scheduler import EventQueue


class TestEventQueue:
    """Ordering, cancellation and chained scheduling."""

    def test_fires_in_due_order_then_insertion_order(self):
        queue = EventQueue()
        fired = []
        queue.schedule(300, "c", fired.append, "c")
        queue.schedule(100, "a", fired.append, "a")
        queue.schedule(100, "b", fired.append, "b")
        assert queue.run_due(300) == 3
        assert fired == ["a", "b", "c"]

    def test_only_due_events_fire(self):
        queue = EventQueue()
        fired = []
        queue.schedule(100, "early", fired.append, 1)
        queue.schedule(500, "late", fired.append, 2)
        queue.run_due(200)
        assert fired == [1]
        assert len(queue) == 1
        assert [e.name for e in queue.pending("late")] == ["late"]

    def test_cancelled_events_do_not_fire(self):
        queue = EventQueue()
        fired = []
        event = queue.schedule(100, "x", fired.append, 1)
        event.cancel()
        assert queue.run_due(1000) == 0
        assert fired == []

    def test_callback_can_schedule_an_already_due_event(self):
        queue = EventQueue()
        fired = []

        def first():
            fired.append("first")
            queue.schedule(150, "second", fired.append, "second")

        queue.schedule(100, "first", first)
        queue.run_due(200)
        assert fired == ["first", "second"]

    def test_clear_drops_everything(self):
        queue = EventQueue()
        fired = []
        queue.schedule(10, "x", fired.append, 1)
        queue.clear()
        assert len(queue) == 0
        queue.run_due(100)
        assert fired == []
