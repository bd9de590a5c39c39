import unittest

from memtrainer.session import EventBus, ManualScheduler


class ManualSchedulerTests(unittest.TestCase):
    def test_fires_in_deadline_order(self) -> None:
        s = ManualScheduler()
        fired = []
        s.schedule_after(300, lambda: fired.append(("b", s.now_ms())))
        s.schedule_after(100, lambda: fired.append(("a", s.now_ms())))
        s.advance(250)
        self.assertEqual(fired, [("a", 100)])
        self.assertEqual(s.now_ms(), 250)
        s.advance(50)
        self.assertEqual(fired, [("a", 100), ("b", 300)])

    def test_cancelled_handle_never_fires(self) -> None:
        s = ManualScheduler()
        fired = []
        h = s.schedule_after(10, lambda: fired.append(1))
        h.cancel()
        h.cancel()
        s.advance(100)
        self.assertEqual(fired, [])
        self.assertEqual(s.pending(), 0)

    def test_chained_callbacks_use_virtual_time(self) -> None:
        s = ManualScheduler()
        times = []

        def step(n: int) -> None:
            times.append(s.now_ms())
            if n:
                s.schedule_after(100, lambda: step(n - 1))

        s.schedule_after(0, lambda: step(3))
        s.run_until_idle()
        self.assertEqual(times, [0, 100, 200, 300])


class EventBusTests(unittest.TestCase):
    def test_failing_handler_does_not_stop_others(self) -> None:
        bus = EventBus()
        seen = []

        def boom(_payload) -> None:
            raise RuntimeError("host bug")

        bus.subscribe("progress", boom)
        bus.subscribe("progress", seen.append)
        bus.emit("progress", {"fraction": 0.5})
        self.assertEqual(seen, [{"fraction": 0.5}])

    def test_unknown_event_rejected(self) -> None:
        with self.assertRaises(KeyError):
            EventBus().subscribe("nope", print)

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        seen = []
        bus.subscribe("input_requested", seen.append)
        bus.unsubscribe("input_requested", seen.append)
        bus.emit("input_requested", {"index": 0})
        self.assertEqual(seen, [])


if __name__ == "__main__":
    unittest.main()
