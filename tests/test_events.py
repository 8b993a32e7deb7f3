import unittest

from melodic_dictation.core.events import EventEmitter, QuizEvents, QuizEventType


class TestEventEmitter(unittest.TestCase):
    def test_emit_calls_listeners(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("tick", lambda *args, **kwargs: calls.append((args, kwargs)))

        emitter.emit("tick", 1, name="x")
        emitter.emit("other")

        self.assertEqual(calls, [((1,), {"name": "x"})])

    def test_listener_registered_once(self):
        emitter = EventEmitter()
        calls = []

        def listener():
            calls.append(1)

        emitter.on("tick", listener)
        emitter.on("tick", listener)
        emitter.emit("tick")
        self.assertEqual(calls, [1])

    def test_failing_listener_does_not_stop_others(self):
        emitter = EventEmitter()
        calls = []

        def broken():
            raise RuntimeError("boom")

        emitter.on("tick", broken)
        emitter.on("tick", lambda: calls.append(1))
        with self.assertLogs("melodic_dictation.core.events", level="ERROR"):
            emitter.emit("tick")
        self.assertEqual(calls, [1])

    def test_clear(self):
        events = QuizEvents()
        calls = []
        events.on(QuizEventType.QUIZ_FINISHED, lambda score, top: calls.append(score))
        events.clear()
        events.emit(QuizEventType.QUIZ_FINISHED, 0, 3750)
        self.assertEqual(calls, [])


if __name__ == "__main__":
    unittest.main()
