"""Event system for Melodic Dictation components."""

from typing import Dict, List, Callable, Any
from enum import Enum, auto

from ..logger import get_logger

logger = get_logger(__name__)


class QuizEventType(Enum):
    """Event types emitted by a quiz session."""

    QUESTION_STARTED = auto()
    ANSWER_CHANGED = auto()
    ANSWER_INCOMPLETE = auto()
    ANSWER_CORRECT = auto()
    ANSWER_INCORRECT = auto()
    QUIZ_FINISHED = auto()


class EventEmitter:
    """Event emitter for Melodic Dictation components."""

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners: Dict[Any, List[Callable]] = {}

    def on(self, event_type: Any, callback: Callable) -> None:
        """Register a callback for an event type.

        Args:
            event_type: Event type to listen for
            callback: Function to call when the event occurs
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []

        if callback not in self._listeners[event_type]:
            self._listeners[event_type].append(callback)
            logger.debug(f"Added listener for event {event_type}")

    def emit(self, event_type: Any, *args, **kwargs) -> None:
        """Emit an event.

        Args:
            event_type: Event type to emit
            *args: Positional arguments to pass to listeners
            **kwargs: Keyword arguments to pass to listeners
        """
        if event_type not in self._listeners:
            return

        for callback in self._listeners[event_type]:
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in event listener for {event_type}: {e}")

    def clear(self) -> None:
        """Remove all event listeners."""
        self._listeners = {}
        logger.debug("Cleared all event listeners")


class QuizEvents:
    """Event emitter specifically for quiz session events.

    Listener signatures:
        question_started(question_number, total_questions)
        answer_changed(answer_tokens)
        answer_incomplete(message)
        answer_correct(result)
        answer_incorrect(result)
        quiz_finished(score, max_score)
    """

    def __init__(self):
        self._emitter = EventEmitter()

    def on(self, event_type: QuizEventType, callback: Callable) -> None:
        """Register a callback for a quiz event."""
        self._emitter.on(event_type, callback)

    def emit(self, event_type: QuizEventType, *args) -> None:
        """Emit a quiz event."""
        self._emitter.emit(event_type, *args)

    def clear(self) -> None:
        """Remove all event listeners."""
        self._emitter.clear()
