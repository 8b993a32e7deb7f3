"""Timed playback of a question: reference note, silence, then the four notes."""

import time
from typing import Callable, List, Sequence

from ..core.interfaces import IAssetLoader, IAudioPlayer
from ..logger import get_logger
from ..note_types import PlaybackEvent
from ..note_utils import token_to_asset_key

logger = get_logger(__name__)

DEFAULT_NOTE_DURATION = 0.5
MIN_NOTE_DURATION = 0.2
MAX_NOTE_DURATION = 0.8


class PlaybackSequencer:
    """Plays a question one note at a time.

    The reference note sounds at ``lead_in``; the question notes start
    ``reference_gap`` seconds later and are ``note_duration`` apart. Each
    note gets its whole slot before the next one starts.
    """

    def __init__(
        self,
        assets: IAssetLoader,
        player: IAudioPlayer,
        note_duration: float = DEFAULT_NOTE_DURATION,
        min_duration: float = MIN_NOTE_DURATION,
        max_duration: float = MAX_NOTE_DURATION,
        lead_in: float = 0.2,
        reference_gap: float = 1.0,
        reference_note: str = "C4",
        sleep: Callable[[float], None] = time.sleep,
    ):
        if min_duration > max_duration:
            raise ValueError(
                f"min_duration ({min_duration}) is greater than max_duration ({max_duration})"
            )
        self.assets = assets
        self.player = player
        self.min_duration = min_duration
        self.max_duration = max_duration
        self.lead_in = lead_in
        self.reference_gap = reference_gap
        self.reference_key = token_to_asset_key(reference_note)
        self._sleep = sleep
        self.note_duration = DEFAULT_NOTE_DURATION
        self.set_note_duration(note_duration)

    def set_note_duration(self, seconds: float) -> float:
        """Set the time between question notes, clamped to the allowed range.

        Returns:
            The duration actually applied
        """
        clamped = max(self.min_duration, min(self.max_duration, float(seconds)))
        if clamped != seconds:
            logger.warning(
                f"Note duration {seconds:.2f}s out of range "
                f"[{self.min_duration:.2f}, {self.max_duration:.2f}], using {clamped:.2f}s"
            )
        self.note_duration = clamped
        return clamped

    def schedule(self, question: Sequence[str]) -> List[PlaybackEvent]:
        """Compute when each clip starts, in seconds from the play request."""
        events = [PlaybackEvent(self.lead_in, self.reference_key, is_reference=True)]
        start = self.lead_in + self.reference_gap
        for i, token in enumerate(question):
            events.append(
                PlaybackEvent(start + i * self.note_duration, token_to_asset_key(token))
            )
        return events

    def total_duration(self, question: Sequence[str]) -> float:
        """Time taken by play_question, including the last note's slot."""
        events = self.schedule(question)
        return events[-1].offset + self.note_duration

    def play_question(self, question: Sequence[str]) -> List[PlaybackEvent]:
        """Play the reference note and the question, blocking until the last slot ends.

        Missing clips are logged and leave their slot silent.

        Returns:
            The events that were scheduled
        """
        events = self.schedule(question)
        logger.debug(
            "Playing %s with %.2fs per note",
            [e.asset_key for e in events],
            self.note_duration,
        )

        elapsed = 0.0
        for event in events:
            wait = event.offset - elapsed
            if wait > 0:
                self._sleep(wait)
                elapsed = event.offset
            self.player.stop()
            clip = self.assets.load(event.asset_key)
            if clip is None:
                logger.warning(f"Skipping '{event.asset_key}': clip unavailable")
                continue
            self.player.play(clip)

        self._sleep(self.note_duration)
        self.player.stop()
        return events
