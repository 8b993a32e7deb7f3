import click
import pyfiglet
from typing import List, Optional

from .audio.sequencer import MAX_NOTE_DURATION, MIN_NOTE_DURATION, PlaybackSequencer
from .core.events import QuizEventType
from .logger import get_logger
from .note_matcher import NoteFormatError
from .note_utils import display_sequence
from .questions import NOTE_PALETTE
from .quiz_session import AnswerResult, QuizSession

# Get logger for this module
logger = get_logger(__name__)

HELP_TEXT = """Commands:
  <note>     add a note to your answer ({palette})
  #          next note is sharp
  l          listen to the question
  c          clear your answer
  v          submit your answer
  n          skip to the next question
  d <secs>   set time between notes ({min:.2f}-{max:.2f})
  h          show this help
  q          quit"""


class TerminalUI:
    """Terminal front end for a quiz session"""

    def __init__(self, session: QuizSession, sequencer: Optional[PlaybackSequencer] = None):
        self.session = session
        self.sequencer = sequencer
        self.sharp_next = False
        self.palette = {token.upper(): token for token in NOTE_PALETTE}
        self._attached = False

    def attach(self) -> None:
        """Subscribe to session events"""
        if self._attached:
            return
        events = self.session.events
        events.on(QuizEventType.QUESTION_STARTED, self.on_question_started)
        events.on(QuizEventType.ANSWER_CHANGED, self.on_answer_changed)
        events.on(QuizEventType.ANSWER_INCOMPLETE, self.on_answer_incomplete)
        events.on(QuizEventType.ANSWER_CORRECT, self.on_answer_result)
        events.on(QuizEventType.ANSWER_INCORRECT, self.on_answer_result)
        events.on(QuizEventType.QUIZ_FINISHED, self.on_quiz_finished)
        self._attached = True

    # Event handlers

    def on_question_started(self, number: int, total: int) -> None:
        click.echo("")
        click.secho(f"Question {number} of {total}", bold=True)
        click.echo(f"Score: {self.session.score}")

    def on_answer_changed(self, answer: List[str]) -> None:
        click.echo(f"Answer: [{display_sequence(answer)}]")

    def on_answer_incomplete(self, message: str) -> None:
        click.secho(message, fg="yellow")

    def on_answer_result(self, result: AnswerResult) -> None:
        if result.is_correct:
            click.secho(result.message, fg="green")
        else:
            click.secho(result.message, fg="red")
            if self.session.settings.retry_on_incorrect:
                click.echo("Listen again (l) and retry, or skip (n).")

    def on_quiz_finished(self, score: int, max_score: int) -> None:
        click.echo(pyfiglet.figlet_format(f"{score} / {max_score}"))
        click.secho(f"You have finished the quiz. {self.session.final_report()}", bold=True)

    # Commands

    def show_help(self) -> None:
        min_d = self.sequencer.min_duration if self.sequencer else MIN_NOTE_DURATION
        max_d = self.sequencer.max_duration if self.sequencer else MAX_NOTE_DURATION
        click.echo(
            HELP_TEXT.format(palette=", ".join(NOTE_PALETTE), min=min_d, max=max_d)
        )

    def listen(self) -> None:
        if self.session.finished or not self.session.current_question:
            return
        if self.sequencer is None:
            click.echo("Audio is not available.")
            return
        self.sequencer.play_question(self.session.current_question)

    def set_duration(self, value: str) -> None:
        if self.sequencer is None:
            click.echo("Audio is not available.")
            return
        try:
            seconds = float(value)
        except ValueError:
            click.secho(f"Invalid duration: {value}", fg="yellow")
            return
        applied = self.sequencer.set_note_duration(seconds)
        click.echo(f"Time between notes: {applied:.2f} s")

    def add_note(self, token: str) -> None:
        try:
            added = self.session.append_note(token, sharp=self.sharp_next)
        except NoteFormatError as e:
            click.secho(str(e), fg="yellow")
            return
        if added:
            self.sharp_next = False

    def handle_command(self, line: str) -> bool:
        """Handle one line of input.

        Returns:
            False when the user wants to quit
        """
        parts = line.strip().split()
        if not parts:
            return True
        command = parts[0].lower()

        if command in ("q", "quit"):
            return False
        if command in ("h", "help", "?"):
            self.show_help()
        elif command == "#":
            self.sharp_next = not self.sharp_next
            click.echo(f"Sharp: {'on' if self.sharp_next else 'off'}")
        elif command in ("l", "listen"):
            self.listen()
        elif command in ("c", "clear"):
            self.session.clear_answer()
        elif command in ("v", "submit"):
            self.session.submit_answer()
        elif command in ("n", "next"):
            self.session.next_question()
        elif command in ("d", "duration") and len(parts) == 2:
            self.set_duration(parts[1])
        elif command.upper() in self.palette:
            self.add_note(self.palette[command.upper()])
        else:
            click.secho(f"Unknown command: {line.strip()} (h for help)", fg="yellow")
        return not self.session.finished

    def run(self) -> int:
        """Run the quiz until it finishes or the user quits.

        Returns:
            The final score
        """
        self.attach()
        click.echo(pyfiglet.figlet_format("Dictation"))
        self.show_help()
        self.session.start()
        self.listen()

        while not self.session.finished:
            try:
                line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
            except click.Abort:
                logger.info("Input closed, leaving the quiz")
                break
            if not self.handle_command(line):
                break

        return self.session.score
