import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .core.events import QuizEvents, QuizEventType
from .logger import get_logger
from .note_matcher import NoteMatcher
from .note_types import AnswerStatus, Question, QuizState
from .note_utils import apply_sharp, display_sequence
from .questions import NOTES_PER_QUESTION, load_question_pool

# Get logger for this module
logger = get_logger(__name__)

INCOMPLETE_PROMPT = f"You must enter all {NOTES_PER_QUESTION} notes."


@dataclass
class AnswerResult:
    """What happened when an answer was submitted."""

    status: AnswerStatus
    message: str
    score: int
    correct_display: str = ""  # e.g. 'Fa, Sol, La, Si'
    answer_display: str = ""
    finished: bool = False

    @property
    def is_correct(self) -> bool:
        return self.status is AnswerStatus.CORRECT


@dataclass
class QuizSettings:
    total_questions: int = 15
    reward: int = 250
    retry_on_incorrect: bool = False


class QuizSession:
    """A melodic dictation quiz: four notes per question, fixed reward per correct answer."""

    def __init__(
        self,
        question_pool: Optional[Sequence[str]] = None,
        settings: Optional[QuizSettings] = None,
        rng: Optional[random.Random] = None,
        events: Optional[QuizEvents] = None,
    ) -> None:
        """Initialize the session.

        Args:
            question_pool: Pool entries such as "do re mi fa"; the built-in pool by default.
                Every token is validated here, so bad pool data fails before play starts
            settings: Question count, reward and retry behaviour
            rng: Random source used to draw questions, injectable for tests
            events: Event hub that the feedback surface listens to
        """
        self.questions: List[Question] = load_question_pool(question_pool)
        if not self.questions:
            raise ValueError("Question pool is empty")

        self.settings = settings or QuizSettings()
        self.rng = rng or random.Random()
        self.events = events or QuizEvents()

        # Session state
        self.state = QuizState.AWAITING_ANSWER
        self.question_number = 0
        self.score = 0
        self.current_question: Optional[Question] = None
        self.answer: List[str] = []
        self.started = False

        logger.debug(
            "QuizSession initialized with %d questions in pool", len(self.questions)
        )

    @property
    def max_score(self) -> int:
        return self.settings.total_questions * self.settings.reward

    @property
    def finished(self) -> bool:
        return self.state is QuizState.TERMINAL

    @property
    def answer_complete(self) -> bool:
        return len(self.answer) == NOTES_PER_QUESTION

    def start(self) -> Optional[Question]:
        """Reset the score and draw the first question."""
        self.state = QuizState.AWAITING_ANSWER
        self.question_number = 0
        self.score = 0
        self.answer = []
        self.current_question = None
        self.started = True
        logger.info(
            "Quiz started: %d questions, %d points each",
            self.settings.total_questions,
            self.settings.reward,
        )
        return self.next_question()

    def next_question(self) -> Optional[Question]:
        """Advance to a new random question, or finish once the question count is reached.

        Questions are independent draws, so repeats within a session are possible.
        """
        if self.finished:
            return None

        if self.question_number >= self.settings.total_questions:
            self.state = QuizState.TERMINAL
            self.current_question = None
            self.answer = []
            logger.info("Quiz finished. %s", self.final_report())
            self.events.emit(QuizEventType.QUIZ_FINISHED, self.score, self.max_score)
            return None

        self.question_number += 1
        self.current_question = self.rng.choice(self.questions)
        self.answer = []
        self.state = QuizState.AWAITING_ANSWER

        logger.debug(
            "Question %d/%d: %s",
            self.question_number,
            self.settings.total_questions,
            " ".join(self.current_question),
        )
        self.events.emit(
            QuizEventType.QUESTION_STARTED,
            self.question_number,
            self.settings.total_questions,
        )
        return self.current_question

    def append_note(self, token: str, sharp: bool = False) -> bool:
        """Add a note to the answer.

        Args:
            token: Palette token such as 'si3' or 'do4'
            sharp: Insert a sharp before the octave digit ('fa4' -> 'fa#4')

        Returns:
            bool: False if the answer is already full or the quiz is over

        Raises:
            NoteFormatError: If the token is not a recognizable note
        """
        if self.finished or not self.started:
            return False
        if self.answer_complete:
            logger.debug("Answer already holds %d notes, ignoring '%s'", NOTES_PER_QUESTION, token)
            return False

        if sharp:
            token = apply_sharp(token)

        NoteMatcher.normalize(token)
        self.answer.append(token)
        self.events.emit(QuizEventType.ANSWER_CHANGED, list(self.answer))
        return True

    def clear_answer(self) -> None:
        """Empty the answer buffer."""
        self.answer = []
        self.events.emit(QuizEventType.ANSWER_CHANGED, [])

    def submit_answer(self) -> AnswerResult:
        """Validate the current answer against the question."""
        if not self.started:
            raise RuntimeError("Quiz not started. Call start() first.")

        if self.finished:
            return AnswerResult(
                status=AnswerStatus.CLOSED,
                message=self.final_report(),
                score=self.score,
                finished=True,
            )

        if not self.answer_complete:
            self.events.emit(QuizEventType.ANSWER_INCOMPLETE, INCOMPLETE_PROMPT)
            return AnswerResult(
                status=AnswerStatus.INCOMPLETE,
                message=INCOMPLETE_PROMPT,
                score=self.score,
            )

        self.state = QuizState.VALIDATING
        question = self.current_question
        answer = list(self.answer)
        correct = NoteMatcher.sequences_match(question, answer)

        correct_display = display_sequence(question)
        answer_display = display_sequence(answer)

        if correct:
            self.score += self.settings.reward
            logger.info(
                "Correct answer to question %d: %s (score %d)",
                self.question_number,
                correct_display,
                self.score,
            )
            result_status = AnswerStatus.CORRECT
            message = "Correct answer!"
        else:
            logger.info(
                "Incorrect answer to question %d: expected %s, got %s",
                self.question_number,
                correct_display,
                answer_display,
            )
            result_status = AnswerStatus.INCORRECT
            message = (
                "Incorrect answer.\n"
                f"Correct: {correct_display}\n"
                f"Your answer: {answer_display}"
            )

        result = AnswerResult(
            status=result_status,
            message=message,
            score=self.score,
            correct_display=correct_display,
            answer_display=answer_display,
        )
        self.events.emit(
            QuizEventType.ANSWER_CORRECT if correct else QuizEventType.ANSWER_INCORRECT,
            result,
        )

        if correct or not self.settings.retry_on_incorrect:
            self.next_question()
        else:
            self.answer = []
            self.state = QuizState.AWAITING_ANSWER

        result.finished = self.finished
        return result

    def final_report(self) -> str:
        return f"Final score: {self.score} / {self.max_score}"
