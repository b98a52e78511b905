"""
Game logic for Terminal Wordle (no curses dependency).

evaluate_guess scores a guess against the target, KeyboardTracker keeps the
best-known state of every letter, Session holds one game and Game ties them
to a word source for the terminal shell.
"""

import logging
import string
from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum

from wordle_words import WORD_LENGTH, default_word_source

logger = logging.getLogger(__name__)

# Maximum guesses allowed
MAX_GUESSES = 6

ALPHABET = string.ascii_lowercase


class LetterState(IntEnum):
    """Feedback for one letter. Higher values are better-known."""
    UNKNOWN = 0
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class SubmitResult(Enum):
    """Outcome of Game.submit()."""
    ACCEPTED = "accepted"
    INVALID_LENGTH = "invalid_length"
    ILLEGAL_WORD = "illegal_word"
    GAME_OVER = "game_over"


# ---------------------------------------------------------------------------
# Guess evaluation
# ---------------------------------------------------------------------------
def evaluate_guess(guess, target):
    """Evaluate a guess against the target word.

    Returns a list of WORD_LENGTH states, each CORRECT, PRESENT or ABSENT.
    Exact matches are resolved before misplaced letters, so a letter is never
    marked more times than it occurs in the target.
    """
    result = [LetterState.ABSENT] * WORD_LENGTH
    remaining = Counter(target)

    # First pass: letters in the right position
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            result[i] = LetterState.CORRECT
            remaining[guess[i]] -= 1

    # Second pass: misplaced letters, while the target still has some left
    for i in range(WORD_LENGTH):
        if result[i] == LetterState.CORRECT:
            continue
        if remaining[guess[i]] > 0:
            result[i] = LetterState.PRESENT
            remaining[guess[i]] -= 1

    return result


def check_win(result):
    """Return True if all letters are correct."""
    return all(r == LetterState.CORRECT for r in result)


# ---------------------------------------------------------------------------
# Keyboard tracking
# ---------------------------------------------------------------------------
class KeyboardTracker:
    """Best state seen so far for each letter of the alphabet.

    States only move up: UNKNOWN < ABSENT < PRESENT < CORRECT.
    """

    def __init__(self):
        self._states = {}

    def record(self, letter, state):
        letter = letter.lower()
        self._states[letter] = max(self.status_of(letter), LetterState(state))

    def record_guess(self, guess, result):
        """Record every letter of an evaluated guess."""
        for letter, state in zip(guess, result):
            self.record(letter, state)

    def status_of(self, letter):
        return self._states.get(letter.lower(), LetterState.UNKNOWN)

    def reset(self):
        self._states.clear()

    def snapshot(self):
        """Return a dict mapping each letter a-z to its state."""
        return {letter: self.status_of(letter) for letter in ALPHABET}


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GuessRecord:
    word: str
    result: tuple

    @property
    def is_win(self):
        return check_win(self.result)


class Session:
    """One game: the target word and the guesses made against it."""

    def __init__(self, target):
        self.target = target
        self.records = []
        self.status = GameStatus.IN_PROGRESS
        # Set while the entry is a full-length word that is not in the list
        self.invalid_pending = False

    @property
    def guesses_made(self):
        return len(self.records)

    @property
    def guesses_left(self):
        return MAX_GUESSES - len(self.records)

    @property
    def game_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def won(self):
        return self.status is GameStatus.WON

    def add_record(self, record):
        """Append an evaluated guess and advance the status."""
        if self.game_over:
            raise RuntimeError("session is already over")
        self.records.append(record)
        self.invalid_pending = False
        if record.is_win:
            self.status = GameStatus.WON
        elif len(self.records) >= MAX_GUESSES:
            self.status = GameStatus.LOST


def normalize_guess(text):
    """Trim whitespace and lowercase typed text."""
    return text.strip().lower()


class Game:
    """A word source plus the current session and keyboard.

    The terminal shell only talks to this class: submit() and restart()
    change state, current_session() and keyboard_status() read it.
    """

    def __init__(self, word_source=None):
        if word_source is None:
            word_source = default_word_source()
        self.word_source = word_source
        self.keyboard = KeyboardTracker()
        self.session = None
        self.restart()

    def restart(self):
        """Start a new session with a fresh target and a clear keyboard."""
        self.session = Session(self.word_source.random_target())
        self.keyboard.reset()
        logger.info("new session started")
        logger.debug("target is %r", self.session.target)
        return self.session

    def current_session(self):
        return self.session

    def keyboard_status(self):
        return self.keyboard.snapshot()

    def check_entry(self, text):
        """Flag a complete entry that is not a legal guess.

        Returns the new value of the session's invalid_pending flag.
        """
        session = self.session
        if session.game_over:
            return False
        guess = normalize_guess(text)
        session.invalid_pending = (len(guess) == WORD_LENGTH and
                                   not self.word_source.is_legal_guess(guess))
        return session.invalid_pending

    def clear_invalid(self):
        self.session.invalid_pending = False

    def submit(self, text):
        """Submit a guess and return a SubmitResult.

        Rejected guesses leave the session's history untouched.
        """
        session = self.session
        if session.game_over:
            logger.debug("guess %r ignored, game is over", text)
            return SubmitResult.GAME_OVER

        guess = normalize_guess(text)
        if len(guess) != WORD_LENGTH:
            logger.debug("rejected %r: wrong length", guess)
            return SubmitResult.INVALID_LENGTH
        if not self.word_source.is_legal_guess(guess):
            logger.debug("rejected %r: not in word list", guess)
            session.invalid_pending = True
            return SubmitResult.ILLEGAL_WORD

        result = tuple(evaluate_guess(guess, session.target))
        session.add_record(GuessRecord(guess, result))
        self.keyboard.record_guess(guess, result)
        logger.info("guess %d accepted", session.guesses_made)

        if session.status is GameStatus.WON:
            logger.info("session won in %d guesses", session.guesses_made)
        elif session.status is GameStatus.LOST:
            logger.info("session lost after %d guesses", MAX_GUESSES)
        return SubmitResult.ACCEPTED
