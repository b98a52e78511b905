#!/usr/bin/env python3
"""
Terminal Wordle — Curses UI with color feedback and on-screen keyboard.
Features:
- Classic Wordle rules: 6 guesses to find a 5-letter word
- Colored tile feedback: green (correct), yellow (wrong position), gray (not in word)
- On-screen keyboard showing the best-known state of every letter
- Words that are not in the list turn red as soon as they are typed
- Optional word files, seeded games and a log file (see --help)
- Keys: a-z=type, backspace=delete, enter=submit, n/space=new game,
  q=quit after a game, esc=quit
"""

import argparse
import curses
import json
import logging
import os
import sys

from wordle_core import (
    MAX_GUESSES,
    WORD_LENGTH,
    Game,
    GameStatus,
    LetterState,
    SubmitResult,
)
from wordle_words import WordListError, WordSource, default_word_source

logger = logging.getLogger("wordle")

# Smallest terminal the layout fits in
MIN_WIDTH = 50
MIN_HEIGHT = 24

SETTINGS_FILE = os.path.join(os.path.expanduser("~"), ".wordle_settings")

DEFAULT_SETTINGS = {
    "force": False,
    "log_file": None,
    "log_level": "INFO",
    "words": None,
    "guesses": None,
}

KEYBOARD_ROWS = [
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
]

KEY_ESC = 27

# ---------------------------------------------------------------------------
# Color pair indices
# ---------------------------------------------------------------------------
COLOR_TITLE = 1
COLOR_CORRECT = 2
COLOR_PRESENT = 3
COLOR_ABSENT = 4
COLOR_BORDER = 5
COLOR_STATUS = 6
COLOR_WIN = 7
COLOR_LOSE = 8
COLOR_INPUT = 9
COLOR_EMPTY_TILE = 10
COLOR_INVALID = 11


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_CORRECT, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(COLOR_PRESENT, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(COLOR_ABSENT, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(COLOR_BORDER, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_WIN, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_LOSE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_INPUT, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_EMPTY_TILE, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_INVALID, curses.COLOR_WHITE, curses.COLOR_RED)


# ---------------------------------------------------------------------------
# Settings and logging
# ---------------------------------------------------------------------------
def load_settings(path=None):
    """Load settings from a JSON file, falling back to the defaults.

    A missing, unreadable or malformed file gives the defaults.
    """
    if path is None:
        path = SETTINGS_FILE
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return settings
    if isinstance(data, dict):
        settings.update({k: v for k, v in data.items() if k in settings})
    return settings


def configure_logging(log_file=None, level="INFO"):
    """Send log records to log_file, or nowhere.

    The terminal belongs to curses, so there is never a console handler.
    Raises OSError if log_file cannot be opened; the previous handlers are
    left in place in that case.
    """
    if log_file:
        numeric = getattr(logging, str(level).upper(), None)
        if not isinstance(numeric, int):
            numeric = logging.INFO
        new_handler = logging.FileHandler(log_file, encoding="utf-8")
        new_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
    else:
        new_handler = logging.NullHandler()

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.addHandler(new_handler)
    if log_file:
        root.setLevel(numeric)
    return root


def parse_args(argv=None, settings=None):
    """Parse command-line options; settings supply the defaults."""
    if settings is None:
        settings = DEFAULT_SETTINGS
    parser = argparse.ArgumentParser(
        prog="wordle",
        description="Guess the hidden five-letter word in six tries.")
    parser.add_argument("-f", "--force", action="store_true",
                        default=bool(settings["force"]),
                        help="play even if the terminal is too small")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for reproducible target words")
    parser.add_argument("--words", default=settings["words"],
                        help="file of possible target words, one per line")
    parser.add_argument("--guesses", default=settings["guesses"],
                        help="file of extra legal guesses, one per line")
    parser.add_argument("--log-file", default=settings["log_file"],
                        help="write a game log to this file")
    parser.add_argument("--log-level", default=settings["log_level"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="log level (default: INFO)")
    return parser.parse_args(argv)


def build_word_source(words=None, guesses=None, seed=None):
    """Word source from the given files, or the built-in lists."""
    if words:
        return WordSource.from_files(words, guesses, rng=seed)
    if guesses:
        raise WordListError("--guesses needs --words as well")
    return default_word_source(rng=seed)


# ---------------------------------------------------------------------------
# Key handling (no curses drawing)
# ---------------------------------------------------------------------------
class ShellState:
    """What the screen shows besides the game itself."""

    def __init__(self):
        self.current_input = ""
        self.message = "Guess a 5-letter word!"
        self.msg_kind = "status"
        self.wins = 0
        self.games = 0
        self.quit = False

    def new_game(self):
        self.current_input = ""
        self.message = "Guess a 5-letter word!"
        self.msg_kind = "status"


def submit_input(game, ui):
    """Submit the typed word and set the message for the outcome."""
    outcome = game.submit(ui.current_input)

    if outcome is SubmitResult.INVALID_LENGTH:
        ui.message = "Not enough letters!"
        ui.msg_kind = "error"
        return outcome
    if outcome is SubmitResult.ILLEGAL_WORD:
        ui.message = "Not in word list!"
        ui.msg_kind = "error"
        return outcome
    if outcome is SubmitResult.GAME_OVER:
        return outcome

    session = game.current_session()
    if session.status is GameStatus.WON:
        ui.wins += 1
        ui.games += 1
        ui.message = (f"Brilliant! You got it in {session.guesses_made}! "
                      "Press 'n' for new game.")
        ui.msg_kind = "win"
    elif session.status is GameStatus.LOST:
        ui.games += 1
        ui.message = (f"The word was \"{session.target.upper()}\". "
                      "Press 'n' for new game.")
        ui.msg_kind = "lose"
    else:
        remaining = session.guesses_left
        ui.message = f"{remaining} guess{'es' if remaining != 1 else ''} remaining."
        ui.msg_kind = "status"

    ui.current_input = ""
    return outcome


def handle_key(game, ui, ch):
    """Apply one key press to the game and the shell state."""
    if ch == KEY_ESC:
        ui.quit = True
        return

    if game.current_session().game_over:
        if ch in (ord('n'), ord('N'), ord(' ')):
            game.restart()
            ui.new_game()
        elif ch in (ord('q'), ord('Q')):
            ui.quit = True
        return

    # Backspace
    if ch in (curses.KEY_BACKSPACE, 127, 8):
        if ui.current_input:
            ui.current_input = ui.current_input[:-1]
            ui.message = ""
        game.clear_invalid()
        return

    # Enter — submit guess
    if ch in (curses.KEY_ENTER, 10, 13):
        submit_input(game, ui)
        return

    # Letter keys a-z (upper case is folded to lower)
    if ord('A') <= ch <= ord('Z'):
        ch += 32
    if ord('a') <= ch <= ord('z'):
        if len(ui.current_input) < WORD_LENGTH:
            ui.current_input += chr(ch)
            ui.message = ""
            game.check_entry(ui.current_input)


# ---------------------------------------------------------------------------
# Screen layout (no curses calls)
# ---------------------------------------------------------------------------
TILE_INPUT = "input"
TILE_INVALID = "invalid"
TILE_BLANK = "blank"
TILE_FUTURE = "future"

SUBTITLE = "Guess the Hidden Word!"
HELP_LINE = " a-z=Type  Enter=Submit  Bksp=Delete  n=New  Esc=Quit "


def center_x(width, text):
    """Column that centers text on a line of the given width."""
    return max(0, (width - len(text)) // 2)


def grid_cells(session, current_input):
    """Yield (row, col, letter, kind) for every tile of the guess grid.

    kind is the LetterState of a submitted letter, or one of the TILE_*
    names for the entry row and the rows still to come.
    """
    entry_row = MAX_GUESSES if session.game_over else session.guesses_made
    entry_kind = TILE_INVALID if session.invalid_pending else TILE_INPUT
    for row in range(MAX_GUESSES):
        if row < session.guesses_made:
            record = session.records[row]
            for col, (letter, state) in enumerate(zip(record.word,
                                                      record.result)):
                yield row, col, letter, state
        elif row == entry_row:
            for col in range(WORD_LENGTH):
                if col < len(current_input):
                    yield row, col, current_input[col], entry_kind
                else:
                    yield row, col, "_", TILE_BLANK
        else:
            for col in range(WORD_LENGTH):
                yield row, col, "·", TILE_FUTURE


def keyboard_cells(keyboard):
    """Yield (row, offset, letter, state) for each on-screen key.

    Rows are staggered two columns apart, keys are four columns wide.
    """
    for ri, keys in enumerate(KEYBOARD_ROWS):
        for ci, letter in enumerate(keys):
            state = keyboard.get(letter, LetterState.UNKNOWN)
            yield ri, ri * 2 + ci * 4, letter, state


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------
# (color pair, bold) per tile kind; UNKNOWN is an untouched keyboard key
TILE_STYLES = {
    LetterState.CORRECT: (COLOR_CORRECT, True),
    LetterState.PRESENT: (COLOR_PRESENT, True),
    LetterState.ABSENT: (COLOR_ABSENT, False),
    LetterState.UNKNOWN: (COLOR_BORDER, True),
    TILE_INPUT: (COLOR_INPUT, True),
    TILE_INVALID: (COLOR_INVALID, True),
}

MESSAGE_COLORS = {
    "win": COLOR_WIN,
    "lose": COLOR_LOSE,
    "error": COLOR_LOSE,
}


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def tile_attr(kind):
    """curses attribute for a grid tile or keyboard key."""
    pair, bold = TILE_STYLES.get(kind, (COLOR_EMPTY_TILE, False))
    attr = curses.color_pair(pair)
    return attr | curses.A_BOLD if bold else attr


def message_attr(kind):
    return curses.color_pair(MESSAGE_COLORS.get(kind, COLOR_STATUS)) | curses.A_BOLD


def draw_rule(win, y, width):
    safe_addstr(win, y, 0, "═" * width, curses.color_pair(COLOR_BORDER))


def draw_title(win, width):
    """Title on the top rule, subtitle underneath."""
    title = " ★ WORDLE ★ "
    draw_rule(win, 0, width)
    safe_addstr(win, 0, center_x(width, title), title,
                curses.color_pair(COLOR_TITLE) | curses.A_BOLD)
    safe_addstr(win, 1, center_x(width, SUBTITLE), SUBTITLE,
                curses.color_pair(COLOR_STATUS))


def draw_grid(win, y, x, session, current_input):
    """Draw the 6x5 guess grid with colored feedback."""
    for row, col, letter, kind in grid_cells(session, current_input):
        safe_addstr(win, y + row * 2, x + col * 5, f" {letter.upper()} ",
                    tile_attr(kind))


def draw_keyboard(win, y, x, keyboard):
    """Draw the on-screen keyboard showing letter states."""
    for row, offset, letter, state in keyboard_cells(keyboard):
        safe_addstr(win, y + row * 2, x + offset, f" {letter.upper()} ",
                    tile_attr(state))


def draw_status_bar(win, y, width, ui):
    """Message line, bottom rule, key help and score."""
    if ui.message:
        safe_addstr(win, y - 1, center_x(width, ui.message), ui.message,
                    message_attr(ui.msg_kind))
    draw_rule(win, y, width)
    status = curses.color_pair(COLOR_STATUS) | curses.A_BOLD
    safe_addstr(win, y + 1, 0, HELP_LINE, status)
    score = f" Score: {ui.wins}/{ui.games} "
    safe_addstr(win, y + 1, width - len(score) - 1, score, status)


def show_too_small(stdscr, width, height):
    """Explain the minimum size and wait for 'q'."""
    safe_addstr(stdscr, 0, 0,
                f"Terminal too small! Need {MIN_WIDTH}x{MIN_HEIGHT} minimum.",
                curses.color_pair(COLOR_LOSE))
    safe_addstr(stdscr, 1, 0, f"Current: {width}x{height}",
                curses.color_pair(COLOR_LOSE))
    safe_addstr(stdscr, 2, 0, "Run with -f to play anyway.",
                curses.color_pair(COLOR_STATUS))
    safe_addstr(stdscr, 3, 0, "Press 'q' to quit.",
                curses.color_pair(COLOR_STATUS))
    stdscr.refresh()
    while stdscr.getch() not in (ord('q'), ord('Q')):
        pass


# ---------------------------------------------------------------------------
# Main game
# ---------------------------------------------------------------------------
def main(stdscr, game=None, force=False):
    """Main curses game loop."""
    stdscr.clear()
    init_colors()
    curses.curs_set(0)

    height, width = stdscr.getmaxyx()
    if (height < MIN_HEIGHT or width < MIN_WIDTH) and not force:
        logger.warning("terminal is %dx%d, need %dx%d",
                       width, height, MIN_WIDTH, MIN_HEIGHT)
        show_too_small(stdscr, width, height)
        return

    if game is None:
        game = Game()
    ui = ShellState()

    def redraw():
        """Redraw the entire screen."""
        stdscr.erase()
        draw_title(stdscr, width)

        # Grid
        grid_x = max(0, (width - WORD_LENGTH * 5) // 2)
        grid_y = 3
        draw_grid(stdscr, grid_y, grid_x, game.current_session(),
                  ui.current_input)

        # Keyboard
        kb_y = grid_y + MAX_GUESSES * 2 + 1
        kb_x = max(0, (width - 42) // 2)
        draw_keyboard(stdscr, kb_y, kb_x, game.keyboard_status())

        # Status bar
        draw_status_bar(stdscr, height - 3, width, ui)

        stdscr.refresh()

    # Main loop
    while True:
        redraw()
        ch = stdscr.getch()
        if ch == curses.KEY_RESIZE:
            height, width = stdscr.getmaxyx()
            continue
        handle_key(game, ui, ch)
        if ui.quit:
            break

    logger.info("quit after %d games, %d won", ui.games, ui.wins)


def run(argv=None):
    """Command-line entry point."""
    args = parse_args(argv, load_settings())
    try:
        configure_logging(args.log_file, args.log_level)
    except OSError as e:
        print(f"wordle: cannot open log file {args.log_file}: {e}",
              file=sys.stderr)
        return 1

    try:
        word_source = build_word_source(args.words, args.guesses, args.seed)
    except WordListError as e:
        print(f"wordle: {e}", file=sys.stderr)
        return 1

    try:
        curses.wrapper(main, Game(word_source), args.force)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(run())
