#!/usr/bin/env python3
"""
Test suite for wordle.py — Terminal Wordle shell
Tests structure, settings, command-line options and key handling.
These tests run WITHOUT a terminal (no curses rendering).
"""

import ast
import json
import logging
import os
import stat
import tempfile
import unittest

from wordle_core import Game, GameStatus, LetterState
from wordle_words import WordListError, WordSource

# Path to the script under test
WORDLE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           "wordle.py")

ENTER = 10
BACKSPACE = 127
ESC = 27


def load_source():
    """Load wordle.py source code as a string."""
    with open(WORDLE_PATH, "r", encoding="utf-8") as f:
        return f.read()


def parse_ast():
    """Parse wordle.py into an AST tree."""
    return ast.parse(load_source())


def import_module():
    """Import wordle.py as a module (without running main).

    Strips the if __name__ == "__main__" block and execs everything else
    into a namespace, avoiding curses initialization.
    """
    tree = parse_ast()

    new_body = []
    for node in tree.body:
        if isinstance(node, ast.If):
            test = node.test
            if (isinstance(test, ast.Compare) and
                isinstance(test.left, ast.Name) and
                    test.left.id == "__name__"):
                continue
        new_body.append(node)

    tree.body = new_body
    ast.fix_missing_locations(tree)

    code = compile(tree, WORDLE_PATH, "exec")
    namespace = {"__file__": WORDLE_PATH, "__name__": "wordle"}
    exec(code, namespace)
    return namespace


def find_all_functions(tree):
    """Find all function definitions in the AST (including nested)."""
    functions = {}
    for node in ast.walk(tree):
        if isinstance(node, ast.FunctionDef):
            functions[node.name] = node
    return functions


def find_all_string_literals(tree):
    """Find all string literals in the AST."""
    strings = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Constant) and isinstance(node.value, str):
            strings.append(node.value)
    return strings


def make_game():
    """Game whose target is always 'crane'."""
    return Game(WordSource(["crane"], ["stale", "slate", "crate", "trace",
                                       "hello", "berry", "abbey"]))


def type_keys(ns, game, ui, text):
    """Feed each character of text to handle_key."""
    for ch in text:
        ns["handle_key"](game, ui, ord(ch))


def save_root_logging():
    """Snapshot the root logger's handlers and level."""
    root = logging.getLogger()
    return list(root.handlers), root.level


def restore_root_logging(saved):
    """Close handlers added since save_root_logging() and put the old ones back."""
    handlers, level = saved
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


# =============================================================================
# 1. FILE STRUCTURE TESTS
# =============================================================================

class TestFileStructure(unittest.TestCase):
    """Tests that wordle.py has the right file-level properties."""

    def test_file_is_executable(self):
        """wordle.py must have the executable bit set."""
        mode = os.stat(WORDLE_PATH).st_mode
        self.assertTrue(mode & stat.S_IXUSR,
                        "wordle.py is not executable")

    def test_has_shebang(self):
        """First line must be a Python shebang."""
        first_line = load_source().split("\n")[0]
        self.assertTrue(first_line.startswith("#!"),
                        "Missing shebang line")
        self.assertIn("python", first_line.lower())

    def test_has_docstring(self):
        """Module must have a docstring."""
        docstring = ast.get_docstring(parse_ast())
        self.assertIsNotNone(docstring, "Missing module docstring")

    def test_stdlib_and_project_imports_only(self):
        """Must only import the standard library and the game modules."""
        allowed = {"argparse", "curses", "json", "logging", "os", "sys",
                   "wordle_core", "wordle_words"}
        for node in ast.walk(parse_ast()):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    self.assertIn(alias.name.split(".")[0], allowed,
                                  f"Unexpected import: {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module:
                    self.assertIn(node.module.split(".")[0], allowed,
                                  f"Unexpected import: {node.module}")


# =============================================================================
# 2. REQUIRED COMPONENTS
# =============================================================================

class TestRequiredComponents(unittest.TestCase):
    """Tests for essential shell components."""

    @classmethod
    def setUpClass(cls):
        cls.source = load_source()
        cls.functions = find_all_functions(parse_ast())

    def test_main_accepts_stdscr(self):
        """main() must accept stdscr parameter."""
        main_func = self.functions.get("main")
        self.assertIsNotNone(main_func, "main function not found")
        args = [arg.arg for arg in main_func.args.args]
        self.assertEqual(args[0], "stdscr")

    def test_uses_curses_wrapper(self):
        self.assertIn("curses.wrapper", self.source)

    def test_has_game_loop(self):
        """Must have a game loop (while True)."""
        for node in ast.walk(parse_ast()):
            if isinstance(node, ast.While):
                if isinstance(node.test, ast.Constant) and node.test.value:
                    return
        self.fail("No game loop (while True) found")

    def test_drawing_functions(self):
        for name in ("init_colors", "draw_title", "draw_grid",
                     "draw_keyboard", "draw_status_bar", "safe_addstr"):
            self.assertIn(name, self.functions)

    def test_colors(self):
        for name in ("start_color", "use_default_colors", "init_pair",
                     "COLOR_GREEN", "COLOR_YELLOW", "COLOR_RED", "curs_set"):
            self.assertIn(name, self.source)

    def test_has_unicode_decoration(self):
        all_chars = "".join(find_all_string_literals(parse_ast()))
        self.assertIn("★", all_chars)

    def test_keyboard_rows_cover_alphabet(self):
        ns = import_module()
        letters = "".join(ns["KEYBOARD_ROWS"])
        self.assertEqual(sorted(letters), list("abcdefghijklmnopqrstuvwxyz"))


# =============================================================================
# 3. KEY HANDLING
# =============================================================================

class TestKeyHandling(unittest.TestCase):
    """Tests for handle_key() driving a Game."""

    @classmethod
    def setUpClass(cls):
        cls.ns = import_module()

    def setUp(self):
        self.game = make_game()
        self.ui = self.ns["ShellState"]()

    def press(self, ch):
        self.ns["handle_key"](self.game, self.ui, ch)

    def test_typing_letters(self):
        type_keys(self.ns, self.game, self.ui, "sta")
        self.assertEqual(self.ui.current_input, "sta")

    def test_upper_case_folded(self):
        type_keys(self.ns, self.game, self.ui, "STA")
        self.assertEqual(self.ui.current_input, "sta")

    def test_input_capped_at_word_length(self):
        type_keys(self.ns, self.game, self.ui, "stalest")
        self.assertEqual(self.ui.current_input, "stale")

    def test_non_letters_ignored(self):
        type_keys(self.ns, self.game, self.ui, "s1!t")
        self.assertEqual(self.ui.current_input, "st")

    def test_backspace(self):
        type_keys(self.ns, self.game, self.ui, "sta")
        self.press(BACKSPACE)
        self.assertEqual(self.ui.current_input, "st")

    def test_backspace_on_empty_input(self):
        self.press(BACKSPACE)
        self.assertEqual(self.ui.current_input, "")

    def test_submit_short_word(self):
        type_keys(self.ns, self.game, self.ui, "sta")
        self.press(ENTER)
        self.assertEqual(self.ui.message, "Not enough letters!")
        self.assertEqual(self.ui.msg_kind, "error")
        self.assertEqual(self.ui.current_input, "sta")
        self.assertEqual(self.game.current_session().guesses_made, 0)

    def test_unknown_word_turns_red_while_typing(self):
        type_keys(self.ns, self.game, self.ui, "zzzzz")
        self.assertTrue(self.game.current_session().invalid_pending)

    def test_submit_unknown_word(self):
        type_keys(self.ns, self.game, self.ui, "zzzzz")
        self.press(ENTER)
        self.assertEqual(self.ui.message, "Not in word list!")
        self.assertEqual(self.game.current_session().guesses_made, 0)

    def test_backspace_clears_red(self):
        type_keys(self.ns, self.game, self.ui, "zzzzz")
        self.press(BACKSPACE)
        self.assertFalse(self.game.current_session().invalid_pending)

    def test_submit_valid_guess(self):
        type_keys(self.ns, self.game, self.ui, "stale")
        self.press(ENTER)
        self.assertEqual(self.ui.current_input, "")
        self.assertEqual(self.ui.message, "5 guesses remaining.")
        self.assertEqual(self.game.keyboard_status()["a"],
                         LetterState.CORRECT)

    def test_win(self):
        type_keys(self.ns, self.game, self.ui, "crane")
        self.press(ENTER)
        self.assertEqual(self.game.current_session().status, GameStatus.WON)
        self.assertIn("Brilliant", self.ui.message)
        self.assertEqual(self.ui.msg_kind, "win")
        self.assertEqual((self.ui.wins, self.ui.games), (1, 1))

    def test_loss_reveals_word(self):
        for word in ("stale", "slate", "crate", "trace", "hello", "berry"):
            type_keys(self.ns, self.game, self.ui, word)
            self.press(ENTER)
        self.assertEqual(self.game.current_session().status, GameStatus.LOST)
        self.assertIn("The word was \"CRANE\"", self.ui.message)
        self.assertEqual((self.ui.wins, self.ui.games), (0, 1))

    def test_one_guess_remaining_is_singular(self):
        for word in ("stale", "slate", "crate", "trace", "hello"):
            type_keys(self.ns, self.game, self.ui, word)
            self.press(ENTER)
        self.assertEqual(self.ui.message, "1 guess remaining.")

    def test_typing_ignored_after_game_over(self):
        type_keys(self.ns, self.game, self.ui, "crane")
        self.press(ENTER)
        type_keys(self.ns, self.game, self.ui, "sta")
        self.assertEqual(self.ui.current_input, "")

    def test_new_game_with_n(self):
        type_keys(self.ns, self.game, self.ui, "crane")
        self.press(ENTER)
        self.press(ord('n'))
        session = self.game.current_session()
        self.assertEqual(session.status, GameStatus.IN_PROGRESS)
        self.assertEqual(session.guesses_made, 0)
        self.assertEqual(self.ui.message, "Guess a 5-letter word!")
        self.assertEqual(self.ui.wins, 1)

    def test_new_game_with_space(self):
        type_keys(self.ns, self.game, self.ui, "crane")
        self.press(ENTER)
        self.press(ord(' '))
        self.assertFalse(self.game.current_session().game_over)

    def test_n_types_a_letter_during_game(self):
        self.press(ord('n'))
        self.assertEqual(self.ui.current_input, "n")

    def test_q_types_a_letter_during_game(self):
        self.press(ord('q'))
        self.assertFalse(self.ui.quit)
        self.assertEqual(self.ui.current_input, "q")

    def test_q_quits_after_game_over(self):
        type_keys(self.ns, self.game, self.ui, "crane")
        self.press(ENTER)
        self.press(ord('q'))
        self.assertTrue(self.ui.quit)

    def test_escape_quits(self):
        self.press(ESC)
        self.assertTrue(self.ui.quit)


# =============================================================================
# 4. SETTINGS, OPTIONS AND LOGGING
# =============================================================================

class TestSettings(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.ns = import_module()

    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".json")
        os.close(fd)

    def tearDown(self):
        os.remove(self.path)

    def write(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_missing_file_gives_defaults(self):
        settings = self.ns["load_settings"](self.path + ".missing")
        self.assertEqual(settings, self.ns["DEFAULT_SETTINGS"])

    def test_malformed_file_gives_defaults(self):
        self.write("{not json")
        settings = self.ns["load_settings"](self.path)
        self.assertEqual(settings, self.ns["DEFAULT_SETTINGS"])

    def test_undecodable_file_gives_defaults(self):
        """A settings file that is not UTF-8 falls back to the defaults."""
        with open(self.path, "wb") as f:
            f.write(b'\xff\xfe{"force": true}')
        settings = self.ns["load_settings"](self.path)
        self.assertEqual(settings, self.ns["DEFAULT_SETTINGS"])

    def test_default_path_is_settings_file(self):
        self.write(json.dumps({"force": True}))
        saved = self.ns["SETTINGS_FILE"]
        self.ns["SETTINGS_FILE"] = self.path
        try:
            self.assertTrue(self.ns["load_settings"]()["force"])
        finally:
            self.ns["SETTINGS_FILE"] = saved

    def test_values_override_defaults(self):
        self.write(json.dumps({"force": True, "bogus": 1}))
        settings = self.ns["load_settings"](self.path)
        self.assertTrue(settings["force"])
        self.assertNotIn("bogus", settings)

    def test_settings_feed_option_defaults(self):
        self.write(json.dumps({"force": True, "log_level": "debug"}))
        args = self.ns["parse_args"]([], self.ns["load_settings"](self.path))
        self.assertTrue(args.force)
        self.assertEqual(args.log_level, "DEBUG")


class TestOptions(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.ns = import_module()

    def test_defaults(self):
        args = self.ns["parse_args"]([])
        self.assertFalse(args.force)
        self.assertIsNone(args.seed)
        self.assertIsNone(args.words)
        self.assertIsNone(args.log_file)

    def test_flags(self):
        args = self.ns["parse_args"](["-f", "--seed", "7", "--log-file",
                                      "game.log", "--log-level", "debug"])
        self.assertTrue(args.force)
        self.assertEqual(args.seed, 7)
        self.assertEqual(args.log_file, "game.log")
        self.assertEqual(args.log_level, "DEBUG")

    def test_build_default_word_source(self):
        source = self.ns["build_word_source"](seed=1)
        self.assertTrue(source.is_legal_guess("crane"))

    def test_guesses_without_words(self):
        with self.assertRaises(WordListError):
            self.ns["build_word_source"](guesses="extra.txt")



class TestRun(unittest.TestCase):
    """Tests for run() failing cleanly before curses starts."""

    @classmethod
    def setUpClass(cls):
        cls.ns = import_module()

    def setUp(self):
        self.saved_logging = save_root_logging()
        self.saved_settings = self.ns["SETTINGS_FILE"]
        self.tmpdir = tempfile.mkdtemp()
        # No settings file: run() sees only the defaults
        self.ns["SETTINGS_FILE"] = os.path.join(self.tmpdir, "settings.json")

    def tearDown(self):
        self.ns["SETTINGS_FILE"] = self.saved_settings
        restore_root_logging(self.saved_logging)
        for name in os.listdir(self.tmpdir):
            os.remove(os.path.join(self.tmpdir, name))
        os.rmdir(self.tmpdir)

    def test_bad_word_file(self):
        missing = os.path.join(self.tmpdir, "no-such-list.txt")
        self.assertEqual(self.ns["run"](["--words", missing]), 1)

    def test_log_file_in_missing_directory(self):
        log_file = os.path.join(self.tmpdir, "no-such-dir", "game.log")
        missing = os.path.join(self.tmpdir, "no-such-list.txt")
        self.assertEqual(self.ns["run"](["--log-file", log_file,
                                         "--words", missing]), 1)

    def test_log_file_from_settings(self):
        with open(self.ns["SETTINGS_FILE"], "w", encoding="utf-8") as f:
            json.dump({"log_file": os.path.join(self.tmpdir, "x", "y.log")}, f)
        self.assertEqual(self.ns["run"]([]), 1)

    def test_bad_log_file_keeps_handlers(self):
        before = list(logging.getLogger().handlers)
        with self.assertRaises(OSError):
            self.ns["configure_logging"](
                os.path.join(self.tmpdir, "no-such-dir", "game.log"))
        self.assertEqual(logging.getLogger().handlers, before)


class TestLogging(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.ns = import_module()

    def setUp(self):
        self.saved_logging = save_root_logging()

    def tearDown(self):
        restore_root_logging(self.saved_logging)

    def test_no_log_file_uses_null_handler(self):
        root = self.ns["configure_logging"](None)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0], logging.NullHandler)

    def test_log_file(self):
        fd, path = tempfile.mkstemp(suffix=".log")
        os.close(fd)
        try:
            root = self.ns["configure_logging"](path, "DEBUG")
            self.assertEqual(root.level, logging.DEBUG)
            game = make_game()
            game.submit("stale")
            for handler in root.handlers:
                handler.flush()
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
            self.assertIn("guess 1 accepted", text)
        finally:
            self.tearDown()
            os.remove(path)

    def test_reconfigure_closes_old_file_handler(self):
        fd, path = tempfile.mkstemp(suffix=".log")
        os.close(fd)
        try:
            root = self.ns["configure_logging"](path)
            old = root.handlers[0]
            self.ns["configure_logging"](None)
            self.assertNotIn(old, root.handlers)
            self.assertIsNone(old.stream)
        finally:
            self.tearDown()
            os.remove(path)


# =============================================================================
# 5. SCREEN LAYOUT
# =============================================================================

class TestLayout(unittest.TestCase):
    """Tests for the curses-free layout helpers."""

    @classmethod
    def setUpClass(cls):
        cls.ns = import_module()

    def test_center_x(self):
        center_x = self.ns["center_x"]
        self.assertEqual(center_x(20, "abcd"), 8)
        self.assertEqual(center_x(3, "abcdef"), 0)

    def test_grid_has_every_tile(self):
        game = make_game()
        cells = list(self.ns["grid_cells"](game.current_session(), ""))
        self.assertEqual(len(cells), 30)
        self.assertEqual({(r, c) for r, c, _, _ in cells},
                         {(r, c) for r in range(6) for c in range(5)})

    def test_grid_rows(self):
        game = make_game()
        game.submit("stale")
        cells = {(r, c): (letter, kind) for r, c, letter, kind in
                 self.ns["grid_cells"](game.current_session(), "cr")}
        self.assertEqual(cells[(0, 2)], ("a", LetterState.CORRECT))
        self.assertEqual(cells[(0, 0)], ("s", LetterState.ABSENT))
        self.assertEqual(cells[(1, 0)], ("c", self.ns["TILE_INPUT"]))
        self.assertEqual(cells[(1, 2)], ("_", self.ns["TILE_BLANK"]))
        self.assertEqual(cells[(2, 0)], ("·", self.ns["TILE_FUTURE"]))

    def test_grid_marks_unknown_word(self):
        game = make_game()
        game.check_entry("zzzzz")
        kinds = {kind for r, c, _, kind in
                 self.ns["grid_cells"](game.current_session(), "zzzzz")
                 if r == 0}
        self.assertEqual(kinds, {self.ns["TILE_INVALID"]})

    def test_grid_has_no_entry_row_after_game_over(self):
        game = make_game()
        game.submit("crane")
        kinds = [kind for r, c, _, kind in
                 self.ns["grid_cells"](game.current_session(), "")
                 if r > 0]
        self.assertEqual(set(kinds), {self.ns["TILE_FUTURE"]})

    def test_keyboard_cells(self):
        game = make_game()
        game.submit("stale")
        cells = list(self.ns["keyboard_cells"](game.keyboard_status()))
        self.assertEqual(len(cells), 26)
        by_letter = {letter: (row, offset, state)
                     for row, offset, letter, state in cells}
        self.assertEqual(by_letter["q"], (0, 0, LetterState.UNKNOWN))
        self.assertEqual(by_letter["a"], (1, 2, LetterState.CORRECT))
        self.assertEqual(by_letter["m"], (2, 4 + 6 * 4, LetterState.UNKNOWN))

    def test_every_tile_kind_has_a_style(self):
        styles = self.ns["TILE_STYLES"]
        for kind in (self.ns["TILE_INPUT"], self.ns["TILE_INVALID"],
                     LetterState.CORRECT, LetterState.PRESENT,
                     LetterState.ABSENT, LetterState.UNKNOWN):
            self.assertIn(kind, styles)


if __name__ == "__main__":
    unittest.main()
