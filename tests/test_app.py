"""
Todo CLI Test Suite — Command Loop
====================================
Drives the App with scripted input and checks output and persistence.

Usage:
    python -m pytest tests/test_app.py -v
    python tests/test_app.py
"""
import sys
import os
import tempfile
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from todocli.app import App, WELCOME, PROMPT, GOODBYE, RETRY
from todocli.manager import TodoManager
from todocli.storage import InMemoryCache, JSONFileCache
from todocli.todo import Todo


class ScriptedInput:
    """Feeds lines to the App, then behaves like a closed stdin."""

    def __init__(self, *lines):
        self._lines = list(lines)

    def __call__(self):
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


class RecordingCache(InMemoryCache):
    """In-memory cache that counts saves."""

    def __init__(self, todos=None):
        super().__init__()
        self.save_calls = 0
        if todos:
            self.write(todos)

    def save(self, todos):
        self.save_calls += 1
        super().save(todos)


def _run(*lines, cache=None):
    output = []
    app = App(cache=cache, input_fn=ScriptedInput(*lines), echo=output.append)
    app.run()
    return app, output


# ─────────────────────────────────────────────
#  Command Parsing
# ─────────────────────────────────────────────

class TestParseCommand(unittest.TestCase):

    def test_known_commands(self):
        for word in ("add", "list", "toggle", "delete", "exit"):
            self.assertEqual(App.parse_command(word).value, word)

    def test_case_insensitive(self):
        self.assertIs(App.parse_command("LiSt"), App.Command.LIST)

    def test_surrounding_whitespace(self):
        self.assertIs(App.parse_command("  exit \n"), App.Command.EXIT)

    def test_unknown(self):
        self.assertIsNone(App.parse_command("remove"))
        self.assertIsNone(App.parse_command(""))
        self.assertIsNone(App.parse_command("add milk"))


# ─────────────────────────────────────────────
#  Loop Behaviour
# ─────────────────────────────────────────────

class TestLoop(unittest.TestCase):

    def test_exit_terminates(self):
        app, output = _run("exit", "list")
        self.assertFalse(app.is_active)
        self.assertEqual(output, [WELCOME, PROMPT, GOODBYE])

    def test_end_of_input_terminates(self):
        app, output = _run()
        self.assertFalse(app.is_active)
        self.assertEqual(output, [WELCOME, PROMPT])

    def test_unrecognized_input_is_silent(self):
        _, output = _run("", "bogus", "exit")
        self.assertEqual(output, [WELCOME, PROMPT, PROMPT, PROMPT, GOODBYE])

    def test_scenario(self):
        _, output = _run(
            "add", "Buy milk",
            "list",
            "TOGGLE", "1",
            "list",
            "delete", "1",
            "list",
            "exit",
        )
        self.assertIn("1) Buy milk. ❌", output)
        self.assertIn("1) Buy milk. ✅", output)
        self.assertEqual(output[-4:], [PROMPT, "🤖 There is no todo!", PROMPT, GOODBYE])

    def test_title_kept_as_typed(self):
        app, _ = _run("add", "Call Mom at 5PM", "exit")
        self.assertEqual(app.manager.todos[0].title, "Call Mom at 5PM")

    def test_non_numeric_index(self):
        app, output = _run("add", "a", "toggle", "first", "delete", "x", "exit")
        self.assertEqual(output.count(RETRY), 2)
        self.assertEqual(app.manager.count, 1)
        self.assertFalse(app.manager.todos[0].is_completed)

    def test_index_with_spaces(self):
        app, _ = _run("add", "a", "toggle", " 1 ", "exit")
        self.assertTrue(app.manager.todos[0].is_completed)

    def test_index_must_be_plain_digits(self):
        app, output = _run(
            "add", "a",
            "toggle", "1_0",
            "toggle", "\u0661",
            "toggle", "1.0",
            "exit",
        )
        self.assertEqual(output.count(RETRY), 3)
        self.assertFalse(app.manager.todos[0].is_completed)

    def test_signed_index(self):
        app, output = _run("add", "a", "toggle", "+1", "delete", "-1", "exit")
        self.assertTrue(app.manager.todos[0].is_completed)
        self.assertIn("⚠️ There is no todo #-1.", output)

    def test_out_of_range_index(self):
        app, output = _run("add", "a", "delete", "5", "exit")
        self.assertIn("⚠️ There is no todo #5.", output)
        self.assertNotIn("🗑️ Todo deleted!", output)
        self.assertEqual(app.manager.count, 1)

    def test_end_of_input_during_add(self):
        app, output = _run("add")
        self.assertEqual(output[-2:], [RETRY, PROMPT])
        self.assertEqual(app.manager.count, 0)

    def test_uses_given_manager(self):
        output = []
        manager = TodoManager(echo=output.append)
        app = App(manager=manager, input_fn=ScriptedInput("add", "x", "exit"), echo=output.append)
        app.run()
        self.assertEqual(manager.count, 1)


# ─────────────────────────────────────────────
#  Persistence Wiring
# ─────────────────────────────────────────────

class TestPersistence(unittest.TestCase):

    def test_restores_on_start(self):
        cache = RecordingCache([Todo("saved earlier")])
        _, output = _run("list", "exit", cache=cache)
        self.assertIn("1) saved earlier. ❌", output)

    def test_saves_after_each_mutation(self):
        cache = RecordingCache()
        _run("add", "a", "add", "b", "toggle", "2", "delete", "1", "list", "exit", cache=cache)
        self.assertEqual(cache.save_calls, 4)
        saved = cache.load()
        self.assertEqual([t.title for t in saved], ["b"])
        self.assertTrue(saved[0].is_completed)

    def test_no_save_when_nothing_changed(self):
        cache = RecordingCache()
        _run("list", "toggle", "1", "delete", "nope", "exit", cache=cache)
        self.assertEqual(cache.save_calls, 0)

    def test_unencodable_title_keeps_loop_running(self):
        with tempfile.TemporaryDirectory() as directory:
            cache = JSONFileCache(directory=directory)
            with self.assertLogs("todocli.storage.base", level="WARNING"):
                app, output = _run("add", "x\udcff", "list", "exit", cache=cache)
            self.assertEqual(os.listdir(directory), [])
        self.assertEqual(app.manager.count, 1)
        self.assertEqual(output[-1], GOODBYE)

    def test_without_cache(self):
        app, _ = _run("add", "a", "exit")
        self.assertIsNone(app.cache)
        self.assertEqual(app.manager.count, 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
