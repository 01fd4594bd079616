"""
Tests for the solace command-line driver.
"""

import unittest
import sys
import os
import tempfile

from click.testing import CliRunner

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from solace import __version__
from solace.cli import main


class TestCli(unittest.TestCase):
    """Test cases for the driver."""

    def setUp(self):
        self.runner = CliRunner()

    def _run(self, files, *args):
        """Write ``files`` into a scratch directory and run the driver on them."""
        with tempfile.TemporaryDirectory() as tmp:
            paths = []
            for name, text in files.items():
                path = os.path.join(tmp, name)
                with open(path, "w", encoding="utf-8") as f:
                    f.write(text)
                paths.append(path)
            return self.runner.invoke(main, [*args, *paths])

    def test_no_files_prints_usage_hint(self):
        result = self.runner.invoke(main, [])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("No file was given", result.output)
        self.assertIn("solace file.solace", result.output)

    def test_version(self):
        result = self.runner.invoke(main, ["-v"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Solace compiler", result.output)
        self.assertIn(__version__, result.output)

    def test_clean_file(self):
        result = self._run({"ok.solace": 'print("hi", 1.5)\n'})

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output, "")

    def test_wrong_extension_is_a_usage_error(self):
        result = self._run({"notes.txt": "x"})

        self.assertEqual(result.exit_code, 2)
        self.assertIn("not a Solace source file", result.output)

    def test_token_table(self):
        result = self._run({"hello.solace": 'greet("hello")'}, "--tokens")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("IDENTIFIER", result.output)
        self.assertIn("STRING_LITERAL", result.output)
        self.assertIn("'hello'", result.output)

    def test_end_of_line_flag(self):
        result = self._run({"eol.solace": "a\nb\n"}, "--tokens", "--end-of-line")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("END_OF_LINE", result.output)

    def test_token_table_lists_invalid_tokens(self):
        result = self._run({"nums.solace": "1.2.3"}, "--tokens")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("INVALID", result.output)
        self.assertIn("'1.2.3'", result.output)

    def test_unterminated_string_exits_with_error(self):
        result = self._run({"bad.solace": 'x = "never closed'})

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unterminated string literal", result.output)
        self.assertIn("bad.solace:1:5", result.output)

    def test_fatal_error_stops_remaining_files(self):
        result = self._run(
            {"a_bad.solace": '"open', "b_other.solace": "$"},
        )

        self.assertEqual(result.exit_code, 1)
        self.assertNotIn("Unrecognized character", result.output)

    def test_missing_file(self):
        result = self.runner.invoke(main, ["nowhere.solace"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Cannot read source file", result.output)

    def test_diagnostics_are_reported_and_fail_the_run(self):
        result = self._run({"warn.solace": "a $ b\n1.2.3\n"})

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unrecognized character: '$'", result.output)
        self.assertIn("Malformed numeric literal: '1.2.3'", result.output)
        self.assertIn("2 problem(s) found", result.output)


if __name__ == '__main__':
    unittest.main()
