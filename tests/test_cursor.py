"""
Tests for the lexer cursor: consumption, lookahead and pushback.
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from solace.lexer import Cursor


def make_cursor(text: str) -> Cursor:
    return Cursor(io.StringIO(text))


class TestCursor(unittest.TestCase):
    """Test cases for Cursor."""

    def test_advance_returns_characters_then_none(self):
        cursor = make_cursor("ab")

        self.assertEqual(cursor.advance(), "a")
        self.assertEqual(cursor.advance(), "b")
        self.assertIsNone(cursor.advance())
        self.assertIsNone(cursor.advance())

    def test_peek_does_not_consume(self):
        cursor = make_cursor("xy")

        self.assertEqual(cursor.peek(), "x")
        self.assertEqual(cursor.peek(), "x")
        self.assertEqual((cursor.line, cursor.column), (1, 1))
        self.assertEqual(cursor.advance(), "x")
        self.assertEqual(cursor.peek(), "y")

    def test_peek_at_end(self):
        cursor = make_cursor("")

        self.assertIsNone(cursor.peek())
        self.assertTrue(cursor.at_end)

    def test_newline_increments_line(self):
        cursor = make_cursor("a\nb")

        cursor.advance()
        self.assertEqual(cursor.line, 1)
        cursor.advance()
        self.assertEqual((cursor.line, cursor.column), (2, 1))
        cursor.advance()
        self.assertEqual((cursor.line, cursor.column), (2, 2))

    def test_pushback_is_returned_first(self):
        cursor = make_cursor("12)")

        cursor.advance()
        cursor.advance()
        paren = cursor.advance()
        cursor.pushback(paren)

        self.assertEqual(cursor.advance(), ")")
        self.assertIsNone(cursor.advance())

    def test_pushback_of_newline_restores_line(self):
        cursor = make_cursor("1\n2")

        cursor.advance()
        newline = cursor.advance()
        self.assertEqual(cursor.line, 2)

        cursor.pushback(newline)
        self.assertEqual((cursor.line, cursor.column), (1, 2))

        self.assertEqual(cursor.advance(), "\n")
        self.assertEqual(cursor.line, 2)

    def test_pushback_none_is_noop(self):
        cursor = make_cursor("a")

        cursor.advance()
        cursor.pushback(cursor.advance())
        self.assertIsNone(cursor.advance())

    def test_only_one_character_of_pushback(self):
        cursor = make_cursor("ab")

        a = cursor.advance()
        b = cursor.advance()
        cursor.pushback(b)

        with self.assertRaises(RuntimeError):
            cursor.pushback(a)

    def test_pushback_must_match_last_character(self):
        cursor = make_cursor("ab")

        cursor.advance()

        with self.assertRaises(RuntimeError):
            cursor.pushback("z")
        self.assertEqual((cursor.line, cursor.column), (1, 2))
        self.assertEqual(cursor.advance(), "b")

    def test_pushback_after_peek_is_rejected(self):
        cursor = make_cursor("ab")

        a = cursor.advance()
        cursor.peek()

        with self.assertRaises(RuntimeError):
            cursor.pushback(a)
        self.assertEqual(cursor.advance(), "b")

    def test_pushback_before_any_advance_is_rejected(self):
        cursor = make_cursor("ab")

        with self.assertRaises(RuntimeError):
            cursor.pushback("a")
        self.assertEqual((cursor.line, cursor.column), (1, 1))


if __name__ == '__main__':
    unittest.main()
