import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch
from arith.frontend.errors import CalcError, DomainError, LexError, ParseError
from arith.backend.interpreter import interpret
from arith_calc import evaluate_line, main, repl

valid_cases = [
    ("3 + 5", 8),
    ("2 - 9", -7),
    ("4152 - 109", 4043),
    ("2", 2),
    ("   2  +  8", 10),
    ("222 + 9 + 15 - 12", 234),
    ("4 * 4", 16),
    ("15/3", 5),
    ("15 / 3 * 9", 45),
    ("28 - 16 * 2 + 3", -1),
    ("(28 - 18) * 2 + 3", 23),
    ("2 * 16 - 8 / 2 - 1", 27),
    ("2 * (16 - 8) / 2 - 1", 7),
    ("(2 +  18) * (3 + 5 )", 160),
    ("2 + 3 * 4", 14),
    ("(2 + 3) * 4", 20),
    ("2 + (3 * 4)", 14),
    ("(2 + (3 * (4 - 1)))", 11),
    ("3 + 4 * (2 - 1) / (3 * (4 + 5)) - 6", -3),
    ("1 *+ 2", 2),
    ("+ 9 ", 9),
    ("+9", 9),
    ("- 9", -9),
    ("- - 9", 9),
    ("-3 + 4", 1),
    ("1 ++ 2", 3),
    ("2 ++ 3", 5),
    ("+ 2 + 3", 5),
    ("0 * 5", 0),
    ("7 / -2", -3),
    ("-7 / 2", -3),
    ("10 - 2 - 3", 5),
    ("100 / 10 / 5", 2),
]

invalid_cases = [
    ("a", LexError),
    ("3 + b * 3", LexError),
    ("(. + 3)", LexError),
    ("2 + $ + 3", LexError),
    ("1 + ", ParseError),
    ("+ ", ParseError),
    ("* 9 + 2", ParseError),
    ("(", ParseError),
    ("(1+2) +", ParseError),
    ("()", ParseError),
    ("2 * ()", ParseError),
    ("1 1", ParseError),
    ("1 * 2) ", ParseError),
    ("(2 * 4", ParseError),
    ("(2 + 3", ParseError),
    ("((", ParseError),
    ("(1+2)) + 13", ParseError),
    ("2 + 3) * 4", ParseError),
    ("2 ---(3))", ParseError),
    ("4 ** 5", ParseError),
    ("2 + 3 -", ParseError),
    ("10 / 0", DomainError),
    ("(5 - 5) / (3 - 3)", DomainError),
    ("-4 / (2 - 2)", DomainError),
]

class TestInterpret(unittest.TestCase):
    def test_valid(self):
        for src, expected in valid_cases:
            with self.subTest(src=src):
                self.assertEqual(interpret(src), expected)

    def test_invalid(self):
        for src, error in invalid_cases:
            with self.subTest(src=src):
                with self.assertRaises(error):
                    interpret(src)

    def test_lines_are_independent(self):
        with self.assertRaises(CalcError):
            interpret("(1 + 2")
        self.assertEqual(interpret("1 + 2"), 3)

    def test_deep_nesting_is_an_error(self):
        for src in ['(' * 400 + '1' + ')' * 400, '-' * 1200 + '1']:
            with self.subTest(length=len(src)):
                with self.assertRaises(CalcError):
                    interpret(src)
        self.assertEqual(interpret('-' * 100 + '(' * 50 + '9' + ')' * 50), 9)

class TestDriver(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(argv)
        return status, out.getvalue()

    def test_evaluate_line(self):
        self.assertEqual(evaluate_line("3 + 5"), "result: 8")
        self.assertEqual(evaluate_line("10 / 0"), "division by zero")
        self.assertIn("missing operator", evaluate_line("1 1"))

    def test_evaluate_line_tree(self):
        self.assertEqual(evaluate_line("-1", show_tree=True),
                         "Unary(MINUS)\n\tLiteral(1)\nresult: -1")

    def test_expr_flags(self):
        status, out = self.run_main(['-e', '2 * (16 - 8) / 2 - 1', '-e', '1 1', '-e', '4'])
        self.assertEqual(status, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "result: 7")
        self.assertIn("missing operator", lines[1])
        self.assertEqual(lines[2], "result: 4")

    def test_source_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'exprs.txt')
            with open(path, 'w') as fd:
                fd.write("3 + 5\n\n(2 + 3\n- - 9\n")
            status, out = self.run_main([path])
        self.assertEqual(status, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[0], "result: 8")
        self.assertEqual(lines[2], "result: 9")

    def test_missing_source_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            status, out = self.run_main([os.path.join(tmp, 'missing.txt')])
        self.assertEqual(status, 1)
        self.assertTrue(out.startswith("Error reading input"))

    def test_evaluate_line_deep_nesting(self):
        self.assertIn("nested too deeply", evaluate_line('(' * 400 + '1' + ')' * 400))
        self.assertIn("nested too deeply", evaluate_line('-' * 1200 + '1', show_tree=True))

    def run_repl(self, lines):
        out = io.StringIO()
        with patch('builtins.input', side_effect=lines) as fake_input, redirect_stdout(out):
            repl()
        return fake_input, out.getvalue().splitlines()

    def test_repl_quit(self):
        fake_input, lines = self.run_repl(['', '3 + 5', '1 1', 'Q', 'unreached'])
        self.assertEqual(fake_input.call_count, 4)
        fake_input.assert_called_with(">> ")
        self.assertEqual(lines[1], "... Starting calculator... (Q = exit)")
        self.assertEqual(lines[2], "result: 8")
        self.assertIn("missing operator", lines[3])
        self.assertEqual(len(lines), 4)

    def test_repl_lowercase_quit(self):
        fake_input, lines = self.run_repl(['q', '1'])
        self.assertEqual(fake_input.call_count, 1)
        self.assertEqual(len(lines), 2)

    def test_repl_end_of_input(self):
        fake_input, lines = self.run_repl(['(2 + 3) * 4', '10 / 0', EOFError()])
        self.assertEqual(fake_input.call_count, 3)
        self.assertEqual(lines[2:], ["result: 20", "division by zero"])
