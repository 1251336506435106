#!/usr/bin/env python
# -*- coding: utf-8 -*-

import unittest

from cmdtree.shell import Tokenizer, Token, tokenize

K = Token.Kind

def kinds_and_texts(string):
    return [(t.kind, t.text) for t in tokenize(string)]

class TokenizerTestCase(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   \t "), [])

    def test_words(self):
        self.assertEqual(kinds_and_texts("echo hi  there"),
                         [(K.WORD, "echo"), (K.WORD, "hi"), (K.WORD, "there")])

    def test_operators(self):
        self.assertEqual(kinds_and_texts("a && b || c | d"),
                         [(K.WORD, "a"), (K.AND_AND, "&&"), (K.WORD, "b"),
                          (K.OR_OR, "||"), (K.WORD, "c"), (K.PIPE, "|"),
                          (K.WORD, "d")])

    def test_operators_without_spaces(self):
        self.assertEqual(kinds_and_texts("a&&b||c|d>e>>f<g<<h"),
                         [(K.WORD, "a"), (K.AND_AND, "&&"), (K.WORD, "b"),
                          (K.OR_OR, "||"), (K.WORD, "c"), (K.PIPE, "|"),
                          (K.WORD, "d"), (K.REDIR_OUT, ">"), (K.WORD, "e"),
                          (K.REDIR_APPEND, ">>"), (K.WORD, "f"), (K.REDIR_IN, "<"),
                          (K.WORD, "g"), (K.HEREDOC, "<<"), (K.WORD, "h")])

    def test_greedy_operators(self):
        self.assertEqual(kinds_and_texts(">>>"),
                         [(K.REDIR_APPEND, ">>"), (K.REDIR_OUT, ">")])
        self.assertEqual(kinds_and_texts("|||"),
                         [(K.OR_OR, "||"), (K.PIPE, "|")])
        self.assertEqual(kinds_and_texts("> >"),
                         [(K.REDIR_OUT, ">"), (K.REDIR_OUT, ">")])

    def test_parentheses(self):
        self.assertEqual(kinds_and_texts("(a)|(b)"),
                         [(K.LPAREN, "("), (K.WORD, "a"), (K.RPAREN, ")"),
                          (K.PIPE, "|"), (K.LPAREN, "("), (K.WORD, "b"),
                          (K.RPAREN, ")")])
        self.assertEqual(kinds_and_texts("(("),
                         [(K.LPAREN, "("), (K.LPAREN, "(")])

    def test_single_ampersand(self):
        self.assertEqual(kinds_and_texts("a & b"),
                         [(K.WORD, "a"), (K.WORD, "&"), (K.WORD, "b")])
        self.assertEqual(kinds_and_texts("a&b"),
                         [(K.WORD, "a"), (K.WORD, "&"), (K.WORD, "b")])
        self.assertEqual(kinds_and_texts("&"), [(K.WORD, "&")])

    def test_double_quotes(self):
        self.assertEqual(kinds_and_texts('echo "a && b"'),
                         [(K.WORD, "echo"), (K.WORD, "a && b")])
        self.assertEqual(kinds_and_texts('"(x) | y > z"'),
                         [(K.WORD, "(x) | y > z")])

    def test_single_quotes(self):
        self.assertEqual(kinds_and_texts("echo 'a | b' c"),
                         [(K.WORD, "echo"), (K.WORD, "a | b"), (K.WORD, "c")])
        self.assertEqual(kinds_and_texts("'a \\ b'"), [(K.WORD, "a \\ b")])
        self.assertEqual(kinds_and_texts("'say \"hi\"'"), [(K.WORD, 'say "hi"')])

    def test_adjacent_quotes(self):
        self.assertEqual(kinds_and_texts('a"b c"d'), [(K.WORD, "ab cd")])
        self.assertEqual(kinds_and_texts("'a'\"b\"c"), [(K.WORD, "abc")])

    def test_empty_quotes(self):
        self.assertEqual(kinds_and_texts('echo ""'), [(K.WORD, "echo"), (K.WORD, "")])
        self.assertEqual(kinds_and_texts("''"), [(K.WORD, "")])

    def test_unterminated_quotes(self):
        self.assertEqual(kinds_and_texts('echo "a && b'),
                         [(K.WORD, "echo"), (K.WORD, "a && b")])
        self.assertEqual(kinds_and_texts("echo 'abc"), [(K.WORD, "echo"), (K.WORD, "abc")])

    def test_escapes(self):
        self.assertEqual(kinds_and_texts("a\\ b"), [(K.WORD, "a b")])
        self.assertEqual(kinds_and_texts("a\\|b"), [(K.WORD, "a|b")])
        self.assertEqual(kinds_and_texts("\\(x\\)"), [(K.WORD, "(x)")])
        self.assertEqual(kinds_and_texts("\\\"x"), [(K.WORD, '"x')])
        self.assertEqual(kinds_and_texts("a\\\\b"), [(K.WORD, "a\\b")])

    def test_escapes_in_double_quotes(self):
        self.assertEqual(kinds_and_texts('"a \\" b"'), [(K.WORD, 'a " b')])
        self.assertEqual(kinds_and_texts('"a \\\\ b"'), [(K.WORD, "a \\ b")])
        self.assertEqual(kinds_and_texts('"a\\nb"'), [(K.WORD, "a\\nb")])

    def test_trailing_backslash(self):
        self.assertEqual(kinds_and_texts("echo \\"), [(K.WORD, "echo"), (K.WORD, "\\")])
        self.assertEqual(kinds_and_texts("ab\\"), [(K.WORD, "ab\\")])

    def test_line_continuation(self):
        self.assertEqual(kinds_and_texts("a\\\nb"), [(K.WORD, "ab")])
        self.assertEqual(kinds_and_texts("a \\\n b"), [(K.WORD, "a"), (K.WORD, "b")])

    def test_positions(self):
        tokens = tokenize("ab  && (c)>>'d e'")

        self.assertEqual([t.position for t in tokens], [0, 4, 7, 8, 9, 10, 12])

    def test_partition(self):
        strings = ["echo hi > out.txt", "(a && b) | c", "a|b||c&&d",
                   "cat < in >> out << EOF", "x & y", "foo(bar)baz"]

        for string in strings:
            tokens = tokenize(string)
            self.assertEqual("".join(t.text for t in tokens),
                             "".join(string.split()))

    def test_incremental(self):
        tokenizer = Tokenizer()
        output = []

        for c in 'echo "a':
            tokenizer.next_char(c, output)

        self.assertTrue(tokenizer.in_quotes)

        tokenizer.next_char("\n", output)

        for c in 'b" | wc':
            tokenizer.next_char(c, output)

        self.assertFalse(tokenizer.in_quotes)

        tokenizer.end(output)

        self.assertEqual([(t.kind, t.text) for t in output],
                         [(K.WORD, "echo"), (K.WORD, "a\nb"), (K.PIPE, "|"),
                          (K.WORD, "wc")])

    def test_independent_calls(self):
        self.assertEqual(kinds_and_texts("'open"), [(K.WORD, "open")])
        self.assertEqual(kinds_and_texts("a b"), [(K.WORD, "a"), (K.WORD, "b")])
