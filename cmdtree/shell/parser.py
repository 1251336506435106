#!/usr/bin/env python
# -*- coding: utf-8 -*-

from ..constants import DEFAULT_MAX_DEPTH
from .tokenizer import Token, REDIRECTION_KINDS, tokenize
from .nodes import Empty, Sequence, AndOr, Pipeline, Command, SimpleCommand
from .nodes import Redirection, Subshell, Word
from .exceptions import ParserError, UnexpectedTokenError, UnexpectedEndOfInputError
from .exceptions import EmptyGroupError, TrailingInputError, NestingTooDeepError
from .logging import logger

__all__ = ["Parser", "parse"]

LOGICAL_KINDS = (Token.Kind.AND_AND, Token.Kind.OR_OR)
COMMAND_START_KINDS = (Token.Kind.WORD, Token.Kind.LPAREN) + REDIRECTION_KINDS

class Parser(object):
    """
        Recursive descent parser for command lines.

        Grammar, from the loosest to the tightest binding::

            Sequence := AndOr
            AndOr    := Pipeline (("&&" | "||") Pipeline)*
            Pipeline := Unit ("|" Unit)*
            Unit     := Subshell | Command
            Subshell := "(" AndOr ")"
            Command  := (WORD | Redir)+
            Redir    := ("<" | ">" | ">>" | "<<") WORD

        :param tokens: `list` of `Token`
        :param max_depth: `int`, maximum number of nested subshells
        :param end_position: `int`, character offset of the end of input, used in error messages
    """

    def __init__(self, tokens=None, max_depth=None, end_position=None):
        if tokens is None:
            tokens = []

        if max_depth is None:
            max_depth = DEFAULT_MAX_DEPTH

        if max_depth < 1:
            raise ValueError("max_depth must be a positive integer")

        self.tokens = tokens
        self.max_depth = max_depth
        self.end_position = end_position
        self.idx = 0
        self.depth = 0

    def reset_state(self):
        self.idx = 0
        self.depth = 0
        self.tokens = []
        self.end_position = None

    def parse(self):
        """
            Parse the tokens.

            :raises: `ParserError`

            :returns: `Sequence` or `Empty`
        """

        self.idx = 0
        self.depth = 0

        if not self.tokens:
            logger.debug("Empty input")
            return Empty()

        try:
            output = self.parse_sequence()

            if self.peek() is not None:
                raise self._error(TrailingInputError, (), "unexpected trailing input")
        except ParserError as e:
            logger.debug("Parsing failed: %s" % (e,))
            raise e

        logger.debug("Parsed %d tokens" % (len(self.tokens),))

        return output

    def peek(self):
        try:
            return self.tokens[self.idx]
        except IndexError:
            return None

    def accept(self, *expected_kinds):
        token = self.peek()

        return token is not None and token.kind in expected_kinds

    def advance(self):
        token = self.tokens[self.idx]
        self.idx += 1

        return token

    def expect(self, *expected_kinds):
        if not self.accept(*expected_kinds):
            raise self._unexpected(expected_kinds)

        return self.advance()

    def get_position(self):
        token = self.peek()

        if token is not None:
            return token.position

        if self.end_position is not None:
            return self.end_position

        last = self.tokens[-1]

        return last.position + len(last.text)

    def _error(self, exc_type, expected_kinds, msg, *args):
        return exc_type(expected_kinds, self.peek(), self.idx, self.get_position(),
                        *args, msg=msg)

    def _unexpected(self, expected_kinds, msg=None):
        if self.peek() is None:
            return self._error(UnexpectedEndOfInputError, expected_kinds,
                               msg or "unexpected end of input")

        return self._error(UnexpectedTokenError, expected_kinds,
                           msg or "unexpected token")

    def parse_sequence(self):
        return Sequence(self.parse_and_or())

    def parse_and_or(self):
        operands = [self.parse_pipeline()]
        operators = []

        while self.accept(*LOGICAL_KINDS):
            operators.append(self.advance().text)
            operands.append(self.parse_pipeline())

        return AndOr(operands, operators)

    def parse_pipeline(self):
        units = [self.parse_unit()]

        while self.accept(Token.Kind.PIPE):
            self.advance()
            units.append(self.parse_unit())

        return Pipeline(units)

    def parse_unit(self):
        if self.accept(Token.Kind.LPAREN):
            return self.parse_subshell()

        return self.parse_command()

    def parse_subshell(self):
        if self.depth >= self.max_depth:
            raise self._error(NestingTooDeepError, (Token.Kind.WORD,),
                              "subshells are nested too deep", self.max_depth)

        self.expect(Token.Kind.LPAREN)

        if self.accept(Token.Kind.RPAREN):
            raise self._error(EmptyGroupError, COMMAND_START_KINDS, "empty subshell")

        self.depth += 1
        body = self.parse_and_or()
        self.depth -= 1

        self.expect(Token.Kind.RPAREN)

        return Subshell(body)

    def parse_command(self):
        words = []
        redirections = []

        # Redirections may appear anywhere between the words
        while True:
            if self.accept(Token.Kind.WORD):
                words.append(Word(self.advance().text))
            elif self.accept(*REDIRECTION_KINDS):
                redirections.append(self.parse_redirection())
            else:
                break

        if not words and not redirections:
            raise self._unexpected(COMMAND_START_KINDS, "expected a command")

        simple = SimpleCommand(words) if words else None

        return Command(simple, redirections)

    def parse_redirection(self):
        operator = self.expect(*REDIRECTION_KINDS)
        target = self.expect(Token.Kind.WORD)

        return Redirection(operator.text, Word(target.text))

def parse(string, max_depth=None):
    """
        Parse a command line.

        :param string: `str`, command line to parse
        :param max_depth: `int`, maximum number of nested subshells, optional

        :raises: `ParserError`

        :returns: `Sequence` or `Empty`
    """

    parser = Parser(tokenize(string), max_depth=max_depth, end_position=len(string))

    return parser.parse()
