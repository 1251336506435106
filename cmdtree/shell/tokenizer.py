#!/usr/bin/env python
# -*- coding: utf-8 -*-

import enum

__all__ = ["Tokenizer", "Token", "tokenize", "REDIRECTION_KINDS"]

class Token(object):
    class Kind(enum.Enum):
        LPAREN       = 1
        RPAREN       = 2
        AND_AND      = 3
        OR_OR        = 4
        PIPE         = 5
        REDIR_IN     = 6
        REDIR_OUT    = 7
        REDIR_APPEND = 8
        HEREDOC      = 9
        WORD         = 10

    def __init__(self, text, kind=None, position=0):
        self.text = text
        self.kind = kind
        self.position = position

    def __repr__(self):
        return "<Token text=%r kind=%s position=%d>" % (self.text, self.kind, self.position)

REDIRECTION_KINDS = (Token.Kind.REDIR_IN, Token.Kind.REDIR_OUT,
                     Token.Kind.REDIR_APPEND, Token.Kind.HEREDOC)

# One-character operators, "&" on its own is not an operator
SINGLE_OPERATORS = {"|": Token.Kind.PIPE,
                    ">": Token.Kind.REDIR_OUT,
                    "<": Token.Kind.REDIR_IN,
                    "&": Token.Kind.WORD}

DOUBLE_OPERATORS = {"&&": Token.Kind.AND_AND,
                    "||": Token.Kind.OR_OR,
                    ">>": Token.Kind.REDIR_APPEND,
                    "<<": Token.Kind.HEREDOC}

class Char(object):
    def __init__(self, char):
        self.char = char
        self.authentic = True

    def is_whitespace(self):
        return self.authentic and self.char.isspace()

    def is_quotes(self):
        return self.authentic and self.char in ("'", '"')

    def is_escape(self):
        return self.authentic and self.char == "\\"

    def is_lparen(self):
        return self.authentic and self.char == "("

    def is_rparen(self):
        return self.authentic and self.char == ")"

    def is_operator(self):
        return self.authentic and self.char in SINGLE_OPERATORS

    def __repr__(self):
        if self.authentic:
            return repr(self.char)

        return repr("\\" + self.char)

class State(enum.Enum):
    INITIAL  = 0
    WORD     = 1
    QUOTES   = 2
    OPERATOR = 3
    FINAL    = 4

class Tokenizer(object):
    """
        Splits a command line into tokens, one character at a time.

        The tokenizer never fails: any input produces some token sequence.
        Characters that don't start a known operator end up in words.
    """

    def __init__(self):
        self.state = State.INITIAL
        self.cur_token = Token("", None, 0)

        self.escape = False
        self.in_quotes = False

        self.quote_char = None

        self.char_num = 0

        self.state_handlers = {State.INITIAL:  self._handle_initial,
                               State.WORD:     self._handle_word,
                               State.QUOTES:   self._handle_quotes,
                               State.OPERATOR: self._handle_operator,
                               State.FINAL:    self._handle_final}

    def end(self, output):
        if self.state == State.OPERATOR:
            self._push_operator(output)
        elif self.escape:
            self.escape = False

            # Trailing backslash is kept as is
            self.cur_token.kind = Token.Kind.WORD
            self.cur_token.text += "\\"

        self._push_token(output)

        self._change_state(State.FINAL)

        return output

    def reset_state(self):
        self.escape = False
        self._exit_quotes()
        self._change_state(State.INITIAL)
        self.cur_token = Token("", None, self.char_num)

    def reset(self):
        self.char_num = 0

        self.reset_state()

    def parse_string(self, string, output=None):
        if output is None:
            output = []

        for c in string:
            self.next_char(c, output)

        return output

    def next_char(self, char, output):
        assert(self.state != State.FINAL)

        if isinstance(char, str):
            char = Char(char)

        if self.escape:
            char.authentic = False
        elif self.in_quotes:
            if self.quote_char == "'":
                char.authentic = char.char == "'"
            else:
                char.authentic = char.char in ('"', "\\")

        self.state_handlers[self.state](char, output)

        if not char.is_escape():
            self.escape = False

        self.char_num += 1

    def _change_state(self, new_state):
        self.state = new_state

    def _enter_quotes(self, quote_char):
        self.in_quotes = True
        self.quote_char = quote_char

    def _exit_quotes(self):
        self.in_quotes = False
        self.quote_char = None

    def _push_token(self, output):
        if self.cur_token.kind is not None:
            output.append(self.cur_token)

        self.cur_token = Token("", None, self.char_num)

    def _push_operator(self, output):
        self.cur_token.kind = SINGLE_OPERATORS[self.cur_token.text]
        self._push_token(output)
        self._change_state(State.INITIAL)

    def _handle_initial(self, char, output):
        self.cur_token.position = self.char_num

        if char.is_whitespace():
            return

        if char.is_lparen():
            self.cur_token.kind = Token.Kind.LPAREN
            self.cur_token.text = char.char

            self._push_token(output)
        elif char.is_rparen():
            self.cur_token.kind = Token.Kind.RPAREN
            self.cur_token.text = char.char

            self._push_token(output)
        elif char.is_operator():
            self.cur_token.text = char.char

            self._change_state(State.OPERATOR)
        else:
            self._change_state(State.WORD)
            self._handle_word(char, output)

    def _handle_word(self, char, output):
        if char.is_escape():
            self.escape = True
        elif char.is_quotes():
            self.cur_token.kind = Token.Kind.WORD

            self._enter_quotes(char.char)
            self._change_state(State.QUOTES)
        elif char.is_whitespace():
            self._push_token(output)
            self._change_state(State.INITIAL)
        elif char.is_lparen() or char.is_rparen() or char.is_operator():
            self._push_token(output)
            self._change_state(State.INITIAL)
            self._handle_initial(char, output)
        elif self.escape and char.char == "\n":
            # Line continuation
            pass
        else:
            self.cur_token.kind = Token.Kind.WORD
            self.cur_token.text += char.char

    def _handle_quotes(self, char, output):
        if char.is_quotes() and char.char == self.quote_char:
            self._exit_quotes()
            self._change_state(State.WORD)
        elif char.is_escape():
            self.escape = True
        else:
            # Inside double quotes only \" and \\ are escape sequences
            if self.escape and char.char not in ('"', "\\"):
                self.cur_token.text += "\\"

            self.cur_token.text += char.char

    def _handle_operator(self, char, output):
        if char.authentic:
            pair = self.cur_token.text + char.char

            try:
                self.cur_token.kind = DOUBLE_OPERATORS[pair]
            except KeyError:
                pass
            else:
                self.cur_token.text = pair
                self._push_token(output)
                self._change_state(State.INITIAL)
                return

        self._push_operator(output)
        self._handle_initial(char, output)

    def _handle_final(self, char, output):
        assert(False)

def tokenize(string, output=None):
    """
        Tokenize `string`.

        :param string: `str`, command line to tokenize
        :param output: `list` to append the tokens to, optional

        :returns: `list` of `Token`
    """

    t = Tokenizer()

    output = t.parse_string(string, output)
    t.end(output)

    return output
