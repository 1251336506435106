#!/usr/bin/env python
# -*- coding: utf-8 -*-

try:
    # Line editing and history for input()
    import readline
except ImportError:
    pass

from ..constants import CONSOLE_PROMPT, CONSOLE_PROMPT_MORE
from ..shell import Tokenizer, Parser
from ..shell.exceptions import CmdTreeError
from .common import show_error
from .environment import Environment
from .parse import format_tree

__all__ = ["Console", "run_console"]

class Console(object):
    """
        Interactive loop that parses each entered command line and prints its tree.
        Lines with an unterminated quote or a trailing backslash are continued
        on the next line.
    """

    def __init__(self, env):
        self.env = env
        self.exit_code = 0
        self.quit = False
        self.tokenizer = Tokenizer()
        self.parser = Parser(max_depth=env["max_depth"])

    def show(self, tokens, end_position=None):
        self.parser.tokens = tokens
        self.parser.end_position = end_position

        try:
            ast = self.parser.parse()
        except CmdTreeError as e:
            show_error("Error: %s" % (e,))
            return 1
        finally:
            self.parser.reset_state()

        print(format_tree(ast, self.env.get("output_format", "tree")))

        return 0

    def execute(self, s):
        tokenizer = Tokenizer()

        tokens = tokenizer.parse_string(s)
        tokenizer.end(tokens)

        self.exit_code = self.show(tokens, len(s))

        return self.exit_code

    def reset(self):
        self.tokenizer.reset()
        self.parser.reset_state()

    def input_loop(self):
        prompt_more = False

        output = []

        while not self.quit:
            try:
                if prompt_more:
                    msg = CONSOLE_PROMPT_MORE
                    prompt_more = False
                else:
                    msg = CONSOLE_PROMPT

                line = input(msg)

                for i in line:
                    self.tokenizer.next_char(i, output)

                if not self.tokenizer.in_quotes and not self.tokenizer.escape:
                    self.tokenizer.end(output)

                    self.exit_code = self.show(output, self.tokenizer.char_num)

                    output = []
                    self.reset()
                else:
                    prompt_more = True

                    self.tokenizer.next_char("\n", output)
            except KeyboardInterrupt:
                output = []
                self.reset()
                print("")
            except EOFError:
                break

        return self.exit_code

def run_console(env):
    console = Console(Environment(env))

    return console.input_loop()
