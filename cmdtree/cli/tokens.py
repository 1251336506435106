#!/usr/bin/env python
# -*- coding: utf-8 -*-

from ..shell import tokenize

__all__ = ["show_tokens"]

def show_tokens(env, command):
    for token in tokenize(command):
        print("%4d  %-12s %r" % (token.position, token.kind.name, token.text))

    return 0
