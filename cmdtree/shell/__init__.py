#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .tokenizer import Tokenizer, Token, tokenize
from .nodes import Node, Empty, Sequence, AndOr, Pipeline, Command, SimpleCommand
from .nodes import Redirection, Subshell, Word
from .parser import Parser, parse
from .unparser import unparse, quote_word, to_dict, dump
from .exceptions import *
