#!/usr/bin/env python
# -*- coding: utf-8 -*-

import json

from ..shell import parse, unparse, to_dict, dump
from ..shell.exceptions import CmdTreeError
from .common import show_error

__all__ = ["format_tree", "show_tree"]

def format_tree(ast, output_format):
    if output_format == "json":
        return json.dumps(to_dict(ast), indent=2)
    elif output_format == "text":
        return unparse(ast)

    return dump(ast)

def show_tree(env, command, output_format="tree"):
    try:
        ast = parse(command, max_depth=env["max_depth"])
    except CmdTreeError as e:
        show_error("Error: %s" % (e,))
        return 1

    print(format_tree(ast, output_format))

    return 0
