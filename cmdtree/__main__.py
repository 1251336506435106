#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import logging
import sys

from .cli.common import positive_int, show_error
from .cli.environment import Environment
from .cli.parse import show_tree
from .cli.tokens import show_tokens
from .cli.console import run_console
from .constants import DEFAULT_MAX_DEPTH, MAX_DEPTH_ENV, LOG_FILE_ENV
from .constants import OUTPUT_FORMATS, DEFAULT_OUTPUT_FORMAT

from . import __version__ as CMDTREE_VERSION

def setup_logging(env):
    from .shell.logging import logger

    path = env.get("log_file")

    if not path:
        return None

    formatter = logging.Formatter("%(asctime)s - %(name)s: %(message)s")

    handler = logging.FileHandler(path)
    handler.setFormatter(formatter)
    handler.setLevel(logging.DEBUG)

    logger.addHandler(handler)

    return handler

def teardown_logging(handler):
    from .shell.logging import logger

    if handler is None:
        return

    logger.removeHandler(handler)
    handler.close()

def main(args=None):
    if args is None:
        args = sys.argv

    parser, ns = parse_args(args)

    if ns.version:
        print("cmdtree %s" % (CMDTREE_VERSION,))
        return 0

    if getattr(ns, "action", None) is None:
        parser.print_help()
        return 1

    # Top-level environment
    genv = Environment()

    try:
        genv.load_option("max_depth", ns.max_depth, MAX_DEPTH_ENV,
                         DEFAULT_MAX_DEPTH, positive_int)
    except ValueError as e:
        show_error("Error: %s" % (e,))
        return 1

    genv.load_option("log_file", ns.log_file, LOG_FILE_ENV, None)

    handler = setup_logging(genv)

    env = Environment(genv)

    if ns.action in ("parse", "console"):
        env["output_format"] = ns.format

    actions = {"parse": lambda: show_tree(env, " ".join(ns.command), ns.format),
               "tokens": lambda: show_tokens(env, " ".join(ns.command)),
               "console": lambda: run_console(env)}

    try:
        return actions[ns.action]()
    finally:
        teardown_logging(handler)

def parse_args(args):
    parser = argparse.ArgumentParser(description="Parses shell command lines into syntax trees",
                                     prog=args[0])

    parser.add_argument("-V", "--version", action="store_true",
                        help="Print cmdtree version number and exit")

    subparsers = parser.add_subparsers(title="Actions", metavar="<action>")
    global_group = parser.add_argument_group("Global options")
    global_group.add_argument("--max-depth", type=positive_int, default=None, metavar="N",
                              help="Maximum number of nested subshells (default: %d)" % (DEFAULT_MAX_DEPTH,))
    global_group.add_argument("--log-file", default=None, metavar="PATH",
                              help="Path to the log file")

    parse_parser = subparsers.add_parser("parse", aliases=["p"],
                                         help="Parse a command line and print its syntax tree")
    parse_parser.add_argument("command", nargs="+", help="Command line to parse")
    parse_parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS,
                              default=DEFAULT_OUTPUT_FORMAT,
                              help="Output format (default: %s)" % (DEFAULT_OUTPUT_FORMAT,))
    parse_parser.set_defaults(action="parse")

    tokens_parser = subparsers.add_parser("tokens", aliases=["t"],
                                          help="Print tokens of a command line")
    tokens_parser.add_argument("command", nargs="+", help="Command line to tokenize")
    tokens_parser.set_defaults(action="tokens")

    console_parser = subparsers.add_parser("console", aliases=["c"],
                                           help="Parse command lines interactively")
    console_parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS,
                                default=DEFAULT_OUTPUT_FORMAT,
                                help="Output format (default: %s)" % (DEFAULT_OUTPUT_FORMAT,))
    console_parser.set_defaults(action="console")

    ns = parser.parse_args(args[1:])

    return parser, ns

if __name__ == "__main__":
    sys.exit(main(sys.argv))
