#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import sys

__all__ = ["positive_int", "show_error"]

def positive_int(arg):
    try:
        n = int(arg)
        if n > 0:
            return n
    except ValueError:
        pass

    raise argparse.ArgumentTypeError("%r is not a positive integer" % arg)

def show_error(msg):
    print(msg, file=sys.stderr)
