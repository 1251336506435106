#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import os

__all__ = ["Environment"]

class Environment(dict):
    """
        Dictionary of settings that falls back to its parent for missing keys.
    """

    def __init__(self, parent=None):
        dict.__init__(self)

        self.parent = parent

    def __getitem__(self, key):
        try:
            return dict.__getitem__(self, key)
        except KeyError as e:
            if self.parent is not None:
                return self.parent[key]
            raise e

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def load_option(self, key, value, env_var, default, convert=None):
        """
            Set `key` from the command line value, the environment variable
            `env_var` or `default`, whichever comes first.

            :param key: `str`, setting name
            :param value: value from the command line, `None` if not specified
            :param env_var: `str`, name of the environment variable
            :param default: default value
            :param convert: callable to convert the environment variable value with

            :raises: `ValueError` if the environment variable value is invalid
        """

        if value is None:
            try:
                value = os.environ[env_var]
            except KeyError:
                value = default
            else:
                if convert is not None:
                    try:
                        value = convert(value)
                    except (ValueError, argparse.ArgumentTypeError) as e:
                        raise ValueError("invalid value of %s: %s" % (env_var, e))

        self[key] = value

        return value
