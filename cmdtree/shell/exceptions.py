# -*- coding: utf-8 -*-

__all__ = ["CmdTreeError", "ParserError", "UnexpectedTokenError",
           "UnexpectedEndOfInputError", "EmptyGroupError", "TrailingInputError",
           "NestingTooDeepError"]

class CmdTreeError(Exception):
    pass

class ParserError(CmdTreeError):
    def __init__(self, expected, found, index, position, msg=""):
        if found is None:
            found_str = "end of input"
        else:
            found_str = "%s %r" % (found.kind.name, found.text)

        if expected:
            expected_str = " or ".join(kind.name for kind in expected)
        else:
            expected_str = "end of input"

        msg = "%s (expected %s, found %s)" % (msg, expected_str, found_str)

        msg = "Error at token %d, char %d: %s" % (index, position, msg)
        CmdTreeError.__init__(self, msg)

        self.expected = tuple(expected)
        self.found = found
        self.index = index
        self.position = position

class UnexpectedTokenError(ParserError):
    pass

class UnexpectedEndOfInputError(ParserError):
    pass

class EmptyGroupError(ParserError):
    pass

class TrailingInputError(ParserError):
    pass

class NestingTooDeepError(ParserError):
    def __init__(self, expected, found, index, position, max_depth, msg=""):
        ParserError.__init__(self, expected, found, index, position, msg)

        self.max_depth = max_depth
