#!/usr/bin/env python
# -*- coding: utf-8 -*-

from collections import namedtuple
import enum

__all__ = ["Node", "Empty", "Sequence", "AndOr", "Pipeline", "Command",
           "SimpleCommand", "Redirection", "Subshell", "Word",
           "LOGICAL_OPERATORS", "REDIRECTION_OPERATORS"]

LOGICAL_OPERATORS = ("&&", "||")
REDIRECTION_OPERATORS = ("<", ">", ">>", "<<")

class Node(object):
    """
        Base class of all AST nodes.

        Nodes are immutable tuples. Every node exposes its variant tag (`type`),
        an optional display label (`label`) and an ordered tuple of children
        (`children`). Two nodes are equal only if they have the same type and
        equal fields.
    """

    __slots__ = ()

    class Type(enum.Enum):
        EMPTY          = 0
        SEQUENCE       = 1
        AND_OR         = 2
        PIPELINE       = 3
        COMMAND        = 4
        SIMPLE_COMMAND = 5
        REDIRECTION    = 6
        SUBSHELL       = 7
        WORD           = 8

    type = None

    @property
    def label(self):
        return None

    @property
    def children(self):
        return ()

    def walk(self):
        """Iterates over the node and all of its descendants, depth-first."""

        yield self

        for child in self.children:
            yield from child.walk()

    def __eq__(self, other):
        if type(self) is not type(other):
            return False

        return tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.type, tuple.__hash__(self)))

class Empty(Node, namedtuple("Empty", [])):
    __slots__ = ()

    type = Node.Type.EMPTY

class Word(Node, namedtuple("Word", ["text"])):
    __slots__ = ()

    type = Node.Type.WORD

    @property
    def label(self):
        return self.text

class Redirection(Node, namedtuple("Redirection", ["operator", "target"])):
    __slots__ = ()

    type = Node.Type.REDIRECTION

    def __new__(cls, operator, target):
        if operator not in REDIRECTION_OPERATORS:
            raise ValueError("Unknown redirection operator: %r" % (operator,))

        if not isinstance(target, Word):
            raise TypeError("Redirection target must be a Word")

        return super().__new__(cls, operator, target)

    @property
    def label(self):
        return self.operator

    @property
    def children(self):
        return (self.target,)

class SimpleCommand(Node, namedtuple("SimpleCommand", ["words"])):
    __slots__ = ()

    type = Node.Type.SIMPLE_COMMAND

    def __new__(cls, words):
        words = tuple(words)

        if not words:
            raise ValueError("SimpleCommand requires at least one word")

        return super().__new__(cls, words)

    @property
    def name(self):
        return self.words[0].text

    @property
    def args(self):
        return tuple(word.text for word in self.words)

    @property
    def label(self):
        return " ".join(self.args)

    @property
    def children(self):
        return self.words

class Command(Node, namedtuple("Command", ["simple", "redirections"])):
    __slots__ = ()

    type = Node.Type.COMMAND

    def __new__(cls, simple=None, redirections=()):
        redirections = tuple(redirections)

        if simple is None and not redirections:
            raise ValueError("Command requires words or redirections")

        return super().__new__(cls, simple, redirections)

    @property
    def children(self):
        if self.simple is None:
            return self.redirections

        return (self.simple,) + self.redirections

class Subshell(Node, namedtuple("Subshell", ["body"])):
    __slots__ = ()

    type = Node.Type.SUBSHELL

    def __new__(cls, body):
        if not isinstance(body, AndOr):
            raise TypeError("Subshell body must be an AndOr node")

        return super().__new__(cls, body)

    @property
    def label(self):
        return "()"

    @property
    def children(self):
        return (self.body,)

class Pipeline(Node, namedtuple("Pipeline", ["units"])):
    __slots__ = ()

    type = Node.Type.PIPELINE

    def __new__(cls, units):
        units = tuple(units)

        if not units:
            raise ValueError("Pipeline requires at least one unit")

        return super().__new__(cls, units)

    @property
    def label(self):
        if len(self.units) > 1:
            return "|"

        return None

    @property
    def children(self):
        return self.units

class AndOr(Node, namedtuple("AndOr", ["operands", "operators"])):
    __slots__ = ()

    type = Node.Type.AND_OR

    def __new__(cls, operands, operators=()):
        operands, operators = tuple(operands), tuple(operators)

        if not operands:
            raise ValueError("AndOr requires at least one operand")

        if len(operators) != len(operands) - 1:
            raise ValueError("Expected %d operators, got %d" % (len(operands) - 1,
                                                                 len(operators)))

        for operator in operators:
            if operator not in LOGICAL_OPERATORS:
                raise ValueError("Unknown logical operator: %r" % (operator,))

        return super().__new__(cls, operands, operators)

    def pairs(self):
        """
            Iterates over (operator, operand) pairs in evaluation order.
            The first operand comes with operator `None`.
        """

        yield None, self.operands[0]

        yield from zip(self.operators, self.operands[1:])

    @property
    def label(self):
        return " ".join(self.operators) or None

    @property
    def children(self):
        return self.operands

class Sequence(Node, namedtuple("Sequence", ["body"])):
    __slots__ = ()

    type = Node.Type.SEQUENCE

    def __new__(cls, body):
        if not isinstance(body, AndOr):
            raise TypeError("Sequence body must be an AndOr node")

        return super().__new__(cls, body)

    @property
    def children(self):
        return (self.body,)
