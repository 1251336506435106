#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .nodes import Node

__all__ = ["unparse", "quote_word", "to_dict", "dump"]

# Characters that can't appear in a bare word
SPECIAL_CHARS = frozenset("()&|<>'\"\\")

def quote_word(text):
    """
        Quote `text` so that the tokenizer reads it back as a single word.

        :param text: `str`, word text

        :returns: `str`
    """

    if text and not any(c.isspace() or c in SPECIAL_CHARS for c in text):
        return text

    if "'" not in text:
        return "'%s'" % (text,)

    return '"%s"' % (text.replace("\\", "\\\\").replace('"', '\\"'),)

def _unparse_empty(node):
    return ""

def _unparse_sequence(node):
    return unparse(node.body)

def _unparse_and_or(node):
    result = unparse(node.operands[0])

    for operator, operand in zip(node.operators, node.operands[1:]):
        result += " %s %s" % (operator, unparse(operand))

    return result

def _unparse_pipeline(node):
    return " | ".join(unparse(unit) for unit in node.units)

def _unparse_command(node):
    return " ".join(unparse(child) for child in node.children)

def _unparse_simple_command(node):
    return " ".join(unparse(word) for word in node.words)

def _unparse_redirection(node):
    return "%s %s" % (node.operator, unparse(node.target))

def _unparse_subshell(node):
    return "(%s)" % (unparse(node.body),)

def _unparse_word(node):
    return quote_word(node.text)

UNPARSERS = {Node.Type.EMPTY:          _unparse_empty,
             Node.Type.SEQUENCE:       _unparse_sequence,
             Node.Type.AND_OR:         _unparse_and_or,
             Node.Type.PIPELINE:       _unparse_pipeline,
             Node.Type.COMMAND:        _unparse_command,
             Node.Type.SIMPLE_COMMAND: _unparse_simple_command,
             Node.Type.REDIRECTION:    _unparse_redirection,
             Node.Type.SUBSHELL:       _unparse_subshell,
             Node.Type.WORD:           _unparse_word}

def unparse(node):
    """
        Render an AST back into a command line.

        Redirections are always written after the words of their command.

        :param node: `Node`

        :raises: `TypeError` if `node` is not an AST node

        :returns: `str`
    """

    try:
        handler = UNPARSERS[node.type]
    except (AttributeError, KeyError):
        raise TypeError("Not an AST node: %r" % (node,))

    return handler(node)

def to_dict(node):
    """
        Convert an AST into plain data (e.g. for JSON serialization).

        :param node: `Node`

        :returns: `dict` with keys "type", "label" and "children"
    """

    return {"type": node.type.name,
            "label": node.label,
            "children": [to_dict(child) for child in node.children]}

def dump(node, indent=0):
    """
        Produce an indented text representation of an AST, one node per line.

        :param node: `Node`
        :param indent: `int`, initial indentation

        :returns: `str`
    """

    lines = []

    def visit(node, indent):
        if node.label is None:
            lines.append(" " * indent + node.type.name)
        else:
            lines.append(" " * indent + "%s %r" % (node.type.name, node.label))

        for child in node.children:
            visit(child, indent + 2)

    visit(node, indent)

    return "\n".join(lines)
