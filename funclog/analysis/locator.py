"""
Insertion points for entry and exit traces.

Structural analysis only: the first statement (or the opening brace) gets the
entry trace, every `return` in the body gets an exit trace, and the closing
brace gets one more when the body can fall through to it.
"""
from __future__ import annotations
from typing import List, Tuple

from tree_sitter import Node

from funclog.parsing.go_parser import body_statements, braces, node_position, walk
from funclog.parsing.ir import Position

RETURN_NODE = "return_statement"


def is_body_valid(body: Node | None) -> bool:
    if body is None:
        return False
    lbrace, rbrace = braces(body)
    if lbrace is None or rbrace is None:
        return False
    if lbrace.is_missing or rbrace.is_missing:
        return False
    return True


def find_returns(body: Node) -> List[Position]:
    # function literals are descended into as well
    return [node_position(n) for n in walk(body) if n.type == RETURN_NODE]


def locate_entry(body: Node) -> Position:
    stmts = body_statements(body)
    if not stmts:
        lbrace, _ = braces(body)
        return node_position(lbrace)
    return node_position(stmts[0])


def locate_exits(body: Node) -> List[Position]:
    exits = find_returns(body)
    stmts = body_statements(body)
    lbrace, rbrace = braces(body)

    if stmts:
        column = node_position(stmts[-1]).column
        last_is_return = stmts[-1].type == RETURN_NODE
    else:
        column = node_position(lbrace).column
        last_is_return = False

    if not exits or not last_is_return:
        exits.append(Position(line=node_position(rbrace).line, column=column))
    return exits


def locate(body: Node) -> Tuple[Position, List[Position]]:
    return locate_entry(body), locate_exits(body)
