from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser

from funclog.core.errors import GoParseError
from funclog.parsing.ir import Position

GO_LANGUAGE = Language(tsgo.language())

FUNC_NODES = ("function_declaration", "method_declaration")
PARAM_NODES = ("parameter_declaration", "variadic_parameter_declaration")
TOP_LEVEL_NODES = (
    "package_clause",
    "import_declaration",
    "function_declaration",
    "method_declaration",
    "type_declaration",
    "var_declaration",
    "const_declaration",
    "comment",
)


@dataclass
class GoSource:
    path: Optional[Path]
    src: bytes
    root: Node


def parse_go(text: str, path: Optional[Path] = None) -> GoSource:
    parser = Parser(GO_LANGUAGE)
    src = text.encode("utf-8")
    tree = parser.parse(src)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root)
        pos = node_position(bad) if bad is not None else Position(1, 1)
        detail = f"missing {bad.type!r}" if bad is not None and bad.is_missing else "syntax error"
        raise GoParseError(path, pos.line, pos.column, detail)
    _check_top_level(root, path)
    return GoSource(path=path, src=src, root=root)


def _check_top_level(root: Node, path: Optional[Path]) -> None:
    # the grammar is looser than the Go compiler here
    decls = top_level_declarations(root)
    if not decls or decls[0].type != "package_clause":
        pos = node_position(decls[0]) if decls else Position(1, 1)
        raise GoParseError(path, pos.line, pos.column, "expected 'package'")
    for node in root.named_children:
        if node.type not in TOP_LEVEL_NODES:
            pos = node_position(node)
            detail = f"non-declaration statement outside function body ({node.type})"
            raise GoParseError(path, pos.line, pos.column, detail)


def _first_error(root: Node) -> Optional[Node]:
    for node in walk(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


def walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal in source order."""
    stack = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(cur.children))


def node_position(node: Node) -> Position:
    row, col = node.start_point
    return Position(line=int(row) + 1, column=int(col) + 1)


def node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")


def top_level_declarations(root: Node) -> List[Node]:
    return [n for n in root.named_children if n.type != "comment"]


def is_function(node: Node) -> bool:
    return node.type in FUNC_NODES


def braces(block: Node) -> Tuple[Optional[Node], Optional[Node]]:
    lbrace = rbrace = None
    for child in block.children:
        if child.type == "{" and lbrace is None:
            lbrace = child
        elif child.type == "}":
            rbrace = child
    return lbrace, rbrace


def body_statements(block: Node) -> List[Node]:
    # newer grammars wrap the statements of a block in a statement_list node
    container = block
    for child in block.named_children:
        if child.type == "statement_list":
            container = child
            break
    return [n for n in container.named_children if n.type != "comment"]


def field_names(field: Node) -> List[str]:
    return [node_text(n) for n in field.children_by_field_name("name")]


def list_fields(plist: Node) -> List[Node]:
    return [n for n in plist.named_children if n.type in PARAM_NODES]
