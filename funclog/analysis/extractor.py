from __future__ import annotations
from typing import List, Optional

from tree_sitter import Node

from funclog.analysis.locator import is_body_valid, locate
from funclog.core.errors import UnsupportedDeclarationError
from funclog.parsing.go_parser import (
    GoSource,
    field_names,
    is_function,
    list_fields,
    node_position,
    node_text,
    top_level_declarations,
)
from funclog.parsing.ir import FunctionRecord


def _field_name(func_name: str, field: Node) -> str:
    names = field_names(field)
    if not names:
        return ""
    if len(names) > 1:
        raise UnsupportedDeclarationError(func_name, names, node_position(field).line)
    return names[0]


def param_names(func_name: str, plist: Optional[Node]) -> list[str]:
    if plist is None:
        return []
    return [_field_name(func_name, f) for f in list_fields(plist)]


def result_names(func_name: str, result: Optional[Node]) -> list[str]:
    if result is None:
        return []
    if result.type == "parameter_list":
        return param_names(func_name, result)
    # bare result type, e.g. `func f() error`
    return [""]


def extract_function(fn: Node) -> Optional[FunctionRecord]:
    body = fn.child_by_field_name("body")
    if not is_body_valid(body):
        return None

    name_node = fn.child_by_field_name("name")
    name = node_text(name_node) if name_node is not None else ""

    receiver = ""
    if fn.type == "method_declaration":
        receiver_names = param_names(name, fn.child_by_field_name("receiver"))
        receiver = receiver_names[0] if receiver_names else ""

    params = param_names(name, fn.child_by_field_name("parameters"))
    returns = result_names(name, fn.child_by_field_name("result"))
    entry, exits = locate(body)

    return FunctionRecord(
        name=name,
        params=params,
        returns=returns,
        entry=entry,
        exits=exits,
        kind="method" if fn.type == "method_declaration" else "function",
        receiver=receiver,
    )


def extract_functions(source: GoSource) -> List[FunctionRecord]:
    records: List[FunctionRecord] = []
    for decl in top_level_declarations(source.root):
        if not is_function(decl):
            continue
        record = extract_function(decl)
        if record is None:
            continue
        records.append(record)
    return records
