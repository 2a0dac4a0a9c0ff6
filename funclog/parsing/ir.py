from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Literal

FuncKind = Literal["function", "method"]

@dataclass(frozen=True)
class Position:
    line: int    # 1-based
    column: int  # 1-based, in bytes

@dataclass
class FunctionRecord:
    name: str
    params: list[str]
    returns: list[str]
    entry: Position
    exits: list[Position] = field(default_factory=list)
    kind: FuncKind = "function"
    receiver: str = ""

@dataclass(frozen=True)
class LogLine:
    text: str
    column: int  # rendered with column - 1 indentation units

# original line number -> trace lines emitted right before it
LineIndex = Dict[int, List[LogLine]]
