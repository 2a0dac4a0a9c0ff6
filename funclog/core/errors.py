from __future__ import annotations
from pathlib import Path
from typing import Optional


class FuncLogError(Exception):
    """Base class for every failure that aborts an instrumentation run."""


class GoParseError(FuncLogError):
    def __init__(self, path: Optional[Path], line: int, column: int, detail: str = "syntax error"):
        self.path = path
        self.line = line
        self.column = column
        where = f"{path}:" if path else ""
        super().__init__(f"{where}{line}:{column}: {detail}")


class UnsupportedDeclarationError(FuncLogError):
    def __init__(self, func_name: str, names: list[str], line: int):
        self.func_name = func_name
        self.names = names
        self.line = line
        super().__init__(
            f"line {line}: func {func_name or '<anonymous>'} groups several names in one field "
            f"({', '.join(names)}); declare each parameter with its own type"
        )


class SourceIOError(FuncLogError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"{path}: {reason}")
