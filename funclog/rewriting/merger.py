from __future__ import annotations
from pathlib import Path
from typing import List

from funclog.parsing.ir import LineIndex, LogLine

DEFAULT_INDENT = "\t"  # gofmt indents with tabs
DEFAULT_PREFIX = "debug_"


def split_lines(text: str) -> List[str]:
    """Split on LF only, keeping terminators, so line n matches parser row n - 1."""
    parts = text.split("\n")
    lines = [p + "\n" for p in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def render_log(log: LogLine, indent_unit: str = DEFAULT_INDENT) -> str:
    return f"{indent_unit * max(log.column - 1, 0)}{log.text}\n"


def merge_lines(lines: List[str], index: LineIndex, indent_unit: str = DEFAULT_INDENT) -> List[str]:
    """Interleave trace lines with the original lines.

    `lines` keep their own terminators and are emitted untouched; the traces for
    line n go right before it. Entries past the last line are dropped.
    """
    out: List[str] = []
    for n, line in enumerate(lines, start=1):
        for log in index.get(n, []):
            out.append(render_log(log, indent_unit))
        out.append(line)
    return out


def output_path(path: Path, prefix: str = DEFAULT_PREFIX) -> Path:
    return path.parent / f"{prefix}{path.name}"
