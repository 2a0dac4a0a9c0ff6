"""
Renders entry/exit trace statements as Go source text and groups them by the
original line they must precede.
"""
from __future__ import annotations
from typing import Iterable, Literal, Tuple

from funclog.parsing.ir import FunctionRecord, LineIndex, LogLine

LineNumbers = Literal["compensated", "original"]

VALUE_VERB = "%+v"


def param_log(params: Iterable[str]) -> Tuple[str, str, int]:
    """Format fragment, argument list and count for the named parameters.

    Unnamed parameters ("") have no value to print and are skipped.
    """
    fmt_parts: list[str] = []
    args: list[str] = []
    for p in params or []:
        if not p:
            continue
        fmt_parts.append(f"{p}: {VALUE_VERB}")
        args.append(p)
    return ", ".join(fmt_parts), ",".join(args), len(args)


def entry_log(record: FunctionRecord) -> LogLine:
    message = f"Starting func {record.name}"
    fmt_part, args, count = param_log(record.params)
    if count:
        message += f" with values: {fmt_part}"
        text = f'fmt.Printf("{message}\\n", {args})'
    else:
        text = f'fmt.Println("{message}")'
    return LogLine(text=text, column=record.entry.column)


def exit_log(record: FunctionRecord, idx: int, line: int) -> LogLine:
    text = f'fmt.Println("Exiting func {record.name} from line {line}")'
    return LogLine(text=text, column=record.exits[idx].column)


def compose(records: Iterable[FunctionRecord], line_numbers: LineNumbers = "compensated") -> LineIndex:
    index: LineIndex = {}
    count = 0  # trace lines generated so far, across the whole file
    for record in records:
        index.setdefault(record.entry.line, []).append(entry_log(record))
        count += 1
        for idx, pos in enumerate(record.exits):
            shown = pos.line + count if line_numbers == "compensated" else pos.line
            index.setdefault(pos.line, []).append(exit_log(record, idx, shown))
            count += 1
    return index
