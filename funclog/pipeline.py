"""
Instrumentation pipeline for one Go file.

read -> parse -> extract/locate -> compose -> merge happen in memory; the
destination is written only once all of them succeeded, so a failing run
leaves no output behind.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from funclog.analysis.extractor import extract_functions
from funclog.core.config import InstrumentSettings
from funclog.core.errors import SourceIOError
from funclog.parsing.go_parser import parse_go
from funclog.parsing.ir import FunctionRecord, LineIndex
from funclog.rewriting.composer import compose
from funclog.rewriting.merger import merge_lines, output_path, split_lines


@dataclass
class InstrumentResult:
    source: Path
    destination: Path
    records: List[FunctionRecord] = field(default_factory=list)
    index: LineIndex = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)

    @property
    def traces_inserted(self) -> int:
        return sum(len(logs) for logs in self.index.values())


def read_source(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(path, f"cannot read source: {e}") from e


def write_output(path: Path, lines: List[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.writelines(lines)
    except OSError as e:
        raise SourceIOError(path, f"cannot write output: {e}") from e


def analyze_source(
    text: str,
    settings: Optional[InstrumentSettings] = None,
    path: Optional[Path] = None,
) -> Tuple[List[FunctionRecord], LineIndex]:
    settings = settings or InstrumentSettings()
    source = parse_go(text, path)
    records = extract_functions(source)
    return records, compose(records, settings.line_numbers)


def instrument_source(
    text: str,
    settings: Optional[InstrumentSettings] = None,
    path: Optional[Path] = None,
) -> Tuple[List[FunctionRecord], LineIndex, List[str]]:
    settings = settings or InstrumentSettings()
    records, index = analyze_source(text, settings, path)
    lines = merge_lines(split_lines(text), index, settings.indent_unit)
    return records, index, lines


def instrument_file(path: Path, settings: Optional[InstrumentSettings] = None) -> InstrumentResult:
    settings = settings or InstrumentSettings()
    text = read_source(path)
    records, index, lines = instrument_source(text, settings, path)
    destination = output_path(path, settings.output_prefix)
    write_output(destination, lines)
    return InstrumentResult(source=path, destination=destination, records=records, index=index, lines=lines)
