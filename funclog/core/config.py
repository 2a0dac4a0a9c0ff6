from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from funclog.rewriting.composer import LineNumbers
from funclog.rewriting.merger import DEFAULT_INDENT, DEFAULT_PREFIX

LINE_NUMBER_MODES = ("compensated", "original")

@dataclass(frozen=True)
class InstrumentSettings:
    output_prefix: str = DEFAULT_PREFIX
    indent_unit: str = DEFAULT_INDENT
    line_numbers: LineNumbers = "compensated"
    settings_path: Path | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], settings_path: Optional[Path] = None) -> "InstrumentSettings":
        base = cls(settings_path=settings_path)
        mode = str(data.get("line_numbers", base.line_numbers))
        if mode not in LINE_NUMBER_MODES:
            mode = base.line_numbers
        return cls(
            output_prefix=str(data.get("output_prefix") or base.output_prefix),
            indent_unit=str(data.get("indent_unit") or base.indent_unit),
            line_numbers=mode,  # type: ignore[arg-type]
            settings_path=settings_path,
        )

    def override(self, **changes: Any) -> "InstrumentSettings":
        # None means "not given on the command line"
        given = {k: v for k, v in changes.items() if v is not None}
        if given.get("line_numbers") not in (None, *LINE_NUMBER_MODES):
            raise ValueError(f"line_numbers must be one of {', '.join(LINE_NUMBER_MODES)}")
        return replace(self, **given)
