from __future__ import annotations
from pathlib import Path
import json

from funclog.parsing.ir import FunctionRecord, LineIndex
from funclog.reporting.schema import FunctionJSON, PlanJSON, PositionJSON, TraceJSON

def build_plan(
    source: Path,
    destination: Path,
    records: list[FunctionRecord],
    index: LineIndex,
    line_numbers: str = "compensated",
) -> PlanJSON:
    functions = [
        FunctionJSON(
            name=r.name,
            kind=r.kind,
            receiver=r.receiver,
            params=list(r.params),
            returns=list(r.returns),
            entry=PositionJSON(line=r.entry.line, column=r.entry.column),
            exits=[PositionJSON(line=p.line, column=p.column) for p in r.exits],
        )
        for r in records
    ]
    traces = [
        TraceJSON(before_line=line, column=log.column, text=log.text)
        for line in sorted(index)
        for log in index[line]
    ]
    return PlanJSON(
        source=source.as_posix(),
        destination=destination.as_posix(),
        line_numbers=line_numbers,
        functions=functions,
        traces=traces,
    )

def export_plan_json(plan: PlanJSON, out: Path) -> Path:
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(plan.model_dump(), indent=2), encoding="utf-8")
    return out
