from __future__ import annotations

from dotenv import load_dotenv
load_dotenv()

from pathlib import Path
from typing import Optional
import typer

from rich.console import Console
from rich.table import Table

from funclog.core.config import InstrumentSettings
from funclog.core.errors import FuncLogError, SourceIOError
from funclog.pipeline import analyze_source, instrument_file, read_source
from funclog.presets import load_settings, save_settings
from funclog.reporting.exporters import build_plan, export_plan_json
from funclog.rewriting.merger import output_path


app = typer.Typer(add_completion=False, help="Insert entry/exit trace prints into every function of a Go file")
console = Console()


def _indent_unit(value: Optional[str]) -> Optional[str]:
    # "tab" or a number of spaces; anything else is used literally
    if value is None:
        return None
    if value.lower() in {"tab", "\\t", "\t"}:
        return "\t"
    if value.isdigit():
        return " " * int(value)
    return value


def _settings(
    settings_file: Optional[str],
    prefix: Optional[str] = None,
    indent: Optional[str] = None,
    line_numbers: Optional[str] = None,
) -> InstrumentSettings:
    base = load_settings(Path(settings_file) if settings_file else None)
    try:
        return base.override(output_prefix=prefix, indent_unit=_indent_unit(indent), line_numbers=line_numbers)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)


def _require_file(path: str) -> Path:
    src = Path(path)
    if not src.is_file():
        typer.secho(f"File not found: {src}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    return src


def _fail(e: FuncLogError) -> typer.Exit:
    typer.secho(f"Instrumentation failed: {e}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=2 if isinstance(e, SourceIOError) else 1)


def _functions_table(records) -> Table:
    table = Table(title="Instrumented Functions")
    table.add_column("Func", overflow="fold")
    table.add_column("Kind", justify="center")
    table.add_column("Params", overflow="fold")
    table.add_column("Entry", justify="right")
    table.add_column("Exits", justify="right")
    for r in records:
        name = f"({r.receiver}).{r.name}" if r.receiver else r.name
        table.add_row(
            name,
            r.kind,
            ", ".join(p or "_" for p in r.params),
            f"{r.entry.line}:{r.entry.column}",
            " ".join(f"{p.line}:{p.column}" for p in r.exits),
        )
    return table


@app.command("instrument")
def instrument(
    path: str = typer.Argument(..., help="Go source file to instrument"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Marker prepended to the output file name"),
    indent: Optional[str] = typer.Option(None, "--indent", help="Indentation unit: 'tab' or a number of spaces"),
    line_numbers: Optional[str] = typer.Option(
        None, "--line-numbers", help="Exit line reported in traces: compensated|original"
    ),
    settings_file: Optional[str] = typer.Option(None, "--settings", help="YAML settings file"),
    show: bool = typer.Option(False, "--show", help="Print a table of the instrumented functions"),
) -> None:
    """Write an instrumented copy of PATH next to it."""
    src = _require_file(path)
    settings = _settings(settings_file, prefix, indent, line_numbers)

    try:
        result = instrument_file(src, settings)
    except FuncLogError as e:
        raise _fail(e)

    console.print(f"old path: {result.source}, new path: {result.destination}")
    if show:
        console.print(_functions_table(result.records))
    typer.secho(
        f"Inserted {result.traces_inserted} trace lines into {len(result.records)} functions",
        fg=typer.colors.GREEN,
    )
    console.print("finished writing to file")


@app.command("plan")
def plan(
    path: str = typer.Argument(..., help="Go source file to analyze"),
    json_out: Optional[str] = typer.Option(None, "--json", help="Write the insertion plan as JSON"),
    line_numbers: Optional[str] = typer.Option(
        None, "--line-numbers", help="Exit line reported in traces: compensated|original"
    ),
    settings_file: Optional[str] = typer.Option(None, "--settings", help="YAML settings file"),
) -> None:
    """Show where traces would be inserted, without writing Go code."""
    src = _require_file(path)
    settings = _settings(settings_file, line_numbers=line_numbers)

    try:
        records, index = analyze_source(read_source(src), settings, src)
    except FuncLogError as e:
        raise _fail(e)

    console.rule("[bold]Insertion plan")
    console.print(_functions_table(records))

    if json_out:
        report = build_plan(src, output_path(src, settings.output_prefix), records, index, settings.line_numbers)
        out = export_plan_json(report, Path(json_out))
        typer.secho(f"Wrote plan: {out}", fg=typer.colors.GREEN)


@app.command("init-settings")
def init_settings(
    settings_file: str = typer.Option("presets/funclog.yaml", "--settings", help="Where to write the settings"),
    force: bool = typer.Option(False, help="Overwrite an existing file"),
) -> None:
    """Write a settings file holding the defaults."""
    p = Path(settings_file)
    if p.exists() and not force:
        typer.secho(f"Settings already exist: {p} (use --force to overwrite)", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)
    out = save_settings(InstrumentSettings(), p)
    console.print(f"[green]Wrote settings to {out}[/]")


if __name__ == "__main__":
    app()
