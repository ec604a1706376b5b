import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from record_synth.cli.generate import STDIN_PATH
from record_synth.core.directives import scan_directives
from record_synth.core.errors import GenerationError
from record_synth.core.parser import parse_records
from record_synth.models import Directive, RecordTypeDefinition

console = Console()


def _render_record(record: RecordTypeDefinition) -> None:
    requests = ", ".join(sorted(kind.derive_name for kind in record.requests)) or "-"
    table = Table(title=f"{escape(record.name)} ({record.shape.value}; requests: {requests})", show_lines=False)
    for header in ("field", "visibility", "type", "directives"):
        table.add_column(header)
    for field in record.fields:
        flags = scan_directives(field)
        directives = ", ".join(d.value for d in Directive if d in flags) or "-"
        table.add_row(escape(field.name), field.visibility.value, escape(field.ty.text), directives)
    console.print(table)


def inspect(
    path: Annotated[Path, typer.Argument(help="Path to a Rust source file, or '-' to read stdin.")],
) -> None:
    """Show the records, fields and directives found in a Rust file."""
    try:
        source = sys.stdin.buffer.read() if path == STDIN_PATH else path.read_bytes()
        records = parse_records(source)
    except FileNotFoundError:
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(code=1) from None
    except GenerationError as exc:
        for diagnostic in exc.diagnostics:
            console.print(f"[red]error[/red] {escape(str(path))}: {escape(str(diagnostic))}")
        raise typer.Exit(code=1) from None

    for record in records:
        _render_record(record)
    console.print(f"({len(records)} records)")
