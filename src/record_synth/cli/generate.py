import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from record_synth.config import get_settings
from record_synth.core.errors import GenerationError
from record_synth.core.generate import GenerationResult, generate_from_file, generate_from_source
from record_synth.models import GenerationKind

console = Console()
err_console = Console(stderr=True)

STDIN_PATH = Path("-")


def _run(path: Path, kinds: list[GenerationKind] | None) -> GenerationResult:
    if path == STDIN_PATH:
        return generate_from_source(sys.stdin.buffer.read(), kinds)
    return generate_from_file(path, kinds)


def generate(
    path: Annotated[Path, typer.Argument(help="Path to a Rust source file, or '-' to read stdin.")],
    kind: Annotated[
        list[GenerationKind] | None,
        typer.Option("--kind", "-k", help="Generate this for every type, ignoring derives. Repeatable."),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the generated code here.")] = None,
    indent: Annotated[int | None, typer.Option(min=1, help="Indent width (overrides RECORD_SYNTH_INDENT).")] = None,
) -> None:
    """Generate impl blocks for the structs in a Rust file."""
    try:
        settings = get_settings()
    except ValueError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None
    try:
        result = _run(path, kind or None)
    except FileNotFoundError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None
    except GenerationError as exc:
        for diagnostic in exc.diagnostics:
            err_console.print(f"[red]error[/red] {escape(str(path))}: {escape(str(diagnostic))}")
        raise typer.Exit(code=1) from None

    code = result.render(indent=settings.indent if indent is None else indent)
    if output is not None:
        output.write_text(code, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {len(result.fragments)} impl block(s) to {escape(str(output))}")
    elif sys.stdout.isatty():
        console.print(Syntax(code, "rust"))
    else:
        typer.echo(code, nl=False)
