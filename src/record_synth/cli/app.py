from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from record_synth.cli.generate import generate
from record_synth.cli.inspect import inspect
from record_synth.config import configure_logging

err_console = Console(stderr=True)

app = typer.Typer(
    name="record-synth",
    help="Record Synth CLI — generate constructors and accessors for Rust structs.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (overrides RECORD_SYNTH_LOG_LEVEL).")
    ] = None,
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None


app.command("generate")(generate)
app.command("inspect")(inspect)


def main() -> None:
    app()
