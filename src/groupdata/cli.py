"""Typer-based CLI for generating GroupData catalogs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from . import __version__
from .batch import read_sources
from .errors import OutputWriteError
from .pipeline import CatalogOptions, GroupDataGenerator, write_output
from .schema import DEFAULT_API_NAME, CallbackPolicy
from .sources import FetchOptions

app = typer.Typer(help="Utility to generate and validate GroupData.json format data.")
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_FETCH_SETTINGS = {
    "timeout": 30.0,
    "max_workers": 8,
}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)


@app.command()
def generate(
    sources: Optional[List[str]] = typer.Argument(None, help="WebIDL files and/or specification URLs"),
    api_name: str = typer.Option(DEFAULT_API_NAME, "--api-name", "-a", help="Name of the API"),
    callback_mode: CallbackPolicy = typer.Option(
        CallbackPolicy.SEPARATE,
        "--callback-mode",
        "-c",
        case_sensitive=False,
        help="Callback mode: ignore, type, or callback",
    ),
    output_file: Optional[Path] = typer.Option(
        None, "--output-file", "-o", dir_okay=False, help="Direct output to the specified file"
    ),
    sources_file: Optional[Path] = typer.Option(
        None, "--sources-file", exists=True, dir_okay=False, help="Text/CSV/JSON list of additional sources"
    ),
    timeout: float = typer.Option(_FETCH_SETTINGS["timeout"], help="Timeout in seconds for remote specifications"),
    workers: int = typer.Option(_FETCH_SETTINGS["max_workers"], min=1, help="Number of sources fetched at once"),
) -> None:
    """Scan WebIDL file(s) and/or specification(s) and print the GroupData for their IDL."""
    source_list = list(sources or [])
    if sources_file is not None:
        try:
            source_list.extend(read_sources(sources_file))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--sources-file") from exc
    if not source_list:
        raise typer.BadParameter("at least one WebIDL file or specification URL is required", param_hint="SOURCES")

    generator = GroupDataGenerator(
        options=CatalogOptions(api_name=api_name, callback_policy=callback_mode, output_file=output_file),
        fetch_options=FetchOptions(timeout=timeout, max_workers=workers),
    )
    result = generator.generate(source_list)

    destination = generator.options.output_file
    if destination is None:
        typer.echo(result.text)
        return
    try:
        write_output(result.text, destination)
    except OutputWriteError as exc:
        logger.error("%s", exc)


app.command("gen", hidden=True, help="Alias for generate.")(generate)


if __name__ == "__main__":
    app()
