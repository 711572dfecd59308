#!/usr/bin/env python3
"""
Résumé Export CLI

Lays out structured résumés (YAML or JSON) and exports them as A4 PDFs.

Commands:
    export  - Export a résumé to PDF
    preview - Print the markdown preview of a résumé
    layout  - Lay out a résumé and report pages without writing a PDF

Examples:\n

    export_resume.py export configs/sample_resume.yaml                    # Export to dated results dir

    export_resume.py export resume.yaml --output-dir outs/results         # Choose output directory

    export_resume.py export resume.yaml --config configs/layout.yaml      # Custom layout config

    export_resume.py preview resume.yaml                                  # Markdown preview

    export_resume.py layout resume.yaml                                   # Page report
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from vitae.contexts.content import InvalidResumeError, format_resume_markdown, load_resume
from vitae.contexts.layout import MeasurementBackendError, compose, load_layout_config
from vitae.contexts.rendering import export_resume
from vitae.utils.logger import session_log_dir
from vitae.utils.timestamp import today

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("VITAE_RESULTS_PATH", "outs/results"))


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _load(resume_file: Path):
    try:
        return load_resume(resume_file)
    except (FileNotFoundError, InvalidResumeError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load_config(config_file: Optional[Path]):
    try:
        return load_layout_config(config_file)
    except (FileNotFoundError, OmegaConfBaseException) as e:
        typer.secho(f"Error: invalid layout config: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


app = typer.Typer(
    help="Lay out structured résumés and export them as paginated PDFs",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("export")
def export_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Résumé file (YAML or JSON)"),
    ],
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the PDF (default: $VITAE_RESULTS_PATH/YYYY-MM-DD)",
        ),
    ] = None,
    filename: Annotated[
        Optional[str],
        typer.Option(
            "--filename",
            "-f",
            help="PDF file name (default: résumé title, or resume.pdf)",
        ),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Layout config YAML merged over the defaults",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show the page report after export",
        ),
    ] = False,
):
    """
    Export a résumé to PDF.

    Writes a session log to $VITAE_LOGS_PATH/export_<timestamp>/render.log.

    Examples:\n

        $ export_resume.py export resume.yaml                       # Export résumé

        $ export_resume.py export resume.yaml -f Jane_Doe.pdf       # Explicit file name
    """
    resume = _load(resume_file)
    config = _load_config(config_file)

    if output_dir is None:
        output_dir = RESULTS_PATH / today()
    log_dir = session_log_dir(LOGS_PATH, "export")

    typer.secho(f"\nExporting: {display_path(resume_file)}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Font family: {config.font_family}")
    typer.echo("")

    try:
        result = export_resume(
            resume,
            output_dir=output_dir,
            filename=filename,
            config=config,
            log_dir=log_dir,
        )
    except MeasurementBackendError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {result.page_count}")
        typer.echo(f"  PDF: {display_path(result.pdf_path)}")
        if verbose:
            layout = compose(resume, config=config)
            for index, page in enumerate(layout.pages, start=1):
                typer.echo(f"  Page {index}: {len(page)} draw ops")
    else:
        typer.secho("✗ Export failed", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    typer.echo(f"  Log: {display_path(log_dir / 'render.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("preview")
def preview_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Résumé file (YAML or JSON)"),
    ],
):
    """
    Print the markdown preview of a résumé.

    Examples:\n

        $ export_resume.py preview resume.yaml
    """
    resume = _load(resume_file)
    typer.echo(format_resume_markdown(resume))


@app.command("layout")
def layout_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Résumé file (YAML or JSON)"),
    ],
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Layout config YAML merged over the defaults",
        ),
    ] = None,
):
    """
    Lay out a résumé and report its pages without writing a PDF.

    Examples:\n

        $ export_resume.py layout resume.yaml
    """
    resume = _load(resume_file)
    config = _load_config(config_file)

    try:
        layout = compose(resume, config=config)
    except MeasurementBackendError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\n{display_path(resume_file)}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Pages: {layout.page_count}")
    for index, page in enumerate(layout.pages, start=1):
        typer.echo(f"  Page {index}: {len(page)} draw ops")
    typer.echo("")


if __name__ == "__main__":
    app()
