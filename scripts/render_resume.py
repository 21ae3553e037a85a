#!/usr/bin/env python3
"""
Résumé Rendering and Store Management CLI

Renders the stored résumé (or a JSON file) to LaTeX or a Markdown preview, and
imports/exports/resets the stored record.

Commands:
    latex   - Render LaTeX source
    preview - Render the Markdown preview
    export  - Export the stored résumé as JSON
    import  - Replace the stored résumé with a JSON file
    reset   - Restore the sample résumé

Examples:\n

    render_resume.py latex                               # Stored résumé to stdout

    render_resume.py latex -i cv.json -o outs/cv.tex     # JSON file to .tex

    render_resume.py preview                             # Markdown preview to stdout

    render_resume.py export -o backups/                  # backups/cv-data-YYYY-MM-DD.json

    render_resume.py import cv-data-2025-11-13.json      # Load into the store
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from cvtex.contexts.editing import (
    JSONResumeStorage,
    ResumeStorageError,
    ResumeStore,
    export_resume,
    import_resume,
)
from cvtex.contexts.editing.logger import setup_editing_logger
from cvtex.contexts.editing.storage import STORE_PATH
from cvtex.contexts.templating import render_latex, render_preview, write_latex
from cvtex.contexts.templating.defaults import INITIAL_RESUME_DATA
from cvtex.contexts.templating.logger import setup_templating_logger
from cvtex.contexts.templating.resume_data_structure import Resume
from cvtex.utils.logger import session_log_dir

app = typer.Typer(
    help="Render résumés to LaTeX or a Markdown preview and manage the stored record",
    add_completion=False,
    invoke_without_command=True,
)

StoreOption = Annotated[
    Path,
    typer.Option("--store", "-s", help="Record store JSON file"),
]
InputOption = Annotated[
    Optional[Path],
    typer.Option(
        "--input",
        "-i",
        help="Render this JSON résumé instead of the stored one",
        exists=True,
        dir_okay=False,
    ),
]


def load_source(input_path: Optional[Path], store_path: Path) -> Resume:
    """Load the résumé to render, exiting with an error message on bad input."""
    try:
        if input_path is not None:
            return import_resume(input_path)
        return JSONResumeStorage(store_path).load()
    except ResumeStorageError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("latex")
def latex_command(
    input_path: InputOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this .tex file instead of stdout"),
    ] = None,
    store_path: StoreOption = STORE_PATH,
):
    """
    Render LaTeX source for the résumé.

    Examples:\n

        $ render_resume.py latex                        # Print to stdout

        $ render_resume.py latex -o outs/cv.tex         # Write file
    """
    resume = load_source(input_path, store_path)

    if output is None:
        typer.echo(render_latex(resume))
        return

    setup_templating_logger(session_log_dir("latex"), target="latex")
    write_latex(resume, output)


@app.command("preview")
def preview_command(
    input_path: InputOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this .md file instead of stdout"),
    ] = None,
    store_path: StoreOption = STORE_PATH,
):
    """Render the Markdown preview of the résumé."""
    resume = load_source(input_path, store_path)
    markdown = render_preview(resume).to_markdown()

    if output is None:
        typer.echo(markdown)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markdown, encoding="utf-8")
    typer.secho(f"Preview written to {output}", fg=typer.colors.GREEN)


@app.command("export")
def export_command(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Destination file or directory"),
    ] = None,
    store_path: StoreOption = STORE_PATH,
):
    """Export the stored résumé as a JSON file (cv-data-YYYY-MM-DD.json by default)."""
    setup_editing_logger(session_log_dir("export"), store_path=store_path)
    resume = load_source(None, store_path)
    export_resume(resume, output)


@app.command("import")
def import_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="JSON file with a single résumé", exists=True, dir_okay=False),
    ],
    store_path: StoreOption = STORE_PATH,
):
    """Replace the stored résumé with the contents of a JSON file."""
    setup_editing_logger(session_log_dir("import"), store_path=store_path)
    resume = load_source(input_path, store_path)

    storage = JSONResumeStorage(store_path)
    ResumeStore(initial=resume, storage=storage).load_state(resume)
    typer.secho(f"Loaded {resume.name} into {store_path}", fg=typer.colors.GREEN)


@app.command("reset")
def reset_command(
    store_path: StoreOption = STORE_PATH,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation"),
    ] = False,
):
    """Restore the sample résumé, discarding the stored one (even if unreadable)."""
    if not yes:
        typer.confirm("¿Estás seguro? The stored résumé will be replaced", abort=True)

    setup_editing_logger(session_log_dir("reset"), store_path=store_path)
    store = ResumeStore(initial=Resume.from_dict(INITIAL_RESUME_DATA))
    JSONResumeStorage(store_path).save(store.reset(), replace_unreadable=True)
    typer.secho(f"Sample résumé restored in {store_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
