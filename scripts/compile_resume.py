#!/usr/bin/env python3
"""
Resume Compilation CLI

Compiles structured resume records (YAML or JSON) into LaTeX source using the
templating context.

Commands:
    compile   - Compile one resume record to a .tex file
    templates - List available templates

Examples:\n

    compile_resume.py compile data/jane_doe.yaml                      # Default template

    compile_resume.py compile data/jane_doe.yaml -t basic_sa          # Regional CV layout

    compile_resume.py compile data/jane_doe.json -o outs/jane.tex -v  # Custom output, verbose

    compile_resume.py templates                                       # List templates
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from quillcv.contexts.templating import TemplateLoader, generate_resume
from quillcv.contexts.templating.defaults import DEFAULT_TEMPLATE_ID, LOGS_PATH
from quillcv.contexts.templating.logger import setup_templating_logger
from quillcv.utils.timestamp import now

app = typer.Typer(
    help="Compile structured resume records into LaTeX documents",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("compile")
def compile_command(
    record_path: Annotated[
        Path,
        typer.Argument(
            help="Resume record file (.yaml, .yml or .json)",
        ),
    ],
    template_id: Annotated[
        str,
        typer.Option(
            "--template",
            "-t",
            help="Template id (unknown ids fall back to the default template)",
        ),
    ] = DEFAULT_TEMPLATE_ID,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output .tex file (default: next to the record file)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Echo debug logging to the console",
        ),
    ] = False,
):
    """
    Compile a resume record to LaTeX source.

    Examples:\n

        $ compile_resume.py compile data/jane_doe.yaml                # Write data/jane_doe.tex

        $ compile_resume.py compile data/jane_doe.yaml -t template02  # Different template
    """
    typer.secho(f"\nCompiling: {record_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Template: {template_id}")
    typer.echo("")

    log_dir = LOGS_PATH / f"compile_{now()}"
    log_file = setup_templating_logger(log_dir, template_id, verbose=verbose)

    result = generate_resume(record_path, output_path=output_path, template_id=template_id)

    typer.echo("")
    if result.success:
        typer.secho("✓ Compilation succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  LaTeX: {result.output_path}")
    else:
        typer.secho("✗ Compilation failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}", fg=typer.colors.RED)

    typer.echo(f"  Time: {result.time_s:.2f}s")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("templates")
def templates_command(
    show_disabled: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Include disabled templates",
        ),
    ] = False,
):
    """
    List available templates.

    Examples:\n

        $ compile_resume.py templates        # Enabled templates

        $ compile_resume.py templates --all  # Include disabled templates
    """
    loader = TemplateLoader()
    templates = [info for info in loader.list_templates() if show_disabled or info.enabled]

    typer.secho(f"\nTemplates in {loader.templates_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    if not templates:
        typer.echo("  No templates found")

    for info in templates:
        marker = "*" if info.id == loader.default_template_id else " "
        status = "" if info.enabled else " (disabled)"
        typer.secho(f" {marker} {info.id:<14}", bold=True, nl=False)
        typer.echo(f" {info.name} [{info.category}]{status}")
        typer.echo(f"   {'':<14} {info.description}")

    typer.echo("")


if __name__ == "__main__":
    app()
