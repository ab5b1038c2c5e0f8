"""CLI commands for the Code Documenter.

Provides the Click-based command group 'doc' with the 'analyze'
subcommand that documents a source tree file by file.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from code_documenter import __version__
from code_documenter.discovery import discover_files
from code_documenter.pipeline.analyzer import analyze_codebase
from code_documenter.pipeline.models import AnalyzeOptions
from code_documenter.utils.config import load_config
from code_documenter.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="code-documenter")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML config file.",
)
@click.pass_context
def doc(ctx: click.Context, config_path: Optional[str]) -> None:
    """Code Documenter — generate Markdown docs for source files with an LLM."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@doc.command()
@click.argument("path", type=click.Path())
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory. Defaults to output.output_dir from the config.",
)
@click.option("--model", default=None, help="Claude model to use.")
@click.option("--verbose", "-v", is_flag=True, help="Show a detailed per-file trace.")
@click.option(
    "--dry-run",
    is_flag=True,
    help="List the files that would be documented without calling the API.",
)
@click.pass_context
def analyze(
    ctx: click.Context,
    path: str,
    output: Optional[str],
    model: Optional[str],
    verbose: bool,
    dry_run: bool,
) -> None:
    """Generate documentation for every source file under PATH.

    Each file is sent to the LLM and the result is written as Markdown
    under the output directory, mirroring the source layout.
    """
    config = ctx.obj
    out_dir = output or config.output.output_dir

    if dry_run:
        if not Path(path).is_dir():
            raise click.BadParameter(
                f"Folder does not exist: {path}", param_hint="PATH"
            )
        files = discover_files(
            path, config.discovery.pattern, config.discovery.exclude_patterns
        )
        click.echo(f"Found {len(files)} source files")
        for f in files:
            click.echo(f"  Would process: {f}")
        click.echo("Dry run complete. No API calls made.")
        return

    options = AnalyzeOptions(output=out_dir, model=model, verbose=verbose)
    try:
        analyze_codebase(path, options, config=config)
    except ValueError as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)
    except OSError as e:
        logger.debug("Exiting after fatal error: %s", e)
        ctx.exit(1)
