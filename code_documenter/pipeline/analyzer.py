"""Documentation pipeline for a source tree.

Discovers source files under a folder, asks the LLM to document each
one, and writes the results as a mirrored Markdown tree. Files are
processed one at a time with a fixed pause between requests. A failure
on one file is counted and reported, and the run moves on to the next.
"""

import logging
import os
import time
from pathlib import Path
from typing import Callable, Optional, Union

from code_documenter.discovery import discover_files
from code_documenter.generators.llm_client import LLMClient, TextGenerator
from code_documenter.generators.template_manager import TemplateManager
from code_documenter.output.markdown import MarkdownWriter
from code_documenter.pipeline.models import AnalyzeOptions, FileFailure, RunSummary
from code_documenter.pipeline.reporter import ConsoleReporter, ProgressReporter
from code_documenter.utils.config import AppConfig, load_config

logger = logging.getLogger(__name__)


def _validate(folder_path: object, options: AnalyzeOptions) -> None:
    if not folder_path or not isinstance(folder_path, (str, os.PathLike)):
        raise ValueError("Invalid folder path")
    if not options.output:
        raise ValueError("Output directory must be specified")


def analyze_codebase(
    folder_path: Union[str, Path],
    options: AnalyzeOptions,
    *,
    config: Optional[AppConfig] = None,
    llm_client: Optional[TextGenerator] = None,
    writer: Optional[MarkdownWriter] = None,
    reporter: Optional[ProgressReporter] = None,
    templates: Optional[TemplateManager] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Optional[RunSummary]:
    """Generate Markdown documentation for every source file in a folder.

    Args:
        folder_path: Root of the source tree to document.
        options: Output directory, model override, and verbosity.
        config: Application configuration. Loaded from disk if omitted.
        llm_client: Generator used for each file. Defaults to an LLMClient.
        writer: Markdown writer. Defaults to one rooted at ``folder_path``
            that writes into ``options.output``.
        reporter: Receives progress events. Defaults to a ConsoleReporter.
        templates: Prompt template manager.
        sleep: Called with the configured delay between files.

    Returns:
        The run summary, or None when no source files were found.

    Raises:
        ValueError: If the folder path or output option is invalid.
        FileNotFoundError: If the folder does not exist.
        Exception: Any discovery error (traversal or pattern) is reported
            and re-raised unchanged.
    """
    _validate(folder_path, options)

    config = config or load_config()
    reporter = reporter or ConsoleReporter(verbose=options.verbose)
    root = Path(folder_path)

    try:
        if not root.exists():
            raise FileNotFoundError(f"Folder does not exist: {folder_path}")

        pattern = config.discovery.pattern
        reporter.search_started(str(root / pattern))
        files = discover_files(root, pattern, config.discovery.exclude_patterns)
    except Exception as e:
        logger.info("Analysis of %s failed: %s", folder_path, e)
        reporter.run_failed(e)
        raise

    if not files:
        logger.info("No files matching %s under %s", pattern, root)
        reporter.no_files_found(pattern)
        return None

    reporter.files_found(files)

    llm_client = llm_client or LLMClient(config=config.api, model=options.model)
    writer = writer or MarkdownWriter(
        output_dir=options.output,
        source_root=root,
        extension=config.output.extension,
    )
    templates = templates or TemplateManager()

    summary = RunSummary(
        total_files=len(files), output_dir=Path(options.output).resolve()
    )
    total = len(files)

    for index, path in enumerate(files):
        relative_path = os.path.relpath(path, root)
        reporter.file_started(index, total, relative_path, path)

        try:
            content = path.read_text(encoding=config.discovery.encoding)
            reporter.file_read(relative_path, path.stat().st_size)

            prompt = templates.render_file_doc_prompt(
                relative_path, content, language=config.pipeline.language
            )
            result = llm_client.generate(prompt)
            output_path = writer.write_file_doc(path, result.content)
        except Exception as e:
            summary.error_count += 1
            summary.failures.append(FileFailure(relative_path, str(e)))
            logger.info("Failed to document %s: %s", relative_path, e)
            reporter.file_failed(index, total, relative_path, e)
        else:
            summary.success_count += 1
            reporter.file_succeeded(relative_path, output_path)

        if index < total - 1:
            sleep(config.pipeline.request_delay)

    logger.info(
        "Documented %d of %d files (%d errors)",
        summary.success_count,
        total,
        summary.error_count,
    )
    reporter.run_summarized(summary)
    return summary
