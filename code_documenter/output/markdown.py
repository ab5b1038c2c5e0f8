"""Markdown output for generated file documentation.

Each documented source file gets one Markdown file whose location under
the output directory mirrors the source's location under the input root.
"""

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class MarkdownWriter:
    """Writes generated documentation as a mirrored tree of Markdown files."""

    def __init__(
        self,
        output_dir: PathLike = "docs/generated",
        source_root: PathLike = ".",
        extension: str = ".md",
    ) -> None:
        """Initialize the Markdown writer.

        Args:
            output_dir: Directory where Markdown files will be written.
            source_root: Root the source paths are made relative to.
            extension: Suffix given to every written file.
        """
        self.output_dir = Path(output_dir)
        self.source_root = Path(source_root)
        self.extension = extension

    def output_path_for(self, source_path: PathLike) -> Path:
        """Compute the mirrored Markdown path for a source file.

        Sources outside ``source_root`` are placed directly under the
        output directory by file name.
        """
        source = Path(source_path)
        relative = Path(
            os.path.relpath(os.path.abspath(source), os.path.abspath(self.source_root))
        )
        if relative.parts[:1] == ("..",):
            relative = Path(source.name)
        return self.output_dir / relative.with_suffix(self.extension)

    def write_file_doc(self, source_path: PathLike, documentation: str) -> Path:
        """Write the documentation for one source file.

        Creates missing parent directories and overwrites any existing file.

        Args:
            source_path: Path of the documented source file.
            documentation: Markdown text to write.

        Returns:
            Resolved path of the written file.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        md_path = self.output_path_for(source_path)
        md_path.parent.mkdir(parents=True, exist_ok=True)
        md_path.write_text(documentation, encoding="utf-8")

        logger.info("Wrote documentation: %s", md_path)
        return md_path.resolve()
