"""Data structures describing a documentation run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class AnalyzeOptions:
    """Caller-supplied options for a run.

    Attributes:
        output: Directory that receives the generated Markdown tree.
        model: Model name overriding the configured one.
        verbose: Emit a detailed per-step trace instead of a progress line.
    """

    output: Optional[str] = None
    model: Optional[str] = None
    verbose: bool = False


@dataclass
class FileFailure:
    """A file whose documentation could not be produced."""

    relative_path: str
    message: str


@dataclass
class RunSummary:
    """Success and error tally for a run.

    Attributes:
        total_files: Number of files discovered.
        success_count: Files documented and written.
        error_count: Files that failed at any step.
        output_dir: Resolved output directory.
        failures: One entry per failed file, in processing order.
    """

    total_files: int = 0
    success_count: int = 0
    error_count: int = 0
    output_dir: Optional[Path] = None
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        """Files for which processing was attempted."""
        return self.success_count + self.error_count
