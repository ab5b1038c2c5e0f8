"""Progress reporting for documentation runs.

The pipeline announces what it is doing through a ProgressReporter. The
console implementation renders the events for a terminal in either a
terse single-line mode or a verbose multi-line trace; the recording
implementation keeps the raw events so they can be inspected.
"""

import os
import traceback
from pathlib import Path
from typing import Any, Optional, Sequence

import click

from code_documenter.pipeline.models import RunSummary

_PREVIEW_COUNT = 5


class ProgressReporter:
    """Receives pipeline events. Every hook is a no-op by default."""

    def search_started(self, pattern: str) -> None:
        """Discovery is about to search for files matching ``pattern``."""
        self._emit("search_started", pattern=pattern)

    def no_files_found(self, pattern: str) -> None:
        """Discovery found nothing; the run ends without processing files."""
        self._emit("no_files_found", pattern=pattern)

    def files_found(self, files: Sequence[Path]) -> None:
        """Discovery returned the files about to be processed."""
        self._emit("files_found", files=list(files))

    def file_started(
        self, index: int, total: int, relative_path: str, path: Path
    ) -> None:
        """Processing of the file at zero-based ``index`` has begun."""
        self._emit(
            "file_started",
            index=index,
            total=total,
            relative_path=relative_path,
            path=path,
        )

    def file_read(self, relative_path: str, size: int) -> None:
        """The file was read; ``size`` is its length in bytes."""
        self._emit("file_read", relative_path=relative_path, size=size)

    def file_succeeded(self, relative_path: str, output_path: Path) -> None:
        """Documentation for the file was written to ``output_path``."""
        self._emit(
            "file_succeeded", relative_path=relative_path, output_path=output_path
        )

    def file_failed(
        self, index: int, total: int, relative_path: str, error: Exception
    ) -> None:
        """Processing the file raised ``error``; the run continues."""
        self._emit(
            "file_failed",
            index=index,
            total=total,
            relative_path=relative_path,
            error=error,
        )

    def run_summarized(self, summary: RunSummary) -> None:
        """Every file has been attempted."""
        self._emit("run_summarized", summary=summary)

    def run_failed(self, error: Exception) -> None:
        """A fatal error is about to be re-raised to the caller."""
        self._emit("run_failed", error=error)

    def _emit(self, event: str, **payload: Any) -> None:
        pass


class RecordingReporter(ProgressReporter):
    """Stores every event as an ``(name, payload)`` tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def _emit(self, event: str, **payload: Any) -> None:
        self.events.append((event, payload))

    def names(self) -> list[str]:
        """Event names in the order they were emitted."""
        return [name for name, _ in self.events]

    def payloads(self, event: str) -> list[dict[str, Any]]:
        """Payloads of every emitted event with the given name."""
        return [payload for name, payload in self.events if name == event]


def _progress(index: int, total: int) -> str:
    return f"[{index + 1}/{total}]"


def _innermost_frame(error: BaseException) -> Optional[str]:
    frames = traceback.extract_tb(error.__traceback__)
    if not frames:
        return None
    frame = frames[-1]
    return f"{frame.filename}:{frame.lineno} in {frame.name}"


class ConsoleReporter(ProgressReporter):
    """Renders pipeline events on the terminal with click."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def search_started(self, pattern: str) -> None:
        if self.verbose:
            click.echo(f"🔍 Searching for source files matching: {pattern}")

    def no_files_found(self, pattern: str) -> None:
        click.echo(
            "⚠️  No matching source files found in the specified directory", err=True
        )
        if self.verbose:
            click.echo(
                f"  - Make sure the path is correct and contains files matching {pattern}"
            )
            click.echo(f"  - Current working directory: {os.getcwd()}")

    def files_found(self, files: Sequence[Path]) -> None:
        click.echo(f"📂 Found {len(files)} source files to process...")
        if self.verbose:
            click.echo("  First few files:")
            for i, path in enumerate(files[:_PREVIEW_COUNT]):
                click.echo(f"  {i + 1}. {path}")
            if len(files) > _PREVIEW_COUNT:
                click.echo(f"  ...and {len(files) - _PREVIEW_COUNT} more")

    def file_started(
        self, index: int, total: int, relative_path: str, path: Path
    ) -> None:
        progress = _progress(index, total)
        if self.verbose:
            click.echo(f"\n{progress} 📄 Processing: {relative_path}")
            click.echo(f"   📍 Full path: {Path(path).resolve()}")
        else:
            click.echo(f"\r{progress} Processing: {relative_path}...", nl=False)

    def file_read(self, relative_path: str, size: int) -> None:
        if self.verbose:
            click.echo(f"   📊 File size: {size / 1024:.2f} KB")
            click.echo("   🤖 Sending to AI for documentation...")

    def file_succeeded(self, relative_path: str, output_path: Path) -> None:
        if self.verbose:
            click.echo(
                f"   ✅ Successfully documented: {os.path.relpath(output_path)}"
            )

    def file_failed(
        self, index: int, total: int, relative_path: str, error: Exception
    ) -> None:
        progress = _progress(index, total)
        message = f"❌ Error processing {relative_path}: {error}"
        if self.verbose:
            click.echo(f"\n{' ' * (len(progress) + 1)}{message}", err=True)
            frame = _innermost_frame(error) or "No stack trace"
            click.echo(f"   Stack: {frame}", err=True)
        else:
            click.echo(f"\n{progress} {message}", err=True)

    def run_summarized(self, summary: RunSummary) -> None:
        click.echo("\n📊 Documentation generation complete!")
        click.echo(f"✅ {summary.success_count} files successfully documented")
        if summary.error_count > 0:
            click.echo(
                f"⚠️  {summary.error_count} files had errors (see above for details)",
                err=True,
            )
        click.echo(f"📂 Output directory: {summary.output_dir}")

    def run_failed(self, error: Exception) -> None:
        click.echo(f"\n❌ Analysis failed: {error}", err=True)
        if self.verbose:
            click.echo(
                "".join(
                    traceback.format_exception(
                        type(error), error, error.__traceback__
                    )
                ),
                err=True,
            )
