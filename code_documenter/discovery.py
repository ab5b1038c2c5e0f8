"""Source file discovery for the documentation pipeline."""

import logging
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.js"


def discover_files(
    folder: Union[str, Path],
    pattern: str = DEFAULT_PATTERN,
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """Collect the files under a folder that match a glob pattern.

    Directories matching the pattern are skipped, as is any path with a
    component listed in ``exclude_patterns``. An empty list is a normal
    result; traversal errors propagate to the caller.

    Args:
        folder: Root directory to search. Existence is checked by the caller.
        pattern: Glob pattern relative to ``folder``.
        exclude_patterns: Path components (e.g. ``node_modules``) to skip.

    Returns:
        Sorted list of matching file paths, each joined onto ``folder``.
    """
    root = Path(folder)
    exclude = set(exclude_patterns)

    files = []
    for path in sorted(root.glob(pattern)):
        if not path.is_file():
            continue
        if exclude and any(part in exclude for part in path.relative_to(root).parts):
            continue
        files.append(path)

    logger.debug("Discovered %d files under %s matching %s", len(files), root, pattern)
    return files
