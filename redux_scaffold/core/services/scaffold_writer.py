"""
Scaffold writer — put generated files on disk.

Filesystem errors are not caught here: a failed write ends the run and
leaves earlier files in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from redux_scaffold.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


class FileExistsSkip(Exception):
    """Raised when a non-overwritable file is already present."""


def write_generated_file(project_dir: Path, file_data: GeneratedFile) -> Path:
    """Write one GeneratedFile under ``project_dir``.

    Parent directories are created as needed. An existing file is
    truncated and replaced when ``file_data.overwrite`` is set.

    Returns:
        Absolute path of the written file.

    Raises:
        FileExistsSkip: The target exists and ``overwrite`` is False.
        OSError: Any filesystem failure.
    """
    target = project_dir / file_data.path

    replaced = target.exists()
    if replaced and not file_data.overwrite:
        raise FileExistsSkip(f"File already exists: {file_data.path}")

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(file_data.content, encoding="utf-8")

    if replaced:
        logger.info("Replaced %s", file_data.path)
    else:
        logger.info("Created %s", file_data.path)
    return target


def write_all(project_dir: Path, files: list[GeneratedFile]) -> list[Path]:
    """Write files in order. Stops at the first filesystem error."""
    return [write_generated_file(project_dir, f) for f in files]
