"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A boilerplate file to be written into the host project.

    Attributes:
        path:      Relative path from the project directory.
        content:   Full file content.
        overwrite: Whether to replace the file if it already exists.
        reason:    Why this file is generated.
    """

    path: str
    content: str
    overwrite: bool = True
    reason: str = ""
