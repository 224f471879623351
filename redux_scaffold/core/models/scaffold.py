"""
Setup models — the run configuration and per-step outcomes.

``SetupConfig`` is built once at startup and passed to every step;
the remaining models describe what each step decided or did.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

PackageManagerName = Literal["npm", "yarn", "pnpm"]

# Packages installed into the host project, in install order
REDUX_PACKAGES: tuple[str, ...] = ("redux", "react-redux", "@reduxjs/toolkit")


class SetupConfig(BaseModel):
    """Everything a setup run needs, resolved once.

    Attributes:
        project_dir:     Root of the host Next.js project.
        flags:           Package-manager flags given on the command line.
        package_manager: Preferred manager from the config file, if any.
        packages:        Packages to install.
    """

    model_config = ConfigDict(frozen=True)

    project_dir: Path
    flags: frozenset[str] = frozenset()
    package_manager: PackageManagerName | None = None
    packages: tuple[str, ...] = REDUX_PACKAGES


class PackageManagerChoice(BaseModel):
    """The selected package manager and why it was picked."""

    name: PackageManagerName
    source: Literal["flag", "config", "lockfile", "probe", "default"]
    detail: str = ""


class LayoutPatchResult(BaseModel):
    """Outcome of creating or patching the root layout file."""

    status: Literal["created", "patched", "unchanged", "failed"]
    path: str
    message: str = ""

    @property
    def changed(self) -> bool:
        return self.status in ("created", "patched")
