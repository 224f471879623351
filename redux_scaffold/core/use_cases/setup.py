"""
Setup use case — the whole scaffolding run.

    select package manager → install → write boilerplate → patch layout

Strictly sequential. A failed install stops the run before any file is
written; a layout that cannot be patched is only a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from redux_scaffold.adapters.base import Adapter
from redux_scaffold.core.models.action import Receipt
from redux_scaffold.core.models.scaffold import (
    LayoutPatchResult,
    PackageManagerChoice,
    SetupConfig,
)
from redux_scaffold.core.services.generators.redux import generate_redux_files
from redux_scaffold.core.services.layout_patch import patch_layout
from redux_scaffold.core.services.package_install import install_packages
from redux_scaffold.core.services.package_manager import select_package_manager
from redux_scaffold.core.services.scaffold_writer import write_all

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Result of the setup use case."""

    project_dir: Path | None = None
    package_manager: PackageManagerChoice | None = None
    install: Receipt | None = None
    files_written: list[str] = field(default_factory=list)
    layout: LayoutPatchResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error

        result["project_dir"] = str(self.project_dir) if self.project_dir else None
        if self.package_manager:
            result["package_manager"] = self.package_manager.model_dump()
        if self.install:
            result["install"] = {
                "status": self.install.status,
                "duration_ms": self.install.duration_ms,
                "error": self.install.error,
                "command": self.install.metadata.get("command", ""),
            }
        result["files_written"] = list(self.files_written)
        if self.layout:
            result["layout"] = self.layout.model_dump()
        return result


def run_setup(config: SetupConfig, adapter: Adapter | None = None) -> SetupResult:
    """Run the full setup against ``config.project_dir``.

    Args:
        config: Resolved run configuration.
        adapter: Executes the install command (default: ``CommandAdapter``).

    Returns:
        SetupResult. ``error`` is set only when installation failed.
        Filesystem errors while writing files propagate.
    """
    result = SetupResult(project_dir=config.project_dir)

    choice = select_package_manager(config)
    result.package_manager = choice

    receipt = install_packages(config, choice, adapter=adapter)
    result.install = receipt
    if receipt.failed:
        result.error = f"Failed to install Redux packages: {receipt.error}"
        return result

    written = write_all(config.project_dir, generate_redux_files())
    result.files_written = [
        p.relative_to(config.project_dir).as_posix() for p in written
    ]

    result.layout = patch_layout(config.project_dir)
    if result.layout.status == "created":
        result.files_written.append(result.layout.path)

    logger.info("Setup complete: %d file(s) written", len(result.files_written))
    return result
