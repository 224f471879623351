"""
Package manager selection — pick npm, yarn or pnpm for the host project.

First match wins:
    1. explicit CLI flag (--pnpm > --yarn > --npm)
    2. ``package_manager`` in redux-scaffold.yml
    3. lock file in the project directory
    4. ``<cli> --version`` probe (pnpm, then yarn)
    5. npm

Selection never fails. Probe errors are reported as ``None``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable

from redux_scaffold.core.models.scaffold import PackageManagerChoice, SetupConfig

logger = logging.getLogger(__name__)


# ── Package manager definitions ─────────────────────────────────


_PACKAGE_MANAGERS: dict[str, dict] = {
    "pnpm": {
        "cli": "pnpm",
        "lock_file": "pnpm-lock.yaml",
        "add": ["pnpm", "add"],
    },
    "yarn": {
        "cli": "yarn",
        "lock_file": "yarn.lock",
        "add": ["yarn", "add"],
    },
    "npm": {
        "cli": "npm",
        "lock_file": "package-lock.json",
        "add": ["npm", "install", "--save"],
    },
}

# Tie-break order for flags and lock files
_PRIORITY = ("pnpm", "yarn", "npm")

# Managers worth probing; npm is the fallback anyway
_PROBE_ORDER = ("pnpm", "yarn")

_PROBE_TIMEOUT = 10


def probe_version(cli: str) -> str | None:
    """Ask ``<cli> --version`` and return the version, or None.

    A missing executable, a timeout and a non-zero exit all map to None.
    """
    try:
        result = subprocess.run(
            [cli, "--version"],
            capture_output=True,
            text=True,
            timeout=_PROBE_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Probe %s --version failed: %s", cli, e)
        return None

    if result.returncode != 0:
        logger.debug("Probe %s --version exited %d", cli, result.returncode)
        return None
    return (result.stdout or "").strip() or None


def detect_lock_file(project_dir: Path) -> str | None:
    """Return the manager whose lock file exists in ``project_dir``."""
    for pm_id in _PRIORITY:
        if (project_dir / _PACKAGE_MANAGERS[pm_id]["lock_file"]).is_file():
            return pm_id
    return None


def install_command(manager: str, packages: tuple[str, ...] | list[str]) -> list[str]:
    """Build the argv that adds ``packages`` with ``manager``."""
    spec = _PACKAGE_MANAGERS.get(manager)
    if spec is None:
        raise ValueError(f"Unknown package manager: {manager}")
    return [*spec["add"], *packages]


def select_package_manager(
    config: SetupConfig,
    probe: Callable[[str], str | None] = probe_version,
) -> PackageManagerChoice:
    """Pick the package manager for this run."""
    choice = _select(config, probe)
    logger.info("Package manager: %s (%s%s)", choice.name, choice.source,
                f": {choice.detail}" if choice.detail else "")
    return choice


def _select(
    config: SetupConfig,
    probe: Callable[[str], str | None],
) -> PackageManagerChoice:
    for pm_id in _PRIORITY:
        if pm_id in config.flags:
            return PackageManagerChoice(name=pm_id, source="flag", detail=f"--{pm_id}")

    if config.package_manager:
        return PackageManagerChoice(
            name=config.package_manager, source="config", detail="redux-scaffold.yml",
        )

    locked = detect_lock_file(config.project_dir)
    if locked:
        return PackageManagerChoice(
            name=locked, source="lockfile", detail=_PACKAGE_MANAGERS[locked]["lock_file"],
        )

    for pm_id in _PROBE_ORDER:
        version = probe(_PACKAGE_MANAGERS[pm_id]["cli"])
        if version:
            return PackageManagerChoice(name=pm_id, source="probe", detail=version)

    return PackageManagerChoice(name="npm", source="default")
