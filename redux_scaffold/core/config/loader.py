"""
Configuration loader — builds the one ``SetupConfig`` a run uses.

Sources, merged once at startup:
    - CLI flags (``--pnpm`` / ``--yarn`` / ``--npm``, ``--dir``)
    - an optional ``redux-scaffold.yml`` in the project directory
      (or an explicit ``--config`` path)

Nothing downstream re-reads argv or the working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from redux_scaffold.core.models.scaffold import PackageManagerName, SetupConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "redux-scaffold.yml"

KNOWN_FLAGS = ("pnpm", "yarn", "npm")


class ConfigError(Exception):
    """Raised when the config file is unreadable or invalid."""


class FileConfig(BaseModel):
    """Schema of ``redux-scaffold.yml``."""

    model_config = ConfigDict(extra="forbid")

    package_manager: PackageManagerName | None = None


def find_config_file(project_dir: Path) -> Path | None:
    """Return ``redux-scaffold.yml`` in the project directory, if present."""
    candidate = project_dir / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_file_config(path: Path) -> FileConfig:
    """Read and validate a config file.

    Raises:
        ConfigError: If the file is missing, not YAML, or has unknown keys.
    """
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return FileConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(raw).__name__}")

    try:
        return FileConfig.model_validate(raw)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid config in {path}: {errors}") from e


def build_config(
    project_dir: Path | None = None,
    flags: Iterable[str] = (),
    config_path: Path | None = None,
) -> SetupConfig:
    """Resolve the run configuration.

    Args:
        project_dir: Host project root (default: cwd).
        flags: Package-manager flag names without dashes. Unknown names
            are dropped.
        config_path: Explicit config file. If None, looks for
            ``redux-scaffold.yml`` in ``project_dir``.

    Raises:
        ConfigError: If a config file is found but invalid.
    """
    root = (project_dir or Path.cwd()).resolve()
    selected = frozenset(f for f in flags if f in KNOWN_FLAGS)

    path = config_path or find_config_file(root)
    file_config = load_file_config(path) if path else FileConfig()
    if path:
        logger.debug("Loaded config from %s", path)

    return SetupConfig(
        project_dir=root,
        flags=selected,
        package_manager=file_config.package_manager,
    )
