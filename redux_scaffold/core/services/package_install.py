"""
Dependency installation — add the Redux packages to the host project.

Delegates to the selected package manager through an adapter. A failed
receipt here is the one fatal outcome of a setup run.
"""

from __future__ import annotations

import logging

from redux_scaffold.adapters.base import Adapter, ExecutionContext
from redux_scaffold.adapters.shell.command import CommandAdapter
from redux_scaffold.core.models.action import Action, Receipt
from redux_scaffold.core.models.scaffold import PackageManagerChoice, SetupConfig
from redux_scaffold.core.services.package_manager import install_command

logger = logging.getLogger(__name__)

INSTALL_ACTION_ID = "install-redux"


def install_packages(
    config: SetupConfig,
    choice: PackageManagerChoice,
    adapter: Adapter | None = None,
) -> Receipt:
    """Install ``config.packages`` with the chosen package manager.

    Args:
        config: Run configuration (project directory, package list).
        choice: Selected package manager.
        adapter: Executes the command. Defaults to ``CommandAdapter``.

    Returns:
        Receipt with status 'ok' on exit code 0, 'failed' otherwise.
    """
    adapter = adapter or CommandAdapter()
    argv = install_command(choice.name, config.packages)

    action = Action(
        id=INSTALL_ACTION_ID,
        adapter=adapter.name,
        params={"argv": argv},
    )
    context = ExecutionContext(action=action, project_root=str(config.project_dir))

    logger.info("Running %s in %s", " ".join(argv), config.project_dir)
    receipt = adapter.execute(context)

    if receipt.failed:
        logger.error("Install failed: %s", receipt.error)
    else:
        logger.info("Install finished in %dms", receipt.duration_ms)
    return receipt
