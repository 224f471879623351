"""
Command adapter — run an argv with the terminal attached.

The child inherits stdin/stdout/stderr so the package manager's own
progress and prompts reach the user live. Nothing is captured; the
receipt records the exit code and timing.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from redux_scaffold.adapters.base import Adapter, ExecutionContext
from redux_scaffold.core.models.action import Receipt

logger = logging.getLogger(__name__)


class CommandAdapter(Adapter):
    """Execute a command with inherited standard streams.

    Action params:
        argv (list[str]): The command and its arguments.
    """

    @property
    def name(self) -> str:
        return "command"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        argv = context.action.params.get("argv")
        if not argv:
            return False, "Missing required param: 'argv'"

        cwd = context.project_root
        if not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        valid, msg = self.validate(context)
        if not valid:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=msg,
            )

        argv: list[str] = list(context.action.params["argv"])
        cwd = context.project_root
        command = " ".join(argv)

        logger.debug("Executing: %s (cwd=%s)", command, cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Could not start {argv[0]}: {e}",
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=command,
                duration_ms=elapsed_ms,
                metadata={"command": command, "return_code": 0},
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=f"Command exited with code {result.returncode}: {command}",
            duration_ms=elapsed_ms,
            metadata={"command": command, "return_code": result.returncode},
        )
