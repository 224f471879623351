"""
Mock adapter — stands in for the package manager in tests.
"""

from __future__ import annotations

from redux_scaffold.adapters.base import Adapter, ExecutionContext
from redux_scaffold.core.models.action import Receipt


class MockAdapter(Adapter):
    """Records each install request instead of running it.

    Set ``error`` to make every execution fail with that message.
    """

    def __init__(self, error: str | None = None):
        self.error = error
        self.contexts: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return "command"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.contexts.append(context)
        argv = " ".join(context.action.params.get("argv", []))

        if self.error is not None:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=self.error,
                metadata={"command": argv},
            )
        return Receipt.success(
            adapter=self.name,
            action_id=context.action.id,
            output=f"[mock] {argv}",
            metadata={"command": argv, "return_code": 0},
        )
