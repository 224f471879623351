"""
Adapter base — the contract between the setup pipeline and external tools.

The pipeline only talks to the package manager through an adapter.
Adapters perform the side effect and describe the outcome in a Receipt.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from redux_scaffold.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """The action to perform and the project directory it runs in."""

    action: Action
    project_root: str = "."


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g. 'command')."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action before running it.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Run the action. MUST never raise; failures go in the Receipt."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
