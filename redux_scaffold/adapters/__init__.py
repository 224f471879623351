"""Adapters — bindings to the external tools the pipeline drives.

Public re-exports for convenient access.
"""

from redux_scaffold.adapters.base import Adapter, ExecutionContext
from redux_scaffold.adapters.mock import MockAdapter
from redux_scaffold.adapters.shell.command import CommandAdapter

__all__ = [
    "Adapter",
    "CommandAdapter",
    "ExecutionContext",
    "MockAdapter",
]
