"""Domain models — pydantic types shared by services, use cases and the CLI."""

from redux_scaffold.core.models.action import Action, Receipt
from redux_scaffold.core.models.scaffold import (
    REDUX_PACKAGES,
    LayoutPatchResult,
    PackageManagerChoice,
    PackageManagerName,
    SetupConfig,
)
from redux_scaffold.core.models.template import GeneratedFile

__all__ = [
    "Action",
    "GeneratedFile",
    "LayoutPatchResult",
    "PackageManagerChoice",
    "PackageManagerName",
    "REDUX_PACKAGES",
    "Receipt",
    "SetupConfig",
]
