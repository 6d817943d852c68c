"""Map declarative deck actions onto per-platform OS commands."""

from action_dispatch.actions import ActionRequest
from action_dispatch.dispatcher import ActionDispatcher
from action_dispatch.errors import (
    ActionValidationError,
    DispatchError,
    ExecutionFailure,
    UnsupportedActionError,
)
from action_dispatch.process import CommandOutcome, SubprocessExecutor
from action_dispatch.results import ActionResult

__all__ = [
    "ActionDispatcher",
    "ActionRequest",
    "ActionResult",
    "ActionValidationError",
    "CommandOutcome",
    "DispatchError",
    "ExecutionFailure",
    "SubprocessExecutor",
    "UnsupportedActionError",
]
