"""Failure classes raised while resolving or running an action."""

from __future__ import annotations


class DispatchError(RuntimeError):
    """Structured dispatch failure carrying a stable ``error_kind``."""

    error_kind = "dispatch_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ActionValidationError(DispatchError):
    """Request is malformed; nothing was sent to the OS."""

    error_kind = "validation_error"


class UnsupportedActionError(DispatchError):
    """No mapping exists for the operation or key on this platform."""

    error_kind = "unsupported_platform_or_action"


class ExecutionFailure(DispatchError):
    """The OS command could not be spawned, timed out, or exited non-zero."""

    error_kind = "execution_failure"

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
