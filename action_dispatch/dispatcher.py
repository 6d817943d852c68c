"""Validate action requests and run them as exactly one OS command."""

from __future__ import annotations

import time
from typing import Any, Mapping

from action_dispatch.actions import (
    APPLICATION,
    COMMAND,
    KEYSTROKE,
    MEDIA,
    ActionRequest,
    validate_request,
)
from action_dispatch.errors import DispatchError, ExecutionFailure
from action_dispatch.logger import DispatchLogger
from action_dispatch.platforms import PlatformActions, select_platform
from action_dispatch.process import ProcessExecutor, SubprocessExecutor
from action_dispatch.results import ActionResult
from utils.log_utils import shorten


class ActionDispatcher:
    """Turn an :class:`ActionRequest` into a single OS-level side effect.

    The dispatcher holds only collaborators chosen at construction time:
    the platform tables, the process executor and an optional timeout. It
    keeps no per-call state, so concurrent ``dispatch`` calls from separate
    threads never interact. Failures are never retried.

    ``command`` and ``application`` requests run unsandboxed on the host.
    Whoever can write button definitions can execute code as this process.
    """

    def __init__(
        self,
        *,
        platform: PlatformActions | None = None,
        executor: ProcessExecutor | None = None,
        logger: DispatchLogger | None = None,
        timeout_secs: float | None = None,
    ) -> None:
        self.platform = platform or select_platform()
        self.executor = executor or SubprocessExecutor()
        self.logger = logger or DispatchLogger()
        self.timeout_secs = timeout_secs

    def dispatch(self, request: ActionRequest) -> ActionResult:
        start = time.monotonic()
        kind = request.kind
        command: str | None = None
        try:
            request = validate_request(request)
            kind = request.kind
            command = self.resolve_command(request)
            self.logger.deep(f"kind={kind} command={shorten(command)}")
            outcome = self.executor.run(command, timeout=self.timeout_secs)
            if outcome.returncode != 0:
                message = outcome.stderr.strip() or (
                    f"Command failed with exit code {outcome.returncode}: {command}"
                )
                raise ExecutionFailure(message, returncode=outcome.returncode)
        except DispatchError as exc:
            self.logger.error(f"{kind or 'unknown'} failed [{exc.error_kind}]: {shorten(exc.message)}")
            return self._failed(kind, command, exc.error_kind, exc.message, start)
        except Exception as exc:
            self.logger.error(f"{kind or 'unknown'} crashed: {exc}")
            return self._failed(kind, command, ExecutionFailure.error_kind, str(exc), start)

        self.logger.info(f"{kind} ok")
        output = outcome.stdout if kind == COMMAND else None
        return ActionResult(
            success=True,
            output=output,
            kind=kind,
            command=command,
            elapsed_ms=self._elapsed(start),
        )

    def execute(self, kind: Any, params: Mapping[str, Any] | None) -> dict[str, Any]:
        """Entry point for callers holding raw ``{action, params}`` JSON."""
        return self.dispatch(ActionRequest.from_payload(kind, params)).to_payload()

    def resolve_command(self, request: ActionRequest) -> str:
        """Build the command line for a validated request without running it."""
        params = request.params
        if request.kind == APPLICATION:
            return self.platform.open_path_command(params["path"])
        if request.kind == COMMAND:
            return params["command"]
        if request.kind == MEDIA:
            return self.platform.media_command(params["action"])
        if request.kind == KEYSTROKE:
            return self.platform.key_command(params["key"])
        raise ValueError(f"Unhandled action kind '{request.kind}'")

    def _failed(
        self,
        kind: str,
        command: str | None,
        error_kind: str,
        message: str,
        start: float,
    ) -> ActionResult:
        return ActionResult(
            success=False,
            error_kind=error_kind,
            error_message=message or "Action failed",
            kind=kind or None,
            command=command,
            elapsed_ms=self._elapsed(start),
        )

    @staticmethod
    def _elapsed(start: float) -> int:
        return int((time.monotonic() - start) * 1000)
