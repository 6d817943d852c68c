"""Process executor used for every OS-level side effect."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Protocol

from action_dispatch.errors import ExecutionFailure
from utils.settings_store import deep_log


@dataclass(frozen=True)
class CommandOutcome:
    returncode: int
    stdout: str = ""
    stderr: str = ""


class ProcessExecutor(Protocol):
    """Spawn one shell command line and wait for it to exit."""

    def run(self, command: str, *, timeout: float | None = None) -> CommandOutcome:
        ...


class SubprocessExecutor:
    """Run command lines through the platform shell with captured output.

    ``subprocess.run`` reaps the child on every path, including timeouts,
    where the child is killed before ``TimeoutExpired`` propagates.
    """

    def run(self, command: str, *, timeout: float | None = None) -> CommandOutcome:
        deep_log(f"[DEEP][PROCESS] run command={command!r} timeout={timeout}")
        try:
            completed = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExecutionFailure(f"Command timed out after {exc.timeout:g}s: {command}") from exc
        except OSError as exc:
            raise ExecutionFailure(f"Failed to start command: {exc}") from exc
        return CommandOutcome(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
