"""Console logger for dispatch events."""

from utils.log_utils import log
from utils.settings_store import deep_log


class DispatchLogger:
    system = "DISPATCH"

    def info(self, message: str) -> None:
        log(self.system, message)

    def error(self, message: str) -> None:
        log(self.system, message, variant="ERROR")

    def deep(self, message: str) -> None:
        deep_log(f"[DEEP][{self.system}] {message}")
