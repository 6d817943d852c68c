"""JSON-file persistence for the deck's buttons and uploaded icons."""

from __future__ import annotations

import base64
import binascii
import threading
import time
from pathlib import Path
from typing import Any

from utils.file_utils import load_json, save_json
from utils.log_utils import tprint


def _default_data() -> dict[str, Any]:
    return {"buttons": [], "icons": {}}


class ButtonStore:
    """Read and replace the button list stored in a single JSON file.

    Saves replace the whole list, so concurrent editors resolve to whoever
    wrote last. The lock only keeps a single read-modify-write of the file
    (icon upload) from interleaving with another one in this process.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def initialize(self) -> None:
        if self.path.exists():
            return
        tprint(f"[STORE] creating data file at {self.path}")
        save_json(self.path, _default_data())

    def load(self) -> dict[str, Any]:
        try:
            data = load_json(self.path, default=_default_data())
        except ValueError as exc:
            raise RuntimeError(f"Data file {self.path} is not valid JSON: {exc}") from exc
        if isinstance(data, list):
            # older files hold the bare button list
            return {"buttons": data, "icons": {}}
        if not isinstance(data, dict):
            return _default_data()
        if not isinstance(data.get("buttons"), list):
            data["buttons"] = []
        if not isinstance(data.get("icons"), dict):
            data["icons"] = {}
        return data

    def list_buttons(self) -> list[dict[str, Any]]:
        return list(self.load()["buttons"])

    def save_buttons(self, buttons: list[dict[str, Any]]) -> None:
        with self._lock:
            data = self.load()
            data["buttons"] = list(buttons)
            save_json(self.path, data)
        tprint(f"[STORE] saved {len(buttons)} buttons to {self.path}")

    def add_icon(self, filename: str, mimetype: str, content: bytes) -> str:
        """Store uploaded icon bytes and return the name they are served under."""
        if not content:
            raise ValueError("Uploaded icon is empty")
        safe_name = Path(filename or "").name.strip() or "icon"
        name = f"{int(time.time() * 1000)}-{safe_name}"
        encoded = base64.b64encode(content).decode("ascii")
        with self._lock:
            stored = self.load()
            stored["icons"][name] = {"data": encoded, "mimetype": mimetype}
            save_json(self.path, stored)
        return name

    def get_icon(self, name: str) -> tuple[bytes, str] | None:
        icon = self.load()["icons"].get(name)
        if not isinstance(icon, dict) or "data" not in icon:
            return None
        try:
            content = base64.b64decode(str(icon["data"]), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"Stored icon {name} is corrupt: {exc}") from exc
        return content, str(icon.get("mimetype") or "application/octet-stream")
