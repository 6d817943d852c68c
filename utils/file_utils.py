"""JSON loading/saving helpers."""

import json
import os
from pathlib import Path
from typing import Any


def load_json(path: str | Path, default: Any = None) -> Any:
    """Return parsed JSON from ``path`` or ``default`` when the file is absent."""
    p = Path(path)
    if not p.exists():
        return {} if default is None else default
    return json.loads(p.read_text(encoding="utf-8"))


def save_json(path: str | Path, data: Any) -> None:
    """Write ``data`` next to ``path`` first, then swap it into place."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_name(p.name + ".tmp")
    tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.replace(tmp, p)
