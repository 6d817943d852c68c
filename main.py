"""Entry point for the WebDeck server."""

import os
import sys
import threading
import webbrowser
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from api.server import create_app
from utils.log_utils import tprint, warn
from utils.settings_store import get_settings, refresh_settings


def _is_enabled(name: str, default: bool = True) -> bool:
    """Read a boolean-like environment variable (1/0/true/false)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _load_env_files() -> None:
    """Load .env files from the working directory, the app directory and home."""
    candidates: list[Path] = []
    cwd = Path.cwd()
    candidates.extend([cwd / "env/.env", cwd / ".env"])

    if getattr(sys, "frozen", False):
        app_root = Path(sys.executable).resolve().parent
    else:
        app_root = Path(__file__).resolve().parent
    candidates.extend([app_root / "env/.env", app_root / ".env"])

    candidates.append(Path.home() / ".webdeck.env")

    for path in candidates:
        if path.exists():
            load_dotenv(dotenv_path=str(path), override=False)


_UVICORN_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}
_LEVEL_ALIASES = {"deep": "debug", "warn": "warning"}


def uvicorn_log_level(value: object) -> str:
    """Translate the deck's log_level setting into a name uvicorn accepts."""
    name = str(value or "info").strip().lower()
    name = _LEVEL_ALIASES.get(name, name)
    if name not in _UVICORN_LEVELS:
        warn("MAIN", f"unknown log_level={value!r}; using info")
        return "info"
    return name


def _open_browser_later(url: str, delay_secs: float = 1.0) -> None:
    timer = threading.Timer(delay_secs, webbrowser.open, args=(url,))
    timer.daemon = True
    timer.start()


def bootstrap() -> None:
    """Load configuration, build the app and serve it until interrupted."""
    _load_env_files()
    settings = refresh_settings()

    host = os.getenv("WEBDECK_HOST", "127.0.0.1")
    port = int(os.getenv("WEBDECK_PORT", "5000"))
    access_log = bool(settings.get("http_access_log", False))
    log_level = uvicorn_log_level(settings.get("log_level"))

    app = create_app()
    url = f"http://{'localhost' if host in {'0.0.0.0', '127.0.0.1'} else host}:{port}"
    tprint(f"[MAIN] WebDeck running at {url}")
    if host != "127.0.0.1":
        warn("MAIN", "listening beyond localhost; anyone who can edit buttons can run commands here")
    if _is_enabled("WEBDECK_OPEN_BROWSER", bool(get_settings().get("open_browser", True))):
        _open_browser_later(url)

    try:
        uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=access_log)
    except KeyboardInterrupt:
        tprint("[MAIN] Received interrupt. Shutting down...")


if __name__ == "__main__":
    bootstrap()
