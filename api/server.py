"""FastAPI server exposing the deck's buttons and action execution."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from action_dispatch import ActionDispatcher, ActionRequest, ExecutionFailure
from action_dispatch.platforms import select_platform
from api.button_store import ButtonStore
from utils.log_utils import tprint
from utils.settings_store import command_timeout, get_settings

DEFAULT_DATA_FILE = "webdeck-data.json"


class ExecuteRequest(BaseModel):
    # Left optional so a missing kind reaches the dispatcher's own validation.
    action: str = ""
    params: dict[str, Any] = Field(default_factory=dict)


class ButtonDefinition(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    action: str
    params: dict[str, Any] = Field(default_factory=dict)
    imageUrl: Optional[str] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "error": message})


def build_dispatcher() -> ActionDispatcher:
    settings = get_settings()
    return ActionDispatcher(
        platform=select_platform(settings.get("platform")),
        timeout_secs=command_timeout(),
    )


def create_app(
    *,
    dispatcher: ActionDispatcher | None = None,
    store: ButtonStore | None = None,
) -> FastAPI:
    dispatcher = dispatcher or build_dispatcher()
    store = store or ButtonStore(get_settings().get("data_file") or DEFAULT_DATA_FILE)
    store.initialize()

    app = FastAPI(title="WebDeck", version="0.1.0")
    # Reachable from phones and tablets on the LAN.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/execute")
    def execute(req: ExecuteRequest):
        # Sync handler: FastAPI runs each call on its own threadpool worker.
        result = dispatcher.dispatch(ActionRequest.from_payload(req.action, req.params))
        if result.success:
            return result.to_payload()
        status_code = 500 if result.error_kind == ExecutionFailure.error_kind else 400
        return JSONResponse(status_code=status_code, content=result.to_payload())

    @app.get("/api/buttons")
    def list_buttons():
        try:
            return store.list_buttons()
        except (OSError, RuntimeError) as exc:
            return _error(500, str(exc))

    @app.post("/api/buttons")
    def save_buttons(buttons: list[ButtonDefinition]):
        try:
            store.save_buttons([button.model_dump(exclude_none=True) for button in buttons])
        except (OSError, RuntimeError) as exc:
            return _error(500, str(exc))
        return {"status": "success"}

    @app.post("/api/upload-icon")
    def upload_icon(icon: Optional[UploadFile] = File(default=None)):
        if icon is None:
            return _error(400, "No file uploaded")
        try:
            name = store.add_icon(
                icon.filename or "icon",
                icon.content_type or "application/octet-stream",
                icon.file.read(),
            )
        except ValueError as exc:
            return _error(400, str(exc))
        except (OSError, RuntimeError) as exc:
            return _error(500, str(exc))
        return {"status": "success", "path": f"/icons/{name}"}

    @app.get("/icons/{filename}")
    def get_icon(filename: str):
        try:
            icon = store.get_icon(filename)
        except (OSError, RuntimeError, ValueError) as exc:
            tprint(f"[ERROR][API] loading icon {filename} failed: {exc}")
            return _error(500, f"Error loading icon: {exc}")
        if icon is None:
            raise HTTPException(status_code=404, detail="Icon not found")
        content, mimetype = icon
        return Response(content=content, media_type=mimetype)

    @app.get("/status")
    def status():
        return {"platform": dispatcher.platform.label, "data_file": str(store.path)}

    @app.get("/", response_class=HTMLResponse)
    def root():
        return (
            "<html><body><h1>WebDeck</h1>"
            f"<p>Status: OK ({dispatcher.platform.label})</p></body></html>"
        )

    tprint(f"[API] WebDeck ready platform={dispatcher.platform.label} data_file={store.path}")
    return app
