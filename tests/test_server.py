"""Tests for the FastAPI routes."""

import json
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from action_dispatch import ActionDispatcher, CommandOutcome
from action_dispatch.platforms import LinuxPlatform
from api.button_store import ButtonStore
from api.server import create_app


@pytest.fixture
def executor():
    executor = Mock()
    executor.run = Mock(return_value=CommandOutcome(0, "", ""))
    return executor


@pytest.fixture
def store(tmp_path):
    return ButtonStore(tmp_path / "webdeck-data.json")


@pytest.fixture
def client(executor, store):
    dispatcher = ActionDispatcher(platform=LinuxPlatform(), executor=executor, logger=Mock())
    return TestClient(create_app(dispatcher=dispatcher, store=store))


class TestExecuteRoute:
    """Test suite for POST /execute."""

    def test_media_success(self, client, executor):
        """Test a successful media request end to end."""
        resp = client.post("/execute", json={"action": "media", "params": {"action": "next"}})

        assert resp.status_code == 200
        assert resp.json() == {"status": "success", "result": None}
        executor.run.assert_called_once_with("xdotool key XF86AudioNext", timeout=None)

    def test_command_output_returned(self, client, executor):
        """Test that command output is returned as the result."""
        executor.run.return_value = CommandOutcome(0, "hello\n", "")

        resp = client.post("/execute", json={"action": "command", "params": {"command": "echo hello"}})

        assert resp.json()["result"] == "hello\n"

    def test_missing_action_is_validation_error(self, client, executor):
        """Test that a body without action returns a 400 error payload."""
        resp = client.post("/execute", json={"params": {}})

        assert resp.status_code == 400
        assert resp.json()["status"] == "error"
        assert resp.json()["error"] == "No action specified"
        executor.run.assert_not_called()

    def test_unsupported_key(self, client, executor):
        """Test that an unknown key returns 400 and spawns nothing."""
        resp = client.post("/execute", json={"action": "keystroke", "params": {"key": "F99"}})

        assert resp.status_code == 400
        assert resp.json()["error_kind"] == "unsupported_platform_or_action"
        executor.run.assert_not_called()

    def test_execution_failure_is_500(self, client, executor):
        """Test that a failing command returns 500 with its stderr."""
        executor.run.return_value = CommandOutcome(1, "", "boom")

        resp = client.post("/execute", json={"action": "command", "params": {"command": "false"}})

        assert resp.status_code == 500
        assert resp.json()["error"] == "boom"


class TestButtonRoutes:
    """Test suite for /api/buttons."""

    def test_empty_list(self, client):
        """Test that a fresh store lists no buttons."""
        assert client.get("/api/buttons").json() == []

    def test_save_then_load(self, client):
        """Test that saved buttons, extra keys included, are listed back."""
        buttons = [
            {"name": "Next", "action": "media", "params": {"action": "next"}},
            {"name": "Calc", "action": "application", "params": {"path": "/usr/bin/gnome-calculator"}, "imageUrl": "/icons/c.png", "color": "#333"},
        ]

        assert client.post("/api/buttons", json=buttons).json() == {"status": "success"}
        assert client.get("/api/buttons").json() == buttons

    def test_invalid_button_rejected(self, client):
        """Test that a button without a name is rejected."""
        resp = client.post("/api/buttons", json=[{"action": "media"}])
        assert resp.status_code == 422


class TestIconRoutes:
    """Test suite for icon upload and download."""

    def test_multipart_upload_and_fetch(self, client):
        """Test that a multipart icon upload can be fetched back."""
        resp = client.post("/api/upload-icon", files={"icon": ("play.png", b"\x89PNG", "image/png")})

        assert resp.status_code == 200
        assert resp.json()["status"] == "success"
        path = resp.json()["path"]
        assert path.startswith("/icons/") and path.endswith("-play.png")
        icon = client.get(path)
        assert icon.status_code == 200
        assert icon.content == b"\x89PNG"
        assert icon.headers["content-type"].startswith("image/png")

    def test_upload_without_file(self, client):
        """Test that a request with no icon field returns 400."""
        resp = client.post("/api/upload-icon", data={"other": "x"})

        assert resp.status_code == 400
        assert resp.json() == {"status": "error", "error": "No file uploaded"}

    def test_upload_empty_file(self, client):
        """Test that an empty icon file returns 400."""
        resp = client.post("/api/upload-icon", files={"icon": ("empty.png", b"", "image/png")})

        assert resp.status_code == 400
        assert resp.json()["status"] == "error"

    def test_missing_icon(self, client):
        """Test that an unknown icon returns 404."""
        assert client.get("/icons/missing.png").status_code == 404

    def test_corrupt_data_file(self, client, store):
        """Test that a corrupt data file gives a JSON 500 error."""
        store.path.write_text("{not json")

        resp = client.get("/icons/x.png")

        assert resp.status_code == 500
        assert resp.json()["status"] == "error"
        assert resp.json()["error"].startswith("Error loading icon")

    def test_corrupt_icon_data(self, client, store):
        """Test that stored icon data that is not base64 gives a JSON 500 error."""
        store.path.write_text(json.dumps({"buttons": [], "icons": {"x.png": {"data": "***"}}}))

        resp = client.get("/icons/x.png")

        assert resp.status_code == 500
        assert resp.json()["status"] == "error"


def test_status_reports_platform(client, store):
    """Test that /status reports the platform and data file."""
    assert client.get("/status").json() == {"platform": "Linux", "data_file": str(store.path)}


def test_root_page(client):
    """Test the HTML status page."""
    resp = client.get("/")
    assert "WebDeck" in resp.text
