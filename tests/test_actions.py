"""Tests for action request coercion and validation."""

import pytest

from action_dispatch.actions import (
    CANONICAL_KEYS,
    REQUIRED_PARAMS,
    ActionRequest,
    validate_request,
)
from action_dispatch.errors import ActionValidationError


class TestActionRequestFromPayload:
    """Test suite for ActionRequest.from_payload()."""

    def test_strips_kind_and_stringifies_params(self):
        """Test that kind is stripped, values stringified and None params dropped."""
        request = ActionRequest.from_payload(" command ", {"command": 42, "extra": None})
        assert request.kind == "command"
        assert request.params == {"command": "42"}

    def test_missing_params_become_empty(self):
        """Test that a missing params object becomes an empty mapping."""
        request = ActionRequest.from_payload("media", None)
        assert request.params == {}

    def test_missing_kind_becomes_empty_string(self):
        """Test that a missing kind becomes an empty string."""
        assert ActionRequest.from_payload(None, {}).kind == ""


class TestValidateRequest:
    """Test suite for validate_request()."""

    @pytest.mark.parametrize("kind", sorted(REQUIRED_PARAMS))
    def test_missing_required_param_rejected(self, kind):
        """Test that each kind names its missing required param."""
        with pytest.raises(ActionValidationError) as exc_info:
            validate_request(ActionRequest(kind=kind, params={}))
        assert REQUIRED_PARAMS[kind] in str(exc_info.value)

    @pytest.mark.parametrize("kind", sorted(REQUIRED_PARAMS))
    def test_blank_required_param_rejected(self, kind):
        """Test that a whitespace-only required param counts as missing."""
        with pytest.raises(ActionValidationError):
            validate_request(ActionRequest(kind=kind, params={REQUIRED_PARAMS[kind]: "   "}))

    def test_unknown_kind_rejected(self):
        """Test that an unrecognized kind is rejected by name."""
        with pytest.raises(ActionValidationError, match="Unknown action: launch"):
            validate_request(ActionRequest(kind="launch", params={"path": "/tmp"}))

    def test_empty_kind_rejected(self):
        """Test that an empty kind is rejected."""
        with pytest.raises(ActionValidationError, match="No action specified"):
            validate_request(ActionRequest(kind="", params={}))

    def test_key_name_upper_cased(self):
        """Test that key names are trimmed and upper-cased."""
        cleaned = validate_request(ActionRequest(kind="keystroke", params={"key": " volume_up "}))
        assert cleaned.params["key"] == "VOLUME_UP"

    def test_command_text_kept_verbatim(self):
        """Test that shell command text is not altered."""
        cleaned = validate_request(ActionRequest(kind="command", params={"command": " echo  hi "}))
        assert cleaned.params["command"] == " echo  hi "

    def test_path_stripped(self):
        """Test that application paths are trimmed."""
        cleaned = validate_request(ActionRequest(kind="application", params={"path": " /tmp/a.txt "}))
        assert cleaned.params["path"] == "/tmp/a.txt"

    def test_error_kind_is_validation(self):
        """Test that validation failures carry the validation_error kind."""
        with pytest.raises(ActionValidationError) as exc_info:
            validate_request(ActionRequest(kind="media", params={}))
        assert exc_info.value.error_kind == "validation_error"


def test_canonical_key_set():
    """Test the fixed canonical key set."""
    assert {"F13", "F19", "VOLUME_MUTE", "PAGEDOWN", "RSHIFT"} <= CANONICAL_KEYS
    assert "F12" not in CANONICAL_KEYS
    assert len(CANONICAL_KEYS) == 27
