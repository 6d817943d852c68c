"""Action request schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from action_dispatch.errors import ActionValidationError

APPLICATION = "application"
COMMAND = "command"
MEDIA = "media"
KEYSTROKE = "keystroke"

REQUIRED_PARAMS = {
    APPLICATION: "path",
    COMMAND: "command",
    MEDIA: "action",
    KEYSTROKE: "key",
}

ALLOWED_KINDS = frozenset(REQUIRED_PARAMS)

MEDIA_ACTIONS = ("play_pause", "next", "previous")

FUNCTION_KEYS = tuple(f"F{n}" for n in range(13, 20))
MEDIA_KEYS = (
    "MEDIA_PLAY_PAUSE",
    "MEDIA_NEXT_TRACK",
    "MEDIA_PREV_TRACK",
    "VOLUME_UP",
    "VOLUME_DOWN",
    "VOLUME_MUTE",
)
NAVIGATION_KEYS = ("HOME", "END", "PAGEUP", "PAGEDOWN", "DELETE", "INSERT")
MODIFIER_KEYS = (
    "LWIN",
    "RWIN",
    "LALT",
    "RALT",
    "LCONTROL",
    "RCONTROL",
    "LSHIFT",
    "RSHIFT",
)

CANONICAL_KEYS = frozenset(FUNCTION_KEYS + MEDIA_KEYS + NAVIGATION_KEYS + MODIFIER_KEYS)


@dataclass(frozen=True)
class ActionRequest:
    kind: str
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, kind: Any, params: Mapping[str, Any] | None) -> "ActionRequest":
        """Coerce loosely typed JSON input into a request without validating it."""
        cleaned: dict[str, str] = {}
        if isinstance(params, Mapping):
            for key, value in params.items():
                if value is None:
                    continue
                cleaned[str(key)] = str(value)
        return cls(kind=str(kind or "").strip(), params=cleaned)


def normalize_key_name(key: str) -> str:
    return str(key).strip().upper()


def validate_request(request: ActionRequest) -> ActionRequest:
    """Check kind and required params and return a sanitized copy.

    Only structural checks happen here. Whether a media action or key name
    exists on the current platform is decided by the platform tables.
    """
    kind = str(request.kind or "").strip()
    if kind not in ALLOWED_KINDS:
        if not kind:
            raise ActionValidationError("No action specified")
        raise ActionValidationError(f"Unknown action: {kind}")

    required = REQUIRED_PARAMS[kind]
    value = request.params.get(required)
    if value is None or not str(value).strip():
        raise ActionValidationError(f"{kind} requires '{required}'")

    cleaned = dict(request.params)
    if kind == COMMAND:
        # shell command lines keep their exact text
        cleaned[required] = str(value)
    elif kind == KEYSTROKE:
        cleaned[required] = normalize_key_name(value)
    else:
        cleaned[required] = str(value).strip()
    return ActionRequest(kind=kind, params=cleaned)
