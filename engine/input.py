# engine/input.py

"""Directional intent and key-event translation."""

from dataclasses import dataclass
from enum import Enum


class KeyEventType(str, Enum):
    """Enumeration for key event types."""

    KEYDOWN = "keydown"
    KEYUP = "keyup"


# Key code -> intent field
KEY_BINDINGS: dict[str, str] = {
    "KeyW": "up",
    "KeyS": "down",
    "KeyA": "left",
    "KeyD": "right",
}


@dataclass
class InputIntent:
    """Directional controls currently held."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def any_active(self) -> bool:
        return self.up or self.down or self.left or self.right

    def reset(self) -> None:
        """Release every control."""
        self.up = False
        self.down = False
        self.left = False
        self.right = False


def handle_key_event(intent: InputIntent, event_type: str, code: str) -> InputIntent:
    """Apply a key press or release to an intent.

    Pressing a bound key sets its control, releasing clears it. Unbound keys
    and unknown event types leave the intent untouched.

    Args:
        intent: Intent to update in place
        event_type: "keydown" or "keyup"
        code: Key code, e.g. "KeyW"

    Returns:
        The same intent instance
    """
    field_name = KEY_BINDINGS.get(code)
    if field_name is None:
        return intent

    if event_type == KeyEventType.KEYDOWN:
        setattr(intent, field_name, True)
    elif event_type == KeyEventType.KEYUP:
        setattr(intent, field_name, False)

    return intent
