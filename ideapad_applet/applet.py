"""State and controls of the ideapad settings applet."""

from __future__ import annotations

import enum
import itertools
import sys
from dataclasses import dataclass
from typing import Any

from . import sysfs
from .sysfs import IdeapadError

_READ_ERRORS = (IdeapadError, OSError, ValueError)


class Action(enum.Enum):
    TOGGLE_POPUP = enum.auto()
    CLOSE_REQUESTED = enum.auto()
    CAMERA_POWER = enum.auto()
    CONSERVATION_MODE = enum.auto()
    FAN_MODE = enum.auto()
    FN_LOCK = enum.auto()
    USB_CHARGING = enum.auto()
    SET_CAMERA_POWER = enum.auto()
    SET_CONSERVATION_MODE = enum.auto()
    SET_FAN_MODE = enum.auto()
    SET_FN_LOCK = enum.auto()
    SET_USB_CHARGING = enum.auto()


@dataclass(frozen=True)
class Message:
    """An event for the applet; ``value`` carries a window id or new setting."""

    action: Action
    value: Any = None


@dataclass(frozen=True)
class Control:
    """One row of the popup: a toggle or a slider bound to a setting."""

    label: str
    kind: str
    value: bool | int
    action: Action
    minimum: int | None = None
    maximum: int | None = None

    def message(self, value: bool | int) -> Message:
        return Message(self.action, value)


_REFRESH = {
    Action.CAMERA_POWER: "camera_power",
    Action.CONSERVATION_MODE: "conservation_mode",
    Action.FAN_MODE: "fan_mode",
    Action.FN_LOCK: "fn_lock",
    Action.USB_CHARGING: "usb_charging",
}

# action -> (field to re-read, setting written, description for errors)
_SETTERS = {
    Action.SET_CAMERA_POWER: ("camera_power", "camera_power", "camera power"),
    Action.SET_CONSERVATION_MODE: ("conservation_mode", "conservation_mode", "conservation mode"),
    Action.SET_FAN_MODE: ("fan_mode", "fan_mode", "fan mode"),
    Action.SET_FN_LOCK: ("fn_lock", "fn_lock", "fn lock"),
    # The USB charging toggle writes through the fn-lock setter.
    Action.SET_USB_CHARGING: ("usb_charging", "fn_lock", "usb charging"),
}

_CONTROLS = (
    ("camera_power", "Camera Power:", Action.SET_CAMERA_POWER),
    ("conservation_mode", "Conservation Mode:", Action.SET_CONSERVATION_MODE),
    ("fan_mode", "Fan Mode:", Action.SET_FAN_MODE),
    ("fn_lock", "Fn Lock:", Action.SET_FN_LOCK),
    ("usb_charging", "USB Charging:", Action.SET_USB_CHARGING),
)


class Applet:
    """Holds the current settings and the open popup, and handles messages."""

    _window_ids = itertools.count(1)

    def __init__(self, backend: Any = None) -> None:
        self._backend = backend if backend is not None else sysfs
        self.popup: int | None = None
        self.camera_power: bool | None = self._read("camera_power")
        self.conservation_mode: bool | None = self._read("conservation_mode")
        self.fan_mode: int | None = self._read("fan_mode")
        self.fn_lock: bool | None = self._read("fn_lock")
        self.usb_charging: bool | None = self._read("usb_charging")

    def _read(self, field: str) -> Any:
        try:
            return getattr(self._backend, f"get_{field}")()
        except _READ_ERRORS:
            return None

    def update(self, message: Message) -> None:
        action = message.action
        if action is Action.TOGGLE_POPUP:
            self.popup = None if self.popup is not None else next(self._window_ids)
        elif action is Action.CLOSE_REQUESTED:
            if message.value == self.popup:
                self.popup = None
        elif action in _REFRESH:
            field = _REFRESH[action]
            setattr(self, field, self._read(field))
        else:
            field, setting, description = _SETTERS[action]
            try:
                getattr(self._backend, f"set_{setting}")(message.value)
            except _READ_ERRORS as exc:
                print(f"Error while setting {description}: {exc}", file=sys.stderr)
            else:
                setattr(self, field, self._read(field))
            if action is Action.SET_CONSERVATION_MODE:
                self.conservation_mode = message.value

    def on_close_requested(self, window_id: int) -> Message:
        return Message(Action.CLOSE_REQUESTED, window_id)

    def controls(self, window_id: int) -> list[Control]:
        """Controls shown in the popup ``window_id``; empty for any other window."""
        if self.popup is None or self.popup != window_id:
            return []
        result = []
        for field, label, action in _CONTROLS:
            value = getattr(self, field)
            if value is None:
                continue
            if field == "fan_mode":
                result.append(Control(label, "slider", value, action, 0, 4))
            else:
                result.append(Control(label, "toggle", value, action))
        return result