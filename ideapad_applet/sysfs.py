"""Reading and changing ideapad-laptop platform settings through sysfs."""

from __future__ import annotations

import glob
import re
import subprocess
import sys
from pathlib import Path

HELPER_NAME = "ideapad_applet_writer"
SYSFS_DEV_PATTERN = "/sys/bus/platform/devices/VPC2004:*/"

_U8_RE = re.compile(r"\+?[0-9]+")


class IdeapadError(Exception):
    """Raised when a setting cannot be located, read, parsed or written."""


def find_device_dir(pattern: str | None = None) -> Path:
    """Return the first sysfs directory of the ideapad platform device."""
    matches = sorted(glob.glob(pattern if pattern is not None else SYSFS_DEV_PATTERN))
    if not matches:
        raise IdeapadError("No ideapad kernel module loaded?")
    return Path(matches[0])


def param_path(param: str) -> Path:
    """Return the path of the sysfs attribute named ``param``."""
    return find_device_dir() / param


def _parse_u8(text: str) -> int:
    if not _U8_RE.fullmatch(text):
        raise IdeapadError(f"invalid unsigned 8-bit value: {text!r}")
    number = int(text)
    if number > 255:
        raise IdeapadError(f"value out of range for an unsigned 8-bit value: {text!r}")
    return number


def read_bool_param(param: str) -> bool:
    """Read a 0/1 attribute as a boolean."""
    value = param_path(param).read_text()
    match value.strip():
        case "1":
            return True
        case "0":
            return False
    raise IdeapadError(f"Invalid value for {param}: {value}")


def read_u8_param(param: str) -> int:
    """Read an attribute holding an integer in 0..255."""
    return _parse_u8(param_path(param).read_text().strip())


def get_camera_power() -> bool:
    return read_bool_param("camera_power")


def get_conservation_mode() -> bool:
    return read_bool_param("conservation_mode")


def get_fan_mode() -> int:
    return read_u8_param("fan_mode")


def get_fn_lock() -> bool:
    return read_bool_param("fn_lock")


def get_usb_charging() -> bool:
    return read_bool_param("usb_charging")


def _helper_path() -> Path:
    return Path(sys.argv[0]).resolve().parent / HELPER_NAME


def write_using_helper(param: str, value: str) -> None:
    """Write a setting through the privileged writer, run with pkexec."""
    command = ["pkexec", str(_helper_path()), "set", param, value]
    code = subprocess.run(command, check=False).returncode
    if code == 0:
        return
    if code > 0:
        raise IdeapadError(f"Helper exited with code {code}")
    raise IdeapadError("Helper terminated by signal")


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def set_camera_power(value: bool) -> None:
    write_using_helper("camera_power", _bool_text(value))


def set_conservation_mode(value: bool) -> None:
    write_using_helper("conservation_mode", _bool_text(value))


def set_fan_mode(value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"fan mode must be in 0..255, got {value}")
    write_using_helper("fan_mode", str(value))


def set_fn_lock(value: bool) -> None:
    write_using_helper("fn_lock", _bool_text(value))


def set_usb_charging(value: bool) -> None:
    write_using_helper("usb_charging", _bool_text(value))