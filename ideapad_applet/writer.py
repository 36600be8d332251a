"""Privileged command that writes one ideapad setting to sysfs."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Callable

from .sysfs import IdeapadError, param_path

_U8_RE = re.compile(r"\+?[0-9]+")


def parse_bool(text: str) -> bool:
    """Accept true/false or 1/0, case-insensitively."""
    match text.lower():
        case "true" | "1":
            return True
        case "false" | "0":
            return False
    raise IdeapadError("Value must be true/false or 1/0")


def parse_u8(text: str) -> int:
    """Parse an unsigned decimal integer in 0..255."""
    if not _U8_RE.fullmatch(text) or int(text) > 255:
        raise IdeapadError(f"Value must be an integer between 0 and 255: {text!r}")
    return int(text)


def write_bool_param(param: str, value: bool) -> None:
    param_path(param).write_text("1" if value else "0")


def write_u8_param(param: str, value: int) -> None:
    param_path(param).write_text(str(value))


def set_camera_power(value: bool) -> None:
    write_bool_param("camera_power", value)


def set_conservation_mode(value: bool) -> None:
    write_bool_param("conservation_mode", value)


def set_fan_mode(value: int) -> None:
    write_u8_param("fan_mode", value)


def set_fn_lock(value: bool) -> None:
    write_bool_param("fn_lock", value)


def set_usb_charging(value: bool) -> None:
    write_bool_param("usb_charging", value)


_PARAMS: dict[str, tuple[Callable[[str], object], Callable[[object], None]]] = {
    "camera_power": (parse_bool, set_camera_power),
    "conservation_mode": (parse_bool, set_conservation_mode),
    "fan_mode": (parse_u8, set_fan_mode),
    "fn_lock": (parse_bool, set_fn_lock),
    "usb_charging": (parse_bool, set_usb_charging),
}


def main(argv: list[str] | None = None) -> int:
    """Run ``set <parameter> <value>``; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3 or args[0] != "set":
        prog = Path(sys.argv[0]).name or "ideapad_applet_writer"
        print(f"Usage: {prog} set <parameter> <value>", file=sys.stderr)
        return 1

    param, value_text = args[1], args[2]
    try:
        try:
            parser, setter = _PARAMS[param]
        except KeyError:
            raise IdeapadError(f"Unknown parameter: {param}") from None
        setter(parser(value_text))
    except (IdeapadError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())