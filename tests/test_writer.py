import glob

import pytest

from ideapad_applet import sysfs, writer
from ideapad_applet.sysfs import IdeapadError


@pytest.fixture
def device(tmp_path, monkeypatch):
    dev = tmp_path / "VPC2004:00"
    dev.mkdir()
    monkeypatch.setattr(
        sysfs, "SYSFS_DEV_PATTERN", glob.escape(str(tmp_path)) + "/VPC2004:*/"
    )
    return dev


@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("TRUE", True), ("1", True), ("false", False), ("False", False), ("0", False)],
)
def test_parse_bool(text, expected):
    assert writer.parse_bool(text) is expected


@pytest.mark.parametrize("text", ["yes", "", "2", "on"])
def test_parse_bool_invalid(text):
    with pytest.raises(IdeapadError, match="Value must be true/false or 1/0"):
        writer.parse_bool(text)


@pytest.mark.parametrize("text, expected", [("0", 0), ("4", 4), ("+7", 7), ("255", 255)])
def test_parse_u8(text, expected):
    assert writer.parse_u8(text) == expected


@pytest.mark.parametrize("text", ["256", "-1", "", "x", "1.5"])
def test_parse_u8_invalid(text):
    with pytest.raises(IdeapadError):
        writer.parse_u8(text)


def test_write_bool_param(device):
    assert writer.write_bool_param("fn_lock", True) is None
    assert (device / "fn_lock").read_text() == "1"
    assert sysfs.read_bool_param("fn_lock") is True
    assert writer.write_bool_param("fn_lock", False) is None
    assert (device / "fn_lock").read_text() == "0"
    assert sysfs.read_bool_param("fn_lock") is False


def test_write_u8_param_round_trip(device):
    writer.write_u8_param("fan_mode", 3)
    assert sysfs.read_u8_param("fan_mode") == 3


@pytest.mark.parametrize(
    "setter, name, value",
    [
        (writer.set_camera_power, "camera_power", True),
        (writer.set_conservation_mode, "conservation_mode", False),
        (writer.set_fn_lock, "fn_lock", True),
        (writer.set_usb_charging, "usb_charging", False),
    ],
)
def test_bool_setters_round_trip(device, setter, name, value):
    setter(value)
    assert sysfs.read_bool_param(name) is value


def test_set_fan_mode_round_trip(device):
    writer.set_fan_mode(2)
    assert sysfs.get_fan_mode() == 2


def test_main_sets_value(device):
    assert writer.main(["set", "conservation_mode", "true"]) == 0
    assert (device / "conservation_mode").read_text() == "1"


def test_main_sets_fan_mode(device):
    assert writer.main(["set", "fan_mode", "4"]) == 0
    assert (device / "fan_mode").read_text() == "4"


@pytest.mark.parametrize("argv", [[], ["set", "fn_lock"], ["get", "fn_lock", "1"]])
def test_main_usage(argv, capsys):
    assert writer.main(argv) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_unknown_parameter(device, capsys):
    assert writer.main(["set", "bogus", "1"]) == 1
    assert "Error: Unknown parameter: bogus" in capsys.readouterr().err


def test_main_bad_value(device, capsys):
    assert writer.main(["set", "fn_lock", "maybe"]) == 1
    assert "Value must be true/false or 1/0" in capsys.readouterr().err
    assert not (device / "fn_lock").exists()


def test_main_no_device(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        sysfs, "SYSFS_DEV_PATTERN", glob.escape(str(tmp_path)) + "/VPC2004:*/"
    )
    assert writer.main(["set", "fn_lock", "1"]) == 1
    assert "No ideapad kernel module loaded?" in capsys.readouterr().err