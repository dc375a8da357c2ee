" generic fixtures "
from copy import deepcopy
import logging

import pytest

from rdrop.config import DropdownConfig
from rdrop.models import Anchor
from .testtools import FakeHyprctl


def pytest_configure():
    "Runs once before all"
    from rdrop.logging_setup import LogSettings, init_logger

    init_logger(LogSettings(debug=True, filename="/dev/null"))


@pytest.fixture
def test_logger():
    logger = logging.getLogger("rdrop.tests")
    logger.addHandler(logging.NullHandler())
    return logger


@pytest.fixture
def hyprctl(monkeypatch):
    "Replaces the hyprctl process with a fake compositor"
    fake = FakeHyprctl()
    fake.json_results["monitors"] = deepcopy(MONITORS)
    fake.json_results["activeworkspace"] = deepcopy(ACTIVE_WORKSPACE)
    fake.json_results["clients"] = []
    monkeypatch.setattr("asyncio.create_subprocess_exec", fake)
    return fake


@pytest.fixture
def dropdown_config():
    return DropdownConfig(terminal="kitty", class_name="rdrop-term", width=50, height=30, margin=20, anchor=Anchor.TOP)


def make_client(klass="rdrop-term", ws_id=1, ws_name="1"):
    "Hyprland client entry, with the usual noise around the fields in use"
    return {
        "address": "0x12345677890",
        "mapped": True,
        "hidden": False,
        "at": [480, 20],
        "size": [960, 324],
        "workspace": {"id": ws_id, "name": ws_name},
        "floating": True,
        "monitor": 0,
        "class": klass,
        "title": "my fake terminal",
        "initialClass": klass,
        "initialTitle": "my fake terminal",
        "pid": 1234,
        "xwayland": False,
        "pinned": False,
        "fullscreen": 0,
        "grouped": [],
        "swallowing": "0x0",
        "focusHistoryID": 2,
    }


SCRATCH_CLIENT = make_client(ws_id=-98, ws_name="special:rdrop")

ACTIVE_WORKSPACE = {
    "id": 1,
    "name": "1",
    "monitor": "DP-1",
    "monitorID": 0,
    "windows": 3,
    "hasfullscreen": False,
    "lastwindow": "0x12345677890",
    "lastwindowtitle": "my fake terminal",
}

MONITORS = [
    {
        "id": 1,
        "name": "HDMI-A-1",
        "description": "BNQ BenQ PJ 0x01010101 (HDMI-A-1)",
        "width": 3440,
        "height": 1440,
        "refreshRate": 60.00000,
        "x": 1920,
        "y": 0,
        "activeWorkspace": {"id": 4, "name": "4"},
        "specialWorkspace": {"id": 0, "name": ""},
        "reserved": [0, 50, 0, 0],
        "scale": 1.00,
        "transform": 0,
        "focused": False,
        "dpmsStatus": True,
        "vrr": False,
    },
    {
        "id": 0,
        "name": "DP-1",
        "description": "Microstep MAG342CQPV DB6H513700137 (DP-1)",
        "width": 1920,
        "height": 1080,
        "refreshRate": 59.99900,
        "x": 0,
        "y": 0,
        "activeWorkspace": {"id": 1, "name": "1"},
        "specialWorkspace": {"id": 0, "name": ""},
        "reserved": [0, 50, 0, 0],
        "scale": 1.00,
        "transform": 0,
        "focused": True,
        "dpmsStatus": True,
        "vrr": False,
    },
]
