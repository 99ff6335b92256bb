"""Shared fixtures: a stub device that answers like the LAN API does."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

import pytest

from sonoffkit.api.device import SonoffDevice

ADDRESS = "http://10.0.0.2:8081"

COMMON_INFO = {
    "deviceid": "1000abcdef",
    "ssid": "home",
    "bssid": "ec:17:2f:3d:15:e",
    "signalStrength": -67,
    "fwVersion": "3.5.0",
    "otaUnlock": False,
}

SUBDEV_STATUS = {
    "fwVersion": "1.0.2",
    "switches": [
        {"outlet": 0, "switch": "on"},
        {"outlet": 1, "switch": "off"},
        {"outlet": 2, "switch": "off"},
        {"outlet": 3, "switch": "on"},
    ],
    "overload_00": {
        "minAP": {"en": 0, "val": 10},
        "maxAP": {"en": 1, "val": 440000},
        "minV": {"en": 0, "val": 9000},
        "maxV": {"en": 1, "val": 26400},
        "maxC": {"en": 1, "val": 2000},
        "delayTime": 10,
    },
    "overload_03": {
        "minAP": {"en": 0, "val": 10},
        "maxAP": {"en": 0, "val": 440000},
        "minV": {"en": 0, "val": 9000},
        "maxV": {"en": 0, "val": 26400},
        "maxC": {"en": 0, "val": 2000},
        "delayTime": 5,
    },
    "current_00": 123,
    "voltage_00": 22987,
    "actPow_00": 2680,
    "reactPow_00": 12,
    "apparentPow_00": 2701,
    "faultState": {
        "subDevCom": 0,
        "cse7761Com": [1, 1, 0, 1],
        "overloadTrig": [{"outlet": 2, "rsn": [4]}],
    },
    "threshold": {
        "actPow": {"min": 10, "max": 440000},
        "voltage": {"min": 9000, "max": 26400},
        "current": {"min": 10, "max": 2000},
    },
}

HUB_STATUS = {
    "deviceid": "10015b3a2c",
    "sledOnline": "on",
    "ssid": "home",
    "bssid": "ec:17:2f:3d:15:e",
    "fwVersion": "1.1.0",
    "subChipFwVer": "1.0.0",
    "signalStrength": -52,
    "wifiConnected": True,
}

_BULB_KEYS = ("ltype", "br", "r", "g", "b", "ct")


class StubDevice:
    """Stands in for HttpClient and emulates a device on the LAN.

    Every request is recorded as ``(path, envelope)``. ``state`` holds the
    per-device fields reported by /info, ``outlets`` the relay outlets.
    """

    def __init__(self, state: Optional[dict[str, Any]] = None, errors: Optional[dict[str, int]] = None):
        self.state: dict[str, Any] = dict(state or {})
        self.errors = errors or {}
        self.outlets: dict[int, str] = {}
        self.subdev_switches: dict[str, dict[int, str]] = {}
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.on_request: Optional[Callable[[str, dict[str, Any]], None]] = None
        self.omit_data: set[str] = set()
        self.handlers: dict[str, Callable[[dict[str, Any]], Any]] = {
            "/info": self._info,
            "/switch": self._update,
            "/startup": self._update,
            "/pulse": self._update,
            "/dimmable": self._dimmable,
            "/switches": self._switches,
            "/startups": lambda data: None,
            "/pulses": lambda data: None,
            "/subDevList": lambda data: {"subDevList": [{"subDevId": "a1b2c3d4", "type": 6}]},
            "/getState": lambda data: SUBDEV_STATUS if data.get("subDevId") else HUB_STATUS,
        }

    def post(self, path: str, body: str) -> bytes:
        envelope = json.loads(body)
        self.requests.append((path, envelope))
        handler = self.handlers.get(path, lambda data: None)
        data = handler(envelope["data"])
        res: dict[str, Any] = {"seq": len(self.requests), "error": self.errors.get(path, 0)}
        if data is not None and path not in self.omit_data:
            res["data"] = data
        if self.on_request:
            self.on_request(path, envelope["data"])
        return json.dumps(res).encode("utf-8")

    def sent(self, path: str) -> list[dict[str, Any]]:
        return [env["data"] for p, env in self.requests if p == path]

    def calls(self, path: str) -> int:
        return len(self.sent(path))

    def _info(self, data: dict[str, Any]) -> dict[str, Any]:
        info = {**COMMON_INFO, **self.state}
        if self.outlets:
            info["switches"] = [{"outlet": o, "switch": s} for o, s in sorted(self.outlets.items())]
        return info

    def _update(self, data: dict[str, Any]) -> None:
        self.state.update(data)

    def _dimmable(self, data: dict[str, Any]) -> None:
        if "ltype" in data:
            # a new color mode replaces the old one entirely
            for key in _BULB_KEYS:
                self.state.pop(key, None)
        self.state.update(data)

    def _switches(self, data: dict[str, Any]) -> None:
        target = self.outlets
        if "subDevId" in data:
            target = self.subdev_switches.setdefault(data["subDevId"], {})
        for s in data["switches"]:
            target[s["outlet"]] = s["switch"]


@pytest.fixture
def stub():
    return StubDevice()


@pytest.fixture
def dev(stub):
    return SonoffDevice(ADDRESS, client=stub)


def make_dev(stub: StubDevice, id: str = "") -> SonoffDevice:
    return SonoffDevice(ADDRESS, id=id, client=stub)
