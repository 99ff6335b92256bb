"""Tests for bulbs and their color modes."""

from __future__ import annotations

import pytest

from conftest import StubDevice, make_dev
from sonoffkit.capabilities.dimmable import Dimmable
from sonoffkit.capabilities.switchable import Switchable
from sonoffkit.devices.bulb import SonoffBulb
from sonoffkit.errors import SerializationError
from sonoffkit.models.bulb import BulbColor, BulbInfo, BulbWhite


def _make_bulb(**state):
    stub = StubDevice({"switch": "on", **state})
    return SonoffBulb(make_dev(stub)), stub


class TestBulbModes:
    """Test color() and white()."""

    def test_color_payload_is_flat(self):
        bulb, stub = _make_bulb()
        bulb.color(50, 255, 1, 1)
        assert stub.sent("/dimmable") == [{"ltype": "color", "br": 50, "r": 255, "g": 1, "b": 1}]

    def test_white_payload_is_flat(self):
        bulb, stub = _make_bulb()
        bulb.white(80, 30)
        assert stub.sent("/dimmable") == [{"ltype": "white", "br": 80, "ct": 30}]

    @pytest.mark.parametrize("br,r,g,b", [(1, 1, 1, 1), (100, 255, 255, 255), (42, 200, 17, 96)])
    def test_color_round_trip(self, br, r, g, b):
        bulb, _ = _make_bulb()
        bulb.color(br, r, g, b)
        info = bulb.get_info()
        assert info.ltype == "color"
        assert info.mode == BulbColor(br=br, r=r, g=g, b=b)

    @pytest.mark.parametrize("br,ct", [(1, 0), (100, 100), (55, 70)])
    def test_white_round_trip(self, br, ct):
        bulb, _ = _make_bulb()
        bulb.white(br, ct)
        info = bulb.get_info()
        assert info.ltype == "white"
        assert info.mode == BulbWhite(br=br, ct=ct)

    def test_set_bulb_tags_ltype(self):
        bulb, stub = _make_bulb()
        bulb.set_bulb(BulbWhite(br=10, ct=5))
        assert stub.sent("/dimmable")[0]["ltype"] == "white"


class TestBulbDim:
    """Test dim() on a bulb."""

    def test_dim_forces_white_full_temperature(self):
        bulb, stub = _make_bulb()
        bulb.color(60, 10, 20, 30)
        bulb.dim(25)
        assert stub.sent("/dimmable")[-1] == {"ltype": "white", "br": 25, "ct": 100}
        assert bulb.get_info().mode == BulbWhite(br=25, ct=100)

    def test_dim_out_of_range_passed_through(self):
        bulb, stub = _make_bulb()
        bulb.dim(150)
        assert stub.sent("/dimmable") == [{"ltype": "white", "br": 150, "ct": 100}]


class TestBulbSwitch:
    """Test the switch side of the bulb."""

    def test_capabilities(self):
        bulb, _ = _make_bulb()
        assert isinstance(bulb, Switchable)
        assert isinstance(bulb, Dimmable)

    def test_get_switch(self):
        bulb, _ = _make_bulb(ltype="white", br=50, ct=10)
        assert bulb.get_switch() is True

    def test_toggle(self):
        bulb, stub = _make_bulb(ltype="white", br=50, ct=10)
        bulb.toggle()
        assert stub.sent("/switch") == [{"switch": "off"}]

    def test_startup_error_not_special_cased(self):
        bulb, stub = _make_bulb()
        stub.errors["/startup"] = 400
        assert bulb.set_startup("on").error == 400


class TestBulbInfo:
    """Test decoding of bulb status."""

    def test_nested_firmware_shape(self):
        info = BulbInfo.model_validate({"switch": "off", "ltype": "color", "color": {"br": 9, "r": 1, "g": 2, "b": 3}})
        assert info.switch == "off"
        assert info.mode == BulbColor(br=9, r=1, g=2, b=3)

    def test_flat_dump(self):
        info = BulbInfo.model_validate({"switch": "on", "ltype": "white", "br": 20, "ct": 40})
        assert info.model_dump() == {"switch": "on", "ltype": "white", "br": 20, "ct": 40}

    def test_unknown_ltype(self):
        bulb, stub = _make_bulb(ltype="rainbow", br=1)
        with pytest.raises(SerializationError):
            bulb.get_info()

    def test_missing_mode_fields(self):
        bulb, stub = _make_bulb(ltype="white", br=1)
        with pytest.raises(SerializationError):
            bulb.get_info()
