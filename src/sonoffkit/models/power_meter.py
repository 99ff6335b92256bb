import re
from typing import Any, Optional

from pydantic import Field, model_validator

from sonoffkit.models.envelope import WireModel
from sonoffkit.models.relay import OutletSwitch


class SPMSwitchesReq(WireModel):
    sub_dev_id: str
    switches: list[OutletSwitch]


class SPMStatusReq(WireModel):
    # omitted -> hub status, set -> that sub-device's status
    sub_dev_id: Optional[str] = None


class SubDevice(WireModel):
    sub_dev_id: str
    type: int


class SubDeviceList(WireModel):
    sub_dev_list: list[SubDevice]


class HubStatus(WireModel):
    deviceid: str
    sled_online: str
    ssid: str
    bssid: str
    fw_version: str
    sub_chip_fw_ver: str
    signal_strength: int
    wifi_connected: bool


class OverloadValue(WireModel):
    en: int  # 1: enabled
    val: int


class Overload(WireModel):
    min_ap: OverloadValue = Field(..., alias="minAP")
    max_ap: OverloadValue = Field(..., alias="maxAP")
    min_v: OverloadValue = Field(..., alias="minV")
    max_v: OverloadValue = Field(..., alias="maxV")
    max_c: OverloadValue = Field(..., alias="maxC")
    delay_time: int


class Range(WireModel):
    min: int
    max: int


class Threshold(WireModel):
    act_pow: Range
    voltage: Range
    current: Range


class OverloadTrigger(WireModel):
    outlet: int
    rsn: list[int]


class FaultState(WireModel):
    sub_dev_com: int
    # one flag per channel, 1: communication normal, 0: error
    cse7761_com: list[int] = Field(..., alias="cse7761Com")
    overload_trig: list[OverloadTrigger] = Field(default_factory=list)
    over_temp: list[int] = Field(default_factory=list)
    over_limit: list[OverloadTrigger] = Field(default_factory=list)

    def channel_ok(self, channel: int) -> bool:
        return 0 <= channel < len(self.cse7761_com) and self.cse7761_com[channel] == 1


class ChannelReading(WireModel):
    # raw device units (1/100 A, V, W)
    current: Optional[int] = None
    voltage: Optional[int] = None
    act_pow: Optional[int] = None
    react_pow: Optional[int] = None
    apparent_pow: Optional[int] = None


_CHANNEL_KEY = re.compile(r"^(overload|current|voltage|actPow|reactPow|apparentPow)_(\d+)$")


class SubDeviceStatus(WireModel):
    fw_version: str
    switches: list[OutletSwitch]
    fault_state: FaultState
    threshold: Threshold
    overloads: dict[int, Overload] = Field(default_factory=dict)
    readings: dict[int, ChannelReading] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_channels(cls, data: Any) -> Any:
        # overload_00, current_01, ... -> channel-indexed maps
        if not isinstance(data, dict) or "overloads" in data:
            return data
        data = dict(data)
        overloads: dict[int, Any] = {}
        readings: dict[int, dict[str, Any]] = {}
        for key in list(data):
            m = _CHANNEL_KEY.match(key)
            if not m:
                continue
            name, channel = m.group(1), int(m.group(2))
            value = data.pop(key)
            if name == "overload":
                overloads[channel] = value
            else:
                readings.setdefault(channel, {})[name] = value
        data["overloads"] = overloads
        data["readings"] = readings
        return data

    def switch_states(self) -> dict[int, bool]:
        return {s.outlet: s.switch == "on" for s in self.switches}
