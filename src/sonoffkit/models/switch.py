from typing import Literal, Optional

from sonoffkit.models.envelope import WireModel

SwitchState = Literal["on", "off"]
StartupState = Literal["on", "off", "stay"]


class SwitchReq(WireModel):
    switch: str  # "on" | "off"


class StartupReq(WireModel):
    startup: str  # "on" | "off" | "stay"


class PulseReq(WireModel):
    pulse: str
    pulse_width: int


class SwitchInfo(WireModel):
    switch: str
    startup: Optional[str] = None
    pulse: Optional[str] = None
    pulse_width: Optional[int] = None
