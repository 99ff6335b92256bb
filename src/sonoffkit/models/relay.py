from typing import Optional

from pydantic import BaseModel


class OutletSwitch(BaseModel):
    outlet: int
    switch: str


class OutletStartup(BaseModel):
    outlet: int
    startup: str


class OutletPulse(BaseModel):
    outlet: int
    pulse: str
    switch: str
    width: int  # milliseconds


class RelayData(BaseModel):
    """Body of /switches, /startups and /pulses; only one list is set per request."""

    switches: Optional[list[OutletSwitch]] = None
    configure: Optional[list[OutletStartup]] = None
    pulses: Optional[list[OutletPulse]] = None


class RelayInfo(RelayData):

    def switch_states(self) -> dict[int, bool]:
        return {s.outlet: s.switch == "on" for s in self.switches or []}

    def startups(self) -> dict[int, str]:
        return {c.outlet: c.startup for c in self.configure or []}
