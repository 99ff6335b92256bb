from abc import ABC, abstractmethod

from sonoffkit.api.device import SonoffDevice
from sonoffkit.models.envelope import DeviceResponse
from sonoffkit.models.switch import StartupReq, StartupState, SwitchReq, SwitchState


class Switchable(ABC):
    """Anything with a single on/off relay.

    Implementers supply the device handle and know where their own status
    keeps the switch flag; everything else is derived from those two.
    """

    @abstractmethod
    def get_dev(self) -> SonoffDevice:
        ...

    @abstractmethod
    def get_switch(self) -> bool:
        ...

    def set_switch(self, state: SwitchState) -> DeviceResponse:
        """Valid states: "on", "off"."""
        return self.get_dev().raw_request("/switch", SwitchReq(switch=state))

    def on(self) -> DeviceResponse:
        return self.set_switch("on")

    def off(self) -> DeviceResponse:
        return self.set_switch("off")

    def toggle(self) -> DeviceResponse:
        # read and write are separate round trips, a change in between is not noticed
        if self.get_switch():
            return self.off()
        return self.on()

    def set_startup(self, state: StartupState) -> DeviceResponse:
        """Switch state after a power loss: "on", "off" or "stay" for the last known state.

        Bulbs do not support this and answer with a device-level error.
        """
        return self.get_dev().raw_request("/startup", StartupReq(startup=state))
