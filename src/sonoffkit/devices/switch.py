from sonoffkit.api.device import SonoffDevice, decode_data
from sonoffkit.capabilities.switchable import Switchable
from sonoffkit.models.envelope import DeviceResponse
from sonoffkit.models.switch import PulseReq, SwitchInfo


class SonoffSwitch(Switchable):
    def __init__(self, dev: SonoffDevice):
        self.dev = dev

    def get_dev(self) -> SonoffDevice:
        return self.dev

    def get_info(self) -> SwitchInfo:
        return decode_data(self.dev.get_info().per_device_info, SwitchInfo)

    def get_switch(self) -> bool:
        return self.get_info().switch == "on"

    def pulse(self, milliseconds: int) -> DeviceResponse:
        """Arm a momentary-on pulse of ``milliseconds`` (multiples of 500), 0 disables it."""
        req = PulseReq(pulse="off" if milliseconds == 0 else "on", pulse_width=milliseconds)
        return self.dev.raw_request("/pulse", req)
