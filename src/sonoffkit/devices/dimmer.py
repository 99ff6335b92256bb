from sonoffkit.api.device import SonoffDevice, decode_data
from sonoffkit.capabilities.dimmable import Dimmable
from sonoffkit.capabilities.switchable import Switchable
from sonoffkit.models.dimmer import DimmerInfo, DimmerReq
from sonoffkit.models.envelope import DeviceResponse


class SonoffDimmer(Switchable, Dimmable):
    def __init__(self, dev: SonoffDevice):
        self.dev = dev

    def get_dev(self) -> SonoffDevice:
        return self.dev

    def get_info(self) -> DimmerInfo:
        return decode_data(self.dev.get_info().per_device_info, DimmerInfo)

    def get_switch(self) -> bool:
        return self.get_info().switch == "on"

    def dim(self, brightness: int) -> DeviceResponse:
        # brightness only takes effect with the switch on
        return self.dev.raw_request("/dimmable", DimmerReq(switch="on", brightness=brightness))
