from sonoffkit.api.device import SonoffDevice, decode_data
from sonoffkit.models.envelope import DeviceResponse
from sonoffkit.models.relay import OutletPulse, OutletStartup, OutletSwitch, RelayData, RelayInfo


class SonoffRelay:
    """Multi-outlet relay (e.g. MINI R3 / 4CH), addressed per outlet index.

    Each call only carries the outlets passed in. The firmware is assumed to
    leave the others alone.
    """

    def __init__(self, dev: SonoffDevice):
        self.dev = dev

    def get_dev(self) -> SonoffDevice:
        return self.dev

    def get_info(self) -> RelayInfo:
        return decode_data(self.dev.get_info().per_device_info, RelayInfo)

    def set_switches(self, switches: list[OutletSwitch]) -> DeviceResponse:
        return self.dev.raw_request("/switches", RelayData(switches=switches))

    def set_startup(self, startups: list[OutletStartup]) -> DeviceResponse:
        return self.dev.raw_request("/startups", RelayData(configure=startups))

    def set_pulses(self, pulses: list[OutletPulse]) -> DeviceResponse:
        return self.dev.raw_request("/pulses", RelayData(pulses=pulses))
