from sonoffkit.api.device import SonoffDevice
from sonoffkit.models.envelope import DeviceResponse, EmptyReq
from sonoffkit.models.power_meter import (
    HubStatus,
    SPMStatusReq,
    SPMSwitchesReq,
    SubDeviceList,
    SubDeviceStatus,
)
from sonoffkit.models.relay import OutletSwitch


class SonoffPowerMeter:
    """Power-meter hub (SPM) with metering sub-devices behind it."""

    def __init__(self, dev: SonoffDevice):
        self.dev = dev

    def get_dev(self) -> SonoffDevice:
        return self.dev

    def set_switches(self, sub_dev_id: str, switches: list[OutletSwitch]) -> DeviceResponse:
        return self.dev.raw_request("/switches", SPMSwitchesReq(sub_dev_id=sub_dev_id, switches=switches))

    def get_subdevs(self) -> SubDeviceList:
        return self.dev.typed_request("/subDevList", EmptyReq(), SubDeviceList)

    def status(self) -> HubStatus:
        return self.dev.typed_request("/getState", SPMStatusReq(), HubStatus)

    def subdev_status(self, sub_dev_id: str) -> SubDeviceStatus:
        return self.dev.typed_request("/getState", SPMStatusReq(sub_dev_id=sub_dev_id), SubDeviceStatus)
