from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from sonoffkit.errors import DeviceError


class WireModel(BaseModel):
    """Wire keys are lower camel case, attributes stay snake case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Das äußere Päckchen jeder Anfrage
class DeviceRequest(WireModel):
    device_id: str
    data: Any


class DeviceResponse(BaseModel):
    seq: int
    error: int
    data: Optional[Any] = None

    def raise_for_error(self) -> "DeviceResponse":
        # never called by the client itself, callers opt in
        if self.error != 0:
            raise DeviceError(self.error, self.seq)
        return self


class EmptyReq(BaseModel):
    pass


class WifiSetupReq(BaseModel):
    ssid: str
    password: str


class UpdateOTAReq(WireModel):
    download_url: str
    sha256sum: str = Field(..., alias="sha256sum")


_COMMON_INFO_KEYS = ("deviceid", "bssid", "ssid", "signalStrength", "fwVersion", "otaUnlock")


class DeviceInfo(WireModel):
    deviceid: str = ""
    bssid: Optional[str] = None
    ssid: Optional[str] = None
    signal_strength: Optional[int] = None
    fw_version: Optional[str] = None
    ota_unlock: Optional[bool] = None
    # everything the device kind adds on top of the common fields
    per_device_info: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _split_per_device_info(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "perDeviceInfo" in data:
            return data
        common = {k: v for k, v in data.items() if k in _COMMON_INFO_KEYS}
        common["perDeviceInfo"] = {k: v for k, v in data.items() if k not in _COMMON_INFO_KEYS}
        return common
