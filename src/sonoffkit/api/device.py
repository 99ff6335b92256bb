import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from sonoffkit import config
from sonoffkit.api import envelope
from sonoffkit.api.envelope import Payload
from sonoffkit.api.http_client import HttpClient
from sonoffkit.errors import EmptyResponseData, SerializationError
from sonoffkit.models.envelope import (
    DeviceInfo,
    DeviceResponse,
    EmptyReq,
    UpdateOTAReq,
    WifiSetupReq,
)

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class SonoffDevice:
    """One physical device, addressed by its control endpoint.

    ``id`` is the protocol-level device id and may be empty, ``address`` is
    the base URL (e.g. ``http://192.168.1.50:8081``). Both are fixed for the
    lifetime of the handle; use ``copy``/``with_id`` to get another one.
    """

    def __init__(self, address: str, id: str = "", client: Optional[HttpClient] = None,
                 timeout: Optional[float] = None):
        self._id = id
        self._address = address.rstrip("/")
        self._timeout = timeout
        self.client = client or HttpClient(f"{self._address}/zeroconf", timeout=timeout)

    @classmethod
    def from_env(cls) -> "SonoffDevice":
        address = config.address()
        if not address:
            raise ValueError("SONOFF_ADDRESS is not set")
        return cls(address, id=config.device_id(), timeout=config.timeout())

    @property
    def id(self) -> str:
        return self._id

    @property
    def address(self) -> str:
        return self._address

    def copy(self) -> "SonoffDevice":
        return SonoffDevice(self._address, id=self._id, timeout=self._timeout)

    def with_id(self, id: str) -> "SonoffDevice":
        return SonoffDevice(self._address, id=id, timeout=self._timeout)

    def __repr__(self) -> str:
        return f"SonoffDevice(address={self._address!r}, id={self._id!r})"

    def raw_request(self, path: str, payload: Payload) -> DeviceResponse:
        req = envelope.encode(self._id, payload)
        body = envelope.dumps(req)
        _LOGGER.debug("-> %s%s %s", self._address, path, body)
        res = self.client.post(path, body)
        _LOGGER.debug("<- %s%s %r", self._address, path, res)
        return envelope.decode(res)

    def typed_request(self, path: str, payload: Payload, model: Type[T]) -> T:
        res = self.raw_request(path, payload)
        if res.data is None:
            raise EmptyResponseData(f"Bad response from device: no data in reply to {path}")
        return decode_data(res.data, model)

    def get_info(self) -> DeviceInfo:
        return self.typed_request("/info", EmptyReq(), DeviceInfo)

    def set_wifi(self, ssid: str, password: str) -> DeviceResponse:
        return self.raw_request("/wifi", WifiSetupReq(ssid=ssid, password=password))

    def signal_strength(self) -> DeviceResponse:
        return self.raw_request("/signal_strength", EmptyReq())

    def unlock_ota(self) -> DeviceResponse:
        return self.raw_request("/ota_unlock", EmptyReq())

    def flash_ota(self, download_url: str, sha256sum: str) -> DeviceResponse:
        return self.raw_request("/ota_flash", UpdateOTAReq(download_url=download_url, sha256sum=sha256sum))


def decode_data(data: Any, model: Type[T]) -> T:
    """Validate an already decoded JSON value into ``model``."""
    try:
        return TypeAdapter(model).validate_python(data)
    except ValidationError as err:
        raise SerializationError(f"Unexpected {getattr(model, '__name__', model)} payload: {err}") from err
