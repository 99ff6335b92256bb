"""Framing shared by every endpoint.

Requests go out as ``{"deviceId": ..., "data": ...}`` and come back as
``{"seq": ..., "error": ..., "data": ...}``. Nothing here looks at the
device's ``error`` code; interpreting it is left to the caller.
"""
from typing import Any, Mapping, Union

from pydantic import BaseModel, ValidationError

from sonoffkit.errors import MalformedResponse, SerializationError
from sonoffkit.models.envelope import DeviceRequest, DeviceResponse

Payload = Union[BaseModel, Mapping[str, Any]]


def dump_payload(payload: Payload) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(payload)


def encode(device_id: str, payload: Payload) -> DeviceRequest:
    try:
        return DeviceRequest(device_id=device_id, data=dump_payload(payload))
    except (ValueError, TypeError) as err:
        raise SerializationError(f"Cannot serialize request payload: {err}") from err


def dumps(request: DeviceRequest) -> str:
    try:
        return request.model_dump_json(by_alias=True)
    except (ValueError, TypeError) as err:
        raise SerializationError(f"Cannot serialize request envelope: {err}") from err


def decode(body: Union[bytes, str]) -> DeviceResponse:
    try:
        return DeviceResponse.model_validate_json(body)
    except ValidationError as err:
        raise MalformedResponse(f"Bad response envelope: {err}") from err
