class SonoffError(Exception):
    """Base class for everything raised by sonoffkit."""


class TransportError(SonoffError):
    """HTTP-level failure: connection error or non-2xx status."""


class SerializationError(SonoffError):
    """A request or response does not match the expected JSON shape."""


class MalformedResponse(SerializationError):
    """The response body is not a valid {seq, error, data} envelope."""


class EmptyResponseData(SonoffError):
    """The envelope decoded fine but carries no `data` where one was required."""


class InvalidCommand(SonoffError):
    """A command was given without the sub-command it needs."""


class DeviceError(SonoffError):
    """The device answered with a non-zero `error` code."""

    def __init__(self, code: int, seq: int):
        super().__init__(f"Device reported error {code} (seq={seq})")
        self.code = code
        self.seq = seq


class ConfigError(SonoffError, ValueError):
    """A setting from the environment or `.env` cannot be used."""
