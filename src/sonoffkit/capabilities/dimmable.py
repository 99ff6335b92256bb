from abc import ABC, abstractmethod

from sonoffkit.models.envelope import DeviceResponse


class Dimmable(ABC):

    @abstractmethod
    def dim(self, brightness: int) -> DeviceResponse:
        """brightness: 0..100, not checked here, the device rejects bad values."""
