from typing import Union

from sonoffkit.api.device import SonoffDevice, decode_data
from sonoffkit.capabilities.dimmable import Dimmable
from sonoffkit.capabilities.switchable import Switchable
from sonoffkit.models.bulb import BulbColor, BulbInfo, BulbWhite
from sonoffkit.models.envelope import DeviceResponse


class SonoffBulb(Switchable, Dimmable):
    def __init__(self, dev: SonoffDevice):
        self.dev = dev

    def get_dev(self) -> SonoffDevice:
        return self.dev

    def get_info(self) -> BulbInfo:
        return decode_data(self.dev.get_info().per_device_info, BulbInfo)

    def get_switch(self) -> bool:
        return self.get_info().switch == "on"

    def set_bulb(self, mode: Union[BulbColor, BulbWhite]) -> DeviceResponse:
        # the mode carries its own ltype tag, "color" or "white"
        return self.dev.raw_request("/dimmable", mode)

    def color(self, br: int, r: int, g: int, b: int) -> DeviceResponse:
        return self.set_bulb(BulbColor(br=br, r=r, g=g, b=b))

    def white(self, br: int, ct: int) -> DeviceResponse:
        return self.set_bulb(BulbWhite(br=br, ct=ct))

    def dim(self, brightness: int) -> DeviceResponse:
        # TODO: keep the current color instead of switching to white, needs a get_info() first
        return self.white(brightness, 100)
