from typing import Optional

from pydantic import BaseModel


class DimmerReq(BaseModel):
    switch: str
    brightness: int
    # left out of the request when unset, the device keeps its own values
    mode: Optional[int] = None
    brightmin: Optional[int] = None
    brightmax: Optional[int] = None


class DimmerInfo(BaseModel):
    switch: str
    startup: Optional[str] = None
    brightness: int
    mode: Optional[int] = None
    brightmin: Optional[int] = None
    brightmax: Optional[int] = None
