from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_serializer, model_validator


class BulbColor(BaseModel):
    ltype: Literal["color"] = "color"
    br: int  # brightness 1..100
    r: int  # 1..255
    g: int
    b: int


class BulbWhite(BaseModel):
    ltype: Literal["white"] = "white"
    br: int  # brightness 1..100
    ct: int  # color temperature 0..100


# ltype sits next to the mode's own fields, not around them
ColorMode = Annotated[Union[BulbColor, BulbWhite], Field(discriminator="ltype")]


def _lift_nested_mode(data: Any) -> Any:
    # firmware may answer {"ltype": "white", "white": {"br": .., "ct": ..}}
    if isinstance(data, dict):
        ltype = data.get("ltype")
        nested = data.get(ltype) if isinstance(ltype, str) else None
        if isinstance(nested, dict):
            data = {k: v for k, v in data.items() if k != ltype}
            data.update(nested)
    return data


class BulbInfo(BaseModel):
    switch: str
    mode: ColorMode

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data: Any) -> Any:
        data = _lift_nested_mode(data)
        if not isinstance(data, dict) or "mode" in data:
            return data
        return {
            "switch": data.get("switch"),
            "mode": {k: v for k, v in data.items() if k != "switch"},
        }

    @model_serializer(mode="wrap")
    def _serialize_flat(self, handler) -> dict[str, Any]:
        dumped = handler(self)
        return {"switch": dumped["switch"], **dumped["mode"]}

    @property
    def ltype(self) -> str:
        return self.mode.ltype
