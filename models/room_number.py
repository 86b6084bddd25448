"""Zimmernummer (Pydantic v2)."""

import re

from pydantic import ConfigDict, RootModel, field_validator

_ROOM_NUMBER = re.compile(r"^\d{3}$")


class RoomNumber(RootModel[str]):
    """Dreistellige Zimmernummer, z.B. "201"."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _three_digits(cls, v: str) -> str:
        v = v.strip()
        if not _ROOM_NUMBER.match(v):
            raise ValueError(f"Zimmernummer '{v}' ungültig: genau drei Ziffern erwartet.")
        return v

    def __str__(self) -> str:
        return self.root
