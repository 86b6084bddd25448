"""Zimmertypen des Wohnheims."""

from enum import Enum


class RoomType(str, Enum):
    CORRIDOR_AIRCON = "CA"
    CORRIDOR_NO_AIRCON = "CN"
    NON_CORRIDOR_AIRCON = "NA"
    NON_CORRIDOR_NO_AIRCON = "NN"

    @property
    def description(self) -> str:
        """Anzeigename für Tabellen und Berichte."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    RoomType.CORRIDOR_AIRCON: "Flur, klimatisiert",
    RoomType.CORRIDOR_NO_AIRCON: "Flur, nicht klimatisiert",
    RoomType.NON_CORRIDOR_AIRCON: "Apartment, klimatisiert",
    RoomType.NON_CORRIDOR_NO_AIRCON: "Apartment, nicht klimatisiert",
}
