"""Datenmodell für ein Wohnheimzimmer.

Etage, Nummer und Typ sind nach der Konstruktion unveränderlich, die Tags
werden beim Anlegen kopiert. Veränderlich ist nur die Belegung (occupant).
"""

import logging
from typing import Any, Hashable, Iterable, Optional, Protocol

logger = logging.getLogger(__name__)


class Occupant(Protocol):
    """Was ein Zimmer von seinem Bewohner erwartet (z.B. ``Student``)."""

    @property
    def room(self) -> Optional["Room"]: ...

    def has_room(self) -> bool: ...

    def unset_room(self) -> None: ...


class Room:
    """Repräsentiert ein Zimmer im Wohnheim.

    Zwei Vergleichsbegriffe:
    - ``is_same_room``: schwache Identität über (Etage, Nummer).
    - ``==``: alle Felder inkl. Typ, Tags und Bewohner.

    Der Hash umfasst nur die unveränderlichen Felder, der Bewohner bleibt außen vor.
    """

    def __init__(self, floor: Hashable, number: Hashable, room_type: Hashable,
                 tags: Iterable[Hashable]):
        if floor is None or number is None or room_type is None or tags is None:
            raise ValueError(
                "Etage, Zimmernummer, Zimmertyp und Tags müssen gesetzt sein."
            )
        self._floor = floor
        self._number = number
        self._room_type = room_type
        self._tags: set = set(tags)
        self._occupant: Optional[Occupant] = None

    @property
    def floor(self) -> Hashable:
        return self._floor

    @property
    def room_number(self) -> Hashable:
        return self._number

    @property
    def room_type(self) -> Hashable:
        return self._room_type

    @property
    def occupant(self) -> Optional[Occupant]:
        return self._occupant

    @property
    def tags(self) -> frozenset:
        """Unveränderliche Sicht auf die Tags (frozenset, neue Instanz pro Aufruf)."""
        return frozenset(self._tags)

    def has_occupant(self) -> bool:
        """True wenn dem Zimmer ein Bewohner zugewiesen ist."""
        return self._occupant is not None

    def set_occupant(self, occupant: Optional[Occupant]) -> None:
        """Weist dem Zimmer einen Bewohner zu.

        ``None`` wird ignoriert, die bisherige Belegung bleibt bestehen.
        Hat der Bewohner bereits ein ANDERES Zimmer, wird dessen Verknüpfung auf
        Bewohner-Seite gelöst (``unset_room``). Den Verweis des Bewohners auf
        dieses Zimmer setzt der Aufrufer (siehe ``Residence.allocate``).
        """
        if occupant is None:
            return

        if occupant.has_room() and not occupant.room.is_same_room(self):
            logger.debug(f"Löse {occupant!r} von Zimmer {occupant.room!r}")
            occupant.unset_room()
        self._occupant = occupant

    def unset_occupant(self) -> None:
        """Entfernt den Bewohner. Der Bewohner selbst wird nicht verändert."""
        self._occupant = None

    def is_same_room(self, other: Optional["Room"]) -> bool:
        """True bei gleicher Etage und Zimmernummer (Typ, Tags, Bewohner egal)."""
        if other is self:
            return True

        return (other is not None
                and other.floor == self.floor
                and other.room_number == self.room_number)

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True

        if type(other) is not type(self):
            return False

        return (other.floor == self.floor
                and other.room_number == self.room_number
                and other.room_type == self.room_type
                and other.tags == self.tags
                and other.occupant == self.occupant)

    def __hash__(self) -> int:
        return hash((self._floor, self._number, self._room_type, frozenset(self._tags)))

    def __repr__(self) -> str:
        return f"Room({self._floor}-{self._number})"

    def __str__(self) -> str:
        tags = "".join(str(t) for t in self._tags)
        return (f" Etage: {self._floor} Zimmernummer: {self._number}"
                f" Typ: {self._room_type} Tags: {tags}")
