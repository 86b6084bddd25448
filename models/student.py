"""Datenmodell für Studierende als Zimmerbewohner (Pydantic v2)."""

import re
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, PrivateAttr, field_validator

if TYPE_CHECKING:
    from models.room import Room

_STUDENT_ID = re.compile(r"^E\d{7}$")


class Student(BaseModel):
    """Repräsentiert eine/n Studierende/n.

    Der Zimmer-Verweis ist privat und wird nur über ``set_room`` / ``unset_room``
    geändert. Er zählt NICHT zur Gleichheit, sonst würden sich Zimmer und
    Bewohner beim Vergleich gegenseitig aufrufen.
    """

    name: str
    student_id: str                # "E0123456"
    email: Optional[str] = None
    faculty: Optional[str] = None  # "Informatik", "Maschinenbau"

    _room: Optional["Room"] = PrivateAttr(default=None)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name darf nicht leer sein.")
        return v

    @field_validator("student_id")
    @classmethod
    def normalize_student_id(cls, v: str) -> str:
        v = v.strip().upper()
        if not _STUDENT_ID.match(v):
            raise ValueError(f"Matrikelnummer '{v}' ungültig: Format E + 7 Ziffern.")
        return v

    # ─── Zimmer-Verknüpfung ───

    @property
    def room(self) -> Optional["Room"]:
        return self._room

    def has_room(self) -> bool:
        return self._room is not None

    def set_room(self, room: "Room") -> None:
        if room is None:
            raise ValueError("set_room(None) nicht erlaubt, unset_room() verwenden.")
        self._room = room

    def unset_room(self) -> None:
        self._room = None

    # ─── Vergleich ───

    def is_same_student(self, other: Optional["Student"]) -> bool:
        """Schwache Identität über die Matrikelnummer."""
        return other is not None and other.student_id == self.student_id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self.name == other.name
                and self.student_id == other.student_id
                and self.email == other.email
                and self.faculty == other.faculty)

    def __hash__(self) -> int:
        return hash(self.student_id)

    def __repr__(self) -> str:
        return f"Student({self.student_id}, {self.name})"
