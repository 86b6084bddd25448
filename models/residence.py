"""Residence: Zimmer- und Bewohner-Register + Konsistenz-Check (Pydantic v2).

Das Register ist die Stelle, die beide Seiten der Zimmer ↔ Bewohner-Verknüpfung
pflegt. ``Room.set_occupant`` löst nur die alte Verknüpfung des Bewohners;
den neuen Verweis setzt ``allocate``.
"""

import logging
from typing import TYPE_CHECKING, Hashable, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.errors import (
    DuplicateRoomError,
    DuplicateStudentError,
    RoomNotFoundError,
    StudentNotFoundError,
)
from models.floor import Floor
from models.room import Room
from models.room_number import RoomNumber
from models.student import Student
from models.tag import Tag

if TYPE_CHECKING:
    from config.schema import ResidenceConfig

logger = logging.getLogger(__name__)


class ResidenceReport(BaseModel):
    """Ergebnis des Konsistenz-Checks."""

    is_consistent: bool
    errors: list[str]      # Widersprüchliche Verknüpfungen
    warnings: list[str]    # Hinweise (z.B. kein Zimmer frei)

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel

        console = Console()
        if self.is_consistent:
            status = "[bold green]✓ KONSISTENT[/bold green]"
        else:
            status = "[bold red]✗ INKONSISTENT[/bold red]"

        lines = [status]
        if self.errors:
            lines.append("\n[red bold]Fehler:[/red bold]")
            for e in self.errors:
                lines.append(f"  [red]• {e}[/red]")
        if self.warnings:
            lines.append("\n[yellow bold]Warnungen:[/yellow bold]")
            for w in self.warnings:
                lines.append(f"  [yellow]• {w}[/yellow]")
        if not self.errors and not self.warnings:
            lines.append("[dim]Keine Probleme gefunden.[/dim]")

        console.print(Panel("\n".join(lines), title="Belegungs-Check", border_style="cyan"))


class Residence(BaseModel):
    """Wohnheim: eindeutige Zimmer (nach Etage + Nummer) und registrierte Studierende."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    rooms: list[Room] = Field(default_factory=list)
    students: list[Student] = Field(default_factory=list)

    @classmethod
    def from_config(cls, config: "ResidenceConfig") -> "Residence":
        """Baut das Wohnheim aus der Konfiguration (alle Zimmer frei)."""
        residence = cls(name=config.residence_name)
        for rd in config.rooms:
            residence.add_room(Room(
                Floor(rd.floor),
                RoomNumber(rd.number),
                rd.room_type,
                {Tag(t) for t in rd.tags},
            ))
        return residence

    # ─── Zimmer ───

    def has_room(self, room: Room) -> bool:
        return any(r.is_same_room(room) for r in self.rooms)

    def find_room(self, floor: Hashable, number: Hashable) -> Optional[Room]:
        """Sucht ein Zimmer über Etage + Nummer. None wenn nicht vorhanden."""
        for r in self.rooms:
            if r.floor == floor and r.room_number == number:
                return r
        return None

    def add_room(self, room: Room) -> None:
        if self.has_room(room):
            raise DuplicateRoomError(room)
        self.rooms.append(room)
        logger.info(f"Zimmer angelegt: {room!r}")

    def remove_room(self, room: Room) -> None:
        """Entfernt ein Zimmer; ein Bewohner wird vorher ausgetragen."""
        registered = self._registered_room(room)
        self.deallocate(registered)
        self.rooms.remove(registered)
        logger.info(f"Zimmer entfernt: {registered!r}")

    def vacant_rooms(self) -> list[Room]:
        return [r for r in self.rooms if not r.has_occupant()]

    def occupied_rooms(self) -> list[Room]:
        return [r for r in self.rooms if r.has_occupant()]

    def rooms_on_floor(self, floor: Hashable) -> list[Room]:
        return [r for r in self.rooms if r.floor == floor]

    def rooms_with_tag(self, tag: Hashable) -> list[Room]:
        return [r for r in self.rooms if tag in r.tags]

    def _registered_room(self, room: Room) -> Room:
        for r in self.rooms:
            if r.is_same_room(room):
                return r
        raise RoomNotFoundError(room)

    # ─── Studierende ───

    def find_student(self, student_id: str) -> Optional[Student]:
        student_id = student_id.strip().upper()
        return next((s for s in self.students if s.student_id == student_id), None)

    def add_student(self, student: Student) -> None:
        if self.find_student(student.student_id) is not None:
            raise DuplicateStudentError(student.student_id)
        self.students.append(student)
        logger.info(f"Studierende/r registriert: {student!r}")

    # ─── Belegung ───

    def allocate(self, student: Student, room: Room) -> None:
        """Weist ``student`` dem Zimmer ``room`` zu und pflegt beide Seiten.

        - Zieht der/die Studierende um, wird das alte Zimmer frei.
        - Ein bisheriger anderer Bewohner des Zielzimmers verliert seinen Zimmer-Verweis.
        - Verknüpft werden immer die registrierten Objekte, nicht übergebene Kopien.
        """
        target = self._registered_room(room)
        registered = self.find_student(student.student_id)
        if registered is None:
            raise StudentNotFoundError(student.student_id)
        student = registered

        previous = student.room
        if previous is not None and not previous.is_same_room(target):
            if previous.occupant is student:
                previous.unset_occupant()

        current = target.occupant
        if current is not None and current is not student:
            logger.info(f"{current!r} verliert Zimmer {target!r}")
            current.unset_room()

        target.set_occupant(student)
        student.set_room(target)
        logger.info(f"Belegt: {target!r} ← {student!r}")

    def deallocate(self, room: Room) -> None:
        """Trägt den Bewohner aus; freies Zimmer bleibt unverändert."""
        target = self._registered_room(room)
        occupant = target.occupant
        if occupant is None:
            return
        if occupant.has_room() and occupant.room.is_same_room(target):
            occupant.unset_room()
        target.unset_occupant()
        logger.info(f"Freigegeben: {target!r} (vorher {occupant!r})")

    # ─── Übersicht ───

    def summary(self) -> str:
        """Kurze Übersicht über das Wohnheim."""
        floors = {r.floor for r in self.rooms}
        lines = [
            f"Wohnheim: {self.name}",
            f"Zimmer: {len(self.rooms)} ({len(floors)} Etagen)",
            f"Belegt: {len(self.occupied_rooms())}",
            f"Frei: {len(self.vacant_rooms())}",
            f"Studierende: {len(self.students)}",
        ]
        return "\n".join(lines)

    # ─── Konsistenz-Check ───

    def check(self) -> ResidenceReport:
        """Prüft, ob Zimmer- und Bewohner-Seite zueinander passen.

        Prüfungen:
        1. Jeder Bewohner eines Zimmers verweist auf genau dieses Zimmer
        2. Jede/r Studierende mit Zimmer steht dort als Bewohner
        3. Niemand belegt mehrere Zimmer
        """
        errors: list[str] = []
        warnings: list[str] = []

        seen: dict[str, Room] = {}
        for room in self.occupied_rooms():
            occupant = room.occupant
            if not occupant.has_room() or not occupant.room.is_same_room(room):
                errors.append(
                    f"Zimmer {room.floor}-{room.room_number}: Bewohner {occupant!r} "
                    f"verweist auf {occupant.room!r}."
                )
            key = getattr(occupant, "student_id", None) or str(id(occupant))
            if key in seen:
                errors.append(
                    f"{occupant!r} belegt mehrere Zimmer: "
                    f"{seen[key]!r} und {room!r}."
                )
            else:
                seen[key] = room

        for student in self.students:
            room = student.room
            if room is None:
                continue
            if not self.has_room(room):
                errors.append(f"{student!r} verweist auf unbekanntes Zimmer {room!r}.")
            elif room.occupant is not student:
                errors.append(
                    f"{student!r} verweist auf {room!r}, dort wohnt aber {room.occupant!r}."
                )

        if self.rooms and not self.vacant_rooms():
            warnings.append("Kein Zimmer mehr frei.")

        for e in errors:
            logger.warning(e)

        return ResidenceReport(
            is_consistent=len(errors) == 0,
            errors=errors,
            warnings=warnings,
        )
