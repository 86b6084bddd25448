"""Tests für das Zimmer-Modell (Room) und seine Bewohner-Verknüpfung."""

import pytest

from models.floor import Floor
from models.room import Room
from models.room_number import RoomNumber
from models.room_type import RoomType
from models.student import Student
from models.tag import Tag


# ─── Hilfsfunktionen ──────────────────────────────────────────────────────────

def make_room(floor: str = "2", number: str = "201",
              room_type: RoomType = RoomType.CORRIDOR_AIRCON,
              tags=()) -> Room:
    return Room(Floor(floor), RoomNumber(number), room_type, {Tag(t) for t in tags})


def make_student(student_id: str = "E0000001", name: str = "Anna Schmidt") -> Student:
    return Student(name=name, student_id=student_id)


class RecordingOccupant:
    """Minimaler Bewohner, der Aufrufe von unset_room mitschreibt."""

    def __init__(self, room=None, on_unset=None):
        self._room = room
        self._on_unset = on_unset
        self.unset_calls = 0

    @property
    def room(self):
        return self._room

    def has_room(self):
        return self._room is not None

    def unset_room(self):
        self.unset_calls += 1
        if self._on_unset is not None:
            self._on_unset()
        self._room = None


# ─── KONSTRUKTION + ZUGRIFF ───────────────────────────────────────────────────

class TestConstruction:
    def test_fields_read_back(self):
        """Alle Felder werden unverändert zurückgegeben."""
        tags = {Tag("Balkon"), Tag("renoviert")}
        room = Room(Floor("2"), RoomNumber("201"), RoomType.CORRIDOR_AIRCON, tags)
        assert room.floor == Floor("2")
        assert room.room_number == RoomNumber("201")
        assert room.room_type == RoomType.CORRIDOR_AIRCON
        assert room.tags == tags
        assert room.occupant is None

    def test_opaque_identifiers(self):
        """Etage und Nummer sind beliebige Werte, z.B. int und str."""
        room = Room(2, "201", "SINGLE", set())
        assert room.floor == 2
        assert room.room_number == "201"
        assert room.room_type == "SINGLE"
        assert room.has_occupant() is False

    @pytest.mark.parametrize("args", [
        (None, "201", "SINGLE", set()),
        (2, None, "SINGLE", set()),
        (2, "201", None, set()),
        (2, "201", "SINGLE", None),
    ])
    def test_none_argument_raises(self, args):
        """Fehlendes Feld bei der Konstruktion → ValueError."""
        with pytest.raises(ValueError):
            Room(*args)

    def test_tags_are_copied(self):
        """Spätere Änderungen am übergebenen Set wirken nicht auf das Zimmer."""
        tags = {Tag("Balkon")}
        room = make_room(tags=["Balkon"])
        room_from_set = Room(Floor("2"), RoomNumber("201"), RoomType.CORRIDOR_AIRCON, tags)
        tags.add(Tag("renoviert"))
        assert room_from_set.tags == {Tag("Balkon")}
        assert room.tags == room_from_set.tags

    def test_duplicate_tags_collapse(self):
        """Doppelte Tags werden zu einem zusammengefasst."""
        room = Room(1, "101", "SINGLE", [Tag("Balkon"), Tag("Balkon")])
        assert len(room.tags) == 1


class TestTagView:
    def test_tag_view_is_distinct_object(self):
        """Die Tag-Sicht ist gleich dem Original-Set, aber ein anderes Objekt."""
        tags = {Tag("Balkon")}
        room = Room(1, "101", "SINGLE", tags)
        assert room.tags == tags
        assert room.tags is not tags

    def test_tag_view_rejects_add(self):
        """add auf der Tag-Sicht schlägt fehl."""
        room = make_room(tags=["Balkon"])
        with pytest.raises(AttributeError):
            room.tags.add(Tag("renoviert"))

    def test_tag_view_rejects_discard(self):
        """discard/clear auf der Tag-Sicht schlagen fehl."""
        room = make_room(tags=["Balkon"])
        with pytest.raises(AttributeError):
            room.tags.discard(Tag("Balkon"))
        with pytest.raises(AttributeError):
            room.tags.clear()

    def test_tags_attribute_not_assignable(self):
        """Die Tags können nicht neu zugewiesen werden."""
        room = make_room()
        with pytest.raises(AttributeError):
            room.tags = {Tag("neu")}
        assert room.tags == frozenset()


# ─── SCHWACHE IDENTITÄT vs. GLEICHHEIT ────────────────────────────────────────

class TestSameRoom:
    def test_same_instance(self):
        room = make_room()
        assert room.is_same_room(room)

    def test_none_is_not_same(self):
        assert make_room().is_same_room(None) is False

    def test_same_floor_and_number_other_fields_differ(self):
        """Gleiche Etage + Nummer genügt, Typ/Tags/Bewohner egal."""
        a = make_room(room_type=RoomType.CORRIDOR_AIRCON, tags=["Balkon"])
        b = make_room(room_type=RoomType.NON_CORRIDOR_NO_AIRCON)
        b.set_occupant(make_student())
        assert a.is_same_room(b)
        assert b.is_same_room(a)
        assert a != b

    def test_different_number(self):
        assert not make_room(number="201").is_same_room(make_room(number="202"))

    def test_different_floor(self):
        assert not Room(1, "201", "SINGLE", set()).is_same_room(Room(2, "201", "SINGLE", set()))


class TestEquality:
    def test_equal_rooms(self):
        """Alle Felder gleich → gleich, auch als verschiedene Instanzen."""
        a = make_room(tags=["Balkon", "renoviert"])
        b = make_room(tags=["renoviert", "Balkon"])
        assert a == b
        assert a.is_same_room(b)

    def test_different_room_type(self):
        assert make_room(room_type=RoomType.CORRIDOR_AIRCON) != \
            make_room(room_type=RoomType.CORRIDOR_NO_AIRCON)

    def test_different_tags(self):
        assert make_room(tags=["Balkon"]) != make_room(tags=["renoviert"])

    def test_occupant_compared(self):
        """Bewohner zählt zur Gleichheit (None-sicher)."""
        a, b = make_room(), make_room()
        a.set_occupant(make_student())
        assert a != b
        b.set_occupant(make_student())
        assert a == b
        b.set_occupant(make_student(student_id="E0000002"))
        assert a != b

    def test_not_equal_to_other_types(self):
        room = make_room()
        assert room != "2-201"
        assert room != None  # noqa: E711

    def test_subclass_not_equal(self):
        """Typ-genauer Vergleich: Unterklasse mit gleichen Feldern ist nicht gleich."""
        class SpecialRoom(Room):
            pass

        a = make_room()
        b = SpecialRoom(Floor("2"), RoomNumber("201"), RoomType.CORRIDOR_AIRCON, set())
        assert a != b
        assert a.is_same_room(b)


class TestHash:
    def test_equal_rooms_equal_hash(self):
        a = make_room(tags=["Balkon"])
        b = make_room(tags=["Balkon"])
        assert a == b
        assert hash(a) == hash(b)

    def test_hash_stable_over_occupancy(self):
        """Belegung ändert den Hash nicht."""
        room = make_room()
        before = hash(room)
        room.set_occupant(make_student())
        assert hash(room) == before
        room.unset_occupant()
        assert hash(room) == before

    def test_usable_in_set(self):
        rooms = {make_room(), make_room(), make_room(number="202")}
        assert len(rooms) == 2


class TestStr:
    def test_str_contains_fields_in_order(self):
        room = make_room(tags=["Balkon"])
        assert str(room) == " Etage: 2 Zimmernummer: 201 Typ: CA Tags: [Balkon]"

    def test_str_concatenates_tags(self):
        """Tags werden ohne Trenner aneinandergehängt, Reihenfolge nicht garantiert."""
        text = str(make_room(tags=["Balkon", "renoviert"]))
        assert text.startswith(" Etage: 2 Zimmernummer: 201 Typ: CA Tags: ")
        assert text.endswith("[Balkon][renoviert]") or text.endswith("[renoviert][Balkon]")

    def test_repr(self):
        assert repr(make_room()) == "Room(2-201)"


# ─── BELEGUNG ─────────────────────────────────────────────────────────────────

class TestOccupancy:
    def test_new_room_is_vacant(self):
        room = Room(2, "201", "SINGLE", set())
        assert room.has_occupant() is False
        assert room.occupant is None

    def test_set_occupant_without_room(self):
        """Bewohner ohne Zimmer → wird gespeichert, kein unset_room."""
        room = Room(2, "201", "SINGLE", set())
        student = make_student()
        room.set_occupant(student)
        assert room.has_occupant() is True
        assert room.occupant is student

    def test_set_occupant_does_not_link_student_to_room(self):
        """set_occupant setzt NICHT den Zimmer-Verweis des Bewohners."""
        room = make_room()
        student = make_student()
        room.set_occupant(student)
        assert student.has_room() is False
        assert student.room is None

    def test_set_occupant_detaches_from_other_room(self):
        """Bewohner in R1 → R2.set_occupant löst nur die Bewohner-Seite von R1."""
        r1 = make_room(floor="1", number="101")
        r2 = make_room(floor="2", number="201")
        student = make_student()
        r1.set_occupant(student)
        student.set_room(r1)

        r2.set_occupant(student)

        assert student.has_room() is False
        assert r2.occupant is student
        # R1 selbst wird nicht angefasst
        assert r1.occupant is student

    def test_unset_room_called_before_storing(self):
        """unset_room läuft, bevor das neue Zimmer den Bewohner speichert."""
        r1 = make_room(floor="1", number="101")
        r2 = make_room(floor="2", number="201")
        seen = []
        occupant = RecordingOccupant(room=r1, on_unset=lambda: seen.append(r2.occupant))

        r2.set_occupant(occupant)

        assert occupant.unset_calls == 1
        assert seen == [None]
        assert r2.occupant is occupant

    def test_same_room_keeps_link(self):
        """Verweist der Bewohner schon auf dasselbe Zimmer (Etage + Nummer), bleibt alles."""
        room = make_room(tags=["Balkon"])
        same = make_room()
        occupant = RecordingOccupant(room=same)

        room.set_occupant(occupant)

        assert occupant.unset_calls == 0
        assert occupant.room is same
        assert room.occupant is occupant

    def test_set_occupant_none_is_noop(self):
        """set_occupant(None) lässt die bisherige Belegung bestehen."""
        room = make_room()
        student = make_student()
        room.set_occupant(student)
        room.set_occupant(None)
        assert room.occupant is student
        assert room.has_occupant() is True

    def test_set_occupant_none_on_vacant_room(self):
        room = make_room()
        room.set_occupant(None)
        assert room.has_occupant() is False

    def test_set_occupant_replaces_previous(self):
        """Ein neuer Bewohner ersetzt den alten ohne Rückfrage."""
        room = make_room()
        first, second = make_student(), make_student(student_id="E0000002")
        room.set_occupant(first)
        room.set_occupant(second)
        assert room.occupant is second

    def test_unset_occupant(self):
        """unset_occupant leert das Zimmer, der Bewohner bleibt unverändert."""
        room = make_room()
        student = make_student()
        room.set_occupant(student)
        student.set_room(room)

        room.unset_occupant()

        assert room.has_occupant() is False
        assert student.room is room

    def test_unset_occupant_on_vacant_room(self):
        room = make_room()
        room.unset_occupant()
        assert room.has_occupant() is False
