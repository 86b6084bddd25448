"""Fehlertypen der Wohnheim-Verwaltung."""


class ResidenceError(Exception):
    """Basisklasse aller Registry-Fehler."""


class DuplicateRoomError(ResidenceError):
    def __init__(self, room):
        super().__init__(
            f"Zimmer {room.floor}-{room.room_number} existiert bereits im Wohnheim."
        )
        self.room = room


class DuplicateStudentError(ResidenceError):
    def __init__(self, student_id: str):
        super().__init__(f"Studierende/r {student_id} ist bereits registriert.")
        self.student_id = student_id


class RoomNotFoundError(ResidenceError):
    def __init__(self, room):
        super().__init__(f"Zimmer {room.floor}-{room.room_number} ist nicht registriert.")
        self.room = room


class StudentNotFoundError(ResidenceError):
    def __init__(self, student_id: str):
        super().__init__(f"Studierende/r {student_id} ist nicht registriert.")
        self.student_id = student_id
