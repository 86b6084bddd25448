from models.floor import Floor
from models.room_number import RoomNumber
from models.room_type import RoomType
from models.tag import Tag
from models.room import Occupant, Room
from models.student import Student
from models.residence import Residence, ResidenceReport
from models.errors import (
    ResidenceError,
    DuplicateRoomError,
    DuplicateStudentError,
    RoomNotFoundError,
    StudentNotFoundError,
)

__all__ = [
    "Floor",
    "RoomNumber",
    "RoomType",
    "Tag",
    "Occupant",
    "Room",
    "Student",
    "Residence",
    "ResidenceReport",
    "ResidenceError",
    "DuplicateRoomError",
    "DuplicateStudentError",
    "RoomNotFoundError",
    "StudentNotFoundError",
]
