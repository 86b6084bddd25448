from pydantic import BaseModel, Field, field_validator, model_validator

from models.floor import Floor
from models.room_number import RoomNumber
from models.room_type import RoomType
from models.tag import Tag


# ─── ZIMMER ───

class RoomDef(BaseModel):
    """Definition eines einzelnen Zimmers."""
    # Etage, nur Ziffern (z.B. "2")
    floor: str
    # Dreistellige Zimmernummer (z.B. "201")
    number: str
    # Zimmertyp-Kürzel: CA, CN, NA, NN
    room_type: RoomType
    # Optionale Schlagwörter, alphanumerisch (z.B. ["renoviert", "Balkon"])
    tags: list[str] = Field(default_factory=list)

    @field_validator("floor")
    @classmethod
    def _valid_floor(cls, v: str) -> str:
        return Floor(v).root

    @field_validator("number")
    @classmethod
    def _valid_number(cls, v: str) -> str:
        return RoomNumber(v).root

    @field_validator("tags")
    @classmethod
    def _valid_tags(cls, v: list[str]) -> list[str]:
        return [Tag(t).root for t in v]


# ─── GESAMT-CONFIG ───

class ResidenceConfig(BaseModel):
    """Gesamtkonfiguration des Wohnheims."""
    # Name des Wohnheims
    residence_name: str = Field("Studentenwohnheim Mustergasse",
        description="Name des Wohnheims")
    # Alle Zimmer des Wohnheims
    rooms: list[RoomDef] = Field(
        description="Alle Zimmer (Etage + Nummer müssen eindeutig sein)")

    @model_validator(mode='after')
    def validate_unique_rooms(self):
        """Prüfe dass jede Kombination aus Etage und Nummer nur einmal vorkommt."""
        seen: set[tuple[str, str]] = set()
        for rd in self.rooms:
            key = (rd.floor, rd.number)
            if key in seen:
                raise ValueError(
                    f"Zimmer {rd.floor}-{rd.number} ist mehrfach definiert")
            seen.add(key)
        return self

    @property
    def floors(self) -> list[str]:
        """Sortierte Liste aller Etagen."""
        return sorted({rd.floor for rd in self.rooms}, key=int)
