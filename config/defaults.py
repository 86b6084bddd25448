from config.schema import ResidenceConfig, RoomDef
from models.room_type import RoomType


def default_rooms() -> list[RoomDef]:
    """Standard: 3 Etagen × 4 Zimmer = 12 Zimmer.

    Etage 1: Flurzimmer ohne Klimaanlage
    Etage 2: Flurzimmer mit Klimaanlage
    Etage 3: Apartments (eins davon barrierefrei)
    """
    return [
        RoomDef(floor="1", number="101", room_type=RoomType.CORRIDOR_NO_AIRCON),
        RoomDef(floor="1", number="102", room_type=RoomType.CORRIDOR_NO_AIRCON),
        RoomDef(floor="1", number="103", room_type=RoomType.CORRIDOR_NO_AIRCON,
                tags=["renoviert"]),
        RoomDef(floor="1", number="104", room_type=RoomType.CORRIDOR_NO_AIRCON),
        RoomDef(floor="2", number="201", room_type=RoomType.CORRIDOR_AIRCON),
        RoomDef(floor="2", number="202", room_type=RoomType.CORRIDOR_AIRCON),
        RoomDef(floor="2", number="203", room_type=RoomType.CORRIDOR_AIRCON,
                tags=["Balkon"]),
        RoomDef(floor="2", number="204", room_type=RoomType.CORRIDOR_AIRCON,
                tags=["Balkon", "renoviert"]),
        RoomDef(floor="3", number="301", room_type=RoomType.NON_CORRIDOR_AIRCON,
                tags=["barrierefrei"]),
        RoomDef(floor="3", number="302", room_type=RoomType.NON_CORRIDOR_AIRCON),
        RoomDef(floor="3", number="303", room_type=RoomType.NON_CORRIDOR_NO_AIRCON),
        RoomDef(floor="3", number="304", room_type=RoomType.NON_CORRIDOR_NO_AIRCON),
    ]


def default_residence_config() -> ResidenceConfig:
    """Komplette Default-Konfiguration für ein kleines Wohnheim."""
    return ResidenceConfig(
        residence_name="Studentenwohnheim Mustergasse",
        rooms=default_rooms(),
    )
