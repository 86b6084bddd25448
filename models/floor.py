"""Etage eines Wohnheimzimmers (Pydantic v2)."""

from pydantic import ConfigDict, RootModel, field_validator


class Floor(RootModel[str]):
    """Etagen-Bezeichner, z.B. "2" oder "12".

    Immutable (frozen=True) damit es als Dict-Key / Set-Element nutzbar ist.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _digits_only(cls, v: str) -> str:
        v = v.strip()
        if not v.isdigit():
            raise ValueError(
                f"Etage '{v}' ungültig: nur Ziffern erlaubt, darf nicht leer sein."
            )
        return v

    def __str__(self) -> str:
        return self.root
