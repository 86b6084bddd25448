"""Schlagwort für Zimmer (Pydantic v2)."""

from pydantic import ConfigDict, RootModel, field_validator


class Tag(RootModel[str]):
    """Alphanumerisches Schlagwort, z.B. "renoviert" oder "Balkon"."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _alphanumeric(cls, v: str) -> str:
        v = v.strip()
        if not v.isalnum():
            raise ValueError(f"Tag '{v}' ungültig: nur Buchstaben und Ziffern erlaubt.")
        return v

    @property
    def name(self) -> str:
        return self.root

    def __str__(self) -> str:
        return f"[{self.root}]"
