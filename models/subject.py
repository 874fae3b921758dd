"""Datenmodell für eine Lehrveranstaltung / Fach (Pydantic v2)."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Modality(str, Enum):
    """Durchführungsform eines Fachs oder Studienplans."""

    IN_PERSON = "in_person"
    ONLINE = "online"
    HYBRID = "hybrid"

    @property
    def label(self) -> str:
        """Anzeigename (wie in der Oberfläche)."""
        return _MODALITY_LABELS[self]


_MODALITY_LABELS = {
    Modality.IN_PERSON: "Presencial",
    Modality.ONLINE: "Virtual",
    Modality.HYBRID: "Híbrida",
}


class Subject(BaseModel):
    """Repräsentiert ein Fach mit Credits."""

    id: Optional[str] = None      # "A001"
    name: str
    credits: int = Field(gt=0)    # Credits, immer positiv
    description: str = ""
    modality: Modality = Modality.IN_PERSON

    def __str__(self) -> str:
        return f"{self.name} ({self.credits} cr.)"
