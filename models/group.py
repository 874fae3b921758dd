"""Datenmodell für eine Gruppe: Fach + Lehrkraft + Termin (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel

from models.schedule import Schedule
from models.subject import Subject
from models.teacher import Teacher


class CapacityError(ValueError):
    """Belegung würde unter 0 oder über die Maximalplätze gehen."""


class Group(BaseModel):
    """Eine Gruppe mit begrenzter Platzanzahl.

    ``subject`` und ``teacher`` sind geteilte Referenzen auf die Instanzen in
    der Registry; Pydantic übernimmt übergebene Modell-Instanzen unverändert.
    """

    id: Optional[str] = None   # "G001"
    name: str
    subject: Subject
    teacher: Teacher
    schedule: Schedule
    max_slots: int
    occupied_slots: int = 0    # Direktzuweisung ungeprüft, siehe enroll()/release()

    @property
    def available_slots(self) -> int:
        return self.max_slots - self.occupied_slots

    def enroll(self, count: int = 1) -> int:
        """Belegt ``count`` Plätze; gibt die neue Belegung zurück."""
        if count < 1:
            raise CapacityError(f"count must be positive, got {count}")
        if self.occupied_slots + count > self.max_slots:
            raise CapacityError(
                f"group {self.name!r} has only {self.available_slots} free slot(s)"
            )
        self.occupied_slots += count
        return self.occupied_slots

    def release(self, count: int = 1) -> int:
        """Gibt ``count`` belegte Plätze frei."""
        if count < 1:
            raise CapacityError(f"count must be positive, got {count}")
        if count > self.occupied_slots:
            raise CapacityError(
                f"group {self.name!r} has only {self.occupied_slots} occupied slot(s)"
            )
        self.occupied_slots -= count
        return self.occupied_slots

    def __str__(self) -> str:
        return f"{self.name} | {self.subject.name} | {self.teacher.full_name}"
