"""Datenmodell für einen Studienplan (Pydantic v2)."""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from models.group import Group
from models.subject import Modality


class StudyPlan(BaseModel):
    """Studienplan eines Studiengangs für eine akademische Periode.

    Neue Pläne entstehen über den ``StudyPlanBuilder`` oder als Klon eines
    bestehenden Plans (``planning.prototype``). Die Regel Ende ≥ Beginn prüft
    nur der Builder; spätere Änderungen werden nicht validiert.
    """

    id: Optional[str] = None      # None direkt nach dem Klonen
    name: str
    period: str                   # "2024-I", "2024-II"
    program: str                  # "Ingeniería de Sistemas"
    modality: Modality = Modality.IN_PERSON
    start_date: date
    end_date: date
    description: str = ""
    groups: list[Group] = []

    @property
    def total_credits(self) -> int:
        """Summe der Credits aller Gruppen (0 ohne Gruppen)."""
        return sum(g.subject.credits for g in self.groups)

    def add_group(self, group: Group) -> None:
        self.groups.append(group)

    def remove_group(self, group: Group) -> bool:
        """Entfernt genau diese Gruppen-Instanz. True wenn gefunden."""
        for i, g in enumerate(self.groups):
            if g is group:
                del self.groups[i]
                return True
        return False

    def __str__(self) -> str:
        return f"{self.name} | {self.period} | {self.program}"
