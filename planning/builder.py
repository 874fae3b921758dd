"""Schrittweiser Aufbau eines StudyPlan (Builder).

Der Builder sammelt Feld für Feld, prüft erst in ``build()`` und setzt sich
nach einem erfolgreichen Build selbst zurück, damit er wiederverwendet werden
kann. Schlägt ``build()`` fehl, bleibt der Zustand erhalten, sodass der
Aufrufer nur die fehlerhaften Felder korrigieren muss.

Beispiel::

    plan = (StudyPlanBuilder()
            .set_name("Plan 2024-I")
            .set_period("2024-I")
            .set_program("Ingeniería de Sistemas")
            .set_start_date(date(2024, 2, 5))
            .set_end_date(date(2024, 6, 28))
            .add_group(group)
            .build())
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from models.group import Group
from models.study_plan import StudyPlan
from models.subject import Modality

logger = logging.getLogger(__name__)


class PlanValidationError(ValueError):
    """Ein oder mehrere Pflichtfelder fehlen oder sind inkonsistent."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("cannot build study plan:\n" + "\n".join(self.errors))


class StudyPlanBuilder:
    """Fluent Builder für ``StudyPlan``."""

    def __init__(self) -> None:
        self.reset()

    # ─── Setter ───

    def set_id(self, plan_id: Optional[str]) -> StudyPlanBuilder:
        self._id = plan_id
        return self

    def set_name(self, name: Optional[str]) -> StudyPlanBuilder:
        self._name = name
        return self

    def set_period(self, period: Optional[str]) -> StudyPlanBuilder:
        self._period = period
        return self

    def set_program(self, program: Optional[str]) -> StudyPlanBuilder:
        self._program = program
        return self

    def set_modality(self, modality: Modality) -> StudyPlanBuilder:
        self._modality = modality
        return self

    def set_start_date(self, start_date: Optional[date]) -> StudyPlanBuilder:
        self._start_date = start_date
        return self

    def set_end_date(self, end_date: Optional[date]) -> StudyPlanBuilder:
        self._end_date = end_date
        return self

    def set_description(self, description: str) -> StudyPlanBuilder:
        self._description = description
        return self

    def add_group(self, group: Optional[Group]) -> StudyPlanBuilder:
        """Hängt eine Gruppe an; ``None`` wird stillschweigend ignoriert."""
        if group is not None:
            self._groups.append(group)
        return self

    # ─── Build / Reset ───

    def build(self) -> StudyPlan:
        """Prüft alle Felder und erzeugt den Plan.

        Raises:
            PlanValidationError: mit ALLEN verletzten Regeln, nicht nur der ersten.
        """
        errors = self.validate()
        if errors:
            raise PlanValidationError(errors)

        plan = StudyPlan(
            id=self._id,
            name=self._name,
            period=self._period,
            program=self._program,
            modality=self._modality,
            start_date=self._start_date,
            end_date=self._end_date,
            description=self._description,
            groups=list(self._groups),
        )
        self.reset()
        return plan

    def reset(self) -> None:
        """Setzt den Builder auf den Ausgangszustand zurück."""
        self._id: Optional[str] = None
        self._name: Optional[str] = None
        self._period: Optional[str] = None
        self._program: Optional[str] = None
        self._modality: Modality = Modality.IN_PERSON
        self._start_date: Optional[date] = None
        self._end_date: Optional[date] = None
        self._description: str = ""
        self._groups: list[Group] = []
        logger.debug("StudyPlanBuilder zurückgesetzt")

    def validate(self) -> list[str]:
        """Gibt die Liste aller verletzten Regeln zurück (leer = baubar)."""
        errors: list[str] = []
        if _is_blank(self._name):
            errors.append("name is required")
        if _is_blank(self._period):
            errors.append("period is required")
        if _is_blank(self._program):
            errors.append("program is required")
        if self._start_date is None:
            errors.append("start date is required")
        if self._end_date is None:
            errors.append("end date is required")
        if (self._start_date is not None and self._end_date is not None
                and self._end_date < self._start_date):
            errors.append("end date must not precede start date")
        return errors

    def snapshot(self) -> dict:
        """Aktueller (noch nicht gebauter) Zustand als Dictionary."""
        return {
            "id": self._id,
            "name": self._name,
            "period": self._period,
            "program": self._program,
            "modality": self._modality,
            "start_date": self._start_date,
            "end_date": self._end_date,
            "description": self._description,
            "groups": list(self._groups),
        }


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
