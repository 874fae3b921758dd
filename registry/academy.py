"""AcademyRegistry: zentrale In-Memory-Verwaltung aller Entitäten.

Einzige Stelle, die Fächer, Lehrkräfte, Gruppen und Studienpläne besitzt.
Vergibt IDs, prüft referentielle Integrität beim Löschen und delegiert den
Aufbau von Studienplänen an ``StudyPlanBuilder`` bzw. ``clone_study_plan``.

Die Registry wird explizit erzeugt und weitergereicht (kein globaler
Singleton), damit Tests isolierte Instanzen bauen können.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from models.group import Group
from models.schedule import Schedule
from models.study_plan import StudyPlan
from models.subject import Modality, Subject
from models.teacher import Teacher
from planning.builder import StudyPlanBuilder
from planning.prototype import clone_study_plan
from registry.errors import NotFoundError, ReferentialIntegrityError
from registry.ids import (
    GROUP_PREFIX,
    PLAN_PREFIX,
    SUBJECT_PREFIX,
    TEACHER_PREFIX,
    IdSequence,
)

logger = logging.getLogger(__name__)

CLONE_DESCRIPTION = "cloned from {name}"


class AcademyRegistry:
    """In-Memory-Speicher für eine Sitzung (keine Persistenz)."""

    def __init__(self) -> None:
        # dicts sind einfügegeordnet → Anzeige in Erstellungsreihenfolge
        self._subjects: dict[str, Subject] = {}
        self._teachers: dict[str, Teacher] = {}
        self._groups: dict[str, Group] = {}
        self._plans: dict[str, StudyPlan] = {}

        self._subject_ids = IdSequence(SUBJECT_PREFIX)
        self._teacher_ids = IdSequence(TEACHER_PREFIX)
        self._group_ids = IdSequence(GROUP_PREFIX)
        self._plan_ids = IdSequence(PLAN_PREFIX)

        self._builder = StudyPlanBuilder()

    @classmethod
    def with_sample_data(cls) -> AcademyRegistry:
        """Registry mit den festen Beispieldaten (3 Lehrkräfte, 4 Fächer, 1 Plan)."""
        from data.sample_data import load_sample_data

        registry = cls()
        load_sample_data(registry)
        return registry

    # ─── Fächer ───────────────────────────────────────────────────────────

    def create_subject(self, name: str, credits: int, description: str = "",
                       modality: Modality = Modality.IN_PERSON) -> Subject:
        subject = Subject(
            id=self._subject_ids.peek(),
            name=name,
            credits=credits,
            description=description,
            modality=modality,
        )
        self._subject_ids.next_id()
        self._subjects[subject.id] = subject
        logger.info(f"Fach angelegt: {subject.id} {subject.name}")
        return subject

    def update_subject(self, subject: Subject) -> Subject:
        """Upsert per ID; vorhandene Instanz wird in-place überschrieben."""
        stored = _upsert(self._subjects, subject)
        logger.info(f"Fach aktualisiert: {stored.id}")
        return stored

    def delete_subject(self, subject_id: str) -> None:
        if subject_id not in self._subjects:
            return
        referencing = self.groups_for_subject(subject_id)
        if referencing:
            raise ReferentialIntegrityError(
                f"cannot delete subject {subject_id}: referenced by group(s) "
                f"{', '.join(g.id for g in referencing)}"
            )
        del self._subjects[subject_id]
        logger.info(f"Fach gelöscht: {subject_id}")

    def get_subjects(self) -> list[Subject]:
        return list(self._subjects.values())

    def get_subject(self, subject_id: str) -> Subject:
        return _lookup(self._subjects, "subject", subject_id)

    def find_subjects(self, text: Optional[str] = None,
                      modality: Optional[Modality] = None) -> list[Subject]:
        """Filter nach Freitext (Name/Beschreibung) und Modalität."""
        needle = (text or "").strip().lower()
        result = []
        for s in self._subjects.values():
            if modality is not None and s.modality != modality:
                continue
            if needle and needle not in s.name.lower() and needle not in s.description.lower():
                continue
            result.append(s)
        return result

    # ─── Lehrkräfte ───────────────────────────────────────────────────────

    def create_teacher(self, first_name: str, last_name: str, specialty: str = "",
                       email: str = "", phone: str = "") -> Teacher:
        teacher = Teacher(
            id=self._teacher_ids.peek(),
            first_name=first_name,
            last_name=last_name,
            specialty=specialty,
            email=email,
            phone=phone,
        )
        self._teacher_ids.next_id()
        self._teachers[teacher.id] = teacher
        logger.info(f"Lehrkraft angelegt: {teacher.id} {teacher.full_name}")
        return teacher

    def update_teacher(self, teacher: Teacher) -> Teacher:
        stored = _upsert(self._teachers, teacher)
        logger.info(f"Lehrkraft aktualisiert: {stored.id}")
        return stored

    def delete_teacher(self, teacher_id: str) -> None:
        if teacher_id not in self._teachers:
            return
        referencing = self.groups_for_teacher(teacher_id)
        if referencing:
            raise ReferentialIntegrityError(
                f"cannot delete teacher {teacher_id}: referenced by group(s) "
                f"{', '.join(g.id for g in referencing)}"
            )
        del self._teachers[teacher_id]
        logger.info(f"Lehrkraft gelöscht: {teacher_id}")

    def get_teachers(self) -> list[Teacher]:
        return list(self._teachers.values())

    def get_teacher(self, teacher_id: str) -> Teacher:
        return _lookup(self._teachers, "teacher", teacher_id)

    def find_teachers(self, text: Optional[str] = None) -> list[Teacher]:
        """Filter nach Name oder Fachgebiet."""
        needle = (text or "").strip().lower()
        if not needle:
            return self.get_teachers()
        return [
            t for t in self._teachers.values()
            if needle in t.full_name.lower() or needle in t.specialty.lower()
        ]

    # ─── Gruppen ──────────────────────────────────────────────────────────

    def create_group(self, name: str, subject: Subject, teacher: Teacher,
                     schedule: Schedule, max_slots: int) -> Group:
        group = Group(
            id=self._group_ids.peek(),
            name=name,
            subject=subject,
            teacher=teacher,
            schedule=schedule,
            max_slots=max_slots,
        )
        self._group_ids.next_id()
        self._groups[group.id] = group
        logger.info(f"Gruppe angelegt: {group.id} {group.name}")
        return group

    def delete_group(self, group_id: str) -> None:
        """Löscht eine Gruppe, sofern kein gespeicherter Plan genau diese Instanz hält.

        Klone halten eigene Kopien und blockieren das Löschen daher nicht.
        """
        group = self._groups.get(group_id)
        if group is None:
            return
        holders = [p for p in self._plans.values()
                   if any(g is group for g in p.groups)]
        if holders:
            raise ReferentialIntegrityError(
                f"cannot delete group {group_id}: used by plan(s) "
                f"{', '.join(p.id for p in holders)}"
            )
        del self._groups[group_id]
        logger.info(f"Gruppe gelöscht: {group_id}")

    def get_groups(self) -> list[Group]:
        return list(self._groups.values())

    def get_group(self, group_id: str) -> Group:
        return _lookup(self._groups, "group", group_id)

    def groups_for_subject(self, subject_id: str) -> list[Group]:
        return [g for g in self._groups.values() if g.subject.id == subject_id]

    def groups_for_teacher(self, teacher_id: str) -> list[Group]:
        return [g for g in self._groups.values() if g.teacher.id == teacher_id]

    def find_groups(self, text: Optional[str] = None) -> list[Group]:
        """Filter nach Gruppenname, Fach oder Lehrkraft."""
        needle = (text or "").strip().lower()
        if not needle:
            return self.get_groups()
        return [
            g for g in self._groups.values()
            if needle in g.name.lower()
            or needle in g.subject.name.lower()
            or needle in g.teacher.full_name.lower()
        ]

    # ─── Studienpläne: Builder ────────────────────────────────────────────

    def create_study_plan(self, name: str, period: str, program: str,
                          modality: Modality, start_date: Optional[date],
                          end_date: Optional[date], description: str = "",
                          groups: Iterable[Optional[Group]] = ()) -> StudyPlan:
        """Baut einen neuen Plan über den ``StudyPlanBuilder`` und speichert ihn.

        ``PlanValidationError`` des Builders wird unverändert weitergereicht;
        in diesem Fall wird keine Plan-ID verbraucht.
        """
        self._builder.reset()
        (self._builder
            .set_id(self._plan_ids.peek())
            .set_name(name)
            .set_period(period)
            .set_program(program)
            .set_modality(modality)
            .set_start_date(start_date)
            .set_end_date(end_date)
            .set_description(description))
        for group in groups:
            self._builder.add_group(group)

        plan = self._builder.build()
        self._plan_ids.next_id()
        self._plans[plan.id] = plan
        logger.info(f"Studienplan angelegt: {plan.id} {plan.name} ({len(plan.groups)} Gruppen)")
        return plan

    # ─── Studienpläne: Prototype ──────────────────────────────────────────

    def clone_study_plan(self, source_id: str, new_name: str, new_period: str,
                         new_start: date, new_end: date) -> StudyPlan:
        """Klont einen Plan (tiefe Kopie) für eine neue Periode.

        Raises:
            NotFoundError: wenn ``source_id`` unbekannt ist.
        """
        source = self._plans.get(source_id)
        if source is None:
            raise NotFoundError("study plan", source_id)

        copy = clone_study_plan(source)
        copy.id = self._plan_ids.next_id()
        copy.name = new_name
        copy.period = new_period
        copy.start_date = new_start
        copy.end_date = new_end
        copy.description = CLONE_DESCRIPTION.format(name=source.name)

        self._plans[copy.id] = copy
        logger.info(f"Studienplan {source_id} geklont → {copy.id} {copy.name}")
        return copy

    # ─── Studienpläne: Lesen / Löschen ────────────────────────────────────

    def get_study_plans(self) -> list[StudyPlan]:
        return list(self._plans.values())

    def get_study_plan(self, plan_id: str) -> StudyPlan:
        return _lookup(self._plans, "study plan", plan_id)

    def find_study_plans(self, text: Optional[str] = None) -> list[StudyPlan]:
        """Filter nach Name, Periode oder Studiengang."""
        needle = (text or "").strip().lower()
        if not needle:
            return self.get_study_plans()
        return [
            p for p in self._plans.values()
            if needle in p.name.lower()
            or needle in p.period.lower()
            or needle in p.program.lower()
        ]

    def delete_study_plan(self, plan_id: str) -> None:
        if self._plans.pop(plan_id, None) is not None:
            logger.info(f"Studienplan gelöscht: {plan_id}")

    # ─── Übersicht ────────────────────────────────────────────────────────

    def summary(self) -> str:
        """Kurze Übersicht über den aktuellen Bestand."""
        total_credits = sum(p.total_credits for p in self._plans.values())
        lines = [
            f"Fächer: {len(self._subjects)}",
            f"Lehrkräfte: {len(self._teachers)}",
            f"Gruppen: {len(self._groups)}",
            f"Studienpläne: {len(self._plans)} ({total_credits} Credits gesamt)",
        ]
        return "\n".join(lines)


def _lookup(store: dict, kind: str, entity_id: str):
    try:
        return store[entity_id]
    except KeyError:
        raise NotFoundError(kind, entity_id) from None


def _upsert(store: dict, entity):
    if not entity.id:
        raise ValueError(f"{type(entity).__name__} without id cannot be stored")
    stored = store.get(entity.id)
    if stored is None or stored is entity:
        store[entity.id] = entity
        return entity
    for field_name in type(entity).model_fields:
        setattr(stored, field_name, getattr(entity, field_name))
    return stored
