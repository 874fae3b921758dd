"""Tiefe Kopie eines StudyPlan (Prototype).

Jede Funktion baut aus den Feldern der Quelle einen komplett neuen Wert;
nichts wird mit dem Quell-Graphen geteilt. Zusammengesetzt wird von unten
nach oben: Schedule/Subject/Teacher → Group → StudyPlan.
"""

from models.group import Group
from models.schedule import Schedule
from models.study_plan import StudyPlan
from models.subject import Subject
from models.teacher import Teacher


def clone_schedule(schedule: Schedule) -> Schedule:
    return Schedule(
        day=schedule.day,
        start_time=schedule.start_time,
        end_time=schedule.end_time,
        classroom=schedule.classroom,
    )


def clone_subject(subject: Subject) -> Subject:
    return Subject(
        id=subject.id,
        name=subject.name,
        credits=subject.credits,
        description=subject.description,
        modality=subject.modality,
    )


def clone_teacher(teacher: Teacher) -> Teacher:
    return Teacher(
        id=teacher.id,
        first_name=teacher.first_name,
        last_name=teacher.last_name,
        specialty=teacher.specialty,
        email=teacher.email,
        phone=teacher.phone,
    )


def clone_group(group: Group) -> Group:
    """Kopiert eine Gruppe samt Fach, Lehrkraft und Termin.

    Die Belegung wird nie übernommen: der Klon startet mit 0 belegten Plätzen.
    """
    return Group(
        id=group.id,
        name=group.name,
        subject=clone_subject(group.subject),
        teacher=clone_teacher(group.teacher),
        schedule=clone_schedule(group.schedule),
        max_slots=group.max_slots,
        occupied_slots=0,
    )


def clone_study_plan(plan: StudyPlan) -> StudyPlan:
    """Tiefe Kopie eines Plans als Basis für eine neue Periode.

    Der Klon hat KEINE ID (``None``); der Aufrufer muss eine neue vergeben,
    bevor der Plan gespeichert wird. Name, Periode, Daten und Beschreibung
    werden unverändert übernommen und typischerweise danach überschrieben.
    """
    return StudyPlan(
        id=None,
        name=plan.name,
        period=plan.period,
        program=plan.program,
        modality=plan.modality,
        start_date=plan.start_date,
        end_date=plan.end_date,
        description=plan.description,
        groups=[clone_group(g) for g in plan.groups],
    )
