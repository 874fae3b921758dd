"""Feste Beispieldaten, die beim Start einer Sitzung geladen werden.

Die Werte sind fix (keine Zufallsdaten), damit jede Sitzung mit demselben
Bestand beginnt:

  Lehrkräfte  D001–D003
  Fächer      A001–A004
  Gruppen     G001–G004 (je Fach eine Gruppe)
  Plan        P001 "Plan 2024-I" mit allen vier Gruppen (14 Credits)
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from models.schedule import Schedule, WeekDay
from models.subject import Modality

if TYPE_CHECKING:
    from registry.academy import AcademyRegistry

# ─── Lehrkräfte ───────────────────────────────────────────────────────────────
# (Vorname, Nachname, Fachgebiet, E-Mail, Telefon)

SAMPLE_TEACHERS = [
    ("Carlos", "Ramírez", "Algoritmos",    "c.ramirez@uni.edu", "3001234567"),
    ("Laura",  "Torres",  "Base de Datos", "l.torres@uni.edu",  "3107654321"),
    ("Andrés", "Molina",  "Redes",         "a.molina@uni.edu",  "3209876543"),
]

# ─── Fächer ───────────────────────────────────────────────────────────────────
# (Name, Credits, Beschreibung, Modalität)

SAMPLE_SUBJECTS = [
    ("Algoritmos y Estructuras de Datos", 4,
     "Fundamentos algorítmicos y estructuras de datos avanzadas.", Modality.IN_PERSON),
    ("Bases de Datos", 3,
     "Diseño y administración de bases de datos relacionales.", Modality.IN_PERSON),
    ("Redes de Computadores", 3,
     "Protocolos y arquitecturas de redes.", Modality.HYBRID),
    ("Ingeniería de Software", 4,
     "Metodologías y buenas prácticas de desarrollo.", Modality.ONLINE),
]

# ─── Termine ──────────────────────────────────────────────────────────────────

SAMPLE_SCHEDULES = [
    (WeekDay.MONDAY,    "07:00", "09:00", "Room 201"),
    (WeekDay.TUESDAY,   "09:00", "11:00", "Lab 102"),
    (WeekDay.WEDNESDAY, "14:00", "16:00", "Room 305"),
    (WeekDay.THURSDAY,  "11:00", "13:00", "Room 210"),
]

# ─── Gruppen ──────────────────────────────────────────────────────────────────
# (Name, Fach-Index, Lehrkraft-Index, Termin-Index, Maximalplätze)
# Carlos Ramírez betreut sowohl Algoritmos als auch Ing. Software.

SAMPLE_GROUPS = [
    ("Grupo A - Algoritmos",     0, 0, 0, 30),
    ("Grupo B - Bases de Datos", 1, 1, 1, 25),
    ("Grupo C - Redes",          2, 2, 2, 28),
    ("Grupo D - Ing. Software",  3, 0, 3, 30),
]

SAMPLE_PLAN = {
    "name": "Plan 2024-I",
    "period": "2024-I",
    "program": "Ingeniería de Sistemas",
    "modality": Modality.IN_PERSON,
    "start_date": date(2024, 2, 5),
    "end_date": date(2024, 6, 28),
    "description": "Plan académico del primer semestre 2024.",
}


def load_sample_data(registry: AcademyRegistry) -> None:
    """Legt alle Beispieldaten über die Factory-Methoden der Registry an.

    Reihenfolge: Lehrkräfte, Fächer, Gruppen, Plan. Dadurch
    erhalten alle Entitäten die erwarteten IDs (D001.., A001.., G001.., P001).
    """
    teachers = [registry.create_teacher(*row) for row in SAMPLE_TEACHERS]
    subjects = [registry.create_subject(*row) for row in SAMPLE_SUBJECTS]
    schedules = [
        Schedule(day=day, start_time=start, end_time=end, classroom=room)
        for day, start, end, room in SAMPLE_SCHEDULES
    ]

    groups = [
        registry.create_group(
            name, subjects[s_idx], teachers[t_idx], schedules[sc_idx], max_slots
        )
        for name, s_idx, t_idx, sc_idx, max_slots in SAMPLE_GROUPS
    ]

    registry.create_study_plan(groups=groups, **SAMPLE_PLAN)
