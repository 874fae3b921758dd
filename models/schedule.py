"""Datenmodell für den Termin einer Gruppe (Pydantic v2)."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

# HH:mm, 24h, immer zweistellig
TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")


class WeekDay(str, Enum):
    """Unterrichtstage Montag bis Samstag."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def label(self) -> str:
        names = ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado"]
        return names[list(WeekDay).index(self)]


class Schedule(BaseModel):
    """Wochentag, Uhrzeit und Raum einer Gruppe.

    Beide Uhrzeiten werden beim Erzeugen (und bei späterer Zuweisung) gegen
    das Format HH:mm geprüft. Eine Reihenfolge Beginn < Ende wird bewusst
    NICHT erzwungen.
    """

    model_config = ConfigDict(validate_assignment=True)

    day: WeekDay
    start_time: str   # "07:00"
    end_time: str     # "09:00"
    classroom: str = ""

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time_format(cls, v: str, info) -> str:
        if not TIME_PATTERN.fullmatch(v):
            raise ValueError(
                f"{info.field_name} must match HH:mm (e.g. 07:00 or 14:30), got {v!r}"
            )
        return v

    def __str__(self) -> str:
        return f"{self.day.label} {self.start_time} - {self.end_time} | {self.classroom}"
