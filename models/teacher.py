"""Datenmodell für eine Lehrkraft (Pydantic v2)."""

import re
from typing import Optional

from pydantic import BaseModel, field_validator

_EMAIL_RE = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")


class Teacher(BaseModel):
    """Repräsentiert eine Lehrkraft, die Gruppen zugewiesen werden kann."""

    id: Optional[str] = None   # "D001"
    first_name: str
    last_name: str
    specialty: str = ""
    email: str = ""            # leer erlaubt
    phone: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        v = v.strip()
        if v and not _EMAIL_RE.match(v):
            raise ValueError(f"invalid email format: {v!r}")
        return v

    def __str__(self) -> str:
        return f"{self.full_name} - {self.specialty}"
