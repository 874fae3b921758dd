"""Fortlaufende, menschenlesbare IDs pro Entitätstyp ("A001", "P012")."""

from dataclasses import dataclass

# Präfixe je Entitätstyp
SUBJECT_PREFIX = "A"
TEACHER_PREFIX = "D"
GROUP_PREFIX = "G"
PLAN_PREFIX = "P"


@dataclass
class IdSequence:
    """Monoton steigender Zähler; vergebene IDs werden nie wiederverwendet."""

    prefix: str
    next_value: int = 1

    def next_id(self) -> str:
        value = self.next_value
        self.next_value += 1
        return f"{self.prefix}{value:03d}"

    def peek(self) -> str:
        """Die nächste ID, ohne sie zu verbrauchen."""
        return f"{self.prefix}{self.next_value:03d}"
