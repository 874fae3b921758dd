"""Registry-Modul: In-Memory-Speicher, ID-Vergabe und Integritätsregeln."""

from .academy import AcademyRegistry
from .errors import NotFoundError, ReferentialIntegrityError, RegistryError
from .ids import IdSequence

__all__ = [
    "AcademyRegistry",
    "IdSequence",
    "NotFoundError",
    "ReferentialIntegrityError",
    "RegistryError",
]
