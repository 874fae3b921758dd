"""Fehlerklassen der Registry."""


class RegistryError(Exception):
    """Basisklasse aller Registry-Fehler."""


class ReferentialIntegrityError(RegistryError):
    """Löschen würde eine Referenz aus einer Gruppe / einem Plan verwaisen lassen."""


class NotFoundError(RegistryError, LookupError):
    """Keine Entität mit dieser ID vorhanden."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found with id: {entity_id}")
