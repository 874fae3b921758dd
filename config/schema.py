from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ─── KLON-VORGABEN ───

class CloneDefaults(BaseModel):
    """Vorbelegung der Datumsfelder beim Klonen eines Plans."""
    # Vorgeschlagenes Startdatum (im Format von date_format)
    start_date: str = Field("01/08/2025",
        description="Vorgeschlagenes Startdatum der neuen Periode")
    # Vorgeschlagenes Enddatum (im Format von date_format)
    end_date: str = Field("15/12/2025",
        description="Vorgeschlagenes Enddatum der neuen Periode")


# ─── GESAMT-CONFIG ───

class AppConfig(BaseModel):
    """Gesamtkonfiguration der Anwendung."""
    # Name der Einrichtung (nur Anzeige)
    institution_name: str = Field("Universidad",
        description="Name der Einrichtung")
    # Beispieldaten beim Start einer Sitzung laden
    load_sample_data: bool = Field(True,
        description="Beispieldaten beim Start laden")
    # Datumsformat für Eingabe und Anzeige (strftime/strptime)
    date_format: str = Field("%d/%m/%Y",
        description="Datumsformat für Ein- und Ausgabe")
    # Log-Level der Anwendung
    log_level: LogLevel = Field(LogLevel.WARNING,
        description="Log-Level (DEBUG, INFO, WARNING, ERROR)")
    # Vorgaben für den Klon-Dialog
    clone_defaults: CloneDefaults = Field(default_factory=CloneDefaults)

    @field_validator("date_format")
    @classmethod
    def check_date_format(cls, v: str) -> str:
        for directive in ("%d", "%m", "%Y"):
            if directive not in v:
                raise ValueError(f"date_format must contain {directive}, got {v!r}")
        return v

    @model_validator(mode="after")
    def check_clone_defaults(self) -> "AppConfig":
        """Die Klon-Vorgaben müssen im konfigurierten Datumsformat vorliegen."""
        for field_name in ("start_date", "end_date"):
            value = getattr(self.clone_defaults, field_name)
            try:
                datetime.strptime(value.strip(), self.date_format)
            except ValueError:
                raise ValueError(
                    f"clone_defaults.{field_name} {value!r} does not match "
                    f"date_format {self.date_format!r}"
                ) from None
        return self
