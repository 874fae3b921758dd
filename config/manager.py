"""Konfigurationsmanager: Laden, Speichern und Validieren der App-Konfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from config.defaults import default_app_config
from config.schema import AppConfig

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Studienplan-Verwaltung — Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "load_sample_data": (
        "Sitzung",
        "Ohne Persistenz: jede Sitzung beginnt leer oder mit den Beispieldaten.",
    ),
    "date_format": (
        "Datumsformat",
        "Eingabe und Anzeige aller Daten; muss %d, %m und %Y enthalten.",
    ),
    "log_level": (
        "Logging",
        "DEBUG, INFO, WARNING oder ERROR (--verbose erzwingt DEBUG).",
    ),
    "clone_defaults": (
        "Klonen",
        "Vorbelegung von Beginn/Ende der neuen Periode, im Format {date_format}.",
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "app_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> AppConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus."
            )
        try:
            with open(target, "r", encoding="utf-8") as f:
                raw = yaml.load(f)
        except YAMLError as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"YAML-Fehler: {e}"
            ) from e
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Erwartet 'schlüssel: wert'-Paare, gefunden: {type(raw).__name__}"
            )
        try:
            return AppConfig.model_validate(dict(raw))
        except ValidationError as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    def load_or_default(self, path: Optional[Path] = None) -> AppConfig:
        """Wie ``load``, aber ohne Datei die Standard-Konfiguration."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            return default_app_config()
        return self.load(target)

    # ─── Speichern ───

    def save(self, config: AppConfig, path: Optional[Path] = None) -> None:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    def _build_commented_yaml(self, config: AppConfig) -> CommentedMap:
        """AppConfig-Felder mit je einem Abschnittskommentar vor Sitzung,
        Datumsformat, Logging und Klonen; der Klon-Hinweis nennt das aktuelle
        ``date_format``, in dem die Vorgabedaten stehen müssen."""
        values = json.loads(config.model_dump_json())
        doc = CommentedMap(values)

        for key, (section, hint) in _SECTION_COMMENTS.items():
            lines = [f"─── {section} ───"]
            if hint:
                lines.append(hint.format(date_format=config.date_format))
            doc.yaml_set_comment_before_after_key(key, before="\n" + "\n".join(lines))
        return doc


# ─── Datums-Helfer ───

def parse_date(text: str, config: AppConfig) -> date:
    """Parst ein Datum im konfigurierten Format (ValueError bei falschem Format)."""
    return datetime.strptime(text.strip(), config.date_format).date()


def format_date(value: Optional[date], config: AppConfig) -> str:
    return value.strftime(config.date_format) if value else ""
