"""Interaktive Sitzung: Menü zum Anzeigen, Anlegen, Klonen und Löschen.

Reine Präsentationsschicht. Alle Änderungen laufen über die
``AcademyRegistry``; Fehler des Kerns werden nur angezeigt, nie verschluckt
oder in Standardwerte umgewandelt.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt

from config.manager import parse_date
from config.schema import AppConfig
from models.subject import Modality
from planning.builder import PlanValidationError
from registry.academy import AcademyRegistry
from registry.errors import RegistryError
from ui.tables import (
    groups_table,
    plan_groups_table,
    plan_summary_lines,
    plans_table,
    subjects_table,
    teachers_table,
)

_MODALITY_CHOICES = [m.value for m in Modality]


class InteractiveSession:
    """Menüschleife über einer Registry."""

    def __init__(self, registry: AcademyRegistry, config: AppConfig,
                 console: Optional[Console] = None) -> None:
        self.registry = registry
        self.config = config
        self.console = console or Console()

    # ─── Ausgabe-Helfer ───

    def _error(self, text: str) -> None:
        self.console.print(f"[red]✗ {escape(text)}[/red]")

    def _success(self, text: str) -> None:
        self.console.print(f"[green]✓[/green] {text}")

    def _warn(self, text: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow]  {text}")

    # ─── Hauptschleife ───

    def run(self) -> None:
        actions = {
            "1": self.show_subjects,
            "2": self.show_teachers,
            "3": self.show_groups,
            "4": self.show_plans,
            "5": self.create_subject,
            "6": self.create_teacher,
            "7": self.create_plan,
            "8": self.clone_plan,
            "9": self.delete_entity,
        }
        while True:
            self.console.print()
            self.console.print(Panel(
                f"[bold]{self.config.institution_name}[/bold] — Studienplan-Verwaltung",
                border_style="cyan",
            ))
            self.console.print("  [bold]1.[/bold] Fächer anzeigen")
            self.console.print("  [bold]2.[/bold] Lehrkräfte anzeigen")
            self.console.print("  [bold]3.[/bold] Gruppen anzeigen")
            self.console.print("  [bold]4.[/bold] Studienpläne anzeigen")
            self.console.print("  [bold]5.[/bold] Fach anlegen")
            self.console.print("  [bold]6.[/bold] Lehrkraft anlegen")
            self.console.print("  [bold]7.[/bold] Studienplan anlegen (Builder)")
            self.console.print("  [bold]8.[/bold] Studienplan klonen (Prototype)")
            self.console.print("  [bold]9.[/bold] Löschen")
            self.console.print("  [bold]0.[/bold] Beenden")

            choice = Prompt.ask("\nAuswahl", default="0", console=self.console)
            if choice == "0":
                break
            action = actions.get(choice)
            if action is None:
                self._warn("Ungültige Auswahl.")
                continue
            action()

    # ─── Anzeigen ───

    def show_subjects(self) -> None:
        text = Prompt.ask("Filter (leer = alle)", default="", console=self.console)
        self.console.print(subjects_table(self.registry.find_subjects(text=text)))

    def show_teachers(self) -> None:
        text = Prompt.ask("Filter (leer = alle)", default="", console=self.console)
        self.console.print(teachers_table(self.registry.find_teachers(text=text)))

    def show_groups(self) -> None:
        self.console.print(groups_table(self.registry.get_groups()))

    def show_plans(self) -> None:
        self.console.print(plans_table(self.registry.get_study_plans(),
                                       self.config.date_format))
        plan_id = Prompt.ask("Plan-ID für Details (leer = zurück)", default="",
                             console=self.console)
        if not plan_id:
            return
        try:
            plan = self.registry.get_study_plan(plan_id.strip().upper())
        except RegistryError as e:
            self._error(str(e))
            return
        self.console.print(plan_groups_table(plan))

    # ─── Anlegen ───

    def create_subject(self) -> None:
        name = Prompt.ask("Name", default="", console=self.console).strip()
        if not name:
            self._warn("Der Name ist ein Pflichtfeld.")
            return
        credits = IntPrompt.ask("Credits", default=3, console=self.console)
        description = Prompt.ask("Beschreibung", default="", console=self.console)
        modality = Prompt.ask("Modalität", choices=_MODALITY_CHOICES,
                              default=Modality.IN_PERSON.value, console=self.console)
        try:
            subject = self.registry.create_subject(
                name, credits, description.strip(), Modality(modality)
            )
        except ValueError as e:
            self._error(f"Fach ungültig: {e}")
            return
        self._success(f"Fach angelegt: {subject.id} {subject.name}")

    def create_teacher(self) -> None:
        first_name = Prompt.ask("Vorname", default="", console=self.console).strip()
        last_name = Prompt.ask("Nachname", default="", console=self.console).strip()
        if not first_name or not last_name:
            self._warn("Vor- und Nachname sind Pflichtfelder.")
            return
        specialty = Prompt.ask("Fachgebiet", default="", console=self.console)
        email = Prompt.ask("E-Mail", default="", console=self.console)
        phone = Prompt.ask("Telefon", default="", console=self.console)
        try:
            teacher = self.registry.create_teacher(
                first_name, last_name, specialty.strip(), email.strip(), phone.strip()
            )
        except ValueError as e:
            self._error(f"Lehrkraft ungültig: {e}")
            return
        self._success(f"Lehrkraft angelegt: {teacher.id} {teacher.full_name}")

    def create_plan(self) -> None:
        """Neuer Plan über den Builder; zeigt ALLE Validierungsfehler an."""
        name = Prompt.ask("Name", default="", console=self.console)
        period = Prompt.ask("Periode (z.B. 2024-II)", default="", console=self.console)
        program = Prompt.ask("Studiengang", default="", console=self.console)
        modality = Prompt.ask("Modalität", choices=_MODALITY_CHOICES,
                              default=Modality.IN_PERSON.value, console=self.console)
        start_date = self._ask_date("Beginn")
        end_date = self._ask_date("Ende")
        description = Prompt.ask("Beschreibung", default="", console=self.console)

        self.console.print(groups_table(self.registry.get_groups()))
        raw_ids = Prompt.ask("Gruppen-IDs (kommagetrennt, leer = keine)", default="",
                             console=self.console)
        try:
            groups = [
                self.registry.get_group(gid.strip().upper())
                for gid in raw_ids.split(",") if gid.strip()
            ]
            plan = self.registry.create_study_plan(
                name, period, program, Modality(modality),
                start_date, end_date, description.strip(), groups,
            )
        except PlanValidationError as e:
            self._error("Plan kann nicht erstellt werden:")
            for err in e.errors:
                self.console.print(f"  [red]• {err}[/red]")
            return
        except RegistryError as e:
            self._error(str(e))
            return
        self._success(
            f"Plan angelegt: {plan.id} {plan.name} "
            f"({len(plan.groups)} Gruppen, {plan.total_credits} Credits)"
        )

    def clone_plan(self) -> None:
        plans = self.registry.get_study_plans()
        if not plans:
            self._warn("Keine Pläne zum Klonen vorhanden.")
            return
        self.console.print(plans_table(plans, self.config.date_format))
        source_id = Prompt.ask("Quell-Plan-ID", default=plans[0].id,
                               console=self.console).strip().upper()
        try:
            source = self.registry.get_study_plan(source_id)
        except RegistryError as e:
            self._error(str(e))
            return
        self.console.print(Panel("\n".join(plan_summary_lines(source)),
                                 title="Quell-Plan (wird geklont)", border_style="cyan"))

        new_name = Prompt.ask("Neuer Name", default="", console=self.console).strip()
        new_period = Prompt.ask("Neue Periode", default="", console=self.console).strip()
        if not new_name or not new_period:
            self._warn("Name und Periode sind Pflichtfelder.")
            return
        defaults = self.config.clone_defaults
        new_start = self._ask_date("Neuer Beginn", defaults.start_date)
        new_end = self._ask_date("Neues Ende", defaults.end_date)
        if new_start is None or new_end is None:
            self._warn("Beginn und Ende sind Pflichtfelder.")
            return

        clone = self.registry.clone_study_plan(
            source.id, new_name, new_period, new_start, new_end
        )
        self._success(
            f"Plan geklont: {clone.id} {clone.name} — tiefe Kopie mit "
            f"{len(clone.groups)} Gruppe(n)"
        )

    # ─── Löschen ───

    def delete_entity(self) -> None:
        """Löscht Fach, Lehrkraft oder Plan; unbekannte IDs werden gemeldet."""
        kind = Prompt.ask("Was löschen?", choices=["fach", "lehrkraft", "plan"],
                          default="plan", console=self.console)
        lookup, delete = {
            "fach": (self.registry.get_subject, self.registry.delete_subject),
            "lehrkraft": (self.registry.get_teacher, self.registry.delete_teacher),
            "plan": (self.registry.get_study_plan, self.registry.delete_study_plan),
        }[kind]
        entity_id = Prompt.ask("ID", default="", console=self.console).strip().upper()
        if not entity_id:
            return
        try:
            lookup(entity_id)
        except RegistryError as e:
            self._error(str(e))
            return
        if not Confirm.ask(f"{entity_id} wirklich löschen?", default=False,
                           console=self.console):
            return
        try:
            delete(entity_id)
        except RegistryError as e:
            self._error(str(e))
            return
        self._success(f"{entity_id} gelöscht.")

    # ─── Eingabe-Helfer ───

    def _ask_date(self, label: str, default: str = ""):
        """Fragt ein Datum ab; leer → None, falsches Format → erneute Abfrage."""
        hint = self.config.date_format
        while True:
            text = Prompt.ask(f"{label} ({hint})", default=default,
                              console=self.console).strip()
            if not text:
                return None
            try:
                return parse_date(text, self.config)
            except ValueError:
                self._error("Falsches Datumsformat.")
