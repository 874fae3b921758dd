"""Studienplan-Verwaltung — Haupt-CLI.

Verwendung:
  python main.py list subjects|teachers|groups|plans   Bestand anzeigen
  python main.py show <plan-id>                        Plan mit Gruppen anzeigen
  python main.py clone <plan-id> --name ... --period ... --start ... --end ...
                                                       Plan klonen (Prototype)
  python main.py session                               Interaktive Sitzung
  python main.py config init                           Standard-Konfiguration anlegen
  python main.py config show                           Konfiguration anzeigen

Es gibt keine Persistenz: jeder Aufruf startet mit einer frischen Registry
(mit Beispieldaten, sofern konfiguriert).
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config():
    """Lädt die Konfiguration; ohne Datei gelten die Standardwerte."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_registry(config):
    from registry.academy import AcademyRegistry
    if config.load_sample_data:
        return AcademyRegistry.with_sample_data()
    return AcademyRegistry()


# ─── LIST ─────────────────────────────────────────────────────────────────────

@click.command("list")
@click.argument("kind", type=click.Choice(["subjects", "teachers", "groups", "plans"]))
@click.option("--filter", "-f", "text", default="", help="Freitext-Filter (Name, Fachgebiet, Periode ...).")
@click.option("--modality", "-m", type=click.Choice(["in_person", "online", "hybrid"]),
              default=None, help="Nur Fächer dieser Modalität.")
@click.pass_context
def cmd_list(ctx, kind: str, text: str, modality):
    """Zeigt den Bestand einer Entitätsart als Tabelle."""
    from models.subject import Modality
    from ui.tables import groups_table, plans_table, subjects_table, teachers_table

    if modality and kind != "subjects":
        raise click.UsageError("--modality gilt nur für 'list subjects'.")

    config = ctx.obj["config"]
    registry = ctx.obj["registry"]
    if kind == "subjects":
        subjects = registry.find_subjects(
            text=text, modality=Modality(modality) if modality else None
        )
        console.print(subjects_table(subjects))
    elif kind == "teachers":
        console.print(teachers_table(registry.find_teachers(text=text)))
    elif kind == "groups":
        console.print(groups_table(registry.find_groups(text=text)))
    else:
        console.print(plans_table(registry.find_study_plans(text=text), config.date_format))


# ─── SHOW ─────────────────────────────────────────────────────────────────────

@click.command("show")
@click.argument("plan_id")
@click.pass_context
def cmd_show(ctx, plan_id: str):
    """Zeigt einen Studienplan mit allen Gruppen und Credits."""
    from registry.errors import NotFoundError
    from ui.tables import plan_groups_table, plan_summary_lines

    registry = ctx.obj["registry"]
    try:
        plan = registry.get_study_plan(plan_id.upper())
    except NotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    console.print(Panel("\n".join(plan_summary_lines(plan)),
                        title=f"{plan.id} — {plan.name}", border_style="cyan"))
    console.print(plan_groups_table(plan))


# ─── CLONE ────────────────────────────────────────────────────────────────────

@click.command("clone")
@click.argument("source_id")
@click.option("--name", required=True, help="Name des neuen Plans.")
@click.option("--period", required=True, help="Periode des neuen Plans (z.B. 2024-II).")
@click.option("--start", "start_text", default=None,
              help="Beginn im konfigurierten Datumsformat (Default aus Config).")
@click.option("--end", "end_text", default=None,
              help="Ende im konfigurierten Datumsformat (Default aus Config).")
@click.pass_context
def cmd_clone(ctx, source_id: str, name: str, period: str, start_text, end_text):
    """Klont einen Plan (tiefe Kopie) für eine neue Periode."""
    from config.manager import parse_date
    from registry.errors import NotFoundError
    from ui.tables import plan_groups_table, plans_table

    config = ctx.obj["config"]
    registry = ctx.obj["registry"]
    try:
        start = parse_date(start_text or config.clone_defaults.start_date, config)
        end = parse_date(end_text or config.clone_defaults.end_date, config)
    except ValueError:
        console.print(f"[red]Falsches Datumsformat. Erwartet: {config.date_format}[/red]")
        sys.exit(1)

    try:
        clone = registry.clone_study_plan(source_id.upper(), name, period, start, end)
    except NotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Plan geklont: {clone.id} ({clone.description})")
    console.print(plans_table(registry.get_study_plans(), config.date_format))
    console.print(plan_groups_table(clone))


# ─── SESSION ──────────────────────────────────────────────────────────────────

@click.command("session")
@click.pass_context
def cmd_session(ctx):
    """Startet die interaktive Sitzung (Anlegen, Klonen, Löschen)."""
    from ui.session import InteractiveSession
    InteractiveSession(ctx.obj["registry"], ctx.obj["config"], console=console).run()
    console.print(f"\n[dim]{ctx.obj['registry'].summary()}[/dim]")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx):
    """Zeigt die aktuelle Konfiguration an."""
    from config.manager import ConfigManager
    config = ctx.obj["config"]
    source = "Standardwerte" if ConfigManager().first_run_check() else str(ConfigManager.DEFAULT_CONFIG)

    table = Table(title=f"Konfiguration ({source})", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("institution_name", config.institution_name)
    table.add_row("load_sample_data", str(config.load_sample_data))
    table.add_row("date_format", config.date_format)
    table.add_row("log_level", config.log_level.value)
    table.add_row("clone_defaults.start_date", config.clone_defaults.start_date)
    table.add_row("clone_defaults.end_date", config.clone_defaults.end_date)
    console.print(table)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False, help="Bestehende Datei überschreiben.")
def config_init(force: bool):
    """Legt die Standard-Konfiguration als YAML an."""
    from config.defaults import default_app_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        return
    mgr.save(default_app_config())


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug-Logging aktivieren.")
@click.pass_context
def cli(ctx, verbose: bool):
    """Studienplan-Verwaltung: Fächer, Lehrkräfte, Gruppen und Studienpläne.

    Starten Sie mit: python main.py session
    """
    config = _load_config()
    _setup_logging("DEBUG" if verbose else config.log_level.value)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["registry"] = _build_registry(config)


def main():
    """Einstiegspunkt."""
    cli(obj={})


# Befehle registrieren
cli.add_command(cmd_list)
cli.add_command(cmd_show)
cli.add_command(cmd_clone)
cli.add_command(cmd_session)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
