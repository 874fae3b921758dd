"""Rich-Tabellen für die Terminal-Anzeige der Registry-Inhalte.

Wird von den CLI-Befehlen (``list``, ``show``, ``clone``) und der
interaktiven Sitzung verwendet. Die Funktionen lesen nur; sie verändern
keine Entitäten.
"""

from typing import Iterable, Optional

from rich import box
from rich.table import Table

from models.group import Group
from models.study_plan import StudyPlan
from models.subject import Subject
from models.teacher import Teacher


def subjects_table(subjects: Iterable[Subject]) -> Table:
    table = Table(title="Fächer", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Credits", justify="right")
    table.add_column("Modalität")
    table.add_column("Beschreibung")
    for s in subjects:
        table.add_row(s.id or "—", s.name, str(s.credits), s.modality.label, s.description)
    return table


def teachers_table(teachers: Iterable[Teacher]) -> Table:
    table = Table(title="Lehrkräfte", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Vorname")
    table.add_column("Nachname")
    table.add_column("Fachgebiet")
    table.add_column("E-Mail")
    table.add_column("Telefon")
    for t in teachers:
        table.add_row(t.id or "—", t.first_name, t.last_name, t.specialty, t.email, t.phone)
    return table


def groups_table(groups: Iterable[Group], title: str = "Gruppen") -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Gruppe")
    table.add_column("Fach")
    table.add_column("Credits", justify="right")
    table.add_column("Lehrkraft")
    table.add_column("Termin")
    table.add_column("Plätze", justify="right")
    for g in groups:
        table.add_row(
            g.id or "—",
            g.name,
            g.subject.name,
            f"{g.subject.credits} cr.",
            g.teacher.full_name,
            str(g.schedule),
            f"{g.occupied_slots}/{g.max_slots}",
        )
    return table


def plans_table(plans: Iterable[StudyPlan], date_format: str = "%d/%m/%Y") -> Table:
    table = Table(title="Studienpläne", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Periode")
    table.add_column("Studiengang")
    table.add_column("Modalität")
    table.add_column("Zeitraum")
    table.add_column("Gruppen", justify="right")
    table.add_column("Credits", justify="right")
    for p in plans:
        table.add_row(
            p.id or "—",
            p.name,
            p.period,
            p.program,
            p.modality.label,
            f"{p.start_date.strftime(date_format)} – {p.end_date.strftime(date_format)}",
            str(len(p.groups)),
            str(p.total_credits),
        )
    return table


def plan_groups_table(plan: StudyPlan) -> Table:
    """Gruppen eines einzelnen Plans (Detailansicht)."""
    return groups_table(
        plan.groups, title=f"Gruppen des Plans: {plan.name} ({plan.period})"
    )


def plan_summary_lines(plan: Optional[StudyPlan]) -> list[str]:
    """Zusammenfassung eines Quell-Plans, wie sie vor dem Klonen angezeigt wird."""
    if plan is None:
        return ["Keine Pläne vorhanden."]
    lines = [
        f"Name:        {plan.name}",
        f"Periode:     {plan.period}",
        f"Studiengang: {plan.program}",
        f"Modalität:   {plan.modality.label}",
        f"Credits:     {plan.total_credits} gesamt",
        f"Gruppen:     {len(plan.groups)}",
    ]
    if plan.groups:
        lines.append("─" * 42)
        lines.extend(f"  • {g.name} — {g.subject.name}" for g in plan.groups)
    return lines
