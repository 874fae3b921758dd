"""Tests für die Click-CLI und die interaktive Sitzung."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

import main
from config.defaults import default_app_config
from registry.academy import AcademyRegistry
from ui.session import InteractiveSession


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CliRunner in einem leeren Verzeichnis (keine app_config.yaml)."""
    monkeypatch.chdir(tmp_path)
    # Breite Konsole: Tabellenzellen werden nicht umbrochen
    monkeypatch.setattr(main, "console", Console(width=200))
    return CliRunner()


def _run_session(script: str, registry: AcademyRegistry,
                 monkeypatch: pytest.MonkeyPatch) -> str:
    """Führt die Sitzung mit vorgegebenen Eingaben aus und liefert die Ausgabe."""
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    console = Console(width=200, record=True, force_terminal=False)
    InteractiveSession(registry, default_app_config(), console=console).run()
    return console.export_text()


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

class TestCli:
    def test_help(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["--help"], obj={})
        assert result.exit_code == 0
        for command in ("list", "show", "clone", "session", "config"):
            assert command in result.output

    def test_list_plans(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "plans"], obj={})
        assert result.exit_code == 0
        assert "P001" in result.output
        assert "Plan 2024-I" in result.output
        assert "05/02/2024" in result.output

    def test_list_subjects_filtered(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "subjects", "-m", "hybrid"], obj={})
        assert result.exit_code == 0
        assert "Redes de Computadores" in result.output
        assert "Bases de Datos" not in result.output

    def test_list_teachers_text_filter(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "teachers", "--filter", "torres"], obj={})
        assert result.exit_code == 0
        assert "Laura" in result.output
        assert "Andrés" not in result.output

    def test_list_groups(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "groups"], obj={})
        assert result.exit_code == 0
        assert "G004" in result.output
        assert "0/30" in result.output

    def test_list_unknown_kind(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "rooms"], obj={})
        assert result.exit_code != 0

    def test_show_plan(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["show", "p001"], obj={})
        assert result.exit_code == 0
        assert "14 gesamt" in result.output
        assert "Grupo D - Ing. Software" in result.output

    def test_show_unknown_plan(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["show", "P999"], obj={})
        assert result.exit_code == 1
        assert "study plan not found with id: P999" in result.output

    def test_clone(self, runner: CliRunner):
        result = runner.invoke(main.cli, [
            "clone", "P001", "--name", "Plan 2024-II", "--period", "2024-II",
            "--start", "01/08/2024", "--end", "15/12/2024",
        ], obj={})
        assert result.exit_code == 0
        assert "P002" in result.output
        assert "cloned from Plan 2024-I" in result.output
        assert "01/08/2024" in result.output

    def test_clone_uses_config_defaults(self, runner: CliRunner):
        result = runner.invoke(main.cli, [
            "clone", "P001", "--name", "Plan 2025-II", "--period", "2025-II",
        ], obj={})
        assert result.exit_code == 0
        assert "01/08/2025" in result.output

    def test_clone_bad_date(self, runner: CliRunner):
        result = runner.invoke(main.cli, [
            "clone", "P001", "--name", "X", "--period", "Y", "--start", "2024-08-01",
        ], obj={})
        assert result.exit_code == 1
        assert "Datumsformat" in result.output

    def test_clone_unknown_source(self, runner: CliRunner):
        result = runner.invoke(main.cli, [
            "clone", "P404", "--name", "X", "--period", "Y",
        ], obj={})
        assert result.exit_code == 1
        assert "P404" in result.output

    def test_without_sample_data(self, runner: CliRunner):
        Path("config").mkdir()
        Path("config/app_config.yaml").write_text("load_sample_data: false\n",
                                                  encoding="utf-8")
        result = runner.invoke(main.cli, ["list", "plans"], obj={})
        assert result.exit_code == 0
        assert "P001" not in result.output

    @pytest.mark.parametrize("content", ["42\n", "- a\n- b\n"])
    def test_non_mapping_config_file_exits_cleanly(self, runner: CliRunner, content: str):
        """Kein Traceback: Meldung 'ungültig' und Exit-Code 1."""
        Path("config").mkdir()
        Path("config/app_config.yaml").write_text(content, encoding="utf-8")
        result = runner.invoke(main.cli, ["list", "plans"], obj={})
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "ungültig" in result.output

    def test_clone_defaults_in_custom_date_format(self, runner: CliRunner):
        Path("config").mkdir()
        Path("config/app_config.yaml").write_text(
            "date_format: '%Y-%m-%d'\n"
            "clone_defaults:\n"
            "  start_date: '2025-08-01'\n"
            "  end_date: '2025-12-15'\n",
            encoding="utf-8",
        )
        result = runner.invoke(main.cli, [
            "clone", "P001", "--name", "X", "--period", "2025-II",
        ], obj={})
        assert result.exit_code == 0
        assert "2025-08-01" in result.output

    def test_mismatched_clone_defaults_rejected_at_load(self, runner: CliRunner):
        Path("config").mkdir()
        Path("config/app_config.yaml").write_text("date_format: '%Y-%m-%d'\n",
                                                  encoding="utf-8")
        result = runner.invoke(main.cli, ["list", "plans"], obj={})
        assert result.exit_code == 1
        assert "clone_defaults" in result.output

    def test_list_groups_filtered(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "groups", "-f", "redes"], obj={})
        assert result.exit_code == 0
        assert "G003" in result.output
        assert "G001" not in result.output

    def test_list_plans_filtered(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "plans", "--filter", "2099"], obj={})
        assert result.exit_code == 0
        assert "P001" not in result.output

    def test_modality_only_for_subjects(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["list", "plans", "-m", "online"], obj={})
        assert result.exit_code == 2
        assert "list subjects" in result.output

    def test_invalid_config_file_exits(self, runner: CliRunner):
        Path("config").mkdir()
        Path("config/app_config.yaml").write_text("date_format: '%Y'\n",
                                                  encoding="utf-8")
        result = runner.invoke(main.cli, ["list", "plans"], obj={})
        assert result.exit_code == 1


# ─── CONFIG-BEFEHLE ───────────────────────────────────────────────────────────

class TestConfigCommands:
    def test_init_and_show(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["config", "init"], obj={})
        assert result.exit_code == 0
        assert Path("config/app_config.yaml").exists()

        result = runner.invoke(main.cli, ["config", "show"], obj={})
        assert result.exit_code == 0
        assert "app_config.yaml" in result.output
        assert "%d/%m/%Y" in result.output

    def test_show_without_file(self, runner: CliRunner):
        result = runner.invoke(main.cli, ["config", "show"], obj={})
        assert result.exit_code == 0
        assert "Standardwerte" in result.output

    def test_init_does_not_overwrite(self, runner: CliRunner):
        Path("config").mkdir()
        Path("config/app_config.yaml").write_text("institution_name: Eigene\n",
                                                  encoding="utf-8")
        result = runner.invoke(main.cli, ["config", "init"], obj={})
        assert result.exit_code == 0
        assert "--force" in result.output
        assert "Eigene" in Path("config/app_config.yaml").read_text(encoding="utf-8")

        result = runner.invoke(main.cli, ["config", "init", "--force"], obj={})
        assert result.exit_code == 0
        assert "Eigene" not in Path("config/app_config.yaml").read_text(encoding="utf-8")


# ─── INTERAKTIVE SITZUNG ──────────────────────────────────────────────────────

class TestSession:
    def test_exit_immediately(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        output = _run_session("0\n", registry, monkeypatch)
        assert "Studienplan-Verwaltung" in output

    def test_create_subject(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        output = _run_session("5\nCálculo\n4\n\nonline\n0\n", registry, monkeypatch)
        assert "Fach angelegt: A005 Cálculo" in output
        subject = registry.get_subject("A005")
        assert subject.credits == 4
        assert subject.modality.value == "online"

    def test_create_subject_invalid_credits(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        output = _run_session("5\nCálculo\n0\n\n\n0\n", registry, monkeypatch)
        assert "Fach ungültig" in output
        assert len(registry.get_subjects()) == 4

    def test_create_plan_shows_all_errors(self, monkeypatch: pytest.MonkeyPatch):
        """Leerer Name und fehlende Daten → alle Fehler auf einmal, kein Plan."""
        registry = AcademyRegistry.with_sample_data()
        script = "7\n\n2024-II\nIng\n\n\n\n\n\n0\n"
        output = _run_session(script, registry, monkeypatch)
        assert "name is required" in output
        assert "start date is required" in output
        assert "end date is required" in output
        assert "period is required" not in output
        assert len(registry.get_study_plans()) == 1

    def test_create_plan_success(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        script = ("7\nPlan Redes\n2024-II\nTelemática\nhybrid\n"
                  "01/08/2024\n15/12/2024\n\ng001, g003\n0\n")
        output = _run_session(script, registry, monkeypatch)
        assert "Plan angelegt: P002 Plan Redes (2 Gruppen, 7 Credits)" in output
        assert registry.get_study_plan("P002").groups[0] is registry.get_group("G001")

    def test_clone_plan(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        # Quelle und Daten per Default übernehmen
        script = "8\n\nPlan 2025-II\n2025-II\n\n\n0\n"
        output = _run_session(script, registry, monkeypatch)
        assert "Plan geklont: P002 Plan 2025-II" in output
        clone = registry.get_study_plan("P002")
        assert clone.description == "cloned from Plan 2024-I"
        assert clone.start_date.isoformat() == "2025-08-01"

    def test_delete_referenced_subject_shows_error(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        output = _run_session("9\nfach\nA001\ny\n0\n", registry, monkeypatch)
        assert "cannot delete subject A001" in output
        assert len(registry.get_subjects()) == 4

    @pytest.mark.parametrize("kind, entity_id, message", [
        ("fach", "A999", "subject not found with id: A999"),
        ("lehrkraft", "D999", "teacher not found with id: D999"),
        ("plan", "P999", "study plan not found with id: P999"),
    ])
    def test_delete_unknown_id_reports_error(self, monkeypatch: pytest.MonkeyPatch,
                                             kind: str, entity_id: str, message: str):
        """Unbekannte ID → Fehlermeldung statt Erfolg, keine Rückfrage."""
        registry = AcademyRegistry.with_sample_data()
        output = _run_session(f"9\n{kind}\n{entity_id}\n0\n", registry, monkeypatch)
        assert message in output
        assert f"{entity_id} gelöscht" not in output
        assert "wirklich löschen" not in output

    def test_delete_plan(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        output = _run_session("9\nplan\nP001\ny\n0\n", registry, monkeypatch)
        assert "P001 gelöscht." in output
        assert registry.get_study_plans() == []

    def test_invalid_choice(self, monkeypatch: pytest.MonkeyPatch):
        registry = AcademyRegistry.with_sample_data()
        output = _run_session("42\n0\n", registry, monkeypatch)
        assert "Ungültige Auswahl" in output
