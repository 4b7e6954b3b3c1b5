"""
Tests des commandes CLI (classify, scan, apply, library, info, version).

Les commandes sont exécutées de bout en bout avec CliRunner sur un
dossier de série temporaire.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from episort import __version__
from episort.adapters.cli.commands import ActionFilter, StatusFilter
from episort.core.value_objects import Action
from episort.services.library import FolderStatus
from episort.main import app
from tests.fixtures.tvdb_exports import write_tvdb_export

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Neutralise la configuration de l'environnement de test."""
    for name in (
        "EPISORT_RULES_FILE",
        "EPISORT_METADATA_DIRNAME",
        "EPISORT_EXTRACTOR_BACKENDS",
        "EPISORT_LIBRARY_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def series_dir(tmp_path: Path) -> Path:
    """Dossier de série avec export TVDB et fichiers à classer."""
    root = tmp_path / "Show Name"
    write_tvdb_export(root / ".episort")
    (root / "Season 01").mkdir(parents=True)
    (root / "Show.Name.S01E01.mkv").write_bytes(b"1")
    (root / "Season 01" / "Show Name-S01E02.mkv").write_bytes(b"2")
    (root / "junk.nfo").write_bytes(b"nfo")
    (root / "random.bin").write_bytes(b"bin")
    return root


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps({"blacklist_extensions": ["nfo"], "whitelist_tags": ["720p"]}),
        encoding="utf-8",
    )
    return path


# ============================================================================
# Tests ActionFilter
# ============================================================================


class TestActionFilter:
    def test_all_returns_every_action(self) -> None:
        assert ActionFilter.ALL.to_actions() == list(Action.ordered())

    def test_single_action(self) -> None:
        assert ActionFilter.RENAME.to_actions() == [Action.RENAME]

    def test_status_filter(self) -> None:
        assert StatusFilter.ALL.to_statuses() == list(FolderStatus.ordered())
        assert StatusFilter.PENDING.to_statuses() == [FolderStatus.PENDING]


# ============================================================================
# Tests classify
# ============================================================================


class TestClassifyCommand:
    def test_classify_rename(self, series_dir: Path) -> None:
        result = runner.invoke(
            app, ["classify", "Show.Name.S01E01.[720p].mkv", "--folder", str(series_dir)]
        )

        assert result.exit_code == 0
        assert "Rename" in result.output
        assert "S01E01" in result.output
        assert "Season 01/Show Name-S01E01-Pilot.mkv" in result.output

    def test_classify_with_rules_keeps_tags(self, series_dir: Path, rules_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "classify",
                "Show.Name.S01E01.[720p].mkv",
                "-f",
                str(series_dir),
                "--rules",
                str(rules_file),
            ],
        )

        assert result.exit_code == 0
        assert "Show Name-S01E01-Pilot.[720p].mkv" in result.output

    def test_classify_complete(self, series_dir: Path) -> None:
        result = runner.invoke(
            app, ["classify", "Season 01/Show Name-S01E02.mkv", "-f", str(series_dir)]
        )

        assert result.exit_code == 0
        assert "Complete" in result.output
        assert "Destination" not in result.output

    def test_classify_without_metadata_uses_folder_name(self, tmp_path: Path) -> None:
        folder = tmp_path / "Other Show"
        folder.mkdir()

        result = runner.invoke(app, ["classify", "other.show.s02e03.mkv", "-f", str(folder)])

        assert result.exit_code == 0
        assert "Season 02/Other Show-S02E03.mkv" in result.output

    def test_classify_explicit_metadata_dir(self, tmp_path: Path, tvdb_export: Path) -> None:
        result = runner.invoke(
            app,
            ["classify", "x.S01E01.mkv", "-f", str(tmp_path), "--metadata", str(tvdb_export)],
        )

        assert result.exit_code == 0
        assert "Show Name-S01E01-Pilot.mkv" in result.output

    def test_invalid_rules_file_exits_with_error(self, series_dir: Path, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")

        result = runner.invoke(
            app, ["classify", "a.S01E01.mkv", "-f", str(series_dir), "-r", str(bad)]
        )

        assert result.exit_code == 1
        assert "Erreur" in result.output

    def test_missing_metadata_dir_exits_with_error(self, series_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["classify", "a.S01E01.mkv", "-f", str(series_dir), "-m", str(tmp_path / "none")],
        )

        assert result.exit_code == 1
        assert "introuvable" in result.output


# ============================================================================
# Tests scan
# ============================================================================


class TestScanCommand:
    def test_scan_reports_counts(self, series_dir: Path, rules_file: Path) -> None:
        result = runner.invoke(app, ["scan", str(series_dir), "-r", str(rules_file)])

        assert result.exit_code == 0
        for action in Action:
            assert action.value in result.output
        assert "series.json" not in result.output

    def test_scan_filtered_by_action(self, series_dir: Path, rules_file: Path) -> None:
        result = runner.invoke(
            app, ["scan", str(series_dir), "--action", "delete", "-r", str(rules_file)]
        )

        assert result.exit_code == 0
        assert "junk.nfo" in result.output
        assert "random.bin" not in result.output

    def test_scan_missing_folder(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["scan", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "introuvable" in result.output

    def test_scan_warns_about_duplicates(self, series_dir: Path) -> None:
        (series_dir / "Show.Name.S01E02.mkv").write_bytes(b"2 bis")

        result = runner.invoke(app, ["scan", str(series_dir)])

        assert result.exit_code == 0
        assert "S01E02 present 2 fois" in result.output


# ============================================================================
# Tests apply
# ============================================================================


class TestApplyCommand:
    def test_apply_without_fix_is_a_dry_run(self, series_dir: Path) -> None:
        result = runner.invoke(app, ["apply", str(series_dir)])

        assert result.exit_code == 0
        assert "Pour appliquer" in result.output
        assert (series_dir / "Show.Name.S01E01.mkv").exists()

    def test_apply_fix_moves_files(self, series_dir: Path, rules_file: Path) -> None:
        result = runner.invoke(app, ["apply", str(series_dir), "--fix", "-r", str(rules_file)])

        assert result.exit_code == 0
        assert (series_dir / "Season 01" / "Show Name-S01E01-Pilot.mkv").read_bytes() == b"1"
        assert not (series_dir / "Show.Name.S01E01.mkv").exists()
        assert (series_dir / "junk.nfo").exists()
        assert (series_dir / "random.bin").exists()

    def test_apply_fix_delete(self, series_dir: Path, rules_file: Path) -> None:
        result = runner.invoke(
            app, ["apply", str(series_dir), "--fix", "--delete", "-r", str(rules_file)]
        )

        assert result.exit_code == 0
        assert not (series_dir / "junk.nfo").exists()
        assert (series_dir / "random.bin").exists()
        assert (series_dir / ".episort" / "series.json").exists()

    def test_apply_twice_has_nothing_to_do(self, series_dir: Path) -> None:
        runner.invoke(app, ["apply", str(series_dir), "--fix"])

        result = runner.invoke(app, ["apply", str(series_dir), "--fix"])

        assert result.exit_code == 0
        assert "Rien a faire" in result.output

    def test_apply_existing_destination_fails(self, series_dir: Path) -> None:
        target = series_dir / "Season 01" / "Show Name-S01E01-Pilot.mkv"
        target.write_bytes(b"existing")

        result = runner.invoke(app, ["apply", str(series_dir), "--fix"])

        assert result.exit_code == 1
        assert target.read_bytes() == b"existing"
        assert (series_dir / "Show.Name.S01E01.mkv").exists()


# ============================================================================
# Tests library
# ============================================================================


class TestLibraryCommand:
    @pytest.fixture
    def library_root(self, series_dir: Path) -> Path:
        """Bibliothèque contenant series_dir et un dossier vide."""
        (series_dir.parent / "Empty Show").mkdir()
        return series_dir.parent

    def test_library_status_and_progress(self, library_root: Path) -> None:
        result = runner.invoke(app, ["library", str(library_root)])

        assert result.exit_code == 0
        assert "Show Name" in result.output
        assert "Empty Show" in result.output
        assert "Pending" in result.output
        assert "Terminés : 0/2" in result.output

    def test_library_status_filter(self, library_root: Path) -> None:
        result = runner.invoke(app, ["library", str(library_root), "--status", "empty"])

        assert result.exit_code == 0
        assert "Empty Show" in result.output
        assert "Show Name" not in result.output

    def test_library_done_after_apply(self, library_root: Path) -> None:
        runner.invoke(app, ["apply", str(library_root / "Show Name"), "--fix"])

        result = runner.invoke(app, ["library", str(library_root)])

        assert result.exit_code == 0
        assert "Terminés : 1/2" in result.output

    def test_library_defaults_to_configured_dir(
        self, library_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EPISORT_LIBRARY_DIR", str(library_root))

        result = runner.invoke(app, ["library"])

        assert result.exit_code == 0
        assert "Terminés : 0/2" in result.output

    def test_library_missing_root(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["library", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "introuvable" in result.output


# ============================================================================
# Tests info / version / options globales
# ============================================================================


class TestMiscCommands:
    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"Episort v{__version__}" in result.output

    def test_info(self) -> None:
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Regles : aucune" in result.output
        assert ".episort" in result.output
        assert "regex, guessit" in result.output

    @pytest.mark.parametrize("command", ["classify", "scan", "apply"])
    def test_help(self, command: str) -> None:
        result = runner.invoke(app, [command, "--help"])

        assert result.exit_code == 0
        assert "--rules" in result.output
        assert "--metadata" in result.output

    def test_quiet_configures_error_level(self) -> None:
        with patch("episort.main.configure_logging") as configure:
            result = runner.invoke(app, ["-q", "version"])

        assert result.exit_code == 0
        assert configure.call_args.kwargs["log_level"] == "ERROR"

    def test_no_flag_keeps_logging_untouched(self) -> None:
        with patch("episort.main.configure_logging") as configure:
            runner.invoke(app, ["version"])

        configure.assert_not_called()
