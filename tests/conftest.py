"""
Fixtures pytest partagées pour les tests Episort.

Ce module contient les fixtures communes utilisées dans les tests:
- Règles de filtrage (vides et typiques)
- Instantané de métadonnées d'une série
- Mocks des interfaces (IFileSystem)
- Export TVDB sur disque dans un dossier temporaire
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from episort.adapters.metadata.snapshot import MetadataSnapshot
from episort.adapters.parsing.regex_extractor import RegexDescriptorExtractor
from episort.core.entities.media import Episode, Series
from episort.core.ports.file_system import IFileSystem
from episort.core.value_objects import FilterRules
from tests.fixtures.tvdb_exports import write_tvdb_export


@pytest.fixture
def empty_rules() -> FilterRules:
    """Règles sans aucune entrée."""
    return FilterRules()


@pytest.fixture
def rules() -> FilterRules:
    """Règles typiques d'un dossier de série."""
    return FilterRules.from_iterables(
        blacklist_extensions=["tmp", "nfo", "txt"],
        whitelist_folders=["Extras"],
        whitelist_filenames=["poster.jpg", "notes.md"],
        whitelist_tags=["720p", "1080p"],
    )


@pytest.fixture
def snapshot() -> MetadataSnapshot:
    """Série "Show Name" avec quelques titres connus."""
    return MetadataSnapshot.build(
        Series(name="Show Name", tvdb_id=1234),
        [
            Episode(season_number=1, episode_number=1, title="Pilot"),
            Episode(season_number=1, episode_number=2, title=None),
            Episode(season_number=1, episode_number=3, title="What: Now?"),
            Episode(season_number=2, episode_number=1, title="TBA"),
            Episode(season_number=4, episode_number=7, title="The [Big] One"),
        ],
    )


@pytest.fixture
def untitled_snapshot() -> MetadataSnapshot:
    """Série "Show Name" sans aucun épisode connu."""
    return MetadataSnapshot.empty("Show Name")


@pytest.fixture
def regex_extractor() -> RegexDescriptorExtractor:
    """Extracteur par expressions régulières (sans guessit)."""
    return RegexDescriptorExtractor()


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Les valeurs de retour doivent être configurées dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.list_files.return_value = iter(())
    mock.list_dirs.return_value = iter(())
    mock.move.return_value = True
    mock.delete.return_value = True
    return mock


@pytest.fixture
def tvdb_export(tmp_path: Path) -> Path:
    """Export TVDB de "Show Name" dans un dossier temporaire."""
    return write_tvdb_export(tmp_path / "metadata")
