"""
Service de scan d'une bibliothèque de séries.

Une bibliothèque est un dossier dont chaque sous-dossier est une série,
avec son propre export de métadonnées. Chaque série reçoit un statut
dérivé de son scan, et la bibliothèque un compte de séries terminées.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, Iterator, Optional

from loguru import logger

from episort.adapters.metadata.loader import load_folder_snapshot
from episort.core.exceptions import MetadataLoadError
from episort.core.ports.file_system import IFileSystem
from episort.core.ports.metadata import IMetadataCache
from episort.core.ports.parser import IDescriptorExtractor
from episort.core.value_objects.file_intent import Action
from episort.core.value_objects.filter_rules import FilterRules
from episort.services.intent_planner import IntentPlannerService
from episort.services.scanner import FolderScanResult, FolderScanService


class FolderStatus(Enum):
    """Statut d'un dossier de série.

    Valeurs:
        UNKNOWN: Métadonnées illisibles, dossier non classé
        EMPTY: Aucun fichier
        PENDING: Il reste des fichiers à renommer ou à supprimer
        DONE: Rien à faire
    """

    UNKNOWN = "Unknown"
    EMPTY = "Empty"
    PENDING = "Pending"
    DONE = "Done"

    @classmethod
    def ordered(cls) -> Iterator["FolderStatus"]:
        return iter((cls.UNKNOWN, cls.EMPTY, cls.PENDING, cls.DONE))


def folder_status(scan: FolderScanResult) -> FolderStatus:
    """Statut d'un dossier d'après les actions de son scan."""
    if not scan.files:
        return FolderStatus.EMPTY
    counts = scan.action_counts
    if counts[Action.RENAME] or counts[Action.DELETE]:
        return FolderStatus.PENDING
    return FolderStatus.DONE


@dataclass(frozen=True)
class LibraryFolder:
    """
    Dossier de série et son dernier scan.

    Attributs:
        path: Chemin du dossier
        status: Statut dérivé du scan
        scan: Résultat du scan (None si les métadonnées sont illisibles)
        error: Cause du statut UNKNOWN
    """

    path: Path
    status: FolderStatus
    scan: Optional[FolderScanResult] = None
    error: Optional[str] = None

    @property
    def pending_count(self) -> int:
        """Nombre de fichiers à renommer ou à supprimer."""
        if self.scan is None:
            return 0
        counts = self.scan.action_counts
        return counts[Action.RENAME] + counts[Action.DELETE]


@dataclass
class LibraryScanResult:
    """Résultat du scan de tous les dossiers d'une bibliothèque."""

    root: Path
    folders: list[LibraryFolder] = field(default_factory=list)

    @property
    def status_counts(self) -> Counter:
        counts = Counter({status: 0 for status in FolderStatus})
        counts.update(folder.status for folder in self.folders)
        return counts

    @property
    def done_count(self) -> int:
        return self.status_counts[FolderStatus.DONE]

    @property
    def total(self) -> int:
        return len(self.folders)

    def by_status(self, status: FolderStatus) -> list[LibraryFolder]:
        return [folder for folder in self.folders if folder.status is status]


class LibraryScanService:
    """
    Scanne chaque dossier de série d'une bibliothèque.

    Chaque dossier est classé avec son propre instantané de métadonnées ;
    les règles et l'extracteur sont communs à toute la bibliothèque.
    """

    def __init__(
        self,
        file_system: IFileSystem,
        rules: FilterRules,
        extractor: IDescriptorExtractor,
        metadata_dirname: str = ".episort",
        snapshot_loader: Optional[Callable[[Path], IMetadataCache]] = None,
    ) -> None:
        """
        Args:
            file_system: Listage des dossiers et des fichiers
            rules: Règles de filtrage communes
            extractor: Analyseur de noms de fichiers
            metadata_dirname: Sous-dossier de l'export, exclu des scans
            snapshot_loader: Chargement du cache d'un dossier
                (défaut: load_folder_snapshot)
        """
        self._file_system = file_system
        self._rules = rules
        self._extractor = extractor
        self._excluded_dirs = frozenset({metadata_dirname})
        self._snapshot_loader = snapshot_loader or partial(
            load_folder_snapshot, metadata_dirname=metadata_dirname
        )

    def scan_folder(self, folder: Path) -> LibraryFolder:
        """Recharge les métadonnées d'un dossier et le reclasse."""
        try:
            cache = self._snapshot_loader(folder)
        except MetadataLoadError as e:
            logger.warning(f"{folder.name}: métadonnées illisibles ({e})")
            return LibraryFolder(path=folder, status=FolderStatus.UNKNOWN, error=str(e))

        planner = IntentPlannerService(self._rules, self._extractor, lambda: cache)
        scan = FolderScanService(self._file_system, planner, self._excluded_dirs).scan(folder)
        return LibraryFolder(path=folder, status=folder_status(scan), scan=scan)

    def scan(self, root: Path) -> LibraryScanResult:
        """
        Reclasse tous les dossiers de série sous root.

        Args:
            root: Dossier de la bibliothèque

        Returns:
            LibraryScanResult avec un LibraryFolder par sous-dossier
        """
        result = LibraryScanResult(
            root=root,
            folders=[self.scan_folder(folder) for folder in self._file_system.list_dirs(root)],
        )
        logger.info(f"Bibliothèque {root}: {result.done_count}/{result.total} dossiers terminés")
        return result
