"""
Service d'application des intentions.

Execute les déplacements (RENAME) et, sur demande, les suppressions
(DELETE) d'un scan. Les fichiers WHITELIST, IGNORE et COMPLETE ne sont
jamais modifiés. Une destination existante n'est jamais écrasée.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from episort.core.ports.file_system import IFileSystem
from episort.core.value_objects.file_intent import Action
from episort.services.scanner import FolderScanResult, ScannedFile


@dataclass
class ExecutionReport:
    """
    Bilan de l'application d'un scan.

    Attributs:
        renamed: Couples (source, destination) déplacés
        deleted: Fichiers supprimés
        failed: Couples (fichier, raison) en échec
    """

    renamed: list[tuple[Path, Path]] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed


class IntentExecutorService:
    """Applique les intentions RENAME et DELETE sur le système de fichiers."""

    def __init__(self, file_system: IFileSystem) -> None:
        self._file_system = file_system

    def execute(
        self,
        scan: FolderScanResult,
        include_delete: bool = False,
        progress_callback: Optional[Callable[[ScannedFile], None]] = None,
    ) -> ExecutionReport:
        """
        Applique les intentions d'un scan.

        Args:
            scan: Résultat du scan (chemins relatifs à scan.root)
            include_delete: Supprimer aussi les fichiers DELETE
            progress_callback: Appelé après chaque fichier traité

        Returns:
            ExecutionReport détaillant les opérations
        """
        report = ExecutionReport()

        for scanned in scan.by_action(Action.RENAME):
            self._rename(scan.root, scanned, report)
            if progress_callback:
                progress_callback(scanned)

        if include_delete:
            for scanned in scan.by_action(Action.DELETE):
                self._delete(scan.root, scanned, report)
                if progress_callback:
                    progress_callback(scanned)

        logger.info(
            f"Execution terminee: {len(report.renamed)} renommes, "
            f"{len(report.deleted)} supprimes, {len(report.failed)} echecs"
        )
        return report

    def _rename(self, root: Path, scanned: ScannedFile, report: ExecutionReport) -> None:
        source = root / scanned.path
        destination = root / scanned.intent.dest

        if self._file_system.exists(destination):
            report.failed.append((scanned.path, f"destination existante: {scanned.intent.dest}"))
            return

        if self._file_system.move(source, destination):
            logger.info(f"Renomme: {scanned.path} -> {scanned.intent.dest}")
            report.renamed.append((scanned.path, Path(scanned.intent.dest)))
        else:
            report.failed.append((scanned.path, "deplacement impossible"))

    def _delete(self, root: Path, scanned: ScannedFile, report: ExecutionReport) -> None:
        if self._file_system.delete(root / scanned.path):
            logger.info(f"Supprime: {scanned.path}")
            report.deleted.append(scanned.path)
        else:
            report.failed.append((scanned.path, "suppression impossible"))
