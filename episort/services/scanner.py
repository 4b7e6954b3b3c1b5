"""
Service de scan d'un dossier de série.

Classe chaque fichier du dossier (chemins relatifs à la racine de la série)
et regroupe les résultats par action pour l'affichage et l'exécution.
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from episort.core.ports.file_system import IFileSystem
from episort.core.value_objects.episode import EpisodeKey
from episort.core.value_objects.file_intent import Action, FileIntent
from episort.services.intent_planner import IntentPlannerService


@dataclass(frozen=True)
class ScannedFile:
    """
    Fichier classé lors du scan.

    Attributs:
        path: Chemin relatif à la racine de la série
        intent: Décision de classification
    """

    path: Path
    intent: FileIntent

    @property
    def action(self) -> Action:
        return self.intent.action


@dataclass
class FolderScanResult:
    """
    Résultat du scan d'un dossier de série.

    Attributs:
        root: Racine du dossier scanné
        files: Fichiers classés, dans l'ordre du listage
    """

    root: Path
    files: list[ScannedFile] = field(default_factory=list)

    @property
    def action_counts(self) -> Counter:
        """Nombre de fichiers par action (toutes les actions présentes)."""
        counts = Counter({action: 0 for action in Action})
        counts.update(scanned.action for scanned in self.files)
        return counts

    def by_action(self, action: Action) -> list[ScannedFile]:
        """Fichiers ayant l'action donnée."""
        return [scanned for scanned in self.files if scanned.action is action]

    def by_episode(self, key: EpisodeKey) -> list[ScannedFile]:
        """Fichiers reconnus comme l'épisode donne."""
        return [scanned for scanned in self.files if scanned.intent.descriptor == key]

    def duplicate_episodes(self) -> dict[EpisodeKey, list[ScannedFile]]:
        """Épisodes reconnus dans plusieurs fichiers."""
        groups: dict[EpisodeKey, list[ScannedFile]] = defaultdict(list)
        for scanned in self.files:
            if scanned.intent.descriptor is not None:
                groups[scanned.intent.descriptor].append(scanned)
        return {key: group for key, group in groups.items() if len(group) > 1}

    def conflicting_destinations(self) -> dict[str, list[ScannedFile]]:
        """Destinations RENAME visées par plusieurs fichiers."""
        groups: dict[str, list[ScannedFile]] = defaultdict(list)
        for scanned in self.by_action(Action.RENAME):
            groups[scanned.intent.dest].append(scanned)
        return {dest: group for dest, group in groups.items() if len(group) > 1}


class FolderScanService:
    """
    Service orchestrant le scan d'un dossier de série.

    Coordonne:
    - Le système de fichiers (IFileSystem) pour lister les fichiers
    - Le planificateur (IntentPlannerService) pour classer chaque fichier
    """

    def __init__(
        self,
        file_system: IFileSystem,
        planner: IntentPlannerService,
        excluded_dirs: frozenset[str] = frozenset(),
    ) -> None:
        """
        Args:
            file_system: Implémentation de IFileSystem pour le listage
            planner: Service de classification
            excluded_dirs: Dossiers de premier niveau non scannés (ex: ".episort")
        """
        self._file_system = file_system
        self._planner = planner
        self._excluded_dirs = excluded_dirs

    def scan(self, root: Path) -> FolderScanResult:
        """
        Classe tous les fichiers sous root.

        Args:
            root: Dossier racine de la série

        Returns:
            FolderScanResult avec une entrée par fichier
        """
        relative_paths = [
            path
            for path in self._file_system.list_files(root)
            if not (len(path.parts) > 1 and path.parts[0] in self._excluded_dirs)
        ]
        classified = self._planner.classify_many(relative_paths)

        result = FolderScanResult(
            root=root,
            files=[
                ScannedFile(path=Path(path), intent=intent)
                for path, intent in classified
            ],
        )

        for scanned in result.files:
            logger.debug(f"{scanned.path}: {scanned.action.value}")

        counts = result.action_counts
        summary = ", ".join(f"{action.value}={counts[action]}" for action in Action.ordered())
        logger.info(f"Scan de {root}: {len(result.files)} fichiers ({summary})")
        return result
