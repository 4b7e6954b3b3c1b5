"""
Interface port pour le système de fichiers.

Définit les opérations nécessaires au scan d'un dossier de série
et à l'application des intentions (déplacement, suppression).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Les opérations de modification retournent un booléen plutôt que
    de lever une exception : un échec ne concerne qu'un seul fichier.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def list_files(self, root: Path) -> Iterator[Path]:
        """
        Liste récursivement les fichiers d'un dossier.

        Args :
            root : Dossier racine de la série

        Retourne :
            Les chemins relatifs à root, triés
        """
        ...

    @abstractmethod
    def list_dirs(self, root: Path) -> Iterator[Path]:
        """
        Liste les sous-dossiers directs d'un dossier (un par série).

        Retourne :
            Les chemins des sous-dossiers non cachés, triés
        """
        ...

    @abstractmethod
    def move(self, source: Path, destination: Path) -> bool:
        """
        Déplace un fichier de la source vers la destination.

        Crée les répertoires parents si nécessaire.

        Retourne :
            True si réussi, False sinon
        """
        ...

    @abstractmethod
    def delete(self, path: Path) -> bool:
        """
        Supprime un fichier.

        Retourne :
            True si supprimé, False sinon
        """
        ...
