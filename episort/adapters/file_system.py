"""
Adaptateur pour les opérations sur le système de fichiers.

Implémentation concrète de IFileSystem pour les opérations fichiers réelles.
"""

import os
import shutil
import uuid
from pathlib import Path
from typing import Iterator

from loguru import logger

from episort.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implémentation de IFileSystem pour le système de fichiers réel.

    Fournit le listage d'un dossier de série et les opérations de
    déplacement/suppression utilisées par l'exécuteur d'intentions.
    """

    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        return path.exists()

    def list_files(self, root: Path) -> Iterator[Path]:
        """
        Liste les fichiers sous root, relatifs à root, dans un ordre stable.

        Les liens symboliques vers des répertoires ne sont pas suivis.
        """
        if not root.is_dir():
            return
        for path in sorted(root.rglob("*")):
            if path.is_file():
                yield path.relative_to(root)

    def list_dirs(self, root: Path) -> Iterator[Path]:
        """Sous-dossiers directs de root, hors dossiers cachés, triés par nom."""
        if not root.is_dir():
            return
        for path in sorted(root.iterdir()):
            if path.is_dir() and not path.name.startswith("."):
                yield path

    def move(self, source: Path, destination: Path) -> bool:
        """
        Déplace un fichier de manière atomique.

        Utilise os.replace pour un déplacement atomique sur le même filesystem.
        Pour un déplacement cross-filesystem, utilise une copie intermédiaire
        avec un fichier temporaire.

        Args:
            source: Chemin du fichier source
            destination: Chemin de destination

        Returns:
            True si le déplacement a réussi, False sinon.
        """
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)

            try:
                os.replace(source, destination)
            except OSError:
                # Cross-filesystem: copie intermédiaire avec fichier temporaire
                temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{destination.name}")
                try:
                    shutil.copy2(source, temp)
                    os.replace(temp, destination)
                    source.unlink()
                except Exception:
                    if temp.exists():
                        temp.unlink()
                    raise

            return True
        except (OSError, shutil.Error) as e:
            logger.warning(f"Deplacement impossible {source} -> {destination}: {e}")
            return False

    def delete(self, path: Path) -> bool:
        """Supprime un fichier."""
        try:
            path.unlink()
            return True
        except OSError as e:
            logger.warning(f"Suppression impossible {path}: {e}")
            return False
