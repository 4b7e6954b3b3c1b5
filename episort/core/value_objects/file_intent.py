"""
Objets valeur pour le résultat de classification d'un fichier.

Chaque fichier classé produit exactement un FileIntent portant l'une
des cinq actions. Seule l'action RENAME transporte une destination.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from episort.core.value_objects.episode import EpisodeKey


class Action(Enum):
    """Action décidée pour un fichier.

    Valeurs:
        RENAME: Épisode reconnu, à déplacer vers son chemin canonique
        COMPLETE: Épisode reconnu, déjà à son emplacement canonique
        IGNORE: Nom non reconnu, aucune action automatique
        DELETE: Chemin inutilisable ou extension en liste noire
        WHITELIST: Fichier protégé par une règle de liste blanche
    """

    RENAME = "Rename"
    COMPLETE = "Complete"
    IGNORE = "Ignore"
    DELETE = "Delete"
    WHITELIST = "Whitelist"

    @classmethod
    def ordered(cls) -> Iterator["Action"]:
        """Ordre d'affichage des groupes dans les rapports."""
        return iter(
            (cls.RENAME, cls.DELETE, cls.IGNORE, cls.WHITELIST, cls.COMPLETE)
        )


@dataclass(frozen=True)
class FileIntent:
    """
    Décision de classification pour un fichier.

    Utiliser les constructeurs (rename, complete, ignore, delete, whitelist)
    plutôt que le constructeur brut : ils garantissent qu'une destination
    n'est présente que pour RENAME.

    Attributs:
        action: Action décidée
        descriptor: Clé de l'épisode si un descripteur a été extrait
        dest: Chemin de destination (vide sauf pour RENAME)
    """

    action: Action
    descriptor: Optional[EpisodeKey] = None
    dest: str = ""

    def __post_init__(self) -> None:
        if self.action is Action.RENAME and not self.dest:
            raise ValueError("Une intention RENAME requiert une destination")
        if self.action is not Action.RENAME and self.dest:
            raise ValueError(f"Une intention {self.action.value} n'a pas de destination")

    @classmethod
    def rename(cls, dest: str, descriptor: EpisodeKey) -> "FileIntent":
        return cls(action=Action.RENAME, descriptor=descriptor, dest=dest)

    @classmethod
    def complete(cls, descriptor: EpisodeKey) -> "FileIntent":
        return cls(action=Action.COMPLETE, descriptor=descriptor)

    @classmethod
    def ignore(cls) -> "FileIntent":
        return cls(action=Action.IGNORE)

    @classmethod
    def delete(cls) -> "FileIntent":
        return cls(action=Action.DELETE)

    @classmethod
    def whitelist(cls) -> "FileIntent":
        return cls(action=Action.WHITELIST)
