"""
Objet valeur pour les règles de filtrage.

Les quatre ensembles sont indépendants. Ils sont chargés une fois par
exécution (fichier JSON) et partagés entre toutes les classifications.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class FilterRules:
    """
    Règles de liste noire / liste blanche appliquées avant toute recherche
    de métadonnées.

    Attributs:
        blacklist_extensions: Extensions (sans le point, sensibles à la casse)
                              dont les fichiers sont à supprimer
        whitelist_folders: Noms de dossiers protégeant tout leur contenu
        whitelist_filenames: Noms de fichiers exacts protégés
        whitelist_tags: Tags conservés dans les noms générés
    """

    blacklist_extensions: frozenset[str] = frozenset()
    whitelist_folders: frozenset[str] = frozenset()
    whitelist_filenames: frozenset[str] = frozenset()
    whitelist_tags: frozenset[str] = frozenset()

    @classmethod
    def from_iterables(
        cls,
        blacklist_extensions: Iterable[str] = (),
        whitelist_folders: Iterable[str] = (),
        whitelist_filenames: Iterable[str] = (),
        whitelist_tags: Iterable[str] = (),
    ) -> "FilterRules":
        """Construit des règles depuis des listes quelconques (ex: JSON)."""
        return cls(
            blacklist_extensions=frozenset(blacklist_extensions),
            whitelist_folders=frozenset(whitelist_folders),
            whitelist_filenames=frozenset(whitelist_filenames),
            whitelist_tags=frozenset(whitelist_tags),
        )
