"""
Interface port pour l'accès en lecture au cache de métadonnées.

Le cache est rempli en dehors de l'application (export TVDB).
Le moteur de classification ne fait que des lectures pures.
"""

from abc import ABC, abstractmethod
from typing import Optional

from episort.core.value_objects.episode import EpisodeKey


class IMetadataCache(ABC):
    """
    Interface de lecture du cache de métadonnées d'une série.

    Les implémentations doivent supporter des lectures concurrentes
    sans verrou.
    """

    @abstractmethod
    def lookup_episode_title(self, key: EpisodeKey) -> Optional[str]:
        """
        Recherche le titre d'un épisode.

        Args:
            key: Couple (saison, épisode)

        Retourne:
            Le titre brut, ou None si l'épisode est inconnu ou sans titre.
        """
        ...

    @abstractmethod
    def series_name(self) -> str:
        """Retourne le nom brut de la série."""
        ...
