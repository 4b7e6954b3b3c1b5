"""
Cache de métadonnées immutable et son point d'échange.

Un MetadataSnapshot n'est jamais modifié après construction : plusieurs
classifications peuvent le lire en parallèle sans verrou. Rafraîchir les
métadonnées consiste à construire un nouvel instantané puis à l'échanger
dans le MetadataCacheHolder ; les classifications en cours conservent
l'instantané qu'elles ont déjà obtenu.
"""

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from episort.core.entities.media import Episode, Series
from episort.core.ports.metadata import IMetadataCache
from episort.core.value_objects.episode import EpisodeKey


@dataclass(frozen=True, eq=False)
class MetadataSnapshot(IMetadataCache):
    """
    Instantané en lecture seule des métadonnées d'une série.

    Attributes:
        series: Série décrite par ce cache
        episodes: Épisodes connus, dans l'ordre de l'export
        episode_index: Clé (saison, épisode) -> indice dans episodes

    Example:
        snapshot = MetadataSnapshot.build(Series(name="Lost"), episodes)
        snapshot.lookup_episode_title(EpisodeKey(1, 1))
    """

    series: Series
    episodes: tuple[Episode, ...] = ()
    episode_index: Mapping[EpisodeKey, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(cls, series: Series, episodes: Iterable[Episode]) -> "MetadataSnapshot":
        """
        Construit un instantané et son index.

        Si plusieurs épisodes partagent la même clé, le premier est retenu.
        """
        episodes = tuple(episodes)
        index: dict[EpisodeKey, int] = {}
        for position, episode in enumerate(episodes):
            key = EpisodeKey(season=episode.season_number, episode=episode.episode_number)
            index.setdefault(key, position)
        return cls(series=series, episodes=episodes, episode_index=MappingProxyType(index))

    @classmethod
    def empty(cls, series_name: str = "") -> "MetadataSnapshot":
        """Instantané sans épisode (aucun titre ne sera trouvé)."""
        return cls.build(Series(name=series_name), ())

    def lookup_episode_title(self, key: EpisodeKey) -> Optional[str]:
        position = self.episode_index.get(key)
        if position is None:
            return None
        return self.episodes[position].title

    def series_name(self) -> str:
        return self.series.name


class MetadataCacheHolder:
    """
    Référence partagée vers l'instantané courant.

    Les lecteurs appellent current() une fois par classification ;
    swap() remplace la référence de manière atomique.
    """

    def __init__(self, snapshot: MetadataSnapshot) -> None:
        self._snapshot = snapshot
        self._swap_lock = threading.Lock()

    def current(self) -> MetadataSnapshot:
        """Retourne l'instantané courant."""
        return self._snapshot

    def swap(self, snapshot: MetadataSnapshot) -> MetadataSnapshot:
        """
        Installe un nouvel instantané.

        Args:
            snapshot: Nouvel instantané complet

        Returns:
            L'instantané remplace
        """
        with self._swap_lock:
            previous = self._snapshot
            self._snapshot = snapshot
        return previous
