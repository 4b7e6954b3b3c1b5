"""
Objets valeur pour l'identification des épisodes.

EpisodeKey sert de clé de recherche dans le cache de métadonnées,
Descriptor représente le résultat brut de l'analyse d'un nom de fichier.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EpisodeKey:
    """
    Identité d'un épisode : couple (saison, épisode).

    Égalité et hachage structurels, utilisable comme clé de dictionnaire.

    Attributs:
        season: Numéro de saison (entier positif ou nul)
        episode: Numéro d'épisode dans la saison (entier positif ou nul)
    """

    season: int
    episode: int

    def __str__(self) -> str:
        return f"S{self.season:02d}E{self.episode:02d}"


@dataclass(frozen=True)
class Descriptor:
    """
    Informations extraites d'un nom de fichier d'épisode.

    Attributs:
        season: Numéro de saison
        episode: Numéro d'épisode
        tags: Annotations trouvées dans le nom ("[720p]" -> "720p"),
              dans l'ordre d'apparition, doublons conservés
    """

    season: int
    episode: int
    tags: tuple[str, ...] = ()

    @property
    def key(self) -> EpisodeKey:
        """Clé (saison, épisode) pour la recherche dans le cache."""
        return EpisodeKey(season=self.season, episode=self.episode)
