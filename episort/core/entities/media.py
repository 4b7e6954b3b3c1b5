"""
Entités de métadonnées des séries.

Séries TV et leurs épisodes, tels que stockés dans le cache de
métadonnées TVDB pré-rempli.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Series:
    """
    Métadonnées TVDB d'une série.

    Attributs:
        name: Nom de la série tel que publié par TVDB
        tvdb_id: Identifiant TheTVDB
    """

    name: str = ""
    tvdb_id: Optional[int] = None


@dataclass(frozen=True)
class Episode:
    """
    Épisode d'une série TV.

    Attributs:
        season_number: Numéro de saison de diffusion
        episode_number: Numéro de l'épisode dans la saison
        title: Titre de l'épisode, None si TVDB ne le nomme pas
        tvdb_id: Identifiant TheTVDB de l'épisode
    """

    season_number: int = 0
    episode_number: int = 0
    title: Optional[str] = None
    tvdb_id: Optional[int] = None
