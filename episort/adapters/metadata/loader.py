"""
Chargement du cache de métadonnées depuis un export TVDB sur disque.

Le dossier de métadonnées contient deux fichiers au format de l'API TVDB v3:
- series.json : réponse de GET /series/{id} ({"data": {"seriesName": ...}})
- episodes.json : réponse de GET /series/{id}/episodes ({"data": [...]})

L'enveloppe "data" est optionnelle.
"""

import json
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from episort.adapters.metadata.snapshot import MetadataSnapshot
from episort.core.entities.media import Episode, Series
from episort.core.exceptions import MetadataLoadError

SERIES_FILENAME = "series.json"
EPISODES_FILENAME = "episodes.json"


def _read_json(path: Path) -> Any:
    """Lit un fichier JSON et retire l'enveloppe "data" éventuelle."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise MetadataLoadError(f"Fichier de metadonnees introuvable: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise MetadataLoadError(f"Fichier de metadonnees illisible: {path} ({e})") from e

    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def _as_int(value: Any) -> Optional[int]:
    """Convertit un champ numérique TVDB (int ou chaîne) en entier positif."""
    if isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number >= 0 else None


def parse_series(data: Any) -> Series:
    """
    Mappe les données TVDB d'une série vers l'entité Series.

    Raises:
        MetadataLoadError: Si le nom de la série est absent
    """
    if not isinstance(data, dict) or not data.get("seriesName"):
        raise MetadataLoadError("Nom de serie absent des metadonnees (seriesName)")
    return Series(name=str(data["seriesName"]), tvdb_id=_as_int(data.get("id")))


def parse_episode(data: Any) -> Optional[Episode]:
    """
    Mappe un épisode TVDB vers l'entité Episode.

    Returns:
        Episode, ou None si la saison ou le numéro d'épisode est invalide
    """
    if not isinstance(data, dict):
        return None
    season = _as_int(data.get("airedSeason"))
    number = _as_int(data.get("airedEpisodeNumber"))
    if season is None or number is None:
        return None
    title = data.get("episodeName")
    return Episode(
        season_number=season,
        episode_number=number,
        title=str(title) if title is not None else None,
        tvdb_id=_as_int(data.get("id")),
    )


def load_snapshot(metadata_dir: Path) -> MetadataSnapshot:
    """
    Charge un instantané de métadonnées depuis un dossier d'export TVDB.

    Args:
        metadata_dir: Dossier contenant series.json et episodes.json

    Returns:
        MetadataSnapshot prêt à être partagé

    Raises:
        MetadataLoadError: Si un fichier est absent, illisible ou invalide
    """
    series = parse_series(_read_json(metadata_dir / SERIES_FILENAME))

    raw_episodes = _read_json(metadata_dir / EPISODES_FILENAME)
    if not isinstance(raw_episodes, list):
        raise MetadataLoadError(
            f"Liste d'episodes attendue dans {metadata_dir / EPISODES_FILENAME}"
        )

    episodes = []
    for raw in raw_episodes:
        episode = parse_episode(raw)
        if episode is None:
            logger.warning(f"Episode ignore (saison/numero invalide): {raw!r}")
            continue
        episodes.append(episode)

    snapshot = MetadataSnapshot.build(series, episodes)
    logger.info(
        f"Metadonnees chargees: {series.name} ({len(snapshot.episodes)} episodes)"
    )
    return snapshot


def load_folder_snapshot(folder: Path, metadata_dirname: str = ".episort") -> MetadataSnapshot:
    """
    Charge le cache de métadonnées rangé dans un dossier de série.

    L'export est cherché dans folder/metadata_dirname. S'il est absent, le
    nom du dossier sert de nom de série et aucun titre d'épisode n'est connu.

    Raises:
        MetadataLoadError: Si l'export trouvé est invalide
    """
    metadata_dir = folder / metadata_dirname
    if not (metadata_dir / SERIES_FILENAME).exists():
        logger.warning(
            f"Pas de métadonnées dans {metadata_dir}, nom de série: {folder.resolve().name}"
        )
        return MetadataSnapshot.empty(folder.resolve().name)
    return load_snapshot(metadata_dir)
