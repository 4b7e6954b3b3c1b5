"""
Adaptateurs du cache de métadonnées.

- MetadataSnapshot : Implémentation immutable de IMetadataCache
- MetadataCacheHolder : Référence échangeable vers l'instantané courant
- load_snapshot : Chargement depuis un export TVDB (series.json, episodes.json)
- load_folder_snapshot : Export du sous-dossier d'une série, ou cache vide
"""

from episort.adapters.metadata.loader import load_folder_snapshot, load_snapshot
from episort.adapters.metadata.snapshot import MetadataCacheHolder, MetadataSnapshot

__all__ = [
    "MetadataSnapshot",
    "MetadataCacheHolder",
    "load_folder_snapshot",
    "load_snapshot",
]
