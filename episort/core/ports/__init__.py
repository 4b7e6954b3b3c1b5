"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- IDescriptorExtractor : Analyse des noms de fichiers d'épisodes
- IMetadataCache : Lecture du cache de métadonnées TVDB
- IFileSystem : Opérations sur les fichiers
"""

from episort.core.ports.file_system import IFileSystem
from episort.core.ports.metadata import IMetadataCache
from episort.core.ports.parser import IDescriptorExtractor

__all__ = [
    "IDescriptorExtractor",
    "IMetadataCache",
    "IFileSystem",
]
