"""Exceptions du domaine Episort."""


class EpisortError(Exception):
    """Erreur de base pour les erreurs de chargement et de configuration."""


class MetadataLoadError(EpisortError):
    """Le cache de métadonnées sur disque est absent ou illisible."""


class RulesFileError(EpisortError):
    """Le fichier de règles de filtrage est absent ou invalide."""
