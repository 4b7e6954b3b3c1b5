"""
Entités lues depuis l'export de métadonnées d'une série.

- Series : la série à laquelle appartient un dossier
- Episode : un épisode diffusé, avec son titre éventuel
"""

from episort.core.entities.media import Episode, Series

__all__ = ["Episode", "Series"]
