"""
Implémentation de l'extracteur de descripteurs avec guessit.

Couvre les conventions de nommage que la grammaire par expressions
régulières ne reconnaît pas (ex: "Show.Name.102.720p.mkv").
"""

from typing import Any, Optional

from guessit import guessit

from episort.adapters.parsing.regex_extractor import extract_tags
from episort.core.ports.parser import IDescriptorExtractor
from episort.core.value_objects.episode import Descriptor


class GuessitDescriptorExtractor(IDescriptorExtractor):
    """
    Extracteur utilisant la bibliothèque guessit.

    Le type est forcé à "episode". Un résultat sans saison (numérotation
    absolue) n'est pas considéré comme une correspondance.
    """

    def extract(self, filename: str) -> Optional[Descriptor]:
        result = guessit(filename, {"type": "episode"})

        season = self._first_number(result.get("season"))
        episode = self._first_number(result.get("episode"))
        if season is None or episode is None:
            return None

        return Descriptor(season=season, episode=episode, tags=extract_tags(filename))

    def _first_number(self, value: Any) -> Optional[int]:
        """
        Normalise une valeur guessit (entier ou liste) en entier.

        Args:
            value: Valeur retournée par guessit pour "season" ou "episode"

        Returns:
            Le premier numéro, ou None si absent ou invalide
        """
        if isinstance(value, list):
            if not value:
                return None
            value = value[0]
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if value < 0:
            return None
        return value
