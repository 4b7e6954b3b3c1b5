"""
Extracteur de descripteurs par expressions régulières.

Grammaire reconnue (première correspondance retenue):
- S01E02, s1e2, S01.E02, S01_E02, S123E04
- 1x02, 12x103 (seulement si aucun motif SxxExx n'est présent)

Les tags sont les annotations entre crochets ("[720p]", "[GROUP]"),
extraites de gauche à droite.
"""

import re
from typing import Optional

from episort.core.ports.parser import IDescriptorExtractor
from episort.core.value_objects.episode import Descriptor

# Motifs saison/épisode par ordre de priorité
SEASON_EPISODE_PATTERNS = (
    # S01E02, S1E2, S01.E02, S01-E02
    re.compile(r"(?<![A-Za-z0-9])[Ss](\d+)[ ._-]?[Ee](\d+)"),
    # 1x02 (les résolutions 1920x1080 sont exclues par les bornes)
    re.compile(r"(?<![A-Za-z0-9])(\d{1,2})[xX](\d{1,3})(?!\d)"),
)

TAG_PATTERN = re.compile(r"\[([^\[\]]+)\]")


def extract_tags(filename: str) -> tuple[str, ...]:
    """
    Extrait les annotations entre crochets d'un nom de fichier.

    L'extension est exclue : dans "Show.S01E02.[720p]", "[720p]" est
    l'extension et non un tag.

    Args:
        filename: Nom du fichier

    Returns:
        Contenu brut de chaque annotation, dans l'ordre d'apparition.
    """
    stem, dot, _ = filename.rpartition(".")
    text = stem if dot and stem else filename
    return tuple(match.group(1) for match in TAG_PATTERN.finditer(text))


class RegexDescriptorExtractor(IDescriptorExtractor):
    """
    Extracteur basé sur des expressions régulières.

    Les noms générés par le planificateur ("Serie-S01E02-Titre.[tag].mkv")
    sont toujours reconnus par cette grammaire.
    """

    def extract(self, filename: str) -> Optional[Descriptor]:
        for pattern in SEASON_EPISODE_PATTERNS:
            match = pattern.search(filename)
            if match is None:
                continue
            return Descriptor(
                season=int(match.group(1)),
                episode=int(match.group(2)),
                tags=extract_tags(filename),
            )
        return None
