"""
Extracteur composite combinant plusieurs implémentations.

Les extracteurs sont essayés dans l'ordre ; le premier qui reconnaît
le nom de fichier gagne.
"""

from typing import Optional, Sequence

from loguru import logger

from episort.core.ports.parser import IDescriptorExtractor
from episort.core.value_objects.episode import Descriptor


class CompositeDescriptorExtractor(IDescriptorExtractor):
    """Chaîne d'extracteurs essayés par ordre de priorité."""

    def __init__(self, extractors: Sequence[IDescriptorExtractor]) -> None:
        """
        Args:
            extractors: Extracteurs par ordre de priorité (au moins un)
        """
        if not extractors:
            raise ValueError("Au moins un extracteur est requis")
        self._extractors = tuple(extractors)

    @property
    def extractors(self) -> tuple[IDescriptorExtractor, ...]:
        return self._extractors

    def extract(self, filename: str) -> Optional[Descriptor]:
        for extractor in self._extractors:
            descriptor = extractor.extract(filename)
            if descriptor is not None:
                logger.debug(
                    f"{filename} reconnu par {type(extractor).__name__}: "
                    f"S{descriptor.season:02d}E{descriptor.episode:02d}"
                )
                return descriptor
        return None
