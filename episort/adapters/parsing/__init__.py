"""
Adaptateurs de parsing pour Episort.

Ce package contient les implémentations concrètes de IDescriptorExtractor:
- RegexDescriptorExtractor: Grammaire SxxExx / NxNN par expressions régulières
- GuessitDescriptorExtractor: Analyse des noms avec guessit
- CompositeDescriptorExtractor: Essaie plusieurs extracteurs par priorité
- build_extractor: Construit la chaîne depuis une liste de noms de backends
"""

from typing import Sequence

from episort.adapters.parsing.composite import CompositeDescriptorExtractor
from episort.adapters.parsing.guessit_extractor import GuessitDescriptorExtractor
from episort.adapters.parsing.regex_extractor import RegexDescriptorExtractor
from episort.core.ports.parser import IDescriptorExtractor

EXTRACTOR_BACKENDS = {
    "regex": RegexDescriptorExtractor,
    "guessit": GuessitDescriptorExtractor,
}


def build_extractor(backends: Sequence[str]) -> IDescriptorExtractor:
    """
    Construit l'extracteur composite depuis les noms de backends.

    Args:
        backends: Noms des backends par priorité (ex: ["regex", "guessit"])

    Raises:
        ValueError: Si un nom de backend est inconnu ou si la liste est vide
    """
    extractors = []
    for name in backends:
        backend = EXTRACTOR_BACKENDS.get(name.strip().lower())
        if backend is None:
            known = ", ".join(sorted(EXTRACTOR_BACKENDS))
            raise ValueError(f"Backend d'extraction inconnu: {name} (connus: {known})")
        extractors.append(backend())
    return CompositeDescriptorExtractor(extractors)


__all__ = [
    "EXTRACTOR_BACKENDS",
    "CompositeDescriptorExtractor",
    "GuessitDescriptorExtractor",
    "RegexDescriptorExtractor",
    "build_extractor",
]
