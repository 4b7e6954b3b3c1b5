"""
Fonctions utilitaires partagées dans le projet Episort.

- strip_invisible_chars : retrait des caractères de contrôle et de format
- collapse_whitespace : réduction des espaces multiples
"""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def collapse_whitespace(text: str) -> str:
    """Remplace toute suite de blancs par un espace et retire ceux des extrémités."""
    return _WHITESPACE_RE.sub(" ", text).strip()
