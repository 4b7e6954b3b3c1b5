"""
Utilitaires partagés pour Episort.
"""

from episort.utils.helpers import collapse_whitespace, strip_invisible_chars

__all__ = [
    "collapse_whitespace",
    "strip_invisible_chars",
]
