"""
Objets valeur immutables représentant des concepts du domaine sans identité.

Les objets valeur sont définis par leurs attributs plutôt que par une identité.
Ils sont immutables et peuvent être librement partagés et comparés par valeur.

Exports :
- EpisodeKey : Identité (saison, épisode) d'un épisode
- Descriptor : Informations extraites d'un nom de fichier
- Action : Les cinq actions de classification
- FileIntent : Décision de classification pour un fichier
- FilterRules : Règles de liste noire / liste blanche
"""

from episort.core.value_objects.episode import Descriptor, EpisodeKey
from episort.core.value_objects.file_intent import Action, FileIntent
from episort.core.value_objects.filter_rules import FilterRules

__all__ = [
    "EpisodeKey",
    "Descriptor",
    "Action",
    "FileIntent",
    "FilterRules",
]
