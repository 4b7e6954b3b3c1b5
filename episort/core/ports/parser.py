"""
Interface port pour l'extraction de descripteurs depuis les noms de fichiers.

Plusieurs implémentations (expressions régulières, guessit) peuvent
coexister et être combinées par ordre de priorité.
"""

from abc import ABC, abstractmethod
from typing import Optional

from episort.core.value_objects.episode import Descriptor


class IDescriptorExtractor(ABC):
    """
    Interface pour l'analyse d'un nom de fichier d'épisode.

    Contrat:
    - saison et épisode sont toujours des entiers positifs ou nuls
    - les tags sont les annotations brutes, de gauche à droite, une entrée
      par annotation trouvée
    - un nom sans marqueur saison/épisode reconnaissable ne produit rien
    """

    @abstractmethod
    def extract(self, filename: str) -> Optional[Descriptor]:
        """
        Extrait saison, épisode et tags d'un nom de fichier.

        Args:
            filename: Nom du fichier à analyser (sans le chemin)

        Retourne:
            Descriptor si un marqueur saison/épisode est trouvé, sinon None.
        """
        ...
