"""
Domaine d'Episort.

Types et contrats du moteur de classification, sans dépendance vers les
adaptateurs ni les bibliothèques externes.

- entities/ : Series et Episode lus depuis l'export de métadonnées
- ports/ : contrats abstraits (analyse des noms, cache, système de fichiers)
- value_objects/ : EpisodeKey, Descriptor, FileIntent, FilterRules
"""
