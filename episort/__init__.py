"""
Episort - Organisation des fichiers d'épisodes de séries TV.

Ce package classe chaque fichier d'un dossier de série (renommer, complet,
ignorer, supprimer, liste blanche) et calcule le chemin canonique des
épisodes à partir d'un cache de métadonnées TVDB pré-rempli.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (classification, scan, exécution)
- adapters/ : Couche infrastructure (CLI, parsing, cache, système de fichiers)
"""

__version__ = "0.1.0"
