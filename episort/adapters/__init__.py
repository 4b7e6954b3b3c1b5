"""
Adaptateurs : implémentations concrètes des ports de core/ports/.

- cli/ : commandes Typer et affichage Rich
- metadata/ : instantané immutable et chargement de l'export TVDB
- parsing/ : extraction saison/épisode/tags (regex, guessit)
- file_system.py : listage, déplacement et suppression de fichiers
- rules_file.py : lecture des règles de filtrage JSON
"""
