"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine :
- normalizer : noms de séries et titres d'épisodes utilisables en nom de fichier
- filter_rules : liste noire / liste blanche avant toute recherche de métadonnées
- intent_planner : moteur de classification (classify)
- scanner : classification de tous les fichiers d'un dossier de série
- executor : application des intentions Rename / Delete
- library : statut de chaque dossier de série d'une bibliothèque

Les services reçoivent leurs collaborateurs via les ports de core/. Le
câblage par défaut (chaîne d'extracteurs, chargement des métadonnées d'un
dossier) vient de adapters/.
"""
