"""
Évaluation des règles de filtrage.

Contrôles sans métadonnées, dans un ordre fixe :
1. chemin sans nom de fichier ou sans extension -> DELETE
2. extension en liste noire -> DELETE
3. un composant du chemin est un dossier en liste blanche -> WHITELIST
4. nom de fichier en liste blanche -> WHITELIST
"""

from pathlib import PurePath
from typing import Optional, Union

from loguru import logger

from episort.core.value_objects.file_intent import FileIntent
from episort.core.value_objects.filter_rules import FilterRules


def split_filename(path: PurePath) -> tuple[Optional[str], Optional[str]]:
    """
    Découpe un chemin en (nom de fichier, extension).

    Le nom est le dernier composant ("..": aucun nom). L'extension est le
    texte après le dernier point ; elle est absente si le nom n'a pas de
    point ou si son seul point est en tête (".hidden"). "fichier." a une
    extension vide, qui n'est pas une extension absente.

    Returns:
        (nom, extension), chaque élément pouvant être None
    """
    name = path.name
    if not name or name == "..":
        return None, None

    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name, None
    return name, extension


def evaluate_filter_rules(
    path: Union[str, PurePath], rules: FilterRules
) -> Optional[FileIntent]:
    """
    Applique les règles de filtrage à un chemin.

    Args:
        path: Chemin du fichier (relatif au dossier de la série ou absolu)
        rules: Règles de filtrage

    Returns:
        L'intention terminale (DELETE ou WHITELIST), ou None si aucune
        règle ne s'applique.
    """
    path = PurePath(path)
    filename, extension = split_filename(path)

    if filename is None or extension is None:
        logger.debug(f"Chemin inexploitable (nom ou extension absent): {path}")
        return FileIntent.delete()

    if extension in rules.blacklist_extensions:
        return FileIntent.delete()

    if any(part in rules.whitelist_folders for part in path.parts):
        return FileIntent.whitelist()

    if filename in rules.whitelist_filenames:
        return FileIntent.whitelist()

    return None
