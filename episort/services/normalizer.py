"""
Normalisation des noms de séries et des titres d'épisodes.

Les chaînes produites sont utilisables telles quelles dans un nom de
fichier, quel que soit le système. Les crochets sont réservés aux tags
des noms générés : ils sont convertis en parenthèses.
"""

import unicodedata

from pathvalidate import sanitize_filename

from episort.utils.helpers import collapse_whitespace, strip_invisible_chars

# Longueur maximale d'un nom ou d'un titre nettoyé
MAX_NAME_LENGTH = 200

# Caractères spéciaux à remplacer par un tiret
# Note: pathvalidate gère déjà / \ : * " < > |
# Mais on veut un remplacement explicite par tiret
SPECIAL_CHARS_TO_DASH = frozenset({":", "/", "\\", "*", '"', "<", ">", "|"})

# Caractères supprimés sans remplacement
REMOVED_CHARS = frozenset({"?"})

BRACKET_REPLACEMENTS = {"[": "(", "]": ")"}

# Titres provisoires publiés par TVDB avant la diffusion
PLACEHOLDER_TITLES = frozenset({"TBA", "TBD", "TBC"})

_LIGATURES = {
    "œ": "oe",  # œ -> oe
    "Œ": "Oe",  # Œ -> Oe
    "æ": "ae",  # æ -> ae
    "Æ": "Ae",  # Æ -> Ae
}


def _normalize_ligatures(text: str) -> str:
    """Remplace les ligatures (NFKC ne les décompose pas)."""
    for ligature, replacement in _LIGATURES.items():
        text = text.replace(ligature, replacement)
    return text


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie une chaîne pour l'utiliser dans un nom de fichier.

    Transformations appliquées :
    - Normalisation Unicode NFKC et remplacement des ligatures (œ->oe, æ->ae)
    - Blancs multiples réduits à un espace, caractères invisibles retirés
    - Caractères spéciaux (: / \\ * " < > |) -> tiret
    - Point d'interrogation supprimé, crochets -> parenthèses
    - Nettoyage pathvalidate (plateforme universelle)
    - Points et espaces finaux retirés, troncature à 200 caractères

    Args:
        text: Texte à nettoyer.

    Returns:
        Texte valide pour un nom de fichier (éventuellement vide).
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = _normalize_ligatures(text)
    text = collapse_whitespace(text)
    text = strip_invisible_chars(text)

    for char in SPECIAL_CHARS_TO_DASH:
        text = text.replace(char, "-")
    for char in REMOVED_CHARS:
        text = text.replace(char, "")
    for bracket, replacement in BRACKET_REPLACEMENTS.items():
        text = text.replace(bracket, replacement)

    text = sanitize_filename(text, platform="universal", replacement_text="")
    text = collapse_whitespace(text).rstrip(" .")

    if len(text) > MAX_NAME_LENGTH:
        text = text[:MAX_NAME_LENGTH].rstrip(" .")

    return text


def clean_series_name(raw: str) -> str:
    """
    Nom de série canonique pour les noms de fichiers générés.

    La casse est conservée. Même entrée, même sortie.
    """
    return sanitize_for_filesystem(raw)


def clean_episode_title(raw: str) -> str:
    """
    Titre d'épisode canonique, ou chaîne vide si rien de significatif ne reste.

    Un titre sans aucun caractère alphanumérique ou égal à un titre
    provisoire (TBA, TBD, TBC) est considéré comme vide.
    """
    cleaned = sanitize_for_filesystem(raw)
    if not any(char.isalnum() for char in cleaned):
        return ""
    if cleaned.upper() in PLACEHOLDER_TITLES:
        return ""
    return cleaned
