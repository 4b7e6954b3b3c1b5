"""
Chargement des règles de filtrage depuis un fichier JSON.

Format attendu (toutes les clés sont optionnelles):

    {
        "blacklist_extensions": ["nfo", "txt"],
        "whitelist_folders": ["Extras"],
        "whitelist_filenames": ["poster.jpg"],
        "whitelist_tags": ["720p", "1080p"]
    }
"""

import json
from pathlib import Path
from typing import Any, Optional

from episort.core.exceptions import RulesFileError
from episort.core.value_objects.filter_rules import FilterRules

RULE_KEYS = (
    "blacklist_extensions",
    "whitelist_folders",
    "whitelist_filenames",
    "whitelist_tags",
)


def parse_rules(data: Any) -> FilterRules:
    """
    Construit des FilterRules depuis un dictionnaire JSON.

    Raises:
        RulesFileError: Si la structure ou une valeur est invalide
    """
    if not isinstance(data, dict):
        raise RulesFileError("Objet JSON attendu pour les regles de filtrage")

    unknown = set(data) - set(RULE_KEYS)
    if unknown:
        raise RulesFileError(f"Cles inconnues: {', '.join(sorted(unknown))}")

    values: dict[str, list[str]] = {}
    for key in RULE_KEYS:
        entries = data.get(key, [])
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise RulesFileError(f"'{key}' doit etre une liste de chaines")
        values[key] = entries

    return FilterRules.from_iterables(**values)


def load_rules(path: Path) -> FilterRules:
    """
    Charge les règles de filtrage depuis un fichier JSON.

    Args:
        path: Chemin du fichier de règles

    Raises:
        RulesFileError: Si le fichier est absent, illisible ou invalide
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RulesFileError(f"Fichier de regles introuvable: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise RulesFileError(f"Fichier de regles illisible: {path} ({e})") from e
    return parse_rules(data)


def load_rules_or_default(path: Optional[Path]) -> FilterRules:
    """
    Charge les règles si un fichier est configuré, sinon des règles vides.

    Des règles vides ne déclenchent jamais DELETE (hors chemins
    inexploitables) ni WHITELIST, et ne conservent aucun tag.
    """
    if path is None:
        return FilterRules()
    return load_rules(path)
