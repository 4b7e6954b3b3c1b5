"""
Planificateur d'intentions : le moteur de classification.

Pour un chemin, des règles et un cache de métadonnées, décide l'une des
cinq actions et, pour RENAME, calcule le chemin canonique :

    Season 01/Nom De La Serie-S01E02-Titre.[tag].mkv

La classification est une fonction pure : aucune E/S, aucun état partagé
modifié. Elle ne lève jamais d'exception pour un fichier donné.
"""

from functools import lru_cache
from pathlib import PurePath
from typing import Iterable, Optional, Union

from loguru import logger

from episort.core.ports.metadata import IMetadataCache
from episort.core.ports.parser import IDescriptorExtractor
from episort.core.value_objects.episode import Descriptor
from episort.core.value_objects.file_intent import FileIntent
from episort.core.value_objects.filter_rules import FilterRules
from episort.services.filter_rules import evaluate_filter_rules, split_filename
from episort.services.normalizer import clean_episode_title, clean_series_name


@lru_cache(maxsize=1)
def default_extractor() -> IDescriptorExtractor:
    """Extracteur par défaut : expressions régulières puis guessit."""
    from episort.adapters.parsing import build_extractor

    return build_extractor(["regex", "guessit"])


def format_season_folder(season: int) -> str:
    """Nom du dossier de saison ("Season 01", "Season 123")."""
    return f"Season {season:02d}"


def _title_suffix(descriptor: Descriptor, cache: IMetadataCache) -> str:
    title = cache.lookup_episode_title(descriptor.key)
    if title is None:
        return ""
    cleaned = clean_episode_title(title)
    return f"-{cleaned}" if cleaned else ""


def _tags_segment(descriptor: Descriptor, rules: FilterRules) -> str:
    return "".join(
        f".[{tag}]" for tag in descriptor.tags if tag in rules.whitelist_tags
    )


def build_episode_filename(
    descriptor: Descriptor,
    extension: str,
    rules: FilterRules,
    cache: IMetadataCache,
) -> str:
    """
    Génère le nom de fichier canonique d'un épisode.

    Format : Serie-SxxExx[-Titre][.[tag]...].ext

    Le titre est omis s'il est inconnu ou vide après nettoyage. Seuls les
    tags de la liste blanche sont conservés, dans l'ordre d'extraction.
    """
    return (
        f"{clean_series_name(cache.series_name())}"
        f"-S{descriptor.season:02d}E{descriptor.episode:02d}"
        f"{_title_suffix(descriptor, cache)}"
        f"{_tags_segment(descriptor, rules)}"
        f".{extension}"
    )


def build_destination(
    descriptor: Descriptor,
    extension: str,
    rules: FilterRules,
    cache: IMetadataCache,
) -> PurePath:
    """Chemin canonique (dossier de saison / nom de fichier) d'un épisode."""
    return PurePath(format_season_folder(descriptor.season)) / build_episode_filename(
        descriptor, extension, rules, cache
    )


def classify(
    path: Union[str, PurePath],
    rules: FilterRules,
    cache: IMetadataCache,
    extractor: Optional[IDescriptorExtractor] = None,
) -> FileIntent:
    """
    Classe un fichier et calcule sa destination canonique.

    Args:
        path: Chemin du fichier, relatif au dossier de la série
        rules: Règles de filtrage
        cache: Instantané des métadonnées de la série
        extractor: Analyseur de noms (défaut: regex puis guessit)

    Returns:
        FileIntent avec l'action, la clé d'épisode si reconnue, et la
        destination pour RENAME.
    """
    path = PurePath(path)

    filtered = evaluate_filter_rules(path, rules)
    if filtered is not None:
        return filtered

    filename, extension = split_filename(path)
    extractor = extractor if extractor is not None else default_extractor()

    try:
        descriptor = extractor.extract(filename)
    except Exception as e:
        # Un nom que l'analyseur ne sait pas traiter est simplement ignoré
        logger.debug(f"Analyse impossible pour {filename}: {e}")
        descriptor = None

    if descriptor is None:
        return FileIntent.ignore()

    destination = build_destination(descriptor, extension, rules, cache)
    if destination == path:
        return FileIntent.complete(descriptor.key)

    return FileIntent.rename(str(destination), descriptor.key)


class IntentPlannerService:
    """
    Service de classification avec règles et extracteur injectés.

    Le cache est fourni par une fonction retournant l'instantané courant
    (ex: MetadataCacheHolder.current), lue une fois par fichier.

    Ce service est sans état propre et peut être utilisé comme singleton.
    """

    def __init__(
        self,
        rules: FilterRules,
        extractor: IDescriptorExtractor,
        cache_provider,
    ) -> None:
        """
        Args:
            rules: Règles de filtrage de l'exécution
            extractor: Analyseur de noms de fichiers
            cache_provider: Callable sans argument retournant un IMetadataCache
        """
        self._rules = rules
        self._extractor = extractor
        self._cache_provider = cache_provider

    @property
    def rules(self) -> FilterRules:
        return self._rules

    def classify(self, path: Union[str, PurePath]) -> FileIntent:
        """Classe un fichier avec l'instantané de métadonnées courant."""
        return classify(path, self._rules, self._cache_provider(), self._extractor)

    def classify_many(
        self, paths: Iterable[Union[str, PurePath]]
    ) -> list[tuple[PurePath, FileIntent]]:
        """
        Classe plusieurs fichiers avec un même instantané de métadonnées.

        Returns:
            Liste de couples (chemin, intention) dans l'ordre des entrées
        """
        cache = self._cache_provider()
        return [
            (PurePath(path), classify(path, self._rules, cache, self._extractor))
            for path in paths
        ]
