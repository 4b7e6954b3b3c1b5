"""
Utilitaires partagés pour les commandes CLI d'Episort.

Ce module fournit :
- console : instance Rich Console partagée
- suppress_loguru : context manager pour désactiver/réactiver les logs loguru
- build_container : container configure selon les options de la commande
- resolve_folder_snapshot : chargement du cache de métadonnées d'un dossier
- exit_on_error : conversion des erreurs de chargement en sortie CLI propre
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import typer
from dependency_injector import providers
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from episort.adapters.metadata.loader import load_folder_snapshot, load_snapshot
from episort.adapters.metadata.snapshot import MetadataSnapshot
from episort.adapters.rules_file import load_rules
from episort.container import Container
from episort.core.exceptions import EpisortError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour désactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("episort")
    try:
        yield
    finally:
        loguru_logger.enable("episort")


@contextmanager
def exit_on_error():
    """Affiche une EpisortError en rouge et termine avec le code 1."""
    try:
        yield
    except EpisortError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def build_container(rules_file: Optional[Path] = None) -> Container:
    """
    Crée un container, avec un fichier de règles forcé si fourni.

    Raises:
        RulesFileError: Si le fichier de règles est invalide
    """
    container = Container()
    if rules_file is not None:
        container.filter_rules.override(providers.Object(load_rules(rules_file)))
    return container


def resolve_folder_snapshot(
    container: Container, folder: Path, metadata_dir: Optional[Path] = None
) -> MetadataSnapshot:
    """
    Charge le cache de métadonnées d'un dossier de série.

    Sans --metadata, cherche l'export dans le sous-dossier configure
    (.episort par défaut). S'il est absent, le nom du dossier sert de nom
    de série et aucun titre d'épisode n'est connu.

    Raises:
        MetadataLoadError: Si l'export explicite ou trouvé est invalide
    """
    if metadata_dir is not None:
        return load_snapshot(metadata_dir)
    return load_folder_snapshot(folder, container.config().metadata_dirname)
