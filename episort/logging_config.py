"""
Configuration du logging de l'application via loguru.

Deux sorties :
- console (stderr) : colorée, niveau choisi par l'option de verbosité
- fichier : JSON avec rotation, tous les niveaux, pour l'historique des
  classifications et des renommages
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# -v -> INFO, -vv et plus -> DEBUG
_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")


def level_from_verbosity(default_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Niveau de log console selon les options -v / -q.

    Args:
        default_level: Niveau configuré (EPISORT_LOG_LEVEL)
        verbose: Nombre d'options -v
        quiet: Mode silencieux (erreurs uniquement)
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default_level
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/episort.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, None pour désactiver la sortie fichier
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Une ligne par fichier classé
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logging configuré: {log_file} (rotation {rotation_size})")
