"""
Point d'entrée CLI d'Episort.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import apply, classify_file, library, scan
from .config import Settings
from .logging_config import configure_logging, level_from_verbosity

app = typer.Typer(
    name="episort",
    help="Classement et renommage des episodes de series TV",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Episort - Classement des épisodes de séries TV."""
    if quiet or verbose:
        settings = Settings()
        configure_logging(
            log_level=level_from_verbosity(settings.log_level, verbose, quiet),
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )


app.command(name="classify")(classify_file)
app.command()(scan)
app.command()(apply)
app.command()(library)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"Bibliotheque : {config.library_dir}")
    typer.echo(f"Regles : {config.rules_file if config.rules_enabled else 'aucune'}")
    typer.echo(f"Metadonnees : <dossier>/{config.metadata_dirname}")
    typer.echo(f"Analyseurs : {', '.join(config.extractor_backends)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Episort v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = Settings()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug(f"Démarrage d'Episort v{__version__}")

    app()


if __name__ == "__main__":
    main()
