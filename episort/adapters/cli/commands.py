"""
Commandes CLI d'Episort.

- classify : classification d'un seul fichier
- scan : rapport de classification d'un dossier de série
- apply : rapport puis, avec --fix, application des renommages
- library : statut de chaque dossier de série d'une bibliothèque
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from episort.adapters.cli.display import (
    render_action_counts,
    render_execution_report,
    render_files,
    render_intent,
    render_library,
    render_warnings,
)
from episort.adapters.cli.helpers import (
    build_container,
    console,
    exit_on_error,
    resolve_folder_snapshot,
    suppress_loguru,
)
from episort.container import Container
from episort.core.value_objects.file_intent import Action
from episort.services.library import FolderStatus
from episort.services.scanner import FolderScanResult


class ActionFilter(str, Enum):
    """Filtre d'affichage par action."""

    ALL = "all"
    RENAME = "rename"
    COMPLETE = "complete"
    IGNORE = "ignore"
    DELETE = "delete"
    WHITELIST = "whitelist"

    def to_actions(self) -> list[Action]:
        if self is ActionFilter.ALL:
            return list(Action.ordered())
        return [Action[self.name]]


class StatusFilter(str, Enum):
    """Filtre d'affichage par statut de dossier."""

    ALL = "all"
    UNKNOWN = "unknown"
    EMPTY = "empty"
    PENDING = "pending"
    DONE = "done"

    def to_statuses(self) -> list[FolderStatus]:
        if self is StatusFilter.ALL:
            return list(FolderStatus.ordered())
        return [FolderStatus[self.name]]


RulesOption = Annotated[
    Optional[Path],
    typer.Option("--rules", "-r", help="Fichier JSON de regles (defaut: config)"),
]
MetadataOption = Annotated[
    Optional[Path],
    typer.Option("--metadata", "-m", help="Dossier series.json/episodes.json (defaut: FOLDER/.episort)"),
]


def _scan_folder(
    folder: Path, rules: Optional[Path], metadata: Optional[Path]
) -> tuple[FolderScanResult, Container]:
    """Construit les services et scanne le dossier."""
    if not folder.is_dir():
        console.print(f"[red]Erreur: Repertoire introuvable: {escape(str(folder))}[/red]")
        raise typer.Exit(1)

    with exit_on_error():
        container = build_container(rules)
        holder = container.metadata_holder(
            snapshot=resolve_folder_snapshot(container, folder, metadata)
        )
        planner = container.planner_service(cache_provider=holder.current)
        scan_result = container.scan_service(planner=planner).scan(folder)
    return scan_result, container


def classify_file(
    path: Annotated[str, typer.Argument(help="Chemin du fichier, relatif au dossier de la serie")],
    folder: Annotated[
        Path, typer.Option("--folder", "-f", help="Dossier de la serie")
    ] = Path("."),
    rules: RulesOption = None,
    metadata: MetadataOption = None,
) -> None:
    """Classe un fichier et affiche sa destination canonique."""
    with exit_on_error():
        container = build_container(rules)
        holder = container.metadata_holder(
            snapshot=resolve_folder_snapshot(container, folder, metadata)
        )
        planner = container.planner_service(cache_provider=holder.current)
        intent = planner.classify(path)

    render_intent(path, intent)


def scan(
    folder: Annotated[Path, typer.Argument(help="Dossier de la serie")],
    action: Annotated[
        ActionFilter,
        typer.Option("--action", "-a", help="Actions a lister"),
    ] = ActionFilter.ALL,
    rules: RulesOption = None,
    metadata: MetadataOption = None,
) -> None:
    """Classe tous les fichiers d'un dossier de série."""
    scan_result, _ = _scan_folder(folder, rules, metadata)

    with suppress_loguru():
        render_action_counts(scan_result)
        for selected in action.to_actions():
            if action is ActionFilter.ALL and not scan_result.by_action(selected):
                continue
            render_files(selected, scan_result.by_action(selected))
        render_warnings(scan_result)


def apply(
    folder: Annotated[Path, typer.Argument(help="Dossier de la serie")],
    fix: Annotated[
        bool,
        typer.Option("--fix", help="Executer les renommages (defaut: rapport seul)"),
    ] = False,
    delete: Annotated[
        bool,
        typer.Option("--delete", help="Supprimer aussi les fichiers classes Delete"),
    ] = False,
    rules: RulesOption = None,
    metadata: MetadataOption = None,
) -> None:
    """Renomme les épisodes vers leur chemin canonique."""
    scan_result, container = _scan_folder(folder, rules, metadata)

    with suppress_loguru():
        render_action_counts(scan_result)
        render_files(Action.RENAME, scan_result.by_action(Action.RENAME))
        if delete:
            render_files(Action.DELETE, scan_result.by_action(Action.DELETE))
        render_warnings(scan_result)

    pending = len(scan_result.by_action(Action.RENAME))
    if delete:
        pending += len(scan_result.by_action(Action.DELETE))

    if pending == 0:
        console.print("[green]Rien a faire.[/green]")
        return

    if not fix:
        console.print(f"\n[dim]Pour appliquer : episort apply {folder} --fix[/dim]")
        return

    executor = container.executor_service()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Application...", total=pending)
        report = executor.execute(
            scan_result,
            include_delete=delete,
            progress_callback=lambda _: progress.advance(task),
        )

    render_execution_report(report, folder)
    if not report.success:
        raise typer.Exit(1)


def library(
    root: Annotated[
        Optional[Path],
        typer.Argument(help="Dossier de la bibliotheque (defaut: config)"),
    ] = None,
    status: Annotated[
        StatusFilter,
        typer.Option("--status", "-s", help="Statuts des dossiers a lister"),
    ] = StatusFilter.ALL,
    rules: RulesOption = None,
) -> None:
    """Reclasse tous les dossiers de série et affiche leur statut."""
    with exit_on_error():
        container = build_container(rules)
        library_root = root if root is not None else container.config().library_dir

    if not library_root.is_dir():
        console.print(f"[red]Erreur: Repertoire introuvable: {escape(str(library_root))}[/red]")
        raise typer.Exit(1)

    with exit_on_error():
        result = container.library_service().scan(library_root)

    with suppress_loguru():
        render_library(result, status.to_statuses())
