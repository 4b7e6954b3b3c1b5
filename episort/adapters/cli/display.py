"""
Affichage Rich des résultats de classification.

- render_intent : détail d'une classification unique
- render_action_counts : tableau du nombre de fichiers par action
- render_files : liste des fichiers d'une action
- render_execution_report : bilan d'un apply --fix
- render_library : statuts des dossiers d'une bibliothèque
"""

from pathlib import Path
from typing import Iterable, Optional

from rich.markup import escape
from rich.table import Table

from episort.adapters.cli.helpers import console
from episort.core.value_objects.file_intent import Action, FileIntent
from episort.services.executor import ExecutionReport
from episort.services.library import FolderStatus, LibraryScanResult
from episort.services.scanner import FolderScanResult, ScannedFile

ACTION_STYLES = {
    Action.RENAME: "yellow",
    Action.DELETE: "red",
    Action.IGNORE: "dim",
    Action.WHITELIST: "cyan",
    Action.COMPLETE: "green",
}

STATUS_STYLES = {
    FolderStatus.UNKNOWN: "red",
    FolderStatus.EMPTY: "dim",
    FolderStatus.PENDING: "yellow",
    FolderStatus.DONE: "green",
}


def _styled(action: Action) -> str:
    style = ACTION_STYLES[action]
    return f"[{style}]{action.value}[/{style}]"


def render_intent(path: str, intent: FileIntent) -> None:
    """Affiche la classification d'un fichier."""
    console.print(f"[bold]{escape(path)}[/bold]")
    console.print(f"  Action : {_styled(intent.action)}")
    if intent.descriptor is not None:
        console.print(f"  Episode : {intent.descriptor}")
    if intent.dest:
        console.print(f"  Destination : {escape(intent.dest)}")


def render_action_counts(scan: FolderScanResult) -> None:
    """Affiche le nombre de fichiers par action."""
    table = Table(title=f"Classification de {escape(str(scan.root))}", show_header=True)
    table.add_column("Action")
    table.add_column("Fichiers", justify="right")

    counts = scan.action_counts
    for action in Action.ordered():
        table.add_row(_styled(action), str(counts[action]))
    table.add_row("[bold]Total[/bold]", f"[bold]{len(scan.files)}[/bold]")

    console.print(table)


def render_files(action: Action, files: Iterable[ScannedFile]) -> None:
    """Affiche les fichiers d'une action (avec destination pour RENAME)."""
    files = list(files)
    if not files:
        console.print(f"[dim]Aucun fichier {action.value.lower()}[/dim]")
        return

    table = Table(title=action.value, show_header=True)
    table.add_column("Fichier")
    table.add_column("Episode")
    if action is Action.RENAME:
        table.add_column("Destination")

    for scanned in files:
        episode = str(scanned.intent.descriptor) if scanned.intent.descriptor else ""
        row = [escape(str(scanned.path)), episode]
        if action is Action.RENAME:
            row.append(escape(scanned.intent.dest))
        table.add_row(*row)

    console.print(table)


def render_warnings(scan: FolderScanResult) -> None:
    """Signale les épisodes en double et les destinations en conflit."""
    for key, group in sorted(
        scan.duplicate_episodes().items(), key=lambda item: (item[0].season, item[0].episode)
    ):
        paths = ", ".join(escape(str(scanned.path)) for scanned in group)
        console.print(f"[yellow]Episode {key} present {len(group)} fois: {paths}[/yellow]")

    for dest, group in sorted(scan.conflicting_destinations().items()):
        console.print(
            f"[red]Conflit: {len(group)} fichiers vers {escape(dest)}, "
            f"seul le premier sera deplace[/red]"
        )


def render_execution_report(report: ExecutionReport, root: Optional[Path] = None) -> None:
    """Affiche le bilan d'exécution."""
    console.print(
        f"\n[bold cyan]Bilan[/bold cyan]: {len(report.renamed)} renommes, "
        f"{len(report.deleted)} supprimes, {len(report.failed)} echecs"
    )
    for path, reason in report.failed:
        location = root / path if root else path
        console.print(f"  [red]Echec[/red] {escape(str(location))}: {escape(reason)}")


def render_library(result: LibraryScanResult, statuses: Iterable[FolderStatus]) -> None:
    """Affiche les statuts des dossiers, la liste filtrée et la progression."""
    counts = result.status_counts
    summary = Table(title=f"Bibliothèque {escape(str(result.root))}", show_header=True)
    summary.add_column("Statut")
    summary.add_column("Dossiers", justify="right")
    for status in FolderStatus.ordered():
        style = STATUS_STYLES[status]
        summary.add_row(f"[{style}]{status.value}[/{style}]", str(counts[status]))
    console.print(summary)

    selected = set(statuses)
    folders = [folder for folder in result.folders if folder.status in selected]
    if folders:
        table = Table(show_header=True)
        table.add_column("Dossier")
        table.add_column("Statut")
        table.add_column("En attente", justify="right")
        table.add_column("Détail")
        for folder in folders:
            style = STATUS_STYLES[folder.status]
            table.add_row(
                escape(folder.path.name),
                f"[{style}]{folder.status.value}[/{style}]",
                str(folder.pending_count),
                escape(folder.error or ""),
            )
        console.print(table)

    console.print(f"Terminés : {result.done_count}/{result.total}")
