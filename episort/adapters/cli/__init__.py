"""Sous-package CLI - re-exporte les commandes publiques."""

from episort.adapters.cli.commands import (
    ActionFilter,
    StatusFilter,
    apply,
    classify_file,
    library,
    scan,
)

__all__ = [
    "ActionFilter",
    "StatusFilter",
    "apply",
    "classify_file",
    "library",
    "scan",
]
