"""
Container d'injection de dépendances via dependency-injector.

Les règles et l'extracteur sont des singletons chargés depuis la
configuration. Le cache de métadonnées dépend du dossier traité : il est
fourni à l'appel (container.planner_service(cache_provider=...)).
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.metadata.snapshot import MetadataCacheHolder
from .adapters.parsing import build_extractor
from .adapters.rules_file import load_rules_or_default
from .config import Settings
from .services.executor import IntentExecutorService
from .services.intent_planner import IntentPlannerService
from .services.library import LibraryScanService
from .services.scanner import FolderScanService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        holder = container.metadata_holder(snapshot=load_snapshot(folder / ".episort"))
        planner = container.planner_service(cache_provider=holder.current)
        scan = container.scan_service(planner=planner).scan(folder)
    """

    # Configuration - singleton chargé une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implémentations concrètes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    descriptor_extractor = providers.Singleton(
        build_extractor,
        backends=config.provided.extractor_backends,
    )

    # Règles de filtrage - une fois par exécution
    filter_rules = providers.Singleton(
        load_rules_or_default,
        path=config.provided.rules_file,
    )

    # Cache de métadonnées - un holder par dossier de série
    metadata_holder = providers.Factory(MetadataCacheHolder)

    # Services
    planner_service = providers.Factory(
        IntentPlannerService,
        rules=filter_rules,
        extractor=descriptor_extractor,
    )
    scan_service = providers.Factory(
        FolderScanService,
        file_system=file_system,
        excluded_dirs=providers.Callable(
            lambda name: frozenset({name}), config.provided.metadata_dirname
        ),
    )
    executor_service = providers.Factory(
        IntentExecutorService,
        file_system=file_system,
    )
    library_service = providers.Factory(
        LibraryScanService,
        file_system=file_system,
        rules=filter_rules,
        extractor=descriptor_extractor,
        metadata_dirname=config.provided.metadata_dirname,
    )
