"""
Predicting Context Lifecycle Management

Provides dependency injection startup and shutdown
Follows P&A architecture: Driving Port → Application Service → Driven Port

All use cases share one PredictionRepositoryPort singleton, which owns the
persisted prediction list.
"""

import logging

from injector import Injector, Module, provider, singleton

# Clients
from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)
from libs.shared.src.constants.local_storage_settings import LOCAL_STORAGE_DIR

# Driving Ports
from libs.predicting.src.ports.create_prediction_port import CreatePredictionPort
from libs.predicting.src.ports.get_prediction_port import GetPredictionPort
from libs.predicting.src.ports.list_predictions_port import ListPredictionsPort
from libs.predicting.src.ports.update_prediction_port import UpdatePredictionPort
from libs.predicting.src.ports.delete_prediction_port import DeletePredictionPort
from libs.predicting.src.ports.duplicate_prediction_port import (
    DuplicatePredictionPort,
)
from libs.predicting.src.ports.refresh_prediction_results_port import (
    RefreshPredictionResultsPort,
)
from libs.predicting.src.ports.get_prediction_stats_port import (
    GetPredictionStatsPort,
)

# Application Services
from libs.predicting.src.application.commands.create_prediction import (
    CreatePredictionCommand,
)
from libs.predicting.src.application.commands.update_prediction import (
    UpdatePredictionCommand,
)
from libs.predicting.src.application.commands.delete_prediction import (
    DeletePredictionCommand,
)
from libs.predicting.src.application.commands.duplicate_prediction import (
    DuplicatePredictionCommand,
)
from libs.predicting.src.application.commands.refresh_prediction_results import (
    RefreshPredictionResultsCommand,
)
from libs.predicting.src.application.queries.get_prediction import GetPredictionQuery
from libs.predicting.src.application.queries.list_predictions import (
    ListPredictionsQuery,
)
from libs.predicting.src.application.queries.get_prediction_stats import (
    GetPredictionStatsQuery,
)

# Driven Ports
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.predicting.src.adapters.driven.local_storage.prediction_local_storage_adapter import (
    PredictionLocalStorageAdapter,
)


class PredictingModule(Module):
    """Predicting dependency injection module"""

    @singleton
    @provider
    def provide_create_prediction(
        self, repository: PredictionRepositoryPort
    ) -> CreatePredictionPort:
        return CreatePredictionCommand(repository=repository)

    @singleton
    @provider
    def provide_get_prediction(
        self, repository: PredictionRepositoryPort
    ) -> GetPredictionPort:
        return GetPredictionQuery(repository=repository)

    @singleton
    @provider
    def provide_list_predictions(
        self, repository: PredictionRepositoryPort
    ) -> ListPredictionsPort:
        return ListPredictionsQuery(repository=repository)

    @singleton
    @provider
    def provide_update_prediction(
        self, repository: PredictionRepositoryPort
    ) -> UpdatePredictionPort:
        return UpdatePredictionCommand(repository=repository)

    @singleton
    @provider
    def provide_delete_prediction(
        self, repository: PredictionRepositoryPort
    ) -> DeletePredictionPort:
        return DeletePredictionCommand(repository=repository)

    @singleton
    @provider
    def provide_duplicate_prediction(
        self, repository: PredictionRepositoryPort
    ) -> DuplicatePredictionPort:
        return DuplicatePredictionCommand(repository=repository)

    @singleton
    @provider
    def provide_refresh_prediction_results(
        self, repository: PredictionRepositoryPort
    ) -> RefreshPredictionResultsPort:
        return RefreshPredictionResultsCommand(repository=repository)

    @singleton
    @provider
    def provide_get_prediction_stats(
        self, repository: PredictionRepositoryPort
    ) -> GetPredictionStatsPort:
        return GetPredictionStatsQuery(repository=repository)

    # ============================================
    # Driven Ports → Real Adapters
    # ============================================

    @singleton
    @provider
    def provide_local_storage(self) -> LocalStorageClient:
        return LocalStorageClient(base_dir=LOCAL_STORAGE_DIR)

    @singleton
    @provider
    def provide_prediction_repository(
        self, client: LocalStorageClient
    ) -> PredictionRepositoryPort:
        return PredictionLocalStorageAdapter(client=client)


_injector: Injector | None = None


def startup() -> Injector:
    """Start DI container"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([PredictingModule()])
    return _injector


def shutdown() -> None:
    """Shutdown and release resources"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """Get DI container, auto-start if not initialized"""
    global _injector
    if _injector is None:
        startup()
    return _injector


# Alias for libs composition
configure = PredictingModule()
