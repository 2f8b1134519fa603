"""
Gridding Context 生命週期管理

遵循 P&A 架構：Driving Port → Application Service → Driven Port
"""

import logging

from injector import Injector, Module, provider, singleton

# Clients
from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)
from libs.shared.src.constants.local_storage_settings import LOCAL_STORAGE_DIR

# Driving Ports
from libs.gridding.src.ports.calculate_grid_port import CalculateGridPort
from libs.gridding.src.ports.get_grid_settings_port import GetGridSettingsPort
from libs.gridding.src.ports.update_grid_settings_port import UpdateGridSettingsPort
from libs.gridding.src.ports.reset_grid_settings_port import ResetGridSettingsPort
from libs.gridding.src.ports.export_grid_port import ExportGridPort

# Application Services
from libs.gridding.src.application.queries.calculate_grid import CalculateGridQuery
from libs.gridding.src.application.queries.get_grid_settings import (
    GetGridSettingsQuery,
)
from libs.gridding.src.application.commands.update_grid_settings import (
    UpdateGridSettingsCommand,
)
from libs.gridding.src.application.commands.reset_grid_settings import (
    ResetGridSettingsCommand,
)
from libs.gridding.src.application.commands.export_grid import ExportGridCommand

# Driven Ports
from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.gridding.src.ports.grid_export_port import GridExportPort
from libs.gridding.src.adapters.driven.local_storage.grid_settings_local_storage_adapter import (
    GridSettingsLocalStorageAdapter,
)
from libs.gridding.src.adapters.driven.csv.grid_csv_export_adapter import (
    GridCsvExportAdapter,
)


class GriddingModule(Module):
    """Gridding 依賴注入模組"""

    @singleton
    @provider
    def provide_calculate_grid(
        self, settings_storage: GridSettingsStoragePort
    ) -> CalculateGridPort:
        return CalculateGridQuery(settings_storage=settings_storage)

    @singleton
    @provider
    def provide_get_grid_settings(
        self, settings_storage: GridSettingsStoragePort
    ) -> GetGridSettingsPort:
        return GetGridSettingsQuery(settings_storage=settings_storage)

    @singleton
    @provider
    def provide_update_grid_settings(
        self, settings_storage: GridSettingsStoragePort
    ) -> UpdateGridSettingsPort:
        return UpdateGridSettingsCommand(settings_storage=settings_storage)

    @singleton
    @provider
    def provide_reset_grid_settings(
        self, settings_storage: GridSettingsStoragePort
    ) -> ResetGridSettingsPort:
        return ResetGridSettingsCommand(settings_storage=settings_storage)

    @singleton
    @provider
    def provide_export_grid(
        self,
        settings_storage: GridSettingsStoragePort,
        exporter: GridExportPort,
    ) -> ExportGridPort:
        return ExportGridCommand(settings_storage=settings_storage, exporter=exporter)

    # ============================================
    # Driven Ports → Real Adapters
    # ============================================

    @singleton
    @provider
    def provide_local_storage(self) -> LocalStorageClient:
        return LocalStorageClient(base_dir=LOCAL_STORAGE_DIR)

    @singleton
    @provider
    def provide_grid_settings_storage(
        self, client: LocalStorageClient
    ) -> GridSettingsStoragePort:
        return GridSettingsLocalStorageAdapter(client=client)

    @singleton
    @provider
    def provide_grid_export(self) -> GridExportPort:
        return GridCsvExportAdapter()


_injector: Injector | None = None


def startup() -> Injector:
    """啟動依賴注入容器"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([GriddingModule()])
    return _injector


def shutdown() -> None:
    """關閉並釋放資源"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """取得依賴注入容器"""
    if _injector is None:
        raise RuntimeError("Injector not initialized. Call startup() first.")
    return _injector


# Alias for libs composition
configure = GriddingModule()
