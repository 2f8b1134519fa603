"""Planning App 生命週期管理

Apps 層的 DI 配置，組合 libs 的能力
兩個 libs 共用同一個 LocalStorageClient
"""

import logging

from injector import Injector, Module, provider, singleton

from libs.gridding.src.lifespan import configure as configure_gridding
from libs.predicting.src.lifespan import configure as configure_predicting
from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)
from libs.shared.src.constants.local_storage_settings import LOCAL_STORAGE_DIR


_injector: Injector | None = None


class PlanningModule(Module):
    """Planning App DI 配置"""

    def __init__(self, data_dir: str | None = None) -> None:
        self._data_dir = data_dir or LOCAL_STORAGE_DIR

    @singleton
    @provider
    def provide_local_storage(self) -> LocalStorageClient:
        return LocalStorageClient(base_dir=self._data_dir)


def startup(data_dir: str | None = None) -> Injector:
    """啟動 DI 容器

    Args:
        data_dir: local storage 目錄，預設讀取 WANGGE_DATA_DIR
    """
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector(
        [
            configure_gridding,
            configure_predicting,
            # 必須放在最後，覆蓋 libs 各自提供的 LocalStorageClient
            PlanningModule(data_dir=data_dir),
        ]
    )
    return _injector


def shutdown() -> None:
    """關閉 DI 容器"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """取得 DI 容器，若未初始化則自動啟動"""
    global _injector
    if _injector is None:
        startup()
    return _injector
