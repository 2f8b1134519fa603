"""預測資料庫 Port"""

from typing import Protocol, runtime_checkable

from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


@runtime_checkable
class PredictionRepositoryPort(Protocol):
    """預測資料庫 Port

    唯一擁有預測清單 (新的在前)，每次異動都整筆寫回
    進出皆為複本，外部修改不會影響內部清單
    """

    def find_all(self) -> list[GridPredictionDTO]:
        """取得全部預測

        Returns:
            list[GridPredictionDTO]: 新的在前
        """
        ...

    def find_by_id(self, prediction_id: str) -> GridPredictionDTO | None:
        """取得特定預測

        Args:
            prediction_id: 預測 ID

        Returns:
            GridPredictionDTO | None: 找不到時回傳 None
        """
        ...

    def add_first(self, prediction: GridPredictionDTO) -> None:
        """新增預測到清單最前面

        Args:
            prediction: 預測資料
        """
        ...

    def replace(self, prediction: GridPredictionDTO) -> bool:
        """以相同 ID 取代既有預測

        Args:
            prediction: 新的預測資料

        Returns:
            bool: 找不到 ID 時回傳 False
        """
        ...

    def remove(self, prediction_id: str) -> bool:
        """刪除預測

        Args:
            prediction_id: 預測 ID

        Returns:
            bool: 找不到 ID 時回傳 False
        """
        ...
