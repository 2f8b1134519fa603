"""網格表匯出 Fake Adapter"""

from libs.gridding.src.ports.grid_export_port import GridExportPort
from libs.shared.src.dtos.grid.grid_step_dto import GridStepDTO


class GridExportFakeAdapter(GridExportPort):
    """網格表匯出 Fake 實作，只記錄呼叫內容"""

    def __init__(self) -> None:
        self.exports: dict[str, list[GridStepDTO]] = {}

    def export(self, steps: list[GridStepDTO], path: str) -> str:
        self.exports[path] = list(steps)
        return path
