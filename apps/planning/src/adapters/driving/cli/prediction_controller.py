"""Prediction CLI Controller

Driving Adapter: 將 CLI 指令轉換為 Use Case 調用
"""

from collections.abc import Callable

from injector import Injector

from libs.gridding.src.ports.calculate_grid_port import CalculateGridPort
from libs.gridding.src.ports.get_grid_settings_port import GetGridSettingsPort
from libs.predicting.src.ports.create_prediction_port import CreatePredictionPort
from libs.predicting.src.ports.delete_prediction_port import DeletePredictionPort
from libs.predicting.src.ports.duplicate_prediction_port import (
    DuplicatePredictionPort,
)
from libs.predicting.src.ports.get_prediction_port import GetPredictionPort
from libs.predicting.src.ports.get_prediction_stats_port import (
    GetPredictionStatsPort,
)
from libs.predicting.src.ports.list_predictions_port import ListPredictionsPort
from libs.predicting.src.ports.refresh_prediction_results_port import (
    RefreshPredictionResultsPort,
)
from libs.predicting.src.ports.update_prediction_port import UpdatePredictionPort
from libs.shared.src.dtos.grid.grid_parameters_dto import GridParametersDTO

from apps.planning.src.adapters.driving.cli.grid_controller import (
    print_grid_table,
    print_settings,
)


class PredictionController:
    """預測管理 CLI 控制器"""

    def __init__(
        self, injector: Injector, prompt: Callable[[str], str] = input
    ) -> None:
        self._injector = injector
        self._prompt = prompt

    def save(
        self,
        name: str,
        description: str | None = None,
        stock_code: str | None = None,
        with_results: bool = False,
    ) -> None:
        """將目前參數存成預測

        Args:
            name: 預測名稱
            description: 說明
            stock_code: 股票代號
            with_results: 一併儲存計算結果
        """
        parameters: GridParametersDTO = dict(  # type: ignore[assignment]
            self._injector.get(GetGridSettingsPort).execute()
        )
        if stock_code:
            # fire 會將純數字代號轉為 int
            parameters["stock_code"] = str(stock_code)

        results = None
        if with_results:
            results = self._injector.get(CalculateGridPort).execute()

        prediction = self._injector.get(CreatePredictionPort).execute(
            name=str(name),
            parameters=parameters,
            description=description,
            results=results,
        )
        print(f"✅ 已儲存預測 {prediction['name']} ({prediction['id']})")

    def list(self) -> None:
        """列出所有預測 (新的在前)"""
        predictions = self._injector.get(ListPredictionsPort).execute()
        if not predictions:
            print("尚無預測")
            return

        for p in predictions:
            stock = p["parameters"].get("stock_code") or "-"
            cached = "📦" if p.get("results") else "  "
            print(f"{cached} {p['id']}  {p['name']}  [{stock}]  {p['updated_at']}")

    def show(self, prediction_id: str) -> None:
        """顯示預測內容"""
        prediction = self._injector.get(GetPredictionPort).execute(str(prediction_id))
        if prediction is None:
            print(f"❌ 找不到預測 {prediction_id}")
            return

        print("\n" + "=" * 50)
        print(f"📄 {prediction['name']}")
        print("=" * 50)
        if prediction.get("description"):
            print(prediction["description"])
        print(f"ID: {prediction['id']}")
        print(f"建立: {prediction['created_at']}  更新: {prediction['updated_at']}")
        if prediction["parameters"].get("stock_code"):
            print(f"股票代號: {prediction['parameters']['stock_code']}")
        print_settings(prediction["parameters"])

        results = prediction.get("results")
        if results:
            print(f"\n所需總資金: {results['total_required_capital']:.2f}")
            print_grid_table(results["grid_data"])

    def rename(
        self, prediction_id: str, name: str, description: str | None = None
    ) -> None:
        """修改名稱與說明"""
        updated = self._injector.get(UpdatePredictionPort).execute(
            str(prediction_id), {"name": str(name), "description": description}
        )
        if not updated:
            print(f"❌ 找不到預測 {prediction_id}")
            return
        print("✅ 預測已更新")

    def refresh(self, prediction_id: str) -> None:
        """依已存參數重算快取結果"""
        if not self._injector.get(RefreshPredictionResultsPort).execute(
            str(prediction_id)
        ):
            print(f"❌ 找不到預測 {prediction_id}")
            return
        print("✅ 計算結果已更新")

    def copy(self, prediction_id: str) -> None:
        """複製預測"""
        duplicate = self._injector.get(DuplicatePredictionPort).execute(
            str(prediction_id)
        )
        if duplicate is None:
            print(f"❌ 找不到預測 {prediction_id}")
            return
        print(f"✅ 已複製為 {duplicate['name']} ({duplicate['id']})")

    def delete(self, prediction_id: str, yes: bool = False) -> None:
        """刪除預測，未加 --yes 時先確認"""
        prediction_id = str(prediction_id)
        if not yes:
            prediction = self._injector.get(GetPredictionPort).execute(prediction_id)
            if prediction is None:
                print(f"❌ 找不到預測 {prediction_id}")
                return
            answer = self._prompt(f"確定刪除「{prediction['name']}」？此操作無法復原 [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                print("已取消")
                return

        if not self._injector.get(DeletePredictionPort).execute(prediction_id):
            print(f"❌ 找不到預測 {prediction_id}")
            return
        print("✅ 預測已刪除")

    def stats(self) -> None:
        """預測統計"""
        stats = self._injector.get(GetPredictionStatsPort).execute()
        print(f"📊 預測總數: {stats['total']}  近 7 日新增: {stats['recent']}")
