"""Grid CLI Controller

Driving Adapter: 將 CLI 指令轉換為 Use Case 調用
"""

from injector import Injector

from libs.gridding.src.ports.calculate_grid_port import CalculateGridPort
from libs.gridding.src.ports.export_grid_port import ExportGridPort
from libs.gridding.src.ports.get_grid_settings_port import GetGridSettingsPort
from libs.gridding.src.ports.reset_grid_settings_port import ResetGridSettingsPort
from libs.gridding.src.ports.update_grid_settings_port import UpdateGridSettingsPort
from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO
from libs.shared.src.dtos.grid.grid_step_dto import GridStepDTO
from libs.shared.src.errors.domain_error import DomainError

SETTING_LABELS = {
    "initial_price": "初始價格",
    "buy_grid_percent": "買入網格 %",
    "sell_grid_percent": "賣出網格 %",
    "buy_amount": "每格買入金額",
    "sell_amount": "每格賣出金額",
    "grid_count": "網格數量",
    "max_investment": "最大投入",
}


def print_settings(settings: GridSettingsDTO) -> None:
    for field, label in SETTING_LABELS.items():
        print(f"   {label:<12} {settings[field]}")


def print_grid_table(steps: list[GridStepDTO]) -> None:
    """輸出網格表"""
    print(
        f"{'#':>3} {'買入價':>10} {'賣出價':>10} {'累計投入':>12} "
        f"{'持股':>12} {'均價':>10} {'浮動損益':>12} {'損益%':>8} {'跌幅%':>8}"
    )
    for s in steps:
        flag = " ⚠️" if s["is_warning"] else ""
        print(
            f"{s['index']:>3} {s['buy_price']:>10.4f} {s['sell_price']:>10.4f} "
            f"{s['total_investment']:>12.2f} {s['total_shares']:>12.2f} "
            f"{s['average_cost']:>10.4f} {s['floating_pl']:>12.2f} "
            f"{s['floating_pl_percent']:>8.2f} {s['price_drop_percent']:>8.2f}{flag}"
        )


class GridController:
    """網格計算器 CLI 控制器"""

    def __init__(self, injector: Injector) -> None:
        self._injector = injector

    def show(self) -> None:
        """依目前參數計算並顯示網格表"""
        result = self._injector.get(CalculateGridPort).execute()
        steps = result["grid_data"]

        if not steps:
            print(
                "⚠️ 參數無效 (價格、買入網格 %、網格數量、買入金額須大於 0，"
                "買入網格 % 須小於 100，末格價格不可趨近 0)，無網格可顯示"
            )
            return

        print("\n" + "=" * 50)
        print("📊 網格交易計算表")
        print("=" * 50)
        print_grid_table(steps)
        print("=" * 50)
        print(f"所需總資金: {result['total_required_capital']:.2f}")
        warnings = sum(1 for s in steps if s["is_warning"])
        if warnings:
            print(f"⚠️ {warnings} 格超過最大投入")

    def settings(self) -> None:
        """顯示目前參數"""
        print("⚙️ 目前參數:")
        print_settings(self._injector.get(GetGridSettingsPort).execute())

    def set(self, **fields: float) -> None:
        """更新參數

        Example:
            wangge grid set --initial_price=25.5 --grid_count=20
        """
        if not fields:
            print(f"請指定至少一個參數: {', '.join(SETTING_LABELS)}")
            return

        try:
            settings = self._injector.get(UpdateGridSettingsPort).execute(**fields)
        except DomainError as e:
            print(f"❌ {e.message}")
            return

        print("✅ 參數已更新")
        print_settings(settings)

    def reset(self) -> None:
        """還原預設參數"""
        settings = self._injector.get(ResetGridSettingsPort).execute()
        print("✅ 已還原預設參數")
        print_settings(settings)

    def export(self, path: str = "data/grid.csv") -> None:
        """匯出網格表為 CSV"""
        result = self._injector.get(ExportGridPort).execute(path=str(path))
        if result.get("status") == "success":
            print(f"✅ 已匯出 {result.get('count', 0)} 格至 {result.get('path')}")
        else:
            print(f"⚠️ {result.get('message', '未匯出')}")
