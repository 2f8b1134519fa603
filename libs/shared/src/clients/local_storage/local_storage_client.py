"""Local Storage Client

Key-value 儲存，模擬瀏覽器 localStorage，供各 BC 的 Adapters 引用。
"""

import json
import logging
from pathlib import Path
from typing import Any


class LocalStorageClient:
    """本地 Key-Value 儲存

    每個 key 對應一個 JSON 檔: {base_dir}/{key}.json
    寫入一律整筆覆蓋，不做增量更新

    Usage:
        client = LocalStorageClient(base_dir="data/local_storage")
        client.set_item("wangge-predictions", [])
        predictions = client.get_item("wangge-predictions", [])
    """

    def __init__(self, base_dir: str | Path = "data/local_storage") -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        """儲存目錄"""
        return self._base_dir

    def _get_file_path(self, key: str) -> Path:
        """取得 key 對應的 JSON 檔案路徑"""
        return self._base_dir / f"{key}.json"

    def has_item(self, key: str) -> bool:
        """檢查 key 是否存在"""
        return self._get_file_path(key).exists()

    def get_item(self, key: str, default: Any = None) -> Any:
        """讀取資料

        Args:
            key: 儲存鍵
            default: key 不存在或內容無法解析時的回傳值

        Returns:
            反序列化後的值
        """
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return default

        try:
            return json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            self._logger.warning(f"Failed to read {key}: {e}")
            return default

    def set_item(self, key: str, value: Any) -> None:
        """寫入資料 (整筆覆蓋)

        Args:
            key: 儲存鍵
            value: 可 JSON 序列化的值
        """
        self._base_dir.mkdir(parents=True, exist_ok=True)
        self._get_file_path(key).write_text(
            json.dumps(value, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def remove_item(self, key: str) -> None:
        """刪除資料，key 不存在時不做事"""
        self._get_file_path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        """列出所有已儲存的 key"""
        if not self._base_dir.exists():
            return []
        return sorted(file.stem for file in self._base_dir.glob("*.json"))
