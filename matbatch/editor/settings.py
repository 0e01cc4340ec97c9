"""
Настройки панели пакетной оптимизации материалов.

Хранятся через QSettings, между сессиями. Выделение материалов
сюда не попадает: оно живёт только до следующего refresh.
"""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QSettings

from matbatch import log
from matbatch.assets.project_asset import MATERIAL_TYPE_NAME


class EditorSettings:
    """
    Менеджер настроек панели.

    Singleton-класс для доступа к настройкам из любого места.
    Настройки хранятся в:
    - Windows: реестр HKEY_CURRENT_USER\\Software\\Matbatch\\BatchMaterialOptimizer
    - Linux: ~/.config/Matbatch/BatchMaterialOptimizer.conf
    - macOS: ~/Library/Preferences/com.matbatch.BatchMaterialOptimizer.plist
    """

    _instance: "EditorSettings | None" = None

    # Ключи настроек
    KEY_MATERIAL_TYPE_NAME = "BatchMaterialOptimizer/materialTypeName"
    KEY_LOG_LEVEL = "BatchMaterialOptimizer/logLevel"

    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, settings: QSettings | None = None):
        self._settings = settings if settings is not None else QSettings("Matbatch", "BatchMaterialOptimizer")

    @classmethod
    def instance(cls) -> "EditorSettings":
        """Получить singleton экземпляр."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.value(key, default)

    def set(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)

    def sync(self) -> None:
        """Принудительно сохранить настройки на диск."""
        self._settings.sync()

    # --- Удобные методы ---

    def get_material_type_name(self) -> str:
        """Тег типа, по которому источник ассетов фильтруется до материалов."""
        value = self.get(self.KEY_MATERIAL_TYPE_NAME)
        return str(value) if value else MATERIAL_TYPE_NAME

    def set_material_type_name(self, type_name: str) -> None:
        self.set(self.KEY_MATERIAL_TYPE_NAME, type_name)

    def get_log_level(self) -> str:
        value = self.get(self.KEY_LOG_LEVEL)
        return str(value) if value else self.DEFAULT_LOG_LEVEL

    def set_log_level(self, level: str) -> None:
        self.set(self.KEY_LOG_LEVEL, level.upper())

    def apply_log_level(self) -> None:
        """Применить сохранённый уровень к matbatch.log; битое значение - откат на INFO."""
        level = self.get_log_level()
        try:
            log.set_level(level)
        except ValueError as e:
            log.warn(e, f"Bad log level in settings: {level!r}")
            log.set_level(self.DEFAULT_LOG_LEVEL)
