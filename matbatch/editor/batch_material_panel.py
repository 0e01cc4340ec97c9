"""
Панель пакетной оптимизации материалов.

Тонкая обёртка над AssetRegistry и BatchMutator:
- Refresh Material List -> registry.refresh(source)
- Select All / Deselect All / чекбокс на материал -> флаги выделения
- кнопки Quick Actions -> mutator.apply_named(...)
- статусная строка показывает результат последнего действия
"""

from __future__ import annotations

from typing import Dict, List, Optional

from PyQt6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from matbatch.assets.asset_registry import AssetRegistry
from matbatch.assets.asset_source import AssetSource
from matbatch.editor.batch_mutator import BatchMutator, MutationResult
from matbatch.editor.material_mutations import MUTATION_GROUPS, MUTATIONS
from matbatch.editor.settings import EditorSettings
from matbatch.errors import CollaboratorUnavailable


class BatchMaterialPanel(QWidget):
    """
    Batch Material Optimizer.

    Никакой логики кроме проводки: все решения принимают
    AssetRegistry и BatchMutator.
    """

    def __init__(
        self,
        asset_source: AssetSource | None,
        registry: AssetRegistry | None = None,
        mutator: BatchMutator | None = None,
        settings: EditorSettings | None = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._asset_source = asset_source

        if registry is None:
            settings = settings if settings is not None else EditorSettings.instance()
            settings.apply_log_level()
            registry = AssetRegistry(type_name=settings.get_material_type_name())
        self._registry = registry
        self._mutator = mutator if mutator is not None else BatchMutator(MUTATIONS)

        self._checkboxes: List[QCheckBox] = []
        self._action_buttons: Dict[str, QPushButton] = {}

        self._registry.on_entries_changed += self._on_entries_changed
        self._registry.on_selection_changed += self._on_selection_changed
        self._registry.on_refresh_failed += self._on_refresh_failed
        self._mutator.on_applied += self._on_applied

        self._init_ui()

        # Initial load
        self.refresh()

    @property
    def registry(self) -> AssetRegistry:
        return self._registry

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def checkboxes(self) -> List[QCheckBox]:
        return list(self._checkboxes)

    def action_button(self, mutation_name: str) -> QPushButton:
        return self._action_buttons[mutation_name]

    def set_asset_source(self, asset_source: AssetSource | None) -> None:
        self._asset_source = asset_source

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        # --- Material Selection ---
        layout.addWidget(QLabel("Material Selection"))

        self._refresh_button = QPushButton("Refresh Material List")
        self._refresh_button.clicked.connect(self.refresh)
        layout.addWidget(self._refresh_button)

        self._select_all_button = QPushButton("Select All")
        self._select_all_button.clicked.connect(lambda: self._registry.set_all_selected(True))
        self._deselect_all_button = QPushButton("Deselect All")
        self._deselect_all_button.clicked.connect(lambda: self._registry.set_all_selected(False))
        layout.addWidget(self._make_row([self._select_all_button, self._deselect_all_button]))

        layout.addWidget(QLabel("Materials to optimize:"))

        self._scroll_area = QScrollArea()
        self._scroll_area.setWidgetResizable(True)
        self._list_widget = QWidget()
        self._list_layout = QVBoxLayout(self._list_widget)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.addStretch(1)
        self._scroll_area.setWidget(self._list_widget)
        layout.addWidget(self._scroll_area)

        layout.addWidget(self._make_separator())

        # --- Quick Actions ---
        layout.addWidget(QLabel("Quick Actions"))
        for group_title, actions in MUTATION_GROUPS:
            layout.addWidget(QLabel(group_title))
            buttons = []
            for button_text, mutation_name in actions:
                button = QPushButton(button_text)
                button.clicked.connect(lambda _=False, name=mutation_name: self.apply_mutation(name))
                self._action_buttons[mutation_name] = button
                buttons.append(button)
            layout.addWidget(self._make_row(buttons))

        layout.addWidget(self._make_separator())

        # --- Status ---
        self._status_label = QLabel("Ready.")
        self._status_label.setWordWrap(True)
        layout.addWidget(self._status_label)

        layout.addStretch(0)

    def _make_row(self, widgets: List[QWidget]) -> QWidget:
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)
        for widget in widgets:
            row_layout.addWidget(widget)
        return row

    def _make_separator(self) -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Plain)
        return line

    # --- Actions ---

    def refresh(self) -> None:
        report = self._registry.refresh(self._asset_source)
        if report.ok:
            self._status_label.setText(report.status_message())

    def apply_mutation(self, mutation_name: str) -> MutationResult:
        return self._mutator.apply_named(mutation_name, self._registry)

    def detach(self) -> None:
        """Отписаться от событий реестра и мутатора."""
        self._registry.on_entries_changed -= self._on_entries_changed
        self._registry.on_selection_changed -= self._on_selection_changed
        self._registry.on_refresh_failed -= self._on_refresh_failed
        self._mutator.on_applied -= self._on_applied

    # --- Event handlers ---

    def _on_entries_changed(self, registry: AssetRegistry) -> None:
        for checkbox in self._checkboxes:
            self._list_layout.removeWidget(checkbox)
            checkbox.deleteLater()
        self._checkboxes = []

        for index, entry in enumerate(registry.entries):
            checkbox = QCheckBox(entry.label)
            checkbox.setChecked(entry.selected)
            checkbox.toggled.connect(lambda checked, i=index: self._registry.set_selected(i, checked))
            # Перед stretch в конце списка
            self._list_layout.insertWidget(self._list_layout.count() - 1, checkbox)
            self._checkboxes.append(checkbox)

    def _on_selection_changed(self, registry: AssetRegistry) -> None:
        for checkbox, entry in zip(self._checkboxes, registry.entries):
            if checkbox.isChecked() != entry.selected:
                checkbox.blockSignals(True)
                checkbox.setChecked(entry.selected)
                checkbox.blockSignals(False)

    def _on_refresh_failed(self, error: CollaboratorUnavailable) -> None:
        self._show_error(error.message)

    def _on_applied(self, result: MutationResult) -> None:
        self._status_label.setText(result.status_message())

    def _show_error(self, message: str) -> None:
        QMessageBox.warning(self, "Error", message)
