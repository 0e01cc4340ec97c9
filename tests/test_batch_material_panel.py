"""
Тесты панели Batch Material Optimizer (offscreen Qt).
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from unittest.mock import MagicMock

from matbatch.assets import AssetRegistry, InMemoryAssetSource
from matbatch.editor.batch_material_panel import BatchMaterialPanel

from conftest import make_material


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def errors(monkeypatch):
    shown = []
    monkeypatch.setattr(BatchMaterialPanel, "_show_error", lambda self, message: shown.append(message))
    return shown


def test_initial_load_builds_checkboxes(qapp, source, errors):
    panel = BatchMaterialPanel(source, registry=AssetRegistry())

    assert [cb.text() for cb in panel.checkboxes] == ["Mat_01", "Mat_02", "Mat_03", "Mat_04", "Mat_05"]
    assert all(cb.isChecked() for cb in panel.checkboxes)
    assert panel.status_text == "Found 5 Materials."
    assert errors == []


def test_checkbox_toggles_registry(qapp, source, materials, errors):
    panel = BatchMaterialPanel(source, registry=AssetRegistry())

    panel.checkboxes[0].setChecked(False)

    assert panel.registry.selected_assets() == materials[1:]


def test_deselect_all_then_action(qapp, source, materials, errors):
    panel = BatchMaterialPanel(source, registry=AssetRegistry())

    panel._deselect_all_button.click()
    assert not any(cb.isChecked() for cb in panel.checkboxes)

    panel.checkboxes[3].setChecked(True)
    panel.action_button("Visibility Off").click()

    assert panel.status_text == "Successfully modified 1 materials (Visibility Off)."
    assert materials[3].main_pass.color_mask.tolist() == [False] * 4
    assert materials[0].main_pass.color_mask.tolist() == [True] * 4

    panel._select_all_button.click()
    assert all(cb.isChecked() for cb in panel.checkboxes)


def test_unavailable_source_shows_error_once(qapp, errors):
    source = InMemoryAssetSource([make_material(name="A")])
    panel = BatchMaterialPanel(source, registry=AssetRegistry())

    source.available = False
    panel.refresh()

    assert errors == ["Editor model is not available."]
    assert len(panel.checkboxes) == 1
    assert panel.status_text == "Found 1 Materials."


def test_missing_source_on_open(qapp, errors):
    panel = BatchMaterialPanel(None, registry=AssetRegistry())

    assert errors == ["Editor model is not available."]
    assert panel.checkboxes == []
    assert panel.status_text == "Ready."


def test_registry_built_from_settings(qapp, errors):
    settings = MagicMock()
    settings.get_material_type_name.return_value = "MaterialVariant"
    source = InMemoryAssetSource([
        make_material(name="plain"),
        make_material(name="variant"),
    ])
    source.assets()[1].type_name = "MaterialVariant"

    panel = BatchMaterialPanel(source, settings=settings)

    settings.apply_log_level.assert_called_once()
    assert panel.registry.type_name == "MaterialVariant"
    assert [cb.text() for cb in panel.checkboxes] == ["variant"]


def test_detach_stops_status_updates(qapp, source, errors):
    panel = BatchMaterialPanel(source, registry=AssetRegistry())
    panel.detach()

    panel.apply_mutation("Two Sided On")

    assert panel.status_text == "Found 5 Materials."


def test_swap_source_and_refresh(qapp, source, errors):
    panel = BatchMaterialPanel(source, registry=AssetRegistry())

    other = InMemoryAssetSource([make_material(name="Rock_01"), make_material()])
    panel.set_asset_source(other)
    panel._refresh_button.click()

    assert [cb.text() for cb in panel.checkboxes] == ["Rock_01", "Untitled Material"]
    assert panel.status_text == "Found 2 Materials."

    panel.set_asset_source(None)
    panel.refresh()

    assert errors == ["Editor model is not available."]
    assert len(panel.checkboxes) == 2
