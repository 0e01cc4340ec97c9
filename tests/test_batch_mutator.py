"""
Тесты BatchMutator: подсчёт, изоляция ошибок по ассетам, каталог.
"""

import logging
from unittest.mock import MagicMock

import pytest

from matbatch.assets import AssetRegistry, InMemoryAssetSource
from matbatch.editor import BatchMutator, MutationResult
from matbatch.editor.material_mutations import MUTATIONS, VISIBILITY_OFF

from conftest import make_material


def _registry(assets):
    registry = AssetRegistry()
    registry.refresh(InMemoryAssetSource(assets))
    return registry


def test_apply_counts_all_selected(materials):
    registry = _registry(materials)
    seen = []

    result = BatchMutator().apply("Touch", seen.append, registry)

    assert seen == materials
    assert result == MutationResult(mutation_name="Touch", attempted=5, succeeded=5)
    assert result.failed == 0
    assert result.status_message() == "Successfully modified 5 materials (Touch)."


def test_apply_only_touches_selected(materials):
    registry = _registry(materials)
    registry.set_all_selected(False)
    registry.set_selected(1, True)
    registry.set_selected(4, True)
    seen = []

    result = BatchMutator().apply("Touch", seen.append, registry)

    assert seen == [materials[1], materials[4]]
    assert result.attempted == 2
    assert result.succeeded == 2


def test_apply_with_nothing_selected(materials):
    registry = _registry(materials)
    registry.set_all_selected(False)
    mutator = MagicMock()

    result = BatchMutator().apply("Noop", mutator, registry)

    mutator.assert_not_called()
    assert result.attempted == 0
    assert result.succeeded == 0


def test_always_failing_mutator(materials, caplog):
    registry = _registry(materials)
    before = [m.main_pass.serialize() for m in materials]

    def explode(asset):
        raise RuntimeError("read-only asset")

    with caplog.at_level(logging.ERROR, logger="matbatch"):
        result = BatchMutator().apply("Explode", explode, registry)

    assert result.attempted == 5
    assert result.succeeded == 0
    assert len(result.failures) == 5
    assert [m.main_pass.serialize() for m in materials] == before
    assert "Failed to mutate material Mat_01" in caplog.text
    assert "read-only asset" in caplog.text


def test_one_failure_does_not_abort_batch(materials):
    """Ошибка на одном ассете: остальные всё равно изменены, без отката."""
    registry = _registry(materials)
    bad = materials[2]

    def depth_off_or_fail(asset):
        if asset is bad:
            raise ValueError("locked")
        asset.main_pass.depth_write = False

    result = BatchMutator().apply("Depth Write Off", depth_off_or_fail, registry)

    assert result.attempted == 5
    assert result.succeeded == 4
    assert result.failed == 1
    failure = result.failures[0]
    assert failure.asset_uuid == bad.uuid
    assert failure.label == "Mat_03"
    assert failure.error == "locked"
    assert "locked" in failure.describe()
    assert bad.main_pass.depth_write is True
    assert [m.main_pass.depth_write for m in materials if m is not bad] == [False] * 4


def test_depth_write_off_skips_asset_without_main_pass():
    first = make_material(name="A")
    second = make_material(name="B", with_pass=False)
    third = make_material(name="C")
    registry = _registry([first, second, third])

    result = BatchMutator(MUTATIONS).apply_named("Depth Write Off", registry)

    assert result.attempted == 3
    assert result.succeeded == 3
    assert first.main_pass.depth_write is False
    assert second.main_pass is None
    assert third.main_pass.depth_write is False


def test_visibility_off_on_single_selected(materials):
    registry = _registry(materials)
    registry.set_all_selected(False)
    registry.set_selected(3, True)

    result = BatchMutator(MUTATIONS).apply_named(VISIBILITY_OFF, registry)

    assert result.attempted == 1
    assert result.succeeded == 1
    for i, mat in enumerate(materials):
        expected = [False] * 4 if i == 3 else [True] * 4
        assert mat.main_pass.color_mask.tolist() == expected


def test_apply_named_unknown_raises(materials):
    registry = _registry(materials)
    with pytest.raises(KeyError):
        BatchMutator(MUTATIONS).apply_named("Make It Shiny", registry)


def test_on_applied_emitted_once_per_apply(materials):
    registry = _registry(materials)
    mutator = BatchMutator(MUTATIONS)
    handler = MagicMock()
    mutator.on_applied += handler

    result = mutator.apply_named("Two Sided On", registry)

    handler.assert_called_once_with(result)
    assert all(m.main_pass.two_sided for m in materials)


def test_mutator_is_stateless_between_calls(materials):
    registry = _registry(materials)
    mutator = BatchMutator(MUTATIONS)

    first = mutator.apply_named("Blend Normal", registry)
    registry.set_all_selected(False)
    second = mutator.apply_named("Blend Normal", registry)

    assert first.attempted == 5
    assert second.attempted == 0
    assert second.failures == []
    assert mutator.mutation_names == list(MUTATIONS.keys())


def test_failing_subscriber_does_not_lose_result(materials, caplog):
    registry = _registry(materials)
    mutator = BatchMutator(MUTATIONS)

    def broken_handler(result):
        raise RuntimeError("status label gone")

    mutator.on_applied += broken_handler

    with caplog.at_level(logging.ERROR, logger="matbatch"):
        result = mutator.apply_named("Depth Write Off", registry)

    assert result.attempted == 5
    assert result.succeeded == 5
    assert all(m.main_pass.depth_write is False for m in materials)
    assert "on_applied handler failed" in caplog.text
    assert "status label gone" in caplog.text
