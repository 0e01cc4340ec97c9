"""
BatchMutator - applies one named transform to every selected asset.

Best-effort, partial-success policy: a failing asset is logged and
counted, iteration continues, and changes already applied to other
assets are never rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from matbatch import log
from matbatch.assets.asset_registry import AssetRegistry
from matbatch.assets.project_asset import ProjectAsset, resolve_display_name
from matbatch.core.event import Event
from matbatch.errors import MutationFailure

Mutator = Callable[[ProjectAsset], None]


@dataclass
class MutationResult:
    mutation_name: str
    attempted: int = 0
    succeeded: int = 0
    failures: List[MutationFailure] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    def status_message(self) -> str:
        return f"Successfully modified {self.succeeded} materials ({self.mutation_name})."


class BatchMutator:
    """
    Генерик-применитель мутаций.

    Сам мутации не знает: функция передаётся в apply(), либо
    берётся по имени из каталога в apply_named().
    Состояния между вызовами не хранит (кроме подписчиков on_applied).
    """

    def __init__(self, catalog: Optional[Mapping[str, Mutator]] = None):
        self._catalog: Dict[str, Mutator] = dict(catalog or {})
        self.on_applied: Event[MutationResult] = Event()

    @property
    def mutation_names(self) -> List[str]:
        return list(self._catalog.keys())

    def apply(self, mutation_name: str, mutator: Mutator, registry: AssetRegistry) -> MutationResult:
        result = MutationResult(mutation_name=mutation_name)

        for asset in registry.selected_assets():
            result.attempted += 1
            try:
                mutator(asset)
            except Exception as e:
                label = resolve_display_name(asset)
                log.error(e, f"Failed to mutate material {label} ({asset.uuid})")
                result.failures.append(MutationFailure(asset_uuid=asset.uuid, label=label, error=str(e)))
                continue
            result.succeeded += 1
            if asset.main_pass is not None:
                log.debug(f"[BatchMutator] {mutation_name}: {asset.uuid} -> {asset.main_pass.serialize()}")

        if result.failures:
            log.warn(
                f"[BatchMutator] {mutation_name}: {result.failed} of {result.attempted} materials failed"
            )
        else:
            log.info(f"[BatchMutator] {result.status_message()}")

        # Подписчик не должен отнять результат у вызывающего
        try:
            self.on_applied.emit(result)
        except Exception as e:
            log.error(e, f"[BatchMutator] on_applied handler failed after {mutation_name}")
        return result

    def apply_named(self, mutation_name: str, registry: AssetRegistry) -> MutationResult:
        """Apply a catalog mutation. Unknown name raises KeyError."""
        mutator = self._catalog.get(mutation_name)
        if mutator is None:
            raise KeyError(f"unknown mutation: {mutation_name}")
        return self.apply(mutation_name, mutator, registry)
