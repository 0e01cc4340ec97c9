"""
Источники ассетов для пакетного редактирования.

Источник - это уже загруженная in-process модель проекта хоста.
Единственная ошибка, которую он сообщает - CollaboratorUnavailable.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from matbatch.assets.project_asset import ProjectAsset
from matbatch.errors import CollaboratorUnavailable


class AssetSource:
    """Базовый класс источника ассетов проекта."""

    def assets(self) -> Sequence[ProjectAsset]:
        """
        Все ассеты проекта, в порядке модели проекта.

        Raises:
            CollaboratorUnavailable: модель проекта недоступна.
        """
        raise NotImplementedError


class InMemoryAssetSource(AssetSource):
    """Локальная модель проекта в памяти."""

    def __init__(self, assets: Iterable[ProjectAsset] = ()):
        self._assets: List[ProjectAsset] = list(assets)
        self.available = True

    def assets(self) -> Sequence[ProjectAsset]:
        if not self.available:
            raise CollaboratorUnavailable()
        return tuple(self._assets)

    def add(self, asset: ProjectAsset) -> ProjectAsset:
        self._assets.append(asset)
        return asset

    def remove(self, asset: ProjectAsset) -> None:
        self._assets.remove(asset)

    def clear(self) -> None:
        self._assets.clear()

    def __len__(self) -> int:
        return len(self._assets)


class CallableAssetSource(AssetSource):
    """
    Обёртка над хуком хоста вида "get model or null".

    provider возвращает коллекцию ассетов или None, если модель
    редактора ещё не поднята.
    """

    def __init__(self, provider: Callable[[], Optional[Iterable[ProjectAsset]]]):
        self._provider = provider

    def assets(self) -> Sequence[ProjectAsset]:
        try:
            assets = self._provider()
        except CollaboratorUnavailable:
            raise
        except Exception as e:
            raise CollaboratorUnavailable(f"Editor model is not available: {e}") from e
        if assets is None:
            raise CollaboratorUnavailable()
        return tuple(assets)
