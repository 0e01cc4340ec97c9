"""
Matbatch - пакетное редактирование материалов в редакторе.

Основные модули:
- assets - модель материалов, источники ассетов, реестр выделения
- editor - применение мутаций к выделенным материалам, панель PyQt6
- log - логирование
"""

from matbatch.assets import AssetRegistry, MaterialPass, ProjectAsset
from matbatch.editor import BatchMutator, MutationResult
from matbatch.errors import CollaboratorUnavailable, MutationFailure

__version__ = '0.1.0'

__all__ = [
    'AssetRegistry',
    'BatchMutator',
    'CollaboratorUnavailable',
    'MaterialPass',
    'MutationFailure',
    'MutationResult',
    'ProjectAsset',
]
