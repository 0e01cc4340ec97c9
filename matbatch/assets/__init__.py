"""Material asset model, asset sources and the selection registry."""

from matbatch.assets.material_pass import BlendMode, MaterialPass, make_color_mask
from matbatch.assets.project_asset import (
    MATERIAL_TYPE_NAME,
    UNTITLED_MATERIAL_NAME,
    ProjectAsset,
    resolve_display_name,
)
from matbatch.assets.asset_source import AssetSource, CallableAssetSource, InMemoryAssetSource
from matbatch.assets.asset_registry import AssetRegistry, RefreshReport, SelectionEntry

__all__ = [
    "AssetRegistry",
    "AssetSource",
    "BlendMode",
    "CallableAssetSource",
    "InMemoryAssetSource",
    "MATERIAL_TYPE_NAME",
    "MaterialPass",
    "ProjectAsset",
    "RefreshReport",
    "SelectionEntry",
    "UNTITLED_MATERIAL_NAME",
    "make_color_mask",
    "resolve_display_name",
]
