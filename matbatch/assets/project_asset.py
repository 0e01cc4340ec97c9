"""ProjectAsset - handle to a resource owned by the host project model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matbatch.core.identifiable import Identifiable

if TYPE_CHECKING:
    from matbatch.assets.material_pass import MaterialPass

MATERIAL_TYPE_NAME = "Material"
UNTITLED_MATERIAL_NAME = "Untitled Material"


class ProjectAsset(Identifiable):
    """
    Asset as seen by the batch tools.

    The host project owns the asset; the tools only keep a reference
    and mutate main_pass in place.

    main_pass is None for assets without a render-pass block
    (e.g. a material variant without a main pass). That is a valid
    state, and mutators skip such assets.
    """

    def __init__(
        self,
        type_name: str,
        name: str | None = None,
        display_name: str | None = None,
        main_pass: "MaterialPass | None" = None,
        uuid: str | None = None,
    ):
        super().__init__(uuid=uuid)
        self.type_name = type_name
        self.name = name
        self.display_name = display_name
        self.main_pass = main_pass

    @property
    def is_material(self) -> bool:
        return self.type_name == MATERIAL_TYPE_NAME

    @property
    def has_main_pass(self) -> bool:
        return self.main_pass is not None

    def __repr__(self) -> str:
        return f"ProjectAsset({self.type_name!r}, {resolve_display_name(self)!r}, uuid={self.uuid!r})"


def resolve_display_name(asset: ProjectAsset) -> str:
    """display_name -> name -> "Untitled Material". Empty strings count as missing."""
    return asset.display_name or asset.name or UNTITLED_MATERIAL_NAME
