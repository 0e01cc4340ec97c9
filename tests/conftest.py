import pytest

from matbatch.assets import InMemoryAssetSource, MaterialPass, ProjectAsset


def make_material(name: str | None = None, display_name: str | None = None, with_pass: bool = True) -> ProjectAsset:
    return ProjectAsset(
        type_name="Material",
        name=name,
        display_name=display_name,
        main_pass=MaterialPass() if with_pass else None,
    )


@pytest.fixture
def materials():
    """Пять материалов с main pass."""
    return [make_material(name=f"Mat_{i:02d}") for i in range(1, 6)]


@pytest.fixture
def source(materials):
    """Проект: материалы вперемешку с ассетами других типов."""
    src = InMemoryAssetSource()
    src.add(ProjectAsset(type_name="Texture", name="Albedo"))
    for i, mat in enumerate(materials):
        src.add(mat)
        if i == 2:
            src.add(ProjectAsset(type_name="Mesh", name="Rock"))
    return src
