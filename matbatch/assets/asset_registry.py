"""
AssetRegistry — list of candidate material assets and their selection flags.

Entries are rebuilt wholesale on every refresh: no incremental diffing,
prior selection state is discarded. Every freshly loaded asset starts
selected (opt-out).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from matbatch import log
from matbatch.assets.asset_source import AssetSource
from matbatch.assets.project_asset import MATERIAL_TYPE_NAME, ProjectAsset, resolve_display_name
from matbatch.core.event import Event
from matbatch.errors import CollaboratorUnavailable


@dataclass
class SelectionEntry:
    """One loaded asset paired with its selection flag."""

    asset: ProjectAsset
    selected: bool = True
    label: str = ""

    def __post_init__(self):
        if not self.label:
            self.label = resolve_display_name(self.asset)


@dataclass(frozen=True)
class RefreshReport:
    """Outcome of AssetRegistry.refresh()."""

    ok: bool
    count: int
    error: Optional[CollaboratorUnavailable] = None

    def status_message(self) -> str:
        if not self.ok:
            return self.error.message if self.error is not None else "Refresh failed."
        return f"Found {self.count} Materials."


class AssetRegistry:
    """
    Registry of material assets available for batch editing.

    Handles:
    - refresh(source) -> RefreshReport
    - set_all_selected(flag), set_selected(index, flag), toggle(index)
    - selected_assets() in registry order
    - labels(), find_entry(uuid)

    Events:
        on_entries_changed: emitted after a successful refresh
        on_selection_changed: emitted after any change of selection flags
        on_refresh_failed: emitted once per failed refresh
    """

    def __init__(self, type_name: str = MATERIAL_TYPE_NAME):
        self._type_name = type_name
        self._entries: List[SelectionEntry] = []

        self.on_entries_changed: Event["AssetRegistry"] = Event()
        self.on_selection_changed: Event["AssetRegistry"] = Event()
        self.on_refresh_failed: Event[CollaboratorUnavailable] = Event()

    @property
    def type_name(self) -> str:
        """Type tag an asset must carry to be listed."""
        return self._type_name

    @property
    def entries(self) -> Tuple[SelectionEntry, ...]:
        """Snapshot of current entries."""
        return tuple(self._entries)

    @property
    def selected_count(self) -> int:
        return sum(1 for entry in self._entries if entry.selected)

    def refresh(self, source: AssetSource | None) -> RefreshReport:
        """
        Reload entries from the asset source.

        Unreachable source is not raised: the failure is logged,
        on_refresh_failed is emitted and entries are left unchanged.
        """
        try:
            if source is None:
                raise CollaboratorUnavailable()
            assets = list(source.assets())
        except CollaboratorUnavailable as e:
            return self._report_failure(e)
        except Exception as e:
            wrapped = CollaboratorUnavailable(f"Editor model is not available: {e}")
            wrapped.__cause__ = e
            return self._report_failure(wrapped)

        entries = [
            SelectionEntry(asset=asset, selected=True)
            for asset in assets
            if asset.type_name == self._type_name
        ]
        self._entries = entries
        log.debug(f"[AssetRegistry] refreshed: {len(self._entries)} of {len(assets)} assets are materials")
        self.on_entries_changed.emit(self)
        return RefreshReport(ok=True, count=len(self._entries))

    def _report_failure(self, error: CollaboratorUnavailable) -> RefreshReport:
        log.warn(f"[AssetRegistry] refresh failed: {error.message}")
        self.on_refresh_failed.emit(error)
        return RefreshReport(ok=False, count=len(self._entries), error=error)

    def set_all_selected(self, flag: bool) -> None:
        for entry in self._entries:
            entry.selected = flag
        self.on_selection_changed.emit(self)

    def set_selected(self, index: int, flag: bool) -> None:
        """Set selection of one entry. Raises IndexError for bad index."""
        self._entry_at(index).selected = flag
        self.on_selection_changed.emit(self)

    def toggle(self, index: int) -> bool:
        """Flip selection of one entry and return the new flag."""
        entry = self._entry_at(index)
        entry.selected = not entry.selected
        self.on_selection_changed.emit(self)
        return entry.selected

    def _entry_at(self, index: int) -> SelectionEntry:
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"selection index out of range: {index}")
        return self._entries[index]

    def selected_assets(self) -> List[ProjectAsset]:
        """Selected assets in registry order. Safe to call repeatedly."""
        return [entry.asset for entry in self._entries if entry.selected]

    def labels(self) -> List[str]:
        return [entry.label for entry in self._entries]

    def find_entry(self, uuid: str) -> SelectionEntry | None:
        for entry in self._entries:
            if entry.asset.uuid == uuid:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SelectionEntry]:
        return iter(tuple(self._entries))
