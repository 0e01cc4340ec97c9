"""Error kinds of the batch material optimizer."""

from __future__ import annotations

from dataclasses import dataclass


class MatbatchError(Exception):
    """Base class for matbatch errors."""


class CollaboratorUnavailable(MatbatchError):
    """
    Внешний источник ассетов недоступен.

    Не фатально: реестр остаётся в прежнем состоянии,
    refresh можно повторить позже.
    """

    def __init__(self, message: str = "Editor model is not available."):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class MutationFailure:
    """Record of one asset whose mutator raised. Never re-raised."""

    asset_uuid: str
    label: str
    error: str

    def describe(self) -> str:
        return f"Failed to mutate material {self.label} ({self.asset_uuid}): {self.error}"
