"""Identifiable base class for objects with UUID."""

from __future__ import annotations

import uuid as uuid_module


class Identifiable:
    """
    Base class for objects that need unique identification.

    uuid is opaque and stable for the whole editor session.
    """

    def __init__(self, uuid: str | None = None):
        if uuid is None:
            self._uuid = str(uuid_module.uuid4())
        else:
            self._uuid = uuid

    @property
    def uuid(self) -> str:
        """Unique identifier."""
        return self._uuid
