"""Core base classes for matbatch."""

from matbatch.core.identifiable import Identifiable
from matbatch.core.event import Event

__all__ = ["Identifiable", "Event"]
