"""Pinned layout definitions and their YAML loader."""

from .pinned import Pinned
from .loader import PinnedLoader

__all__ = ["Pinned", "PinnedLoader"]
