"""Clients for external collaborators."""

from .images import ImageClient
from .storage import ArchiveStore, StoredArchive

__all__ = ["ArchiveStore", "ImageClient", "StoredArchive"]
