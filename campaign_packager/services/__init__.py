"""Business logic services."""

from .image import ImageFormatError, ensure_jpeg
from .organizer import FileOrganizer
from .packager import CampaignPackager, download_filename

__all__ = ["CampaignPackager", "FileOrganizer", "ImageFormatError", "download_filename", "ensure_jpeg"]
