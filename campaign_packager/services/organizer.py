"""File organizer - turns campaign assets into ordered archive entries."""

import logging

from ..models import ArchiveEntry, CampaignAsset, CampaignMetadata, FormatCopy
from ..models.formats import folder_for
from ..utils import sanitize_filename
from .documents import (
    GUIDELINES_FILENAME,
    MARKETING_COPY_FILENAME,
    METADATA_FILENAME,
    README_FILENAME,
    render_marketing_copy,
    render_metadata_json,
    render_readme,
    render_usage_guidelines,
)

logger = logging.getLogger(__name__)

IMAGE_EXTENSION = "jpg"  # Generated images are always JPEG (see services.image.ensure_jpeg)
FALLBACK_NAME = "Product"


class FileOrganizer:
    """Lay out campaign files: one folder per format, documents at the root."""

    def organize(self, assets: list[CampaignAsset], metadata: CampaignMetadata) -> list[ArchiveEntry]:
        """
        Build the archive entry list for a campaign.

        Args:
            assets: Generated images in generation order.
            metadata: Campaign metadata.

        Returns:
            Image entries grouped by folder, then the three root documents.
        """
        entries = self._image_entries(assets, metadata)
        entries.extend(self._document_entries(metadata))
        return entries

    def organize_with_copy(
        self,
        assets: list[CampaignAsset],
        metadata: CampaignMetadata,
        copies: list[FormatCopy],
    ) -> list[ArchiveEntry]:
        """Same as organize, plus one MARKETING_COPY.txt per folder that has copy."""
        entries = self._image_entries(assets, metadata)
        entries.extend(self._copy_entries(copies))
        entries.extend(self._document_entries(metadata))
        return entries

    def group_by_folder(self, assets: list[CampaignAsset]) -> dict[str, list[CampaignAsset]]:
        """Group assets by target folder, keeping first-seen and relative order."""
        groups: dict[str, list[CampaignAsset]] = {}
        for asset in assets:
            groups.setdefault(folder_for(asset.format), []).append(asset)
        return groups

    def image_filename(self, folder: str, product_name: str, index: int) -> str:
        """Archive path for the index-th (0-based) image of a folder."""
        safe_name = sanitize_filename(product_name) or FALLBACK_NAME
        return f"{folder}/{safe_name}_{index + 1:02d}.{IMAGE_EXTENSION}"

    def _image_entries(self, assets: list[CampaignAsset], metadata: CampaignMetadata) -> list[ArchiveEntry]:
        entries = []
        for folder, group in self.group_by_folder(assets).items():
            for i, asset in enumerate(group):
                name = self.image_filename(folder, metadata.product.name, i)
                entries.append(ArchiveEntry(name=name, content=asset.content))
            logger.debug(f"{folder}: {len(group)} images")
        return entries

    def _copy_entries(self, copies: list[FormatCopy]) -> list[ArchiveEntry]:
        by_folder: dict[str, list] = {}
        for item in copies:
            by_folder.setdefault(folder_for(item.format), []).append(item.copy)

        return [
            ArchiveEntry(
                name=f"{folder}/{MARKETING_COPY_FILENAME}",
                content=render_marketing_copy(folder, folder_copies).encode("utf-8"),
            )
            for folder, folder_copies in by_folder.items()
        ]

    def _document_entries(self, metadata: CampaignMetadata) -> list[ArchiveEntry]:
        return [
            ArchiveEntry(METADATA_FILENAME, render_metadata_json(metadata).encode("utf-8")),
            ArchiveEntry(GUIDELINES_FILENAME, render_usage_guidelines(metadata).encode("utf-8")),
            ArchiveEntry(README_FILENAME, render_readme(metadata).encode("utf-8")),
        ]
