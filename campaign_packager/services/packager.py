"""Campaign packaging service - organize files, then build the ZIP."""

import logging
import re
from datetime import date

from ..models import CampaignAsset, CampaignMetadata, FormatCopy
from ..zip import ZipBuilder
from .organizer import FileOrganizer

logger = logging.getLogger(__name__)


class CampaignPackager:
    """Package generated campaign images into a downloadable ZIP."""

    def __init__(self, organizer: FileOrganizer | None = None, builder: ZipBuilder | None = None):
        self.organizer = organizer or FileOrganizer()
        self.builder = builder or ZipBuilder()

    def create_campaign_zip(self, assets: list[CampaignAsset], metadata: CampaignMetadata) -> bytes:
        """Create the campaign ZIP: format folders plus root documents."""
        entries = self.organizer.organize(assets, metadata)
        return self._build(entries, metadata)

    def create_campaign_zip_with_copy(
        self,
        assets: list[CampaignAsset],
        metadata: CampaignMetadata,
        copies: list[FormatCopy],
    ) -> bytes:
        """Create the campaign ZIP including per-folder marketing copy."""
        entries = self.organizer.organize_with_copy(assets, metadata, copies)
        return self._build(entries, metadata)

    def _build(self, entries, metadata: CampaignMetadata) -> bytes:
        archive = self.builder.build(entries)
        logger.info(
            f"Packaged '{metadata.product.name}': {len(entries)} entries, {len(archive)} bytes"
        )
        return archive


def download_filename(product_name: str, on_date: date | None = None) -> str:
    """Attachment filename, e.g. "Double_X_Campaign_2024-01-15.zip"."""
    on_date = on_date or date.today()
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", product_name or "Amway_Product")
    return f"{safe_name}_Campaign_{on_date.isoformat()}.zip"
