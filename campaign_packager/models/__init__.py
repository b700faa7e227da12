"""Data models."""

from .asset import CampaignAsset
from .marketing_copy import FormatCopy, MarketingCopy
from .entry import ArchiveEntry
from .formats import PlatformFormat
from .metadata import CampaignMetadata, CampaignPreferences, ProductInfo

__all__ = [
    "ArchiveEntry",
    "CampaignAsset",
    "CampaignMetadata",
    "CampaignPreferences",
    "FormatCopy",
    "MarketingCopy",
    "PlatformFormat",
    "ProductInfo",
]
