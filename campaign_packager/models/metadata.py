"""Campaign metadata - serialized into campaign_info.json."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ProductInfo:
    """Product the campaign was generated for."""

    name: str
    brand: str = "Amway"
    category: str = ""


@dataclass(frozen=True)
class CampaignPreferences:
    """Subset of the generation preferences kept in the package."""

    campaign_type: str = ""
    brand_style: str = ""
    campaign_size: int = 0


@dataclass(frozen=True)
class CampaignMetadata:
    """Descriptive record for a packaged campaign."""

    generated: str                       # ISO-8601 timestamp
    total_images: int
    formats: list[str]
    product: ProductInfo
    preferences: CampaignPreferences = field(default_factory=CampaignPreferences)
    usage: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, keys in a stable order."""
        return {
            "generated": self.generated,
            "totalImages": self.total_images,
            "formats": list(self.formats),
            "product": {
                "name": self.product.name,
                "brand": self.product.brand,
                "category": self.product.category,
            },
            "preferences": {
                "campaign_type": self.preferences.campaign_type,
                "brand_style": self.preferences.brand_style,
                "campaign_size": self.preferences.campaign_size,
            },
            "usage": self.usage,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CampaignMetadata":
        """Build from the wire representation (inverse of to_dict)."""
        product = data.get("product") or {}
        preferences = data.get("preferences") or {}
        return cls(
            generated=data.get("generated", ""),
            total_images=int(data.get("totalImages", 0)),
            formats=list(data.get("formats", [])),
            product=ProductInfo(
                name=product.get("name", ""),
                brand=product.get("brand") or "Amway",
                category=product.get("category") or "",
            ),
            preferences=CampaignPreferences(
                campaign_type=preferences.get("campaign_type") or "",
                brand_style=preferences.get("brand_style") or "",
                campaign_size=int(preferences.get("campaign_size") or 0),
            ),
            usage=data.get("usage", ""),
        )
