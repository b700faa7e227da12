"""Campaign asset model - one generated image."""

from dataclasses import dataclass


@dataclass
class CampaignAsset:
    """A generated image waiting to be packaged."""

    filename: str   # Hint only, the archive name is derived from the product
    content: bytes
    format: str     # "instagram_post", "instagram_story", "facebook_cover", "pinterest", ...
