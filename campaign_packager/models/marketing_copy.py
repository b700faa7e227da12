"""Marketing copy attached to generated images."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MarketingCopy:
    """Platform caption with hashtags and compliance disclaimer."""

    text: str
    hashtags: list[str] = field(default_factory=list)
    call_to_action: str = ""
    disclaimer: str = ""
    platform: str = ""
    total_length: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MarketingCopy":
        """Parse the stored camelCase JSON shape."""
        text = data.get("text", "")
        return cls(
            text=text,
            hashtags=list(data.get("hashtags", [])),
            call_to_action=data.get("callToAction", ""),
            disclaimer=data.get("disclaimer", ""),
            platform=data.get("platform", ""),
            total_length=int(data.get("totalLength", len(text))),
        )


@dataclass(frozen=True)
class FormatCopy:
    """Copy for one image, keyed by its format tag."""

    format: str
    copy: MarketingCopy
