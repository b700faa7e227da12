"""Text documents bundled at the root of every campaign package."""

import json

from ..models.formats import folder_for, get_formats
from ..models.marketing_copy import MarketingCopy
from ..models.metadata import CampaignMetadata
from ..utils import parse_timestamp

METADATA_FILENAME = "campaign_info.json"
GUIDELINES_FILENAME = "USAGE_GUIDELINES.txt"
README_FILENAME = "README.md"
MARKETING_COPY_FILENAME = "MARKETING_COPY.txt"

GENERATOR_NAME = "Amway IBO Image Campaign Generator"


def render_metadata_json(metadata: CampaignMetadata) -> str:
    """Metadata as 2-space indented JSON."""
    return json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False)


def render_usage_guidelines(metadata: CampaignMetadata) -> str:
    """Plain-text usage and compliance guide."""
    folders = "\n".join(f"- {folder_for(tag)}/" for tag in metadata.formats)
    specs = "\n".join(
        f"- {f.label}: {f.size} ({f.orientation} format)" for f in get_formats()
    )

    lines = [
        "AMWAY IBO IMAGE CAMPAIGN - USAGE GUIDELINES",
        "===========================================",
        "",
        f"Generated: {metadata.generated}",
        f"Product: {metadata.product.name}",
        f"Brand: {metadata.product.brand}",
        f"Campaign Type: {metadata.preferences.campaign_type}",
        f"Style: {metadata.preferences.brand_style}",
        "",
        "FOLDER STRUCTURE:",
        folders,
        "",
        "IMAGE SPECIFICATIONS:",
        specs,
        "",
        "COMPLIANCE REMINDERS:",
        "✓ All images include appropriate disclaimers",
        "✓ Follow Amway brand guidelines when posting",
        "✓ Ensure compliance with local advertising regulations",
        "✓ Individual results may vary - communicate honestly",
        "",
        "SOCIAL MEDIA BEST PRACTICES:",
        "• Use relevant hashtags for your market",
        "• Tag @amway when appropriate",
        "• Include personal testimonials responsibly",
        "• Engage authentically with your audience",
        "• Post consistently for best results",
        "",
        "LEGAL CONSIDERATIONS:",
        "- These images are for authorized Amway IBOs only",
        "- Do not modify compliance text or disclaimers",
        "- Follow platform-specific advertising policies",
        "- Respect copyright and trademark guidelines",
        "",
        "For questions about proper usage, consult your upline or Amway compliance resources.",
        "",
        f"Generated with {GENERATOR_NAME}",
        f"© {_copyright_year(metadata)} Amway Corp. All rights reserved.",
    ]
    return "\n".join(lines)


def render_readme(metadata: CampaignMetadata) -> str:
    """Markdown quick-start guide."""
    lines = [
        f"# {metadata.product.name} Campaign Images",
        "",
        "## Campaign Details",
        f"- **Product**: {metadata.product.name}",
        f"- **Brand**: {metadata.product.brand}",
        f"- **Generated**: {_display_date(metadata.generated)}",
        f"- **Total Images**: {metadata.total_images}",
        f"- **Formats**: {', '.join(metadata.formats)}",
        "",
        "## Quick Start Guide",
        "",
        "### 1. Choose Your Images",
        "Each folder contains images optimized for specific social media platforms:",
        "- **Instagram Posts**: Square format, perfect for feed posts",
        "- **Instagram Stories**: Vertical format for stories and reels",
        "- **Facebook Covers**: Wide format for page headers",
        "- **Pinterest Pins**: Tall format for pin discovery",
        "",
        "### 2. Upload and Share",
        "1. Select images that match your message",
        "2. Upload to your chosen platform",
        "3. Add your personal caption and hashtags",
        "4. Engage with your audience",
        "",
        "### 3. Best Practices",
        "- Maintain consistent posting schedule",
        "- Use platform-appropriate hashtags",
        "- Include calls-to-action",
        "- Follow Amway compliance guidelines",
        "",
        "## Support",
        "For technical support or questions about image usage, contact your Amway support team.",
        "",
        "---",
        f"*Generated with {GENERATOR_NAME}*",
    ]
    return "\n".join(lines)


def render_marketing_copy(folder: str, copies: list[MarketingCopy]) -> str:
    """Captions for one folder, numbered in input order."""
    lines = [f"MARKETING COPY - {folder}", "=" * (len(folder) + 17)]
    for i, copy in enumerate(copies, start=1):
        lines.append("")
        lines.append(f"--- Caption {i:02d}" + (f" ({copy.platform})" if copy.platform else "") + " ---")
        lines.append(copy.text)
        if copy.call_to_action:
            lines.append("")
            lines.append(f"Call to action: {copy.call_to_action}")
        if copy.hashtags:
            lines.append(f"Hashtags: {' '.join(_hashtag(tag) for tag in copy.hashtags)}")
        if copy.disclaimer:
            lines.append(f"Disclaimer: {copy.disclaimer}")
    return "\n".join(lines)


def _hashtag(tag: str) -> str:
    return tag if tag.startswith("#") else f"#{tag}"


def _display_date(generated: str) -> str:
    """MM/DD/YYYY when parseable, raw value otherwise."""
    parsed = parse_timestamp(generated)
    return parsed.strftime("%m/%d/%Y") if parsed else generated


def _copyright_year(metadata: CampaignMetadata) -> str:
    # Year of generation keeps the output deterministic
    parsed = parse_timestamp(metadata.generated)
    return str(parsed.year) if parsed else metadata.generated[:4]
