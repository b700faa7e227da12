"""Social media platform formats and their archive folders."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformFormat:
    """An image format and where it lands in the package."""

    tag: str
    folder: str
    label: str
    size: str          # Publishing size, e.g. "1080x1080px"
    orientation: str


PLATFORM_FORMATS: dict[str, PlatformFormat] = {
    "instagram_post": PlatformFormat(
        "instagram_post", "01_Instagram_Posts", "Instagram Posts", "1080x1080px", "Square"
    ),
    "instagram_story": PlatformFormat(
        "instagram_story", "02_Instagram_Stories", "Instagram Stories", "1080x1920px", "Vertical"
    ),
    "facebook_cover": PlatformFormat(
        "facebook_cover", "03_Facebook_Covers", "Facebook Covers", "1200x675px", "Landscape"
    ),
    "pinterest": PlatformFormat(
        "pinterest", "04_Pinterest_Pins", "Pinterest Pins", "1000x1500px", "Vertical"
    ),
}

OTHER_FOLDER = "05_Other"


def get_format(tag: str) -> PlatformFormat | None:
    """Get a known format by tag, None if unknown."""
    return PLATFORM_FORMATS.get(tag)


def folder_for(tag: str) -> str:
    """Map a format tag to its folder. Unknown tags fall into 05_Other."""
    platform_format = get_format(tag)
    return platform_format.folder if platform_format else OTHER_FOLDER


def get_formats() -> list[PlatformFormat]:
    """All known formats in folder order."""
    return list(PLATFORM_FORMATS.values())
