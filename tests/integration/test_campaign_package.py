from __future__ import annotations

import io
import json
import zipfile
import zlib

from campaign_packager.models import (
    CampaignAsset,
    CampaignMetadata,
    CampaignPreferences,
    FormatCopy,
    MarketingCopy,
    ProductInfo,
)
from campaign_packager.services import CampaignPackager, download_filename

DOCUMENTS = ["campaign_info.json", "USAGE_GUIDELINES.txt", "README.md"]


def _metadata(total_images: int, formats: list[str]) -> CampaignMetadata:
    return CampaignMetadata(
        generated="2024-01-15T10:30:00.000Z",
        total_images=total_images,
        formats=formats,
        product=ProductInfo(name="Nutrilite™ Double X", brand="Nutrilite", category="Vitamins"),
        preferences=CampaignPreferences("product_focus", "professional", total_images),
        usage="Created with Amway IBO Image Campaign Generator",
    )


def _open(archive: bytes) -> zipfile.ZipFile:
    zf = zipfile.ZipFile(io.BytesIO(archive))
    assert zf.testzip() is None
    return zf


def test_single_instagram_post_scenario() -> None:
    content = bytes(range(10))
    asset = CampaignAsset(filename="x.png", content=content, format="instagram_post")
    metadata = _metadata(1, ["instagram_post"])

    archive = CampaignPackager().create_campaign_zip([asset], metadata)

    with _open(archive) as zf:
        assert zf.namelist() == ["01_Instagram_Posts/Nutrilite_Double_X_01.jpg"] + DOCUMENTS
        info = zf.getinfo("01_Instagram_Posts/Nutrilite_Double_X_01.jpg")
        assert info.file_size == 10
        assert info.CRC == zlib.crc32(content)
        assert zf.read(info) == content
        assert json.loads(zf.read("campaign_info.json")) == metadata.to_dict()


def test_unknown_formats_scenario() -> None:
    assets = [
        CampaignAsset(filename="a.png", content=b"first", format="unknown_format"),
        CampaignAsset(filename="b.png", content=b"second", format="unknown_format"),
    ]
    archive = CampaignPackager().create_campaign_zip(assets, _metadata(2, ["unknown_format"]))

    with _open(archive) as zf:
        assert zf.read("05_Other/Nutrilite_Double_X_01.jpg") == b"first"
        assert zf.read("05_Other/Nutrilite_Double_X_02.jpg") == b"second"
        assert len(zf.namelist()) == 5


def test_empty_assets_scenario() -> None:
    archive = CampaignPackager().create_campaign_zip([], _metadata(0, []))

    with _open(archive) as zf:
        assert zf.namelist() == DOCUMENTS
        assert not any(name.endswith(".jpg") for name in zf.namelist())


def test_package_with_copy_extracts_every_entry() -> None:
    assets = [
        CampaignAsset(filename=f"{i}.jpg", content=bytes([i]) * 500, format=fmt)
        for i, fmt in enumerate(["instagram_post", "instagram_story", "facebook_cover", "pinterest", "instagram_post"])
    ]
    copies = [FormatCopy("instagram_story", MarketingCopy(text="Story time", hashtags=["Amway"]))]
    metadata = _metadata(len(assets), ["instagram_post", "instagram_story", "facebook_cover", "pinterest"])

    archive = CampaignPackager().create_campaign_zip_with_copy(assets, metadata, copies)

    with _open(archive) as zf:
        names = zf.namelist()
        assert names[-3:] == DOCUMENTS
        assert "02_Instagram_Stories/MARKETING_COPY.txt" in names
        assert zf.read("01_Instagram_Posts/Nutrilite_Double_X_02.jpg") == bytes([4]) * 500
        assert "#Amway" in zf.read("02_Instagram_Stories/MARKETING_COPY.txt").decode("utf-8")
        guidelines = zf.read("USAGE_GUIDELINES.txt").decode("utf-8")
        assert "- 03_Facebook_Covers/" in guidelines


def test_packaging_is_deterministic() -> None:
    assets = [CampaignAsset(filename="x.jpg", content=b"\xff\xd8data", format="pinterest")]
    metadata = _metadata(1, ["pinterest"])

    assert CampaignPackager().create_campaign_zip(assets, metadata) == CampaignPackager().create_campaign_zip(
        assets, metadata
    )


def test_download_filename() -> None:
    from datetime import date

    assert download_filename("Double X", date(2024, 1, 15)) == "Double_X_Campaign_2024-01-15.zip"
    assert download_filename("", date(2024, 1, 15)) == "Amway_Product_Campaign_2024-01-15.zip"
