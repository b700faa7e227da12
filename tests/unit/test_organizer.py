from __future__ import annotations

import json

from campaign_packager.models import (
    CampaignAsset,
    CampaignMetadata,
    FormatCopy,
    MarketingCopy,
    ProductInfo,
)
from campaign_packager.services import FileOrganizer


def _metadata(name: str = "Nutrilite™ Double X") -> CampaignMetadata:
    return CampaignMetadata(
        generated="2024-01-15T10:30:00.000Z",
        total_images=0,
        formats=[],
        product=ProductInfo(name=name),
    )


def _asset(fmt: str, content: bytes) -> CampaignAsset:
    return CampaignAsset(filename="x.png", content=content, format=fmt)


def test_images_are_grouped_by_folder_and_numbered() -> None:
    assets = [
        _asset("instagram_post", b"p1"),
        _asset("pinterest", b"pin1"),
        _asset("instagram_post", b"p2"),
        _asset("facebook_cover", b"fb1"),
    ]
    entries = FileOrganizer().organize(assets, _metadata())

    assert [(e.name, e.content) for e in entries[:4]] == [
        ("01_Instagram_Posts/Nutrilite_Double_X_01.jpg", b"p1"),
        ("01_Instagram_Posts/Nutrilite_Double_X_02.jpg", b"p2"),
        ("04_Pinterest_Pins/Nutrilite_Double_X_01.jpg", b"pin1"),
        ("03_Facebook_Covers/Nutrilite_Double_X_01.jpg", b"fb1"),
    ]


def test_unknown_formats_share_other_folder_in_order() -> None:
    assets = [_asset("unknown_format", b"first"), _asset("unknown_format", b"second")]
    entries = FileOrganizer().organize(assets, _metadata("Double X"))

    assert [(e.name, e.content) for e in entries[:2]] == [
        ("05_Other/Double_X_01.jpg", b"first"),
        ("05_Other/Double_X_02.jpg", b"second"),
    ]


def test_distinct_unknown_tags_do_not_collide() -> None:
    assets = [_asset("tiktok", b"a"), _asset("linkedin", b"b")]
    names = [e.name for e in FileOrganizer().organize(assets, _metadata("Double X"))]

    assert names[:2] == ["05_Other/Double_X_01.jpg", "05_Other/Double_X_02.jpg"]
    assert len(set(names)) == len(names)


def test_documents_are_always_last() -> None:
    entries = FileOrganizer().organize([_asset("pinterest", b"x")], _metadata())

    assert [e.name for e in entries[-3:]] == ["campaign_info.json", "USAGE_GUIDELINES.txt", "README.md"]
    assert json.loads(entries[-3].content.decode("utf-8"))["product"]["name"] == "Nutrilite™ Double X"


def test_empty_assets_yield_only_documents() -> None:
    entries = FileOrganizer().organize([], _metadata())
    assert [e.name for e in entries] == ["campaign_info.json", "USAGE_GUIDELINES.txt", "README.md"]


def test_unsanitizable_product_name_falls_back() -> None:
    entries = FileOrganizer().organize([_asset("instagram_story", b"x")], _metadata("™™™"))
    assert entries[0].name == "02_Instagram_Stories/Product_01.jpg"


def test_marketing_copy_goes_between_images_and_documents() -> None:
    assets = [_asset("instagram_post", b"p1"), _asset("pinterest", b"pin1")]
    copies = [
        FormatCopy("pinterest", MarketingCopy(text="Pin caption")),
        FormatCopy("instagram_post", MarketingCopy(text="Post caption")),
        FormatCopy("pinterest", MarketingCopy(text="Another pin caption")),
    ]
    entries = FileOrganizer().organize_with_copy(assets, _metadata(), copies)
    names = [e.name for e in entries]

    assert names == [
        "01_Instagram_Posts/Nutrilite_Double_X_01.jpg",
        "04_Pinterest_Pins/Nutrilite_Double_X_01.jpg",
        "04_Pinterest_Pins/MARKETING_COPY.txt",
        "01_Instagram_Posts/MARKETING_COPY.txt",
        "campaign_info.json",
        "USAGE_GUIDELINES.txt",
        "README.md",
    ]
    pin_copy = entries[2].content.decode("utf-8")
    assert "Pin caption" in pin_copy and "Another pin caption" in pin_copy
