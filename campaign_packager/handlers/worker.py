"""AWS Lambda handler for campaign packaging."""

import base64
import json
import time
from datetime import datetime, timedelta, timezone

from ..clients import ArchiveStore, ImageClient
from ..config import (
    ARCHIVE_KEY_PREFIX,
    ARCHIVE_STORAGE_DIR,
    DEFAULT_BRAND,
    DOWNLOAD_EXPIRY_HOURS,
    DOWNLOAD_URL_PREFIX,
    JPEG_QUALITY,
    USAGE_NOTE,
)
from ..models import (
    CampaignAsset,
    CampaignMetadata,
    CampaignPreferences,
    FormatCopy,
    MarketingCopy,
    ProductInfo,
)
from ..services import CampaignPackager, ImageFormatError, ensure_jpeg


def _response(status_code: int, payload: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def _iso_now(now: datetime) -> str:
    """UTC timestamp with milliseconds and a trailing Z."""
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def handler(event, context):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload:
    {
        "campaign_id": 12,
        "product": {"name": "Double X", "brand": "Nutrilite", "category": "Vitamins"},
        "preferences": {"campaign_type": "product_focus", "brand_style": "professional", "campaign_size": 5},
        "images": [{"url": "https://...", "format": "instagram_post", "filename": "a.jpg"}, ...],
        "marketing_copy": [{"format": "instagram_post", "copy": {"text": "...", "hashtags": [...]}}]
    }

    Images may carry "content_b64" instead of "url".

    Output: download URL of the stored ZIP.
    """
    # Handle SQS event format
    if "Records" in event:
        body = json.loads(event["Records"][0]["body"])
    else:
        body = json.loads(event.get("body") or "{}")

    # Validate required fields
    for field_name in ("campaign_id", "product", "images"):
        if not body.get(field_name):
            return _response(400, {"error": f"Missing '{field_name}' field"})
    if not isinstance(body["product"], dict) or not (body["product"].get("name") or "").strip():
        return _response(400, {"error": "Missing product name"})

    try:
        campaign_id = body["campaign_id"]
        print(f"Packaging campaign {campaign_id} ({len(body['images'])} images)", flush=True)

        assets = _load_assets(body["images"], ImageClient())
        if not assets:
            return _response(500, {"error": "Failed to retrieve images from storage"})

        now = datetime.now(timezone.utc)
        metadata = _build_metadata(body, assets, now)
        copies = _parse_copies(body.get("marketing_copy") or [])

        packager = CampaignPackager()
        if copies:
            archive = packager.create_campaign_zip_with_copy(assets, metadata, copies)
        else:
            archive = packager.create_campaign_zip(assets, metadata)

        created_ms = int(now.timestamp() * 1000)
        key = f"{ARCHIVE_KEY_PREFIX}/{campaign_id}_{created_ms}.zip"
        ArchiveStore(ARCHIVE_STORAGE_DIR).put(
            key,
            archive,
            {
                "campaignId": str(campaign_id),
                "productName": metadata.product.name,
                "totalImages": str(len(assets)),
                "createdAt": str(created_ms),
            },
        )
        print(f"Stored {key} ({len(archive)} bytes)", flush=True)

        expires_at = now + timedelta(hours=DOWNLOAD_EXPIRY_HOURS)
        return _response(200, {
            "success": True,
            "downloadUrl": f"{DOWNLOAD_URL_PREFIX}/{key}",
            "expiresAt": _iso_now(expires_at),
            "totalImages": len(assets),
        })

    except Exception as e:
        print(f"ERROR: Campaign packaging failed: {e}", flush=True)
        return _response(500, {"error": "Failed to create campaign package"})


def _load_assets(images: list[dict], client: ImageClient) -> list[CampaignAsset]:
    """Fetch and normalise images. Unreadable images are skipped."""
    assets = []
    for i, image in enumerate(images):
        image_format = image.get("format", "")
        try:
            if image.get("content_b64"):
                raw = base64.b64decode(image["content_b64"])
            elif image.get("url"):
                raw = client.download(image["url"])
            else:
                print(f"  Image {i + 1} has no url or content, skipping", flush=True)
                continue
            content = ensure_jpeg(raw, quality=JPEG_QUALITY)
        except (RuntimeError, ImageFormatError, ValueError) as e:
            print(f"  Image {i + 1} unusable, skipping: {e}", flush=True)
            continue

        filename = image.get("filename") or f"{image_format}_{i + 1}.jpg"
        assets.append(CampaignAsset(filename=filename, content=content, format=image_format))
    return assets


def _build_metadata(body: dict, assets: list[CampaignAsset], now: datetime) -> CampaignMetadata:
    product = body["product"]
    preferences = body.get("preferences") or {}

    formats: list[str] = []
    for asset in assets:
        if asset.format not in formats:
            formats.append(asset.format)

    return CampaignMetadata(
        generated=_iso_now(now),
        total_images=len(assets),
        formats=formats,
        product=ProductInfo(
            name=product["name"].strip(),
            brand=product.get("brand") or DEFAULT_BRAND,
            category=product.get("category") or "",
        ),
        preferences=CampaignPreferences(
            campaign_type=preferences.get("campaign_type") or "",
            brand_style=preferences.get("brand_style") or "",
            campaign_size=int(preferences.get("campaign_size") or len(assets)),
        ),
        usage=USAGE_NOTE,
    )


def _parse_copies(items: list[dict]) -> list[FormatCopy]:
    """Parse marketing copy items. Malformed items are skipped."""
    copies = []
    for item in items:
        copy = item.get("copy")
        if isinstance(copy, str):
            try:
                copy = json.loads(copy)
            except json.JSONDecodeError as e:
                print(f"  Failed to parse marketing copy: {e}", flush=True)
                continue
        if not isinstance(copy, dict) or not copy.get("text"):
            continue
        copies.append(FormatCopy(format=item.get("format", ""), copy=MarketingCopy.from_dict(copy)))
    return copies


# Local testing
if __name__ == "__main__":
    import logging
    import sys
    from pathlib import Path

    from ..config import LOG_LEVEL

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if len(sys.argv) < 3:
        print("Usage: python -m campaign_packager.handlers.worker <product_name> <format>=<image_path> ...")
        print()
        print("Arguments:")
        print("  product_name - Product name used for file and folder names")
        print("  format       - instagram_post | instagram_story | facebook_cover | pinterest | any other tag")
        print("  image_path   - Local image file (PNG/WEBP images are converted to JPEG)")
        print()
        print("Example:")
        print('  python -m campaign_packager.handlers.worker "Nutrilite Double X" instagram_post=a.png pinterest=b.jpg')
        sys.exit(1)

    images = []
    for arg in sys.argv[2:]:
        image_format, _, path = arg.partition("=")
        images.append({
            "format": image_format,
            "filename": Path(path).name,
            "content_b64": base64.b64encode(Path(path).read_bytes()).decode("ascii"),
        })

    test_input = {
        "campaign_id": int(time.time()),
        "product": {"name": sys.argv[1]},
        "images": images,
    }

    result = handler({"body": json.dumps(test_input)}, None)
    print("\nResult:")
    print(json.dumps(json.loads(result["body"]), indent=2))
