"""AWS Lambda handler for campaign ZIP downloads."""

import base64
import json
import time

from ..clients import ArchiveStore
from ..config import ARCHIVE_STORAGE_DIR, DOWNLOAD_EXPIRY_HOURS
from ..services import download_filename


def _error(status_code: int, message: str) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"error": message}),
    }


def _age_hours(created_at) -> float | None:
    """Hours since a createdAt epoch-millis value, None if it is not a number."""
    try:
        created_ms = int(created_at)
    except (TypeError, ValueError):
        print(f"Malformed createdAt {created_at!r} in archive metadata", flush=True)
        return None
    return (time.time() * 1000 - created_ms) / (1000 * 60 * 60)


def handler(event, context):
    """
    Stream a stored campaign ZIP back as an attachment.

    The key comes from pathParameters ("campaigns/12_1700000000000.zip").
    Archives older than DOWNLOAD_EXPIRY_HOURS are deleted and answered with 410.
    """
    key = (event.get("pathParameters") or {}).get("key") or event.get("key")
    if not key:
        return _error(400, "Missing archive key")

    try:
        store = ArchiveStore(ARCHIVE_STORAGE_DIR)
        stored = store.get(key)
        if stored is None:
            return _error(404, "Campaign not found or has expired")

        created_at = stored.metadata.get("createdAt")
        if created_at:
            hours_old = _age_hours(created_at)
            # Unreadable createdAt counts as expired
            if hours_old is None or hours_old > DOWNLOAD_EXPIRY_HOURS:
                store.delete(key)
                return _error(410, "Campaign has expired and is no longer available")

        filename = download_filename(stored.metadata.get("productName") or "Amway_Product")
        return {
            "statusCode": 200,
            "headers": {
                "Content-Type": "application/zip",
                "Content-Disposition": f'attachment; filename="{filename}"',
                "Content-Length": str(len(stored.data)),
                "Cache-Control": "no-cache, no-store, must-revalidate",
                "Pragma": "no-cache",
                "Expires": "0",
            },
            "isBase64Encoded": True,
            "body": base64.b64encode(stored.data).decode("ascii"),
        }

    except ValueError as e:
        print(f"Invalid download key {key!r}: {e}", flush=True)
        return _error(400, "Invalid archive key")
    except Exception as e:
        print(f"Download error: {e}", flush=True)
        return _error(500, "Failed to download campaign. Please try again.")
