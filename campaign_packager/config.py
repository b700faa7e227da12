import os
from dotenv import load_dotenv

load_dotenv()

# Storage and packaging config - loaded from .env
ARCHIVE_STORAGE_DIR = os.getenv("ARCHIVE_STORAGE_DIR", "./archives")
DOWNLOAD_EXPIRY_HOURS = int(os.getenv("DOWNLOAD_EXPIRY_HOURS", "24"))
JPEG_QUALITY = int(os.getenv("JPEG_QUALITY", "90"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Campaign metadata defaults
DEFAULT_BRAND = os.getenv("DEFAULT_BRAND", "Amway")
USAGE_NOTE = os.getenv("USAGE_NOTE", "Created with Amway IBO Image Campaign Generator")

# Storage layout
ARCHIVE_KEY_PREFIX = "campaigns"
DOWNLOAD_URL_PREFIX = "/api/campaign/download"
