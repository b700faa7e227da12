"""Image download client."""

import logging
import time

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"


class ImageClient:
    """Fetch generated images from their storage URLs."""

    def __init__(self, timeout: int = 30, max_retries: int = 3):
        self.timeout = timeout
        self.max_retries = max_retries

    def _get_with_retry(self, url: str) -> requests.Response:
        """GET with exponential backoff on 429 errors."""
        response = None
        for attempt in range(self.max_retries):
            response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout)

            if response.status_code == 429 and attempt < self.max_retries - 1:
                wait_time = 2 ** attempt
                logger.warning(f"Rate limited fetching {url}, retrying in {wait_time}s")
                time.sleep(wait_time)
                continue

            return response

        return response

    def download(self, url: str) -> bytes:
        """
        Download one image.

        Args:
            url: Image URL.

        Returns:
            Raw image bytes.

        Raises:
            RuntimeError: On network failure, HTTP error or empty body.
        """
        try:
            response = self._get_with_retry(url)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RuntimeError(f"Failed to download image from {url}: {e}")

        if not response.content:
            raise RuntimeError(f"Empty image body from {url}")
        return response.content
