import re
from datetime import datetime

MAX_NAME_LENGTH = 50


def sanitize_filename(name: str, max_length: int = MAX_NAME_LENGTH) -> str:
    """Make a product name filesystem safe.

    Non alphanumerics become "_", runs collapse, edges are trimmed.
    Idempotent: sanitize_filename(sanitize_filename(x)) == sanitize_filename(x).

    Example: "Nutrilite™ Double X -- Multivitamin" -> "Nutrilite_Double_X_Multivitamin"
    """
    safe = re.sub(r"[^a-zA-Z0-9]", "_", name)
    safe = re.sub(r"_+", "_", safe).strip("_")
    # Truncation can leave a trailing "_"
    return safe[:max_length].strip("_")


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp (accepts a trailing "Z"). None if invalid."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None
