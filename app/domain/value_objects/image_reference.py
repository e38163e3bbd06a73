"""Image reference helpers for stored car images."""

import re
from datetime import datetime, timezone
from typing import Optional

# Public URLs carry the storage-relative object path after this marker
PUBLIC_MARKER = "public/"
IMAGE_FOLDER = "car-images"

_PUBLIC_PATH_PATTERN = re.compile(r"public/(.+)$")


def storage_path_of(reference: str) -> Optional[str]:
    """
    Extract the storage-relative object path from an image reference.

    Args:
        reference: Public image URL as stored on a car

    Returns:
        Object path after the first ``public/`` marker, or None if the
        reference does not contain one
    """
    if not reference:
        return None
    match = _PUBLIC_PATH_PATTERN.search(reference)
    if match is None:
        return None
    return match.group(1)


def build_image_path(filename: str, now: Optional[datetime] = None) -> str:
    """
    Build the object path for a newly uploaded image.

    Args:
        filename: Original file name
        now: Upload time (defaults to current UTC time)

    Returns:
        Path of the form ``car-images/<epoch-millis>-<filename>``
    """
    if now is None:
        now = datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    safe_name = filename.strip().replace("/", "_").replace(" ", "_")
    return f"{IMAGE_FOLDER}/{millis}-{safe_name}"


def public_url_for(public_base_url: str, path: str) -> str:
    """Join a public base URL and an object path around the public marker."""
    return f"{public_base_url.rstrip('/')}/{PUBLIC_MARKER}{path}"
