"""Unit tests for image reference helpers."""

from datetime import datetime, timezone

import pytest

from app.domain.value_objects.image_reference import (
    build_image_path,
    public_url_for,
    storage_path_of,
)


@pytest.mark.parametrize(
    "reference,expected",
    [
        (
            "https://abc.supabase.co/storage/v1/object/public/car-images/1718-front.jpg",
            "car-images/1718-front.jpg",
        ),
        ("https://cdn.example.com/public/a/b/c.png", "a/b/c.png"),
        # First marker wins; later markers stay part of the path
        ("https://cdn.example.com/public/folder/public/x.jpg", "folder/public/x.jpg"),
        ("https://cdn.example.com/private/x.jpg", None),
        ("https://cdn.example.com/public/", None),
        ("", None),
    ],
)
def test_storage_path_of(reference, expected):
    """Test extraction of storage paths from public URLs."""
    assert storage_path_of(reference) == expected


def test_build_image_path_uses_epoch_millis():
    """Test that uploaded images are named by upload time."""
    now = datetime(2024, 6, 10, 6, 13, 20, 123000, tzinfo=timezone.utc)

    path = build_image_path("front view.jpg", now)

    assert path == f"car-images/{int(now.timestamp() * 1000)}-front_view.jpg"


def test_build_image_path_strips_directories():
    """Test that slashes in file names cannot escape the image folder."""
    path = build_image_path("../etc/passwd.png", datetime(2024, 1, 1, tzinfo=timezone.utc))

    assert path.count("/") == 1
    assert path.endswith("-.._etc_passwd.png")


def test_public_url_round_trips_through_storage_path():
    """Test that URLs built for uploads yield their path back for removal."""
    url = public_url_for("https://cdn.example.com/storage/", "car-images/1-a.jpg")

    assert url == "https://cdn.example.com/storage/public/car-images/1-a.jpg"
    assert storage_path_of(url) == "car-images/1-a.jpg"
