"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    car_repository: str = "in_memory"  # in_memory or postgres
    image_storage: str = "in_memory"  # in_memory or s3
    inquiry_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when car_repository=postgres or inquiry_repository=postgres
    storage_bucket: str = "car-images"
    storage_endpoint_url: str = ""  # S3-compatible endpoint; empty for AWS
    storage_region: str = "us-east-1"
    storage_access_key: str = ""
    storage_secret_key: str = ""
    storage_public_url: str = ""  # Base of public image URLs, e.g. https://cdn.example.com/storage
    max_image_size_bytes: int = 5 * 1024 * 1024  # 5MB
    admin_api_key: str = ""  # Admin routes are disabled while empty

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
