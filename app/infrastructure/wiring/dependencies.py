"""Dependency injection factory functions."""

from app.adapters.outbound.cars import InMemoryCarRepository, PostgresCarRepository
from app.adapters.outbound.inquiry import (
    InMemoryInquiryRepository,
    PostgresInquiryRepository,
)
from app.adapters.outbound.storage import InMemoryImageStorage, S3ImageStorage
from app.application.ports.car_repository import CarRepository
from app.application.ports.image_storage import ImageStorage
from app.application.ports.inquiry_repository import InquiryRepository
from app.application.use_cases.browse_catalog import CatalogBrowser
from app.application.use_cases.inventory_service import InventoryService
from app.application.use_cases.submit_inquiry import SubmitInquiry
from app.application.use_cases.upload_car_images import UploadCarImages
from app.infrastructure.config.settings import settings


def create_car_repository() -> CarRepository:
    """
    Factory function to create the cars table adapter.

    Returns:
        CarRepository instance
    """
    if settings.car_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CAR_REPOSITORY=postgres")
        return PostgresCarRepository()
    else:
        return InMemoryCarRepository()


def create_image_storage() -> ImageStorage:
    """
    Factory function to create the image bucket adapter.

    Returns:
        ImageStorage instance
    """
    if settings.image_storage == "s3":
        return S3ImageStorage(
            bucket=settings.storage_bucket,
            public_base_url=settings.storage_public_url,
            endpoint_url=settings.storage_endpoint_url,
            region=settings.storage_region,
            access_key=settings.storage_access_key,
            secret_key=settings.storage_secret_key,
        )
    elif settings.storage_public_url:
        return InMemoryImageStorage(public_base_url=settings.storage_public_url)
    else:
        return InMemoryImageStorage()


def create_inquiry_repository() -> InquiryRepository:
    """
    Factory function to create inquiry repository.

    Returns:
        InquiryRepository instance
    """
    if settings.inquiry_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when INQUIRY_REPOSITORY=postgres")
        return PostgresInquiryRepository()
    else:
        return InMemoryInquiryRepository()


def create_inventory_service(
    car_repository: CarRepository,
    image_storage: ImageStorage,
) -> InventoryService:
    """
    Factory function to create the inventory access layer.

    Args:
        car_repository: Cars table adapter
        image_storage: Image bucket adapter

    Returns:
        InventoryService instance
    """
    return InventoryService(car_repository, image_storage)


def create_catalog_browser(inventory_service: InventoryService) -> CatalogBrowser:
    """
    Factory function to create a catalog browsing session.

    Returns:
        CatalogBrowser instance
    """
    return CatalogBrowser(inventory_service)


def create_upload_car_images(image_storage: ImageStorage) -> UploadCarImages:
    """
    Factory function to create the image upload use case.

    Returns:
        UploadCarImages instance
    """
    return UploadCarImages(image_storage, max_size_bytes=settings.max_image_size_bytes)


def create_submit_inquiry(inquiry_repository: InquiryRepository) -> SubmitInquiry:
    """
    Factory function to create the inquiry use case.

    Returns:
        SubmitInquiry instance
    """
    return SubmitInquiry(inquiry_repository)
