"""S3-compatible image storage adapter."""

from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from app.application.ports.image_storage import ImageStorage
from app.domain.value_objects.image_reference import public_url_for
from app.infrastructure.logging.logger import logger


class S3ImageStorage(ImageStorage):
    """boto3 adapter for the car image bucket."""

    CACHE_CONTROL = "max-age=3600"

    def __init__(
        self,
        bucket: str,
        public_base_url: str,
        endpoint_url: Optional[str] = None,
        region: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        client: Any = None,
    ) -> None:
        """
        Initialize S3 image storage.

        Args:
            bucket: Bucket name
            public_base_url: Base of the public URLs returned by upload
            endpoint_url: S3-compatible endpoint (None for AWS)
            region: Bucket region
            access_key: Access key id
            secret_key: Secret access key
            client: Pre-built boto3 S3 client (used instead of the credentials)
        """
        if not bucket:
            raise ValueError("Storage bucket name is not configured")
        if not public_base_url:
            raise ValueError("STORAGE_PUBLIC_URL is required for S3 image storage")

        self._bucket = bucket
        self._public_base_url = public_base_url
        if client is None:
            client = boto3.client(
                "s3",
                aws_access_key_id=access_key or None,
                aws_secret_access_key=secret_key or None,
                region_name=region or None,
                endpoint_url=endpoint_url or None,
                config=Config(signature_version="s3v4"),
            )
        self._client = client

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """
        Store an object and return its public URL.

        Args:
            path: Object key
            data: Object bytes
            content_type: MIME type of the object

        Returns:
            Public URL of the stored object
        """
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
                CacheControl=self.CACHE_CONTROL,
            )
        except ClientError as e:
            logger.error(f"Upload of {path} to {self._bucket} failed: {e}")
            raise

        return public_url_for(self._public_base_url, path)

    async def remove(self, path: str) -> None:
        """
        Remove an object from the bucket.

        Args:
            path: Object key
        """
        try:
            self._client.delete_object(Bucket=self._bucket, Key=path)
        except ClientError as e:
            logger.error(f"Removal of {path} from {self._bucket} failed: {e}")
            raise
