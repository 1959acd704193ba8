"""
S3 client for media bucket operations.

Uploads and deletes media objects and produces URLs for serving them.
Works against AWS S3 or an S3-compatible endpoint.

Dependencies: boto3
System role: Media object storage
"""

from datetime import datetime, timedelta, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from franchise_site.core.exceptions import StorageError


class S3MediaClient:
    """S3 client for the media bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """
        Initialize S3 client for the media bucket.

        Args:
            bucket: S3 bucket name for media storage
            region: AWS region for S3 bucket
            endpoint_url: Custom endpoint for S3-compatible storage
            public_base_url: Public URL prefix serving the bucket (CDN or public bucket)
        """
        self._bucket = bucket
        self._region = region
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._s3_client = boto3.client("s3", region_name=region, endpoint_url=endpoint_url)

    @property
    def bucket(self) -> str:
        return self._bucket

    def upload_bytes(self, s3_key: str, data: bytes, content_type: str) -> None:
        """
        Upload an object.

        Args:
            s3_key: S3 object key (path in bucket)
            data: File contents
            content_type: MIME type stored with the object

        Raises:
            StorageError: If the upload fails
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=s3_key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to upload {s3_key}",
                operation="upload",
                details={"bucket": self._bucket, "error": str(e)},
            ) from e

    def delete_object(self, s3_key: str) -> None:
        """
        Delete an object (missing objects are not an error).

        Raises:
            StorageError: If the delete call fails
        """
        try:
            self._s3_client.delete_object(Bucket=self._bucket, Key=s3_key)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to delete {s3_key}",
                operation="delete",
                details={"bucket": self._bucket, "error": str(e)},
            ) from e

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for downloading/viewing an S3 object.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    def public_url(self, s3_key: str, expires_in: int = 3600) -> str:
        """
        URL for serving an object on the public site.

        Uses the public base URL when configured, a presigned URL otherwise.
        """
        if self._public_base_url:
            return f"{self._public_base_url}/{s3_key}"
        url, _ = self.generate_presigned_download_url(s3_key, expires_in)
        return url
