import logging
import os
import posixpath
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from azure.core.exceptions import AzureError
from azure.storage.blob import BlobServiceClient, ContentSettings

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class MediaUploadError(Exception):
    """Raised when the media host rejects or fails an upload."""


@dataclass
class UploadResult:
    blob_name: str
    url: str
    size_bytes: int
    content_type: Optional[str] = None


def build_blob_name(folder: str, filename: str, force_pdf: bool = False) -> str:
    """
    Organized blob path: folder/timestamp_filename.

    With ``force_pdf`` the stored name always ends in ``.pdf``, whatever the
    client called the file.
    """
    base = posixpath.basename(filename or "") or "upload"
    if force_pdf:
        stem, ext = posixpath.splitext(base)
        if ext.lower() != ".pdf":
            base = f"{stem or 'upload'}.pdf"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    return f"{folder.strip('/')}/{timestamp}_{base}"


class MediaStorageManager:
    """
    Uploads lecture media (videos, audio, PDF materials) to Azure Blob Storage
    and hands back public URLs.
    """

    def __init__(
        self,
        connection_string: Optional[str] = None,
        container_name: str = "lms-media",
    ):
        """
        Initialize Azure Storage manager.

        Args:
            connection_string: Azure Storage connection string (or set AZURE_STORAGE_CONNECTION_STRING env var)
            container_name: Name of the blob container to use
        """
        self.connection_string = connection_string or os.getenv(
            "AZURE_STORAGE_CONNECTION_STRING"
        )

        if not self.connection_string:
            raise ValueError(
                "Azure Storage connection string must be provided or set in AZURE_STORAGE_CONNECTION_STRING"
            )

        self.container_name = container_name
        self.blob_service_client = BlobServiceClient.from_connection_string(
            self.connection_string
        )

        # Ensure container exists
        self._ensure_container_exists()

    def _ensure_container_exists(self):
        """Create the container (publicly readable blobs) if it doesn't exist."""
        try:
            container_client = self.blob_service_client.get_container_client(
                self.container_name
            )
            if not container_client.exists():
                container_client.create_container(public_access="blob")
                logger.info(f"Created container: {self.container_name}")
        except AzureError as e:
            logger.error(f"Error ensuring container exists: {e}")
            raise

    def upload_bytes(
        self,
        file_content: bytes,
        filename: str,
        folder: str,
        resource_type: str = "raw",
        content_type: Optional[str] = None,
        force_pdf: bool = False,
    ) -> UploadResult:
        """
        Upload a file to Azure Blob Storage.

        Args:
            file_content: File content as bytes
            filename: Original filename
            folder: Target virtual folder, e.g. ``python/materials``
            resource_type: ``video``, ``image`` or ``raw``; stored as metadata
            content_type: MIME type reported by the client
            force_pdf: Store as ``.pdf`` / ``application/pdf`` regardless of source

        Returns:
            UploadResult with the blob name and its public URL
        """
        blob_name = build_blob_name(folder, filename, force_pdf=force_pdf)
        if force_pdf:
            content_type = PDF_CONTENT_TYPE

        blob_metadata = {
            "original_filename": filename or "",
            "resource_type": resource_type,
            "upload_timestamp": datetime.now(timezone.utc).isoformat(),
        }

        try:
            blob_client = self.blob_service_client.get_blob_client(
                container=self.container_name, blob=blob_name
            )
            blob_client.upload_blob(
                file_content,
                overwrite=False,
                metadata=blob_metadata,
                content_settings=ContentSettings(content_type=content_type)
                if content_type
                else None,
            )
        except AzureError as e:
            logger.error(f"Failed to upload {blob_name}: {e}")
            raise MediaUploadError(f"Failed to upload file: {str(e)}") from e

        return UploadResult(
            blob_name=blob_name,
            url=blob_client.url,
            size_bytes=len(file_content),
            content_type=content_type,
        )
