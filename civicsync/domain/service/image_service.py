"""Image upload domain service."""

import secrets
import time
from abc import ABC, abstractmethod

import logfire

from civicsync.config import UploadSettings
from civicsync.domain.error import UploadError
from civicsync.domain.value import ImageUpload

from .base import Service

# Content types accepted for each allowed extension family
_IMAGE_KINDS = ("jpeg", "jpg", "png", "gif")


class ImageStorage(ABC):
    """Storage interface for uploaded images."""

    @abstractmethod
    async def save(self, filename: str, content: bytes) -> str:
        """Store image bytes under a filename.

        Args:
            filename: Unique filename (no directories)
            content: Raw image bytes

        Returns:
            Public relative URL of the stored image
        """
        pass

    @abstractmethod
    async def delete(self, url: str) -> bool:
        """Remove a previously stored image.

        Args:
            url: Relative URL returned by save()

        Returns:
            True if a file was removed, False if it didn't exist
        """
        pass


class ImageService(Service):
    """Domain service validating and storing issue images."""

    def __init__(self, storage: ImageStorage, upload_settings: UploadSettings) -> None:
        """Initialize image service.

        Args:
            storage: Image storage backend
            upload_settings: Upload limits and allowed types
        """
        self.storage = storage
        self.upload_settings = upload_settings

    def validate(self, image: ImageUpload) -> None:
        """Check an upload's type and size.

        Both the file extension and the declared content type must name an
        allowed image type.

        Raises:
            UploadError: If the type is not allowed or the file is too large
        """
        extension_ok = image.extension in self.upload_settings.allowed_extensions
        content_type = image.content_type.lower()
        mimetype_ok = content_type.startswith("image/") and any(
            kind in content_type for kind in _IMAGE_KINDS
        )
        if not (extension_ok and mimetype_ok):
            logfire.warn(
                "Rejected upload type",
                filename=image.filename,
                content_type=image.content_type,
            )
            raise UploadError("Only image files (jpeg, jpg, png, gif) are allowed")

        if image.size > self.upload_settings.max_size_bytes:
            max_mb = self.upload_settings.max_size_bytes // (1024 * 1024)
            logfire.warn("Rejected oversized upload", size=image.size)
            raise UploadError(f"File size too large. Maximum size is {max_mb}MB.")

    async def store(self, image: ImageUpload) -> str:
        """Validate and store an uploaded image.

        Args:
            image: The uploaded image

        Returns:
            Relative URL referencing the stored image

        Raises:
            UploadError: If validation fails
        """
        with logfire.span("image_service.store", filename=image.filename, size=image.size):
            self.validate(image)

            filename = self._unique_filename(image.extension)
            url = await self.storage.save(filename, image.content)

            logfire.info("Image stored", url=url)
            return url

    async def remove(self, url: str | None) -> None:
        """Remove a stored image if there is one."""
        if not url:
            return

        with logfire.span("image_service.remove", url=url):
            removed = await self.storage.delete(url)
            if not removed:
                logfire.warn("Stored image already missing", url=url)

    @staticmethod
    def _unique_filename(extension: str) -> str:
        """Build '<millis>-<random><ext>'."""
        millis = int(time.time() * 1000)
        suffix = secrets.randbelow(10**9)
        return f"{millis}-{suffix}{extension}"
