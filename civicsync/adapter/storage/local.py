"""Image storage backends.

LocalImageStorage writes to a directory that the app serves as static files.
InMemoryImageStorage keeps bytes in a dict and is used by tests.
"""

from pathlib import Path

import logfire
from starlette.concurrency import run_in_threadpool

from civicsync.adapter.error import StorageError
from civicsync.config import UploadSettings
from civicsync.domain.service.image_service import ImageStorage


class LocalImageStorage(ImageStorage):
    """Stores images on local disk under the uploads directory."""

    def __init__(self, upload_settings: UploadSettings) -> None:
        """Initialize local storage, creating the directory if needed.

        Args:
            upload_settings: Upload directory and public URL prefix
        """
        self.directory = Path(upload_settings.directory)
        self.url_prefix = upload_settings.url_prefix.rstrip("/")

        if not self.directory.exists():
            self.directory.mkdir(parents=True, exist_ok=True)
            logfire.info("Created uploads directory", directory=str(self.directory))

    async def save(self, filename: str, content: bytes) -> str:
        """Write image bytes to disk."""
        path = self._path_for(filename)
        try:
            await run_in_threadpool(path.write_bytes, content)
        except OSError as e:
            logfire.error("Failed to write image", path=str(path), error=str(e))
            raise StorageError(f"Failed to store image {filename}") from e
        return f"{self.url_prefix}/{filename}"

    async def delete(self, url: str) -> bool:
        """Delete an image file if it exists."""
        path = self._path_for(url.rsplit("/", 1)[-1])
        if not path.exists():
            return False
        try:
            await run_in_threadpool(path.unlink)
        except OSError as e:
            logfire.error("Failed to delete image", path=str(path), error=str(e))
            raise StorageError(f"Failed to delete image {url}") from e
        return True

    def _path_for(self, filename: str) -> Path:
        # Only a bare filename is ever joined to the uploads directory
        name = Path(filename).name
        if not name or name in (".", ".."):
            raise StorageError(f"Invalid image filename: {filename!r}")
        return self.directory / name


class InMemoryImageStorage(ImageStorage):
    """In-memory image storage for testing."""

    def __init__(self, url_prefix: str = "/uploads") -> None:
        self.url_prefix = url_prefix.rstrip("/")
        self.files: dict[str, bytes] = {}

    async def save(self, filename: str, content: bytes) -> str:
        """Store bytes in memory."""
        url = f"{self.url_prefix}/{filename}"
        self.files[url] = content
        return url

    async def delete(self, url: str) -> bool:
        """Remove stored bytes."""
        return self.files.pop(url, None) is not None
