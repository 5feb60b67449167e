"""Image storage infrastructure providers."""

from dishka import Scope, provide

from civicsync.adapter.storage import LocalImageStorage
from civicsync.config import UploadSettings
from civicsync.domain.service import ImageStorage
from civicsync.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local uploads directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_storage(self, upload_settings: UploadSettings) -> ImageStorage:
        """Provide local disk image storage."""
        return LocalImageStorage(upload_settings)
