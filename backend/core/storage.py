"""
File storage backends for uploaded media
"""
import logging

from django.conf import settings
from django.core.files.storage import FileSystemStorage

logger = logging.getLogger(__name__)


class MediaStorage(FileSystemStorage):
    """
    File system storage rooted at MEDIA_ROOT with fixed permissions

    Location and base URL are left unset so they follow MEDIA_ROOT and
    MEDIA_URL, including overrides made after the storage is created.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("file_permissions_mode", 0o644)
        kwargs.setdefault("directory_permissions_mode", 0o755)
        super().__init__(**kwargs)


class OverwriteStorage(MediaStorage):
    """
    Media storage that replaces an existing file with the same name

    The default storage appends a random suffix instead.
    """

    def get_available_name(self, name, max_length=None):
        if self.exists(name):
            logger.info(f"Overwriting existing media file: {name}")
            self.delete(name)
        return super().get_available_name(name, max_length=max_length)


STORAGE_BACKENDS = {
    "default": MediaStorage,
    "overwrite": OverwriteStorage,
}


def select_media_storage():
    """
    Storage used by model file fields, chosen by the MEDIA_STORAGE setting

    Django calls this once, when the model class is created.

    Raises:
        ValueError: If MEDIA_STORAGE names no known backend
    """
    backend_name = getattr(settings, "MEDIA_STORAGE", "default")

    if backend_name not in STORAGE_BACKENDS:
        valid = ", ".join(STORAGE_BACKENDS)
        raise ValueError(
            f"Invalid MEDIA_STORAGE '{backend_name}'. Must be one of: {valid}"
        )

    return STORAGE_BACKENDS[backend_name]()
