"""Tests for core.storage.select_media_storage"""
import pytest

from core.storage import MediaStorage, OverwriteStorage, select_media_storage


class TestFunction:
    def test_returns_media_storage_by_default(self, settings):
        settings.MEDIA_STORAGE = "default"

        storage = select_media_storage()

        assert type(storage) is MediaStorage

    def test_returns_overwrite_storage_when_configured(self, settings):
        settings.MEDIA_STORAGE = "overwrite"

        assert isinstance(select_media_storage(), OverwriteStorage)

    def test_raises_for_an_unknown_backend(self, settings):
        settings.MEDIA_STORAGE = "s3"

        with pytest.raises(ValueError, match="Invalid MEDIA_STORAGE 's3'"):
            select_media_storage()
