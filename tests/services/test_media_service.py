"""
Tests for hotelpms/services/media_service.py
cloudinary.uploader.upload is patched; nothing leaves the process
"""
from unittest.mock import patch

import cloudinary.exceptions
import pytest

from hotelpms.services.media_service import (
    MediaUploader, MediaUploadError, public_id_from_url
)


def _uploader(**overrides):
    options = dict(cloud_name="demo", api_key="key-123", api_secret="shh", folder="hotel_images")
    options.update(overrides)
    return MediaUploader(**options)


class TestPublicId:

    def test_public_id_from_url(self):
        url = "https://res.cloudinary.com/demo/image/upload/v1/hotel_images/abc123.jpg"

        assert public_id_from_url(url) == "abc123"


class TestUpload:

    def test_upload_success(self):
        with patch("hotelpms.services.media_service.cloudinary.uploader.upload") as mock_upload:
            mock_upload.return_value = {"secure_url": "https://res.cloudinary.com/demo/x.jpg"}

            url = _uploader().upload(b"bytes", "x.jpg", "image/jpeg")

        assert url == "https://res.cloudinary.com/demo/x.jpg"
        call_args = mock_upload.call_args
        assert call_args[0][0] == b"bytes"
        assert call_args.kwargs["folder"] == "hotel_images"
        assert call_args.kwargs["resource_type"] == "image"

    def test_configures_sdk(self):
        with patch("hotelpms.services.media_service.cloudinary.config") as mock_config, \
                patch("hotelpms.services.media_service.cloudinary.uploader.upload") as mock_upload:
            mock_upload.return_value = {"secure_url": "https://res.cloudinary.com/demo/x.jpg"}

            _uploader().upload(b"bytes", "x.jpg")

        mock_config.assert_called_once_with(
            cloud_name="demo", api_key="key-123", api_secret="shh", secure=True
        )

    def test_missing_secure_url(self):
        with patch("hotelpms.services.media_service.cloudinary.uploader.upload") as mock_upload:
            mock_upload.return_value = {"public_id": "x"}

            with pytest.raises(MediaUploadError, match="Failed to get secure URL"):
                _uploader().upload(b"bytes", "x.jpg")

    def test_sdk_error(self):
        with patch("hotelpms.services.media_service.cloudinary.uploader.upload") as mock_upload:
            mock_upload.side_effect = cloudinary.exceptions.Error("Invalid Signature")

            with pytest.raises(MediaUploadError, match="Upload failed: Invalid Signature"):
                _uploader().upload(b"bytes", "x.jpg")

    def test_not_configured(self):
        with patch("hotelpms.services.media_service.cloudinary.uploader.upload") as mock_upload:
            with pytest.raises(MediaUploadError, match="not configured"):
                _uploader(api_secret="").upload(b"bytes", "x.jpg")

        mock_upload.assert_not_called()
