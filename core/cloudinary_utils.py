# core/cloudinary_utils.py
import logging

from django.conf import settings

import cloudinary.uploader
from rest_framework.exceptions import ValidationError

from .exceptions import StoreError

logger = logging.getLogger(__name__)

# Asset class -> (Cloudinary folder, Cloudinary resource type)
ASSET_CLASSES = {
    "banner": ("banners", "image"),
    "lecturer": ("lecturers", "image"),
    "document": ("materials", "raw"),  # raw to preserve PDFs/docs
}


def max_upload_bytes(asset_class):
    return int(settings.UPLOAD_MAX_BYTES[asset_class])


def upload_asset(uploaded_file, asset_class):
    """
    Upload a file for the given asset class and return its public URL.

    The size ceiling for the class is enforced before anything is sent to
    Cloudinary. Storage failures surface as StoreError.
    """
    if asset_class not in ASSET_CLASSES:
        raise ValidationError({"asset_class": f"Unknown asset class '{asset_class}'."})
    if not uploaded_file:
        raise ValidationError({"file": "No file provided"})

    limit = max_upload_bytes(asset_class)
    if uploaded_file.size > limit:
        raise ValidationError({"file": f"File too large. Maximum allowed is {limit} bytes."})

    folder, resource_type = ASSET_CLASSES[asset_class]
    try:
        upload_result = cloudinary.uploader.upload(
            uploaded_file,
            resource_type=resource_type,
            folder=folder,
            type="upload",         # public, not authenticated/signed
            use_filename=True,
            unique_filename=True,  # avoid collisions
            timeout=getattr(settings, "UPLOAD_TIMEOUT", 120),
        )
        logger.debug("Cloudinary upload result: %s", upload_result)
    except Exception as exc:
        logger.exception("Cloudinary upload failed for asset class %s", asset_class)
        raise StoreError(detail=f"Failed to upload file to storage: {exc}") from exc

    file_url = upload_result.get("secure_url") or upload_result.get("url")
    if not file_url:
        logger.error("No URL returned from Cloudinary upload_result=%s", upload_result)
        raise StoreError(detail="Upload succeeded but no file URL was returned by storage provider.")

    logger.info("Uploaded %s asset %s (%s bytes)", asset_class, file_url, uploaded_file.size)
    return file_url
