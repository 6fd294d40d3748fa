"""
Cloudinary image upload helper functions
"""
import logging
import re
from typing import Any, Dict, Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader

from styled.config import settings
from styled.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def initialize_cloudinary() -> bool:
    """Initialize Cloudinary with configuration from settings"""
    if settings.cloudinary_configured:
        cloudinary.config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            secure=True
        )
        return True
    return False


def is_base64_image(image_data: Optional[str]) -> bool:
    """Check for data URL format: data:image/...;base64,..."""
    if not image_data:
        return False
    return image_data.startswith('data:image/')


def extract_base64_data(data_url: str) -> Optional[str]:
    if not data_url:
        return None
    # Pattern: data:image/png;base64,iVBORw0KGgo...
    match = re.match(r'data:image/[^;]+;base64,(.+)', data_url, re.DOTALL)
    if match:
        return match.group(1)
    return None


def upload_image(image_data: str, folder: Optional[str] = None, tags: Optional[list] = None) -> Dict[str, Any]:
    """
    Store an image and return {url, public_id, uploaded}.

    Regular URLs, and data URLs when Cloudinary is disabled or unconfigured,
    are returned as-is with public_id None.

    Raises:
        ExternalServiceError: Cloudinary rejected the upload
    """
    if not is_base64_image(image_data) or not (settings.USE_CLOUDINARY and initialize_cloudinary()):
        return {"url": image_data, "public_id": None, "uploaded": False}

    base64_data = extract_base64_data(image_data)
    if not base64_data:
        return {"url": image_data, "public_id": None, "uploaded": False}

    upload_options: Dict[str, Any] = {
        "folder": folder or settings.CLOUDINARY_FOLDER,
        "resource_type": "image",
        "transformation": [
            {"quality": "auto:good"},
            {"fetch_format": "auto"}
        ]
    }
    if tags:
        upload_options["tags"] = tags

    try:
        result = cloudinary.uploader.upload(image_data, **upload_options)
    except cloudinary.exceptions.Error as e:
        logger.error(f"Cloudinary upload failed: {e}")
        raise ExternalServiceError("Cloudinary", f"upload failed: {e}") from e

    logger.info(f"Uploaded image to Cloudinary: {result.get('public_id')}")
    return {
        "url": result.get("secure_url"),
        "public_id": result.get("public_id"),
        "uploaded": True,
    }


def delete_image(public_id: Optional[str]) -> bool:
    """Delete an image from Cloudinary; True if it was removed"""
    if not public_id or not initialize_cloudinary():
        return False

    try:
        result = cloudinary.uploader.destroy(public_id)
    except cloudinary.exceptions.Error as e:
        logger.warning(f"Failed to delete image from Cloudinary: {e}")
        return False
    return result.get("result") == "ok"


def get_cloudinary_status() -> Dict[str, Any]:
    """Get Cloudinary configuration status"""
    return {
        "enabled": settings.USE_CLOUDINARY,
        "configured": settings.cloudinary_configured,
        "cloud_name": settings.CLOUDINARY_CLOUD_NAME if settings.cloudinary_configured else None,
        "folder": settings.CLOUDINARY_FOLDER
    }
