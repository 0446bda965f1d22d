"""
Image storage on Supabase Storage

Product and profile images are uploaded to one bucket under
`<seller_id>/<folder>/<uuid>.<ext>` and served by public URL.
"""
import logging
import uuid
from typing import Optional

from seller_panel.core.config import settings
from seller_panel.core.database import get_supabase

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


class UploadRejected(ValueError):
    """Raised for files that are too large or not an accepted image type"""


def validate_image(content: bytes, content_type: Optional[str]) -> str:
    """
    Check size and content type

    Returns:
        File extension for the content type
    """
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise UploadRejected("Only JPEG, PNG, WEBP or GIF images are allowed")

    if len(content) > settings.MAX_UPLOAD_BYTES:
        limit_mb = settings.MAX_UPLOAD_BYTES // (1024 * 1024)
        raise UploadRejected(f"File too large. Maximum size is {limit_mb}MB")

    if not content:
        raise UploadRejected("Empty file")

    return ALLOWED_IMAGE_TYPES[content_type]


def upload_image(seller_id: str, folder: str, content: bytes, content_type: Optional[str]) -> str:
    """
    Upload an image and return its public URL

    Raises:
        UploadRejected: invalid file
        RuntimeError: storage not configured
    """
    extension = validate_image(content, content_type)
    path = f"{seller_id}/{folder}/{uuid.uuid4().hex}.{extension}"

    bucket = get_supabase().storage.from_(settings.SUPABASE_BUCKET)
    bucket.upload(path, content, {"content-type": content_type})
    logger.info(f"Uploaded {len(content)} bytes to {settings.SUPABASE_BUCKET}/{path}")

    return bucket.get_public_url(path)
