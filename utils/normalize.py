"""
Normalization shared by every write path.

Single post creation, bulk creation and comment creation all run their input
through these helpers so that defaults, trimming and timestamps are applied
the same way everywhere.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from config import DEFAULT_USERNAME, DEFAULT_USER_IMAGE_URL
from models.post import utcnow


def clean(value: Optional[str]) -> Optional[str]:
    """Trim surrounding whitespace, keeping None as None."""
    return value.strip() if value is not None else None


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def or_default(value: Optional[str], default: str) -> str:
    return default if is_blank(value) else value.strip()


def has_body(content: Optional[str], image_url: Optional[str], video_url: Optional[str]) -> bool:
    """A post needs text, an image or a video."""
    return not (is_blank(content) and is_blank(image_url) and is_blank(video_url))


def media_fields(payload) -> Dict[str, Any]:
    return {
        "content": clean(payload.content),
        "image_url": clean(payload.image_url),
        "video_url": clean(payload.video_url),
    }


def new_post_fields(payload, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Column values for a post about to be inserted."""
    now = now or utcnow()
    fields = {
        "username": or_default(payload.username, DEFAULT_USERNAME),
        "user_image_url": or_default(payload.user_image_url, DEFAULT_USER_IMAGE_URL),
        "created_at": now,
        "updated_at": now,
        "like_count": 0,
        "share_count": 0,
    }
    fields.update(media_fields(payload))
    return fields


def post_update_fields(payload, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Column values replacing the editable part of an existing post."""
    fields = {
        "username": clean(payload.username),
        "user_image_url": clean(payload.user_image_url),
        "updated_at": now or utcnow(),
    }
    fields.update(media_fields(payload))
    return fields


def new_comment_fields(payload, now: Optional[datetime] = None) -> Dict[str, Any]:
    fields = {
        "username": or_default(payload.username, DEFAULT_USERNAME),
        "user_image_url": or_default(payload.user_image_url, DEFAULT_USER_IMAGE_URL),
        "created_at": now or utcnow(),
        "like_count": 0,
    }
    fields.update(media_fields(payload))
    return fields
