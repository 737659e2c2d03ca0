from pydantic import Field
from typing import Optional
from datetime import datetime
from config import MAX_URL_LENGTH
from models.schemas.schemas import CamelModel


class CommentUpdate(CamelModel):
    content: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)
    video_url: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)


class CommentCreate(CommentUpdate):
    username: Optional[str] = None
    user_image_url: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)


class CommentOut(CamelModel):
    id: int
    post_id: int
    username: Optional[str]
    user_image_url: Optional[str]
    content: Optional[str]
    image_url: Optional[str]
    video_url: Optional[str]
    created_at: datetime
    like_count: int
