from pydantic import Field
from typing import List, Optional
from datetime import datetime
from config import MAX_URL_LENGTH
from models.schemas.schemas import CamelModel
from models.schemas.comments import CommentOut


class PostCreate(CamelModel):
    # A client-supplied id is not a field here, so it is dropped and the store assigns one
    username: Optional[str] = None
    user_image_url: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)
    content: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)
    video_url: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)


class PostUpdate(PostCreate):
    pass


class PostOut(CamelModel):
    id: int
    username: Optional[str]
    user_image_url: Optional[str]
    content: Optional[str]
    image_url: Optional[str]
    video_url: Optional[str]
    created_at: datetime
    updated_at: datetime
    like_count: int
    share_count: int
    comments: List[CommentOut] = []
