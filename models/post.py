from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from config import MAX_URL_LENGTH
from models.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), nullable=True)
    user_image_url = Column(String(MAX_URL_LENGTH), nullable=True)
    content = Column(Text, nullable=True)
    image_url = Column(String(MAX_URL_LENGTH), nullable=True)
    video_url = Column(String(MAX_URL_LENGTH), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    like_count = Column(Integer, default=0, nullable=False)
    share_count = Column(Integer, default=0, nullable=False)

    # Comments are owned by the post and removed with it
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )
