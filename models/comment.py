from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from config import MAX_URL_LENGTH
from models.database import Base
from models.post import utcnow


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    username = Column(String(255), nullable=True)
    user_image_url = Column(String(MAX_URL_LENGTH), nullable=True)
    content = Column(Text, nullable=True)
    image_url = Column(String(MAX_URL_LENGTH), nullable=True)
    video_url = Column(String(MAX_URL_LENGTH), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    like_count = Column(Integer, default=0, nullable=False)

    post = relationship("Post", back_populates="comments")
