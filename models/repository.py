import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from models.post import Post
from models.comment import Comment

logger = logging.getLogger(__name__)


# Posts

def list_posts(db: Session) -> List[Post]:
    """All posts, newest first"""
    return db.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).all()


def search_posts(db: Session, text: str) -> List[Post]:
    """Posts whose content contains the text, ignoring case"""
    return (
        db.query(Post)
        .filter(Post.content.icontains(text, autoescape=True))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


def get_post(db: Session, post_id: int) -> Optional[Post]:
    return db.get(Post, post_id)


def create_post(db: Session, fields: Dict[str, Any]) -> Post:
    post = Post(**fields)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def create_posts(db: Session, items: List[Dict[str, Any]]) -> List[Post]:
    """Insert every post in one transaction; nothing is written if any insert fails."""
    posts = [Post(**fields) for fields in items]
    db.add_all(posts)
    db.commit()
    for post in posts:
        db.refresh(post)
    logger.info(f"Bulk inserted {len(posts)} posts")
    return posts


# Comments

def list_comments(db: Session, post_id: int) -> List[Comment]:
    return db.query(Comment).filter(Comment.post_id == post_id).order_by(Comment.id).all()


def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    return db.get(Comment, comment_id)


def create_comment(db: Session, post_id: int, fields: Dict[str, Any]) -> Comment:
    comment = Comment(post_id=post_id, **fields)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


# Shared

def update(db: Session, record, fields: Dict[str, Any]):
    """Apply column values to a loaded record and persist them."""
    for name, value in fields.items():
        setattr(record, name, value)
    db.commit()
    db.refresh(record)
    return record


def delete(db: Session, record) -> None:
    db.delete(record)
    db.commit()
