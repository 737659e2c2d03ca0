from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from typing import List
import logging

from models import repository
from models.database import get_db
from models.post import utcnow
from models.schemas.post import PostCreate, PostUpdate, PostOut
from utils.normalize import has_body, new_post_fields, post_update_fields

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])

EMPTY_POST_MESSAGE = "Post must contain either content, image, or video"


def get_post_or_404(db: Session, post_id: int):
    post = repository.get_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail=f"Post {post_id} not found")
    return post


@router.get("", response_model=List[PostOut])
def list_posts(db: Session = Depends(get_db)):
    """List every post, newest first"""
    try:
        posts = repository.list_posts(db)
        return [PostOut.model_validate(post) for post in posts]
    except Exception as e:
        logger.error(f"Error fetching posts: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch posts")


@router.post("", response_model=PostOut)
def create_post(payload: PostCreate, db: Session = Depends(get_db)):
    """
    Create a post.

    Blank usernames and avatars fall back to the configured defaults and all
    text fields are trimmed. A post without content, image and video is
    rejected with 400.
    """
    try:
        if not has_body(payload.content, payload.image_url, payload.video_url):
            raise HTTPException(status_code=400, detail=EMPTY_POST_MESSAGE)

        post = repository.create_post(db, new_post_fields(payload))
        logger.info(f"Created post {post.id} by {post.username}")
        return PostOut.model_validate(post)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating post: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create post")


@router.post("/bulk", response_model=List[PostOut])
def create_posts_bulk(payload: List[PostCreate], db: Session = Depends(get_db)):
    """
    Create many posts at once.

    Every item is normalized like a single post and checked before anything is
    written; the whole batch is committed together.
    """
    try:
        for index, item in enumerate(payload):
            if not has_body(item.content, item.image_url, item.video_url):
                raise HTTPException(status_code=400, detail=f"Item {index}: {EMPTY_POST_MESSAGE}")

        # Each post gets its own timestamp, as if created one after another
        posts = repository.create_posts(db, [new_post_fields(item) for item in payload])
        return [PostOut.model_validate(post) for post in posts]

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error bulk creating posts: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create posts")


@router.get("/search", response_model=List[PostOut])
def search_posts(q: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    """Find posts whose content contains the query, case-insensitively"""
    try:
        posts = repository.search_posts(db, q.strip())
        return [PostOut.model_validate(post) for post in posts]
    except Exception as e:
        logger.error(f"Error searching posts for '{q}': {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to search posts")


@router.get("/{post_id}", response_model=PostOut)
def get_post(post_id: int, db: Session = Depends(get_db)):
    try:
        return PostOut.model_validate(get_post_or_404(db, post_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch post")


@router.put("/{post_id}", response_model=PostOut)
def update_post(post_id: int, payload: PostUpdate, db: Session = Depends(get_db)):
    """Replace the author and media fields of a post. Counters are kept."""
    try:
        post = get_post_or_404(db, post_id)
        post = repository.update(db, post, post_update_fields(payload))
        logger.info(f"Updated post {post_id}")
        return PostOut.model_validate(post)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update post")


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, db: Session = Depends(get_db)):
    """Delete a post together with its comments"""
    try:
        post = get_post_or_404(db, post_id)
        repository.delete(db, post)
        logger.info(f"Deleted post {post_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete post")


@router.post("/{post_id}/like", response_model=PostOut)
def like_post(post_id: int, db: Session = Depends(get_db)):
    try:
        post = get_post_or_404(db, post_id)
        # Read-modify-write, no row lock
        post = repository.update(db, post, {"like_count": post.like_count + 1, "updated_at": utcnow()})
        logger.info(f"Post {post_id} liked, now {post.like_count}")
        return PostOut.model_validate(post)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error liking post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to like post")


@router.post("/{post_id}/share", response_model=PostOut)
def share_post(post_id: int, db: Session = Depends(get_db)):
    try:
        post = get_post_or_404(db, post_id)
        post = repository.update(db, post, {"share_count": post.share_count + 1, "updated_at": utcnow()})
        logger.info(f"Post {post_id} shared, now {post.share_count}")
        return PostOut.model_validate(post)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error sharing post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to share post")
