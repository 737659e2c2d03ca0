from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
import logging

from models import repository
from models.database import get_db
from models.schemas.comments import CommentOut, CommentCreate, CommentUpdate
from models.schemas.post import PostOut
from routes.posts.post_router import get_post_or_404
from utils.normalize import media_fields, new_comment_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Post Comments"])


def get_owned_comment_or_404(db: Session, post_id: int, comment_id: int):
    """Load a comment, treating one attached to a different post as missing."""
    comment = repository.get_comment(db, comment_id)
    if comment is None or comment.post_id != post_id:
        raise HTTPException(status_code=404, detail=f"Comment {comment_id} not found on post {post_id}")
    return comment


@router.get("/{post_id}/comments", response_model=List[CommentOut])
def get_comments(post_id: int, db: Session = Depends(get_db)):
    """Get all comments for a post"""
    try:
        comments = repository.list_comments(db, post_id)
        return [CommentOut.model_validate(comment) for comment in comments]
    except Exception as e:
        logger.error(f"Error fetching comments for post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to get comments")


@router.post("/{post_id}/comments", response_model=PostOut)
def add_comment(post_id: int, comment: CommentCreate, db: Session = Depends(get_db)):
    """Add a comment to a post and return the post with its comments"""
    try:
        post = get_post_or_404(db, post_id)

        created = repository.create_comment(db, post_id, new_comment_fields(comment))
        logger.info(f"Comment {created.id} added to post {post_id}")

        # Reload so the new comment shows up in the collection
        db.refresh(post)
        return PostOut.model_validate(post)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error adding comment to post {post_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create comment")


@router.get("/{post_id}/comments/{comment_id}", response_model=CommentOut)
def get_comment(post_id: int, comment_id: int, db: Session = Depends(get_db)):
    try:
        get_post_or_404(db, post_id)
        return CommentOut.model_validate(get_owned_comment_or_404(db, post_id, comment_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching comment {comment_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to get comment")


@router.put("/{post_id}/comments/{comment_id}", response_model=CommentOut)
def update_comment(post_id: int, comment_id: int, payload: CommentUpdate, db: Session = Depends(get_db)):
    """Replace the content, image and video of a comment. Author and likes are kept."""
    try:
        get_post_or_404(db, post_id)
        comment = get_owned_comment_or_404(db, post_id, comment_id)
        comment = repository.update(db, comment, media_fields(payload))
        logger.info(f"Updated comment {comment_id} on post {post_id}")
        return CommentOut.model_validate(comment)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating comment {comment_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update comment")


@router.delete("/{post_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(post_id: int, comment_id: int, db: Session = Depends(get_db)):
    try:
        get_post_or_404(db, post_id)
        comment = get_owned_comment_or_404(db, post_id, comment_id)
        repository.delete(db, comment)
        logger.info(f"Deleted comment {comment_id} from post {post_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting comment {comment_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete comment")


@router.post("/{post_id}/comments/{comment_id}/like", response_model=CommentOut)
def like_comment(post_id: int, comment_id: int, db: Session = Depends(get_db)):
    try:
        get_post_or_404(db, post_id)
        comment = get_owned_comment_or_404(db, post_id, comment_id)
        comment = repository.update(db, comment, {"like_count": comment.like_count + 1})
        logger.info(f"Comment {comment_id} liked, now {comment.like_count}")
        return CommentOut.model_validate(comment)

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error liking comment {comment_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to like comment")
