from fastapi import APIRouter
from routes.posts import post_router
from routes.posts import post_comment_router

router = APIRouter(prefix="/api")

router.include_router(post_router.router)
router.include_router(post_comment_router.router)
