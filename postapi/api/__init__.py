"""API routes."""

from fastapi import APIRouter

from postapi.api import auth, health, posts

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(health.router, prefix="/health", tags=["health"])
