"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, bookmarks, content, follows, messages, payments, users

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(content.router, prefix="/content", tags=["content"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(bookmarks.router, prefix="/bookmarks", tags=["bookmarks"])
router.include_router(follows.router, prefix="/follow", tags=["follows"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
