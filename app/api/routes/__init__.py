"""API routes."""

from fastapi import APIRouter

from app.api.routes import admin_users, auth, chilaquiles, health, me

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(me.router, prefix="/me", tags=["auth"])
router.include_router(admin_users.router, prefix="/admin/users", tags=["admin"])
router.include_router(chilaquiles.router, prefix="/chilaquiles", tags=["chilaquiles"])
