# app/api/routers.py
from fastapi import APIRouter
from app.api.endpoints import auth, donations, tracking, health

router = APIRouter()

router.include_router(health.router)
router.include_router(auth.router)
router.include_router(donations.router)
router.include_router(tracking.router)
router.include_router(health.fallback_router)
