from fastapi import APIRouter
from chirpy.api.v1 import admin, auth, chirps, health, users, webhooks
from chirpy.core.config import settings

api_router = APIRouter(prefix=settings.API_V1_PREFIX)

api_router.include_router(health.router, tags=['health'])
api_router.include_router(users.router)
api_router.include_router(auth.router)
api_router.include_router(chirps.router)
api_router.include_router(webhooks.router)
api_router.include_router(admin.router)
