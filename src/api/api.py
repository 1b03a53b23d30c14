from api.endpoints import photos
from fastapi import APIRouter

api_router = APIRouter()
api_router.include_router(photos.router, tags=["Photos"])
