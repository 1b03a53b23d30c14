from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import make_asgi_app
from sqlalchemy.exc import SQLAlchemyError

from api.api import api_router
from core.config import configs
from core.logger import setup_logging
from core.storage import get_storage_client
from photoboard.db.database import close_engine, init_models

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🔧 Initializing database...")
    await init_models()
    logger.info("✅ Photo store ready.")
    yield
    # Shutdown
    logger.info("🛑 Shutting down photo store...")
    await close_engine()

app = FastAPI(
    title=configs.PROJECT_NAME,
    description="Photo board store",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS (Allow all for development env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"[SQL ERROR] {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": f"Database error: {exc}"})


app.include_router(api_router, prefix="/api")

storage = get_storage_client()
app.mount(f"/{configs.MEDIA_URL.strip('/')}", StaticFiles(directory=storage.media_root), name="uploads")
app.mount("/metrics", make_asgi_app())


@app.get("/")
async def root():
    return {"message": "Photo Board Store Running"}

@app.get("/health")
async def health_check():
    return {"status": "ok"}
