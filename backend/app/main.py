from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import os

from app.core.config import get_settings
from app.core.database import init_db
from app.core.errors import register_error_handlers
from app.core.logging import setup_logging
from app.routers import chat, materials, models, pages


settings = get_settings()
logger = logging.getLogger(__name__)

# Scratch space for document uploads waiting to be parsed
os.makedirs(settings.upload_dir, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    if settings.auto_create_tables:
        await init_db()
    logger.info("Course chat backend ready (default model: %s)", settings.default_model)
    yield


app = FastAPI(
    title="Course Chat API",
    description="Chat assistant that answers from uploaded course materials",
    version="1.0.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(pages.router, tags=["Pages"])
app.include_router(materials.router, tags=["Materials"])
app.include_router(chat.router, tags=["Chat"])
app.include_router(models.router, prefix="/models", tags=["Models"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
