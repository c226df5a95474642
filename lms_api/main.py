"""
FastAPI entry point of the Python LMS backend.

Run with ``uvicorn lms_api.main:app`` or ``python -m lms_api.main``.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import lms_api.models  # noqa: F401  register every table on Base.metadata
from lms_api.core.config import settings
from lms_api.database.db import init_db
from lms_api.routers.auths import auth_router
from lms_api.routers.learning import (
    auditory_learning_router,
    kinesthetic_learning_router,
    read_write_learning_router,
    visual_learning_router,
)
from lms_api.routers.lectures import (
    completed_lectures_router,
    feedbacks_router,
    video_lectures_router,
)
from lms_api.routers.papers import (
    python_papers_router,
    starting_questions_router,
    starting_titles_router,
)
from lms_api.routers.progress import history_router, learning_type_router, performance_router
from lms_api.routers.qanda import (
    auditory_qanda_router,
    python_qanda_router,
    read_write_qanda_router,
    visual_qanda_router,
)
from lms_api.routers.teacher_guides import guide_feedbacks_router, teacher_guides_router
from lms_api.routers.users import user_roles_router, users_router
from lms_api.storage.media import MediaStorageManager

# ============= LOGGING CONFIG =============
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

logging.getLogger("uvicorn").setLevel(logging.INFO)
logging.getLogger("fastapi").setLevel(logging.INFO)
logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
logging.getLogger("azure").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)
# ============= END LOGGING CONFIG =============


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting Python LMS API...")

    try:
        await init_db()
        logger.info("✅ Database tables ready")
    except Exception as e:
        logger.error(f"❌ Failed to initialize database: {e}")
        raise

    if settings.AZURE_STORAGE_CONNECTION_STRING:
        app.state.media_storage = MediaStorageManager(
            connection_string=settings.AZURE_STORAGE_CONNECTION_STRING,
            container_name=settings.AZURE_STORAGE_CONTAINER,
        )
        logger.info(f"📦 Media storage ready (container: {settings.AZURE_STORAGE_CONTAINER})")
    else:
        app.state.media_storage = None
        logger.warning("⚠️  AZURE_STORAGE_CONNECTION_STRING not set, uploads are disabled")

    yield

    logger.info("⏹️  Shutting down Python LMS API...")


app = FastAPI(
    title="Python LMS API",
    description="Learning management backend for teaching Python through four learning styles",
    version="1.0.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# ============= INCLUDE ROUTERS =============
API_PREFIX = "/api"

for router in (
    auth_router,
    users_router,
    user_roles_router,
    teacher_guides_router,
    guide_feedbacks_router,
    visual_learning_router,
    auditory_learning_router,
    kinesthetic_learning_router,
    read_write_learning_router,
    visual_qanda_router,
    auditory_qanda_router,
    read_write_qanda_router,
    python_qanda_router,
    python_papers_router,
    starting_titles_router,
    starting_questions_router,
    video_lectures_router,
    feedbacks_router,
    completed_lectures_router,
    performance_router,
    history_router,
    learning_type_router,
):
    app.include_router(router, prefix=API_PREFIX)
# ============= END ROUTERS =============


@app.get("/")
async def root(request: Request):
    logger.info("📍 Root endpoint called")
    base_url = str(request.base_url).rstrip("/")
    return {
        "message": "Welcome to the Python LMS API",
        "version": app.version,
        "endpoints": {
            "docs": f"{base_url}/docs",
            "api": f"{base_url}{API_PREFIX}",
            "health": f"{base_url}/health",
        },
    }


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "media_storage": (
            "configured"
            if getattr(request.app.state, "media_storage", None) is not None
            else "disabled"
        ),
    }


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"🌐 Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"📤 Response: {response.status_code}")
    return response


if __name__ == "__main__":
    uvicorn.run("lms_api.main:app", host="0.0.0.0", port=settings.PORT)
