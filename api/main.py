import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from auth import router as auth_router
from core import db, errors, schema, uploads
from core.log import configure_logging
from developers import router as developers_router
from events import router as events_router
from gallery import router as gallery_router
from projects import router as projects_router
from users import router as users_router

load_dotenv()
configure_logging()

logger = logging.getLogger(__name__)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process, then bring tables up to date.
    await db.init_pool()
    try:
        if schema.sync_enabled():
            await schema.sync_schema()
        else:
            logger.info("schema_sync_skipped")
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Eventos API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(errors.ApiError, errors.api_error_handler)
app.add_exception_handler(RequestValidationError, errors.validation_error_handler)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(users_router.router, tags=["users"])
app.include_router(developers_router.router, tags=["developers"])
app.include_router(projects_router.router, tags=["projects"])
app.include_router(events_router.router, tags=["events"])
app.include_router(gallery_router.router, tags=["gallery"])

# Stored image paths are `uploads/<name>`, so they resolve under this mount.
app.mount(
    f"/{uploads.PUBLIC_PREFIX}",
    StaticFiles(directory=str(uploads.ensure_upload_dir())),
    name="uploads",
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "eventos api"}
