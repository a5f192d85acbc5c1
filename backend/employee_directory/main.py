"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import get_settings
from .database import engine
from .errors import EmployeeDirectoryError
from .routers.employees import router as employees_router
from .routers.system import router as system_router
from .routers.users import router as users_router
from .schema import ensure_schema
from .services.change_feed import ChangeFeedTracker
from .services.media import MediaAttachmentHandler

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Employee Directory Backend", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.state.media = MediaAttachmentHandler(settings.upload_dir, settings.max_upload_bytes)
app.state.media.ensure_upload_dir()
# Created once per process: the watermark starts at process start time.
app.state.change_feed = ChangeFeedTracker(serialized=settings.change_feed_serialized)

app.include_router(system_router)
app.include_router(users_router)
app.include_router(employees_router)
app.mount(
    "/uploads",
    StaticFiles(directory=settings.upload_dir),
    name="uploads",
)


@app.exception_handler(EmployeeDirectoryError)
async def handle_directory_error(_: Request, exc: EmployeeDirectoryError) -> JSONResponse:
    """Render service errors as ``{"error": ...}`` bodies with their status."""

    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.on_event("startup")
async def on_startup() -> None:
    """Bring the schema to head; a failure aborts startup so nothing is served."""

    await ensure_schema(engine)
    app.state.media.ensure_upload_dir()
    logger.info("Employee service ready (uploads in %s)", settings.upload_dir)
