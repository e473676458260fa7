import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from reelfolio.api.routes import admin_router, router
from reelfolio.config import Settings, settings as default_settings
from reelfolio.repositories.file_blob_store import FileBlobStore
from reelfolio.repositories.project_repository import ProjectRepository
from reelfolio.repositories.site_content_repository import SiteContentRepository
from reelfolio.services.brief_service import BriefService
from reelfolio.services.project_service import ProjectService
from reelfolio.services.site_content_service import SiteContentService
from reelfolio.services.upload_service import UploadService


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    _configure_logging(settings)
    logger = logging.getLogger(__name__)
    logger.info(
        "Reelfolio API starting | blob_dir=%s | port=%s | admin=%s | brief=%s",
        settings.BLOB_DIR,
        settings.PORT,
        "enabled" if settings.ADMIN_PASSWORD else "disabled",
        "enabled" if settings.GEMINI_API_KEY else "disabled",
    )
    store = FileBlobStore(settings.BLOB_DIR, settings.BLOB_PUBLIC_BASE_URL)
    app.state.blob_store = store
    app.state.project_service = ProjectService(ProjectRepository(store))
    app.state.site_content_service = SiteContentService(SiteContentRepository(store))
    app.state.upload_service = UploadService(store)
    app.state.brief_service = BriefService(settings.GEMINI_API_KEY, settings.GEMINI_MODEL)
    yield
    logger.info("Reelfolio API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Reelfolio API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.include_router(admin_router)
    app.mount("/blobs", StaticFiles(directory=settings.BLOB_DIR, check_dir=False), name="blobs")

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logging.getLogger(__name__).exception("Unhandled exception")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Internal server error"},
        )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("reelfolio.main:app", host="0.0.0.0", port=default_settings.PORT, log_level=default_settings.LOG_LEVEL)
