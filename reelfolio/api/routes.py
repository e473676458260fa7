import asyncio
import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, Response, UploadFile

from reelfolio.api.auth import require_admin
from reelfolio.schemas.brief import BriefRequest, CreativeBrief
from reelfolio.schemas.projects import (
    ProjectCreatedResponse,
    ProjectCreateRequest,
    ProjectUpdateRequest,
    SuccessResponse,
    VideoPreviewResponse,
)
from reelfolio.schemas.site_content import SiteContentUpdateRequest
from reelfolio.services.brief_service import BriefGenerationError, BriefServiceUnavailable
from reelfolio.services.project_service import ProjectNotFound
from reelfolio.services.site_content_service import InvalidSiteContent
from reelfolio.services.upload_service import EmptyUpload
from reelfolio.services.video_link_resolver import VideoLinkResolver

logger = logging.getLogger(__name__)

PUBLIC_CACHE_CONTROL = "s-maxage=10, stale-while-revalidate"

router = APIRouter()
admin_router = APIRouter(prefix="/api/admin", dependencies=[Depends(require_admin)])

_resolver = VideoLinkResolver()


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/api/projects")
async def public_projects(request: Request, response: Response) -> dict:
    projects = await asyncio.to_thread(request.app.state.project_service.list_projects)
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
    return projects.to_record()


@router.get("/api/site-content")
async def get_site_content(request: Request, response: Response) -> dict:
    content = await asyncio.to_thread(request.app.state.site_content_service.get_content)
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
    return content


@router.put(
    "/api/site-content",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
)
async def update_site_content(payload: SiteContentUpdateRequest, request: Request) -> SuccessResponse:
    service = request.app.state.site_content_service
    try:
        await asyncio.to_thread(service.update_section, payload.section, payload.data)
    except InvalidSiteContent as exc:
        logger.info("[site-content] rejected | section=%s | reason=%s", payload.section, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return SuccessResponse()


@router.get("/api/video", response_model=VideoPreviewResponse)
async def preview_video(link: str = Query(default="")) -> VideoPreviewResponse:
    video = _resolver.resolve(link)
    return VideoPreviewResponse(
        video_id=video.video_id,
        video_source=video.source.to_wire(),
        thumbnail_url=video.thumbnail_url,
        embed_url=_resolver.embed_url(video.video_id, video.source),
    )


@router.post("/api/brief", response_model=CreativeBrief)
async def generate_brief(payload: BriefRequest, request: Request) -> CreativeBrief:
    service = request.app.state.brief_service
    try:
        return await service.generate(payload.client_name, payload.project_type, payload.description)
    except BriefServiceUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    except BriefGenerationError:
        raise HTTPException(status_code=502, detail="Failed to generate brief")


@admin_router.get("/projects")
async def admin_projects(request: Request) -> dict:
    projects = await asyncio.to_thread(request.app.state.project_service.list_projects)
    return projects.to_record()


@admin_router.post("/projects", status_code=201, response_model=ProjectCreatedResponse)
async def create_project(payload: ProjectCreateRequest, request: Request) -> ProjectCreatedResponse:
    project = await asyncio.to_thread(request.app.state.project_service.create_project, payload)
    return ProjectCreatedResponse(project=project.to_record())


@admin_router.put("/projects", response_model=SuccessResponse)
async def update_project(
    payload: ProjectUpdateRequest,
    request: Request,
    project_id: str | None = Query(default=None, alias="id"),
) -> SuccessResponse:
    if not project_id:
        raise HTTPException(status_code=400, detail="Project ID required")
    try:
        await asyncio.to_thread(request.app.state.project_service.update_project, project_id, payload)
    except ProjectNotFound:
        raise HTTPException(status_code=404, detail="Project not found")
    return SuccessResponse()


@admin_router.delete("/projects", response_model=SuccessResponse)
async def delete_project(
    request: Request,
    project_id: str | None = Query(default=None, alias="id"),
) -> SuccessResponse:
    if not project_id:
        raise HTTPException(status_code=400, detail="Project ID required")
    try:
        await asyncio.to_thread(request.app.state.project_service.delete_project, project_id)
    except ProjectNotFound:
        raise HTTPException(status_code=404, detail="Project not found")
    return SuccessResponse()


@admin_router.post("/upload")
async def upload_about_photo(request: Request, file: UploadFile | None = File(default=None)) -> dict:
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    content = await file.read()
    try:
        url = await asyncio.to_thread(
            request.app.state.upload_service.store_about_photo,
            file.filename,
            content,
            file.content_type,
        )
    except EmptyUpload as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"success": True, "url": url}
