from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_completion_client
from config import settings
from models.requests import ProjectRoastRequest
from models.responses import ErrorResponse, HealthResponse, Verdict
from models.schemas.roast_request import RoastRequest, SubjectKind, ToneLevel
from services import roast_pipeline
from services.completion_client import CompletionClient
from services.errors import InvalidRequestError
from services.text_extractor import format_from_filename, supported_format

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(provider_configured=settings.provider_configured)


@router.post("/api/roast-resume", response_model=Verdict, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def roast_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    roast_level: str | None = Form(None, alias="roastLevel"),
    client: CompletionClient = Depends(get_completion_client),
):
    content = None
    fmt = None
    if resume is not None:
        fmt = format_from_filename(resume.filename)
        supported_format(fmt)
        content = await resume.read()
        max_bytes = settings.max_upload_size_mb * 1024 * 1024
        if len(content) > max_bytes:
            raise InvalidRequestError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    roast_request = RoastRequest(
        subject_kind=SubjectKind.RESUME,
        tone_level=ToneLevel.parse(roast_level),
        document_bytes=content,
        document_format=fmt,
    )
    return await roast_pipeline.roast(roast_request, client)


@router.post("/api/roast-project", response_model=Verdict, responses=_ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def roast_project(
    request: Request,
    body: ProjectRoastRequest,
    client: CompletionClient = Depends(get_completion_client),
):
    roast_request = RoastRequest(
        subject_kind=SubjectKind.PROJECT,
        tone_level=ToneLevel.parse(body.roast_level),
        text=body.project_description,
        project_link=body.project_link,
    )
    return await roast_pipeline.roast(roast_request, client)
