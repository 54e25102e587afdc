from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_settings
from config import Settings, settings
from models.requests import DocumentKind, OutputFormat, ReviewRequest
from models.responses import ExtractedTextResponse, HealthResponse, ReviewHtmlResponse
from models.schemas.report import Report
from services import pdf_parser
from services.errors import ReviewInputError
from services.pipeline import orchestrator
from services.text_normalizer import clean_extracted

router = APIRouter()
limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
    storage_uri=settings.rate_limit_storage_uri,
)

MIN_EXTRACTED_CHARS = 50


@router.get("/health", response_model=HealthResponse)
async def health(app_settings: Settings = Depends(get_settings)):
    return HealthResponse(
        review_engine=app_settings.review_engine,
        gemini_configured=bool(app_settings.gemini_api_key),
    )


@router.post("/review/{kind}", response_model=Report | ReviewHtmlResponse)
@limiter.limit(settings.rate_limit)
async def review_document(
    request: Request,
    kind: DocumentKind,
    output: OutputFormat = Query(OutputFormat.json, alias="format"),
    app_settings: Settings = Depends(get_settings),
):
    # Read the raw body so malformed JSON degrades to empty fields
    body = ReviewRequest.from_body(await request.body())

    if output is OutputFormat.html:
        html = await orchestrator.review_html(
            kind.value, body.text, body.target_role, app_settings
        )
        return ReviewHtmlResponse(html=html)

    return orchestrator.review(kind.value, body.text, body.target_role, app_settings)


@router.post("/extract/pdf", response_model=ExtractedTextResponse)
@limiter.limit(settings.rate_limit)
async def extract_pdf(
    request: Request,
    resume_file: UploadFile = File(...),
    app_settings: Settings = Depends(get_settings),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise ReviewInputError("Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = app_settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ReviewInputError(
            f"File too large. Max size: {app_settings.max_upload_size_mb}MB"
        )

    try:
        pages = pdf_parser.extract_pages(content)
    except Exception:
        raise ReviewInputError("PDF extraction failed. Use paste text instead.")

    text = clean_extracted("\n\n".join(pages))
    if len(text) < MIN_EXTRACTED_CHARS:
        raise ReviewInputError("PDF extracted, but text looks empty. Use paste text instead.")

    return ExtractedTextResponse(text=text, characters=len(text), pages=len(pages))
