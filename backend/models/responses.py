from pydantic import BaseModel


class ReviewHtmlResponse(BaseModel):
    html: str


class ExtractedTextResponse(BaseModel):
    text: str
    characters: int = 0
    pages: int = 0


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    review_engine: str = "heuristic"
    gemini_configured: bool = False
