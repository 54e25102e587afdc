import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.errors import PreconditionViolation, ReviewInputError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mentor Review API",
    description="Scored resume and LinkedIn profile critiques for early-career engineers",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ReviewInputError)
async def review_input_error(request: Request, exc: ReviewInputError):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(PreconditionViolation)
async def precondition_violation(request: Request, exc: PreconditionViolation):
    logger.error("Precondition violated on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error"})


app.include_router(router)
