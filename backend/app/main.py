import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings
from app.core.database import engine, init_db
from app.core.exceptions import RemixerError

# Configure logging format based on environment
if settings.is_production:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}',
    )
else:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /api/health",
    "GET /api/remix-types",
    "POST /api/remix",
    "POST /api/save-tweet",
    "GET /api/saved-tweets",
    "DELETE /api/saved-tweets/:id",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup, release the connection pool on shutdown."""
    await init_db()
    if not settings.openai_configured:
        logger.warning("OPENAI_API_KEY not configured - /api/remix will return 500")
    logger.info(f"{settings.PROJECT_NAME} started ({settings.ENVIRONMENT})")
    yield
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs" if not settings.is_production else None,
    redoc_url=None,
    lifespan=lifespan,
)

def configure_cors(app: FastAPI, config: Settings) -> None:
    """Any origin in development, only the frontend in production."""
    if config.is_production:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[config.FRONTEND_URL],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )


configure_cors(app, settings)


def error_body(message: str, detail=None) -> dict:
    """Build an error body, including detail only outside production."""
    body = {"error": message}
    if detail and not settings.is_production:
        body["details"] = detail
    return body


@app.exception_handler(RemixerError)
async def remixer_error_handler(request: Request, exc: RemixerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.detail})")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in errors
    )
    return JSONResponse(status_code=400, content=error_body("Invalid request body", detail))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
            content={
                "error": "Endpoint not found" if exc.status_code == 404 else "Method not allowed",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body("Internal server error", str(exc)))


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": settings.ENVIRONMENT,
    }


# Import and include routers
from app.api.routes import remix, saved_tweets  # noqa: E402

app.include_router(remix.router)
app.include_router(saved_tweets.router)


def run():
    """Run the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
