from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from .api.routes.auth import router as auth_router
from .api.routes.bookings import router as bookings_router
from .core.config import DEFAULT_SECRET_KEY, Settings, get_settings
from .core.database import check_connection, init_db, make_engine, make_session_factory
from .core.errors import InternalFailure, error_response, register_error_handlers
from .core.security import Authenticator

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the database before serving; refuse to start without it."""
    settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME}...")

    if settings.SECRET_KEY == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not set; using the insecure default")

    try:
        check_connection(app.state.engine)
        init_db(app.state.engine)
        logger.info("Successfully connected to the database")
    except SQLAlchemyError as e:
        logger.error(f"Could not connect to the database: {str(e)}")
        raise

    logger.info("Application startup complete")
    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its settings, database engine and authenticator."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Account signup, sign-in and appointment bookings",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = make_engine(settings)
    app.state.session_factory = make_session_factory(app.state.engine)
    app.state.authenticator = Authenticator.from_settings(settings)

    # Answers preflight requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Request logging, timing and the last-resort error mapping
    @app.middleware("http")
    async def handle_request(request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            response = error_response(InternalFailure())
        process_time = time.time() - start_time

        response.headers["X-Process-Time"] = str(process_time)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(bookings_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": settings.VERSION,
        }

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the single-page client."""
        return FileResponse(settings.STATIC_DIR / "index.html")

    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR, check_dir=False), name="static")

    return app


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "booking_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


# Configure logging
logging.basicConfig(level=get_settings().LOG_LEVEL)

app = create_app()


if __name__ == "__main__":
    run()
