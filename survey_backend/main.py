# survey_backend/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from survey_backend import __version__
from survey_backend.config import Settings, get_settings
from survey_backend.routers import distribution_router, responses_router
from survey_backend.services.errors import ApiError
from survey_backend.services.response_store import ResponseStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------

async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse({"error": "Endpoint not found"}, status_code=404)
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse({"error": message}, status_code=422)


async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Survey Backend API", version=__version__)
    app.state.settings = settings
    app.state.store = ResponseStore(settings.data_dir)

    logger.info("Allowed CORS origins: %s", settings.allowed_origins)
    logger.info("Response data directory: %s", app.state.store.data_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    # ---------------------------------------------------------
    # ROUTERS
    # ---------------------------------------------------------

    app.include_router(responses_router)
    app.include_router(distribution_router)

    @app.get("/")
    def root():
        return {"message": "Survey backend API running."}

    return app


app = create_app()
