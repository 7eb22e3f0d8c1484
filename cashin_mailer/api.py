from contextlib import asynccontextmanager
from typing import Annotated, Any, Optional
import logging

from fastapi import Body, FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pyinstrument import Profiler

from cashin_mailer.config.settings import Settings
from cashin_mailer.domain.services import NotificationService
from cashin_mailer.domain.validation import (
    MISSING_FIELDS_MESSAGE,
    PaymentRequestValidationError,
    validate_payload,
)

logger = logging.getLogger(__name__)

DISPATCH_FAILED_MESSAGE = "Failed to send email. Check server logs."
SUCCESS_MESSAGE = "Instructions sent successfully!"


def create_app(
    notification_service: NotificationService,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Payment instruction mailer started")

        yield

        await notification_service.close()
        logger.info("Payment instruction mailer stopped")

    # Only the instruction endpoint is served
    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handlers
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unexpected error in {request.method} {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": "An unexpected error occurred"}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error in {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_MESSAGE})

    @app.exception_handler(PaymentRequestValidationError)
    async def payment_validation_handler(request: Request, exc: PaymentRequestValidationError):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message} {exc.fields}")
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(f"HTTP error in {request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail}
        )

    if settings.profiling_enabled:
        @app.middleware("http")
        async def profile_request(request: Request, call_next):
            profiling = request.query_params.get("profile", False)
            if profiling:
                profiler = Profiler(interval=0.0001)
                profiler.start()
                await call_next(request)
                profiler.stop()
                return HTMLResponse(profiler.output_html())
            else:
                return await call_next(request)

    @app.post("/send-payment-instructions")
    async def send_payment_instructions(payload: Annotated[Any, Body()]):
        logger.info("Received request for payment instructions email")
        notification_request = validate_payload(payload)

        result = await notification_service.send_payment_instructions(notification_request)
        if not result.ok:
            raise HTTPException(status_code=500, detail=DISPATCH_FAILED_MESSAGE)

        return JSONResponse(status_code=200, content={"message": SUCCESS_MESSAGE})

    return app
