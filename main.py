import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from config import Settings
from database import build_engine, build_session_factory, check_connection, init_db
from routers.checkout import router as checkout_router
from services.checkout_relay import CheckoutRelay, build_http_session
from services.document_store import DocumentStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def describe_validation_error(exc: RequestValidationError) -> str:
    """First validation problem as '<field> <problem>', e.g. 'amount is required'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(loc) or "body"
    if error.get("type") == "missing":
        return f"{field} is required"
    message = str(error.get("msg", "is invalid"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{field} {message}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if app.state.relay is not None:
        yield
        return

    if not settings.payment_secret_key:
        logger.warning("PAYMENT_SECRET_KEY is not set; provider calls will be rejected")

    engine = build_engine(settings.database_url, echo=settings.sql_echo)
    if check_connection(engine):
        init_db(engine)
    else:
        logger.warning("Database unreachable at startup; checkout records will fail to save")

    http = build_http_session(settings.payment_secret_key)
    app.state.relay = CheckoutRelay(
        http=http,
        store=DocumentStore(build_session_factory(engine)),
        checkout_api_url=settings.checkout_api_url,
        frontend_url=settings.frontend_url,
        store_failure_policy=settings.store_failure_policy,
    )
    logger.info("Checkout relay ready (store failures: %s)", settings.store_failure_policy)
    try:
        yield
    finally:
        http.close()
        engine.dispose()
        app.state.relay = None


def create_app(settings: Optional[Settings] = None, relay: Optional[CheckoutRelay] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Checkout Relay", lifespan=lifespan)
    app.state.settings = settings
    app.state.relay = relay

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": describe_validation_error(exc)})

    @app.get("/", response_class=PlainTextResponse)
    def liveness():
        return "Checkout relay is running"

    app.include_router(checkout_router)

    # 404 Fallback for unmatched routes
    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return await http_exception_handler(request, exc)

    return app


# Load .env
settings = Settings.from_env()
configure_logging(settings.log_level)
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
