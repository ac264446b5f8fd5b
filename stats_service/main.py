import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from stats_service import config
from stats_service.api import stats
from stats_service.api.formatting import respond
from stats_service.api.schemas import ErrorOut
from stats_service.observability.logging import setup_logging
from stats_service.observability.metrics import metrics_router, observe_rejection
from stats_service.services.errors import StatsServiceError

logger = logging.getLogger(__name__)

@asynccontextmanager
async def app_lifespan(app: FastAPI):
    logger.info("Server running at http://localhost:%d/", config.PORT)
    yield
    logger.info("Server shutting down")

def _operation(request: Request) -> str:
    # /mean -> "mean"
    return request.url.path.strip("/") or "/"

def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request."
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg', 'invalid value')}" if loc else str(first.get("msg"))

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=config.SERVICE_NAME,
        version=config.SERVICE_VERSION,
        lifespan=app_lifespan,
    )
    app.include_router(metrics_router)     # /metrics
    app.include_router(stats.router)       # /mean, /median, /mode, /all

    # Any parse or computation failure that reaches this point becomes a 400
    # carrying the failure's message.
    @app.exception_handler(StatsServiceError)
    async def stats_exception_handler(request: Request, exc: StatsServiceError):
        operation = _operation(request)
        observe_rejection(operation, type(exc).__name__)
        logger.info("Rejected %s: %s", operation, exc.message)
        return respond(request, ErrorOut(error=exc.message), status_code=400)

    # Validation errors use the same 400 {"error": ...} shape
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        observe_rejection(_operation(request), type(exc).__name__)
        return respond(request, ErrorOut(error=_validation_message(exc)), status_code=400)

    return app

# Create the FastAPI app instance
app = create_app()
