# server/main.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from server.api import auth, inventory
from server.core.config import CORS_ORIGINS, configure_logging
from server.core.errors import ServiceError, ValidationError
from server.database import init_db
from server.models.schemas import field_errors


configure_logging()
logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Inventory Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(inventory.router)


# -------------------------------
# Error Handlers
# -------------------------------

def error_response(status_code: int, message: str, errors: dict | None = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(ServiceError)
def handle_service_error(request: Request, exc: ServiceError):
    errors = exc.errors if isinstance(exc, ValidationError) else None
    return error_response(exc.status_code, exc.message, errors)


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        ValidationError.message,
        field_errors(exc.errors()),
    )


@app.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


@app.get("/health")
def health():
    return {"status": "ok"}
