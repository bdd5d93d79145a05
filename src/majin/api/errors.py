"""Exception handlers mapping domain errors to JSON responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from majin.core.exceptions import GenerationError, RegistryError, StateError
from majin.dispatch.dispatcher import INTERNAL_ERROR_MESSAGE
from majin.registry.exceptions import (
    DuplicateModelError,
    ModelNotFoundError,
    RegistryValidationError,
)
from majin.utils.logging import get_logger

logger = get_logger("api.errors")


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


async def _handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(_validation_message(exc), 400)


async def _handle_generation(request: Request, exc: GenerationError) -> JSONResponse:
    return error_response(exc.message, exc.http_status)


async def _handle_registry(request: Request, exc: RegistryError) -> JSONResponse:
    if isinstance(exc, ModelNotFoundError):
        return error_response("Model not found", 404)
    if isinstance(exc, RegistryValidationError):
        return error_response(exc.message, 400)
    if isinstance(exc, DuplicateModelError):
        return error_response(exc.message, 409)
    logger.error("Registry failure on %s: %s", request.url.path, exc)
    return error_response("Internal Server Error", 500)


async def _handle_state(request: Request, exc: StateError) -> JSONResponse:
    return error_response(exc.message, 400)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return error_response(INTERNAL_ERROR_MESSAGE, 500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _handle_validation)
    app.add_exception_handler(GenerationError, _handle_generation)
    app.add_exception_handler(RegistryError, _handle_registry)
    app.add_exception_handler(StateError, _handle_state)
    app.add_exception_handler(Exception, _handle_unexpected)
