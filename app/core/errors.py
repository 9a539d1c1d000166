"""
➡️ But : Définir les erreurs métier de l’API et leur traduction en réponses HTTP.

Chaque erreur porte son code HTTP et un message destiné au client.
Les handlers enregistrés sur l’app produisent toujours un corps :

{"error": "..."}                       # cas général
{"error": "...", "details": ["..."]}   # échec de validation

🔹 Avantages :

Les services lèvent des erreurs parlantes sans connaître FastAPI.

Aucun détail interne (trace, SQL) ne fuit vers le client : tout est loggé côté serveur.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, details: Optional[List[str]] = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(AppError):
    # 400 et non 409 : contrat historique de l'API
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Resource already exists"


class InternalFailure(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# -----------------------------
# Frontière par route
# -----------------------------
@contextmanager
def internal_failure(message: str) -> Iterator[None]:
    """
    Convertit toute erreur inattendue en InternalFailure(message).
    Les AppError et HTTPException remontent telles quelles.
    """
    try:
        yield
    except (AppError, HTTPException):
        raise
    except Exception as exc:
        logger.exception("%s: %s", message, exc)
        raise InternalFailure(message) from exc


# -----------------------------
# Messages de validation
# -----------------------------
def _field_name(loc: Sequence[Any]) -> str:
    # ("body", "email") -> "email" ; ("query", "page") -> "page" ; ("body",) -> ""
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path", "header", "cookie"):
        parts = parts[1:]
    return ".".join(parts)


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[str]:
    """Transforme les erreurs Pydantic en messages lisibles."""
    messages: List[str] = []
    for err in errors:
        kind = err.get("type", "")
        field = _field_name(err.get("loc", ()))
        if kind == "missing":
            msg = f"{field.capitalize()} is required" if field else "Request body is required"
        elif kind == "value_error" and err.get("ctx", {}).get("error") is not None:
            msg = str(err["ctx"]["error"])
        elif kind == "json_invalid":
            msg = "Request body must be valid JSON"
        else:
            detail = err.get("msg", "invalid value")
            msg = f"{field}: {detail}" if field else detail
        if msg not in messages:
            messages.append(msg)
    return messages


# -----------------------------
# Handlers
# -----------------------------
def _error_body(message: str, details: Optional[List[str]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.details))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = format_validation_errors(exc.errors())
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(ValidationFailed.message, details),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
