from typing import List, Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from imc_backend.schemas.sch_errors import FieldError

class BadRequestError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)

class FieldValidationError(HTTPException):
    """Input failed validation; carries one entry per offending field"""
    def __init__(self, errors: List[FieldError], message: str = "Validation failed"):
        self.errors = errors
        super().__init__(status_code=400, detail={
            "message": message,
            "errors": [error.model_dump() for error in errors]
        })

class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=401,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )

class InvalidTokenError(UnauthorizedError):
    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail)

class MissingExpirationError(InvalidTokenError):
    def __init__(self, detail: str = "Token has no expiration claim"):
        super().__init__(detail)

class NotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error", context: Optional[str] = None):
        self.context = context
        super().__init__(status_code=500, detail=detail)

def raise_if_errors(errors: List[FieldError]) -> None:
    if errors:
        raise FieldValidationError(errors)

def _field_name(location) -> str:
    # Drop the "body"/"query" prefix FastAPI puts in front of the field path
    parts = [str(part) for part in location if part not in ("body", "query", "path", "header")]
    return ".".join(parts) if parts else "body"

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Render framework validation failures with the same shape as FieldValidationError"""
    errors = [
        FieldError(field=_field_name(error.get("loc", ())), message=error.get("msg", "Invalid value"))
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": {
            "message": "Validation failed",
            "errors": [error.model_dump() for error in errors]
        }}
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
