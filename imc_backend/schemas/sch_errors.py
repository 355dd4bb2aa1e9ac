from pydantic import BaseModel
from typing import List

class FieldError(BaseModel):
    field: str
    message: str

class ValidationErrorDetail(BaseModel):
    message: str
    errors: List[FieldError] = []

class ErrorDetail(BaseModel):
    detail: str

class ValidationErrorResponse(BaseModel):
    detail: ValidationErrorDetail

class MessageResponse(BaseModel):
    message: str
