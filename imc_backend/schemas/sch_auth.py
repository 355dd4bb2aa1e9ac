from pydantic import BaseModel, EmailStr, Field
from typing import Optional

# Login Schemas
class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class TokenPairResponse(BaseModel):
    accessToken: str
    refreshToken: str

# Token Refresh Schemas
class RefreshTokenResponse(BaseModel):
    accessToken: str
    refreshToken: Optional[str] = None  # Only present when the refresh token was rotated

# Current User Schema
class MeResponse(BaseModel):
    nombre: str
    apellido: str
    email: str
