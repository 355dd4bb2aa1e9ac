from enum import Enum
from pydantic import BaseModel
from typing import Optional

class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"

class TokenPayload(BaseModel):
    email: str
    iat: Optional[float] = None
    exp: Optional[float] = None
