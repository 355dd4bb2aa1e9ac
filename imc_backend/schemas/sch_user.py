from pydantic import BaseModel, EmailStr, Field
from typing import Optional

class RegisterRequest(BaseModel):
    email: EmailStr = Field(description="User email, must be unique")
    password: str = Field(min_length=1, description="Plain password, stored hashed")
    firstName: str = Field(min_length=1)
    lastName: str = Field(min_length=1)

class UpdateUserRequest(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=1)
    firstName: Optional[str] = Field(default=None, min_length=1)
    lastName: Optional[str] = Field(default=None, min_length=1)

class UserResponse(BaseModel):
    id: str
    email: str
    firstName: str
    lastName: str

    class Config:
        from_attributes = True
