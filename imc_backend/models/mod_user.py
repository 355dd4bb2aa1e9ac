from pydantic import BaseModel

class User(BaseModel):
    id: str
    email: str
    password: str  # bcrypt hash, never returned by the API
    firstName: str
    lastName: str

    class Config:
        from_attributes = True
