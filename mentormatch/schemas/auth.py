from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from mentormatch.models.user import UserRole


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    # Bcrypt limit is 72 bytes
    password: str = Field(..., min_length=6, max_length=72)
    role: UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str
    role: UserRole


class TokenData(BaseModel):
    email: Optional[str] = None
    role: Optional[str] = None
