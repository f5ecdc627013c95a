from typing import Optional

from pydantic import BaseModel, EmailStr

from storefront.schemas.product import ORMBase


# Shared properties for user models
class UserBase(BaseModel):
    email: EmailStr


# Schema for user authentication credentials
class UserLogin(UserBase):
    password: str


# Schema for user registration requests
class UserCreate(UserBase):
    password: str
    full_name: Optional[str] = None


# Output schema for the current identity
class UserResponse(ORMBase):
    id: str
    email: EmailStr
    full_name: Optional[str] = None


# Schema for JWT authentication token response
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
