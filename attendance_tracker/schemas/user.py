from pydantic import BaseModel
from typing import Literal


class UserCreate(BaseModel):
    email: str
    password: str
    full_name: str


class UserLogin(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str


class User(BaseModel):
    id: int
    email: str
    full_name: str
    notification_permission: Literal["default", "granted", "denied"]

    class Config:
        from_attributes = True
