from pydantic import BaseModel, Field

from ..profile.schemas import ProfileFields


class UserIdentity(BaseModel):
    id: str
    email: str


class AuthSession(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserIdentity


class AuthResponse(BaseModel):
    user: UserIdentity
    session: AuthSession


class MeResponse(BaseModel):
    user: UserIdentity


class Signup(ProfileFields):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class Login(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
