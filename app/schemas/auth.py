"""Request/response schemas for registration and login."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.roles import Role


class RegisterRequest(BaseModel):
    """New account: username, plain password (hashed before storage) and role."""

    model_config = ConfigDict(extra="forbid")

    nama_pengguna: str = Field(..., min_length=1, max_length=255, description="Username")
    kata_sandi: str = Field(..., min_length=1, max_length=128, description="Password")
    peran_pengguna: Role = Field(..., description="Role label")


class LoginRequest(BaseModel):
    """Credentials for login."""

    nama_pengguna: str = Field(..., min_length=1, max_length=255, description="Username")
    kata_sandi: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken", description="JWT access token")


class PenggunaRead(BaseModel):
    """User as returned by the API (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id_pengguna: int
    nama_pengguna: str
    peran_pengguna: Role
