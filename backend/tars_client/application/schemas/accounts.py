"""Pydantic DTOs for client, user and login requests.

Every field is optional at the schema level: missing fields are reported by
the endpoints with a fixed 400 message rather than a validation error list.
"""

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for registering a new client with the backend."""

    name: str | None = Field(None, examples=["Acme Travel"])
    email: str | None = Field(None, examples=["ops@acme.test"])


class ClientUserCreate(BaseModel):
    """Schema for creating a TARS user under a client."""

    client_id: int | str | None = Field(None, alias="clientId", examples=[1])
    username: str | None = Field(None, examples=["alice"])
    email: str | None = Field(None, examples=["alice@acme.test"])
    role: str | None = Field(None, examples=["user"])

    model_config = {"populate_by_name": True}

    @property
    def is_complete(self) -> bool:
        return all([self.client_id, self.username, self.email, self.role])


class LoginRequest(BaseModel):
    """Login by any one of username, email or userId."""

    username: str | None = None
    email: str | None = None
    user_id: int | str | None = Field(None, alias="userId")

    model_config = {"populate_by_name": True}

    @property
    def has_identifier(self) -> bool:
        return bool(self.username or self.email or self.user_id not in (None, ""))
