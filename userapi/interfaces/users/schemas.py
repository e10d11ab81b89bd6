"""
Pydantic schemas for the users API responses.

Requests carry every field in the path, so only responses are modelled.
No business logic belongs here.
"""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """A stored user. The password hash is never serialized."""

    id: str
    email: str
    username: str


class CreateUserResponse(BaseModel):
    """Echo of the submitted creation input. The assigned id is omitted."""

    email: str
    username: str
    password: str
