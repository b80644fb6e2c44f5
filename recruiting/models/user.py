"""
User / Role models.

A user holds exactly one role, by value (id + name). The password is the
bcrypt hash once stored and is never serialized in responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


ADMIN_ROLE = "Administrator"
USER_ROLE = "User"


class RoleModel(BaseModel):
    id: Optional[str] = None
    name: str


class UserModel(BaseModel):
    id: Optional[str] = None
    username: str
    password: Optional[str] = Field(default=None, exclude=True)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    not_removable: bool = False
    role: Optional[RoleModel] = None


class AuthenticationModel(BaseModel):
    """What login needs: the stored hash and the role name."""
    username: str
    password: str = Field(exclude=True)
    authorization: Optional[str] = None


class UpdatePasswordModel(BaseModel):
    user_id: str
    current_password: str
    new_password: str
    password_confirmed: str
