"""
Pydantic Schemas - Request/Response contracts of the HTTP layer.

All API request and response schemas in one file for simplicity.
Service-layer records live in recruiting.models.
"""

from pydantic import BaseModel
from typing import Optional, List
from enum import Enum

from recruiting.models import ConsultantModel, RoleModel, UserModel


# ============================================================
# ENUMS
# ============================================================

class ValidationStatus(str, Enum):
    success = "SUCCESS"
    fail = "FAIL"


# ============================================================
# VALIDATION SCHEMAS
# ============================================================

class ErrorMessage(BaseModel):
    field: str
    message: str

class ValidationResponse(BaseModel):
    status: ValidationStatus
    errors: List[ErrorMessage] = []


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    username: str
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    username: str
    authorization: Optional[str] = None


# ============================================================
# CONSULTANT SCHEMAS
# ============================================================

class ConsultantEditResponse(BaseModel):
    edit: bool = True
    consultant_id: str
    consultant: ConsultantModel

class ProfileResponse(BaseModel):
    consultant_id: str
    full_name: str
    consultant: ConsultantModel

class MonthResponse(BaseModel):
    id: int
    name: str


# ============================================================
# USER SCHEMAS
# ============================================================

class UserForm(BaseModel):
    """User form as submitted; the password only matters on creation."""
    id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    password_confirmed: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role_id: Optional[str] = None
    role_name: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return not self.id

    def to_model(self) -> UserModel:
        role = None
        if self.role_id or self.role_name:
            role = RoleModel(id=self.role_id or None, name=self.role_name or "")
        return UserModel(
            id=self.id or None,
            username=self.username or "",
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            role=role,
        )

class UserEditResponse(BaseModel):
    edit: bool = True
    user: UserModel
    roles: List[RoleModel] = []


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
