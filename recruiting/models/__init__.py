"""
Models module - service-layer records shared by gateways, services and routes.

These are NOT storage entities: each gateway converts its own
entities/documents to and from these models.
"""

from recruiting.models.consultant import (
    AddressModel,
    ConsultantModel,
    EducationModel,
    ExperienceModel,
    Gender,
    LanguageModel,
    MaritalStatus,
    Proficiency,
)
from recruiting.models.page import Page, PageRequest
from recruiting.models.query import ConsultantSearchCriteria
from recruiting.models.user import (
    ADMIN_ROLE,
    USER_ROLE,
    AuthenticationModel,
    RoleModel,
    UpdatePasswordModel,
    UserModel,
)

__all__ = [
    "AddressModel",
    "ConsultantModel",
    "EducationModel",
    "ExperienceModel",
    "Gender",
    "LanguageModel",
    "MaritalStatus",
    "Proficiency",
    "Page",
    "PageRequest",
    "ConsultantSearchCriteria",
    "ADMIN_ROLE",
    "USER_ROLE",
    "AuthenticationModel",
    "RoleModel",
    "UpdatePasswordModel",
    "UserModel",
]
