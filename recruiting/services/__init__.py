from recruiting.services.consultant_service import ConsultantService, get_consultant_service
from recruiting.services.user_service import UserService, get_user_service

__all__ = [
    "ConsultantService",
    "get_consultant_service",
    "UserService",
    "get_user_service",
]
