"""
User Service - user and role administration over the user gateway.
"""
import logging
from typing import List, Optional

from recruiting.gateway import UserGateway, get_user_gateway
from recruiting.models import (
    ADMIN_ROLE,
    USER_ROLE,
    AuthenticationModel,
    Page,
    PageRequest,
    RoleModel,
    UpdatePasswordModel,
    UserModel,
)

logger = logging.getLogger(__name__)

DEFAULT_ROLES = (ADMIN_ROLE, USER_ROLE)


class UserService:

    def __init__(self, gateway: UserGateway = None):
        self.gateway = gateway or get_user_gateway()

    def authentication_by_username(self, username: str) -> Optional[AuthenticationModel]:
        return self.gateway.authentication_by_username(username)

    def find_user_by_id(self, user_id: str) -> Optional[UserModel]:
        return self.gateway.find_user_by_id(user_id)

    def find_by_username(self, username: str) -> Optional[UserModel]:
        return self.gateway.find_by_username(username)

    def find_by_username_and_password(self, username: str, password: str) -> Optional[UserModel]:
        return self.gateway.find_by_username_and_password(username, password)

    def find_all_excluding_current_user(self, page_request: PageRequest, username: str) -> Page[UserModel]:
        return self.gateway.find_all_excluding_current_user(page_request, username)

    def find_users_by_role_name(self, role_name: str) -> List[UserModel]:
        return self.gateway.find_users_by_role_name(role_name)

    def save_user(self, user: UserModel) -> UserModel:
        return self.gateway.save_user(user)

    def update_user(self, user: UserModel) -> bool:
        return self.gateway.update_user(user)

    def update_password(self, request: UpdatePasswordModel) -> bool:
        return self.gateway.update_password(request)

    def delete_user(self, user_id: str) -> None:
        self.gateway.delete_user(user_id)

    def load_roles(self) -> List[RoleModel]:
        return self.gateway.load_roles()

    def find_role_by_name(self, role_name: str) -> Optional[RoleModel]:
        return self.gateway.find_role_by_name(role_name)

    def is_current_password_valid(self, user_id: str, current_password: str) -> bool:
        return self.gateway.is_current_password_valid(user_id, current_password)

    def ensure_default_accounts(self, admin_username: str, admin_password: str) -> None:
        """Seed the role catalogue and a not removable administrator."""
        for role_name in DEFAULT_ROLES:
            if self.gateway.find_role_by_name(role_name) is None:
                self.gateway.save_role(RoleModel(name=role_name))
                logger.info("Seeded role %s", role_name)

        if self.gateway.find_by_username(admin_username) is None:
            self.gateway.save_user(UserModel(
                username=admin_username,
                password=admin_password,
                first_name="Administrator",
                not_removable=True,
                role=RoleModel(name=ADMIN_ROLE),
            ))
            logger.info("Seeded administrator %s", admin_username)


def get_user_service() -> UserService:
    """Get user service instance."""
    return UserService()
