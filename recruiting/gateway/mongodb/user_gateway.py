"""
MongoDB User Gateway - `users` documents embed their role by value,
`roles` holds the catalogue.
"""
import logging
from typing import List, Optional

from pymongo import ASCENDING
from pymongo.database import Database

from recruiting.core.exceptions import EntityNotFoundError
from recruiting.core.security import hash_password, verify_password
from recruiting.db.mongodb import COLLECTIONS, get_collection
from recruiting.gateway.base import UserGateway
from recruiting.gateway.mongodb.converters import (
    role_to_embedded,
    role_to_model,
    to_object_id,
    user_to_authentication,
    user_to_model,
)
from recruiting.models import (
    AuthenticationModel,
    Page,
    PageRequest,
    RoleModel,
    UpdatePasswordModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class MongoUserGateway(UserGateway):

    def __init__(self, db: Database = None):
        self.users = get_collection(COLLECTIONS["users"], db)
        self.roles = get_collection(COLLECTIONS["roles"], db)

    def _get_user(self, user_id: str) -> Optional[dict]:
        oid = to_object_id(user_id)
        return self.users.find_one({"_id": oid}) if oid is not None else None

    def _resolve_role(self, role: Optional[RoleModel]) -> Optional[dict]:
        """Roles are referenced by id when known, by name otherwise."""
        if role is None:
            return None
        doc = None
        oid = to_object_id(role.id)
        if oid is not None:
            doc = self.roles.find_one({"_id": oid})
        if doc is None and role.name:
            doc = self.roles.find_one({"name": role.name})
        if doc is None:
            raise EntityNotFoundError("Role", role.id or role.name)
        return role_to_embedded(role_to_model(doc))

    # ============================================================
    # LOOKUPS
    # ============================================================

    def authentication_by_username(self, username: str) -> Optional[AuthenticationModel]:
        doc = self.users.find_one({"username": username})
        return user_to_authentication(doc) if doc else None

    def find_user_by_id(self, user_id: str) -> Optional[UserModel]:
        doc = self._get_user(user_id)
        return user_to_model(doc) if doc else None

    def find_by_username(self, username: str) -> Optional[UserModel]:
        doc = self.users.find_one({"username": username})
        return user_to_model(doc) if doc else None

    def find_by_username_and_password(self, username: str, password: str) -> Optional[UserModel]:
        doc = self.users.find_one({"username": username})
        if doc is None or not verify_password(password, doc.get("password")):
            return None
        return user_to_model(doc)

    def find_all_excluding_current_user(self, page_request: PageRequest, username_to_exclude: str) -> Page[UserModel]:
        query = {"username": {"$ne": username_to_exclude}}
        total = self.users.count_documents(query)
        cursor = (
            self.users.find(query)
            .sort("username", ASCENDING)
            .skip(page_request.offset)
            .limit(page_request.size)
        )
        return Page[UserModel].of([user_to_model(d) for d in cursor], page_request, total)

    def find_users_by_role_name(self, role_name: str) -> List[UserModel]:
        cursor = self.users.find({"role.name": role_name}).sort("username", ASCENDING)
        return [user_to_model(d) for d in cursor]

    def is_current_password_valid(self, user_id: str, current_password: str) -> bool:
        doc = self._get_user(user_id)
        return doc is not None and verify_password(current_password, doc.get("password"))

    # ============================================================
    # MUTATIONS
    # ============================================================

    def save_user(self, user: UserModel) -> UserModel:
        doc = {
            "username": user.username,
            "password": hash_password(user.password),
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "not_removable": user.not_removable,
            "role": self._resolve_role(user.role),
        }
        result = self.users.insert_one(doc)
        logger.info("Saved user %s", user.username)
        return user_to_model(self.users.find_one({"_id": result.inserted_id}))

    def update_user(self, user: UserModel) -> bool:
        oid = to_object_id(user.id)
        if oid is None:
            return False
        result = self.users.update_one(
            {"_id": oid},
            {"$set": {
                "username": user.username,
                "first_name": user.first_name,
                "last_name": user.last_name,
                "email": user.email,
                "role": self._resolve_role(user.role),
            }}
        )
        return result.matched_count > 0

    def update_password(self, request: UpdatePasswordModel) -> bool:
        if request.new_password != request.password_confirmed:
            return False
        doc = self._get_user(request.user_id)
        if doc is None or not verify_password(request.current_password, doc.get("password")):
            return False
        self.users.update_one(
            {"_id": doc["_id"]},
            {"$set": {"password": hash_password(request.new_password)}}
        )
        logger.info("Password changed for user %s", request.user_id)
        return True

    def delete_user(self, user_id: str) -> None:
        oid = to_object_id(user_id)
        if oid is None:
            return
        result = self.users.delete_one({"_id": oid, "not_removable": {"$ne": True}})
        if result.deleted_count == 0:
            logger.warning("User %s not deleted (unknown or not removable)", user_id)
        else:
            logger.info("Deleted user %s", user_id)

    # ============================================================
    # ROLES
    # ============================================================

    def load_roles(self) -> List[RoleModel]:
        return [role_to_model(d) for d in self.roles.find().sort("name", ASCENDING)]

    def find_role_by_name(self, role_name: str) -> Optional[RoleModel]:
        return role_to_model(self.roles.find_one({"name": role_name}))

    def save_role(self, role: RoleModel) -> RoleModel:
        result = self.roles.insert_one({"name": role.name})
        return RoleModel(id=str(result.inserted_id), name=role.name)
