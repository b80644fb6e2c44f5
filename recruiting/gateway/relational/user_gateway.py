"""
Relational User Gateway - users and roles on SQLAlchemy.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from recruiting.core.exceptions import EntityNotFoundError
from recruiting.core.security import hash_password, verify_password
from recruiting.db.mysql import get_db_session
from recruiting.db.tables import Role, User
from recruiting.gateway.base import UserGateway
from recruiting.gateway.relational.converters import (
    parse_id,
    role_to_model,
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


class RelationalUserGateway(UserGateway):

    def __init__(self, session_factory: sessionmaker = None):
        self.session_factory = session_factory

    def _session(self):
        return get_db_session(self.session_factory)

    @staticmethod
    def _get_user(db: Session, user_id: str) -> Optional[User]:
        pk = parse_id(user_id)
        return db.get(User, pk) if pk is not None else None

    @staticmethod
    def _get_by_username(db: Session, username: str) -> Optional[User]:
        return db.scalars(select(User).where(User.username == username)).first()

    @staticmethod
    def _resolve_role(db: Session, role: Optional[RoleModel]) -> Optional[Role]:
        """Roles are referenced by id when known, by name otherwise."""
        if role is None:
            return None
        entity = None
        pk = parse_id(role.id)
        if pk is not None:
            entity = db.get(Role, pk)
        if entity is None and role.name:
            entity = db.scalars(select(Role).where(Role.name == role.name)).one_or_none()
        if entity is None:
            raise EntityNotFoundError("Role", role.id or role.name)
        return entity

    # ============================================================
    # LOOKUPS
    # ============================================================

    def authentication_by_username(self, username: str) -> Optional[AuthenticationModel]:
        with self._session() as db:
            user = self._get_by_username(db, username)
            return user_to_authentication(user) if user else None

    def find_user_by_id(self, user_id: str) -> Optional[UserModel]:
        with self._session() as db:
            user = self._get_user(db, user_id)
            return user_to_model(user) if user else None

    def find_by_username(self, username: str) -> Optional[UserModel]:
        with self._session() as db:
            user = self._get_by_username(db, username)
            return user_to_model(user) if user else None

    def find_by_username_and_password(self, username: str, password: str) -> Optional[UserModel]:
        with self._session() as db:
            user = self._get_by_username(db, username)
            if user is None or not verify_password(password, user.password):
                return None
            return user_to_model(user)

    def find_all_excluding_current_user(self, page_request: PageRequest, username_to_exclude: str) -> Page[UserModel]:
        query = select(User).where(User.username != username_to_exclude)
        with self._session() as db:
            total = db.scalar(select(func.count()).select_from(query.subquery()))
            users = db.scalars(
                query.order_by(User.username).offset(page_request.offset).limit(page_request.size)
            ).unique().all()
            content = [user_to_model(u) for u in users]
        return Page[UserModel].of(content, page_request, total)

    def find_users_by_role_name(self, role_name: str) -> List[UserModel]:
        with self._session() as db:
            users = db.scalars(
                select(User).join(User.role).where(Role.name == role_name).order_by(User.username)
            ).unique().all()
            return [user_to_model(u) for u in users]

    def is_current_password_valid(self, user_id: str, current_password: str) -> bool:
        with self._session() as db:
            user = self._get_user(db, user_id)
            return user is not None and verify_password(current_password, user.password)

    # ============================================================
    # MUTATIONS
    # ============================================================

    def save_user(self, model: UserModel) -> UserModel:
        with self._session() as db:
            user = User(
                username=model.username,
                password=hash_password(model.password),
                first_name=model.first_name,
                last_name=model.last_name,
                email=model.email,
                not_removable=model.not_removable,
                role=self._resolve_role(db, model.role),
            )
            db.add(user)
            db.flush()
            logger.info("Saved user %s", user.username)
            return user_to_model(user)

    def update_user(self, model: UserModel) -> bool:
        with self._session() as db:
            user = self._get_user(db, model.id)
            if user is None:
                return False
            user.username = model.username
            user.first_name = model.first_name
            user.last_name = model.last_name
            user.email = model.email
            user.role = self._resolve_role(db, model.role)
        return True

    def update_password(self, request: UpdatePasswordModel) -> bool:
        if request.new_password != request.password_confirmed:
            return False
        with self._session() as db:
            user = self._get_user(db, request.user_id)
            if user is None or not verify_password(request.current_password, user.password):
                return False
            user.password = hash_password(request.new_password)
        logger.info("Password changed for user %s", request.user_id)
        return True

    def delete_user(self, user_id: str) -> None:
        with self._session() as db:
            user = self._get_user(db, user_id)
            if user is None:
                return
            if user.not_removable:
                logger.warning("Refusing to delete not removable user %s", user.username)
                return
            db.delete(user)
        logger.info("Deleted user %s", user_id)

    # ============================================================
    # ROLES
    # ============================================================

    def load_roles(self) -> List[RoleModel]:
        with self._session() as db:
            return [role_to_model(r) for r in db.scalars(select(Role).order_by(Role.name))]

    def find_role_by_name(self, role_name: str) -> Optional[RoleModel]:
        with self._session() as db:
            return role_to_model(db.scalars(select(Role).where(Role.name == role_name)).one_or_none())

    def save_role(self, role: RoleModel) -> RoleModel:
        with self._session() as db:
            entity = Role(name=role.name)
            db.add(entity)
            db.flush()
            return role_to_model(entity)
