"""User/role persistence, run against both gateways."""

import pytest

from recruiting.core.exceptions import EntityNotFoundError
from recruiting.models import ADMIN_ROLE, USER_ROLE, PageRequest, RoleModel, UpdatePasswordModel, UserModel


@pytest.fixture
def gateway(user_gateway):
    user_gateway.save_role(RoleModel(name=ADMIN_ROLE))
    user_gateway.save_role(RoleModel(name=USER_ROLE))
    return user_gateway


def new_user(username: str, role: str = USER_ROLE, **fields) -> UserModel:
    return UserModel(username=username, password="secret", role=RoleModel(name=role), **fields)


class TestUsers:

    def test_password_is_stored_hashed(self, gateway):
        saved = gateway.save_user(new_user("fernando"))
        assert saved.password != "secret"
        assert saved.password.startswith("$2")
        assert gateway.authentication_by_username("fernando").authorization == USER_ROLE

    def test_find_by_username_and_password(self, gateway):
        gateway.save_user(new_user("fernando"))
        assert gateway.find_by_username_and_password("fernando", "secret").username == "fernando"
        assert gateway.find_by_username_and_password("fernando", "wrong") is None
        assert gateway.find_by_username_and_password("nobody", "secret") is None

    def test_find_by_id(self, gateway):
        saved = gateway.save_user(new_user("fernando", email="f@f2informatica.it"))
        found = gateway.find_user_by_id(saved.id)
        assert found.email == "f@f2informatica.it"
        assert found.role.name == USER_ROLE
        assert gateway.find_user_by_id("garbage") is None

    def test_listing_excludes_caller(self, gateway):
        for username in ("admin", "carla", "bruno", "dario"):
            gateway.save_user(new_user(username))
        page = gateway.find_all_excluding_current_user(PageRequest(size=2), "admin")
        assert [u.username for u in page.content] == ["bruno", "carla"]
        assert page.total_elements == 3

    def test_users_by_role(self, gateway):
        gateway.save_user(new_user("admin", ADMIN_ROLE))
        gateway.save_user(new_user("bruno"))
        assert [u.username for u in gateway.find_users_by_role_name(ADMIN_ROLE)] == ["admin"]

    def test_update_user_changes_role(self, gateway):
        saved = gateway.save_user(new_user("bruno"))
        admin_role = gateway.find_role_by_name(ADMIN_ROLE)
        changed = saved.model_copy(update={"last_name": "Neri", "role": RoleModel(id=admin_role.id, name="")})
        assert gateway.update_user(changed) is True

        found = gateway.find_user_by_id(saved.id)
        assert found.last_name == "Neri"
        assert found.role.name == ADMIN_ROLE
        assert gateway.find_by_username_and_password("bruno", "secret") is not None

    def test_update_unknown_user(self, gateway):
        assert gateway.update_user(UserModel(id="999", username="ghost")) is False

    def test_unknown_role_is_rejected(self, gateway):
        with pytest.raises(EntityNotFoundError):
            gateway.save_user(new_user("bruno", "Guest"))

    def test_delete_user(self, gateway):
        saved = gateway.save_user(new_user("bruno"))
        gateway.delete_user(saved.id)
        assert gateway.find_user_by_id(saved.id) is None

    def test_not_removable_user_survives_delete(self, gateway):
        saved = gateway.save_user(new_user("admin", ADMIN_ROLE, not_removable=True))
        gateway.delete_user(saved.id)
        assert gateway.find_user_by_id(saved.id) is not None


class TestPasswords:

    def test_change_password(self, gateway):
        saved = gateway.save_user(new_user("bruno"))
        changed = gateway.update_password(UpdatePasswordModel(
            user_id=saved.id, current_password="secret", new_password="s3cret!", password_confirmed="s3cret!",
        ))
        assert changed is True
        assert gateway.is_current_password_valid(saved.id, "s3cret!")
        assert not gateway.is_current_password_valid(saved.id, "secret")

    def test_wrong_current_password(self, gateway):
        saved = gateway.save_user(new_user("bruno"))
        assert gateway.update_password(UpdatePasswordModel(
            user_id=saved.id, current_password="nope", new_password="s3cret!", password_confirmed="s3cret!",
        )) is False
        assert gateway.is_current_password_valid(saved.id, "secret")

    def test_confirmation_must_match(self, gateway):
        saved = gateway.save_user(new_user("bruno"))
        assert gateway.update_password(UpdatePasswordModel(
            user_id=saved.id, current_password="secret", new_password="s3cret!", password_confirmed="other",
        )) is False


class TestRoles:

    def test_roles_sorted_by_name(self, gateway):
        assert [r.name for r in gateway.load_roles()] == [ADMIN_ROLE, USER_ROLE]

    def test_find_role_by_name(self, gateway):
        assert gateway.find_role_by_name(USER_ROLE).id is not None
        assert gateway.find_role_by_name("Guest") is None
