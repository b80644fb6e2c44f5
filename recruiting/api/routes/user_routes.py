"""
User Routes (bearer token required)

GET  /user/users          - Users page, the caller excluded
GET  /user/findUser/{id}  - Get one user
GET  /user/editUser/{id}  - User plus the role catalogue, for the edit form
POST /user/saveUser       - Create a user (administrators only)
POST /user/updateUser     - Update a user (administrators only)
GET  /user/deleteUser/{id} - Delete a removable user (administrators only)
POST /user/validateUser   - Validate the user form
POST /user/changePassword - Change a password
GET  /user/roles          - Role catalogue
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import RedirectResponse

from recruiting.api.forms import bind_update_password, bind_user, read_form, reject_if_invalid
from recruiting.core.auth import get_current_admin, get_current_user
from recruiting.core.config import get_settings
from recruiting.models import ADMIN_ROLE, Page, PageRequest, RoleModel, UserModel
from recruiting.schemas.schemas import MessageResponse, UserEditResponse, ValidationResponse
from recruiting.services.user_service import UserService, get_user_service
from recruiting.validation import BindingResult, UserValidator, ValidationResponseHandler, resolve_locale

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/user", tags=["Users"], dependencies=[Depends(get_current_user)])

validation_handler = ValidationResponseHandler()


def request_locale(accept_language: Optional[str] = Header(None)) -> str:
    return resolve_locale(accept_language, settings.default_locale)


def to_users() -> RedirectResponse:
    return RedirectResponse(url="/user/users", status_code=303)


@router.get("/users", response_model=Page[UserModel])
def list_users(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1),
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Every user but the caller, by username."""
    return user_service.find_all_excluding_current_user(PageRequest(page=page, size=size), user.username)


@router.get("/findUser/{user_id}", response_model=UserModel)
def find_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    found = user_service.find_user_by_id(user_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return found


@router.get("/editUser/{user_id}", response_model=UserEditResponse)
def edit_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    found = user_service.find_user_by_id(user_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return UserEditResponse(user=found, roles=user_service.load_roles())


@router.post("/saveUser", dependencies=[Depends(get_current_admin)])
def save_user(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    user_service: UserService = Depends(get_user_service),
):
    user_form = bind_user(form).model_copy(update={"id": None})
    result = BindingResult()
    UserValidator(user_service).validate(user_form, result)
    reject_if_invalid(result, locale)

    saved = user_service.save_user(user_form.to_model())
    logger.info("Created user %s", saved.username)
    return to_users()


@router.post("/updateUser", dependencies=[Depends(get_current_admin)])
def update_user(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    user_service: UserService = Depends(get_user_service),
):
    user_form = bind_user(form)
    result = BindingResult()
    if user_form.is_new:
        result.reject_value("id", "required")
    else:
        UserValidator(user_service).validate(user_form, result)
    reject_if_invalid(result, locale)

    if not user_service.update_user(user_form.to_model()):
        raise HTTPException(status_code=404, detail="Page not found")
    return to_users()


@router.get("/deleteUser/{user_id}", dependencies=[Depends(get_current_admin)])
def delete_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    user_service.delete_user(user_id)
    return to_users()


@router.post("/validateUser", response_model=ValidationResponse)
def validate_user(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    user_service: UserService = Depends(get_user_service),
):
    result = BindingResult()
    UserValidator(user_service).validate(bind_user(form), result)
    if result.has_errors():
        return validation_handler.validation_fail(result, locale)
    return validation_handler.validation_success()


@router.post("/changePassword", response_model=MessageResponse)
def change_password(
    form=Depends(read_form),
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """
    Change a password.

    Users change their own password; administrators anybody's. The current
    password must verify and the new one must match its confirmation.
    """
    request = bind_update_password(form)
    is_admin = user.role is not None and user.role.name == ADMIN_ROLE
    if request.user_id != user.id and not is_admin:
        raise HTTPException(status_code=403, detail="Not allowed to change this password")

    if not user_service.update_password(request):
        raise HTTPException(status_code=400, detail="Password not changed")
    return MessageResponse(message="Password changed successfully")


@router.get("/roles", response_model=List[RoleModel])
def roles(user_service: UserService = Depends(get_user_service)):
    return user_service.load_roles()
