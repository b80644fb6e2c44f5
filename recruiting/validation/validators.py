"""
Field validators behind the validate-* endpoints.

Each validator appends error codes to a BindingResult; nothing is raised.
Errors recorded while binding the form (bad dates, bad numbers) are already
in the result and suppress further checks on the same field.
"""

import re
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from recruiting.models import ConsultantModel, EducationModel, ExperienceModel
from recruiting.schemas.schemas import UserForm
from recruiting.services.consultant_service import ConsultantService
from recruiting.services.user_service import UserService
from recruiting.validation.binding import BindingResult

# Italian codice fiscale, omocodia letters included
FISCAL_CODE_PATTERN = re.compile(
    r"^[A-Z]{6}[0-9LMNPQRSTUV]{2}[ABCDEHLMPRST][0-9LMNPQRSTUV]{2}[A-Z][0-9LMNPQRSTUV]{3}[A-Z]$"
)

MIN_PASSWORD_LENGTH = 5

# Years accepted for experience and education periods
MIN_YEAR = 1900
MAX_YEAR = 2100


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def reject_if_blank(result: BindingResult, field: str, value) -> bool:
    """Record `required` for a blank field; True when rejected."""
    if result.has_field_errors(field):
        return True
    if _blank(value):
        result.reject_value(field, "required")
        return True
    return False


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def reject_if_invalid_year(result: BindingResult, field: str, value) -> bool:
    """Record `required` or `invalid_year`; True when rejected."""
    if reject_if_blank(result, field, value):
        return True
    if not MIN_YEAR <= value <= MAX_YEAR:
        result.reject_value(field, "invalid_year")
        return True
    return False


def is_valid_fiscal_code(value: str) -> bool:
    return bool(FISCAL_CODE_PATTERN.match(value.strip().upper()))


class PersonalDetailsValidator:

    def __init__(self, consultant_service: ConsultantService):
        self.consultant_service = consultant_service

    def validate(self, consultant: ConsultantModel, result: BindingResult) -> None:
        reject_if_blank(result, "first_name", consultant.first_name)
        reject_if_blank(result, "last_name", consultant.last_name)
        reject_if_blank(result, "gender", consultant.gender)

        if not reject_if_blank(result, "email", consultant.email) and not is_valid_email(consultant.email):
            result.reject_value("email", "invalid_email")

        if not reject_if_blank(result, "fiscal_code", consultant.fiscal_code):
            self._validate_fiscal_code(consultant, result)

    def _validate_fiscal_code(self, consultant: ConsultantModel, result: BindingResult) -> None:
        if not is_valid_fiscal_code(consultant.fiscal_code):
            result.reject_value("fiscal_code", "invalid_fiscal_code")
            return
        owner = self.consultant_service.find_consultant_by_fiscal_code(consultant.fiscal_code.strip().upper())
        if owner is not None and owner.id != consultant.id:
            result.reject_value("fiscal_code", "fiscal_code_in_use")


class ExperienceValidator:

    def validate(self, experience: ExperienceModel, result: BindingResult) -> None:
        reject_if_blank(result, "company_name", experience.company_name)
        reject_if_blank(result, "position", experience.position)
        start_ok = self._validate_month_year(result, "month_from", experience.month_from, "year_from", experience.year_from)
        if experience.current:
            return
        end_ok = self._validate_month_year(result, "month_to", experience.month_to, "year_to", experience.year_to)
        if start_ok and end_ok:
            start = (experience.year_from, experience.month_from)
            end = (experience.year_to, experience.month_to)
            if end < start:
                result.reject_value("month_to", "period_to_before_period_from")

    @staticmethod
    def _validate_month_year(
        result: BindingResult, month_field: str, month: Optional[int], year_field: str, year: Optional[int]
    ) -> bool:
        month_missing = reject_if_blank(result, month_field, month)
        year_rejected = reject_if_invalid_year(result, year_field, year)
        if not month_missing and not 1 <= month <= 12:
            result.reject_value(month_field, "invalid_month")
            return False
        return not (month_missing or year_rejected)


class EducationValidator:

    def validate(self, education: EducationModel, result: BindingResult) -> None:
        reject_if_blank(result, "school", education.school)
        start_rejected = reject_if_invalid_year(result, "start_year", education.start_year)
        if education.current:
            return
        end_rejected = reject_if_invalid_year(result, "end_year", education.end_year)
        if not start_rejected and not end_rejected and education.end_year < education.start_year:
            result.reject_value("end_year", "end_year_before_start_year")


class UserValidator:

    def __init__(self, user_service: UserService):
        self.user_service = user_service

    def validate(self, form: UserForm, result: BindingResult) -> None:
        if not reject_if_blank(result, "username", form.username):
            owner = self.user_service.find_by_username(form.username.strip())
            if owner is not None and owner.id != form.id:
                result.reject_value("username", "username_in_use")

        if not reject_if_blank(result, "role_id", form.role_id or form.role_name):
            if form.role_name and not form.role_id and self.user_service.find_role_by_name(form.role_name) is None:
                result.reject_value("role_id", "role_not_found")

        if not _blank(form.email) and not is_valid_email(form.email):
            result.reject_value("email", "invalid_email")

        if form.is_new:
            if not reject_if_blank(result, "password", form.password):
                if len(form.password) < MIN_PASSWORD_LENGTH:
                    result.reject_value("password", "password_too_short")
                elif form.password != form.password_confirmed:
                    result.reject_value("password_confirmed", "passwords_not_matching")
