"""
Form binding for the HTML-form endpoints.

Browsers post urlencoded forms: every value arrives as a string, checkboxes
only when ticked, repeated fields (language, proficiency, skill) as lists.
Binders turn a form into a model and record what cannot be converted in a
BindingResult, leaving the field empty.

Dates are accepted as dd-mm-yyyy (the date pickers) or ISO yyyy-mm-dd.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Mapping, Optional, Type

from fastapi import HTTPException, Request

from recruiting.models import (
    AddressModel,
    ConsultantModel,
    ConsultantSearchCriteria,
    EducationModel,
    ExperienceModel,
    Gender,
    LanguageModel,
    MaritalStatus,
    Proficiency,
    UpdatePasswordModel,
)
from recruiting.schemas.schemas import UserForm
from recruiting.validation import BindingResult, ValidationResponseHandler

DATE_FORMATS = ("%d-%m-%Y", "%Y-%m-%d")
CHECKED_VALUES = {"on", "true", "1", "yes"}

ADDRESS_FIELDS = ("street", "house_no", "zip_code", "city", "province", "region", "country")

validation_handler = ValidationResponseHandler()


async def read_form(request: Request):
    """FastAPI dependency - the submitted form as a multi-dict."""
    return await request.form()


class FormBinder:
    """Typed reads over a submitted form."""

    def __init__(self, form: Mapping, result: BindingResult):
        self.form = form
        self.result = result

    def text(self, name: str) -> Optional[str]:
        value = self.form.get(name)
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def integer(self, name: str) -> Optional[int]:
        value = self.text(name)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            self.result.reject_value(name, "invalid_number")
            return None

    def day(self, name: str) -> Optional[date]:
        value = self.text(name)
        if value is None:
            return None
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        self.result.reject_value(name, "invalid_date")
        return None

    def choice(self, name: str, enum_cls: Type[Enum]):
        value = self.text(name)
        if value is None:
            return None
        try:
            return enum_cls(value.upper())
        except ValueError:
            self.result.reject_value(name, "invalid_choice")
            return None

    def checked(self, name: str) -> bool:
        value = self.text(name)
        return value is not None and value.lower() in CHECKED_VALUES

    def values(self, name: str) -> List[str]:
        getlist = getattr(self.form, "getlist", None)
        if getlist is None:
            value = self.form.get(name)
            return [] if value is None else [value]
        return [str(v) for v in getlist(name)]


# ============================================================
# CONSULTANT
# ============================================================

def bind_address(binder: FormBinder, prefix: str) -> AddressModel:
    return AddressModel(**{field: binder.text(f"{prefix}_{field}") for field in ADDRESS_FIELDS})


def bind_consultant(form: Mapping, result: BindingResult) -> ConsultantModel:
    binder = FormBinder(form, result)
    fiscal_code = binder.text("fiscal_code")
    return ConsultantModel(
        id=binder.text("id"),
        fiscal_code=fiscal_code.upper() if fiscal_code else None,
        email=binder.text("email"),
        first_name=binder.text("first_name"),
        last_name=binder.text("last_name"),
        gender=binder.choice("gender", Gender),
        phone_number=binder.text("phone_number"),
        mobile_number=binder.text("mobile_number"),
        birth_date=binder.day("birth_date"),
        birth_city=binder.text("birth_city"),
        birth_country=binder.text("birth_country"),
        nationality=binder.text("nationality"),
        identity_card_no=binder.text("identity_card_no"),
        passport_no=binder.text("passport_no"),
        marital_status=binder.choice("marital_status", MaritalStatus),
        interests=binder.text("interests"),
        residence=bind_address(binder, "residence"),
        domicile=bind_address(binder, "domicile"),
    )


def bind_search_criteria(form: Mapping) -> ConsultantSearchCriteria:
    binder = FormBinder(form, BindingResult())
    return ConsultantSearchCriteria(
        name=binder.text("name"),
        last_name=binder.text("last_name"),
        skills=binder.text("skills"),
    )


def bind_experience(form: Mapping, result: BindingResult) -> ExperienceModel:
    binder = FormBinder(form, result)
    return ExperienceModel(
        id=binder.text("id"),
        company_name=binder.text("company_name"),
        position=binder.text("position"),
        locality=binder.text("locality"),
        current=binder.checked("current"),
        description=binder.text("description"),
        month_from=binder.integer("month_from"),
        year_from=binder.integer("year_from"),
        month_to=binder.integer("month_to"),
        year_to=binder.integer("year_to"),
    )


def bind_education(form: Mapping, result: BindingResult) -> EducationModel:
    binder = FormBinder(form, result)
    return EducationModel(
        id=binder.text("id"),
        school=binder.text("school"),
        start_year=binder.integer("start_year"),
        end_year=binder.integer("end_year"),
        current=binder.checked("current"),
        school_degree=binder.text("school_degree"),
        school_field_of_study=binder.text("school_field_of_study"),
        school_grade=binder.text("school_grade"),
        school_activities=binder.text("school_activities"),
        description=binder.text("description"),
    )


def bind_languages(form: Mapping, result: BindingResult) -> List[LanguageModel]:
    """Pairs the repeated `language` and `proficiency` fields by position."""
    binder = FormBinder(form, result)
    names = binder.values("language")
    levels = binder.values("proficiency")
    languages = []
    for index, name in enumerate(names):
        name = name.strip()
        if not name:
            continue
        level = levels[index].strip().upper() if index < len(levels) else ""
        proficiency = None
        if level:
            try:
                proficiency = Proficiency(level)
            except ValueError:
                result.reject_value("proficiency", "invalid_choice")
                continue
        languages.append(LanguageModel(language=name, proficiency=proficiency))
    return languages


def bind_skills(form: Mapping) -> List[str]:
    return FormBinder(form, BindingResult()).values("skill")


# ============================================================
# USER
# ============================================================

def bind_user(form: Mapping) -> UserForm:
    binder = FormBinder(form, BindingResult())
    return UserForm(
        id=binder.text("id"),
        username=binder.text("username"),
        password=binder.text("password"),
        password_confirmed=binder.text("password_confirmed"),
        first_name=binder.text("first_name"),
        last_name=binder.text("last_name"),
        email=binder.text("email"),
        role_id=binder.text("role_id"),
        role_name=binder.text("role_name"),
    )


def bind_update_password(form: Mapping) -> UpdatePasswordModel:
    binder = FormBinder(form, BindingResult())
    return UpdatePasswordModel(
        user_id=binder.text("user_id") or "",
        current_password=binder.text("current_password") or "",
        new_password=binder.text("new_password") or "",
        password_confirmed=binder.text("password_confirmed") or "",
    )


def reject_if_invalid(result: BindingResult, locale: str) -> None:
    """Save endpoints refuse what the matching validate endpoint would flag."""
    if result.has_errors():
        response = validation_handler.validation_fail(result, locale)
        raise HTTPException(status_code=400, detail=[e.model_dump() for e in response.errors])
