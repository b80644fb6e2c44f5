"""
Consultant Routes (bearer token required)

GET  /consultant/consultants               - Paginated listing, newest first
POST /consultant/search                    - Search by name, last name, skills (5 per page)
POST /consultant/save-personal-details     - Register a consultant
GET  /consultant/edit-personal-details     - Load a consultant for editing
POST /consultant/update-personal-details   - Update personal details
POST /consultant/validate-personal-details - Validate the personal details form
GET  /consultant/delete                    - Delete a consultant
GET  /consultant/profile                   - Profile with elapsed experience periods
GET  /consultant/edit-experience           - Load an experience for editing
POST /consultant/save-experience           - Add an experience
POST /consultant/update-experience         - Update an experience
POST /consultant/validate-experience       - Validate the experience form
GET  /consultant/delete-experience         - Remove an experience
POST /consultant/save-languages            - Replace the language set
POST /consultant/save-skills               - Replace the skill set
POST /consultant/save-education            - Add an education
GET  /consultant/edit-education            - Load an education for editing
POST /consultant/update-education          - Update an education
GET  /consultant/delete-education          - Remove an education
POST /consultant/validate-education        - Validate the education form
GET  /consultant/months                    - Months for the period drop-downs
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import RedirectResponse

from recruiting.api.forms import (
    bind_consultant,
    bind_education,
    bind_experience,
    bind_languages,
    bind_search_criteria,
    bind_skills,
    read_form,
    reject_if_invalid,
)
from recruiting.core.auth import get_current_user
from recruiting.core.config import get_settings
from recruiting.models import ConsultantModel, EducationModel, ExperienceModel, Page, PageRequest
from recruiting.schemas.schemas import (
    ConsultantEditResponse,
    MonthResponse,
    ProfileResponse,
    ValidationResponse,
)
from recruiting.services.consultant_service import ConsultantService, get_consultant_service
from recruiting.utils.period import MonthHelper, PeriodParser
from recruiting.validation import (
    BindingResult,
    EducationValidator,
    ExperienceValidator,
    PersonalDetailsValidator,
    ValidationResponseHandler,
    resolve_locale,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/consultant", tags=["Consultants"], dependencies=[Depends(get_current_user)])

SEARCH_PAGE_SIZE = 5

month_helper = MonthHelper()
period_parser = PeriodParser()
validation_handler = ValidationResponseHandler()


def request_locale(accept_language: Optional[str] = Header(None)) -> str:
    """Dependency - locale for validation messages."""
    return resolve_locale(accept_language, settings.default_locale)


def page_not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Page not found")


def required_consultant_id(form) -> str:
    consultant_id = (form.get("consultant_id") or "").strip()
    if not consultant_id:
        raise HTTPException(status_code=400, detail="consultant_id is required")
    return consultant_id


def to_consultants() -> RedirectResponse:
    return RedirectResponse(url="/consultant/consultants", status_code=303)


def to_profile(consultant_id: str) -> RedirectResponse:
    return RedirectResponse(url=f"/consultant/profile?consultant_id={quote(consultant_id)}", status_code=303)


def set_total_time_of_period_which_has_elapsed(consultant: ConsultantModel) -> None:
    for experience in consultant.experiences:
        experience.total_period_elapsed = period_parser.print_total_time_of_period_which_has_elapsed(
            experience.period_from, experience.period_to
        )


def format_date_by_month_name_and_year(experience: ExperienceModel) -> None:
    experience.formatted_period_from = period_parser.format_date_by_month_name_and_year(experience.period_from)
    if not experience.current:
        experience.formatted_period_to = period_parser.format_date_by_month_name_and_year(experience.period_to)


def set_experience_periods(experience: ExperienceModel) -> None:
    """Start period on the 1st of its month, end period on the last day."""
    experience.period_from = period_parser.resolve_date_by_month_and_year(experience.month_from, experience.year_from)
    if not experience.current:
        experience.period_to = period_parser.resolve_end_of_month(experience.month_to, experience.year_to)


# ============================================================
# LISTING / SEARCH
# ============================================================

@router.get("/consultants", response_model=Page[ConsultantModel])
def list_consultants(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    """All consultants, newest registration first."""
    return consultant_service.find_all_consultants(PageRequest(page=page, size=size))


@router.post("/search", response_model=Page[ConsultantModel])
def search_consultants(
    page: int = Query(0, ge=0),
    form=Depends(read_form),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    """
    Search consultants.

    Blank criteria are ignored; the page size is always 5 whatever the
    client asks for.
    """
    criteria = bind_search_criteria(form)
    return consultant_service.paginate_consultants(criteria, PageRequest(page=page, size=SEARCH_PAGE_SIZE))


# ============================================================
# PERSONAL DETAILS
# ============================================================

@router.post("/save-personal-details")
def save_personal_details(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    result = BindingResult()
    consultant = bind_consultant(form, result)
    PersonalDetailsValidator(consultant_service).validate(consultant, result)
    reject_if_invalid(result, locale)

    saved = consultant_service.save_personal_details(consultant)
    logger.info("Registered consultant %s", saved.consultant_no)
    return to_consultants()


@router.get("/edit-personal-details", response_model=ConsultantEditResponse)
def edit_personal_details(
    consultant_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant = consultant_service.find_consultant_by_id(consultant_id)
    if consultant is None:
        raise page_not_found()
    return ConsultantEditResponse(consultant_id=consultant_id, consultant=consultant)


@router.post("/update-personal-details")
def update_personal_details(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    result = BindingResult()
    consultant = bind_consultant(form, result)
    if not consultant.id:
        result.reject_value("id", "required")
    PersonalDetailsValidator(consultant_service).validate(consultant, result)
    reject_if_invalid(result, locale)

    consultant_service.update_personal_details(consultant, consultant.id)
    return to_consultants()


@router.post("/validate-personal-details", response_model=ValidationResponse)
def validate_personal_details(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    result = BindingResult()
    consultant = bind_consultant(form, result)
    PersonalDetailsValidator(consultant_service).validate(consultant, result)
    if result.has_errors():
        return validation_handler.validation_fail(result, locale)
    return validation_handler.validation_success()


@router.get("/delete")
def delete_consultant(
    consultant_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_service.delete_consultant(consultant_id)
    return to_consultants()


@router.get("/profile", response_model=ProfileResponse)
def profile_page(
    consultant_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant = consultant_service.find_consultant_by_id(consultant_id)
    if consultant is None:
        raise page_not_found()
    set_total_time_of_period_which_has_elapsed(consultant)
    return ProfileResponse(consultant_id=consultant_id, full_name=consultant.full_name, consultant=consultant)


# ============================================================
# EXPERIENCE
# ============================================================

@router.get("/edit-experience", response_model=ExperienceModel)
def edit_experience(
    consultant_id: str,
    experience_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    experience = consultant_service.find_experience(consultant_id, experience_id)
    if experience is None:
        raise page_not_found()
    format_date_by_month_name_and_year(experience)
    return experience


@router.post("/save-experience")
def save_experience(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_id = required_consultant_id(form)
    result = BindingResult()
    experience = bind_experience(form, result)
    ExperienceValidator().validate(experience, result)
    reject_if_invalid(result, locale)

    set_experience_periods(experience)
    consultant_service.add_consultant_experience(experience, consultant_id)
    return to_profile(consultant_id)


@router.post("/update-experience")
def update_experience(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_id = required_consultant_id(form)
    result = BindingResult()
    experience = bind_experience(form, result)
    if not experience.id:
        result.reject_value("id", "required")
    ExperienceValidator().validate(experience, result)
    reject_if_invalid(result, locale)

    set_experience_periods(experience)
    consultant_service.update_consultant_experience(experience, consultant_id)
    return to_profile(consultant_id)


@router.post("/validate-experience", response_model=ValidationResponse)
def validate_experience(form=Depends(read_form), locale: str = Depends(request_locale)):
    result = BindingResult()
    experience = bind_experience(form, result)
    ExperienceValidator().validate(experience, result)
    if result.has_errors():
        return validation_handler.validation_fail(result, locale)
    return validation_handler.validation_success()


@router.get("/delete-experience")
def delete_experience(
    consultant_id: str,
    experience_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_service.remove_experience(consultant_id, experience_id)
    return to_profile(consultant_id)


# ============================================================
# LANGUAGES / SKILLS
# ============================================================

@router.post("/save-languages")
def save_languages(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_id = required_consultant_id(form)
    result = BindingResult()
    languages = bind_languages(form, result)
    reject_if_invalid(result, locale)

    consultant_service.add_languages(languages, consultant_id)
    return to_profile(consultant_id)


@router.post("/save-skills")
def save_skills(
    form=Depends(read_form),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_id = required_consultant_id(form)
    consultant_service.add_skills(bind_skills(form), consultant_id)
    return to_profile(consultant_id)


# ============================================================
# EDUCATION
# ============================================================

@router.post("/save-education")
def save_education(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_id = required_consultant_id(form)
    result = BindingResult()
    education = bind_education(form, result)
    EducationValidator().validate(education, result)
    reject_if_invalid(result, locale)

    consultant_service.add_consultant_education(education, consultant_id)
    return to_profile(consultant_id)


@router.get("/edit-education", response_model=EducationModel)
def edit_education(
    consultant_id: str,
    education_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    education = consultant_service.find_education(consultant_id, education_id)
    if education is None:
        raise page_not_found()
    return education


@router.post("/update-education")
def update_education(
    form=Depends(read_form),
    locale: str = Depends(request_locale),
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_id = required_consultant_id(form)
    result = BindingResult()
    education = bind_education(form, result)
    if not education.id:
        result.reject_value("id", "required")
    EducationValidator().validate(education, result)
    reject_if_invalid(result, locale)

    consultant_service.update_consultant_education(education, consultant_id)
    return to_profile(consultant_id)


@router.get("/delete-education")
def delete_education(
    consultant_id: str,
    education_id: str,
    consultant_service: ConsultantService = Depends(get_consultant_service),
):
    consultant_service.remove_education(consultant_id, education_id)
    return to_profile(consultant_id)


@router.post("/validate-education", response_model=ValidationResponse)
def validate_education(form=Depends(read_form), locale: str = Depends(request_locale)):
    result = BindingResult()
    education = bind_education(form, result)
    EducationValidator().validate(education, result)
    if result.has_errors():
        return validation_handler.validation_fail(result, locale)
    return validation_handler.validation_success()


# ============================================================
# LOOKUPS
# ============================================================

@router.get("/months", response_model=List[MonthResponse])
def months():
    return month_helper.get_months()
