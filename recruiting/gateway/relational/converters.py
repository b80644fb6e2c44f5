"""
Entity <-> model mapping for the relational gateways.

`*_to_model` functions read ORM entities (call them inside the session);
`map_*` functions copy model fields onto an entity, full overwrite.
"""

from typing import Optional

from recruiting.db.tables import (
    Address,
    Consultant,
    Education,
    Experience,
    Language,
    Role,
    User,
)
from recruiting.models import (
    AddressModel,
    AuthenticationModel,
    ConsultantModel,
    EducationModel,
    ExperienceModel,
    LanguageModel,
    RoleModel,
    UserModel,
)


def parse_id(value) -> Optional[int]:
    """Relational ids travel as strings; anything non-numeric is no id at all."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _str_id(value) -> Optional[str]:
    return str(value) if value is not None else None


def _enum_value(value) -> Optional[str]:
    return value.value if value is not None else None


# ============================================================
# ENTITY -> MODEL
# ============================================================

def address_to_model(address: Optional[Address]) -> AddressModel:
    if address is None:
        return AddressModel()
    return AddressModel(
        street=address.street,
        house_no=address.house_no,
        zip_code=address.zip_code,
        city=address.city,
        province=address.province,
        region=address.region,
        country=address.country,
    )


def experience_to_model(experience: Experience) -> ExperienceModel:
    return ExperienceModel(
        id=_str_id(experience.id),
        company_name=experience.company_name,
        position=experience.job_position,
        locality=experience.location,
        period_from=experience.period_from,
        period_to=experience.period_to,
        current=bool(experience.current),
        description=experience.description,
    )


def education_to_model(education: Education) -> EducationModel:
    return EducationModel(
        id=_str_id(education.id),
        school=education.school_name,
        start_year=education.start_year,
        end_year=education.end_year,
        current=bool(education.current),
        school_degree=education.school_degree,
        school_field_of_study=education.fields_of_study,
        school_grade=education.grade,
        school_activities=education.activities,
        description=education.description,
    )


def language_to_model(language: Language) -> LanguageModel:
    return LanguageModel(language=language.language, proficiency=language.proficiency)


def consultant_to_model(consultant: Consultant) -> ConsultantModel:
    return ConsultantModel(
        id=_str_id(consultant.id),
        consultant_no=consultant.consultant_no,
        registration_date=consultant.registration_date,
        fiscal_code=consultant.fiscal_code,
        email=consultant.email,
        first_name=consultant.first_name,
        last_name=consultant.last_name,
        gender=consultant.gender,
        phone_number=consultant.phone_number,
        mobile_number=consultant.mobile_number,
        birth_date=consultant.birth_date,
        birth_city=consultant.birth_city,
        birth_country=consultant.birth_country,
        nationality=consultant.nationality,
        identity_card_no=consultant.identity_card_no,
        passport_no=consultant.passport_no,
        marital_status=consultant.marital_status,
        interests=consultant.interests,
        residence=address_to_model(consultant.residence),
        domicile=address_to_model(consultant.domicile),
        experiences=[experience_to_model(e) for e in consultant.experiences],
        educations=[education_to_model(e) for e in consultant.educations],
        languages=[language_to_model(l) for l in consultant.languages],
        skills=sorted(s.skill for s in consultant.skills),
    )


def role_to_model(role: Optional[Role]) -> Optional[RoleModel]:
    if role is None:
        return None
    return RoleModel(id=_str_id(role.id), name=role.name)


def user_to_model(user: User) -> UserModel:
    return UserModel(
        id=_str_id(user.id),
        username=user.username,
        password=user.password,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        not_removable=bool(user.not_removable),
        role=role_to_model(user.role),
    )


def user_to_authentication(user: User) -> AuthenticationModel:
    return AuthenticationModel(
        username=user.username,
        password=user.password,
        authorization=user.role.name if user.role else None,
    )


# ============================================================
# MODEL -> ENTITY
# ============================================================

def map_personal_details(model: ConsultantModel, consultant: Consultant) -> None:
    consultant.fiscal_code = model.fiscal_code
    consultant.email = model.email
    consultant.first_name = model.first_name
    consultant.last_name = model.last_name
    consultant.gender = _enum_value(model.gender)
    consultant.phone_number = model.phone_number
    consultant.mobile_number = model.mobile_number
    consultant.birth_date = model.birth_date
    consultant.birth_city = model.birth_city
    consultant.birth_country = model.birth_country
    consultant.nationality = model.nationality
    consultant.identity_card_no = model.identity_card_no
    consultant.passport_no = model.passport_no
    consultant.marital_status = _enum_value(model.marital_status)
    consultant.interests = model.interests

    # each consultant owns its own address rows
    if consultant.residence is None:
        consultant.residence = Address()
    map_address(model.residence, consultant.residence)
    if consultant.domicile is None:
        consultant.domicile = Address()
    map_address(model.domicile, consultant.domicile)


def map_address(model: AddressModel, address: Address) -> None:
    address.street = model.street
    address.house_no = model.house_no
    address.zip_code = model.zip_code
    address.city = model.city
    address.province = model.province
    address.region = model.region
    address.country = model.country


def map_experience(model: ExperienceModel, experience: Experience) -> None:
    experience.company_name = model.company_name
    experience.job_position = model.position
    experience.location = model.locality
    experience.period_from = model.period_from
    experience.period_to = None if model.current else model.period_to
    experience.current = model.current
    experience.description = model.description


def map_education(model: EducationModel, education: Education) -> None:
    education.school_name = model.school
    education.start_year = model.start_year
    education.end_year = model.end_year
    education.current = model.current
    education.school_degree = model.school_degree
    education.fields_of_study = model.school_field_of_study
    education.grade = model.school_grade
    education.activities = model.school_activities
    education.description = model.description
