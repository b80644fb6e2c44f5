"""
Document <-> model mapping for the MongoDB gateways.

BSON has no pure date type: dates are stored as midnight datetimes and
turned back into dates on the way out.
"""

from datetime import date, datetime
from typing import Optional

from bson import ObjectId

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


def to_object_id(value) -> Optional[ObjectId]:
    """Invalid ids are treated as absent."""
    if value is None or not ObjectId.is_valid(str(value)):
        return None
    return ObjectId(str(value))


def new_id() -> str:
    return str(ObjectId())


def _to_datetime(value: Optional[date]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def _to_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def _enum_value(value) -> Optional[str]:
    return value.value if value is not None else None


# ============================================================
# CONSULTANT
# ============================================================

def address_to_document(address: AddressModel) -> dict:
    return address.model_dump()


def experience_to_document(experience: ExperienceModel) -> dict:
    return {
        "id": experience.id or new_id(),
        "company_name": experience.company_name,
        "position": experience.position,
        "locality": experience.locality,
        "period_from": _to_datetime(experience.period_from),
        "period_to": None if experience.current else _to_datetime(experience.period_to),
        "current": experience.current,
        "description": experience.description,
    }


def experience_to_model(doc: dict) -> ExperienceModel:
    return ExperienceModel(
        id=doc.get("id"),
        company_name=doc.get("company_name"),
        position=doc.get("position"),
        locality=doc.get("locality"),
        period_from=_to_date(doc.get("period_from")),
        period_to=_to_date(doc.get("period_to")),
        current=bool(doc.get("current")),
        description=doc.get("description"),
    )


def education_to_document(education: EducationModel) -> dict:
    doc = education.model_dump()
    doc["id"] = education.id or new_id()
    return doc


def education_to_model(doc: dict) -> EducationModel:
    return EducationModel(**doc)


def language_to_document(language: LanguageModel) -> dict:
    return {"language": language.language, "proficiency": _enum_value(language.proficiency)}


def personal_details_to_document(consultant: ConsultantModel) -> dict:
    """Fields overwritten by a personal details update (identity fields excluded)."""
    return {
        "fiscal_code": consultant.fiscal_code,
        "email": consultant.email,
        "first_name": consultant.first_name,
        "last_name": consultant.last_name,
        "gender": _enum_value(consultant.gender),
        "phone_number": consultant.phone_number,
        "mobile_number": consultant.mobile_number,
        "birth_date": _to_datetime(consultant.birth_date),
        "birth_city": consultant.birth_city,
        "birth_country": consultant.birth_country,
        "nationality": consultant.nationality,
        "identity_card_no": consultant.identity_card_no,
        "passport_no": consultant.passport_no,
        "marital_status": _enum_value(consultant.marital_status),
        "interests": consultant.interests,
        "residence": address_to_document(consultant.residence),
        "domicile": address_to_document(consultant.domicile),
    }


def consultant_to_document(consultant: ConsultantModel) -> dict:
    doc = {
        "consultant_no": consultant.consultant_no,
        "registration_date": consultant.registration_date,
    }
    doc.update(personal_details_to_document(consultant))
    doc["profile"] = {
        "experiences": [experience_to_document(e) for e in consultant.experiences],
        "educations": [education_to_document(e) for e in consultant.educations],
        "languages": [language_to_document(l) for l in consultant.languages],
        "skills": list(consultant.skills),
    }
    return doc


def consultant_to_model(doc: dict) -> ConsultantModel:
    profile = doc.get("profile") or {}
    return ConsultantModel(
        id=str(doc["_id"]),
        consultant_no=doc.get("consultant_no"),
        registration_date=doc.get("registration_date"),
        fiscal_code=doc.get("fiscal_code"),
        email=doc.get("email"),
        first_name=doc.get("first_name"),
        last_name=doc.get("last_name"),
        gender=doc.get("gender"),
        phone_number=doc.get("phone_number"),
        mobile_number=doc.get("mobile_number"),
        birth_date=_to_date(doc.get("birth_date")),
        birth_city=doc.get("birth_city"),
        birth_country=doc.get("birth_country"),
        nationality=doc.get("nationality"),
        identity_card_no=doc.get("identity_card_no"),
        passport_no=doc.get("passport_no"),
        marital_status=doc.get("marital_status"),
        interests=doc.get("interests"),
        residence=AddressModel(**(doc.get("residence") or {})),
        domicile=AddressModel(**(doc.get("domicile") or {})),
        experiences=[experience_to_model(e) for e in profile.get("experiences", [])],
        educations=[education_to_model(e) for e in profile.get("educations", [])],
        languages=[LanguageModel(**l) for l in profile.get("languages", [])],
        skills=sorted(profile.get("skills", [])),
    )


# ============================================================
# USER / ROLE
# ============================================================

def role_to_model(doc: Optional[dict]) -> Optional[RoleModel]:
    if not doc:
        return None
    role_id = doc.get("_id", doc.get("id"))
    return RoleModel(id=str(role_id) if role_id is not None else None, name=doc["name"])


def role_to_embedded(role: RoleModel) -> dict:
    return {"id": role.id, "name": role.name}


def user_to_model(doc: dict) -> UserModel:
    return UserModel(
        id=str(doc["_id"]),
        username=doc["username"],
        password=doc.get("password"),
        first_name=doc.get("first_name"),
        last_name=doc.get("last_name"),
        email=doc.get("email"),
        not_removable=bool(doc.get("not_removable")),
        role=role_to_model(doc.get("role")),
    )


def user_to_authentication(doc: dict) -> AuthenticationModel:
    role = doc.get("role") or {}
    return AuthenticationModel(
        username=doc["username"],
        password=doc["password"],
        authorization=role.get("name"),
    )
