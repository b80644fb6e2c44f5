"""
Consultant aggregate - service-layer models.

A consultant carries personal details, two owned addresses (residence and
domicile) and the profile collections: experiences, educations, languages
and skills. Storage entities/documents are converted to and from these
models by the gateways; routes only ever see these.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================
# ENUMS
# ============================================================

class Gender(str, Enum):
    male = "MALE"
    female = "FEMALE"


class MaritalStatus(str, Enum):
    single = "SINGLE"
    married = "MARRIED"
    divorced = "DIVORCED"
    widowed = "WIDOWED"
    separated = "SEPARATED"


class Proficiency(str, Enum):
    elementary = "ELEMENTARY"
    limited_working = "LIMITED_WORKING"
    professional_working = "PROFESSIONAL_WORKING"
    full_professional = "FULL_PROFESSIONAL"
    native = "NATIVE"


# ============================================================
# PROFILE PARTS
# ============================================================

class AddressModel(BaseModel):
    street: Optional[str] = None
    house_no: Optional[str] = None
    zip_code: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None


class ExperienceModel(BaseModel):
    """
    A job held by the consultant.

    A current job has no end period: `current=True` always clears `period_to`.
    The month/year and formatted fields only travel between forms and views,
    they are never stored.
    """
    id: Optional[str] = None
    company_name: Optional[str] = None
    position: Optional[str] = None
    locality: Optional[str] = None
    period_from: Optional[date] = None
    period_to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    # form / view helpers
    month_from: Optional[int] = None
    year_from: Optional[int] = None
    month_to: Optional[int] = None
    year_to: Optional[int] = None
    total_period_elapsed: Optional[str] = None
    formatted_period_from: Optional[str] = None
    formatted_period_to: Optional[str] = None

    @model_validator(mode="after")
    def _current_job_has_no_end(self):
        if self.current:
            self.period_to = None
        return self


class EducationModel(BaseModel):
    id: Optional[str] = None
    school: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    current: bool = False
    school_degree: Optional[str] = None
    school_field_of_study: Optional[str] = None
    school_grade: Optional[str] = None
    school_activities: Optional[str] = None
    description: Optional[str] = None


class LanguageModel(BaseModel):
    """Language spoken by a consultant. Equal (and hashable) by value."""
    model_config = ConfigDict(frozen=True)

    language: str
    proficiency: Optional[Proficiency] = None


# ============================================================
# CONSULTANT
# ============================================================

class ConsultantModel(BaseModel):
    id: Optional[str] = None
    consultant_no: Optional[str] = None
    registration_date: Optional[datetime] = None
    fiscal_code: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[Gender] = None
    phone_number: Optional[str] = None
    mobile_number: Optional[str] = None
    birth_date: Optional[date] = None
    birth_city: Optional[str] = None
    birth_country: Optional[str] = None
    nationality: Optional[str] = None
    identity_card_no: Optional[str] = None
    passport_no: Optional[str] = None
    marital_status: Optional[MaritalStatus] = None
    interests: Optional[str] = None

    residence: AddressModel = Field(default_factory=AddressModel)
    domicile: AddressModel = Field(default_factory=AddressModel)

    experiences: List[ExperienceModel] = []
    educations: List[EducationModel] = []
    languages: List[LanguageModel] = []
    skills: List[str] = []

    @property
    def full_name(self) -> str:
        """Surname first, as shown on the profile page."""
        return f"{self.last_name or ''} {self.first_name or ''}".strip()
