"""
Consultant Service - thin orchestration over the consultant gateway.

Lookups come back as Optional (None when absent); everything else is
delegated as-is. The only decisions taken here are the identity stamps of a
new registration: consultant number and registration date.
"""
import uuid
from datetime import datetime
from typing import List, Optional

from recruiting.gateway import ConsultantGateway, get_consultant_gateway
from recruiting.models import (
    ConsultantModel,
    ConsultantSearchCriteria,
    EducationModel,
    ExperienceModel,
    LanguageModel,
    Page,
    PageRequest,
)


def generate_consultant_no(now: datetime = None) -> str:
    """Registration day plus a random suffix, e.g. 141107-3FA9C2."""
    now = now or datetime.now()
    return f"{now:%y%m%d}-{uuid.uuid4().hex[:6].upper()}"


class ConsultantService:

    def __init__(self, gateway: ConsultantGateway = None):
        self.gateway = gateway or get_consultant_gateway()

    # ---------- consultant ----------

    def find_consultant_by_id(self, consultant_id: str) -> Optional[ConsultantModel]:
        return self.gateway.find_one_consultant(consultant_id)

    def find_consultant_by_fiscal_code(self, fiscal_code: str) -> Optional[ConsultantModel]:
        return self.gateway.find_consultant_by_fiscal_code(fiscal_code)

    def find_all_consultants(self, page_request: PageRequest) -> Page[ConsultantModel]:
        return self.gateway.find_all_consultants(page_request)

    def paginate_consultants(
        self, criteria: ConsultantSearchCriteria, page_request: PageRequest
    ) -> Page[ConsultantModel]:
        return self.gateway.paginate_consultants(criteria, page_request)

    def save_personal_details(self, consultant: ConsultantModel) -> ConsultantModel:
        now = datetime.now()
        stamped = consultant.model_copy(update={
            "registration_date": consultant.registration_date or now,
            "consultant_no": consultant.consultant_no or generate_consultant_no(now),
        })
        return self.gateway.save_personal_details(stamped)

    def update_personal_details(self, consultant: ConsultantModel, consultant_id: str) -> None:
        self.gateway.update_personal_details(consultant, consultant_id)

    def delete_consultant(self, consultant_id: str) -> None:
        self.gateway.delete_consultant(consultant_id)

    # ---------- experience ----------

    def find_experience(self, consultant_id: str, experience_id: str) -> Optional[ExperienceModel]:
        return self.gateway.find_one_experience(consultant_id, experience_id)

    def add_consultant_experience(self, experience: ExperienceModel, consultant_id: str) -> None:
        self.gateway.add_experience(experience, consultant_id)

    def update_consultant_experience(self, experience: ExperienceModel, consultant_id: str) -> None:
        self.gateway.update_experience(experience, consultant_id)

    def remove_experience(self, consultant_id: str, experience_id: str) -> None:
        self.gateway.remove_experience(consultant_id, experience_id)

    # ---------- languages / skills ----------

    def add_languages(self, languages: List[LanguageModel], consultant_id: str) -> None:
        self.gateway.add_languages(languages, consultant_id)

    def add_skills(self, skills: List[str], consultant_id: str) -> None:
        self.gateway.add_skills(skills, consultant_id)

    # ---------- education ----------

    def find_education(self, consultant_id: str, education_id: str) -> Optional[EducationModel]:
        return self.gateway.find_one_education(consultant_id, education_id)

    def add_consultant_education(self, education: EducationModel, consultant_id: str) -> None:
        self.gateway.add_education(education, consultant_id)

    def update_consultant_education(self, education: EducationModel, consultant_id: str) -> None:
        self.gateway.update_education(education, consultant_id)

    def remove_education(self, consultant_id: str, education_id: str) -> None:
        self.gateway.remove_education(consultant_id, education_id)


def get_consultant_service() -> ConsultantService:
    """Get consultant service instance."""
    return ConsultantService()
