"""
Gateway contracts - the persistence boundary under the services.

Two interchangeable implementations exist for each contract:
- recruiting.gateway.mongodb     : one document per aggregate (pymongo)
- recruiting.gateway.relational  : normalized tables (SQLAlchemy ORM)

Contract rules shared by both:
- single lookups return the model or None, never raise for "absent"
  (malformed ids count as absent)
- listings return a Page
- mutations on a missing consultant raise EntityNotFoundError
- store errors propagate unchanged, nothing is retried
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from recruiting.models import (
    AuthenticationModel,
    ConsultantModel,
    ConsultantSearchCriteria,
    EducationModel,
    ExperienceModel,
    LanguageModel,
    Page,
    PageRequest,
    RoleModel,
    UpdatePasswordModel,
    UserModel,
)


def unique_languages(languages: Iterable[LanguageModel]) -> List[LanguageModel]:
    """Collapse a submission to one entry per language; the later entry wins."""
    by_language = {}
    for language in languages:
        by_language[language.language] = language
    return list(by_language.values())


def unique_skills(skills: Iterable[str]) -> List[str]:
    """Trim, drop blanks, keep first-seen order."""
    seen = []
    for skill in skills:
        skill = (skill or "").strip()
        if skill and skill not in seen:
            seen.append(skill)
    return seen


class ConsultantGateway(ABC):

    @abstractmethod
    def find_one_consultant(self, consultant_id: str) -> Optional[ConsultantModel]:
        ...

    @abstractmethod
    def find_consultant_by_fiscal_code(self, fiscal_code: str) -> Optional[ConsultantModel]:
        ...

    @abstractmethod
    def find_all_consultants(self, page_request: PageRequest) -> Page[ConsultantModel]:
        ...

    @abstractmethod
    def paginate_consultants(
        self, criteria: ConsultantSearchCriteria, page_request: PageRequest
    ) -> Page[ConsultantModel]:
        """Filter by criteria, newest registration first."""

    @abstractmethod
    def save_personal_details(self, consultant: ConsultantModel) -> ConsultantModel:
        ...

    @abstractmethod
    def update_personal_details(self, consultant: ConsultantModel, consultant_id: str) -> None:
        """Overwrite personal details and both addresses; profile collections untouched."""

    @abstractmethod
    def delete_consultant(self, consultant_id: str) -> None:
        ...

    @abstractmethod
    def add_experience(self, experience: ExperienceModel, consultant_id: str) -> None:
        ...

    @abstractmethod
    def update_experience(self, experience: ExperienceModel, consultant_id: str) -> None:
        ...

    @abstractmethod
    def remove_experience(self, consultant_id: str, experience_id: str) -> None:
        ...

    @abstractmethod
    def find_one_experience(self, consultant_id: str, experience_id: str) -> Optional[ExperienceModel]:
        ...

    @abstractmethod
    def add_languages(self, languages: List[LanguageModel], consultant_id: str) -> None:
        """Make the stored languages equal to the submitted set."""

    @abstractmethod
    def add_skills(self, skills: List[str], consultant_id: str) -> None:
        """Make the stored skills equal to the submitted set."""

    @abstractmethod
    def add_education(self, education: EducationModel, consultant_id: str) -> None:
        ...

    @abstractmethod
    def update_education(self, education: EducationModel, consultant_id: str) -> None:
        ...

    @abstractmethod
    def remove_education(self, consultant_id: str, education_id: str) -> None:
        ...

    @abstractmethod
    def find_one_education(self, consultant_id: str, education_id: str) -> Optional[EducationModel]:
        ...


class UserGateway(ABC):

    @abstractmethod
    def authentication_by_username(self, username: str) -> Optional[AuthenticationModel]:
        ...

    @abstractmethod
    def update_password(self, request: UpdatePasswordModel) -> bool:
        """True only if the current password verifies and the new one is confirmed."""

    @abstractmethod
    def find_user_by_id(self, user_id: str) -> Optional[UserModel]:
        ...

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[UserModel]:
        ...

    @abstractmethod
    def find_by_username_and_password(self, username: str, password: str) -> Optional[UserModel]:
        ...

    @abstractmethod
    def find_all_excluding_current_user(self, page_request: PageRequest, username_to_exclude: str) -> Page[UserModel]:
        ...

    @abstractmethod
    def find_users_by_role_name(self, role_name: str) -> List[UserModel]:
        ...

    @abstractmethod
    def save_user(self, user: UserModel) -> UserModel:
        """Persist a new user; `user.password` is plain text and gets hashed."""

    @abstractmethod
    def update_user(self, user: UserModel) -> bool:
        """Overwrite everything but the password. False if the user is unknown."""

    @abstractmethod
    def delete_user(self, user_id: str) -> None:
        """Delete unless the user is flagged not removable."""

    @abstractmethod
    def load_roles(self) -> List[RoleModel]:
        ...

    @abstractmethod
    def find_role_by_name(self, role_name: str) -> Optional[RoleModel]:
        ...

    @abstractmethod
    def save_role(self, role: RoleModel) -> RoleModel:
        ...

    @abstractmethod
    def is_current_password_valid(self, user_id: str, current_password: str) -> bool:
        ...
