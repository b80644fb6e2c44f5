"""
Relational Consultant Gateway - SQLAlchemy ORM implementation.

Every public method is one transaction (`get_db_session`): commit on
success, rollback on any exception. Models are converted while the session
is still open so lazy collections load.

Languages and skills are reconciled as sets against the submission:
prune stale rows, drop submitted entries already stored, insert the rest.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session, sessionmaker

from recruiting.core.exceptions import EntityNotFoundError
from recruiting.db.mysql import get_db_session
from recruiting.db.tables import Consultant, Education, Experience, Language, Skill
from recruiting.gateway.base import ConsultantGateway, unique_languages, unique_skills
from recruiting.gateway.relational.converters import (
    consultant_to_model,
    education_to_model,
    experience_to_model,
    language_to_model,
    map_education,
    map_experience,
    map_personal_details,
    parse_id,
)
from recruiting.models import (
    ConsultantModel,
    ConsultantSearchCriteria,
    EducationModel,
    ExperienceModel,
    LanguageModel,
    Page,
    PageRequest,
)

logger = logging.getLogger(__name__)


def _contains(value: str) -> str:
    """LIKE pattern for a case-insensitive substring match."""
    escaped = value.strip().lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def where_condition(criteria: ConsultantSearchCriteria) -> list:
    """Build the AND-ed filter; blank criteria contribute nothing."""
    conditions = []
    if criteria.has_name():
        conditions.append(func.lower(Consultant.first_name).like(_contains(criteria.name), escape="\\"))
    if criteria.has_last_name():
        conditions.append(func.lower(Consultant.last_name).like(_contains(criteria.last_name), escape="\\"))
    skills = criteria.skill_list()
    if skills:
        conditions.append(Consultant.skills.any(Skill.skill.in_(skills)))
    return conditions


class RelationalConsultantGateway(ConsultantGateway):

    def __init__(self, session_factory: sessionmaker = None):
        self.session_factory = session_factory

    def _session(self):
        return get_db_session(self.session_factory)

    @staticmethod
    def _load(db: Session, consultant_id: str) -> Consultant:
        pk = parse_id(consultant_id)
        consultant = db.get(Consultant, pk) if pk is not None else None
        if consultant is None:
            raise EntityNotFoundError("Consultant", consultant_id)
        return consultant

    # ============================================================
    # CONSULTANT
    # ============================================================

    def find_one_consultant(self, consultant_id: str) -> Optional[ConsultantModel]:
        pk = parse_id(consultant_id)
        if pk is None:
            return None
        with self._session() as db:
            consultant = db.get(Consultant, pk)
            return consultant_to_model(consultant) if consultant else None

    def find_consultant_by_fiscal_code(self, fiscal_code: str) -> Optional[ConsultantModel]:
        with self._session() as db:
            consultant = db.scalars(
                select(Consultant).where(Consultant.fiscal_code == fiscal_code)
            ).first()
            return consultant_to_model(consultant) if consultant else None

    def find_all_consultants(self, page_request: PageRequest) -> Page[ConsultantModel]:
        return self.paginate_consultants(ConsultantSearchCriteria(), page_request)

    def paginate_consultants(
        self, criteria: ConsultantSearchCriteria, page_request: PageRequest
    ) -> Page[ConsultantModel]:
        query = select(Consultant)
        conditions = where_condition(criteria)
        if conditions:
            query = query.where(and_(*conditions))

        with self._session() as db:
            total = db.scalar(select(func.count()).select_from(query.subquery()))
            consultants = db.scalars(
                query.order_by(Consultant.registration_date.desc(), Consultant.id.desc())
                .offset(page_request.offset)
                .limit(page_request.size)
            ).all()
            content = [consultant_to_model(c) for c in consultants]

        return Page[ConsultantModel].of(content, page_request, total)

    def save_personal_details(self, model: ConsultantModel) -> ConsultantModel:
        with self._session() as db:
            consultant = Consultant(
                consultant_no=model.consultant_no,
                registration_date=model.registration_date or datetime.now(),
            )
            map_personal_details(model, consultant)
            db.add(consultant)
            db.flush()
            db.refresh(consultant)
            logger.info("Saved consultant %s (%s)", consultant.id, consultant.consultant_no)
            return consultant_to_model(consultant)

    def update_personal_details(self, model: ConsultantModel, consultant_id: str) -> None:
        with self._session() as db:
            consultant = self._load(db, consultant_id)
            map_personal_details(model, consultant)
        logger.info("Updated personal details of consultant %s", consultant_id)

    def delete_consultant(self, consultant_id: str) -> None:
        with self._session() as db:
            db.delete(self._load(db, consultant_id))
        logger.info("Deleted consultant %s", consultant_id)

    # ============================================================
    # EXPERIENCE
    # ============================================================

    @staticmethod
    def _find_experience(db: Session, consultant_id: str, experience_id: str) -> Optional[Experience]:
        pk, owner = parse_id(experience_id), parse_id(consultant_id)
        if pk is None or owner is None:
            return None
        experience = db.get(Experience, pk)
        if experience is None or experience.consultant_id != owner:
            return None
        return experience

    def add_experience(self, model: ExperienceModel, consultant_id: str) -> None:
        with self._session() as db:
            consultant = self._load(db, consultant_id)
            experience = Experience()
            map_experience(model, experience)
            consultant.experiences.append(experience)
        logger.debug("Added experience to consultant %s", consultant_id)

    def update_experience(self, model: ExperienceModel, consultant_id: str) -> None:
        with self._session() as db:
            experience = self._find_experience(db, consultant_id, model.id)
            if experience is None:
                raise EntityNotFoundError("Experience", model.id)
            map_experience(model, experience)

    def remove_experience(self, consultant_id: str, experience_id: str) -> None:
        with self._session() as db:
            experience = self._find_experience(db, consultant_id, experience_id)
            if experience is None:
                raise EntityNotFoundError("Experience", experience_id)
            db.delete(experience)

    def find_one_experience(self, consultant_id: str, experience_id: str) -> Optional[ExperienceModel]:
        with self._session() as db:
            experience = self._find_experience(db, consultant_id, experience_id)
            return experience_to_model(experience) if experience else None

    # ============================================================
    # LANGUAGES / SKILLS
    # ============================================================

    def add_languages(self, languages: List[LanguageModel], consultant_id: str) -> None:
        submitted = unique_languages(languages)
        with self._session() as db:
            consultant = self._load(db, consultant_id)

            # 1. prune stored languages that were not submitted
            for language in list(consultant.languages):
                if language_to_model(language) not in submitted:
                    consultant.languages.remove(language)
            db.flush()

            # 2. skip what is already stored
            stored = {
                language_to_model(language)
                for language in db.scalars(select(Language).where(Language.consultant_id == consultant.id))
            }
            to_insert = [language for language in submitted if language not in stored]

            # 3. insert the rest
            for language in to_insert:
                consultant.languages.append(
                    Language(
                        language=language.language,
                        proficiency=language.proficiency.value if language.proficiency else None,
                    )
                )
        logger.debug("Languages of consultant %s reconciled, %d added", consultant_id, len(to_insert))

    def add_skills(self, skills: List[str], consultant_id: str) -> None:
        submitted = unique_skills(skills)
        with self._session() as db:
            consultant = self._load(db, consultant_id)

            for skill in list(consultant.skills):
                if skill.skill not in submitted:
                    consultant.skills.remove(skill)
            db.flush()

            stored = set(db.scalars(select(Skill.skill).where(Skill.consultant_id == consultant.id)))
            to_insert = [skill for skill in submitted if skill not in stored]

            for skill in to_insert:
                consultant.skills.append(Skill(skill=skill))
        logger.debug("Skills of consultant %s reconciled, %d added", consultant_id, len(to_insert))

    # ============================================================
    # EDUCATION
    # ============================================================

    @staticmethod
    def _find_education(db: Session, consultant_id: str, education_id: str) -> Optional[Education]:
        pk, owner = parse_id(education_id), parse_id(consultant_id)
        if pk is None or owner is None:
            return None
        education = db.get(Education, pk)
        if education is None or education.consultant_id != owner:
            return None
        return education

    def add_education(self, model: EducationModel, consultant_id: str) -> None:
        with self._session() as db:
            consultant = self._load(db, consultant_id)
            education = Education()
            map_education(model, education)
            consultant.educations.append(education)
        logger.debug("Added education to consultant %s", consultant_id)

    def update_education(self, model: EducationModel, consultant_id: str) -> None:
        with self._session() as db:
            education = self._find_education(db, consultant_id, model.id)
            if education is None:
                raise EntityNotFoundError("Education", model.id)
            map_education(model, education)

    def remove_education(self, consultant_id: str, education_id: str) -> None:
        with self._session() as db:
            education = self._find_education(db, consultant_id, education_id)
            if education is None:
                raise EntityNotFoundError("Education", education_id)
            db.delete(education)

    def find_one_education(self, consultant_id: str, education_id: str) -> Optional[EducationModel]:
        with self._session() as db:
            education = self._find_education(db, consultant_id, education_id)
            return education_to_model(education) if education else None
