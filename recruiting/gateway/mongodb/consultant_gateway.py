"""
MongoDB Consultant Gateway - one document per consultant.

Document layout:
{
    "_id": ObjectId,
    "consultant_no": "...", "registration_date": datetime, ...personal details,
    "residence": {...}, "domicile": {...},
    "profile": {
        "experiences": [{"id": "...", ...}],
        "educations":  [{"id": "...", ...}],
        "languages":   [{"language": "...", "proficiency": "..."}],
        "skills":      ["..."]
    }
}

Embedded experiences/educations carry their own string id. Languages and
skills are replaced wholesale with the deduplicated submission, which
leaves the stored set equal to what was submitted.
"""
import logging
import re
from typing import Callable, List, Optional

from pymongo import DESCENDING
from pymongo.collection import Collection

from recruiting.core.exceptions import EntityNotFoundError
from recruiting.db.mongodb import COLLECTIONS, get_collection
from recruiting.gateway.base import ConsultantGateway, unique_languages, unique_skills
from recruiting.gateway.mongodb.converters import (
    consultant_to_document,
    consultant_to_model,
    education_to_document,
    education_to_model,
    experience_to_document,
    experience_to_model,
    language_to_document,
    personal_details_to_document,
    to_object_id,
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

SORT_BY_REGISTRATION = [("registration_date", DESCENDING), ("_id", DESCENDING)]


def search_filter(criteria: ConsultantSearchCriteria) -> dict:
    """Build the AND-ed query document; blank criteria are left out."""
    query = {}
    if criteria.has_name():
        query["first_name"] = {"$regex": re.escape(criteria.name.strip()), "$options": "i"}
    if criteria.has_last_name():
        query["last_name"] = {"$regex": re.escape(criteria.last_name.strip()), "$options": "i"}
    skills = criteria.skill_list()
    if skills:
        query["profile.skills"] = {"$in": skills}
    return query


class MongoConsultantGateway(ConsultantGateway):

    def __init__(self, collection: Collection = None):
        self.collection: Collection = (
            collection if collection is not None else get_collection(COLLECTIONS["consultants"])
        )

    def _find_document(self, consultant_id: str) -> Optional[dict]:
        oid = to_object_id(consultant_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def _require_document(self, consultant_id: str) -> dict:
        doc = self._find_document(consultant_id)
        if doc is None:
            raise EntityNotFoundError("Consultant", consultant_id)
        return doc

    def _rewrite_profile_list(self, consultant_id: str, key: str, rewrite: Callable[[list], list]) -> None:
        """Read-modify-write of one embedded profile array."""
        doc = self._require_document(consultant_id)
        items = (doc.get("profile") or {}).get(key, [])
        self.collection.update_one(
            {"_id": doc["_id"]},
            {"$set": {f"profile.{key}": rewrite(items)}}
        )

    def _update_consultant(self, consultant_id: str, update: dict) -> None:
        oid = to_object_id(consultant_id)
        if oid is None or self.collection.update_one({"_id": oid}, update).matched_count == 0:
            raise EntityNotFoundError("Consultant", consultant_id)

    # ============================================================
    # CONSULTANT
    # ============================================================

    def find_one_consultant(self, consultant_id: str) -> Optional[ConsultantModel]:
        doc = self._find_document(consultant_id)
        return consultant_to_model(doc) if doc else None

    def find_consultant_by_fiscal_code(self, fiscal_code: str) -> Optional[ConsultantModel]:
        doc = self.collection.find_one({"fiscal_code": fiscal_code})
        return consultant_to_model(doc) if doc else None

    def find_all_consultants(self, page_request: PageRequest) -> Page[ConsultantModel]:
        return self.paginate_consultants(ConsultantSearchCriteria(), page_request)

    def paginate_consultants(
        self, criteria: ConsultantSearchCriteria, page_request: PageRequest
    ) -> Page[ConsultantModel]:
        query = search_filter(criteria)
        total = self.collection.count_documents(query)
        cursor = (
            self.collection.find(query)
            .sort(SORT_BY_REGISTRATION)
            .skip(page_request.offset)
            .limit(page_request.size)
        )
        return Page[ConsultantModel].of([consultant_to_model(d) for d in cursor], page_request, total)

    def save_personal_details(self, consultant: ConsultantModel) -> ConsultantModel:
        doc = consultant_to_document(consultant)
        result = self.collection.insert_one(doc)
        logger.info("Saved consultant %s (%s)", result.inserted_id, consultant.consultant_no)
        return consultant_to_model(self.collection.find_one({"_id": result.inserted_id}))

    def update_personal_details(self, consultant: ConsultantModel, consultant_id: str) -> None:
        self._update_consultant(consultant_id, {"$set": personal_details_to_document(consultant)})
        logger.info("Updated personal details of consultant %s", consultant_id)

    def delete_consultant(self, consultant_id: str) -> None:
        oid = to_object_id(consultant_id)
        if oid is None or self.collection.delete_one({"_id": oid}).deleted_count == 0:
            raise EntityNotFoundError("Consultant", consultant_id)
        logger.info("Deleted consultant %s", consultant_id)

    # ============================================================
    # EXPERIENCE
    # ============================================================

    def add_experience(self, experience: ExperienceModel, consultant_id: str) -> None:
        self._update_consultant(consultant_id, {"$push": {"profile.experiences": experience_to_document(experience)}})
        logger.debug("Added experience to consultant %s", consultant_id)

    def update_experience(self, experience: ExperienceModel, consultant_id: str) -> None:
        def rewrite(items: list) -> list:
            if not any(item.get("id") == experience.id for item in items):
                raise EntityNotFoundError("Experience", experience.id)
            return [
                experience_to_document(experience) if item.get("id") == experience.id else item
                for item in items
            ]
        self._rewrite_profile_list(consultant_id, "experiences", rewrite)

    def remove_experience(self, consultant_id: str, experience_id: str) -> None:
        def rewrite(items: list) -> list:
            kept = [item for item in items if item.get("id") != experience_id]
            if len(kept) == len(items):
                raise EntityNotFoundError("Experience", experience_id)
            return kept
        self._rewrite_profile_list(consultant_id, "experiences", rewrite)

    def find_one_experience(self, consultant_id: str, experience_id: str) -> Optional[ExperienceModel]:
        doc = self._find_document(consultant_id)
        if doc is None:
            return None
        for item in (doc.get("profile") or {}).get("experiences", []):
            if item.get("id") == experience_id:
                return experience_to_model(item)
        return None

    # ============================================================
    # LANGUAGES / SKILLS
    # ============================================================

    def add_languages(self, languages: List[LanguageModel], consultant_id: str) -> None:
        documents = [language_to_document(l) for l in unique_languages(languages)]
        self._update_consultant(consultant_id, {"$set": {"profile.languages": documents}})

    def add_skills(self, skills: List[str], consultant_id: str) -> None:
        self._update_consultant(consultant_id, {"$set": {"profile.skills": unique_skills(skills)}})

    # ============================================================
    # EDUCATION
    # ============================================================

    def add_education(self, education: EducationModel, consultant_id: str) -> None:
        self._update_consultant(consultant_id, {"$push": {"profile.educations": education_to_document(education)}})
        logger.debug("Added education to consultant %s", consultant_id)

    def update_education(self, education: EducationModel, consultant_id: str) -> None:
        def rewrite(items: list) -> list:
            if not any(item.get("id") == education.id for item in items):
                raise EntityNotFoundError("Education", education.id)
            return [
                education_to_document(education) if item.get("id") == education.id else item
                for item in items
            ]
        self._rewrite_profile_list(consultant_id, "educations", rewrite)

    def remove_education(self, consultant_id: str, education_id: str) -> None:
        def rewrite(items: list) -> list:
            kept = [item for item in items if item.get("id") != education_id]
            if len(kept) == len(items):
                raise EntityNotFoundError("Education", education_id)
            return kept
        self._rewrite_profile_list(consultant_id, "educations", rewrite)

    def find_one_education(self, consultant_id: str, education_id: str) -> Optional[EducationModel]:
        doc = self._find_document(consultant_id)
        if doc is None:
            return None
        for item in (doc.get("profile") or {}).get("educations", []):
            if item.get("id") == education_id:
                return education_to_model(item)
        return None
