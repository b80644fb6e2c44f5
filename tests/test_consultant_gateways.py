"""
Behaviour both consultant gateways share; every test runs against the
relational gateway (SQLite) and the document gateway (mongomock).
"""

from datetime import date, datetime

import pytest

from recruiting.core.exceptions import EntityNotFoundError
from recruiting.models import (
    AddressModel,
    ConsultantSearchCriteria,
    EducationModel,
    LanguageModel,
    PageRequest,
    Proficiency,
)
from recruiting.models.builders import experience

from tests.conftest import make_consultant


def register(gateway, index: int, **overrides):
    fields = dict(
        consultant_no=f"141107-{index:06d}",
        fiscal_code=f"FISCALCODE{index:06d}",
        registration_date=datetime(2014, 1, index % 28 + 1),
    )
    fields.update(overrides)
    return gateway.save_personal_details(make_consultant(**fields))


def language(name: str, proficiency: Proficiency = None) -> LanguageModel:
    return LanguageModel(language=name, proficiency=proficiency)


class TestPersonalDetails:

    def test_save_and_find(self, consultant_gateway):
        saved = consultant_gateway.save_personal_details(make_consultant())
        assert saved.id is not None

        found = consultant_gateway.find_one_consultant(saved.id)
        assert found.fiscal_code == "RSSMRA78H05A089N"
        assert found.birth_date == date(1978, 6, 5)
        assert found.residence.city == "Agrigento"
        assert found.domicile.city == "Milano"
        assert found.experiences == []
        assert found.skills == []

    def test_find_by_fiscal_code(self, consultant_gateway):
        consultant_gateway.save_personal_details(make_consultant())
        found = consultant_gateway.find_consultant_by_fiscal_code("RSSMRA78H05A089N")
        assert found.last_name + " " + found.first_name == "Rossi Mario"
        assert consultant_gateway.find_consultant_by_fiscal_code("XXXXXX00X00X000X") is None

    def test_unknown_or_malformed_id_is_absent(self, consultant_gateway):
        assert consultant_gateway.find_one_consultant("not-an-id") is None
        assert consultant_gateway.find_one_consultant(None) is None

    def test_update_overwrites_details_and_addresses(self, consultant_gateway):
        saved = consultant_gateway.save_personal_details(make_consultant())
        changed = saved.model_copy(update={
            "email": "m.rossi@gmail.com",
            "residence": AddressModel(street="Via Garibaldi", city="Palermo"),
        })
        consultant_gateway.update_personal_details(changed, saved.id)

        found = consultant_gateway.find_one_consultant(saved.id)
        assert found.email == "m.rossi@gmail.com"
        assert found.residence.city == "Palermo"
        assert found.residence.zip_code is None
        assert found.consultant_no == saved.consultant_no

    def test_update_keeps_profile(self, consultant_gateway):
        saved = consultant_gateway.save_personal_details(make_consultant())
        consultant_gateway.add_skills(["Java"], saved.id)
        consultant_gateway.update_personal_details(saved.model_copy(update={"skills": []}), saved.id)
        assert consultant_gateway.find_one_consultant(saved.id).skills == ["Java"]

    def test_mutating_missing_consultant_raises(self, consultant_gateway):
        with pytest.raises(EntityNotFoundError):
            consultant_gateway.update_personal_details(make_consultant(), "12345")
        with pytest.raises(EntityNotFoundError):
            consultant_gateway.add_skills(["Java"], "12345")

    def test_delete(self, consultant_gateway):
        saved = consultant_gateway.save_personal_details(make_consultant())
        consultant_gateway.add_experience(
            experience().in_company("Acme").from_period(date(2012, 1, 1)).this_is_the_current_job().build(),
            saved.id,
        )
        consultant_gateway.delete_consultant(saved.id)
        assert consultant_gateway.find_one_consultant(saved.id) is None


class TestExperiences:

    def test_add_find_update_remove(self, consultant_gateway):
        consultant = consultant_gateway.save_personal_details(make_consultant())
        consultant_gateway.add_experience(
            experience()
            .in_company("F2 Informatica")
            .with_position("Developer")
            .from_period(date(2012, 6, 1))
            .to_period(date(2013, 2, 28))
            .build(),
            consultant.id,
        )
        stored = consultant_gateway.find_one_consultant(consultant.id).experiences
        assert len(stored) == 1
        experience_id = stored[0].id
        assert stored[0].period_to == date(2013, 2, 28)

        found = consultant_gateway.find_one_experience(consultant.id, experience_id)
        assert found.company_name == "F2 Informatica"

        consultant_gateway.update_experience(
            found.model_copy(update={"position": "Team leader", "current": True, "period_to": None}),
            consultant.id,
        )
        updated = consultant_gateway.find_one_experience(consultant.id, experience_id)
        assert updated.position == "Team leader"
        assert updated.current is True
        assert updated.period_to is None

        consultant_gateway.remove_experience(consultant.id, experience_id)
        assert consultant_gateway.find_one_experience(consultant.id, experience_id) is None

    def test_experience_is_scoped_to_its_consultant(self, consultant_gateway):
        first = register(consultant_gateway, 1)
        second = register(consultant_gateway, 2)
        consultant_gateway.add_experience(experience().in_company("Acme").build(), first.id)
        experience_id = consultant_gateway.find_one_consultant(first.id).experiences[0].id

        assert consultant_gateway.find_one_experience(second.id, experience_id) is None
        with pytest.raises(EntityNotFoundError):
            consultant_gateway.remove_experience(second.id, experience_id)

    def test_update_of_unknown_experience_raises(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        with pytest.raises(EntityNotFoundError):
            consultant_gateway.update_experience(experience().with_id("999").in_company("X").build(), consultant.id)


class TestEducations:

    def test_add_find_update_remove(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        consultant_gateway.add_education(
            EducationModel(school="Politecnico di Milano", start_year=2000, end_year=2005, school_degree="MSc"),
            consultant.id,
        )
        education_id = consultant_gateway.find_one_consultant(consultant.id).educations[0].id

        found = consultant_gateway.find_one_education(consultant.id, education_id)
        assert found.school == "Politecnico di Milano"
        assert found.end_year == 2005

        consultant_gateway.update_education(found.model_copy(update={"school_grade": "110/110"}), consultant.id)
        assert consultant_gateway.find_one_education(consultant.id, education_id).school_grade == "110/110"

        consultant_gateway.remove_education(consultant.id, education_id)
        assert consultant_gateway.find_one_consultant(consultant.id).educations == []

    def test_remove_unknown_education_raises(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        with pytest.raises(EntityNotFoundError):
            consultant_gateway.remove_education(consultant.id, "999")


class TestLanguagesAndSkills:

    def test_languages_end_up_equal_to_submission(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        consultant_gateway.add_languages(
            [language("English", Proficiency.full_professional), language("French", Proficiency.elementary)],
            consultant.id,
        )
        consultant_gateway.add_languages(
            [language("English", Proficiency.native), language("Spanish")],
            consultant.id,
        )
        stored = set(consultant_gateway.find_one_consultant(consultant.id).languages)
        assert stored == {language("English", Proficiency.native), language("Spanish")}

    def test_language_reconciliation_is_idempotent(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        submission = [language("English", Proficiency.native), language("Italian", Proficiency.native)]
        consultant_gateway.add_languages(submission, consultant.id)
        consultant_gateway.add_languages(submission, consultant.id)
        assert set(consultant_gateway.find_one_consultant(consultant.id).languages) == set(submission)

    def test_empty_submission_clears_languages(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        consultant_gateway.add_languages([language("English")], consultant.id)
        consultant_gateway.add_languages([], consultant.id)
        assert consultant_gateway.find_one_consultant(consultant.id).languages == []

    def test_skills_end_up_equal_to_submission(self, consultant_gateway):
        consultant = register(consultant_gateway, 1)
        consultant_gateway.add_skills(["Java", "Spring", "SQL"], consultant.id)
        consultant_gateway.add_skills(["Java", "Python", "Python", " "], consultant.id)
        assert consultant_gateway.find_one_consultant(consultant.id).skills == ["Java", "Python"]

        consultant_gateway.add_skills(["Java", "Python"], consultant.id)
        assert consultant_gateway.find_one_consultant(consultant.id).skills == ["Java", "Python"]

    def test_skills_are_per_consultant(self, consultant_gateway):
        first = register(consultant_gateway, 1)
        second = register(consultant_gateway, 2)
        consultant_gateway.add_skills(["Java"], first.id)
        consultant_gateway.add_skills(["Java", "SQL"], second.id)
        consultant_gateway.add_skills([], first.id)

        assert consultant_gateway.find_one_consultant(first.id).skills == []
        assert consultant_gateway.find_one_consultant(second.id).skills == ["Java", "SQL"]


class TestSearch:

    @pytest.fixture
    def registered(self, consultant_gateway):
        people = [
            ("Mario", "Rossi", datetime(2014, 1, 10), ["Java", "SQL"]),
            ("Maria", "Bianchi", datetime(2014, 3, 10), ["Python"]),
            ("Luigi", "Rossini", datetime(2014, 2, 10), ["Java"]),
            ("Anna", "Verdi", datetime(2014, 4, 10), []),
        ]
        for index, (first, last, registered_on, skills) in enumerate(people, start=1):
            saved = register(
                consultant_gateway, index, first_name=first, last_name=last, registration_date=registered_on
            )
            consultant_gateway.add_skills(skills, saved.id)
        return consultant_gateway

    @staticmethod
    def names(page):
        return [c.last_name for c in page.content]

    def test_blank_criteria_return_everything_newest_first(self, registered):
        page = registered.paginate_consultants(ConsultantSearchCriteria(name=" ", skills=""), PageRequest(size=10))
        assert self.names(page) == ["Verdi", "Bianchi", "Rossini", "Rossi"]
        assert page.total_elements == 4

    def test_find_all_is_the_unfiltered_search(self, registered):
        assert self.names(registered.find_all_consultants(PageRequest(size=10))) == [
            "Verdi", "Bianchi", "Rossini", "Rossi",
        ]

    def test_name_is_case_insensitive_substring(self, registered):
        page = registered.paginate_consultants(ConsultantSearchCriteria(name="MARI"), PageRequest())
        assert self.names(page) == ["Bianchi", "Rossi"]

    def test_criteria_are_anded(self, registered):
        page = registered.paginate_consultants(
            ConsultantSearchCriteria(last_name="ross", skills="Java"), PageRequest()
        )
        assert self.names(page) == ["Rossini", "Rossi"]

        page = registered.paginate_consultants(
            ConsultantSearchCriteria(name="luigi", last_name="ross", skills="SQL"), PageRequest()
        )
        assert page.content == []

    def test_any_listed_skill_matches(self, registered):
        page = registered.paginate_consultants(ConsultantSearchCriteria(skills="Python, SQL"), PageRequest())
        assert self.names(page) == ["Bianchi", "Rossi"]

    def test_pages_are_bounded(self, registered):
        page = registered.paginate_consultants(ConsultantSearchCriteria(), PageRequest(page=1, size=3))
        assert self.names(page) == ["Rossi"]
        assert page.total_elements == 4
        assert page.total_pages == 2

    def test_like_wildcards_are_literal(self, registered):
        page = registered.paginate_consultants(ConsultantSearchCriteria(name="%"), PageRequest())
        assert page.content == []
