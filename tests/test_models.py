from datetime import date

from recruiting.models import (
    ConsultantModel,
    ConsultantSearchCriteria,
    ExperienceModel,
    LanguageModel,
    Page,
    PageRequest,
    Proficiency,
)
from recruiting.models.builders import experience
from recruiting.gateway.base import unique_languages, unique_skills


class TestExperienceBuilder:

    def test_current_job_has_no_end_period(self):
        model = (
            experience()
            .in_company("F2 Informatica")
            .with_position("Developer")
            .from_period(date(2012, 6, 1))
            .to_period(date(2013, 1, 31))
            .this_is_the_current_job()
            .build()
        )
        assert model.current is True
        assert model.period_to is None
        assert model.company_name == "F2 Informatica"

    def test_closed_job_keeps_end_period(self):
        model = experience().from_period(date(2012, 6, 1)).to_period(date(2013, 1, 31)).build()
        assert model.current is False
        assert model.period_to == date(2013, 1, 31)

    def test_missing_end_period_means_current(self):
        model = experience().from_period(date(2012, 6, 1)).to_period(None).build()
        assert model.current is True

    def test_flag_can_be_toggled(self):
        assert experience().is_this_the_current_job(True).build().current is True
        assert experience().is_this_the_current_job(False).build().current is False


class TestModels:

    def test_current_experience_drops_end_period(self):
        model = ExperienceModel(period_from=date(2012, 1, 1), period_to=date(2012, 2, 29), current=True)
        assert model.period_to is None

    def test_full_name_is_surname_first(self):
        assert ConsultantModel(first_name="Mario", last_name="Rossi").full_name == "Rossi Mario"

    def test_languages_compare_by_value(self):
        a = LanguageModel(language="English", proficiency=Proficiency.native)
        b = LanguageModel(language="English", proficiency="NATIVE")
        assert a == b
        assert len({a, b}) == 1

    def test_search_criteria_split_skills(self):
        criteria = ConsultantSearchCriteria(name="  ", skills="Java, Python ,,")
        assert not criteria.has_name()
        assert criteria.skill_list() == ["Java", "Python"]

    def test_page_counts_pages(self):
        page = Page[str].of(["a", "b"], PageRequest(page=1, size=2), total=5)
        assert page.total_pages == 3
        assert page.page_number == 1
        assert PageRequest(page=2, size=5).offset == 10


class TestSubmissionCleanup:

    def test_later_language_entry_wins(self):
        languages = unique_languages([
            LanguageModel(language="English", proficiency=Proficiency.elementary),
            LanguageModel(language="Italian", proficiency=Proficiency.native),
            LanguageModel(language="English", proficiency=Proficiency.full_professional),
        ])
        assert languages == [
            LanguageModel(language="English", proficiency=Proficiency.full_professional),
            LanguageModel(language="Italian", proficiency=Proficiency.native),
        ]

    def test_skills_are_trimmed_and_unique(self):
        assert unique_skills([" Java", "Java", "", None, "SQL "]) == ["Java", "SQL"]
