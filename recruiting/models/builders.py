"""
Fluent builder for experiences.

Keeps the end period and the current-job flag consistent while an
experience is assembled step by step:

    experience().in_company("Acme").from_period(date(2020, 1, 1)).this_is_the_current_job().build()
"""

from datetime import date
from typing import Optional

from recruiting.models.consultant import ExperienceModel


class ExperienceBuilder:

    def __init__(self):
        self._fields = {"current": False}

    def with_id(self, experience_id: str) -> "ExperienceBuilder":
        self._fields["id"] = experience_id
        return self

    def in_company(self, company_name: str) -> "ExperienceBuilder":
        self._fields["company_name"] = company_name
        return self

    def with_position(self, position: str) -> "ExperienceBuilder":
        self._fields["position"] = position
        return self

    def located_at(self, locality: str) -> "ExperienceBuilder":
        self._fields["locality"] = locality
        return self

    def with_description(self, description: str) -> "ExperienceBuilder":
        self._fields["description"] = description
        return self

    def from_period(self, period_from: date) -> "ExperienceBuilder":
        self._fields["period_from"] = period_from
        return self

    def to_period(self, period_to: Optional[date]) -> "ExperienceBuilder":
        """An end date closes the job; no end date means it is still current."""
        self._fields["period_to"] = period_to
        self._fields["current"] = period_to is None
        return self

    def is_this_the_current_job(self, is_current: bool) -> "ExperienceBuilder":
        if is_current:
            return self.this_is_the_current_job()
        self._fields["current"] = False
        return self

    def this_is_the_current_job(self) -> "ExperienceBuilder":
        self._fields["period_to"] = None
        self._fields["current"] = True
        return self

    def build(self) -> ExperienceModel:
        return ExperienceModel(**self._fields)


def experience() -> ExperienceBuilder:
    return ExperienceBuilder()
