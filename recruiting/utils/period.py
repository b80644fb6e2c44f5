"""
Period helpers for experiences.

Forms submit periods as month + year. A start period resolves to the first
day of its month, an end period to the last day (leap years included).
Elapsed time is counted in whole calendar months, both ends included.
"""

import calendar
from datetime import date
from typing import List, Optional

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class MonthHelper:

    def get_months(self) -> List[dict]:
        """Months for the period drop-downs, 1-based."""
        return [{"id": number, "name": name} for number, name in enumerate(MONTH_NAMES, start=1)]


class PeriodParser:

    def resolve_date_by_month_and_year(self, month: int, year: int) -> date:
        return date(year, month, 1)

    def resolve_end_of_month(self, month: int, year: int) -> date:
        start = self.resolve_date_by_month_and_year(month, year)
        last_day = calendar.monthrange(start.year, start.month)[1]
        return start.replace(day=last_day)

    def format_date_by_month_name_and_year(self, value: Optional[date]) -> Optional[str]:
        if value is None:
            return None
        return f"{MONTH_NAMES[value.month - 1]} {value.year}"

    def print_total_time_of_period_which_has_elapsed(
        self, period_from: Optional[date], period_to: Optional[date] = None, today: Optional[date] = None
    ) -> str:
        """e.g. '2 years 3 months'; an open period runs until today."""
        if period_from is None:
            return ""
        period_to = period_to or today or date.today()
        months = (period_to.year - period_from.year) * 12 + (period_to.month - period_from.month) + 1
        months = max(months, 0)

        years, months = divmod(months, 12)
        parts = []
        if years:
            parts.append(f"{years} year" + ("s" if years > 1 else ""))
        if months or not years:
            parts.append(f"{months} month" + ("s" if months != 1 else ""))
        return " ".join(parts)
