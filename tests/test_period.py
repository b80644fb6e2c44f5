from datetime import date

from recruiting.utils.period import MonthHelper, PeriodParser

parser = PeriodParser()


class TestPeriodParser:

    def test_start_period_is_first_day_of_month(self):
        assert parser.resolve_date_by_month_and_year(6, 2012) == date(2012, 6, 1)

    def test_end_period_is_last_day_of_month(self):
        assert parser.resolve_end_of_month(4, 2013) == date(2013, 4, 30)
        assert parser.resolve_end_of_month(12, 2013) == date(2013, 12, 31)

    def test_end_of_february_follows_leap_years(self):
        assert parser.resolve_end_of_month(2, 2012) == date(2012, 2, 29)
        assert parser.resolve_end_of_month(2, 2013) == date(2013, 2, 28)
        assert parser.resolve_end_of_month(2, 2000) == date(2000, 2, 29)
        assert parser.resolve_end_of_month(2, 1900) == date(1900, 2, 28)

    def test_format_by_month_name_and_year(self):
        assert parser.format_date_by_month_name_and_year(date(2012, 6, 1)) == "June 2012"
        assert parser.format_date_by_month_name_and_year(None) is None

    def test_elapsed_time_counts_both_ends(self):
        assert parser.print_total_time_of_period_which_has_elapsed(date(2012, 1, 1), date(2012, 1, 31)) == "1 month"
        assert parser.print_total_time_of_period_which_has_elapsed(date(2012, 1, 1), date(2012, 12, 31)) == "1 year"
        assert parser.print_total_time_of_period_which_has_elapsed(date(2010, 3, 1), date(2012, 5, 31)) == "2 years 3 months"

    def test_open_period_runs_until_today(self):
        elapsed = parser.print_total_time_of_period_which_has_elapsed(
            date(2013, 1, 1), None, today=date(2013, 2, 15)
        )
        assert elapsed == "2 months"

    def test_missing_start_prints_nothing(self):
        assert parser.print_total_time_of_period_which_has_elapsed(None) == ""


class TestMonthHelper:

    def test_twelve_months_numbered_from_one(self):
        months = MonthHelper().get_months()
        assert len(months) == 12
        assert months[0] == {"id": 1, "name": "January"}
        assert months[-1] == {"id": 12, "name": "December"}
