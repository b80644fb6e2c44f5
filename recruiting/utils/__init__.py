from recruiting.utils.period import MONTH_NAMES, MonthHelper, PeriodParser

__all__ = ["MONTH_NAMES", "MonthHelper", "PeriodParser"]
