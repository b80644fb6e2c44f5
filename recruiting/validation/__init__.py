from recruiting.validation.binding import BindingResult, FieldError
from recruiting.validation.handler import ValidationResponseHandler
from recruiting.validation.messages import get_message, resolve_locale
from recruiting.validation.validators import (
    EducationValidator,
    ExperienceValidator,
    PersonalDetailsValidator,
    UserValidator,
)

__all__ = [
    "BindingResult",
    "FieldError",
    "ValidationResponseHandler",
    "get_message",
    "resolve_locale",
    "EducationValidator",
    "ExperienceValidator",
    "PersonalDetailsValidator",
    "UserValidator",
]
