from recruiting.schemas.schemas import ErrorMessage, ValidationResponse, ValidationStatus
from recruiting.validation.binding import BindingResult
from recruiting.validation.messages import get_message


class ValidationResponseHandler:
    """Turns a BindingResult into the JSON answer of the validate-* endpoints."""

    def validation_fail(self, result: BindingResult, locale: str) -> ValidationResponse:
        return ValidationResponse(
            status=ValidationStatus.fail,
            errors=[
                ErrorMessage(field=error.field, message=get_message(error.code, locale))
                for error in result.errors
            ],
        )

    def validation_success(self) -> ValidationResponse:
        return ValidationResponse(status=ValidationStatus.success)
