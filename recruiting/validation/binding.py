from typing import List, NamedTuple


class FieldError(NamedTuple):
    field: str
    code: str


class BindingResult:
    """Field errors collected while binding a form and validating it."""

    def __init__(self):
        self.errors: List[FieldError] = []

    def reject_value(self, field: str, code: str) -> None:
        self.errors.append(FieldError(field, code))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_field_errors(self, field: str) -> bool:
        return any(error.field == field for error in self.errors)

    def __repr__(self):
        return f"BindingResult({self.errors!r})"
