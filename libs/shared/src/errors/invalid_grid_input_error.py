"""Invalid Grid Input Error"""

from typing import Any

from libs.shared.src.errors.domain_error import DomainError


class InvalidGridInputError(DomainError):
    """Raised when a settings value cannot be converted to the field's type"""

    def __init__(self, field: str, value: Any) -> None:
        message = f"Invalid value {value!r} for grid input '{field}'"
        super().__init__(message, code="INVALID_GRID_INPUT")
        self.field = field
        self.value = value
