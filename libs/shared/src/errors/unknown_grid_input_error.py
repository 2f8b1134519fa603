"""Unknown Grid Input Error"""

from libs.shared.src.errors.domain_error import DomainError


class UnknownGridInputError(DomainError):
    """Raised when a settings update names a field the calculator does not have"""

    def __init__(self, field: str, allowed: list[str]) -> None:
        message = f"Unknown grid input '{field}', expected one of: {', '.join(allowed)}"
        super().__init__(message, code="UNKNOWN_GRID_INPUT")
        self.field = field
        self.allowed = allowed
