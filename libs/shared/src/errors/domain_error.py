"""Domain Error Base Class"""


class DomainError(Exception):
    """Base class for business rule violations

    Carries a machine-readable code next to the human message,
    the CLI prints the message and keeps running.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
