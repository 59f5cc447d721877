"""Domain exceptions raised by services and helpers.

Exception handlers in main.py translate them into the standard
error envelope: {"error": {"code": "...", "message": "..."}}.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class InvalidPageSizeError(DomainError):
    """Raised when a page is requested with a size below 1."""

    def __init__(self, page_size: int) -> None:
        self.page_size = page_size
        super().__init__(f"page size must be at least 1, got {page_size}")
