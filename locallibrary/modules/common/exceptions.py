"""Domain exception classes for catalog errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class AuthorNotFoundError(ResourceNotFoundError):
    """Raised when an author cannot be found."""

    def __init__(self, message: str = "Author not found"):
        super().__init__(message)


class BookNotFoundError(ResourceNotFoundError):
    """Raised when a book cannot be found."""

    def __init__(self, message: str = "Book not found"):
        super().__init__(message)


class GenreNotFoundError(ResourceNotFoundError):
    """Raised when a genre cannot be found."""

    def __init__(self, message: str = "Genre not found"):
        super().__init__(message)


class BookInstanceNotFoundError(ResourceNotFoundError):
    """Raised when a book instance cannot be found."""

    def __init__(self, message: str = "Book instance not found"):
        super().__init__(message)
