"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Calculator input is structurally invalid (negative amount, non-finite number, ...)"""

    pass


class RateNotFoundError(DomainException):
    """Posted mortgage rate does not exist"""

    pass
