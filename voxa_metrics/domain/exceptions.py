"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PlanMismatchError(DomainException):
    """Plan supplied for a usage calculation is not the client's plan"""

    pass


class CallOwnershipError(DomainException):
    """Call records belong to a different client than the one being billed"""

    pass


class InvalidPeriodError(DomainException):
    """Reporting period ends before it starts"""

    pass
