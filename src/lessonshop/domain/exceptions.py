"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly. Each subclass carries a
stable ``code`` that outer layers map to a status or message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DomainError"


class InvalidPayload(DomainException):
    """Client input is malformed or violates a business rule."""

    code = "InvalidPayload"


class InvalidIdentifier(DomainException):
    """An identity string is not a well-formed lesson ID."""

    code = "InvalidIdentifier"


class InvalidCapacity(DomainException):
    """A capacity value would be negative or is not an integer."""

    code = "InvalidCapacity"


class NotFound(DomainException):
    """A requested entity does not exist."""

    code = "NotFound"


class LessonNotFound(NotFound):
    """An order references a lesson that does not exist."""

    code = "LessonNotFound"


class InsufficientCapacity(DomainException):
    """A lesson does not have enough spaces left for a reservation."""

    code = "InsufficientCapacity"


class StoreUnavailable(DomainException):
    """The document store could not complete an operation."""

    code = "StoreUnavailable"
