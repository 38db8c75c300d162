"""Domain error taxonomy shared by every bounded context.

Each concrete error subclasses exactly one category below.  The category
is the classification: the API layer maps it to an HTTP status and never
inspects messages or codes to decide.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base class for failures detected by the domain or service layer.

    ``code`` is the stable machine-readable identifier rendered to clients;
    ``message`` is the human-readable explanation.
    """

    code: str = "DOMAIN_ERROR"
    default_message: str = "The request could not be processed."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(DomainError):
    """The request violates a structural constraint."""


class MalformedPayload(DomainError):
    """The payload could not be read into the expected shape at all."""


class EntityNotFound(DomainError):
    """A referenced entity does not exist."""


class BusinessConflict(DomainError):
    """The request conflicts with the current state of the system."""
