"""Exception types raised when site content fails validation."""

from __future__ import annotations


class ContentValidationError(Exception):
    """Base class for every content validation failure.

    ``issues`` holds the individual problems (``"path: message"``) so callers
    can report them without re-parsing the message.
    """

    prefix = "Content validation error"

    def __init__(self, message: str, issues: list[str] | None = None):
        self.issues = list(issues or [])
        # A message that starts with the issue list goes on the next line
        separator = ":" if message.startswith("\n") else ": "
        super().__init__(f"{self.prefix}{separator}{message}")


class ConfigValidationError(ContentValidationError):
    prefix = "Site config validation error"


class ServicesValidationError(ContentValidationError):
    prefix = "Services data validation error"


class LocationsValidationError(ContentValidationError):
    prefix = "Locations data validation error"


class HomepageValidationError(ContentValidationError):
    prefix = "Homepage data validation failed"


class PagesValidationError(ContentValidationError):
    prefix = "Pages data validation failed"


class CollectionValidationError(ContentValidationError):
    def __init__(self, collection: str, message: str, issues: list[str] | None = None):
        self.collection = collection
        self.prefix = f"{collection.capitalize()} collection validation failed"
        super().__init__(message, issues)
