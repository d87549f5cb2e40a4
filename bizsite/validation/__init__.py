"""Content validation: error types, issue formatting, content audit and reporting.

Only the error types are re-exported here; the schemas import them, so the
audit (which imports the schemas) is imported from its own module.
"""

from bizsite.validation.errors import (
    CollectionValidationError,
    ConfigValidationError,
    ContentValidationError,
    HomepageValidationError,
    LocationsValidationError,
    PagesValidationError,
    ServicesValidationError,
)

__all__ = [
    "ContentValidationError",
    "ConfigValidationError",
    "ServicesValidationError",
    "LocationsValidationError",
    "HomepageValidationError",
    "PagesValidationError",
    "CollectionValidationError",
]
