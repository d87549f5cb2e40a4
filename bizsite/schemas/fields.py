"""Shared building blocks for content schemas: base model, patterns, reusable field checks."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Lowercase words joined by single hyphens: "web-design", "austin-tx"
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
# 24-hour HH:MM from 00:00 to 23:59
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

# Schema.org day names, in week order
DAYS_OF_WEEK = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class ContentModel(BaseModel):
    """Base for content records.

    Source files use camelCase keys; attributes are snake_case. Types are
    strict (no string-to-number coercion), unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
    )


def required(message: str) -> AfterValidator:
    """Reject empty strings with ``message``."""

    def check(value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("required", message)
        return value

    return AfterValidator(check)


def matches(pattern: re.Pattern, message: str) -> AfterValidator:
    """Reject strings not matching ``pattern`` with ``message``."""

    def check(value: str) -> str:
        if not pattern.match(value):
            raise PydanticCustomError("pattern", message)
        return value

    return AfterValidator(check)


def contains(token: str, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if token not in value:
            raise PydanticCustomError("placeholder", message)
        return value

    return AfterValidator(check)


def non_empty_list(message: str) -> AfterValidator:
    def check(value: list) -> list:
        if len(value) < 1:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def is_url(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise PydanticCustomError("url", "Invalid url")
    return value


def validate_slug(
    required_message: str = "Slug is required",
    message: str = "Slug must be lowercase with hyphens only",
) -> AfterValidator:
    """Non-empty and matching SLUG_PATTERN.

    An empty slug fails both rules, so the required error carries the
    pattern message under ``also``; collect_issues reports both.
    """

    def check(value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("required", required_message, {"also": message})
        if not SLUG_PATTERN.match(value):
            raise PydanticCustomError("pattern", message)
        return value

    return AfterValidator(check)


def whole_number(value):
    # JSON "1.0" arrives as a float; accept it as an integer, keep strings strict
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def non_negative(message: str) -> AfterValidator:
    def check(value: int) -> int:
        if value < 0:
            raise PydanticCustomError("greater_than_equal", message)
        return value

    return AfterValidator(check)
