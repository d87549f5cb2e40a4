"""Services data schema.

Validates ``content/services/services.json`` at build time and provides the
lookups used by the service listing and detail pages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BeforeValidator, TypeAdapter, ValidationError

from bizsite.config import SERVICES_JSON
from bizsite.loaders.data_files import read_json
from bizsite.schemas.fields import (
    ContentModel,
    non_empty_list,
    non_negative,
    required,
    validate_slug,
    whole_number,
)
from bizsite.utils.text import locale_sort_key
from bizsite.validation.errors import ServicesValidationError
from bizsite.validation.issues import collect_issues, find_duplicates, format_issues


class ServiceFeature(ContentModel):
    title: Annotated[str, required("Feature title is required")]
    description: Annotated[str, required("Feature description is required")]


class ServiceCTA(ContentModel):
    text: Annotated[str, required("CTA text is required")]
    link: Annotated[str, required("CTA link is required")]


class Service(ContentModel):
    slug: Annotated[str, validate_slug()]
    title: Annotated[str, required("Title is required")]
    description: Annotated[str, required("Description is required")]
    long_description: Annotated[str, required("Long description is required")]
    icon: Annotated[str, required("Icon key is required")]
    features: Annotated[list[ServiceFeature], non_empty_list("At least one feature is required")]
    cta: ServiceCTA
    order: Annotated[
        int, BeforeValidator(whole_number), non_negative("Order must be a non-negative integer")
    ]


ServicesData = TypeAdapter(list[Service])


def validate_services(data) -> list[Service]:
    """Validate raw services data and check that every slug is unique.

    Raises ServicesValidationError listing every schema problem, or the
    duplicated slugs once the schema passes.
    """
    try:
        services = ServicesData.validate_python(data)
    except ValidationError as e:
        issues = collect_issues(e)
        raise ServicesValidationError(
            f"Schema validation failed:\n{format_issues(issues)}", issues
        ) from e

    duplicates = find_duplicates([service.slug for service in services])
    if duplicates:
        quoted = ", ".join(f'"{slug}"' for slug in duplicates)
        raise ServicesValidationError(
            f"Duplicate slugs found: {quoted}. Each service must have a unique slug.",
            [f"{slug}: duplicate slug" for slug in duplicates],
        )

    return services


def load_services(path: Path = SERVICES_JSON) -> list[Service]:
    """Read and validate the services file."""
    services = validate_services(read_json(path, ServicesValidationError))
    print(f"  Loaded {len(services)} services from {path.name}")
    return services


def get_sorted_services(services: list[Service]) -> list[Service]:
    """Services by ``order`` ascending, ties broken alphabetically by title."""
    return sorted(services, key=lambda s: (s.order, locale_sort_key(s.title)))


def get_service_by_slug(services: list[Service], slug: str) -> Service | None:
    for service in services:
        if service.slug == slug:
            return service
    return None


def get_all_service_slugs(services: list[Service]) -> list[str]:
    return [service.slug for service in services]
