"""Locations data schema.

Validates ``content/locations/locations.json`` at build time: required
fields, coordinate ranges, operating-hours format and unique slugs. Also
formats operating hours for Schema.org markup and for display.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import Field, TypeAdapter, ValidationError

from bizsite.config import LOCATIONS_JSON
from bizsite.loaders.data_files import read_json
from bizsite.schemas.fields import (
    TIME_PATTERN,
    ContentModel,
    matches,
    non_empty_list,
    required,
    validate_slug,
)
from bizsite.utils.text import locale_sort_key
from bizsite.validation.errors import LocationsValidationError
from bizsite.validation.issues import collect_issues, find_duplicates, format_issues

DayOfWeek = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

DAY_ABBREVIATIONS = {
    "Monday": "Mo",
    "Tuesday": "Tu",
    "Wednesday": "We",
    "Thursday": "Th",
    "Friday": "Fr",
    "Saturday": "Sa",
    "Sunday": "Su",
}


class Coordinates(ContentModel):
    lat: Annotated[float, Field(ge=-90, le=90)]
    lng: Annotated[float, Field(ge=-180, le=180)]


class OperatingHoursEntry(ContentModel):
    day_of_week: DayOfWeek
    open: Annotated[str, matches(TIME_PATTERN, "Open time must be in HH:MM format (00:00-23:59)")]
    close: Annotated[str, matches(TIME_PATTERN, "Close time must be in HH:MM format (00:00-23:59)")]


class Location(ContentModel):
    slug: Annotated[str, validate_slug()]
    # Accents and special characters are kept as written ("San José")
    city: Annotated[str, required("City is required")]
    state: Annotated[str, required("State is required")]
    address: Annotated[str, required("Address is required")]
    # Falls back to the site-wide phone number when missing
    phone: Optional[str] = None
    description: Annotated[str, required("Description is required")]
    long_description: Annotated[str, required("Long description is required")]
    coordinates: Optional[Coordinates] = None
    service_area_keywords: Annotated[
        list[Annotated[str, required("Service area keyword cannot be empty")]],
        non_empty_list("At least one service area keyword is required"),
    ]
    operating_hours: Optional[list[OperatingHoursEntry]] = None


LocationsData = TypeAdapter(list[Location])


def validate_locations(data) -> list[Location]:
    """Validate raw locations data and check that every slug is unique."""
    try:
        locations = LocationsData.validate_python(data)
    except ValidationError as e:
        issues = collect_issues(e)
        raise LocationsValidationError(
            f"Schema validation failed:\n{format_issues(issues)}", issues
        ) from e

    duplicates = find_duplicates([location.slug for location in locations])
    if duplicates:
        quoted = ", ".join(f'"{slug}"' for slug in duplicates)
        raise LocationsValidationError(
            f"Duplicate slugs found: {quoted}. Each location must have a unique slug.",
            [f"{slug}: duplicate slug" for slug in duplicates],
        )

    return locations


def load_locations(path: Path = LOCATIONS_JSON) -> list[Location]:
    locations = validate_locations(read_json(path, LocationsValidationError))
    print(f"  Loaded {len(locations)} locations from {path.name}")
    return locations


def get_sorted_locations(locations: list[Location]) -> list[Location]:
    """Locations alphabetically by city, then state."""
    return sorted(
        locations, key=lambda loc: (locale_sort_key(loc.city), locale_sort_key(loc.state))
    )


def get_location_by_slug(locations: list[Location], slug: str) -> Location | None:
    for location in locations:
        if location.slug == slug:
            return location
    return None


def get_all_location_slugs(locations: list[Location]) -> list[str]:
    return [location.slug for location in locations]


def format_schema_org_hours(hours: list[OperatingHoursEntry]) -> list[str]:
    """Format operating hours as Schema.org ``openingHours`` strings.

    Days sharing the same open/close times are grouped (in first-seen order)
    and rendered as a range from the first to the last day of the group:

        ["Mo-Fr 09:00-17:00", "Sa 10:00-14:00"]
    """
    groups: list[dict] = []
    for entry in hours:
        abbr = DAY_ABBREVIATIONS[entry.day_of_week]
        existing = next(
            (g for g in groups if g["open"] == entry.open and g["close"] == entry.close), None
        )
        if existing:
            existing["days"].append(abbr)
        else:
            groups.append({"days": [abbr], "open": entry.open, "close": entry.close})

    formatted = []
    for group in groups:
        days = group["days"]
        days_str = f"{days[0]}-{days[-1]}" if len(days) > 1 else days[0]
        formatted.append(f"{days_str} {group['open']}-{group['close']}")
    return formatted


def _format_time_12h(time_24: str) -> str:
    hours, minutes = (int(part) for part in time_24.split(":"))
    period = "PM" if hours >= 12 else "AM"
    hours_12 = hours % 12 or 12
    return f"{hours_12}:{minutes:02d} {period}"


def format_display_hours(hours: list[OperatingHoursEntry]) -> list[str]:
    """Human-readable hours, e.g. ``"Monday: 9:00 AM - 5:00 PM"``."""
    return [
        f"{entry.day_of_week}: {_format_time_12h(entry.open)} - {_format_time_12h(entry.close)}"
        for entry in hours
    ]
