"""Site configuration: business identity, contact, social links, SEO defaults and hours.

The config lives in ``data/site.yaml``. Shape errors (wrong types, missing
sections) are reported all at once; the business rules below then run in
order and stop at the first violation. Missing-but-recommended fields only
produce a SiteConfigWarning.
"""

from __future__ import annotations

import re
import warnings
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from bizsite.config import SITE_CONFIG_PATH, SITE_URL
from bizsite.loaders.data_files import read_yaml
from bizsite.schemas.fields import DAYS_OF_WEEK, TIME_PATTERN, ContentModel
from bizsite.utils.text import replace_placeholder
from bizsite.validation.errors import ConfigValidationError
from bizsite.validation.issues import collect_issues, format_issues

HTTPS_URL_PATTERN = re.compile(r"^https://.+")


class SiteConfigWarning(UserWarning):
    """A recommended site config field is not set."""


class SiteOperatingHours(ContentModel):
    # Day and times are checked by validate_site_config for clearer messages
    day_of_week: str
    open: str
    close: str


class Address(ContentModel):
    street: str
    city: str
    state: str
    zip: str


class SocialLinks(ContentModel):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    # Also used for X
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    youtube: Optional[str] = None
    tiktok: Optional[str] = None


class SeoConfig(ContentModel):
    # e.g. "%s | Acme Services"
    title_template: str
    default_description: str
    og_image: Optional[str] = None
    og_image_width: int = 1200
    og_image_height: int = 630
    # Full site URL including https://
    site_url: str


class FooterNavItem(ContentModel):
    text: str
    link: str


class SiteConfig(ContentModel):
    name: str
    tagline: Optional[str] = None
    description: str
    logo: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    social: Optional[SocialLinks] = None
    # Without the leading @
    twitter_handle: Optional[str] = None
    seo: SeoConfig
    gtm_id: Optional[str] = None
    operating_hours: Optional[list[SiteOperatingHours]] = None
    footer_nav: list[FooterNavItem]


def _social_links(social: SocialLinks, data) -> list[tuple[str, str | None]]:
    """(platform, url) pairs in the order the source file lists them."""
    links = social.model_dump(by_alias=True)
    raw = data.get("social") if isinstance(data, dict) else None
    written = [key for key in (raw or {}) if key in links]
    return [(key, links[key]) for key in written + [k for k in links if k not in written]]


def _check_site_config(config: SiteConfig, data) -> None:
    if not config.name.strip():
        raise ConfigValidationError("name is required and cannot be empty")

    if not config.description.strip():
        raise ConfigValidationError("description is required and cannot be empty")

    if not config.seo.site_url.strip():
        raise ConfigValidationError("seo.siteUrl is required and cannot be empty")

    if config.social:
        for platform, url in _social_links(config.social, data):
            if url and not HTTPS_URL_PATTERN.match(url):
                raise ConfigValidationError(
                    f"social.{platform} URL must start with https:// (got: {url})"
                )

    for entry in config.operating_hours or []:
        if entry.day_of_week not in DAYS_OF_WEEK:
            raise ConfigValidationError(
                f'Invalid dayOfWeek "{entry.day_of_week}". Must be one of: {", ".join(DAYS_OF_WEEK)}'
            )
        if not TIME_PATTERN.match(entry.open):
            raise ConfigValidationError(
                f'Invalid open time "{entry.open}" for {entry.day_of_week}. '
                "Must be in HH:MM format (00:00-23:59)"
            )
        if not TIME_PATTERN.match(entry.close):
            raise ConfigValidationError(
                f'Invalid close time "{entry.close}" for {entry.day_of_week}. '
                "Must be in HH:MM format (00:00-23:59)"
            )

    if not config.logo:
        warnings.warn(
            "logo is not set. Consider adding a logo for brand identity.",
            SiteConfigWarning,
            stacklevel=3,
        )
    if not config.phone:
        warnings.warn(
            "phone is not set. Consider adding a phone number for contact.",
            SiteConfigWarning,
            stacklevel=3,
        )
    if not config.address:
        warnings.warn(
            "address is not set. Consider adding an address for local SEO.",
            SiteConfigWarning,
            stacklevel=3,
        )


def validate_site_config(data) -> SiteConfig:
    """Validate raw site config data.

    Raises ConfigValidationError for the first rule violated, or for all
    shape problems at once.
    """
    try:
        config = SiteConfig.model_validate(data)
    except ValidationError as e:
        issues = collect_issues(e)
        raise ConfigValidationError(f"\n{format_issues(issues)}", issues) from e

    _check_site_config(config, data)
    return config


def load_site_config(path: Path = SITE_CONFIG_PATH, site_url: str = SITE_URL) -> SiteConfig:
    """Read ``site.yaml`` and validate it.

    A non-empty ``site_url`` (from the SITE_URL environment variable by
    default) replaces ``seo.siteUrl`` before validation.
    """
    data = read_yaml(path, ConfigValidationError)
    if site_url and isinstance(data, dict) and isinstance(data.get("seo"), dict):
        data["seo"]["siteUrl"] = site_url
    config = validate_site_config(data)
    print(f"  Loaded site config for {config.name}")
    return config


def format_page_title(config: SiteConfig, title: str) -> str:
    """Apply the SEO title template: 'About' -> 'About | Acme Services'."""
    return replace_placeholder(config.seo.title_template, title)
