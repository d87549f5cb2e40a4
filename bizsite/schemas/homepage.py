"""Homepage data schema: hero, features, stats, testimonials, CTA, FAQ."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

from pydantic import ValidationError

from bizsite.config import HOMEPAGE_JSON
from bizsite.loaders.data_files import read_json
from bizsite.schemas.fields import ContentModel, required
from bizsite.validation.errors import HomepageValidationError
from bizsite.validation.issues import collect_issues, format_issues


class CTAButton(ContentModel):
    text: Annotated[str, required("CTA text is required")]
    link: Annotated[str, required("CTA link is required")]


class Hero(ContentModel):
    headline: Annotated[str, required("Headline is required")]
    subheadline: Annotated[str, required("Subheadline is required")]
    cta: CTAButton


class FeatureItem(ContentModel):
    icon: Annotated[str, required("Icon key is required")]
    title: Annotated[str, required("Feature title is required")]
    description: Annotated[str, required("Feature description is required")]


class StatItem(ContentModel):
    # Display string, e.g. "500+" or "99%"
    value: Annotated[str, required("Stat value is required")]
    label: Annotated[str, required("Stat label is required")]


class TestimonialItem(ContentModel):
    quote: Annotated[str, required("Quote is required")]
    name: Annotated[str, required("Name is required")]
    attribution: Optional[str] = None


class CTASection(ContentModel):
    headline: Annotated[str, required("CTA headline is required")]
    button: CTAButton


class FAQItem(ContentModel):
    question: Annotated[str, required("Question is required")]
    answer: Annotated[str, required("Answer is required")]


class Homepage(ContentModel):
    hero: Hero
    features: list[FeatureItem]
    stats: list[StatItem]
    testimonials: list[TestimonialItem]
    cta: CTASection
    faq: list[FAQItem]
    show_contact: bool


def validate_homepage(data) -> Homepage:
    try:
        return Homepage.model_validate(data)
    except ValidationError as e:
        issues = collect_issues(e)
        raise HomepageValidationError(f"\n{format_issues(issues)}", issues) from e


def load_homepage(path: Path = HOMEPAGE_JSON) -> Homepage:
    homepage = validate_homepage(read_json(path, HomepageValidationError))
    print(
        f"  Loaded homepage: {len(homepage.features)} features, "
        f"{len(homepage.testimonials)} testimonials, {len(homepage.faq)} FAQ items"
    )
    return homepage
