"""Pages data schema: SEO metadata for listing pages and taxonomy archives."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import ValidationError

from bizsite.config import PAGES_JSON
from bizsite.loaders.data_files import read_json
from bizsite.schemas.fields import ContentModel, contains, required
from bizsite.utils.text import replace_placeholder
from bizsite.validation.errors import PagesValidationError
from bizsite.validation.issues import collect_issues, format_issues

ListingKey = Literal["blog", "services", "locations", "team"]
TaxonomyKind = Literal["tags", "categories"]


class PageMeta(ContentModel):
    title: Annotated[str, required("Title is required")]
    # Search engines truncate past ~160 characters; the content audit warns
    description: Annotated[str, required("Description is required")]


class TaxonomyTemplate(ContentModel):
    title_template: Annotated[
        str,
        required("Title template is required"),
        contains("%s", "Title template must include %s placeholder"),
    ]
    description_template: Annotated[
        str,
        required("Description template is required"),
        contains("%s", "Description template must include %s placeholder"),
    ]


class Listings(ContentModel):
    blog: PageMeta
    services: PageMeta
    locations: PageMeta
    team: PageMeta


class Taxonomies(ContentModel):
    tags: TaxonomyTemplate
    categories: TaxonomyTemplate


class Pages(ContentModel):
    listings: Listings
    taxonomies: Taxonomies


def validate_pages(data) -> Pages:
    try:
        return Pages.model_validate(data)
    except ValidationError as e:
        issues = collect_issues(e)
        raise PagesValidationError(f"\n{format_issues(issues)}", issues) from e


def load_pages(path: Path = PAGES_JSON) -> Pages:
    pages = validate_pages(read_json(path, PagesValidationError))
    print(f"  Loaded page metadata from {path.name}")
    return pages


def get_listing_meta(pages: Pages, key: ListingKey) -> PageMeta:
    return getattr(pages.listings, key)


def get_taxonomy_title(pages: Pages, kind: TaxonomyKind, term: str) -> str:
    """Archive page title for a tag or category, e.g. 'Posts tagged "seo"'."""
    return replace_placeholder(getattr(pages.taxonomies, kind).title_template, term)


def get_taxonomy_description(pages: Pages, kind: TaxonomyKind, term: str) -> str:
    return replace_placeholder(getattr(pages.taxonomies, kind).description_template, term)
