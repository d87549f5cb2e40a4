from datetime import datetime, timezone
from pathlib import Path

import pytest

from bizsite.loaders.collections import BlogPost, TeamMember
from bizsite.schemas.collections import BlogPostData, TeamMemberData

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def site_data() -> dict:
    """A complete, valid site config as it would be read from site.yaml."""
    return {
        "name": "Acme Services",
        "tagline": "Quality Solutions",
        "description": "Professional business solutions.",
        "logo": "/images/logo.svg",
        "phone": "(555) 123-4567",
        "address": {"street": "123 Main St", "city": "Austin", "state": "TX", "zip": "78701"},
        "social": {"facebook": "https://facebook.com/acme"},
        "seo": {
            "titleTemplate": "%s | Acme Services",
            "defaultDescription": "Business solutions.",
            "siteUrl": "https://acme.example.com",
        },
        "operatingHours": [
            {"dayOfWeek": "Monday", "open": "09:00", "close": "17:00"},
        ],
        "footerNav": [{"text": "Privacy Policy", "link": "/privacy"}],
    }


@pytest.fixture
def make_post():
    """Factory for in-memory blog posts."""

    def _make(
        post_id,
        tags=(),
        categories=(),
        pub_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        author="jane-doe",
        draft=False,
        title=None,
        description="A post.",
        body="Some words here.",
    ):
        data = BlogPostData.model_validate({
            "title": title or post_id.replace("-", " ").title(),
            "description": description,
            "pubDate": pub_date,
            "author": author,
            "tags": list(tags),
            "categories": list(categories),
            "draft": draft,
        })
        return BlogPost(id=post_id, data=data, body=body, path=Path(f"{post_id}.md"))

    return _make


@pytest.fixture
def make_member():
    def _make(member_id, name="Jane Doe"):
        data = TeamMemberData.model_validate({
            "name": name,
            "slug": member_id,
            "bio": "Bio.",
            "avatar": f"/images/{member_id}.jpg",
            "role": "Consultant",
        })
        return TeamMember(id=member_id, data=data, body="", path=Path(f"{member_id}.md"))

    return _make


@pytest.fixture
def demo_content():
    """The demo content shipped with the repository, fully validated."""
    from bizsite.pipeline.build import load_site_content

    return load_site_content(REPO_ROOT / "content", REPO_ROOT / "data", site_url="")
