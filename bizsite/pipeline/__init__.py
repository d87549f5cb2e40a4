"""Build pipeline: load, validate and write site artifacts."""

from bizsite.pipeline.build import SiteContent, build_site, load_site_content

__all__ = ["SiteContent", "build_site", "load_site_content"]
