"""Content toolkit for the Acme Services business site.

Package structure:
    bizsite/config.py         paths, environment overrides, build settings, icon registry
    bizsite/schemas/          content schemas and validators (site, services, locations, homepage, pages, blog, team)
    bizsite/loaders/          file loading (JSON/YAML data files, Markdown collections with front matter)
    bizsite/utils/            reading time, related posts, text helpers
    bizsite/feeds/            RSS feed and XML sitemap
    bizsite/validation/       error types, issue formatting, content audit and report
    bizsite/pipeline/         build pipeline (load, validate, write artifacts)
"""
