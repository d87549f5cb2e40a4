#!/usr/bin/env python3
"""Validate and audit site content without building.

Exits 1 when any content source fails its schema or the audit finds issues.

Usage:
    python check_content.py
    python check_content.py --content-dir content --data-dir data
    python check_content.py --json report.json    # Also save audit results
"""

import argparse
import json
import sys
from pathlib import Path

from bizsite.config import CONTENT_DIR, DATA_DIR
from bizsite.pipeline import load_site_content
from bizsite.validation import ContentValidationError
from bizsite.validation.checks import audit_content
from bizsite.validation.report import format_content_report


def main():
    parser = argparse.ArgumentParser(description="Validate and audit site content")
    parser.add_argument("--content-dir", type=Path, default=CONTENT_DIR, help="Content directory")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="Data directory")
    parser.add_argument("--json", type=Path, default=None, help="Write audit results to this file")
    args = parser.parse_args()

    try:
        content = load_site_content(args.content_dir, args.data_dir)
    except ContentValidationError as e:
        print(f"\nERROR: {e}")
        sys.exit(1)

    results = audit_content(content)
    print(f"\n{format_content_report(results, content.site.name)}")

    if args.json:
        with open(args.json, "w") as f:
            json.dump(results, f, indent=2, default=str)
        print(f"\nAudit saved to {args.json}")

    if not results["pass"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
