#!/usr/bin/env python3
"""
Check the packaged failure message catalog for consistency.

Loads the catalog (plus an optional overlay file) and reports:
    - Failure codes without a catalog entry
    - Entries without default-language copy
    - Entries whose languages disagree on placeholders

Exit code: 0 if the catalog is consistent, 1 otherwise.

Usage:
    python scripts/check_catalog.py [overlay.yaml]
"""

import sys

from checkchain.localization import find_catalog_issues, load_catalog


def main() -> int:
    """Print catalog issues and return the exit code."""
    overlay = sys.argv[1] if len(sys.argv) > 1 else None
    catalog = load_catalog(overlay=overlay)

    print("=" * 60)
    print(f"Failure message catalog v{catalog.version}")
    print(f"  Codes:              {len(catalog.messages)}")
    print(f"  Preferred language: {catalog.settings.preferred_language}")
    print(f"  Default language:   {catalog.settings.default_language}")
    print("=" * 60)

    issues = find_catalog_issues(catalog)
    if not issues:
        print("✅ Catalog is consistent")
        return 0

    print(f"❌ {len(issues)} issue(s) found:")
    for issue in issues:
        print(f"   - {issue}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
