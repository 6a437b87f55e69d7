"""
Catalog Check - Consistency Between Codes and Catalog Copy.

Reports problems a catalog edit can introduce without breaking load-time
validation:
    - A failure code with no catalog entry (it would render as fallback)
    - An entry with no title or template in the default language
    - Placeholders that differ between the languages of one entry
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from checkchain.failure.codes import FailureCode
from checkchain.localization.formatting import extract_template_variables
from checkchain.localization.models import MessageCatalog


@dataclass(frozen=True)
class CatalogIssue:
    """One consistency problem in a catalog."""

    code: str
    problem: str

    def __str__(self) -> str:
        return f"{self.code}: {self.problem}"


def find_catalog_issues(
    catalog: MessageCatalog,
    codes: Optional[Iterable[Enum]] = None,
) -> List[CatalogIssue]:
    """
    Check a catalog against a set of codes.

    Args:
        catalog: Catalog to check
        codes: Codes that must be catalogued (all FailureCode members by default)

    Returns:
        Issues found, empty if the catalog is consistent
    """
    required: Iterable[Enum] = codes if codes is not None else list(FailureCode)
    default_language = catalog.settings.default_language
    issues: List[CatalogIssue] = []

    for code in required:
        if code.value not in catalog.messages:
            issues.append(CatalogIssue(code.value, "no catalog entry"))

    for code, entry in sorted(catalog.messages.items()):
        if not entry.title.get(default_language):
            issues.append(CatalogIssue(code, f"no '{default_language}' title"))
        if not entry.template.get(default_language):
            issues.append(CatalogIssue(code, f"no '{default_language}' template"))

        placeholder_sets = {
            language: {v.name for v in extract_template_variables(text)}
            for language, text in entry.template.items()
        }
        if len({frozenset(names) for names in placeholder_sets.values()}) > 1:
            described = ", ".join(
                f"{language}={sorted(names)}"
                for language, names in sorted(placeholder_sets.items())
            )
            issues.append(CatalogIssue(code, f"placeholders differ: {described}"))

    return issues
