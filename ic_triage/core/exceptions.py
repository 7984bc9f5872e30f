"""Exceptions for catalog authoring defects.

None of these are raised for patient data problems: missing or ambiguous
answers resolve to "no answer" instead.
"""


class CatalogError(Exception):
    """Base exception for instrument catalog and rule chain defects."""

    pass


class CatalogLoadError(CatalogError):
    """Raised when the catalog file is missing or malformed."""

    pass


class DuplicateScoreError(CatalogError):
    """Raised when two scores are produced under the same instrument id."""

    pass


class IncompleteRuleChainError(CatalogError):
    """Raised when no diagnosis rule matched (missing catch-all)."""

    pass
