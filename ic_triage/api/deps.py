"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends

from ic_triage.catalog.registry import QuestionnaireCatalog, get_catalog


def get_current_catalog() -> QuestionnaireCatalog:
    """Get the configured instrument catalog."""
    return get_catalog()


# Type alias for catalog dependency
Catalog = Annotated[QuestionnaireCatalog, Depends(get_current_catalog)]
