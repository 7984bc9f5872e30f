"""YAML instrument catalog loader with integrity hashing."""

import hashlib
from pathlib import Path
from typing import Any

import yaml

from ic_triage.catalog.models import InstrumentItem
from ic_triage.core.exceptions import CatalogLoadError

# Catalog files shipped with the package
CATALOG_DIR = Path(__file__).parent / "data"


def compute_catalog_hash(content: str) -> str:
    """Compute SHA256 hash of catalog content.

    Recorded alongside each triage decision so a decision can be traced
    back to the exact instrument content that produced it.

    Args:
        content: Raw YAML content string

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def load_catalog_file(
    filename: str,
    catalog_dir: Path | None = None,
) -> tuple[dict[str, Any], str]:
    """Load a catalog YAML file and compute its hash.

    Args:
        filename: Name of the catalog file (e.g., "ic-instruments-v1.0.0.yaml")
        catalog_dir: Directory containing catalogs (defaults to the packaged data)

    Returns:
        Tuple of (parsed catalog dict, SHA256 hash)

    Raises:
        CatalogLoadError: If the file is missing or is not valid YAML
    """
    if catalog_dir is None:
        catalog_dir = CATALOG_DIR

    filepath = catalog_dir / filename

    if not filepath.exists():
        raise CatalogLoadError(f"Catalog not found: {filepath}")

    content = filepath.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CatalogLoadError(f"Invalid catalog YAML in {filepath}: {exc}") from exc

    if not isinstance(data, dict):
        raise CatalogLoadError(f"Catalog {filepath} must be a mapping")

    return data, compute_catalog_hash(content)


def build_item_pool(data: dict[str, Any]) -> dict[str, InstrumentItem]:
    """Resolve the shared item pool against the answer scales.

    Args:
        data: Parsed catalog dict

    Returns:
        Items keyed by link-id

    Raises:
        CatalogLoadError: If an item references an unknown scale
    """
    scales = data.get("scales", {})
    pool: dict[str, InstrumentItem] = {}

    for link_id, item_data in data.get("items", {}).items():
        scale_name = item_data.get("scale")
        if scale_name not in scales:
            raise CatalogLoadError(f"Item {link_id} references unknown scale '{scale_name}'")

        pool[link_id] = InstrumentItem(
            link_id=link_id,
            text=item_data.get("text", ""),
            weights={str(code): int(weight) for code, weight in scales[scale_name].items()},
            scored=item_data.get("scored", True),
        )

    return pool


def resolve_instrument_items(
    instrument: dict[str, Any],
    pool: dict[str, InstrumentItem],
) -> tuple[InstrumentItem, ...]:
    """Look up an instrument's items in the shared pool, keeping order."""
    items = []
    for link_id in instrument.get("items", []):
        if link_id not in pool:
            raise CatalogLoadError(
                f"Instrument {instrument.get('id')} references unknown item {link_id}"
            )
        items.append(pool[link_id])
    return tuple(items)
