"""Questionnaire catalog registry.

Pairs each instrument's YAML content with its scoring strategy and its
administration predicate. Both tables are keyed by ``InstrumentId`` and
must cover every id; a gap is a catalog authoring defect and fails at
load time rather than during triage.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from ic_triage.catalog.loader import build_item_pool, load_catalog_file, resolve_instrument_items
from ic_triage.catalog.models import (
    AdministrationPredicate,
    InstrumentId,
    InstrumentItem,
    QuestionnaireDefinition,
    Scorer,
)
from ic_triage.core.config import settings
from ic_triage.core.exceptions import CatalogLoadError
from ic_triage.models.answer_codes import AnswerCode
from ic_triage.scoring import (
    score_asrm,
    score_auditc,
    score_bpi,
    score_cssrs,
    score_dast10,
    score_gad7,
    score_isi,
    score_opioid_screen,
    score_phq9,
    score_prime5,
    score_ptsd5,
    score_trauma_screen,
)
from ic_triage.scoring.common import answered_with
from ic_triage.scoring.cssrs import PLAN_LINK_ID
from ic_triage.scoring.screens import alcohol_concern, drug_concern, pain_concern, ptsd_concern

if TYPE_CHECKING:
    from ic_triage.services.assessment import TriageSummary

logger = logging.getLogger(__name__)


def _always(summary: "TriageSummary") -> bool:
    return True


def _never(summary: "TriageSummary") -> bool:
    return False


def _suicide_plan_reported(summary: "TriageSummary") -> bool:
    return answered_with(summary.responses, PLAN_LINK_ID, AnswerCode.YES)


def _ptsd_concern(summary: "TriageSummary") -> bool:
    return ptsd_concern(summary.responses)


def _drug_concern(summary: "TriageSummary") -> bool:
    return drug_concern(summary.responses)


def _alcohol_concern(summary: "TriageSummary") -> bool:
    return alcohol_concern(summary.responses)


def _pain_concern(summary: "TriageSummary") -> bool:
    return pain_concern(summary.responses)


# Instruments absent from this table are informational and never scored
SCORERS: dict[InstrumentId, Scorer] = {
    InstrumentId.CSSRS: score_cssrs,
    InstrumentId.PHQ9: score_phq9,
    InstrumentId.GAD7: score_gad7,
    InstrumentId.ISI: score_isi,
    InstrumentId.PREPTSD: score_trauma_screen,
    InstrumentId.PTSD5: score_ptsd5,
    InstrumentId.ASRM: score_asrm,
    InstrumentId.PRIME5: score_prime5,
    InstrumentId.BPI: score_bpi,
    InstrumentId.OPIOIDSCREEN: score_opioid_screen,
    InstrumentId.DAST10: score_dast10,
    InstrumentId.AUDITC: score_auditc,
}

ADMINISTRATION: dict[InstrumentId, AdministrationPredicate] = {
    InstrumentId.INFO: _never,
    InstrumentId.SYMPTOMS: _never,
    InstrumentId.DIAGNOSES: _never,
    InstrumentId.MILITARY: _never,
    InstrumentId.CSSRS_SHORT: _always,
    InstrumentId.CSSRS: _suicide_plan_reported,
    InstrumentId.PHQ9: _always,
    InstrumentId.GAD7: _always,
    InstrumentId.ISI: _always,
    InstrumentId.PREPTSD: _always,
    InstrumentId.PTSD5: _ptsd_concern,
    InstrumentId.ASRM: _always,
    InstrumentId.PRIME5: _always,
    InstrumentId.SIMPLEPAIN: _always,
    InstrumentId.BPI: _pain_concern,
    InstrumentId.SIMPLEDRUGALCOHOL: _always,
    InstrumentId.OPIOIDSCREEN: _drug_concern,
    InstrumentId.DAST10: _drug_concern,
    InstrumentId.AUDITC: _alcohol_concern,
    InstrumentId.GOALS: _never,
}

# Scored regardless of administration: feeds crisis detection
MANDATORY = frozenset({InstrumentId.CSSRS})


@dataclass(frozen=True)
class QuestionnaireCatalog:
    """A loaded, versioned set of instrument definitions in presentation order."""

    id: str
    version: str
    description: str
    content_hash: str
    definitions: tuple[QuestionnaireDefinition, ...]

    def __iter__(self) -> Iterator[QuestionnaireDefinition]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)

    def get(self, instrument_id: InstrumentId) -> QuestionnaireDefinition:
        """Get a definition by instrument id.

        Raises:
            KeyError: If the id is not in this catalog
        """
        for definition in self.definitions:
            if definition.instrument_id == instrument_id:
                return definition
        raise KeyError(instrument_id)

    def find_by_link_id(self, link_id: str) -> Optional[QuestionnaireDefinition]:
        """Find the instrument whose questionnaire link-id matches."""
        for definition in self.definitions:
            if definition.link_id == link_id:
                return definition
        return None

    def presentation_items(self, summary: "TriageSummary") -> list[InstrumentItem]:
        """Items to present for the instruments administered so far.

        An item shared by several instruments is listed once, under the
        first instrument that uses it.
        """
        seen: set[str] = set()
        items: list[InstrumentItem] = []

        for definition in self.definitions:
            if not definition.administer(summary):
                continue
            for item in definition.items:
                if item.link_id in seen:
                    continue
                seen.add(item.link_id)
                items.append(item)

        return items


def build_catalog(data: dict[str, Any], content_hash: str) -> QuestionnaireCatalog:
    """Pair parsed catalog content with scoring and administration rules.

    Args:
        data: Parsed catalog YAML
        content_hash: SHA256 of the raw YAML

    Returns:
        QuestionnaireCatalog

    Raises:
        CatalogLoadError: On unknown, duplicate or missing instruments
    """
    missing_rules = set(InstrumentId) - set(ADMINISTRATION)
    if missing_rules:
        raise CatalogLoadError(
            f"No administration rule for: {sorted(i.value for i in missing_rules)}"
        )

    pool = build_item_pool(data)
    definitions: list[QuestionnaireDefinition] = []
    seen_ids: set[InstrumentId] = set()
    seen_link_ids: set[str] = set()

    for instrument in data.get("instruments", []):
        try:
            instrument_id = InstrumentId(instrument["id"])
        except (KeyError, ValueError) as exc:
            raise CatalogLoadError(f"Unknown instrument in catalog: {instrument}") from exc

        if instrument_id in seen_ids:
            raise CatalogLoadError(f"Instrument {instrument_id.value} is defined twice")
        if instrument["link_id"] in seen_link_ids:
            raise CatalogLoadError(f"Questionnaire link-id {instrument['link_id']} is reused")
        seen_ids.add(instrument_id)
        seen_link_ids.add(instrument["link_id"])

        definitions.append(QuestionnaireDefinition(
            instrument_id=instrument_id,
            link_id=instrument["link_id"],
            name=instrument.get("name", instrument_id.value),
            is_clinical=instrument.get("clinical", True),
            items=resolve_instrument_items(instrument, pool),
            administer=ADMINISTRATION[instrument_id],
            scorer=SCORERS.get(instrument_id),
            mandatory=instrument_id in MANDATORY,
        ))

    missing = set(InstrumentId) - seen_ids
    if missing:
        raise CatalogLoadError(
            f"Catalog is missing instruments: {sorted(i.value for i in missing)}"
        )

    return QuestionnaireCatalog(
        id=data.get("id", "unknown"),
        version=str(data.get("version", "unknown")),
        description=data.get("description", "").strip(),
        content_hash=content_hash,
        definitions=tuple(definitions),
    )


def load_catalog(filename: str, catalog_dir: Path | None = None) -> QuestionnaireCatalog:
    """Load and build a catalog from a YAML file."""
    data, content_hash = load_catalog_file(filename, catalog_dir)
    catalog = build_catalog(data, content_hash)
    logger.info(
        f"Loaded instrument catalog {catalog.id} v{catalog.version} "
        f"({len(catalog)} instruments, hash={content_hash[:12]})"
    )
    return catalog


@lru_cache
def get_catalog() -> QuestionnaireCatalog:
    """Get the configured catalog, loading it once per process."""
    catalog_dir = Path(settings.catalog_dir) if settings.catalog_dir else None
    return load_catalog(settings.catalog_filename, catalog_dir)


def get_definition(instrument_id: InstrumentId) -> QuestionnaireDefinition:
    """Get a definition from the configured catalog."""
    return get_catalog().get(instrument_id)


def find_by_link_id(link_id: str) -> Optional[QuestionnaireDefinition]:
    """Find a definition in the configured catalog by questionnaire link-id."""
    return get_catalog().find_by_link_id(link_id)
