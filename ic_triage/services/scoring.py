"""Score-map construction.

Every catalog instrument that is clinical and administered, or that is
mandatory, is scored with its own strategy. Informational instruments and
instruments the patient was never given are absent from the map.
"""

from typing import TYPE_CHECKING

from ic_triage.catalog.models import InstrumentId
from ic_triage.catalog.registry import QuestionnaireCatalog
from ic_triage.core.exceptions import DuplicateScoreError
from ic_triage.scoring.common import QuestionnaireScore

if TYPE_CHECKING:
    from ic_triage.services.assessment import TriageSummary

ScoreMap = dict[InstrumentId, QuestionnaireScore]


def add_score(
    scores: ScoreMap,
    instrument_id: InstrumentId,
    score: QuestionnaireScore,
) -> None:
    """Insert a score, refusing to overwrite an existing one.

    Raises:
        DuplicateScoreError: If the instrument was already scored
    """
    if instrument_id in scores:
        raise DuplicateScoreError(f"Instrument {instrument_id.value} was scored twice")
    scores[instrument_id] = score


def compute_scores(summary: "TriageSummary", catalog: QuestionnaireCatalog) -> ScoreMap:
    """Score every applicable instrument, in catalog order.

    Args:
        summary: Summary whose responses and patient context are scored
        catalog: Catalog providing definitions and scoring strategies

    Returns:
        Scores keyed by instrument id
    """
    scores: ScoreMap = {}

    for definition in catalog:
        if not definition.include_in_scoring(summary):
            continue

        score = definition.score(summary.responses, summary.patient)
        if score is not None:
            add_score(scores, definition.instrument_id, score)

    return scores
