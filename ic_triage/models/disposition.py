"""Acuity, care level and disposition workflow enumerations."""

from enum import Enum, IntEnum


class AcuityCategory(IntEnum):
    """Per-instrument or overall severity classification.

    Ordered so that ``max()`` over a collection yields the most severe.
    """

    LOW = 0
    MEDIUM = 1
    HIGH = 2


class DispositionOutcomeCare(IntEnum):
    """Recommended intensity of care, least to most intensive."""

    SUB_CLINICAL = 0
    SELF_DIRECTED = 1
    IC = 2  # Integrated care, managed by the MHIC
    SPECIALTY = 3  # Referral out to specialty care


class DispositionFlag(str, Enum):
    """Next-action workflow state for a disposition.

    The triage engine only emits one of these alongside a diagnosis;
    transitions between them are owned by case management.
    """

    NOT_YET_SCREENED = "not_yet_screened"
    PATIENT_CREATED_NOT_YET_LOGGED_IN = "patient_created_not_yet_logged_in"
    ASSESSMENT_STARTED_NO_DISPOSITION_YET = "assessment_started_no_disposition_yet"
    NEEDS_INITIAL_SAFETY_PLANNING = "needs_initial_safety_planning"
    NEEDS_FURTHER_ASSESSMENT_WITH_MHIC = "needs_further_assessment_with_mhic"
    COORDINATE_REFERRAL = "coordinate_referral"
    CONFIRM_REFERRAL_CONNECTION = "confirm_referral_connection"
    AWAITING_IC_SCHEDULING = "awaiting_ic_scheduling"
    AWAITING_FIRST_IC_APPOINTMENT = "awaiting_first_ic_appointment"
    IN_IC_TREATMENT = "in_ic_treatment"
    CONNECTED_TO_CARE = "connected_to_care"
    OPTIONAL_REFERRAL = "optional_referral"
    GRADUATED = "graduated"
    LOST_CONTACT_WITH_PATIENT = "lost_contact_with_patient"


class AssessmentStatus(str, Enum):
    """Assessment record lifecycle.

    Owned by the assessment collaborator; scoring does not depend on it.
    """

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    STALE = "stale"  # Timed out before completion
