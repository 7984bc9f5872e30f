"""Canonical coded answers referenced directly by scoring and triage logic.

Every other answer code only appears in the instrument catalog, where it
is mapped to an ordinal weight.
"""

from enum import Enum


class AnswerCode(str, Enum):
    """Answer codes with fixed meaning across instruments."""

    YES = "LA33-6"
    NO = "LA32-8"
    NOT_AT_ALL = "LA6568-5"
    NEVER = "LA6270-8"
    PC_0 = "PC_0"  # Single-question drug screen: no use in the past year
