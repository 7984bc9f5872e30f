"""Tests for crisis detection."""

import pytest

from ic_triage.rules.crisis import crisis_signals, is_crisis

YES = "LA33-6"
NO = "LA32-8"
NOT_AT_ALL = "LA6568-5"
SEVERAL_DAYS = "LA6569-3"

LIFETIME = "/93246-7"
RECENT = "/93247-5"
PLAN = "/93267-3"
INTENT = "/93269-9"
ITEM9 = "/44260-8"


class TestCrisisSignals:
    """Tests for each crisis signal."""

    def test_no_responses_is_not_crisis(self, make_summary) -> None:
        """Test that missing items make every signal false."""
        summary = make_summary()

        assert is_crisis(summary) is False
        assert crisis_signals(summary) == []

    def test_all_no_is_not_crisis(self, make_summary) -> None:
        """Test that a fully negative screen is not a crisis."""
        summary = make_summary({
            LIFETIME: NO, RECENT: NO, PLAN: NO, INTENT: NO, ITEM9: NOT_AT_ALL,
        })

        assert is_crisis(summary) is False

    def test_lifetime_ideation(self, make_summary) -> None:
        """Test that lifetime ideation alone is a crisis."""
        summary = make_summary({LIFETIME: YES})

        assert is_crisis(summary) is True
        assert crisis_signals(summary) == ["cssrs_lifetime_ideation"]

    def test_recent_ideation(self, make_summary) -> None:
        """Test that recent ideation alone is a crisis."""
        summary = make_summary({RECENT: YES})

        assert is_crisis(summary) is True
        assert crisis_signals(summary) == ["cssrs_recent_ideation"]

    def test_plan_with_intent(self, make_summary) -> None:
        """Test that a plan with intent is a crisis."""
        summary = make_summary({PLAN: YES, INTENT: YES})

        assert is_crisis(summary) is True
        assert crisis_signals(summary) == ["cssrs_plan_with_intent"]

    @pytest.mark.parametrize("intent", [NO, None])
    def test_plan_without_intent(self, make_summary, intent) -> None:
        """Test that a plan without intent is not a crisis on its own."""
        answers = {PLAN: YES}
        if intent is not None:
            answers[INTENT] = intent

        assert is_crisis(make_summary(answers)) is False

    def test_phq9_item9(self, make_summary) -> None:
        """Test that an endorsed PHQ-9 item 9 is a crisis."""
        summary = make_summary({ITEM9: SEVERAL_DAYS})

        assert is_crisis(summary) is True
        assert crisis_signals(summary) == ["phq9_item9_positive"]

    def test_phq9_item9_not_at_all(self, make_summary) -> None:
        """Test that "Not at all" on item 9 is not a crisis."""
        assert is_crisis(make_summary({ITEM9: NOT_AT_ALL})) is False

    def test_ambiguous_answers_ignored(self, make_summary) -> None:
        """Test that two answers to an ideation item are treated as no answer."""
        assert is_crisis(make_summary({LIFETIME: [YES, NO]})) is False

    def test_multiple_signals_reported(self, make_summary) -> None:
        """Test that every firing signal is reported in order."""
        summary = make_summary({LIFETIME: YES, RECENT: YES, ITEM9: SEVERAL_DAYS})

        assert crisis_signals(summary) == [
            "cssrs_lifetime_ideation",
            "cssrs_recent_ideation",
            "phq9_item9_positive",
        ]

    def test_summary_exposes_crisis(self, make_summary) -> None:
        """Test the summary facade reports the same result."""
        summary = make_summary({PLAN: YES, INTENT: YES})

        assert summary.is_crisis is True
        assert summary.crisis_signals == ["cssrs_plan_with_intent"]
