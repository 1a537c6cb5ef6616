"""
Unit tests for the PhaseController module.

Tests the forward-only phase state machine and its exit conditions.
"""

import pytest

from inquiry_interview.app.phases import PhaseController, PhaseThresholds
from inquiry_interview.core.config import Settings
from inquiry_interview.core.domain.models import (
    Category,
    Phase,
    PhaseExitCondition,
    Turn,
)


# Covers activity, trigger, difficulty, solution and learning, plus the
# core elements difficulty, continuity, discovery and process
RICH_EXPLORATION = (
    Turn("sports_1", "I started playing soccer in my club because my friend invited me."),
    Turn("sports_2", "It was hard to keep the ball, so I tried a new method."),
    Turn("sports_3", "I noticed that practicing every day made me better. I learned that teamwork matters."),
)

# Covers every required element but only one core element (difficulty)
THIN_EXPLORATION = (
    Turn("sports_1", "I started the project because I was curious."),
    Turn("sports_2", "It was difficult, so I tried another approach."),
    Turn("sports_3", "I learned a lot."),
)


class TestPhaseController:
    """Test suite for PhaseController class."""

    @pytest.fixture
    def opening_exit(self, catalog):
        return catalog.exit_condition(Category.COMPETITIVE_SPORTS, Phase.OPENING)

    @pytest.fixture
    def exploration_exit(self, catalog):
        return catalog.exit_condition(Category.COMPETITIVE_SPORTS, Phase.EXPLORATION)

    # =========================================================================
    # Opening Tests
    # =========================================================================

    def test_opening_advances_to_exploration(self, controller, opening_transcript, opening_exit):
        result = controller.maybe_advance(Phase.OPENING, opening_transcript, opening_exit)

        assert result == Phase.EXPLORATION

    def test_opening_needs_three_turns(self, controller, opening_transcript, opening_exit):
        result = controller.maybe_advance(Phase.OPENING, opening_transcript[:2], opening_exit)

        assert result is None

    def test_opening_needs_transport_and_time(self, controller, opening_exit):
        transcript = (
            Turn("opening_1", "My name is Hana."),
            Turn("opening_2", "I came with my mother."),
            Turn("opening_3", "It took about an hour."),
        )

        assert controller.maybe_advance(Phase.OPENING, transcript, opening_exit) is None

    def test_unanswered_turns_do_not_count(self, controller, opening_transcript, opening_exit):
        transcript = opening_transcript[:2] + (Turn("opening_3", "   "),)

        assert controller.maybe_advance(Phase.OPENING, transcript, opening_exit) is None

    # =========================================================================
    # Exploration Tests
    # =========================================================================

    def test_exploration_stays_at_six_turns(self, controller, opening_transcript, exploration_exit):
        transcript = opening_transcript + RICH_EXPLORATION
        assert len(transcript) == 6

        assert controller.maybe_advance(Phase.EXPLORATION, transcript, exploration_exit) is None

    def test_exploration_advances_at_seven_turns(self, controller, opening_transcript, exploration_exit):
        transcript = opening_transcript + RICH_EXPLORATION + (Turn("sports_4", "Yes."),)

        result = controller.maybe_advance(Phase.EXPLORATION, transcript, exploration_exit)

        assert result == Phase.METACOGNITION

    def test_exploration_needs_core_elements(self, controller, opening_transcript, exploration_exit):
        transcript = opening_transcript + THIN_EXPLORATION + (Turn("sports_4", "Yes."),)

        assert controller.maybe_advance(Phase.EXPLORATION, transcript, exploration_exit) is None

    def test_exploration_floor_applies_to_lenient_exit_condition(self, controller, opening_transcript):
        lenient = PhaseExitCondition(min_turns=1)
        transcript = opening_transcript + RICH_EXPLORATION

        assert controller.maybe_advance(Phase.EXPLORATION, transcript, lenient) is None

    def test_exploration_min_turns_from_settings(self, opening_transcript, exploration_exit):
        thresholds = PhaseThresholds.from_settings(Settings(EXPLORATION_MIN_TURNS=9))
        controller = PhaseController(thresholds=thresholds)
        transcript = opening_transcript + RICH_EXPLORATION + (Turn("sports_4", "Yes."),)

        assert controller.maybe_advance(Phase.EXPLORATION, transcript, exploration_exit) is None

    # =========================================================================
    # State Machine Tests
    # =========================================================================

    def test_future_is_terminal(self, controller, opening_transcript):
        result = controller.maybe_advance(Phase.FUTURE, opening_transcript, PhaseExitCondition(min_turns=0))

        assert result is None

    def test_advances_one_step_at_a_time(self, controller, opening_transcript):
        """Even with nothing required, opening only moves to exploration."""
        result = controller.maybe_advance(Phase.OPENING, opening_transcript, PhaseExitCondition(min_turns=0))

        assert result == Phase.EXPLORATION

    def test_phase_order(self):
        assert Phase.OPENING.next == Phase.EXPLORATION
        assert Phase.EXPLORATION.next == Phase.METACOGNITION
        assert Phase.METACOGNITION.next == Phase.FUTURE
        assert Phase.FUTURE.next is None
        assert Phase.FUTURE.is_terminal

    # =========================================================================
    # Satisfaction Ratio Tests
    # =========================================================================

    def test_ratio_with_nothing_required(self):
        assert PhaseController.satisfaction_ratio((), set()) == 1.0

    def test_ratio_counts_present_elements(self):
        assert PhaseController.satisfaction_ratio(("time", "transport"), {"time"}) == 0.5

    def test_exploration_uses_stricter_ratio(self):
        thresholds = PhaseThresholds()

        assert thresholds.ratio_for(Phase.EXPLORATION) == 0.9
        assert thresholds.ratio_for(Phase.METACOGNITION) == 0.8
