"""
Inquiry Interview - Phase Controller.

State machine over the four interview phases:

    opening -> exploration -> metacognition -> future

Transitions only ever go forward, one step at a time; ``future`` is
terminal. The controller holds no session state: every verdict is computed
from the transcript it is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from inquiry_interview.app.analyzer import ResponseAnalyzer
from inquiry_interview.core.config import Settings, get_settings
from inquiry_interview.core.domain.models import Phase, PhaseExitCondition, Turn
from inquiry_interview.core.vocabulary import CORE_EXPLORATION_ELEMENTS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseThresholds:
    """Empirically tuned transition thresholds."""

    exploration_min_turns: int = 7
    exploration_ratio: float = 0.9
    default_ratio: float = 0.8
    core_elements: tuple[str, ...] = CORE_EXPLORATION_ELEMENTS
    core_elements_required: int = 3

    @classmethod
    def from_settings(cls, settings: Settings) -> "PhaseThresholds":
        return cls(
            exploration_min_turns=settings.EXPLORATION_MIN_TURNS,
            exploration_ratio=settings.EXPLORATION_SATISFACTION_RATIO,
            default_ratio=settings.DEFAULT_SATISFACTION_RATIO,
            core_elements_required=settings.EXPLORATION_CORE_ELEMENTS_REQUIRED,
        )

    def ratio_for(self, phase: Phase) -> float:
        if phase == Phase.EXPLORATION:
            return self.exploration_ratio
        return self.default_ratio


class PhaseController:
    """
    Decides whether a session stays in its phase or moves to the next one.

    Usage:
        controller = PhaseController()
        next_phase = controller.maybe_advance(Phase.OPENING, transcript, exit_condition)
        if next_phase:
            ...  # advance
    """

    def __init__(
        self,
        thresholds: PhaseThresholds | None = None,
        analyzer: ResponseAnalyzer | None = None,
    ):
        self._thresholds = thresholds or PhaseThresholds.from_settings(get_settings())
        self._analyzer = analyzer or ResponseAnalyzer()

    @property
    def thresholds(self) -> PhaseThresholds:
        return self._thresholds

    def maybe_advance(
        self,
        current_phase: Phase,
        transcript: Sequence[Turn],
        exit_condition: PhaseExitCondition,
    ) -> Phase | None:
        """
        Check the exit condition of ``current_phase``.

        Args:
            current_phase: Phase the session is in
            transcript: All turns so far
            exit_condition: Exit condition of the current phase

        Returns:
            The next phase if every check passes, otherwise None
        """
        if current_phase.is_terminal:
            return None

        answered = [turn for turn in transcript if turn.is_answered]
        count = len(answered)

        # 1-2. Enough turns
        if count < exit_condition.min_turns:
            return None
        if current_phase == Phase.EXPLORATION and count < self._thresholds.exploration_min_turns:
            return None

        # 3-4. Required elements across everything the candidate said
        combined = " ".join(turn.response for turn in answered)
        present = set(self._analyzer.elements_in(combined))

        ratio = self.satisfaction_ratio(exit_condition.required_elements, present)
        threshold = self._thresholds.ratio_for(current_phase)
        if ratio < threshold:
            logger.debug(
                f"Staying in {current_phase.value}: ratio {ratio:.2f} < {threshold:.2f}"
            )
            return None

        # 5. Exploration also needs most of the core narrative elements
        if current_phase == Phase.EXPLORATION:
            core_hits = sum(1 for e in self._thresholds.core_elements if e in present)
            if core_hits < self._thresholds.core_elements_required:
                logger.debug(f"Staying in exploration: {core_hits} core elements")
                return None

        next_phase = current_phase.next
        logger.info(f"➡️ Phase transition: {current_phase.value} -> {next_phase.value}")
        return next_phase

    @staticmethod
    def satisfaction_ratio(required: Sequence[str], present: set[str]) -> float:
        """Share of required elements present; 1.0 when nothing is required."""
        if not required:
            return 1.0
        matched = sum(1 for element in required if element in present)
        return matched / len(required)
