"""
Inquiry Interview - Question Selector.

Picks the next question of the current phase from the transcript and the
features of the latest answer:

1. A follow-up rule of the current question that matches the latest answer
   wins outright.
2. A shallow (surface/moderate) latest answer is steered towards the first
   unused deep or profound question.
3. Otherwise the first unused question in catalog order.
4. Nothing left: Exhausted.
"""

from __future__ import annotations

import logging
from typing import Sequence

from inquiry_interview.core.domain.models import (
    DepthTier,
    Exhausted,
    FollowUpRule,
    Phase,
    QuestionSpec,
    ResponseFeatures,
    Turn,
)
from inquiry_interview.core.vocabulary import contains_any


logger = logging.getLogger(__name__)

DEEP_TIERS = (DepthTier.DEEP, DepthTier.PROFOUND)


class QuestionSelector:
    """Stateless next-question policy."""

    def select(
        self,
        phase_questions: Sequence[QuestionSpec],
        transcript: Sequence[Turn],
        latest_features: ResponseFeatures,
        phase: Phase | None = None,
    ) -> QuestionSpec | Exhausted:
        """
        Choose the next question of a phase.

        Args:
            phase_questions: Catalog questions of the current phase, in order
            transcript: All turns so far, oldest first
            latest_features: Analysis of the latest response
            phase: Phase the questions belong to (reported on exhaustion)

        Returns:
            The next QuestionSpec, or Exhausted if every question was asked
        """
        asked = {turn.question_id for turn in transcript}
        by_id = {q.id: q for q in phase_questions}

        # 1. Follow-up of the current question
        rule = self.follow_up_for(phase_questions, transcript)
        if rule is not None:
            logger.debug(f"Follow-up fired -> {rule.target_id}")
            return by_id[rule.target_id]

        unused = [q for q in phase_questions if q.id not in asked]
        if not unused:
            return Exhausted(phase=phase)

        # 2. Steer shallow answers towards deeper probes
        if latest_features.depth.is_shallow:
            for question in unused:
                if question.expected_depth in DEEP_TIERS:
                    return question

        # 3. Catalog order
        return unused[0]

    def follow_up_for(
        self,
        phase_questions: Sequence[QuestionSpec],
        transcript: Sequence[Turn],
    ) -> FollowUpRule | None:
        """
        First follow-up rule of the current question matching the latest answer.

        The current question is the one the latest turn answered. Rules whose
        target is not in this phase, or was already asked, are skipped so a
        question is never repeated.
        """
        if not transcript:
            return None

        latest = transcript[-1]
        by_id = {q.id: q for q in phase_questions}
        current = by_id.get(latest.question_id)
        if current is None:
            return None

        asked = {turn.question_id for turn in transcript}
        for rule in current.follow_ups:
            if rule.target_id not in by_id or rule.target_id in asked:
                continue
            if contains_any(latest.response, rule.terms):
                return rule
        return None
